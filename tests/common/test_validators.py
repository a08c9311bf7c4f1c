from decimal import Decimal

import pytest

from claim_system.common.validators import (
    optional_text,
    require_email,
    require_non_empty,
    require_non_negative_decimal,
)
from claim_system.core.exceptions import ValidationError


def test_require_non_empty_strips_and_reports_field():
    assert require_non_empty("  Jane ", "lecturer_name", "Lecturer name") == "Jane"

    with pytest.raises(ValidationError) as exc:
        require_non_empty("   ", "lecturer_name", "Lecturer name")
    assert exc.value.errors == {"lecturer_name": "Lecturer name is required"}


def test_require_non_empty_enforces_max_length():
    with pytest.raises(ValidationError):
        require_non_empty("abcdef", "f", "F", max_length=5)


def test_require_email_checks_shape():
    assert require_email("jane@example.com", "e", "Email") == "jane@example.com"
    with pytest.raises(ValidationError):
        require_email("jane@", "e", "Email")


def test_optional_text_maps_blank_to_none():
    assert optional_text("  ", "notes", "Notes", max_length=10) is None
    assert optional_text(None, "notes", "Notes", max_length=10) is None


@pytest.mark.parametrize("raw, expected", [("7.5", Decimal("7.5")), (0, Decimal("0")), (Decimal("12.25"), Decimal("12.25"))])
def test_require_non_negative_decimal_parses(raw, expected):
    assert require_non_negative_decimal(raw, "h", "Hours", places=2) == expected


@pytest.mark.parametrize("raw", [None, "", "-3", "abc", "Infinity"])
def test_require_non_negative_decimal_rejects(raw):
    with pytest.raises(ValidationError):
        require_non_negative_decimal(raw, "h", "Hours")
