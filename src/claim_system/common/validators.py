from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _fail(field_name: str, message: str) -> ValidationError:
    return ValidationError(message, errors={field_name: message})


def require_non_empty(value: Optional[str], field_name: str, label: str, *, max_length: Optional[int] = None) -> str:
    if value is None or not str(value).strip():
        raise _fail(field_name, f"{label} is required")
    value = str(value).strip()
    if max_length is not None and len(value) > max_length:
        raise _fail(field_name, f"{label} must be at most {max_length} characters")
    return value


def require_email(value: Optional[str], field_name: str, label: str, *, max_length: Optional[int] = None) -> str:
    value = require_non_empty(value, field_name, label, max_length=max_length)
    if not _EMAIL_RE.match(value):
        raise _fail(field_name, f"{label} is not a valid e-mail address")
    return value


def optional_text(value: Optional[str], field_name: str, label: str, *, max_length: int) -> Optional[str]:
    value = (value or "").strip()
    if not value:
        return None
    if len(value) > max_length:
        raise _fail(field_name, f"{label} must be at most {max_length} characters")
    return value


def require_non_negative_decimal(
    value: Union[str, int, float, Decimal, None],
    field_name: str,
    label: str,
    *,
    places: Optional[int] = None,
) -> Decimal:
    raw = str(value).strip() if value is not None else ""
    if not raw:
        raise _fail(field_name, f"{label} is required")
    try:
        number = Decimal(raw)
    except InvalidOperation:
        raise _fail(field_name, f"{label} must be a number")
    if not number.is_finite():
        raise _fail(field_name, f"{label} must be a number")
    if number < 0:
        raise _fail(field_name, f"{label} cannot be negative")
    if places is not None and number.as_tuple().exponent < -places:
        raise _fail(field_name, f"{label} allows at most {places} decimal places")
    return number
