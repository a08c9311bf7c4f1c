from datetime import datetime
from decimal import Decimal

from claim_system.claims.model import Claim, ClaimHistory
from claim_system.core.enums import ClaimStatus


def test_total_amount_is_hours_times_rate():
    claim = Claim(lecturer_name="A", lecturer_email="a@example.com", hours_worked=Decimal("10"), hourly_rate=Decimal("150"))
    assert claim.total_amount == Decimal("1500")


def test_total_amount_with_fractional_hours_is_exact():
    claim = Claim(lecturer_name="A", lecturer_email="a@example.com", hours_worked=Decimal("7.5"), hourly_rate=Decimal("200"))
    assert claim.total_amount == Decimal("1500")


def test_total_amount_has_no_float_rounding():
    claim = Claim(lecturer_name="A", lecturer_email="a@example.com", hours_worked=0.1, hourly_rate=3)
    assert claim.total_amount == Decimal("0.3")


def test_new_claim_defaults_to_pending():
    claim = Claim(lecturer_name="Test Lecturer", lecturer_email="test@example.com", hours_worked=Decimal("5"), hourly_rate=Decimal("100"))
    assert claim.status == ClaimStatus.PENDING
    assert claim.claim_id is None
    assert claim.decided_at is None


def test_new_claim_date_submitted_is_construction_time():
    before = datetime.now()
    claim = Claim(lecturer_name="Test Lecturer", lecturer_email="test@example.com", hours_worked=Decimal("5"), hourly_rate=Decimal("100"))
    after = datetime.now()
    assert before <= claim.date_submitted <= after


def test_document_name_strips_storage_prefix(make_claim):
    claim = make_claim(supporting_document_path="uploads/0123abcd_october_timesheet.pdf")
    assert claim.document_name == "october_timesheet.pdf"
    assert make_claim().document_name is None


def test_history_rejected_count_is_the_remainder():
    history = ClaimHistory(claims=[], total=5, pending=2, approved=1)
    assert history.rejected == 2


def test_only_pending_is_not_terminal():
    assert not ClaimStatus.PENDING.is_terminal
    assert ClaimStatus.APPROVED.is_terminal
    assert ClaimStatus.REJECTED.is_terminal
