from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..common.datetime_utils import now_local
from ..core.enums import ClaimStatus

Number = Union[str, int, Decimal]


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 7.5 or 0.1 at their printed value
    return Decimal(str(value))


@dataclass(frozen=True)
class Claim:
    """One lecturer's monthly claim.

    `total_amount` is derived from hours and rate on every read and is never
    stored on its own.
    """

    lecturer_name: str
    lecturer_email: str
    hours_worked: Decimal
    hourly_rate: Decimal
    notes: Optional[str] = None
    status: ClaimStatus = ClaimStatus.PENDING
    date_submitted: datetime = field(default_factory=now_local)
    supporting_document_path: Optional[str] = None
    claim_id: Optional[int] = None
    decided_by: Optional[str] = None
    decided_at: Optional[datetime] = None

    @property
    def total_amount(self) -> Decimal:
        return _as_decimal(self.hours_worked) * _as_decimal(self.hourly_rate)

    @property
    def document_name(self) -> Optional[str]:
        if not self.supporting_document_path:
            return None
        return self.supporting_document_path.rsplit("/", 1)[-1].split("_", 1)[-1]


@dataclass(frozen=True)
class NewClaim:
    """Raw submission input as typed into the claim form."""

    lecturer_name: str
    lecturer_email: str
    hours_worked: Optional[Number]
    hourly_rate: Optional[Number]
    notes: Optional[str] = None


@dataclass(frozen=True)
class ClaimHistory:
    claims: Sequence[Claim]
    total: int
    pending: int
    approved: int

    @property
    def rejected(self) -> int:
        return self.total - self.pending - self.approved
