from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import ClaimStatus
from .model import Claim


class ClaimRepository(Protocol):
    def create_claim(self, claim: Claim) -> int:
        """Persist a new claim and return its id."""

        raise NotImplementedError

    def get_claim(self, *, claim_id: int) -> Optional[Claim]:
        raise NotImplementedError

    def list_claims(
        self,
        *,
        lecturer_email: Optional[str] = None,
        status: Optional[ClaimStatus] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[Claim]:
        """Newest first (date_submitted DESC, claim_id DESC)."""

        raise NotImplementedError

    def count_claims_by_status(self, *, lecturer_email: Optional[str] = None) -> Mapping[ClaimStatus, int]:
        raise NotImplementedError

    def decide_claim(
        self,
        *,
        claim_id: int,
        status: ClaimStatus,
        decided_by: str,
        decided_at: datetime,
    ) -> bool:
        """Move a PENDING claim to `status`; False when no pending row matched."""

        raise NotImplementedError
