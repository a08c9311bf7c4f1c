from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..auth.context import RequestContext
from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_email, require_non_empty, require_non_negative_decimal
from ..core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_NOTES_LENGTH
from ..core.enums import ClaimStatus, Role
from ..core.exceptions import ClaimAlreadyDecidedError, NotFoundError, ValidationError
from .document_storage import DocumentStorage, has_file
from .model import Claim, ClaimHistory, NewClaim
from .repository import ClaimRepository

logger = logging.getLogger(__name__)

# history and tracking are open to both roles
READER_ROLES = (Role.LECTURER, Role.COORDINATOR)


class ClaimService:
    """Claim workflow: submit, history, track and the coordinator decision."""

    def __init__(
        self,
        claims: ClaimRepository,
        documents: DocumentStorage,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._claims = claims
        self._documents = documents
        self._clock = clock

    def _validate(self, data: NewClaim, document: Optional[FileStorage]) -> Claim:
        errors: Dict[str, str] = {}
        values: Dict[str, object] = {}

        checks = {
            "lecturer_name": lambda: require_non_empty(
                data.lecturer_name, "lecturer_name", "Lecturer name", max_length=MAX_NAME_LENGTH
            ),
            "lecturer_email": lambda: require_email(
                data.lecturer_email, "lecturer_email", "Lecturer email", max_length=MAX_EMAIL_LENGTH
            ),
            "hours_worked": lambda: require_non_negative_decimal(
                data.hours_worked, "hours_worked", "Hours worked", places=2
            ),
            "hourly_rate": lambda: require_non_negative_decimal(
                data.hourly_rate, "hourly_rate", "Hourly rate", places=2
            ),
            "notes": lambda: optional_text(data.notes, "notes", "Notes", max_length=MAX_NOTES_LENGTH),
        }
        for name, check in checks.items():
            try:
                values[name] = check()
            except ValidationError as e:
                errors.update(e.errors)

        if has_file(document):
            problem = self._documents.validate(document)
            if problem:
                errors["supporting_document"] = problem

        if errors:
            raise ValidationError("Please correct the highlighted fields", errors=errors)

        # status and submission time are never taken from the caller
        return Claim(
            lecturer_name=values["lecturer_name"],
            lecturer_email=values["lecturer_email"],
            hours_worked=values["hours_worked"],
            hourly_rate=values["hourly_rate"],
            notes=values["notes"],
            status=ClaimStatus.PENDING,
            date_submitted=self._clock(),
        )

    def submit(self, ctx: RequestContext, data: NewClaim, document: Optional[FileStorage] = None) -> int:
        ctx.require(Role.LECTURER)
        claim = self._validate(data, document)

        document_path = None
        if has_file(document):
            document_path = self._documents.save(document)
            claim = replace(claim, supporting_document_path=document_path)

        try:
            claim_id = self._claims.create_claim(claim)
        except Exception:
            if document_path:
                self._documents.delete(document_path)
            raise

        logger.info(
            "Claim %s submitted by %s: %s h x %s = %s",
            claim_id,
            claim.lecturer_email,
            claim.hours_worked,
            claim.hourly_rate,
            claim.total_amount,
        )
        return claim_id

    def history(self, ctx: RequestContext, lecturer_email: Optional[str] = None) -> ClaimHistory:
        ctx.require(*READER_ROLES)
        email = (lecturer_email or "").strip() or None
        claims = self._claims.list_claims(lecturer_email=email)
        counts = self._claims.count_claims_by_status(lecturer_email=email)
        return ClaimHistory(
            claims=claims,
            total=sum(counts.values()),
            pending=counts.get(ClaimStatus.PENDING, 0),
            approved=counts.get(ClaimStatus.APPROVED, 0),
        )

    def track(self, ctx: RequestContext, claim_id: int) -> Claim:
        ctx.require(*READER_ROLES)
        claim = self._claims.get_claim(claim_id=int(claim_id))
        if claim is None:
            raise NotFoundError(f"Claim #{claim_id} was not found")
        return claim

    def track_all(self, ctx: RequestContext, lecturer_email: Optional[str] = None) -> Sequence[Claim]:
        ctx.require(*READER_ROLES)
        return self._claims.list_claims(lecturer_email=(lecturer_email or "").strip() or None)

    def review_queue(self, ctx: RequestContext, status: Optional[ClaimStatus] = ClaimStatus.PENDING) -> Sequence[Claim]:
        ctx.require(Role.COORDINATOR)
        return self._claims.list_claims(status=status)

    def _decide(self, ctx: RequestContext, claim_id: int, status: ClaimStatus) -> None:
        ctx.require(Role.COORDINATOR)

        claim = self.track(ctx, claim_id)
        if claim.status.is_terminal:
            raise ClaimAlreadyDecidedError(f"Claim #{claim_id} has already been {claim.status.value.lower()}")

        decided = self._claims.decide_claim(
            claim_id=int(claim_id),
            status=status,
            decided_by=ctx.display_name,
            decided_at=self._clock(),
        )
        if not decided:
            # another coordinator got there between the read and the update
            raise ClaimAlreadyDecidedError(f"Claim #{claim_id} has already been decided")

        logger.info("Claim %s %s by %s", claim_id, status.value.lower(), ctx.display_name)

    def approve(self, ctx: RequestContext, claim_id: int) -> None:
        self._decide(ctx, claim_id, ClaimStatus.APPROVED)

    def reject(self, ctx: RequestContext, claim_id: int) -> None:
        self._decide(ctx, claim_id, ClaimStatus.REJECTED)

    def document_path(self, ctx: RequestContext, claim_id: int) -> Path:
        claim = self.track(ctx, claim_id)
        if not claim.supporting_document_path:
            raise NotFoundError(f"Claim #{claim_id} has no supporting document")
        return self._documents.resolve(claim.supporting_document_path)
