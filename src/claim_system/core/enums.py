from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles stored in the session after login."""

    LECTURER = "Lecturer"
    COORDINATOR = "Coordinator"


class ClaimStatus(str, Enum):
    """Review state of a claim; APPROVED and REJECTED are terminal."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ClaimStatus.PENDING
