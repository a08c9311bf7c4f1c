from __future__ import annotations

import logging

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .identity import Identity, IdentityProvider

logger = logging.getLogger(__name__)

LANDING_ENDPOINTS = {
    Role.LECTURER: "submit_claim",
    Role.COORDINATOR: "manage_claims",
}


class AuthService:
    """Use case: log in against an identity provider."""

    def __init__(self, identities: IdentityProvider):
        self._identities = identities

    def login(self, username: str, password: str) -> Identity:
        identity = self._identities.authenticate(username, password)
        if identity is None:
            logger.warning("Rejected login for username=%r", username)
            raise AuthenticationError("Invalid username or password.")

        logger.info("User %s logged in as %s", identity.username, identity.role.value)
        return identity

    @staticmethod
    def landing_endpoint(role: Role) -> str:
        return LANDING_ENDPOINTS[role]
