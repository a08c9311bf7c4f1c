from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Who logged in: what we put into the Flask session."""

    username: str
    display_name: str
    role: Role


@dataclass(frozen=True)
class Account:
    username: str
    password_hash: str
    display_name: str
    role: Role


class IdentityProvider(Protocol):
    def authenticate(self, username: str, password: str) -> Optional[Identity]:
        raise NotImplementedError


def demo_accounts(password: str = "123") -> list[Account]:
    """The two prototype logins: one lecturer, one coordinator."""

    return [
        Account("lecturer", generate_password_hash(password), "Demo Lecturer", Role.LECTURER),
        Account("coordinator", generate_password_hash(password), "Demo Coordinator", Role.COORDINATOR),
    ]


class StaticIdentityProvider(IdentityProvider):
    """Fixed account table; swap for a database-backed provider without touching the services."""

    def __init__(self, accounts: Iterable[Account]):
        self._accounts = {a.username: a for a in accounts}

    def authenticate(self, username: str, password: str) -> Optional[Identity]:
        account = self._accounts.get((username or "").strip())
        if not account:
            return None

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # unknown hash method in a hand-edited account table
            ok = False

        if not ok:
            return None
        return Identity(username=account.username, display_name=account.display_name, role=account.role)
