from __future__ import annotations

import io
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.datastructures import FileStorage

from claim_system.auth.context import RequestContext
from claim_system.claims.document_storage import DocumentStorage
from claim_system.claims.model import Claim
from claim_system.claims.service import ClaimService
from claim_system.container import wire
from claim_system.core.enums import ClaimStatus, Role
from claim_system.main import create_app


class InMemoryClaimRepository:
    def __init__(self):
        self._claims: dict[int, Claim] = {}
        self._next_id = 1
        self.fail_on_create = False

    def create_claim(self, claim: Claim) -> int:
        if self.fail_on_create:
            raise RuntimeError("database unavailable")
        cid = self._next_id
        self._next_id += 1
        self._claims[cid] = replace(claim, claim_id=cid)
        return cid

    def add(self, claim: Claim) -> Claim:
        """Test helper: store a claim exactly as given (status, date included)."""
        cid = self.create_claim(claim)
        return self._claims[cid]

    def get_claim(self, *, claim_id: int) -> Optional[Claim]:
        return self._claims.get(int(claim_id))

    def list_claims(self, *, lecturer_email=None, status=None, limit=500):
        items = [
            c
            for c in self._claims.values()
            if (lecturer_email is None or c.lecturer_email == lecturer_email) and (status is None or c.status == status)
        ]
        items.sort(key=lambda c: (c.date_submitted, c.claim_id), reverse=True)
        return items[:limit]

    def count_claims_by_status(self, *, lecturer_email=None):
        counts = {s: 0 for s in ClaimStatus}
        for c in self.list_claims(lecturer_email=lecturer_email, limit=10**6):
            counts[c.status] += 1
        return counts

    def decide_claim(self, *, claim_id, status, decided_by, decided_at) -> bool:
        claim = self._claims.get(int(claim_id))
        if not claim or claim.status != ClaimStatus.PENDING:
            return False
        self._claims[int(claim_id)] = replace(claim, status=status, decided_by=decided_by, decided_at=decided_at)
        return True

    def count(self) -> int:
        return len(self._claims)


def _make_claim(**overrides) -> Claim:
    data = dict(
        lecturer_name="John Doe",
        lecturer_email="john@example.com",
        hours_worked=Decimal("10"),
        hourly_rate=Decimal("100"),
    )
    data.update(overrides)
    return Claim(**data)


def _make_file(name: str = "timesheet.pdf", content: bytes = b"%PDF-1.4 test") -> FileStorage:
    return FileStorage(stream=io.BytesIO(content), filename=name)


@pytest.fixture
def make_claim():
    return _make_claim


@pytest.fixture
def make_file():
    return _make_file


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 31, 16, 45, 0)


@pytest.fixture
def repo() -> InMemoryClaimRepository:
    return InMemoryClaimRepository()


@pytest.fixture
def documents(tmp_path) -> DocumentStorage:
    return DocumentStorage(tmp_path, allowed_extensions=("pdf", "docx", "xlsx"), max_bytes=1024)


@pytest.fixture
def service(repo, documents, fixed_now) -> ClaimService:
    return ClaimService(repo, documents, clock=lambda: fixed_now)


@pytest.fixture
def lecturer() -> RequestContext:
    return RequestContext(role=Role.LECTURER, display_name="Demo Lecturer")


@pytest.fixture
def coordinator() -> RequestContext:
    return RequestContext(role=Role.COORDINATOR, display_name="Demo Coordinator")


@pytest.fixture
def app(monkeypatch, repo, documents):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=wire(claims_repo=repo, documents=documents))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(role: Role, name: Optional[str] = None):
        with client.session_transaction() as sess:
            sess["role"] = role.value
            sess["name"] = name or f"Demo {role.value}"

    return _login
