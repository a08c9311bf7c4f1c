from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .auth.identity import IdentityProvider, StaticIdentityProvider, demo_accounts
from .auth.service import AuthService
from .claims.document_storage import DocumentStorage
from .claims.mysql_claim_repository import MySQLClaimRepository
from .claims.repository import ClaimRepository
from .claims.service import ClaimService
from .core.constants import DEFAULT_DOCUMENT_EXTENSIONS, DEFAULT_MAX_UPLOAD_MB
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    claims_repo: ClaimRepository
    documents: DocumentStorage
    identities: IdentityProvider

    auth_service: AuthService
    claim_service: ClaimService


def wire(
    *,
    claims_repo: ClaimRepository,
    documents: DocumentStorage,
    identities: Optional[IdentityProvider] = None,
) -> Container:
    identities = identities or StaticIdentityProvider(demo_accounts())
    return Container(
        claims_repo=claims_repo,
        documents=documents,
        identities=identities,
        auth_service=AuthService(identities),
        claim_service=ClaimService(claims_repo, documents),
    )


def build_container(
    *,
    db_config: dict,
    upload_root: str | Path,
    allowed_extensions: Iterable[str] = DEFAULT_DOCUMENT_EXTENSIONS,
    max_upload_mb: int = DEFAULT_MAX_UPLOAD_MB,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    documents = DocumentStorage(
        upload_root,
        allowed_extensions=allowed_extensions,
        max_bytes=int(max_upload_mb) * 1024 * 1024,
    )
    return wire(claims_repo=MySQLClaimRepository(conn), documents=documents)
