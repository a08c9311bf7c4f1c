from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import ClaimStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import Claim
from .repository import ClaimRepository

_COLUMNS = """
    claim_id, lecturer_name, lecturer_email, hours_worked, hourly_rate, notes,
    status, date_submitted, supporting_document_path, decided_by, decided_at
"""


def _row_to_claim(r: Dict[str, Any]) -> Claim:
    return Claim(
        claim_id=int(r["claim_id"]),
        lecturer_name=r["lecturer_name"],
        lecturer_email=r["lecturer_email"],
        hours_worked=to_decimal(r["hours_worked"]),
        hourly_rate=to_decimal(r["hourly_rate"]),
        notes=r.get("notes"),
        status=ClaimStatus(r["status"]),
        date_submitted=r["date_submitted"],
        supporting_document_path=r.get("supporting_document_path"),
        decided_by=r.get("decided_by"),
        decided_at=r.get("decided_at"),
    )


class MySQLClaimRepository(ClaimRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_claim(self, claim: Claim) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO claims(
                    lecturer_name, lecturer_email, hours_worked, hourly_rate, notes,
                    status, date_submitted, supporting_document_path
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    claim.lecturer_name,
                    claim.lecturer_email,
                    claim.hours_worked,
                    claim.hourly_rate,
                    claim.notes,
                    claim.status.value,
                    claim.date_submitted,
                    claim.supporting_document_path,
                ),
            )
            return int(cur.lastrowid)

    def get_claim(self, *, claim_id: int) -> Optional[Claim]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM claims WHERE claim_id=%s", (int(claim_id),))
            r = fetchone(cur)
            return _row_to_claim(r) if r else None

    def list_claims(
        self,
        *,
        lecturer_email: Optional[str] = None,
        status: Optional[ClaimStatus] = None,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[Claim]:
        clauses = ["1=1"]
        params: list[object] = []

        if lecturer_email:
            clauses.append("lecturer_email=%s")
            params.append(lecturer_email)
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM claims
                WHERE {where}
                ORDER BY date_submitted DESC, claim_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_row_to_claim(r) for r in fetchall(cur)]

    def count_claims_by_status(self, *, lecturer_email: Optional[str] = None) -> Mapping[ClaimStatus, int]:
        where = "WHERE lecturer_email=%s" if lecturer_email else ""
        params = (lecturer_email,) if lecturer_email else ()

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT status, COUNT(*) AS n FROM claims {where} GROUP BY status", params)
            counts = {s: 0 for s in ClaimStatus}
            for r in fetchall(cur):
                counts[ClaimStatus(r["status"])] = int(r["n"])
            return counts

    def decide_claim(
        self,
        *,
        claim_id: int,
        status: ClaimStatus,
        decided_by: str,
        decided_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE claims
                SET status=%s, decided_by=%s, decided_at=%s
                WHERE claim_id=%s AND status=%s
                """,
                (status.value, decided_by, decided_at, int(claim_id), ClaimStatus.PENDING.value),
            )
            return cur.rowcount > 0
