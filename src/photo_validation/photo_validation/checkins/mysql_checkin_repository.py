from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import CheckInType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import CheckIn
from .repository import CheckInRepository


class MySQLCheckInRepository(CheckInRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_model(r: dict) -> CheckIn:
        return CheckIn(
            check_in_id=str(r["check_in_id"]),
            user_id=str(r["user_id"]),
            check_in_type=CheckInType(r["check_in_type"]),
            created_at=r["created_at"],
            photo_ref=r.get("photo_ref"),
        )

    def get_by_id(self, check_in_id: str) -> Optional[CheckIn]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT check_in_id, user_id, check_in_type, created_at, photo_ref
                FROM checkins
                WHERE check_in_id=%s
                """,
                (check_in_id,),
            )
            r = fetchone(cur)
            return self._to_model(r) if r else None

    def list_unvalidated(self, *, check_in_type: CheckInType, limit: int) -> Sequence[CheckIn]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.check_in_id, c.user_id, c.check_in_type, c.created_at, c.photo_ref
                FROM checkins c
                LEFT JOIN photo_validations v ON v.check_in_id = c.check_in_id
                WHERE v.check_in_id IS NULL
                  AND c.check_in_type = %s
                  AND c.photo_ref IS NOT NULL AND c.photo_ref <> ''
                ORDER BY c.created_at ASC
                LIMIT %s
                """,
                (check_in_type.value, int(limit)),
            )
            return [self._to_model(r) for r in fetchall(cur)]
