from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json_column
from .model import ValidationResult
from .repository import ValidationRepository


class MySQLValidationRepository(ValidationRepository):
    """Stores each ValidationResult as one JSON document per check-in."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, check_in_id: str) -> Optional[ValidationResult]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT document FROM photo_validations WHERE check_in_id=%s",
                (check_in_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ValidationResult.from_dict(load_json_column(r["document"]))

    def set(self, check_in_id: str, result: ValidationResult) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO photo_validations(check_in_id, status, document)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), document=VALUES(document)
                """,
                (check_in_id, result.status.value, json.dumps(result.to_dict())),
            )
