from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import Notification
from .notifier import Notifier


class MySQLNotifier(Notifier):
    """Writes notifications to the table the client apps poll."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def notify(self, notification: Notification) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(type, title, message, user_id, check_in_id, created_at, is_read)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    notification.type.value,
                    notification.title,
                    notification.message,
                    notification.recipient_user_id,
                    notification.check_in_id,
                    notification.created_at,
                    int(notification.read),
                ),
            )
