from __future__ import annotations

from typing import Protocol

from .model import Notification


class Notifier(Protocol):
    """Outbound notification sink. Delivery is fire-and-forget for callers."""

    def notify(self, notification: Notification) -> None:
        raise NotImplementedError
