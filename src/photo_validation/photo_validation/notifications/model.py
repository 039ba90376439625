from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    type: NotificationType
    title: str
    message: str
    recipient_user_id: Optional[str]
    check_in_id: str
    created_at: datetime
    read: bool = False
