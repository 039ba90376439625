from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import CheckInType


@dataclass(frozen=True)
class CheckIn:
    """Read-side view of a check-in: only what photo validation needs."""

    check_in_id: str
    user_id: str
    check_in_type: CheckInType
    created_at: datetime
    photo_ref: Optional[str] = None

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_ref and self.photo_ref.strip())
