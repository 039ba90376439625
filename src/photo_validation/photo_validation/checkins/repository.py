from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import CheckInType
from .model import CheckIn


class CheckInRepository(Protocol):
    def get_by_id(self, check_in_id: str) -> Optional[CheckIn]:
        raise NotImplementedError

    def list_unvalidated(self, *, check_in_type: CheckInType, limit: int) -> Sequence[CheckIn]:
        """Check-ins of one type with a photo but no validation record, oldest first."""

        raise NotImplementedError
