from __future__ import annotations

from typing import Optional, Protocol

from .model import ValidationResult


class ValidationRepository(Protocol):
    """Validation record store keyed by check-in id; last write wins."""

    def get(self, check_in_id: str) -> Optional[ValidationResult]:
        raise NotImplementedError

    def set(self, check_in_id: str, result: ValidationResult) -> None:
        raise NotImplementedError
