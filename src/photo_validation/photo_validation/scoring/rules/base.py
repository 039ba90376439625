from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import ValidationStatus
from ..config import ScoringProfile
from ..extractors import Detections


@dataclass(frozen=True)
class Disposition:
    status: ValidationStatus
    rejection_reason: Optional[str] = None


class DispositionRule(ABC):
    """Strategy Pattern: one policy step of the disposition classifier.

    Returns a Disposition when the rule decides, None to defer to the next rule.
    """

    @abstractmethod
    def evaluate(self, *, detections: Detections, confidence: float, profile: ScoringProfile) -> Optional[Disposition]:
        raise NotImplementedError
