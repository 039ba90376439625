from __future__ import annotations

from typing import Optional

from ...core.constants import NO_PERSON_REASON
from ...core.enums import ValidationStatus
from ..config import ScoringProfile
from ..extractors import Detections
from .base import Disposition, DispositionRule


class PersonGateRule(DispositionRule):
    """Reject when no person is clearly visible, whatever the aggregate score."""

    def evaluate(self, *, detections: Detections, confidence: float, profile: ScoringProfile) -> Optional[Disposition]:
        person = detections.person
        if not person.detected or person.confidence < profile.thresholds.min_person_confidence:
            return Disposition(status=ValidationStatus.REJECTED, rejection_reason=NO_PERSON_REASON)
        return None
