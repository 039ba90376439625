from __future__ import annotations

from typing import Optional

from ...core.enums import ValidationStatus
from ..config import ScoringProfile
from ..extractors import Detections
from .base import Disposition, DispositionRule


class AutoApproveRule(DispositionRule):
    def evaluate(self, *, detections: Detections, confidence: float, profile: ScoringProfile) -> Optional[Disposition]:
        if confidence >= profile.thresholds.auto_approve_threshold:
            return Disposition(status=ValidationStatus.AUTO_APPROVED)
        return None
