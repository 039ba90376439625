from __future__ import annotations

from typing import Optional

from ...core.constants import REQUIREMENTS_NOT_MET
from ...core.enums import Category, ValidationStatus
from ..config import ScoringProfile
from ..extractors import Detections
from .base import Disposition, DispositionRule

MISSING_SIGNAL_LABELS = {
    Category.BRAND_COLOR: "green uniform",
    Category.UNIFORM: "visible work clothing",
    Category.LOGO: "brand logo",
    Category.LOCATION: "work location",
    Category.PERSON: "person",
}


def is_signal_present(category: Category, detections: Detections, profile: ScoringProfile) -> bool:
    detection = detections.get(category)
    if category is Category.BRAND_COLOR:
        return detection.confidence >= profile.thresholds.min_brand_color_score
    return detection.detected


def compose_rejection_reason(detections: Detections, profile: ScoringProfile) -> str:
    missing = [
        MISSING_SIGNAL_LABELS[c]
        for c in profile.missing_signal_categories
        if not is_signal_present(c, detections, profile)
    ]
    if not missing:
        return REQUIREMENTS_NOT_MET
    return f"{REQUIREMENTS_NOT_MET} Not detected: {' nor '.join(missing)}."


class AutoRejectRule(DispositionRule):
    """Reject when the aggregate score is at or below the reject threshold."""

    def evaluate(self, *, detections: Detections, confidence: float, profile: ScoringProfile) -> Optional[Disposition]:
        if confidence <= profile.thresholds.auto_reject_threshold:
            return Disposition(
                status=ValidationStatus.REJECTED,
                rejection_reason=compose_rejection_reason(detections, profile),
            )
        return None
