from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..core.enums import ValidationStatus
from .config import ScoringProfile
from .extractors import Detections
from .rules.auto_approve_rule import AutoApproveRule
from .rules.auto_reject_rule import AutoRejectRule
from .rules.base import Disposition, DispositionRule
from .rules.person_gate_rule import PersonGateRule


def default_rules() -> tuple[DispositionRule, ...]:
    # Order matters: the person gate must run before any score-based rule.
    return (PersonGateRule(), AutoApproveRule(), AutoRejectRule())


@dataclass
class DispositionClassifier:
    """Chain of Responsibility over disposition rules; first decision wins.

    Scores strictly between the reject and approve thresholds fall through
    every rule and land in human review.
    """

    rules: Sequence[DispositionRule] = field(default_factory=default_rules)

    def classify(self, detections: Detections, confidence: float, profile: ScoringProfile) -> Disposition:
        for rule in self.rules:
            decision = rule.evaluate(detections=detections, confidence=confidence, profile=profile)
            if decision is not None:
                return decision
        return Disposition(status=ValidationStatus.NEEDS_REVIEW)
