from __future__ import annotations

from typing import Mapping

from ..core.enums import Category
from .config import ScoringWeights


def aggregate(confidences: Mapping[Category, float], weights: ScoringWeights) -> float:
    """Weighted sum of the five category confidences.

    Missing categories count as 0. Weights are expected to sum to 1.0, which
    keeps the result in [0, 1] for inputs in [0, 1].
    """

    return sum(float(confidences.get(c, 0.0)) * w for c, w in weights.as_mapping().items())
