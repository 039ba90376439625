from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..annotation.model import AnnotationPayload, ColorSwatch, TextAnnotation
from ..core.enums import Category
from .config import ColorRange, ScoringProfile


@dataclass(frozen=True)
class CategoryDetection:
    detected: bool
    confidence: float


def detect_category(entries: Sequence[TextAnnotation], vocabulary: Sequence[str]) -> CategoryDetection:
    """Best confidence among entries whose text contains any vocabulary term.

    Matching is a case-insensitive substring test ("Polo shirt" matches
    "Shirt"). Entries with empty text never match.
    """

    terms = [t.lower() for t in vocabulary if t]
    best = 0.0
    for entry in entries:
        text = (entry.description or "").lower()
        if not text:
            continue
        if any(term in text for term in terms):
            best = max(best, float(entry.score))
    return CategoryDetection(detected=best > 0, confidence=best)


def detect_brand_color(colors: Sequence[ColorSwatch], color_range: ColorRange) -> CategoryDetection:
    """Best dominance score among swatches inside the configured RGB box."""

    best = 0.0
    for swatch in colors:
        if color_range.contains(swatch.red, swatch.green, swatch.blue):
            best = max(best, float(swatch.score))
    return CategoryDetection(detected=best > 0, confidence=best)


@dataclass(frozen=True)
class Detections:
    """Per-category detections for one photo."""

    person: CategoryDetection
    uniform: CategoryDetection
    location: CategoryDetection
    logo: CategoryDetection
    brand_color: CategoryDetection

    def get(self, category: Category) -> CategoryDetection:
        return getattr(self, category.value)

    def confidences(self) -> dict[Category, float]:
        return {c: self.get(c).confidence for c in Category}


def extract_detections(payload: AnnotationPayload, profile: ScoringProfile) -> Detections:
    vocab = profile.vocabularies
    return Detections(
        person=detect_category(payload.labels, vocab.person),
        uniform=detect_category(payload.labels, vocab.uniform),
        location=detect_category(payload.labels, vocab.location),
        logo=detect_category(payload.logos, vocab.logo),
        brand_color=detect_brand_color(payload.colors, profile.brand_color_range),
    )
