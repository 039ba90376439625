"""Scoring profiles.

A profile is the whole tunable surface of the decision engine: vocabularies,
brand-color range, weights and thresholds. Retuning means supplying another
profile, never editing the rules.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Mapping

from ..core.enums import Category


@dataclass(frozen=True)
class ChannelRange:
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class ColorRange:
    """Inclusive RGB box for the expected uniform color."""

    red: ChannelRange
    green: ChannelRange
    blue: ChannelRange

    def contains(self, red: float, green: float, blue: float) -> bool:
        return self.red.contains(red) and self.green.contains(green) and self.blue.contains(blue)


@dataclass(frozen=True)
class ScoringWeights:
    person: float
    uniform: float
    logo: float
    location: float
    brand_color: float

    def as_mapping(self) -> dict[Category, float]:
        return {
            Category.PERSON: self.person,
            Category.UNIFORM: self.uniform,
            Category.LOGO: self.logo,
            Category.LOCATION: self.location,
            Category.BRAND_COLOR: self.brand_color,
        }

    def total(self) -> float:
        return sum(self.as_mapping().values())


@dataclass(frozen=True)
class Thresholds:
    min_person_confidence: float
    min_brand_color_score: float
    auto_approve_threshold: float
    auto_reject_threshold: float


@dataclass(frozen=True)
class Vocabularies:
    person: tuple[str, ...]
    uniform: tuple[str, ...]
    location: tuple[str, ...]
    logo: tuple[str, ...]


@dataclass(frozen=True)
class ScoringProfile:
    name: str
    vocabularies: Vocabularies
    brand_color_range: ColorRange
    weights: ScoringWeights
    thresholds: Thresholds
    # Secondary categories listed in a composed low-confidence rejection.
    missing_signal_categories: tuple[Category, ...]


DEFAULT_VOCABULARIES = Vocabularies(
    person=("Person", "People", "Human", "Man", "Woman", "Adult", "Face", "Portrait", "Selfie"),
    uniform=("Clothing", "Uniform", "Shirt", "Polo shirt", "T-shirt", "Sleeve", "Top", "Outerwear", "Jacket", "Hoodie"),
    location=("Retail", "Store", "Shop", "Product", "Shelf", "Supermarket", "Market", "Building", "Indoor", "Room", "Wall"),
    logo=("Aviva", "BA", "Construrama", "Disensa"),
)

GREEN_UNIFORM_RANGE = ColorRange(
    red=ChannelRange(0, 150),
    green=ChannelRange(150, 255),
    blue=ChannelRange(0, 150),
)

BRAND_WEIGHTED_PROFILE = ScoringProfile(
    name="brand_weighted",
    vocabularies=DEFAULT_VOCABULARIES,
    brand_color_range=GREEN_UNIFORM_RANGE,
    weights=ScoringWeights(person=0.4, uniform=0.15, logo=0.05, location=0.1, brand_color=0.3),
    thresholds=Thresholds(
        min_person_confidence=0.6,
        min_brand_color_score=0.15,
        auto_approve_threshold=0.7,
        auto_reject_threshold=0.25,
    ),
    missing_signal_categories=(Category.BRAND_COLOR, Category.UNIFORM),
)

BALANCED_PROFILE = ScoringProfile(
    name="balanced",
    vocabularies=DEFAULT_VOCABULARIES,
    brand_color_range=GREEN_UNIFORM_RANGE,
    weights=ScoringWeights(person=0.3, uniform=0.2, logo=0.15, location=0.15, brand_color=0.2),
    thresholds=Thresholds(
        min_person_confidence=0.6,
        min_brand_color_score=0.15,
        auto_approve_threshold=0.75,
        auto_reject_threshold=0.3,
    ),
    missing_signal_categories=(Category.LOGO, Category.LOCATION),
)

PROFILES: Mapping[str, ScoringProfile] = {
    BRAND_WEIGHTED_PROFILE.name: BRAND_WEIGHTED_PROFILE,
    BALANCED_PROFILE.name: BALANCED_PROFILE,
}


def get_profile(name: str) -> ScoringProfile:
    try:
        return PROFILES[(name or "").strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown scoring profile: {name!r}") from None


def profile_with_overrides(profile: ScoringProfile, **overrides: float) -> ScoringProfile:
    """Return a copy of `profile` with some thresholds replaced."""

    if not overrides:
        return profile

    known = {f.name for f in fields(Thresholds)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown threshold(s): {', '.join(sorted(unknown))}")

    thresholds = replace(profile.thresholds, **{k: float(v) for k, v in overrides.items()})
    return replace(profile, thresholds=thresholds)
