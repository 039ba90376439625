from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class TextAnnotation:
    """A label or logo detection: text plus confidence in [0, 1]."""

    description: str
    score: float

    def to_dict(self) -> dict:
        return {"description": self.description, "score": self.score}


@dataclass(frozen=True)
class ColorSwatch:
    """A dominant color with its dominance score in [0, 1]."""

    red: float
    green: float
    blue: float
    score: float

    def to_dict(self) -> dict:
        return {"red": self.red, "green": self.green, "blue": self.blue, "score": self.score}


@dataclass(frozen=True)
class AnnotationPayload:
    labels: tuple[TextAnnotation, ...] = field(default_factory=tuple)
    logos: tuple[TextAnnotation, ...] = field(default_factory=tuple)
    colors: tuple[ColorSwatch, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        *,
        labels: Sequence[tuple[str, float]] = (),
        logos: Sequence[tuple[str, float]] = (),
        colors: Sequence[tuple[float, float, float, float]] = (),
    ) -> "AnnotationPayload":
        return cls(
            labels=tuple(TextAnnotation(d, float(s)) for d, s in labels),
            logos=tuple(TextAnnotation(d, float(s)) for d, s in logos),
            colors=tuple(ColorSwatch(r, g, b, float(s)) for r, g, b, s in colors),
        )

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "AnnotationPayload":
        """Parse one `images:annotate` response entry.

        Absent sections are empty, never an error.
        """

        labels = tuple(_text(a) for a in response.get("labelAnnotations") or ())
        logos = tuple(_text(a) for a in response.get("logoAnnotations") or ())

        props = response.get("imagePropertiesAnnotation") or {}
        dominant = (props.get("dominantColors") or {}).get("colors") or ()
        colors = tuple(_swatch(c) for c in dominant)
        return cls(labels=labels, logos=logos, colors=colors)


def _text(raw: Mapping[str, Any]) -> TextAnnotation:
    return TextAnnotation(
        description=str(raw.get("description") or ""),
        score=float(raw.get("score") or 0),
    )


def _swatch(raw: Mapping[str, Any]) -> ColorSwatch:
    color = raw.get("color") or {}
    return ColorSwatch(
        red=color.get("red") or 0,
        green=color.get("green") or 0,
        blue=color.get("blue") or 0,
        score=float(raw.get("score") or 0),
    )
