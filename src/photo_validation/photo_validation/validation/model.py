from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping, Optional

from ..annotation.model import AnnotationPayload, ColorSwatch, TextAnnotation
from ..core.enums import ValidationStatus


@dataclass(frozen=True)
class ValidationResult:
    """Validation record attached 1:1 to a check-in.

    The scoring fields are written once by the automated run. A human review
    only replaces status, rejection_reason and the reviewed_* fields.
    """

    status: ValidationStatus
    confidence: float
    person_detected: bool = False
    person_confidence: float = 0.0
    uniform_detected: bool = False
    uniform_confidence: float = 0.0
    location_detected: bool = False
    location_confidence: float = 0.0
    logo_detected: bool = False
    logo_confidence: float = 0.0
    brand_color_detected: bool = False
    brand_color_score: float = 0.0
    labels: tuple[TextAnnotation, ...] = field(default_factory=tuple)
    logos: tuple[TextAnnotation, ...] = field(default_factory=tuple)
    colors: tuple[ColorSwatch, ...] = field(default_factory=tuple)
    rejection_reason: Optional[str] = None
    processing_time_ms: int = 0
    error: Optional[str] = None
    triggered_by: Optional[str] = None
    processed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None

    @classmethod
    def failed(
        cls,
        error: str,
        *,
        processing_time_ms: int,
        triggered_by: Optional[str] = None,
        processed_at: Optional[datetime] = None,
    ) -> "ValidationResult":
        """Degraded result for a run whose annotation step failed."""

        return cls(
            status=ValidationStatus.NEEDS_REVIEW,
            confidence=0.0,
            error=error or "annotation failed",
            processing_time_ms=processing_time_ms,
            triggered_by=triggered_by,
            processed_at=processed_at,
        )

    @property
    def is_degraded(self) -> bool:
        return self.error is not None

    @property
    def is_reviewed(self) -> bool:
        return self.reviewed_by is not None

    @property
    def payload(self) -> AnnotationPayload:
        return AnnotationPayload(labels=self.labels, logos=self.logos, colors=self.colors)

    def with_review(
        self,
        *,
        approved: bool,
        reviewed_by: str,
        reviewed_at: datetime,
        notes: Optional[str],
        default_reason: str,
    ) -> "ValidationResult":
        return replace(
            self,
            status=ValidationStatus.APPROVED if approved else ValidationStatus.REJECTED,
            rejection_reason=None if approved else (notes or default_reason),
            reviewed_by=reviewed_by,
            reviewed_at=reviewed_at,
            review_notes=notes or "",
        )

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "status": self.status.value,
            "confidence": self.confidence,
            "personDetected": self.person_detected,
            "personConfidence": self.person_confidence,
            "uniformDetected": self.uniform_detected,
            "uniformConfidence": self.uniform_confidence,
            "locationValid": self.location_detected,
            "locationConfidence": self.location_confidence,
            "logoDetected": self.logo_detected,
            "logoConfidence": self.logo_confidence,
            "brandColorDetected": self.brand_color_detected,
            "brandColorScore": self.brand_color_score,
            "labels": [x.to_dict() for x in self.labels],
            "logos": [x.to_dict() for x in self.logos],
            "colors": [x.to_dict() for x in self.colors],
            "processingTimeMs": self.processing_time_ms,
            "triggeredBy": self.triggered_by,
            "processedAt": _iso(self.processed_at),
        }
        # Optional keys are omitted rather than stored as null.
        optional = {
            "rejectionReason": self.rejection_reason,
            "error": self.error,
            "reviewedBy": self.reviewed_by,
            "reviewedAt": _iso(self.reviewed_at),
            "reviewNotes": self.review_notes,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationResult":
        return cls(
            status=ValidationStatus(data["status"]),
            confidence=float(data.get("confidence") or 0),
            person_detected=bool(data.get("personDetected")),
            person_confidence=float(data.get("personConfidence") or 0),
            uniform_detected=bool(data.get("uniformDetected")),
            uniform_confidence=float(data.get("uniformConfidence") or 0),
            location_detected=bool(data.get("locationValid")),
            location_confidence=float(data.get("locationConfidence") or 0),
            logo_detected=bool(data.get("logoDetected")),
            logo_confidence=float(data.get("logoConfidence") or 0),
            brand_color_detected=bool(data.get("brandColorDetected")),
            brand_color_score=float(data.get("brandColorScore") or 0),
            labels=tuple(TextAnnotation(x["description"], float(x["score"])) for x in data.get("labels") or ()),
            logos=tuple(TextAnnotation(x["description"], float(x["score"])) for x in data.get("logos") or ()),
            colors=tuple(
                ColorSwatch(x["red"], x["green"], x["blue"], float(x["score"])) for x in data.get("colors") or ()
            ),
            rejection_reason=data.get("rejectionReason"),
            processing_time_ms=int(data.get("processingTimeMs") or 0),
            error=data.get("error"),
            triggered_by=data.get("triggeredBy"),
            processed_at=_parse_iso(data.get("processedAt")),
            reviewed_by=data.get("reviewedBy"),
            reviewed_at=_parse_iso(data.get("reviewedAt")),
            review_notes=data.get("reviewNotes"),
        )


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse_iso(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
