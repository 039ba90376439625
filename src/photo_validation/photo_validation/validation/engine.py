from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from ..annotation.client import AnnotationClient
from ..annotation.model import AnnotationPayload
from ..scoring.aggregator import aggregate
from ..scoring.classifier import DispositionClassifier
from ..scoring.config import ScoringProfile
from ..scoring.extractors import extract_detections
from .model import ValidationResult

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int(round((time.perf_counter() - started) * 1000))


class PhotoValidationEngine:
    """Annotate one photo and turn the signals into a ValidationResult.

    Holds no per-run state: concurrent runs only share the injected
    collaborators. Never raises for provider trouble; the run degrades to a
    needs_review result carrying `error` instead.
    """

    def __init__(
        self,
        annotator: AnnotationClient,
        profile: ScoringProfile,
        *,
        classifier: Optional[DispositionClassifier] = None,
    ):
        self._annotator = annotator
        self._profile = profile
        self._classifier = classifier or DispositionClassifier()

    def validate(
        self,
        image_ref: str,
        *,
        triggered_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ValidationResult:
        started = time.perf_counter()
        processed_at = now or datetime.now(timezone.utc)

        try:
            payload = self._annotator.annotate(image_ref)
            if not isinstance(payload, AnnotationPayload):
                raise TypeError(f"annotation client returned {type(payload).__name__}")
            result = self.score(payload, triggered_by=triggered_by, processed_at=processed_at, started=started)
        except Exception as e:
            # Provider and malformed-response failures route to human review.
            error = str(e) or type(e).__name__
            logger.warning("photo validation degraded for %s: %s", image_ref, error)
            return ValidationResult.failed(
                error,
                processing_time_ms=_elapsed_ms(started),
                triggered_by=triggered_by,
                processed_at=processed_at,
            )

        logger.info(
            "photo validation for %s: status=%s confidence=%.2f",
            image_ref,
            result.status.value,
            result.confidence,
        )
        return result

    def score(
        self,
        payload: AnnotationPayload,
        *,
        triggered_by: Optional[str] = None,
        processed_at: Optional[datetime] = None,
        started: Optional[float] = None,
    ) -> ValidationResult:
        """Score an already-annotated payload (also used to replay stored payloads)."""

        started = time.perf_counter() if started is None else started
        profile = self._profile

        logger.debug("labels: %s", [f"{x.description}({x.score:.2f})" for x in payload.labels])
        logger.debug("logos: %s", [f"{x.description}({x.score:.2f})" for x in payload.logos])

        detections = extract_detections(payload, profile)
        confidence = aggregate(detections.confidences(), profile.weights)
        disposition = self._classifier.classify(detections, confidence, profile)

        return ValidationResult(
            status=disposition.status,
            confidence=confidence,
            person_detected=detections.person.detected,
            person_confidence=detections.person.confidence,
            uniform_detected=detections.uniform.detected,
            uniform_confidence=detections.uniform.confidence,
            location_detected=detections.location.detected,
            location_confidence=detections.location.confidence,
            logo_detected=detections.logo.detected,
            logo_confidence=detections.logo.confidence,
            brand_color_detected=detections.brand_color.detected,
            brand_color_score=detections.brand_color.confidence,
            labels=payload.labels,
            logos=payload.logos,
            colors=payload.colors,
            rejection_reason=disposition.rejection_reason,
            processing_time_ms=_elapsed_ms(started),
            triggered_by=triggered_by,
            processed_at=processed_at,
        )
