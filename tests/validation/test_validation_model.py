from datetime import datetime, timezone

from src.photo_validation.photo_validation.core.enums import ValidationStatus
from src.photo_validation.photo_validation.scoring.config import BRAND_WEIGHTED_PROFILE
from src.photo_validation.photo_validation.validation.engine import PhotoValidationEngine
from src.photo_validation.photo_validation.validation.model import ValidationResult
from tests.fakes import NO_PERSON_PAYLOAD, StubAnnotator

PROCESSED_AT = datetime(2025, 12, 1, 8, 0, 5, tzinfo=timezone.utc)


def test_document_uses_client_field_names():
    result = PhotoValidationEngine(StubAnnotator(NO_PERSON_PAYLOAD), BRAND_WEIGHTED_PROFILE).validate(
        "gs://b/p.jpg", triggered_by="sup-1", now=PROCESSED_AT
    )
    doc = result.to_dict()

    assert doc["status"] == "rejected"
    assert doc["rejectionReason"] == result.rejection_reason
    assert doc["locationValid"] is True
    assert doc["triggeredBy"] == "sup-1"
    assert doc["processedAt"] == "2025-12-01T08:00:05+00:00"
    assert doc["labels"] == [{"description": "Shelf", "score": 0.9}]
    assert "error" not in doc
    assert "reviewedBy" not in doc

    assert ValidationResult.from_dict(doc) == result


def test_degraded_variant_carries_error_and_defaults():
    result = ValidationResult.failed("provider down", processing_time_ms=12, triggered_by="adm-1")

    assert result.status == ValidationStatus.NEEDS_REVIEW
    assert result.is_degraded
    assert result.confidence == 0
    assert result.person_detected is False and result.person_confidence == 0
    assert result.to_dict()["error"] == "provider down"
    assert result.to_dict()["processingTimeMs"] == 12


def test_review_overwrites_only_decision_fields():
    base = ValidationResult(status=ValidationStatus.NEEDS_REVIEW, confidence=0.5, person_detected=True, person_confidence=0.9)
    reviewed = base.with_review(
        approved=False,
        reviewed_by="sup-1",
        reviewed_at=PROCESSED_AT,
        notes=None,
        default_reason="Rejected by supervisor",
    )

    assert reviewed.status == ValidationStatus.REJECTED
    assert reviewed.rejection_reason == "Rejected by supervisor"
    assert reviewed.is_reviewed
    assert (reviewed.confidence, reviewed.person_confidence) == (0.5, 0.9)
    assert base.status == ValidationStatus.NEEDS_REVIEW
