import pytest

from src.photo_validation.photo_validation.core.constants import NO_PERSON_REASON
from src.photo_validation.photo_validation.core.enums import ValidationStatus
from src.photo_validation.photo_validation.scoring.classifier import DispositionClassifier
from src.photo_validation.photo_validation.scoring.config import BALANCED_PROFILE, BRAND_WEIGHTED_PROFILE
from src.photo_validation.photo_validation.scoring.extractors import CategoryDetection, Detections
from src.photo_validation.photo_validation.scoring.rules.auto_approve_rule import AutoApproveRule
from src.photo_validation.photo_validation.scoring.rules.person_gate_rule import PersonGateRule


def _det(confidence: float) -> CategoryDetection:
    return CategoryDetection(detected=confidence > 0, confidence=confidence)


def _detections(person=0.9, uniform=0.0, location=0.0, logo=0.0, brand_color=0.0) -> Detections:
    return Detections(
        person=_det(person),
        uniform=_det(uniform),
        location=_det(location),
        logo=_det(logo),
        brand_color=_det(brand_color),
    )


@pytest.fixture
def classifier():
    return DispositionClassifier()


@pytest.mark.parametrize("person", [0.0, 0.3, 0.59])
def test_person_gate_wins_even_at_full_confidence(classifier, person):
    out = classifier.classify(_detections(person=person), 1.0, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.REJECTED
    assert out.rejection_reason == NO_PERSON_REASON


def test_person_exactly_at_minimum_passes_the_gate(classifier):
    out = classifier.classify(_detections(person=0.6), 0.7, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.AUTO_APPROVED


def test_approve_threshold_is_inclusive(classifier):
    out = classifier.classify(_detections(), 0.7, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.AUTO_APPROVED
    assert out.rejection_reason is None


def test_reject_threshold_is_inclusive(classifier):
    out = classifier.classify(_detections(), 0.25, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.REJECTED
    assert out.rejection_reason


@pytest.mark.parametrize("confidence", [0.2501, 0.4, 0.525, 0.6999])
def test_dead_zone_goes_to_review(classifier, confidence):
    out = classifier.classify(_detections(), confidence, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.NEEDS_REVIEW
    assert out.rejection_reason is None


def test_low_score_reason_lists_missing_brand_signals(classifier):
    out = classifier.classify(_detections(), 0.1, BRAND_WEIGHTED_PROFILE)
    assert out.rejection_reason == (
        "Photo does not meet the requirements. Not detected: green uniform nor visible work clothing."
    )


def test_brand_color_below_minimum_score_counts_as_missing(classifier):
    out = classifier.classify(_detections(uniform=0.4, brand_color=0.1), 0.2, BRAND_WEIGHTED_PROFILE)
    assert out.rejection_reason == "Photo does not meet the requirements. Not detected: green uniform."


def test_low_score_reason_with_nothing_missing(classifier):
    out = classifier.classify(_detections(uniform=0.4, brand_color=0.2), 0.2, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.REJECTED
    assert out.rejection_reason == "Photo does not meet the requirements."


def test_balanced_profile_reports_logo_and_location(classifier):
    out = classifier.classify(_detections(location=0.5), 0.3, BALANCED_PROFILE)
    assert out.status == ValidationStatus.REJECTED
    assert out.rejection_reason == "Photo does not meet the requirements. Not detected: brand logo."


def test_rule_order_is_configurable():
    approve_first = DispositionClassifier(rules=(AutoApproveRule(), PersonGateRule()))
    out = approve_first.classify(_detections(person=0.0), 0.9, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.AUTO_APPROVED


def test_no_rules_means_review():
    out = DispositionClassifier(rules=()).classify(_detections(), 0.0, BRAND_WEIGHTED_PROFILE)
    assert out.status == ValidationStatus.NEEDS_REVIEW
