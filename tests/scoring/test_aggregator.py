import itertools

import pytest

from src.photo_validation.photo_validation.core.enums import Category
from src.photo_validation.photo_validation.scoring.aggregator import aggregate
from src.photo_validation.photo_validation.scoring.config import (
    BALANCED_PROFILE,
    BRAND_WEIGHTED_PROFILE,
    PROFILES,
    ScoringWeights,
    get_profile,
    profile_with_overrides,
)


@pytest.mark.parametrize("profile", list(PROFILES.values()), ids=list(PROFILES))
def test_profile_weights_sum_to_one(profile):
    assert profile.weights.total() == pytest.approx(1.0)


@pytest.mark.parametrize("profile", list(PROFILES.values()), ids=list(PROFILES))
def test_profile_thresholds_leave_a_review_band(profile):
    t = profile.thresholds
    assert 0 <= t.auto_reject_threshold < t.auto_approve_threshold <= 1


def test_weighted_sum_matches_example_check_in():
    confidences = {
        Category.PERSON: 0.9,
        Category.UNIFORM: 0.5,
        Category.LOCATION: 0.0,
        Category.LOGO: 0.0,
        Category.BRAND_COLOR: 0.3,
    }
    assert aggregate(confidences, BRAND_WEIGHTED_PROFILE.weights) == pytest.approx(0.525)


def test_missing_categories_count_as_zero():
    assert aggregate({Category.PERSON: 1.0}, BRAND_WEIGHTED_PROFILE.weights) == pytest.approx(0.4)
    assert aggregate({}, BALANCED_PROFILE.weights) == 0


@pytest.mark.parametrize("weights", [BRAND_WEIGHTED_PROFILE.weights, BALANCED_PROFILE.weights])
def test_output_stays_in_unit_interval(weights):
    grid = (0.0, 0.3, 1.0)
    for values in itertools.product(grid, repeat=5):
        confidences = dict(zip(Category, values))
        assert 0.0 <= aggregate(confidences, weights) <= 1.0 + 1e-9


@pytest.mark.parametrize("category", list(Category))
def test_raising_one_confidence_never_lowers_the_score(category):
    base = {c: 0.4 for c in Category}
    before = aggregate(base, BALANCED_PROFILE.weights)
    after = aggregate({**base, category: 0.8}, BALANCED_PROFILE.weights)
    assert after >= before


def test_custom_weights_are_used_as_given():
    only_color = ScoringWeights(person=0, uniform=0, logo=0, location=0, brand_color=1.0)
    assert aggregate({Category.BRAND_COLOR: 0.25, Category.PERSON: 1.0}, only_color) == pytest.approx(0.25)


def test_get_profile_by_name():
    assert get_profile("balanced") is BALANCED_PROFILE
    assert get_profile(" Brand_Weighted ") is BRAND_WEIGHTED_PROFILE
    with pytest.raises(ValueError):
        get_profile("strict")


def test_threshold_overrides_return_a_copy():
    tuned = profile_with_overrides(BRAND_WEIGHTED_PROFILE, auto_approve_threshold=0.8)
    assert tuned.thresholds.auto_approve_threshold == 0.8
    assert tuned.thresholds.auto_reject_threshold == BRAND_WEIGHTED_PROFILE.thresholds.auto_reject_threshold
    assert BRAND_WEIGHTED_PROFILE.thresholds.auto_approve_threshold == 0.7
    assert profile_with_overrides(BRAND_WEIGHTED_PROFILE) is BRAND_WEIGHTED_PROFILE

    with pytest.raises(ValueError):
        profile_with_overrides(BRAND_WEIGHTED_PROFILE, approve=0.9)
