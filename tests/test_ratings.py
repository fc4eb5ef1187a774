"""
Tests for rating scores and analytics calculations
"""
import pytest
from unittest.mock import Mock
from app.feedback.ratings import (
    RatingLevel,
    get_rating_score,
    compute_analytics,
)


def make_record(general_experience="good", language="en", examination_type=(), **kwargs):
    return Mock(
        general_experience=general_experience,
        booking_rating=kwargs.get("booking_rating", "good"),
        care_quality=kwargs.get("care_quality", "good"),
        language=language,
        examination_type=list(examination_type),
    )


def test_rating_score_mapping():
    """Test that ratings map to the fixed score table."""
    assert get_rating_score(RatingLevel.EXCELLENT) == 100
    assert get_rating_score(RatingLevel.GOOD) == 75
    assert get_rating_score("medium") == 50
    assert get_rating_score("weak") == 25


def test_rating_score_invalid():
    """Test that unknown ratings are not silently scored."""
    with pytest.raises(ValueError):
        get_rating_score("superb")


def test_compute_analytics_example_average():
    """Test the excellent/good/weak example averages to 67."""
    records = [make_record("excellent"), make_record("good"), make_record("weak")]
    analytics = compute_analytics(records)

    assert analytics["average_rating"] == 67
    assert analytics["experience_ratings"] == {"excellent": 1, "good": 1, "weak": 1}


def test_compute_analytics_rounds_half_up():
    """Test that a .5 average rounds up."""
    records = [make_record("excellent"), make_record("good")]
    assert compute_analytics(records)["average_rating"] == 88  # 87.5


def test_compute_analytics_empty():
    """Test analytics with no records."""
    analytics = compute_analytics([])

    assert analytics["total_feedback"] == 0
    assert analytics["average_rating"] == 0
    assert analytics["language_counts"] == {"en": 0, "ar": 0}
    assert analytics["experience_ratings"] == {}
    assert analytics["examination_types"] == {}


def test_compute_analytics_counts_sum_to_total():
    """Test that language and experience counts add up to the record count."""
    ratings = ["excellent", "good", "medium", "weak", "good", "excellent", "weak"]
    languages = ["en", "ar", "ar", "en", "en", "ar", "en"]
    records = [make_record(r, l) for r, l in zip(ratings, languages)]

    analytics = compute_analytics(records)

    assert analytics["total_feedback"] == 7
    assert sum(analytics["language_counts"].values()) == 7
    assert sum(analytics["experience_ratings"].values()) == 7
    assert analytics["english_count"] == 4
    assert analytics["arabic_count"] == 3
    assert analytics["experience_ratings"]["good"] == 2


def test_compute_analytics_examination_types():
    """Test that each label occurrence is counted once."""
    records = [
        make_record(examination_type=["X-ray image", "Fixed installation"]),
        make_record(examination_type=["X-ray image"]),
        make_record(examination_type=[]),
    ]
    analytics = compute_analytics(records)

    assert analytics["examination_types"] == {"X-ray image": 2, "Fixed installation": 1}


def test_compute_analytics_other_ratings():
    """Test booking and care quality distributions."""
    records = [
        make_record(booking_rating="weak", care_quality="excellent"),
        make_record(booking_rating="weak", care_quality="medium"),
    ]
    analytics = compute_analytics(records)

    assert analytics["booking_ratings"] == {"weak": 2}
    assert analytics["care_quality_ratings"] == {"excellent": 1, "medium": 1}
