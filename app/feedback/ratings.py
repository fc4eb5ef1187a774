"""Rating semantics and analytics computation"""
import math
from enum import Enum
from collections import Counter
from typing import Dict, Iterable, List


class RatingLevel(str, Enum):
    """Four-step rating used for experience, booking and care quality"""
    EXCELLENT = "excellent"
    GOOD = "good"
    MEDIUM = "medium"
    WEAK = "weak"


class SatisfactionLevel(str, Enum):
    """Four-step satisfaction answer for the yes/no style questions"""
    VERY_SATISFIED = "very_satisfied"
    SATISFIED = "satisfied"
    NEUTRAL = "neutral"
    DISSATISFIED = "dissatisfied"


class Language(str, Enum):
    """Languages the feedback form is offered in"""
    EN = "en"
    AR = "ar"


# Rating to score mapping (0-100 scale)
RATING_TO_SCORE = {
    RatingLevel.EXCELLENT: 100,
    RatingLevel.GOOD: 75,
    RatingLevel.MEDIUM: 50,
    RatingLevel.WEAK: 25,
}


def get_rating_score(rating: RatingLevel) -> int:
    """
    Convert a rating level to its score.

    Args:
        rating: RatingLevel or its string value

    Returns:
        Score between 25 and 100
    """
    return RATING_TO_SCORE[RatingLevel(rating)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_ratings(records: Iterable, attribute: str) -> Dict[str, int]:
    """Count occurrences of each observed value of a rating attribute."""
    counts = Counter(RatingLevel(getattr(r, attribute)).value for r in records)
    return dict(counts)


def count_examination_types(records: Iterable) -> Dict[str, int]:
    """Count every examination label across all records."""
    counts = Counter()
    for record in records:
        counts.update(record.examination_type)
    return dict(counts)


def compute_analytics(records: List) -> Dict:
    """
    Compute the dashboard analytics from the full record list.

    Metrics computed:
    - total_feedback: Count of records
    - language_counts / english_count / arabic_count: Count by form language
    - experience_ratings: Count by general experience rating
    - booking_ratings / care_quality_ratings: Count by the other two ratings
    - examination_types: Count by examination label
    - average_rating: Mean general experience score (0-100), 0 when empty

    Args:
        records: List of FeedbackRecord objects

    Returns:
        Dictionary with computed metrics
    """
    total = len(records)

    language_counts = {language.value: 0 for language in Language}
    for record in records:
        language_counts[Language(record.language).value] += 1

    average_rating = 0
    if total:
        score_sum = sum(get_rating_score(r.general_experience) for r in records)
        average_rating = _round_half_up(score_sum / total)

    return {
        "total_feedback": total,
        "language_counts": language_counts,
        "english_count": language_counts[Language.EN.value],
        "arabic_count": language_counts[Language.AR.value],
        "experience_ratings": count_ratings(records, "general_experience"),
        "booking_ratings": count_ratings(records, "booking_rating"),
        "care_quality_ratings": count_ratings(records, "care_quality"),
        "examination_types": count_examination_types(records),
        "average_rating": average_rating,
    }
