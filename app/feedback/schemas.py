"""Feedback Pydantic schemas"""
from typing import List, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from app.feedback.models import FeedbackRecord
from app.feedback.ratings import Language, RatingLevel, SatisfactionLevel


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeedbackSubmission(CamelModel):
    """Patient submission as accepted from the feedback form"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    examination_type: List[str] = Field(default_factory=list, description="Examinations performed")
    general_experience: RatingLevel
    booking_rating: RatingLevel
    care_quality: RatingLevel
    adequate_explanation: SatisfactionLevel
    comfortable_treatment: SatisfactionLevel
    cost_informed: SatisfactionLevel
    aftercare_instructions: SatisfactionLevel
    comments: Optional[str] = Field(None, description="Optional comments, suggestions or complaints")
    language: Language
    created_at: Optional[str] = Field(None, description="Submission time, defaults to now")


class FeedbackListResponse(CamelModel):
    """All stored feedback in insertion order"""
    feedbacks: List[FeedbackRecord]
    count: int


class AnalyticsResponse(CamelModel):
    """Dashboard analytics over all stored feedback"""
    total_feedback: int
    language_counts: Dict[str, int]
    english_count: int
    arabic_count: int
    experience_ratings: Dict[str, int]  # Count by general experience rating
    booking_ratings: Dict[str, int]
    care_quality_ratings: Dict[str, int]
    examination_types: Dict[str, int]  # Count by examination label
    average_rating: int  # 0-100 scale
