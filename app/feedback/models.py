"""Stored feedback record model"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from app.feedback.ratings import Language, RatingLevel, SatisfactionLevel


class FeedbackRecord(BaseModel):
    """Patient feedback as held by the store. Immutable once created."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    examination_type: Tuple[str, ...] = ()
    general_experience: RatingLevel
    booking_rating: RatingLevel
    care_quality: RatingLevel
    adequate_explanation: SatisfactionLevel
    comfortable_treatment: SatisfactionLevel
    cost_informed: SatisfactionLevel
    aftercare_instructions: SatisfactionLevel
    comments: Optional[str] = None
    language: Language
    created_at: str
