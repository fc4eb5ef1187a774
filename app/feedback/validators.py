"""Validation logic for feedback submissions"""
from typing import Any, Dict, List
from pydantic import ValidationError
from app.feedback.schemas import FeedbackSubmission
from app.feedback.exceptions import FeedbackValidationException


def _field_name(location: tuple) -> str:
    """Render a pydantic error location as a dotted wire field name."""
    if not location:
        return "body"
    return ".".join(str(part) for part in location)


def collect_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    return [
        {"field": _field_name(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]


def validate_submission(payload: Any) -> FeedbackSubmission:
    """
    Validate a raw submission payload.

    Only the four-value satisfaction answers are accepted for the yes/no
    style questions; booleans are rejected.

    Raises:
        FeedbackValidationException: listing every offending field
    """
    if not isinstance(payload, dict):
        raise FeedbackValidationException(
            [{"field": "body", "message": "Submission must be a JSON object"}]
        )
    try:
        return FeedbackSubmission.model_validate(payload)
    except ValidationError as e:
        raise FeedbackValidationException(collect_errors(e)) from e
