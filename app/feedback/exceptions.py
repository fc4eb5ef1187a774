"""Feedback custom exceptions"""
from typing import Dict, List
from fastapi import HTTPException, status


class FeedbackValidationException(HTTPException):
    """Raised when a submission fails validation"""
    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid feedback data", "errors": errors}
        )

    @property
    def fields(self) -> List[str]:
        return [error["field"] for error in self.errors]


class FeedbackNotFoundException(HTTPException):
    """Raised when feedback is not found"""
    def __init__(self, feedback_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback with id {feedback_id} not found"
        )


class InvalidExportFormatException(HTTPException):
    """Raised when an unsupported export format is requested"""
    def __init__(self, export_format: str, valid_formats: list):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid format '{export_format}'. Must be one of: {', '.join(valid_formats)}"
        )
