"""Feedback REST API endpoints"""
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import StreamingResponse
from app.dependencies import get_feedback_store, get_notifier
from app.feedback.service import FeedbackService
from app.feedback.models import FeedbackRecord
from app.feedback.repository import FeedbackStore
from app.feedback.schemas import AnalyticsResponse, FeedbackListResponse
from app.feedback.export import EXPORT_FORMATS, generate_csv, generate_pdf
from app.feedback.exceptions import InvalidExportFormatException
from app.notifications.dispatcher import NotificationDispatcher


def get_feedback_service(
    store: FeedbackStore = Depends(get_feedback_store),
    notifier: Optional[NotificationDispatcher] = Depends(get_notifier),
) -> FeedbackService:
    """Dependency to get FeedbackService"""
    return FeedbackService(store, notifier)


router = APIRouter(
    prefix="/api",
    tags=["feedback"],
)


@router.post("/feedback", response_model=FeedbackRecord)
async def create_feedback(
    payload: Any = Body(None),
    service: FeedbackService = Depends(get_feedback_service),
):
    """
    Submit patient feedback.

    Returns the stored record with its assigned id. The staff notification
    is sent in the background and cannot fail the submission.
    """
    return service.create_feedback(payload)


@router.get("/feedback", response_model=FeedbackListResponse)
async def list_feedbacks(service: FeedbackService = Depends(get_feedback_service)):
    """List all feedback in submission order."""
    feedbacks = service.list_feedbacks()
    return FeedbackListResponse(feedbacks=feedbacks, count=len(feedbacks))


@router.get("/feedback/export")
async def export_feedback(
    format: str = Query("csv", description="csv or pdf"),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Download all feedback as CSV or PDF."""
    if format not in EXPORT_FORMATS:
        raise InvalidExportFormatException(format, EXPORT_FORMATS)

    feedbacks = service.list_feedbacks()
    if format == "csv":
        csv_buffer = generate_csv(feedbacks)
        return StreamingResponse(csv_buffer, media_type="text/csv", headers={"Content-Disposition": "attachment; filename=feedback.csv"})
    pdf_buffer = generate_pdf(feedbacks, "Patient Feedback")
    return StreamingResponse(pdf_buffer, media_type="application/pdf", headers={"Content-Disposition": "attachment; filename=feedback.pdf"})


@router.get("/feedback/{feedback_id}", response_model=FeedbackRecord)
async def get_feedback_by_id(
    feedback_id: int,
    service: FeedbackService = Depends(get_feedback_service),
):
    """Get a single feedback record."""
    return service.get_feedback_by_id(feedback_id)


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(service: FeedbackService = Depends(get_feedback_service)):
    """
    Dashboard analytics, recomputed over all feedback on every call.

    """
    return AnalyticsResponse(**service.get_analytics())
