"""Request dependencies resolving lifespan-owned application state"""
from typing import Optional
from fastapi import Request
from app.doctors.repository import DoctorStore
from app.feedback.repository import FeedbackStore
from app.notifications.dispatcher import NotificationDispatcher


def get_feedback_store(request: Request) -> FeedbackStore:
    """Dependency to get the process feedback store."""
    return request.app.state.feedback_store


def get_doctor_store(request: Request) -> DoctorStore:
    return request.app.state.doctor_store


def get_notifier(request: Request) -> Optional[NotificationDispatcher]:
    """Dependency to get the notification dispatcher, if one is running."""
    return getattr(request.app.state, "notifier", None)
