"""Feedback service layer for business logic"""
import logging
from typing import Any, Dict, List, Optional
from app.feedback.models import FeedbackRecord
from app.feedback.repository import FeedbackStore
from app.feedback.ratings import compute_analytics
from app.feedback.validators import validate_submission
from app.feedback.exceptions import FeedbackNotFoundException
from app.notifications.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service layer for feedback business logic"""

    def __init__(self, store: FeedbackStore, notifier: Optional[NotificationDispatcher] = None):
        self.store = store
        self.notifier = notifier

    def create_feedback(self, payload: Any) -> FeedbackRecord:
        """
        Validate and store a submission, then queue the staff notification.

        Business rules:
        - Invalid submissions are rejected and nothing is stored
        - The record is stored before any notification is attempted
        - Notification problems never fail the submission
        """
        submission = validate_submission(payload)
        feedback = self.store.append(submission)
        logger.info(f"Stored feedback {feedback.id} (language={feedback.language.value})")

        if self.notifier is not None:
            try:
                self.notifier.notify(feedback, self.store.list_all())
            except Exception as e:
                logger.error(f"Could not queue notification for feedback {feedback.id}: {e}")

        return feedback

    def get_feedback_by_id(self, feedback_id: int) -> FeedbackRecord:
        """
        Get feedback by ID.
        """
        feedback = self.store.get_by_id(feedback_id)
        if not feedback:
            raise FeedbackNotFoundException(feedback_id)

        return feedback

    def list_feedbacks(self) -> List[FeedbackRecord]:
        return self.store.list_all()

    def get_analytics(self) -> Dict:
        """Recompute analytics over every stored record"""
        return compute_analytics(self.store.list_all())
