"""In-memory feedback store"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
from app.feedback.models import FeedbackRecord
from app.feedback.schemas import FeedbackSubmission


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class FeedbackStore:
    """
    Append-only store of feedback records, keyed by generated id.

    Records live for the lifetime of the owning application only. Callers
    share one instance per process; mutation happens on the event loop thread.
    """

    def __init__(self):
        self._records: Dict[int, FeedbackRecord] = {}
        self._next_id = 1

    def append(self, submission: FeedbackSubmission) -> FeedbackRecord:
        """Assign the next id (and creation time if absent) and store the record"""
        data = submission.model_dump(exclude={"created_at", "examination_type"})
        record = FeedbackRecord(
            id=self._next_id,
            examination_type=tuple(submission.examination_type),
            created_at=submission.created_at or _utc_now_iso(),
            **data,
        )
        self._records[record.id] = record
        self._next_id += 1
        return record

    def list_all(self) -> List[FeedbackRecord]:
        """All records in insertion order"""
        return list(self._records.values())

    def get_by_id(self, feedback_id: int) -> Optional[FeedbackRecord]:
        """Get feedback by ID"""
        return self._records.get(feedback_id)

    def count(self) -> int:
        return len(self._records)
