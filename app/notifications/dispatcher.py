"""Background dispatch of feedback notifications"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from app.feedback.models import FeedbackRecord
from app.notifications.charts import ChartRenderer
from app.notifications.mailer import EmailNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationJob:
    record: FeedbackRecord
    records: Tuple[FeedbackRecord, ...]


class NotificationDispatcher:
    """
    Renders charts and emails staff for each new record, off the request path.

    Jobs are queued by `notify` and processed one at a time by a worker task.
    Rendering and SMTP run in a worker thread over the job's snapshot of
    records. A failed job is logged and dropped; there are no retries.
    """

    def __init__(self, notifier: EmailNotifier, renderer: ChartRenderer = None):
        self.notifier = notifier
        self.renderer = renderer or ChartRenderer()
        self.queue: "asyncio.Queue[NotificationJob]" = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    async def start(self):
        """Start the worker task"""
        if self._worker is None:
            self._worker = asyncio.create_task(self._run(), name="feedback-notifications")
            logger.info("Notification dispatcher started")

    async def stop(self):
        """Process queued jobs, then stop the worker"""
        if self._worker is None:
            return
        await self.queue.join()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        logger.info("Notification dispatcher stopped")

    def notify(self, record: FeedbackRecord, records) -> None:
        """Queue a notification for a newly created record"""
        self.queue.put_nowait(NotificationJob(record=record, records=tuple(records)))

    def deliver(self, job: NotificationJob) -> None:
        """Render charts and send the email for one job (blocking)"""
        charts = self.renderer.render_all(job.records)
        message = self.notifier.build_message(job.record, charts)
        self.notifier.send(message)

    async def process(self, job: NotificationJob) -> bool:
        """Run one job; failures are logged and never raised"""
        try:
            await asyncio.to_thread(self.deliver, job)
        except Exception as e:
            logger.error(f"Failed to send notification for feedback {job.record.id}: {e}")
            return False
        logger.info(f"Sent notification for feedback {job.record.id}")
        return True

    async def _run(self):
        while True:
            job = await self.queue.get()
            try:
                await self.process(job)
            finally:
                self.queue.task_done()
