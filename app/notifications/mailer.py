"""EmailNotifier: send clinic staff a summary of each new feedback submission.

The message carries the submitted answers as plain text and HTML, with the
experience pie chart and examination bar chart attached as PNG images.
A single delivery attempt is made per submission.
"""
import html
import logging
import smtplib
from email.message import EmailMessage
from typing import Dict, List, Tuple

from app.config import Settings
from app.feedback.models import FeedbackRecord
from app.feedback.ratings import Language
from app.notifications.exceptions import NotificationError
from app.utils.labels import LabelCatalog
from app.utils.timezone import to_clinic_time

logger = logging.getLogger(__name__)

SUBJECT = "New Feedback Submission"
ARABIC_HEADING = "ملخص التقييم بالعربية"
RATING_FIELDS = ["general_experience", "booking_rating", "care_quality"]
SATISFACTION_FIELDS = [
    "adequate_explanation",
    "comfortable_treatment",
    "cost_informed",
    "aftercare_instructions",
]


class EmailNotifier:
    """Builds and sends feedback notification emails over SMTP."""

    def __init__(self, settings: Settings, labels: LabelCatalog = None):
        self.settings = settings
        self.labels = labels or LabelCatalog()

    def describe(self, record: FeedbackRecord, language: str = "en") -> List[Tuple[str, str]]:
        """Human-readable (label, value) pairs for a record.

        Args:
            record: The newly created feedback record
            language: Label language, "en" or "ar"

        Returns:
            Ordered list of display rows
        """
        def q(field):
            return self.labels.question(field, language)

        def a(section, value):
            return self.labels.label(section, value, language)

        rows = [
            (q("date"), to_clinic_time(record.created_at, self.settings.clinic_timezone)),
            (q("language"), a("languages", record.language)),
            (q("examination_type"), ", ".join(record.examination_type) or "-"),
        ]
        for field in RATING_FIELDS:
            rows.append((q(field), a("ratings", getattr(record, field))))
        for field in SATISFACTION_FIELDS:
            rows.append((q(field), a("satisfaction", getattr(record, field))))
        if record.comments:
            rows.append((q("comments"), record.comments))
        return rows

    def _render_text(self, record: FeedbackRecord, rows, arabic_rows=None) -> str:
        lines = [f"New Feedback Received (#{record.id})", ""]
        lines.extend(f"{label}: {value}" for label, value in rows)
        if arabic_rows:
            lines.extend(["", ARABIC_HEADING, ""])
            lines.extend(f"{label}: {value}" for label, value in arabic_rows)
        lines.extend(["", "---", "This is an automated notification from the clinic feedback form."])
        return "\n".join(lines)

    def _render_html(self, record: FeedbackRecord, rows, arabic_rows=None) -> str:
        body = f"<h2>New Feedback Received (#{record.id})</h2>\n{self._html_items(rows)}"
        if arabic_rows:
            body += (
                f"\n<div dir=\"rtl\" lang=\"ar\">\n<h3>{ARABIC_HEADING}</h3>\n"
                f"{self._html_items(arabic_rows)}\n</div>"
            )
        return body

    @staticmethod
    def _html_items(rows) -> str:
        return "\n".join(
            f"<p><strong>{html.escape(label)}:</strong> {html.escape(value)}</p>"
            for label, value in rows
        )

    def build_message(self, record: FeedbackRecord, charts: Dict[str, bytes]) -> EmailMessage:
        """Build the notification email with chart attachments.

        Args:
            record: The newly created feedback record
            charts: PNG bytes keyed by attachment filename

        Returns:
            EmailMessage ready to send
        """
        rows = self.describe(record)
        # Arabic submissions also get the answers as the patient saw them
        arabic_rows = self.describe(record, "ar") if record.language == Language.AR else None

        message = EmailMessage()
        message["Subject"] = SUBJECT
        message["From"] = self.settings.smtp_from_email
        message["To"] = self.settings.recipient_email
        message.set_content(self._render_text(record, rows, arabic_rows))
        message.add_alternative(self._render_html(record, rows, arabic_rows), subtype="html")

        for filename, image in charts.items():
            message.add_attachment(image, maintype="image", subtype="png", filename=filename)
        return message

    def send(self, message: EmailMessage) -> None:
        """Send email via SMTP.

        Raises:
            NotificationError: On SMTP or connection errors
        """
        try:
            with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port, timeout=15) as server:
                if self.settings.smtp_use_tls:
                    server.starttls()
                if self.settings.smtp_user and self.settings.smtp_password:
                    server.login(self.settings.smtp_user, self.settings.smtp_password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"Email dispatch failed: {e}") from e
