"""CSV and PDF exports of stored feedback"""
import re
from io import BytesIO
from pathlib import Path
from typing import List, Tuple
import arabic_reshaper
import matplotlib
import pandas as pd
from bidi.algorithm import get_display
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from app.feedback.models import FeedbackRecord
from app.utils.labels import LabelCatalog

EXPORT_FORMATS = ["csv", "pdf"]

# DejaVu Sans ships with matplotlib and covers Arabic
FONT_DIR = Path(matplotlib.get_data_path()) / "fonts" / "ttf"
PDF_FONT = "DejaVuSans"
PDF_FONT_BOLD = "DejaVuSans-Bold"
BODY_SIZE = 10
TITLE_SIZE = 16
LEADING = 14
MARGIN = 50

ARABIC_CHARS = re.compile(r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF]")
LATIN_CHARS = re.compile(r"[A-Za-z]")


def _value(field) -> str:
    return getattr(field, "value", field) or ""


def generate_csv(feedbacks: List[FeedbackRecord]) -> BytesIO:
    """Generate CSV file from feedback records"""
    data = []
    for feedback in feedbacks:
        data.append({
            "ID": feedback.id,
            "Created At": feedback.created_at,
            "Language": _value(feedback.language),
            "Examination Types": "; ".join(feedback.examination_type),
            "General Experience": _value(feedback.general_experience),
            "Booking Rating": _value(feedback.booking_rating),
            "Care Quality": _value(feedback.care_quality),
            "Adequate Explanation": _value(feedback.adequate_explanation),
            "Comfortable Treatment": _value(feedback.comfortable_treatment),
            "Cost Informed": _value(feedback.cost_informed),
            "Aftercare Instructions": _value(feedback.aftercare_instructions),
            "Comments": feedback.comments or "",
        })
    df = pd.DataFrame(data, columns=[
        "ID", "Created At", "Language", "Examination Types", "General Experience",
        "Booking Rating", "Care Quality", "Adequate Explanation", "Comfortable Treatment",
        "Cost Informed", "Aftercare Instructions", "Comments",
    ])
    buffer = BytesIO()
    df.to_csv(buffer, index=False)
    buffer.seek(0)
    return buffer


def register_fonts():
    """Register the PDF fonts with reportlab, once per process"""
    registered = pdfmetrics.getRegisteredFontNames()
    for name, filename in ((PDF_FONT, "DejaVuSans.ttf"), (PDF_FONT_BOLD, "DejaVuSans-Bold.ttf")):
        if name not in registered:
            pdfmetrics.registerFont(TTFont(name, str(FONT_DIR / filename)))


def is_right_to_left(text: str) -> bool:
    """True when the first letter of the text is Arabic"""
    arabic = ARABIC_CHARS.search(text)
    if not arabic:
        return False
    latin = LATIN_CHARS.search(text)
    return latin is None or arabic.start() < latin.start()


def _hard_break(line: str, font_size: float, max_width: float) -> List[str]:
    """Split a line with no usable spaces at character boundaries"""
    pieces, current = [], ""
    for char in line:
        if current and pdfmetrics.stringWidth(current + char, PDF_FONT, font_size) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def wrap_text(text: str, font_size: float, max_width: float) -> List[str]:
    """
    Wrap text to the given width and put each line in visual order.

    Arabic is reshaped into its joined letter forms before measuring, and
    reordered per line afterwards so wrapped lines read right to left.
    """
    register_fonts()
    has_arabic = ARABIC_CHARS.search(text) is not None
    logical = arabic_reshaper.reshape(text) if has_arabic else text

    lines = []
    for line in simpleSplit(logical, PDF_FONT, font_size, max_width) or [""]:
        if pdfmetrics.stringWidth(line, PDF_FONT, font_size) > max_width:
            lines.extend(_hard_break(line, font_size, max_width))
        else:
            lines.append(line)

    if has_arabic:
        lines = [get_display(line) for line in lines]
    return lines


def feedback_lines(feedback: FeedbackRecord, labels: LabelCatalog, max_width: float) -> List[Tuple[str, bool]]:
    """Display lines for one record as (text, right_aligned) pairs"""
    rows = [
        f"#{feedback.id}  {feedback.created_at}  ({labels.label('languages', feedback.language)})",
        f"Examinations: {', '.join(feedback.examination_type) or '-'}",
        (
            f"Experience: {labels.label('ratings', feedback.general_experience)}  "
            f"Booking: {labels.label('ratings', feedback.booking_rating)}  "
            f"Care: {labels.label('ratings', feedback.care_quality)}"
        ),
        (
            f"Explanation: {labels.label('satisfaction', feedback.adequate_explanation)}  "
            f"Comfort: {labels.label('satisfaction', feedback.comfortable_treatment)}"
        ),
        (
            f"Cost informed: {labels.label('satisfaction', feedback.cost_informed)}  "
            f"Aftercare: {labels.label('satisfaction', feedback.aftercare_instructions)}"
        ),
    ]
    if feedback.comments:
        rows.append("Comments:")
        rows.append(feedback.comments)

    lines = []
    for row in rows:
        rtl = is_right_to_left(row)
        lines.extend((line, rtl) for line in wrap_text(row, BODY_SIZE, max_width))
    return lines


def generate_pdf(feedbacks: List[FeedbackRecord], title: str, labels: LabelCatalog = None) -> BytesIO:
    """Generate PDF file from feedback records, one block per record"""
    register_fonts()
    labels = labels or LabelCatalog()
    buffer = BytesIO()
    page_width, page_height = letter
    left, right = MARGIN, page_width - MARGIN
    pdf = canvas.Canvas(buffer, pagesize=letter)

    pdf.setFont(PDF_FONT_BOLD, TITLE_SIZE)
    pdf.drawString(left, page_height - MARGIN, title)
    y = page_height - MARGIN - 2 * LEADING

    def new_page():
        pdf.showPage()
        return page_height - MARGIN

    for feedback in feedbacks:
        lines = feedback_lines(feedback, labels, right - left)
        # Keep at least the header and ratings of a record together
        if y - min(len(lines), 3) * LEADING < MARGIN:
            y = new_page()

        for text, rtl in lines:
            if y < MARGIN:
                y = new_page()
            pdf.setFont(PDF_FONT, BODY_SIZE)
            if rtl:
                pdf.drawRightString(right, y, text)
            else:
                pdf.drawString(left, y, text)
            y -= LEADING

        pdf.setLineWidth(0.5)
        pdf.line(left, y + LEADING / 2, right, y + LEADING / 2)
        y -= LEADING

    pdf.save()
    buffer.seek(0)
    return buffer
