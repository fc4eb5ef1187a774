"""Chart images attached to feedback notifications"""
from io import BytesIO
from typing import Dict, List
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator
from app.feedback.ratings import RatingLevel, count_ratings, count_examination_types
from app.notifications.exceptions import NotificationError

PIE_COLORS = {
    RatingLevel.EXCELLENT.value: "#4CAF50",
    RatingLevel.GOOD.value: "#8BC34A",
    RatingLevel.MEDIUM.value: "#FFC107",
    RatingLevel.WEAK.value: "#FF5722",
}
BAR_COLOR = "#2196F3"
PLACEHOLDER_TEXT = "No feedback yet"


class ChartRenderer:
    """Renders PNG charts over the full feedback record set"""

    def __init__(self, width: float = 6.0, height: float = 4.0, dpi: int = 100):
        self.width = width
        self.height = height
        self.dpi = dpi

    def _new_figure(self):
        fig = Figure(figsize=(self.width, self.height), dpi=self.dpi)
        return fig, fig.subplots()

    def _to_png(self, fig) -> bytes:
        buffer = BytesIO()
        try:
            fig.tight_layout()
            fig.savefig(buffer, format="png")
        except (ValueError, RuntimeError) as e:
            raise NotificationError(f"Chart rendering failed: {e}") from e
        return buffer.getvalue()

    def _placeholder(self, title: str) -> bytes:
        fig, ax = self._new_figure()
        ax.set_axis_off()
        ax.set_title(title)
        ax.text(0.5, 0.5, PLACEHOLDER_TEXT, ha="center", va="center", fontsize=14, color="#888888")
        return self._to_png(fig)

    def render_experience_pie(self, records: List) -> bytes:
        """Pie chart of general experience ratings"""
        title = "General Experience Distribution"
        counts: Dict[str, int] = count_ratings(records, "general_experience")
        if not counts:
            return self._placeholder(title)

        # Keep the rating scale order rather than observation order
        labels = [level.value for level in RatingLevel if level.value in counts]
        fig, ax = self._new_figure()
        ax.pie(
            [counts[label] for label in labels],
            labels=[label.capitalize() for label in labels],
            colors=[PIE_COLORS[label] for label in labels],
            autopct="%1.0f%%",
            startangle=90,
        )
        ax.axis("equal")
        ax.set_title(title)
        return self._to_png(fig)

    def render_examination_bar(self, records: List) -> bytes:
        """Bar chart of examination type counts"""
        title = "Examination Types"
        counts = count_examination_types(records)
        if not counts:
            return self._placeholder(title)

        fig, ax = self._new_figure()
        ax.bar(list(counts.keys()), list(counts.values()), color=BAR_COLOR)
        ax.set_ylabel("Number of Examinations")
        ax.set_title(title)
        ax.yaxis.set_major_locator(MaxNLocator(integer=True))
        ax.tick_params(axis="x", labelrotation=30)
        for tick in ax.get_xticklabels():
            tick.set_horizontalalignment("right")
        return self._to_png(fig)

    def render_all(self, records: List) -> Dict[str, bytes]:
        """Both notification charts keyed by attachment filename"""
        return {
            "experience_distribution.png": self.render_experience_pie(records),
            "examination_types.png": self.render_examination_bar(records),
        }
