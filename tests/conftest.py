import pytest
from unittest.mock import Mock
from httpx import AsyncClient, ASGITransport
from app.main import app
from app.config import Settings
from app.dependencies import get_doctor_store, get_feedback_store, get_notifier
from app.doctors.repository import DoctorStore
from app.feedback.repository import FeedbackStore


@pytest.fixture
def feedback_store():
    """Fresh, empty store for each test."""
    return FeedbackStore()


@pytest.fixture
def notifier():
    """Notifier double recording queued notifications."""
    return Mock()


@pytest.fixture
def settings():
    return Settings(
        smtp_host="smtp.test",
        smtp_password="secret",
        clinic_timezone="Asia/Riyadh",
    )


@pytest.fixture(scope="function")
async def client(feedback_store, notifier):
    """Create a test client with overridden dependencies."""
    app.dependency_overrides[get_feedback_store] = lambda: feedback_store
    app.dependency_overrides[get_doctor_store] = lambda: DoctorStore()
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload():
    """A complete English submission as sent by the form."""
    return {
        "examinationType": ["X-ray image", "Pediatric treatment"],
        "generalExperience": "excellent",
        "bookingRating": "good",
        "careQuality": "excellent",
        "adequateExplanation": "very_satisfied",
        "comfortableTreatment": "satisfied",
        "costInformed": "neutral",
        "aftercareInstructions": "satisfied",
        "comments": "Friendly staff",
        "language": "en",
    }


@pytest.fixture
def make_payload(valid_payload):
    """Build a submission overriding selected fields."""
    def _make(**overrides):
        payload = dict(valid_payload)
        payload.update(overrides)
        return payload
    return _make
