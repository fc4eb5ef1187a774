import pytest
from app.feedback.exceptions import FeedbackValidationException
from app.feedback.ratings import Language, RatingLevel, SatisfactionLevel
from app.feedback.validators import validate_submission


def test_validate_submission_normalizes(valid_payload):
    """Test that a valid payload becomes a typed submission."""
    submission = validate_submission(valid_payload)

    assert submission.general_experience == RatingLevel.EXCELLENT
    assert submission.cost_informed == SatisfactionLevel.NEUTRAL
    assert submission.language == Language.EN
    assert submission.examination_type == ["X-ray image", "Pediatric treatment"]
    assert submission.created_at is None


def test_validate_submission_optional_fields(valid_payload):
    """Test that comments and examination types may be omitted."""
    del valid_payload["comments"]
    del valid_payload["examinationType"]

    submission = validate_submission(valid_payload)

    assert submission.comments is None
    assert submission.examination_type == []


def test_validate_submission_accepts_unknown_examination_label(make_payload):
    """Test that examination labels are not restricted to the form's list."""
    submission = validate_submission(make_payload(examinationType=["Whitening"]))
    assert submission.examination_type == ["Whitening"]


def test_validate_submission_ignores_client_id(make_payload):
    """Test that an id sent by the client is dropped."""
    submission = validate_submission(make_payload(id=42))
    assert not hasattr(submission, "id")


@pytest.mark.parametrize("overrides, field", [
    ({"language": "fr"}, "language"),
    ({"generalExperience": "great"}, "generalExperience"),
    ({"bookingRating": None}, "bookingRating"),
    ({"adequateExplanation": False}, "adequateExplanation"),
    ({"examinationType": "X-ray image"}, "examinationType"),
    ({"comments": 5}, "comments"),
])
def test_validate_submission_rejects(make_payload, overrides, field):
    """Test that invalid fields are reported by name."""
    with pytest.raises(FeedbackValidationException) as exc_info:
        validate_submission(make_payload(**overrides))

    assert exc_info.value.status_code == 400
    assert field in exc_info.value.fields


def test_validate_submission_reports_every_field(valid_payload):
    """Test that all offending fields are listed together."""
    del valid_payload["language"]
    valid_payload["careQuality"] = "ok"
    valid_payload["examinationType"] = ["X-ray image", 3]

    with pytest.raises(FeedbackValidationException) as exc_info:
        validate_submission(valid_payload)

    fields = exc_info.value.fields
    assert "language" in fields
    assert "careQuality" in fields
    assert "examinationType.1" in fields


def test_validate_submission_not_an_object():
    """Test that non-object payloads are rejected."""
    with pytest.raises(FeedbackValidationException) as exc_info:
        validate_submission(None)
    assert exc_info.value.fields == ["body"]
