import pytest
from pydantic import ValidationError
from app.feedback.repository import FeedbackStore
from app.feedback.validators import validate_submission


def test_append_assigns_sequential_ids(make_payload):
    """Test that ids start at 1 and increase by one."""
    store = FeedbackStore()

    first = store.append(validate_submission(make_payload()))
    second = store.append(validate_submission(make_payload(language="ar")))

    assert first.id == 1
    assert second.id == 2
    assert store.count() == 2


def test_append_then_list_all(make_payload):
    """Test that appended records appear once, in insertion order."""
    store = FeedbackStore()
    store.append(validate_submission(make_payload(comments="first")))
    previous_ids = [r.id for r in store.list_all()]

    record = store.append(validate_submission(make_payload(comments="second")))
    records = store.list_all()

    assert len(records) == len(previous_ids) + 1
    assert records[-1] == record
    assert record.id > max(previous_ids)
    assert [r.comments for r in records] == ["first", "second"]


def test_append_defaults_created_at(valid_payload):
    """Test that a missing creation time is filled in."""
    record = FeedbackStore().append(validate_submission(valid_payload))
    assert record.created_at.endswith("+00:00")


def test_records_are_immutable(valid_payload):
    """Test that stored records cannot be modified."""
    record = FeedbackStore().append(validate_submission(valid_payload))

    with pytest.raises(ValidationError):
        record.id = 5
    assert record.examination_type == ("X-ray image", "Pediatric treatment")


def test_list_all_returns_copy(valid_payload):
    """Test that callers cannot change the store through the returned list."""
    store = FeedbackStore()
    store.append(validate_submission(valid_payload))

    store.list_all().clear()

    assert store.count() == 1


def test_get_by_id(valid_payload):
    store = FeedbackStore()
    record = store.append(validate_submission(valid_payload))

    assert store.get_by_id(record.id) == record
    assert store.get_by_id(99) is None
