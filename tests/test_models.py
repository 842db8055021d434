"""Tests for domain models."""

import json

import pytest
from pydantic import ValidationError

from mention_relay.domain.models import LatestEvent, MediaRecord, WebhookNotification


def test_empty_record_has_no_fields() -> None:
    """Given the initial record, then every field is absent."""
    record = MediaRecord.empty()

    assert record.is_empty
    assert record.media_url is None
    assert record.permalink is None
    assert record.caption is None
    assert record.timestamp is None


def test_record_with_only_media_url_is_valid() -> None:
    """Given only a media URL, then the other fields may stay absent."""
    record = MediaRecord(media_url="https://x/img.jpg")

    assert not record.is_empty
    assert record.caption is None


def test_record_with_details_but_no_media_url_is_rejected() -> None:
    """Given a caption without media URL, when creating a record, then validation fails."""
    with pytest.raises(ValidationError, match="media_url is required"):
        MediaRecord(caption="hello")


def test_record_is_immutable() -> None:
    """Given a record, when assigning a field, then it is rejected."""
    record = MediaRecord(media_url="https://x/img.jpg")

    with pytest.raises(ValidationError):
        record.media_url = "https://x/other.jpg"  # type: ignore[misc]


def test_record_accepts_camel_case_keys() -> None:
    """Given camelCase input, when validating, then fields are populated."""
    record = MediaRecord.model_validate({"mediaUrl": "https://x/img.jpg", "caption": "c"})

    assert record.media_url == "https://x/img.jpg"
    assert record.caption == "c"


def test_latest_event_serializes_with_camel_case_and_nulls() -> None:
    """Given a record, when serializing the event, then the wire schema is produced."""
    event = LatestEvent(
        latest=MediaRecord(
            media_url="https://x/img.jpg",
            permalink="https://instagram.com/p/abc",
            timestamp="2024-05-01T10:00:00+0000",
        )
    )

    payload = json.loads(event.to_json())

    assert payload == {
        "type": "latest",
        "latest": {
            "mediaUrl": "https://x/img.jpg",
            "permalink": "https://instagram.com/p/abc",
            "caption": None,
            "timestamp": "2024-05-01T10:00:00+0000",
        },
    }


def test_latest_event_for_empty_record() -> None:
    """Given the empty record, when serializing, then all record fields are null."""
    payload = json.loads(LatestEvent(latest=MediaRecord.empty()).to_json())

    assert payload["type"] == "latest"
    assert set(payload["latest"].values()) == {None}


def test_webhook_notification_collects_changed_fields() -> None:
    """Given a notification with changes, then the changed field names are listed."""
    notification = WebhookNotification.model_validate(
        {
            "object": "instagram",
            "entry": [
                {"id": "1", "changes": [{"field": "mentions", "value": {"media_id": "9"}}]},
                {"id": "2", "changes": [{"field": "comments"}, "garbage"]},
            ],
        }
    )

    assert notification.object == "instagram"
    assert notification.changed_fields == ["mentions", "comments"]


def test_webhook_notification_rejects_non_object_body() -> None:
    """Given a JSON array body, when validating, then it is rejected."""
    with pytest.raises(ValidationError):
        WebhookNotification.model_validate_json(b"[]")
