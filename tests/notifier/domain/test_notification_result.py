"""Tests for the NotificationResult aggregate — recording, status and freezing."""

import json
from datetime import UTC, datetime

import pytest
from protean.exceptions import ValidationError

from notifier.catalog import ChannelType
from notifier.notification.events import NotificationProcessed
from notifier.notification.result import DeliveryStatus, DispatchStatus, NotificationResult


def _result():
    return NotificationResult.create(
        event_id="evt-1",
        event_type="WaitingListSlotAvailable",
        aggregate_id="wl-1",
        priority="High",
    )


class TestCreation:
    def test_starts_pending(self):
        result = _result()
        assert result.status == DispatchStatus.PENDING.value
        assert result.total_sent == 0
        assert result.total_failed == 0
        assert result.created_at is not None
        assert result.processed_at is None

    def test_notification_id_format(self):
        assert str(_result().notification_id).startswith("notif-")

    def test_ids_are_unique(self):
        assert _result().notification_id != _result().notification_id


class TestRecording:
    def test_success_and_failure_counts(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", True, message_id="email-1", sent_at=datetime.now(UTC))
        result.record(ChannelType.SMS, "u-1", False, error="Gateway down")

        assert result.total_sent == 1
        assert result.total_failed == 1
        assert len(result.channel_results) == 2
        statuses = {cr.channel: cr.status for cr in result.channel_results}
        assert statuses == {"Email": DeliveryStatus.SUCCESS.value, "SMS": DeliveryStatus.FAILED.value}

    def test_channel_value_accepted(self):
        result = _result()
        result.record("Push", "u-1", True)
        assert result.channel_results[0].channel == "Push"


class TestFinalize:
    def test_all_delivered_is_sent(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", True)
        result.record(ChannelType.PUSH, "u-1", True)
        result.finalize()
        assert result.status == DispatchStatus.SENT.value
        assert result.processed_at is not None

    def test_mixed_is_partial(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", True)
        result.record(ChannelType.PUSH, "u-1", False, error="boom")
        result.finalize()
        assert result.status == DispatchStatus.PARTIAL.value

    def test_all_failed_is_failed(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", False, error="boom")
        result.finalize()
        assert result.status == DispatchStatus.FAILED.value

    def test_nothing_attempted_is_not_sent(self):
        result = _result()
        result.finalize()
        assert result.status == DispatchStatus.FAILED.value
        assert result.attempts == 0

    def test_raises_processed_event_with_full_result(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", True, message_id="email-1")
        result.finalize()

        event = result._events[-1]
        assert isinstance(event, NotificationProcessed)
        assert event.notification_id == result.notification_id
        assert event.status == DispatchStatus.SENT.value
        assert event.total_sent == 1
        channel_results = json.loads(event.channel_results)
        assert channel_results[0]["channel"] == "Email"
        assert channel_results[0]["message_id"] == "email-1"

    def test_frozen_after_processing(self):
        result = _result()
        result.finalize()
        with pytest.raises(ValidationError):
            result.record(ChannelType.EMAIL, "u-1", True)
        with pytest.raises(ValidationError):
            result.finalize()

    def test_summary(self):
        result = _result()
        result.record(ChannelType.EMAIL, "u-1", True)
        result.finalize()
        summary = result.as_summary()
        assert summary["status"] == "Sent"
        assert summary["channel_results"][0]["recipient_id"] == "u-1"
