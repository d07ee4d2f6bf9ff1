"""NotificationResult aggregate — the auditable outcome of one dispatch.

One result is created per routed domain event. The dispatcher records
a ChannelResult for every recipient/channel pair it actually attempted,
then finalizes the result, which freezes it and raises
NotificationProcessed.

State Machine:
    PENDING → SENT      (everything attempted was delivered)
    PENDING → PARTIAL   (some deliveries failed)
    PENDING → FAILED    (nothing was delivered)
"""

import json
import time
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from notifier.catalog import ChannelType, NotificationPriority
from notifier.domain import notifier
from notifier.notification.events import NotificationProcessed


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class DispatchStatus(Enum):
    PENDING = "Pending"
    SENT = "Sent"
    PARTIAL = "Partial"
    FAILED = "Failed"


class DeliveryStatus(Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


def new_notification_id() -> str:
    return f"notif-{int(time.time() * 1000)}-{uuid4().hex[:9]}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@notifier.entity(part_of="NotificationResult")
class ChannelResult:
    """Outcome of one delivery attempt to one recipient over one channel."""

    channel: String(choices=ChannelType, required=True)
    recipient_id: Identifier(required=True)
    status: String(choices=DeliveryStatus, required=True)
    message_id: String(max_length=100)
    error: String(max_length=500)
    sent_at: DateTime()

    def as_summary(self) -> dict:
        return {
            "channel": self.channel,
            "recipient_id": str(self.recipient_id),
            "status": self.status,
            "message_id": self.message_id,
            "error": self.error,
            "sent_at": self.sent_at.isoformat() if self.sent_at else None,
        }


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifier.aggregate
class NotificationResult:
    notification_id: Identifier(identifier=True)

    # Source event correlation
    event_id: String(required=True, max_length=200)
    event_type: String(required=True, max_length=200)
    aggregate_id: String(max_length=200)
    priority: String(choices=NotificationPriority)

    status: String(choices=DispatchStatus, default=DispatchStatus.PENDING.value)
    channel_results: HasMany(ChannelResult)
    total_sent: Integer(default=0)
    total_failed: Integer(default=0)

    created_at: DateTime()
    processed_at: DateTime()

    @classmethod
    def create(cls, event_id, event_type, aggregate_id=None, priority=None):
        return cls(
            notification_id=new_notification_id(),
            event_id=event_id,
            event_type=event_type,
            aggregate_id=aggregate_id,
            priority=priority,
            status=DispatchStatus.PENDING.value,
            created_at=datetime.now(UTC),
        )

    def _assert_pending(self):
        if self.status != DispatchStatus.PENDING.value or self.processed_at is not None:
            raise ValidationError(
                {"status": [f"Notification {self.notification_id} was already processed as {self.status}"]}
            )

    def record(self, channel, recipient_id, success, message_id=None, error=None, sent_at=None):
        """Append the outcome of one attempted delivery."""
        self._assert_pending()

        channel = ChannelType(channel)
        self.add_channel_results(
            ChannelResult(
                channel=channel.value,
                recipient_id=recipient_id,
                status=(DeliveryStatus.SUCCESS if success else DeliveryStatus.FAILED).value,
                message_id=message_id,
                error=error,
                sent_at=sent_at,
            )
        )
        if success:
            self.total_sent += 1
        else:
            self.total_failed += 1

    def finalize(self):
        """Compute the overall status, stamp processed_at and raise NotificationProcessed."""
        self._assert_pending()

        if self.total_sent == 0:
            self.status = DispatchStatus.FAILED.value
        elif self.total_failed == 0:
            self.status = DispatchStatus.SENT.value
        else:
            self.status = DispatchStatus.PARTIAL.value
        self.processed_at = datetime.now(UTC)

        self.raise_(
            NotificationProcessed(
                notification_id=self.notification_id,
                event_id=self.event_id,
                event_type=self.event_type,
                aggregate_id=self.aggregate_id,
                priority=self.priority,
                status=self.status,
                total_sent=self.total_sent,
                total_failed=self.total_failed,
                channel_results=json.dumps([cr.as_summary() for cr in self.channel_results]),
                processed_at=self.processed_at,
            )
        )

    @property
    def attempts(self) -> int:
        return self.total_sent + self.total_failed

    def as_summary(self) -> dict:
        return {
            "notification_id": str(self.notification_id),
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "priority": self.priority,
            "status": self.status,
            "total_sent": self.total_sent,
            "total_failed": self.total_failed,
            "channel_results": [cr.as_summary() for cr in self.channel_results],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "processed_at": self.processed_at.isoformat() if self.processed_at else None,
        }
