"""Domain events for the NotificationResult aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from notifier.domain import notifier


@notifier.event(part_of="NotificationResult")
class NotificationProcessed:
    """Every recipient/channel pair of a notification has been attempted."""

    __version__ = 1

    notification_id: Identifier(required=True)
    event_id: String(required=True)
    event_type: String(required=True)
    aggregate_id: String()
    priority: String()
    status: String(required=True)
    total_sent: Integer(default=0)
    total_failed: Integer(default=0)
    channel_results: Text()  # JSON list of channel result dicts
    processed_at: DateTime(required=True)
