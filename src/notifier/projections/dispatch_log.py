"""DispatchLog — one audit row per processed notification."""

from protean.core.projector import on
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.notification.events import NotificationProcessed
from notifier.notification.result import NotificationResult


@notifier.projection
class DispatchLog:
    notification_id: Identifier(identifier=True, required=True)
    event_id: String(required=True, max_length=200)
    event_type: String(required=True, max_length=200)
    aggregate_id: String(max_length=200)
    priority: String()
    status: String(required=True)
    total_sent: Integer(default=0)
    total_failed: Integer(default=0)
    processed_at: DateTime()


@notifier.projector(projector_for=DispatchLog, aggregates=[NotificationResult])
class DispatchLogProjector:
    @on(NotificationProcessed)
    def on_notification_processed(self, event):
        current_domain.repository_for(DispatchLog).add(
            DispatchLog(
                notification_id=event.notification_id,
                event_id=event.event_id,
                event_type=event.event_type,
                aggregate_id=event.aggregate_id,
                priority=event.priority,
                status=event.status,
                total_sent=event.total_sent,
                total_failed=event.total_failed,
                processed_at=event.processed_at,
            )
        )
