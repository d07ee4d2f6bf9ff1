"""Inbound cross-domain event handler — booking events trigger notifications.

Listens on the ``availability::booking`` stream. Every event goes through
the EventRouter; whether it produces a dispatch or a skip is decided there.
Delivery is at-least-once, so an event that already has a result is ignored.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from notifier.domain import notifier
from notifier.notification.result import NotificationResult
from notifier.notification.router import EventRouter
from shared.events.booking import BookingEvent

logger = structlog.get_logger(__name__)

notifier.register_external_event(BookingEvent, "Availability.BookingEvent.v1")


def already_processed(event_id: str) -> bool:
    repo = current_domain.repository_for(NotificationResult)
    try:
        return bool(repo._dao.query.filter(event_id=event_id).all().items)
    except Exception as exc:
        logger.warning("Could not check for an existing result", event_id=event_id, error=str(exc))
        return False


@notifier.event_handler(part_of=NotificationResult, stream_category="availability::booking")
class BookingEventsHandler:
    """Routes booking domain events into notification dispatches."""

    @handle(BookingEvent)
    def on_booking_event(self, event: BookingEvent) -> None:
        if already_processed(event.event_id):
            logger.info("Event already notified", event_id=event.event_id, event_type=event.event_type)
            return

        EventRouter().route(event)
