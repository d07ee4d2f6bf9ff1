"""EventRouter — the entry point from a raw domain event to a dispatch.

Classifies the event, skips what should not be notified, resolves the
event's recipients and resource, builds a NotificationPayload and hands
it to the dispatcher.
"""

from datetime import UTC, datetime

import structlog

from notifier.catalog import EXCLUDED_EVENT_TYPES, classify, should_notify
from notifier.config import get_settings
from notifier.exceptions import RoutingError
from notifier.notification.dispatcher import NotificationDispatcher
from notifier.notification.payload import ChannelConfig, NotificationPayload, Skipped
from notifier.recipient import get_resolver
from notifier.routing import get_route
from notifier.routing.base import RouteContext
from notifier.utils.logging import event_log_context

logger = structlog.get_logger(__name__)


class EventRouter:
    def __init__(self, resolver=None, dispatcher=None, settings=None, clock=None):
        self.resolver = resolver if resolver is not None else get_resolver()
        self.dispatcher = dispatcher if dispatcher is not None else NotificationDispatcher()
        self.settings = settings or get_settings()
        self.clock = clock or (lambda: datetime.now(UTC))

    def route(self, event):
        """Route a BookingEvent. Returns a NotificationResult or Skipped."""
        with event_log_context(event_id=event.event_id, event_type=event.event_type):
            if not should_notify(event.event_type, self.settings.notify_whitelist):
                reason = "excluded" if event.event_type in EXCLUDED_EVENT_TYPES else "unclassified"
                logger.info("Event does not require notification", reason=reason)
                return Skipped(event.event_id, event.event_type, reason)

            try:
                payload = self.build_payload(event)
            except RoutingError as exc:
                logger.warning("Event could not be routed", reason=exc.reason)
                return Skipped(event.event_id, event.event_type, exc.reason)

            logger.info(
                "Event routed",
                recipients=len(payload.recipients),
                channels=[c.type.value for c in payload.channels],
            )
            return self.dispatcher.send(payload)

    def build_payload(self, event) -> NotificationPayload:
        classification = classify(event.event_type)
        route = get_route(event.event_type)
        data = event.decoded_data()

        user_ids = route.recipient_ids(data, event.user_id)
        if not user_ids:
            raise RoutingError(event.event_type, "missing_recipient")

        resolution = self.resolver.resolve_batch(user_ids)
        if not resolution.found:
            raise RoutingError(event.event_type, "no_recipients")

        resource = None
        resource_id = route.resource_id(data)
        if resource_id:
            resource = self.resolver.resolve_resource(resource_id)
        if route.requires_resource and resource is None:
            raise RoutingError(event.event_type, "resource_not_found")

        ctx = RouteContext(
            resolver=self.resolver,
            settings=self.settings,
            now=self.clock(),
            resource=resource,
            recipients=list(resolution.found),
        )
        variables = route.variables(data, ctx)
        if len(resolution.found) == 1:
            variables.setdefault("recipientName", resolution.found[0].display_name)

        program_id = data.get("programId")
        return NotificationPayload(
            event_type=event.event_type,
            event_id=event.event_id,
            aggregate_id=event.aggregate_id,
            priority=classification.priority,
            recipients=tuple(resolution.found),
            template_variables=variables,
            channels=tuple(ChannelConfig(channel, classification.priority) for channel in classification.channels),
            expires_at=route.expires_at(data, ctx),
            program_id=str(program_id) if program_id else None,
        )
