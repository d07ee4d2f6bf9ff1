"""NotificationDispatcher — fans a payload out over recipients × channels.

Each recipient/channel pair is an independent unit of work on a bounded
thread pool: expiry check, gating, template lookup, rendering and the
transport call. Workers return plain DeliveryOutcome records and never
touch the domain. The calling thread fans the outcomes in, records them
on the NotificationResult and finalizes it.
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import UTC, datetime

import structlog
from protean.utils.globals import current_domain

from notifier.channel import gate
from notifier.channel.transport import AdapterTransport
from notifier.config import get_settings
from notifier.notification.payload import DeliveryOutcome, NotificationPayload
from notifier.notification.result import NotificationResult
from notifier.templates import get_template_registry
from notifier.templates.renderer import render, unresolved_tokens

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def publish_result(result: NotificationResult) -> None:
    """Persist the result, which publishes NotificationProcessed.

    Best effort: a failure here is logged and never reaches the caller.
    """
    try:
        current_domain.repository_for(NotificationResult).add(result)
    except Exception as exc:
        logger.error(
            "Failed to publish notification result",
            notification_id=str(result.notification_id),
            event_id=result.event_id,
            error=str(exc),
        )


class NotificationDispatcher:
    def __init__(
        self,
        templates=None,
        transport=None,
        max_workers: int | None = None,
        default_language: str | None = None,
        clock=None,
        publisher=None,
    ):
        settings = get_settings()
        self.templates = templates if templates is not None else get_template_registry()
        self.transport = transport if transport is not None else AdapterTransport()
        self.max_workers = max_workers or settings.max_workers
        self.default_language = default_language or settings.default_language
        self.clock = clock or _utcnow
        self.publisher = publisher or publish_result

    def send(self, payload: NotificationPayload) -> NotificationResult:
        result = NotificationResult.create(
            event_id=payload.event_id,
            event_type=payload.event_type,
            aggregate_id=payload.aggregate_id,
            priority=payload.priority.value if payload.priority else None,
        )

        pairs = [
            (recipient, config.type)
            for recipient in payload.recipients
            for config in payload.channels
            if config.enabled
        ]

        if pairs:
            workers = min(self.max_workers, len(pairs))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="notifier-dispatch") as pool:
                futures = {
                    pool.submit(contextvars.copy_context().run, self._attempt, payload, recipient, channel): (
                        recipient,
                        channel,
                    )
                    for recipient, channel in pairs
                }
                for future in as_completed(futures):
                    recipient, channel = futures[future]
                    try:
                        outcome = future.result()
                    except Exception as exc:
                        logger.error(
                            "Delivery attempt crashed",
                            channel=channel.value,
                            recipient_id=recipient.user_id,
                            error=str(exc),
                        )
                        outcome = DeliveryOutcome(channel, recipient.user_id, False, error=str(exc))

                    if outcome is not None:
                        result.record(
                            outcome.channel,
                            outcome.recipient_id,
                            outcome.success,
                            message_id=outcome.message_id,
                            error=outcome.error,
                            sent_at=outcome.sent_at,
                        )

        result.finalize()

        logger.info(
            "Notification processed",
            notification_id=str(result.notification_id),
            event_id=payload.event_id,
            event_type=payload.event_type,
            status=result.status,
            total_sent=result.total_sent,
            total_failed=result.total_failed,
        )

        self.publisher(result)
        return result

    def _attempt(self, payload: NotificationPayload, recipient, channel) -> DeliveryOutcome | None:
        """Try one recipient/channel pair. ``None`` means skipped, not failed."""
        if payload.expires_at is not None and self.clock() >= payload.expires_at:
            logger.warning(
                "Notification expired before delivery",
                channel=channel.value,
                recipient_id=recipient.user_id,
                expires_at=payload.expires_at.isoformat(),
            )
            return None

        if not gate.eligible(recipient, channel):
            logger.debug("Channel not eligible", channel=channel.value, recipient_id=recipient.user_id)
            return None

        language = recipient.preferred_language or self.default_language
        template = self.templates.get(payload.event_type, channel, language, payload.program_id)
        if template is None:
            logger.warning(
                "No template found",
                event_type=payload.event_type,
                channel=channel.value,
                language=language,
                program_id=payload.program_id,
            )
            return None

        missing = unresolved_tokens(template, payload.template_variables)
        if missing:
            logger.warning("Template tokens left unresolved", template_id=template.id, tokens=sorted(missing))

        message = render(template, payload.template_variables)

        try:
            response = self.transport.send(channel, recipient, message, data=dict(payload.template_variables))
        except Exception as exc:
            logger.error(
                "Channel delivery raised",
                channel=channel.value,
                recipient_id=recipient.user_id,
                error=str(exc),
            )
            return DeliveryOutcome(channel, recipient.user_id, False, error=str(exc))

        if response.get("status") == "sent":
            return DeliveryOutcome(
                channel,
                recipient.user_id,
                True,
                message_id=response.get("message_id"),
                sent_at=self.clock(),
            )

        error = response.get("error", "Unknown dispatch error")
        logger.warning("Channel delivery failed", channel=channel.value, recipient_id=recipient.user_id, error=error)
        return DeliveryOutcome(channel, recipient.user_id, False, error=error)
