"""Transfer records passed between the router, the dispatcher and its workers.

These are plain frozen dataclasses, never Protean objects, so worker
threads can use them without a domain context.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from notifier.catalog import ChannelType, NotificationPriority
from notifier.recipient.recipient import Recipient


@dataclass(frozen=True)
class ChannelConfig:
    type: ChannelType
    priority: NotificationPriority
    enabled: bool = True


@dataclass(frozen=True)
class NotificationPayload:
    """Everything the dispatcher needs for one event. Built once, consumed once."""

    event_type: str
    event_id: str
    aggregate_id: str
    priority: NotificationPriority
    recipients: tuple[Recipient, ...]
    template_variables: Mapping = field(default_factory=lambda: MappingProxyType({}))
    channels: tuple[ChannelConfig, ...] = ()
    scheduled_at: datetime | None = None
    expires_at: datetime | None = None
    program_id: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "recipients", tuple(self.recipients))
        object.__setattr__(self, "channels", tuple(self.channels))
        object.__setattr__(self, "template_variables", MappingProxyType(dict(self.template_variables)))


@dataclass(frozen=True)
class DeliveryOutcome:
    channel: ChannelType
    recipient_id: str
    success: bool
    message_id: str | None = None
    error: str | None = None
    sent_at: datetime | None = None


@dataclass(frozen=True)
class Skipped:
    """An event the router decided not to notify about."""

    event_id: str
    event_type: str
    reason: str
