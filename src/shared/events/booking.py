"""Cross-domain event contract for booking lifecycle events.

The availability and resources services publish every domain event
(reservation created, waiting-list slot available, reassignment requested,
maintenance scheduled, ...) wrapped in one envelope. The notifier context
registers it as an external event via domain.register_external_event()
and routes on ``event_type``.
"""

import json
import re
import time
from datetime import UTC, datetime
from uuid import uuid4

from protean.core.event import BaseEvent
from protean.fields import DateTime, Integer, String, Text

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def new_event_id(event_type: str) -> str:
    """Unique id built from the kebab-cased type, epoch millis and a random suffix."""
    prefix = _CAMEL_BOUNDARY.sub("-", event_type).lower()
    return f"{prefix}-{int(time.time() * 1000)}-{uuid4().hex[:9]}"


class BookingEvent(BaseEvent):
    """A domain event raised by the availability or resources service."""

    __version__ = 1

    event_type = String(required=True, max_length=200)
    event_id = String(required=True, max_length=200)
    aggregate_id = String(required=True, max_length=200)
    aggregate_type = String(required=True, max_length=200)
    occurred_at = DateTime(required=True)
    user_id = String(default="system", max_length=200)
    event_version = Integer(default=1)
    event_data = Text()  # JSON object with the event-specific payload

    @classmethod
    def build(
        cls,
        event_type: str,
        aggregate_id: str,
        aggregate_type: str,
        event_data: dict | None = None,
        user_id: str = "system",
        version: int = 1,
    ) -> "BookingEvent":
        return cls(
            event_type=event_type,
            event_id=new_event_id(event_type),
            aggregate_id=aggregate_id,
            aggregate_type=aggregate_type,
            occurred_at=datetime.now(UTC),
            user_id=user_id,
            event_version=version,
            event_data=json.dumps(event_data or {}, default=str),
        )

    def decoded_data(self) -> dict:
        """The decoded event data; anything but a JSON object yields {}."""
        if not self.event_data:
            return {}
        try:
            data = json.loads(self.event_data)
        except (TypeError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}
