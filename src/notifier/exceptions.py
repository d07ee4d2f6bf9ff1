"""Errors raised inside the dispatch pipeline.

Template authoring problems use ``protean.exceptions.ValidationError``.
Missing recipients, resources and templates are never exceptions: lookups
return ``None`` and the pipeline skips.
"""


class TransportError(Exception):
    """A channel adapter could not hand the message to its provider."""

    def __init__(self, channel: str, reason: str):
        self.channel = channel
        self.reason = reason
        super().__init__(f"{channel} delivery failed: {reason}")


class RoutingError(Exception):
    """An event cannot be turned into a notification payload."""

    def __init__(self, event_type: str, reason: str):
        self.event_type = event_type
        self.reason = reason
        super().__init__(f"Cannot route {event_type}: {reason}")
