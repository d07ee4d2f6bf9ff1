from notifier.catalog.classification import (
    CLASSIFICATIONS,
    EXCLUDED_EVENT_TYPES,
    ChannelType,
    EventCategory,
    EventClassification,
    NotificationPriority,
    classify,
    known_event_types,
    should_notify,
)

__all__ = [
    "CLASSIFICATIONS",
    "EXCLUDED_EVENT_TYPES",
    "ChannelType",
    "EventCategory",
    "EventClassification",
    "NotificationPriority",
    "classify",
    "known_event_types",
    "should_notify",
]
