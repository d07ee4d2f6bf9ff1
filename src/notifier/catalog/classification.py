"""Event catalog — static classification of booking domain events.

Each known event type maps to exactly one category, a priority, the
default channel set and the audit/confirmation flags. The table is built
once at import and exposed read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class EventCategory(Enum):
    RECURRING_RESERVATION = "RecurringReservation"
    WAITING_LIST = "WaitingList"
    REASSIGNMENT = "Reassignment"
    RESOURCE_MANAGEMENT = "ResourceManagement"
    MAINTENANCE = "Maintenance"
    CATEGORY_MANAGEMENT = "CategoryManagement"
    IMPORT_EXPORT = "ImportExport"
    UNKNOWN = "Unknown"


class NotificationPriority(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ChannelType(Enum):
    EMAIL = "Email"
    SMS = "SMS"
    PUSH = "Push"
    IN_APP = "InApp"
    WHATSAPP = "WhatsApp"


@dataclass(frozen=True)
class EventClassification:
    category: EventCategory
    priority: NotificationPriority
    channels: tuple[ChannelType, ...]
    requires_confirmation: bool = False
    requires_audit: bool = False


# ---------------------------------------------------------------------------
# Classification table
# ---------------------------------------------------------------------------
_RR = EventCategory.RECURRING_RESERVATION
_WL = EventCategory.WAITING_LIST
_RA = EventCategory.REASSIGNMENT
_RM = EventCategory.RESOURCE_MANAGEMENT
_MT = EventCategory.MAINTENANCE
_CM = EventCategory.CATEGORY_MANAGEMENT
_IE = EventCategory.IMPORT_EXPORT

_HIGH = NotificationPriority.HIGH
_MEDIUM = NotificationPriority.MEDIUM
_LOW = NotificationPriority.LOW

_EMAIL = ChannelType.EMAIL
_SMS = ChannelType.SMS
_PUSH = ChannelType.PUSH
_IN_APP = ChannelType.IN_APP

_CLASSIFICATIONS = {
    # Recurring reservations
    "RecurringReservationCreated": EventClassification(_RR, _MEDIUM, (_EMAIL, _IN_APP)),
    "RecurringReservationUpdated": EventClassification(_RR, _MEDIUM, (_EMAIL, _IN_APP)),
    "RecurringReservationCancelled": EventClassification(
        _RR, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True
    ),
    "RecurringReservationInstancesGenerated": EventClassification(_RR, _LOW, (_IN_APP,)),
    "RecurringReservationInstanceConfirmed": EventClassification(_RR, _LOW, (_IN_APP,)),
    "RecurringReservationInstanceCancelled": EventClassification(_RR, _MEDIUM, (_EMAIL, _IN_APP)),
    "RecurringReservationConflictDetected": EventClassification(
        _RR, _HIGH, (_EMAIL, _PUSH, _IN_APP), requires_confirmation=True
    ),
    "RecurringReservationCompleted": EventClassification(_RR, _LOW, (_EMAIL,)),
    "RecurringReservationValidationFailed": EventClassification(_RR, _MEDIUM, (_EMAIL, _IN_APP)),
    # Waiting list
    "UserJoinedWaitingList": EventClassification(_WL, _LOW, (_EMAIL, _IN_APP)),
    "UserLeftWaitingList": EventClassification(_WL, _LOW, (_IN_APP,)),
    "WaitingListSlotAvailable": EventClassification(
        _WL, _HIGH, (_EMAIL, _SMS, _PUSH, _IN_APP), requires_confirmation=True
    ),
    "UserConfirmedWaitingListSlot": EventClassification(_WL, _MEDIUM, (_EMAIL, _IN_APP)),
    "WaitingListSlotExpired": EventClassification(_WL, _MEDIUM, (_EMAIL, _PUSH, _IN_APP)),
    "WaitingListPositionsReordered": EventClassification(_WL, _LOW, (_IN_APP,)),
    "WaitingListPriorityEscalated": EventClassification(_WL, _MEDIUM, (_PUSH, _IN_APP)),
    "WaitingListOptimized": EventClassification(_WL, _LOW, ()),
    "WaitingListBulkNotificationSent": EventClassification(_WL, _LOW, ()),
    "WaitingListPreferencesUpdated": EventClassification(_WL, _LOW, (_IN_APP,)),
    # Reassignment
    "ReassignmentRequestCreated": EventClassification(
        _RA, _HIGH, (_EMAIL, _SMS, _PUSH, _IN_APP), requires_confirmation=True, requires_audit=True
    ),
    "ReassignmentRequestResponded": EventClassification(
        _RA, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True
    ),
    "EquivalentResourcesFound": EventClassification(_RA, _MEDIUM, (_EMAIL, _IN_APP)),
    "ReassignmentRequestProcessed": EventClassification(
        _RA, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True
    ),
    "ReassignmentApplied": EventClassification(
        _RA, _MEDIUM, (_EMAIL, _PUSH, _IN_APP), requires_audit=True
    ),
    "ReassignmentRequestCancelled": EventClassification(
        _RA, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True
    ),
    "ReassignmentRequestEscalated": EventClassification(
        _RA, _HIGH, (_EMAIL, _SMS, _IN_APP), requires_audit=True
    ),
    "ReassignmentSuggestionRejected": EventClassification(_RA, _MEDIUM, (_EMAIL, _IN_APP)),
    "ReassignmentQueueOptimized": EventClassification(_RA, _LOW, ()),
    "BulkReassignmentRequestsProcessed": EventClassification(_RA, _LOW, (), requires_audit=True),
    "ReassignmentRequestExpired": EventClassification(
        _RA, _HIGH, (_EMAIL, _PUSH, _IN_APP), requires_audit=True
    ),
    # Resources
    "ResourceCreated": EventClassification(_RM, _LOW, (_IN_APP,), requires_audit=True),
    "ResourceUpdated": EventClassification(_RM, _LOW, (_IN_APP,), requires_audit=True),
    "ResourceDeleted": EventClassification(_RM, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True),
    "ResourceActivated": EventClassification(_RM, _LOW, (_IN_APP,), requires_audit=True),
    "ResourceDeactivated": EventClassification(
        _RM, _MEDIUM, (_EMAIL, _IN_APP), requires_audit=True
    ),
    # Maintenance
    "MaintenanceScheduled": EventClassification(_MT, _HIGH, (_EMAIL, _IN_APP), requires_audit=True),
    "MaintenanceStarted": EventClassification(_MT, _MEDIUM, (_IN_APP,), requires_audit=True),
    "MaintenanceCompleted": EventClassification(_MT, _LOW, (_IN_APP,), requires_audit=True),
    # Categories
    "CategoryCreated": EventClassification(_CM, _LOW, (_IN_APP,)),
    # Import / export
    "ResourceImportStarted": EventClassification(_IE, _LOW, (_IN_APP,), requires_audit=True),
    "ResourceImportCompleted": EventClassification(
        _IE, _LOW, (_EMAIL, _IN_APP), requires_audit=True
    ),
}

CLASSIFICATIONS = MappingProxyType(_CLASSIFICATIONS)

UNKNOWN_CLASSIFICATION = EventClassification(EventCategory.UNKNOWN, _LOW, (_IN_APP,))

# Internal optimisation events never reach end users
EXCLUDED_EVENT_TYPES = frozenset(
    {
        "WaitingListOptimized",
        "WaitingListBulkNotificationSent",
        "ReassignmentQueueOptimized",
        "BulkReassignmentRequestsProcessed",
    }
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def classify(event_type) -> EventClassification:
    """Classify an event type. Unrecognised input degrades to UNKNOWN."""
    if not isinstance(event_type, str):
        return UNKNOWN_CLASSIFICATION
    return CLASSIFICATIONS.get(event_type, UNKNOWN_CLASSIFICATION)


def should_notify(event_type, whitelist=()) -> bool:
    """Whether an event type warrants a notification at all.

    Excluded types are never notified. UNKNOWN types are notified only
    when listed in ``whitelist``.
    """
    if not isinstance(event_type, str) or event_type in EXCLUDED_EVENT_TYPES:
        return False
    if classify(event_type).category is EventCategory.UNKNOWN:
        return event_type in whitelist
    return True


def known_event_types() -> list[str]:
    return sorted(CLASSIFICATIONS)
