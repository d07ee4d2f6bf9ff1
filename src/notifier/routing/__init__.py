"""Route registry — maps event types to their payload-building routes."""

from notifier.routing.base import DefaultRoute, Route
from notifier.routing.reassignment import ReassignmentAppliedRoute, ReassignmentRequestCreatedRoute
from notifier.routing.recurring import (
    RecurringReservationConflictDetectedRoute,
    RecurringReservationCreatedRoute,
)
from notifier.routing.waiting_list import UserJoinedWaitingListRoute, WaitingListSlotAvailableRoute

ROUTE_REGISTRY: dict[str, type[Route]] = {
    route.event_type: route
    for route in (
        RecurringReservationCreatedRoute,
        RecurringReservationConflictDetectedRoute,
        UserJoinedWaitingListRoute,
        WaitingListSlotAvailableRoute,
        ReassignmentRequestCreatedRoute,
        ReassignmentAppliedRoute,
    )
}


def get_route(event_type: str) -> type[Route]:
    """Look up the route for an event type, falling back to DefaultRoute."""
    return ROUTE_REGISTRY.get(event_type, DefaultRoute)
