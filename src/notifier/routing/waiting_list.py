"""Routes for waiting-list events."""

from datetime import timedelta

from notifier.routing.base import Route, RouteContext, format_date, format_time


def _hours(minutes) -> int:
    """Whole hours from a minute count; anything non-numeric counts as 0."""
    try:
        return round(float(minutes) / 60)
    except (TypeError, ValueError, OverflowError):
        return 0


class UserJoinedWaitingListRoute(Route):
    event_type = "UserJoinedWaitingList"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        return {
            "resourceName": ctx.resource_name(),
            "position": data.get("position", ""),
            "priority": data.get("priority", ""),
            "estimatedWaitTime": data.get("estimatedWaitTime", ""),
        }


class WaitingListSlotAvailableRoute(Route):
    """The next user in line gets a short window to claim the freed slot."""

    event_type = "WaitingListSlotAvailable"
    recipient_fields = ("nextInLine.userId",)
    resource_field = "availableSlot.resourceId"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        slot = data.get("availableSlot") or {}
        next_in_line = data.get("nextInLine") or {}
        return {
            "resourceName": ctx.resource_name(),
            "slotDate": format_date(slot.get("startTime"), ctx.timezone),
            "slotTime": format_time(slot.get("startTime"), ctx.timezone),
            "position": next_in_line.get("position", ""),
            "waitTime": _hours(next_in_line.get("waitTime")),
            "confirmationTimeLimit": ctx.settings.slot_confirmation_minutes,
        }

    @staticmethod
    def expires_at(data: dict, ctx: RouteContext):
        return ctx.now + timedelta(minutes=ctx.settings.slot_confirmation_minutes)
