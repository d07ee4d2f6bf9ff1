"""Routes for recurring reservation events."""

from notifier.routing.base import Route, RouteContext, format_date, format_time


class RecurringReservationCreatedRoute(Route):
    event_type = "RecurringReservationCreated"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        tz = ctx.timezone
        return {
            "title": data.get("title", ""),
            "resourceName": ctx.resource_name(),
            "startDate": format_date(data.get("startDate"), tz),
            "endDate": format_date(data.get("endDate"), tz),
            "frequency": data.get("frequency", ""),
            "startTime": format_time(data.get("startTime"), tz),
            "endTime": format_time(data.get("endTime"), tz),
            "totalInstances": data.get("totalInstances", 0),
        }


class RecurringReservationConflictDetectedRoute(Route):
    event_type = "RecurringReservationConflictDetected"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        conflicts = data.get("conflictingInstances") or []
        dates = [format_date(c.get("instanceDate"), ctx.timezone) for c in conflicts if isinstance(c, dict)]
        return {
            "title": data.get("title", ""),
            "resourceName": ctx.resource_name(),
            "totalConflicts": data.get("totalConflicts", len(conflicts)),
            "conflictDates": ", ".join(dates),
            "resolutionRequired": "Sí" if data.get("resolutionRequired") else "No",
            "suggestedActions": ", ".join(data.get("suggestedActions") or []),
        }
