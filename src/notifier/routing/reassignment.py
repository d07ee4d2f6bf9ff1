"""Routes for reassignment events."""

from notifier.routing.base import Route, RouteContext, format_datetime, parse_instant


def _criteria(data: dict) -> dict:
    raw = data.get("criteria") or {}
    return {
        "capacity_tolerance_percent": raw.get("capacityTolerancePercent", 20),
        "required_features": raw.get("requiredFeatures") or [],
        "preferred_features": raw.get("preferredFeatures") or [],
        "exclude_resource_ids": raw.get("excludeResourceIds") or [],
        "limit": raw.get("limit", 5),
    }


class ReassignmentRequestCreatedRoute(Route):
    event_type = "ReassignmentRequestCreated"
    recipient_fields = ("requestedBy",)
    resource_field = "originalResourceId"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        new_resource_name = "Por determinar"

        suggested_id = data.get("suggestedResourceId")
        if suggested_id:
            suggested = ctx.resolver.resolve_resource(suggested_id)
            if suggested is not None:
                new_resource_name = suggested.name
        elif ctx.resource is not None:
            equivalents = ctx.resolver.find_equivalents(ctx.resource.id, _criteria(data))
            if equivalents:
                new_resource_name = equivalents[0].name

        deadline = parse_instant(data.get("responseDeadline"))
        if deadline is not None:
            response_deadline = format_datetime(deadline, ctx.timezone)
        else:
            response_deadline = "Sin límite"

        return {
            "resourceName": ctx.resource_name(),
            "reason": data.get("reason", ""),
            "newResourceName": new_resource_name,
            "priority": data.get("priority", ""),
            "responseDeadline": response_deadline,
        }

    @staticmethod
    def expires_at(data: dict, ctx: RouteContext):
        return parse_instant(data.get("responseDeadline"))


class ReassignmentAppliedRoute(Route):
    event_type = "ReassignmentApplied"
    recipient_fields = ("requestedBy",)
    resource_field = "finalResourceId"
    requires_resource = True
    fallback_to_envelope_user = False

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        tz = ctx.timezone
        return {
            "newResourceName": ctx.resource_name(),
            "newStartTime": format_datetime(data["newStartTime"], tz) if data.get("newStartTime") else "Mismo horario",
            "newEndTime": format_datetime(data["newEndTime"], tz) if data.get("newEndTime") else "Mismo horario",
            "compensationApplied": data.get("compensationApplied") or "Ninguna",
            "newReservationId": data.get("newReservationId", ""),
        }
