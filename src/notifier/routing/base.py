"""Route base — how one event type becomes recipients, variables and expiry.

Event payloads are loosely shaped dicts. A route knows which fields of
its event identify the recipients and the resource, and how to turn the
rest into template variables. Types without a dedicated route use the
base behavior.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notifier.recipient.recipient import ResourceInfo


def lookup(data: dict, path: str) -> list:
    """Values found at a dotted path. Lists along the way are expanded, so the result is flat."""
    values = [data]
    for part in path.split("."):
        next_values = []
        for value in values:
            if isinstance(value, dict) and value.get(part) is not None:
                found = value[part]
                next_values.extend(found if isinstance(found, list) else [found])
        values = next_values
    return values


def parse_instant(value) -> datetime | None:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


def _zone(name: str | None) -> tzinfo:
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def format_date(value, tz: str | None = None) -> str:
    moment = parse_instant(value)
    if moment is None:
        return "" if value is None else str(value)
    return moment.astimezone(_zone(tz)).strftime("%Y-%m-%d")


def format_time(value, tz: str | None = None) -> str:
    moment = parse_instant(value)
    if moment is None:
        return "" if value is None else str(value)
    return moment.astimezone(_zone(tz)).strftime("%H:%M")


def format_datetime(value, tz: str | None = None) -> str:
    moment = parse_instant(value)
    if moment is None:
        return "" if value is None else str(value)
    return f"{format_date(moment, tz)} {format_time(moment, tz)}"


@dataclass
class RouteContext:
    """What a route may use while building variables."""

    resolver: object
    settings: object
    now: datetime
    resource: ResourceInfo | None = None
    recipients: list = field(default_factory=list)

    @property
    def timezone(self) -> str | None:
        # Only a single recipient has an unambiguous local time
        if len(self.recipients) == 1:
            return self.recipients[0].timezone
        return None

    def resource_name(self, default: str = "") -> str:
        return self.resource.name if self.resource else default


class Route:
    event_type: str | None = None
    recipient_fields: tuple[str, ...] = ("userId",)
    resource_field: str | None = "resourceId"
    requires_resource = False
    fallback_to_envelope_user = True

    @classmethod
    def recipient_ids(cls, data: dict, envelope_user_id: str | None = None) -> list[str]:
        ids = []
        for path in cls.recipient_fields:
            ids.extend(str(v) for v in lookup(data, path) if v)

        if not ids and cls.fallback_to_envelope_user and envelope_user_id and envelope_user_id != "system":
            ids.append(envelope_user_id)
        return ids

    @classmethod
    def resource_id(cls, data: dict) -> str | None:
        if cls.resource_field is None:
            return None
        found = lookup(data, cls.resource_field)
        return str(found[0]) if found else None

    @staticmethod
    def variables(data: dict, ctx: RouteContext) -> dict:
        """Top-level scalar fields of the payload plus the resource name."""
        variables = {
            key: value for key, value in data.items() if isinstance(value, (str, int, float, bool))
        }
        if ctx.resource is not None:
            variables.setdefault("resourceName", ctx.resource.name)
        return variables

    @staticmethod
    def expires_at(data: dict, ctx: RouteContext) -> datetime | None:
        return None


class DefaultRoute(Route):
    pass
