"""Read-only snapshots of users and resources used while dispatching."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ChannelPreferences:
    email: bool = True
    sms: bool = False
    push: bool = False
    in_app: bool = True
    whatsapp: bool = False

    def updated(self, **flags) -> "ChannelPreferences":
        """Copy with the given flags changed; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in flags.items() if v is not None})


@dataclass(frozen=True)
class Recipient:
    user_id: str
    email: str | None = None
    phone: str | None = None
    push_tokens: tuple[str, ...] = ()
    preferred_language: str = "es"
    timezone: str = "UTC"
    preferences: ChannelPreferences = field(default_factory=ChannelPreferences)
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.user_id


@dataclass(frozen=True)
class ResourceInfo:
    id: str
    name: str
    type: str
    location: str | None = None
    capacity: int | None = None
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class BatchResolution:
    """Outcome of a batch lookup. Callers must consult ``not_found``."""

    found: list = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
