"""Template records and token extraction."""

import re
from dataclasses import dataclass, field

from notifier.catalog import ChannelType

TOKEN_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")

TEXT_FIELDS = ("subject", "title", "body", "html_body")


def extract_tokens(text: str | None) -> set[str]:
    """Names referenced as ``{{ name }}`` in a piece of text."""
    if not text:
        return set()
    return set(TOKEN_PATTERN.findall(text))


@dataclass(frozen=True)
class Template:
    id: str
    event_type: str
    channel: ChannelType
    language: str
    body: str
    program_id: str | None = None
    subject: str | None = None
    title: str | None = None
    html_body: str | None = None
    variables: frozenset[str] = field(default_factory=frozenset)

    @property
    def key(self) -> tuple:
        return (self.event_type, self.channel, self.language, self.program_id)

    def referenced_variables(self) -> set[str]:
        tokens = set()
        for name in TEXT_FIELDS:
            tokens |= extract_tokens(getattr(self, name))
        return tokens

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "event_type": self.event_type,
            "channel": self.channel.value,
            "language": self.language,
            "program_id": self.program_id,
            "subject": self.subject,
            "title": self.title,
            "body": self.body,
            "html_body": self.html_body,
            "variables": sorted(self.variables),
        }


@dataclass(frozen=True)
class RenderedMessage:
    body: str
    subject: str | None = None
    title: str | None = None
    html_body: str | None = None
