"""TemplateRegistry — stores templates keyed by (event type, channel, language, program).

Lookups fall back from a program-scoped template to the general one.
Writes validate the template first and are serialized behind a lock;
readers work off an immutable snapshot and never wait on a writer.
"""

import threading
from dataclasses import replace
from types import MappingProxyType

import structlog
from protean.exceptions import ValidationError

from notifier.catalog import ChannelType
from notifier.templates.template import Template

logger = structlog.get_logger(__name__)

_REQUIRED_FIELDS = ("id", "event_type", "channel", "language", "body")


def _as_channel(value) -> ChannelType | None:
    if isinstance(value, ChannelType):
        return value
    try:
        return ChannelType(value)
    except ValueError:
        return None


def validate_template(template: Template) -> None:
    """Raise ValidationError when a template cannot be stored.

    Checks required fields, channel-specific fields (Email needs a subject,
    Push needs a title) and that every referenced token is declared.
    """
    errors: dict[str, list[str]] = {}

    for name in _REQUIRED_FIELDS:
        if not getattr(template, name):
            errors[name] = ["is required"]

    channel = _as_channel(template.channel)
    if template.channel and channel is None:
        errors["channel"] = [f"Unknown channel: {template.channel}"]
    elif channel is ChannelType.EMAIL and not template.subject:
        errors["subject"] = ["Email templates must have a subject"]
    elif channel is ChannelType.PUSH and not template.title:
        errors["title"] = ["Push templates must have a title"]

    undeclared = template.referenced_variables() - set(template.variables)
    if undeclared:
        errors["variables"] = [f"Template uses undeclared variables: {', '.join(sorted(undeclared))}"]

    if errors:
        raise ValidationError(errors)


class TemplateRegistry:
    def __init__(self):
        self._lock = threading.RLock()
        # (templates by id, template id by key), swapped as one unit
        self._state = (MappingProxyType({}), MappingProxyType({}))

    def get(self, event_type: str, channel, language: str, program_id: str | None = None) -> Template | None:
        channel = _as_channel(channel)
        if channel is None:
            return None

        by_id, index = self._state
        if program_id:
            template_id = index.get((event_type, channel, language, program_id))
            if template_id is not None:
                return by_id[template_id]

        template_id = index.get((event_type, channel, language, None))
        return by_id[template_id] if template_id is not None else None

    def get_by_id(self, template_id: str) -> Template | None:
        return self._state[0].get(template_id)

    def list(self, event_type: str | None = None) -> list[Template]:
        by_id, _ = self._state
        templates = [t for t in by_id.values() if event_type is None or t.event_type == event_type]
        return sorted(
            templates,
            key=lambda t: (t.event_type, t.channel.value, t.language, t.program_id or ""),
        )

    def put(self, template: Template) -> Template:
        if template.program_id is not None and not template.program_id.strip():
            # A blank program is the general template
            template = replace(template, program_id=None)
        validate_template(template)

        with self._lock:
            by_id, index = dict(self._state[0]), dict(self._state[1])

            previous = by_id.pop(template.id, None)
            if previous is not None:
                index.pop(previous.key, None)

            displaced = index.get(template.key)
            if displaced is not None:
                by_id.pop(displaced, None)
                logger.info(
                    "Template replaced by key",
                    replaced_id=displaced,
                    template_id=template.id,
                    event_type=template.event_type,
                )

            by_id[template.id] = template
            index[template.key] = template.id
            self._state = (MappingProxyType(by_id), MappingProxyType(index))

        return template

    def delete(self, template_id: str) -> bool:
        with self._lock:
            by_id, index = dict(self._state[0]), dict(self._state[1])
            template = by_id.pop(template_id, None)
            if template is None:
                return False
            index.pop(template.key, None)
            self._state = (MappingProxyType(by_id), MappingProxyType(index))

        logger.info("Template deleted", template_id=template_id)
        return True

    def __len__(self):
        return len(self._state[0])
