"""Shared BDD fixtures and step definitions for the notifier."""

import pytest
from pytest_bdd import given, parsers, then

from notifier.catalog import ChannelType
from notifier.channel import get_channel
from notifier.notification.payload import Skipped
from notifier.recipient.recipient import ChannelPreferences, ResourceInfo
from notifier.templates import get_template_registry
from notifier.templates.registry import TemplateRegistry

_PREFERENCE_FLAGS = {
    ChannelType.EMAIL: "email",
    ChannelType.SMS: "sms",
    ChannelType.PUSH: "push",
    ChannelType.IN_APP: "in_app",
    ChannelType.WHATSAPP: "whatsapp",
}


def _channels(names: str) -> list[ChannelType]:
    return [ChannelType(name.strip()) for name in names.split(",") if name.strip()]


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def templates():
    return get_template_registry()


# ---------------------------------------------------------------------------
# Given steps — directories
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a resource "{resource_id}" named "{name}"'))
def resource_exists(resource_directory, resource_id, name):
    resource_directory.add(ResourceInfo(id=resource_id, name=name, type="LAB", capacity=30))


def _add_user(user_directory, make_recipient, user_id, channels, push_tokens=()):
    flags = {flag: False for flag in _PREFERENCE_FLAGS.values()}
    for channel in _channels(channels):
        flags[_PREFERENCE_FLAGS[channel]] = True
    return user_directory.add(
        make_recipient(user_id, push_tokens=push_tokens, preferences=ChannelPreferences(**flags))
    )


@given(parsers.cfparse('a user "{user_id}" who accepts "{channels}" with a push token'))
def user_with_push_token(user_directory, make_recipient, user_id, channels):
    _add_user(user_directory, make_recipient, user_id, channels, push_tokens=(f"token-{user_id}",))


@given(parsers.cfparse('a user "{user_id}" who accepts "{channels}"'))
def user_accepting(user_directory, make_recipient, user_id, channels):
    _add_user(user_directory, make_recipient, user_id, channels)


# ---------------------------------------------------------------------------
# Given steps — templates and channels
# ---------------------------------------------------------------------------
@given("an empty template registry", target_fixture="templates")
def empty_registry():
    return TemplateRegistry()


@given(parsers.cfparse('templates exist only for "{channels}"'), target_fixture="templates")
def templates_only_for(channels):
    wanted = set(_channels(channels))
    registry = TemplateRegistry()
    for template in get_template_registry().list():
        if template.channel in wanted:
            registry.put(template)
    return registry


@given(parsers.cfparse('the "{channel}" channel is down'))
def channel_down(channel):
    get_channel(channel).configure(should_succeed=False, failure_reason=f"{channel} provider unavailable")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the event is skipped because "{reason}"'))
def event_skipped(outcome, reason):
    assert isinstance(outcome, Skipped)
    assert outcome.reason == reason


@then(parsers.cfparse('the template is rejected on "{field}"'))
def template_rejected(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages
