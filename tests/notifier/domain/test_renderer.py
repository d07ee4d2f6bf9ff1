"""Tests for template rendering."""

from notifier.catalog import ChannelType
from notifier.templates.renderer import render, unresolved_tokens
from notifier.templates.template import Template, extract_tokens


def _template(**overrides):
    defaults = {
        "id": "t-1",
        "event_type": "WaitingListSlotAvailable",
        "channel": ChannelType.EMAIL,
        "language": "es",
        "subject": "Espacio en {{resourceName}}",
        "body": "Hola {{ recipientName }}, {{resourceName}} el {{slotDate}}.",
        "variables": frozenset({"resourceName", "recipientName", "slotDate"}),
    }
    defaults.update(overrides)
    return Template(**defaults)


class TestExtractTokens:
    def test_finds_tokens_with_and_without_spaces(self):
        assert extract_tokens("{{a}} and {{  b }} and {{c }}") == {"a", "b", "c"}

    def test_empty_and_none(self):
        assert extract_tokens("") == set()
        assert extract_tokens(None) == set()

    def test_malformed_markers_are_not_tokens(self):
        assert extract_tokens("{a} {{ two words }} {{}}") == set()


class TestRender:
    def test_substitutes_every_field(self):
        message = render(
            _template(html_body="<b>{{resourceName}}</b>"),
            {"resourceName": "Sala A", "recipientName": "Ana", "slotDate": "2026-03-01"},
        )
        assert message.subject == "Espacio en Sala A"
        assert message.body == "Hola Ana, Sala A el 2026-03-01."
        assert message.html_body == "<b>Sala A</b>"
        assert message.title is None

    def test_non_string_values_are_stringified(self):
        template = _template(body="Posición #{{position}} de {{total}}", variables=frozenset({"position", "total"}))
        assert render(template, {"position": 3, "total": 4.5}).body == "Posición #3 de 4.5"

    def test_unmatched_tokens_are_left_verbatim(self):
        message = render(_template(), {"resourceName": "Sala A"})
        assert message.body == "Hola {{ recipientName }}, Sala A el {{slotDate}}."

    def test_empty_variable_map_leaves_markers(self):
        template = _template()
        message = render(template, {})
        assert message.subject == template.subject
        assert message.body == template.body

    def test_rendering_is_deterministic(self):
        template = _template()
        variables = {"resourceName": "Sala A", "recipientName": "Ana"}
        assert render(template, variables) == render(template, variables)

    def test_extra_variables_are_ignored(self):
        message = render(_template(body="{{resourceName}}"), {"resourceName": "Sala A", "unused": "x"})
        assert message.body == "Sala A"


class TestUnresolvedTokens:
    def test_reports_tokens_without_values(self):
        assert unresolved_tokens(_template(), {"resourceName": "Sala A"}) == {"recipientName", "slotDate"}

    def test_nothing_missing(self):
        variables = {"resourceName": "x", "recipientName": "y", "slotDate": "z"}
        assert unresolved_tokens(_template(), variables) == set()
