"""BDD tests for the template registry."""

from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

from notifier.catalog import ChannelType
from notifier.templates.renderer import render
from notifier.templates.template import Template

scenarios("features/template_registry.feature")


def _template(channel, template_id, event_type, subject):
    return Template(
        id=template_id,
        event_type=event_type,
        channel=ChannelType(channel),
        language="es",
        subject=subject,
        body="El recurso {{resourceName}} entra en mantenimiento.",
        variables=frozenset({"resourceName"}),
    )


@given(
    parsers.cfparse('an "{channel}" template "{template_id}" for "{event_type}" is registered with subject "{subject}"')
)
@when(
    parsers.cfparse('an "{channel}" template "{template_id}" for "{event_type}" is registered with subject "{subject}"')
)
def register_template(templates, channel, template_id, event_type, subject):
    templates.put(_template(channel, template_id, event_type, subject))


@when(parsers.cfparse('an "{channel}" template "{template_id}" for "{event_type}" is registered without a subject'))
def register_without_subject(templates, error, channel, template_id, event_type):
    try:
        templates.put(_template(channel, template_id, event_type, None))
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('a template using the undeclared token "{token}" is registered'))
def register_with_undeclared_token(templates, error, token):
    template = Template(
        id="undeclared",
        event_type="MaintenanceScheduled",
        channel=ChannelType.IN_APP,
        language="es",
        body=f"Respuesta antes de {{{{{token}}}}}",
    )
    try:
        templates.put(template)
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('"{template_id}" is rendered without variables'), target_fixture="rendered")
def render_without_variables(templates, template_id):
    return render(templates.get_by_id(template_id), {})


@then(parsers.cfparse('"{event_type}" over "{channel}" in "{language:w}" resolves to "{template_id}"'))
def resolves_to(templates, event_type, channel, language, template_id):
    assert templates.get(event_type, channel, language).id == template_id


@then(
    parsers.cfparse(
        '"{event_type}" over "{channel}" in "{language}" for program "{program_id}" resolves to "{template_id}"'
    )
)
def resolves_for_program(templates, event_type, channel, language, program_id, template_id):
    assert templates.get(event_type, channel, language, program_id).id == template_id


@then(parsers.cfparse('the rendered subject is "{subject}"'))
def rendered_subject(rendered, subject):
    assert rendered.subject == subject
