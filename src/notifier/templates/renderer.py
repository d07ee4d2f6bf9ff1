"""Template rendering — ``{{ name }}`` token substitution.

Rendering is pure: the output depends only on the template and the
variable map. Tokens with no matching variable are left in place.
"""

from notifier.templates.template import TOKEN_PATTERN, RenderedMessage, Template


def _substitute(text: str | None, variables: dict) -> str | None:
    if text is None:
        return None

    def replace(match):
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return TOKEN_PATTERN.sub(replace, text)


def render(template: Template, variables: dict) -> RenderedMessage:
    return RenderedMessage(
        subject=_substitute(template.subject, variables),
        title=_substitute(template.title, variables),
        body=_substitute(template.body, variables),
        html_body=_substitute(template.html_body, variables),
    )


def unresolved_tokens(template: Template, variables: dict) -> set[str]:
    """Tokens the template references that ``variables`` does not supply."""
    return {name for name in template.referenced_variables() if name not in variables}
