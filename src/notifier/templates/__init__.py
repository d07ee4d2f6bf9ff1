"""Template registry singleton.

The process shares one registry. It is seeded with the built-in
templates on first use unless NOTIFIER_SEED_DEFAULT_TEMPLATES is off.
"""

from notifier.config import get_settings
from notifier.templates.defaults import seed_default_templates
from notifier.templates.registry import TemplateRegistry

_registry: TemplateRegistry | None = None


def get_template_registry() -> TemplateRegistry:
    global _registry
    if _registry is None:
        registry = TemplateRegistry()
        if get_settings().seed_default_templates:
            seed_default_templates(registry)
        _registry = registry
    return _registry


def reset_template_registry():
    """Drop the registry singleton (useful for testing)."""
    global _registry
    _registry = None
