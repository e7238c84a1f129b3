"""
Render a single trigger, search or write module.
"""

from collections.abc import Mapping

from app_convert.convert.fields import MIN_HELP_TEXT_LENGTH, render_field, render_sample
from app_convert.models import LegacyStep
from app_convert.util.naming import camel_case, capitalize, snake_case
from app_convert.util.templates import TemplateLoader


def build_step_context(
    definition: LegacyStep | Mapping,
    key: str,
    min_help_text_length: int = MIN_HELP_TEXT_LENGTH,
) -> dict:
    """
    Create template rendering context for one step.

    Args:
        definition: LegacyStep or the raw legacy step mapping
        key: Step key as written in the legacy definition
        min_help_text_length: Minimum help text length before padding

    Returns:
        Dictionary of template variables
    """
    if not isinstance(definition, LegacyStep):
        definition = LegacyStep.from_dict(definition, key)

    fields = [
        render_field(field, field.key, min_help_text_length) for field in definition.fields
    ]
    sample = render_sample(definition) + ",\n" if definition.sample_result_fields else ""

    return {
        "key": snake_case(key),
        "camel": camel_case(key),
        "noun": capitalize(key),
        "lower_noun": key.lower(),
        "fields": ",\n".join(fields),
        "sample": sample,
    }


def render_step(
    category: str,
    definition: LegacyStep | Mapping,
    key: str,
    loader: TemplateLoader | None = None,
    min_help_text_length: int = MIN_HELP_TEXT_LENGTH,
) -> str:
    """
    Render the module source for one step.

    Args:
        category: Generated step category ("trigger", "search" or "write")
        definition: LegacyStep or the raw legacy step mapping
        key: Step key
        loader: Template loader (defaults to the bundled templates)
        min_help_text_length: Minimum help text length before padding

    Returns:
        Rendered module source

    Raises:
        TemplateNotFoundError: If the category template cannot be read
    """
    loader = loader or TemplateLoader()
    context = build_step_context(definition, key, min_help_text_length)
    return loader.render(f"{category}.js.j2", context)
