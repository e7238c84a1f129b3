"""
Render legacy input fields and sample results as JavaScript object literals.

Malformed field data never raises here: missing types fall back to
"string", short or missing help text gets a visible note appended, and
labels and placeholders are quoted exactly as given.
"""

import math
from collections.abc import Mapping

from app_convert.mapping import FIELD_TYPES, map_field_type
from app_convert.models import LegacyField, LegacyStep, SampleField, as_mapping, keyed_items

MIN_HELP_TEXT_LENGTH = 10

FIELD_INDENT = " " * 6
PROP_INDENT = " " * 8
SAMPLE_INDENT = " " * 4


def pad_help_text(text, min_length: int = MIN_HELP_TEXT_LENGTH) -> str:
    """
    Make help text long enough to pass platform validation.

    Args:
        text: Legacy help text (any value)
        min_length: Minimum accepted length

    Returns:
        The text unchanged when long enough, otherwise the text (if it is a
        string) followed by a note naming the minimum length
    """
    msg = f"(help text must be at least {min_length} characters)"
    if not isinstance(text, str):
        return msg
    if len(text) < min_length:
        return f"{text} {msg}"
    return text


def js_value(value) -> str:
    """
    Render a parsed JSON/YAML value the way JavaScript string conversion would.

    None is "undefined", booleans are lower-case, integral floats drop their
    fraction, arrays join their items with commas (null items as empty) and
    objects become "[object Object]".
    """
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else js_value(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def quote(value) -> str:
    return f"'{js_value(value)}'"


def render_prop(name: str, value: str) -> str:
    return f"{name}: {value}"


def render_field(
    definition: LegacyField | Mapping,
    key: str,
    min_help_text_length: int = MIN_HELP_TEXT_LENGTH,
) -> str:
    """
    Render one input field as an object literal.

    Args:
        definition: LegacyField or the raw legacy field mapping
        key: Field key
        min_help_text_length: Minimum help text length before padding

    Returns:
        Object literal source, braces at 6 spaces and properties at 8
    """
    if not isinstance(definition, LegacyField):
        definition = LegacyField.from_dict(definition, key)

    props = [
        render_prop("key", quote(key)),
        render_prop("label", quote(definition.label)),
        render_prop("helpText", quote(pad_help_text(definition.help_text, min_help_text_length))),
        render_prop("type", quote(map_field_type(definition.type))),
        render_prop("required", js_value(bool(definition.required))),
    ]

    if definition.placeholder:
        props.append(render_prop("placeholder", quote(definition.placeholder)))

    body = ",\n".join(PROP_INDENT + prop for prop in props)
    return f"{FIELD_INDENT}{{\n{body}\n{FIELD_INDENT}}}"


def render_sample_field(spec: SampleField | Mapping, key: str) -> str:
    """
    Render one sample result field.

    The type token is looked up exactly as given (no lower-casing), so a
    token the table does not know renders as 'undefined'.
    """
    if not isinstance(spec, SampleField):
        spec = SampleField.from_dict(spec, key)

    mapped_type = FIELD_TYPES.get(spec.type) if isinstance(spec.type, str) else None

    return (
        f"{FIELD_INDENT}{key}: {{\n"
        f"{PROP_INDENT}type: {quote(mapped_type)},\n"
        f"{PROP_INDENT}label: {quote(spec.label)}\n"
        f"{FIELD_INDENT}}}"
    )


def _sample_fields(definition: LegacyStep | Mapping) -> list[SampleField]:
    if isinstance(definition, LegacyStep):
        return definition.sample_result_fields
    return [
        SampleField.from_dict(value, key)
        for key, value in keyed_items(as_mapping(definition).get("sample_result_fields"))
    ]


def render_sample(definition: LegacyStep | Mapping) -> str:
    """
    Render a step's sample result fields as a ``sample`` object literal.

    Args:
        definition: LegacyStep or raw step mapping with sample_result_fields

    Returns:
        ``sample: { ... }`` source at 4-space indent
    """
    fields = [render_sample_field(spec, spec.key) for spec in _sample_fields(definition)]
    body = ",\n".join(fields)
    return f"{SAMPLE_INDENT}sample: {{\n{body}\n{SAMPLE_INDENT}}}"
