"""
Vocabulary mapping between the legacy definition and the file-per-step schema.
"""

DEFAULT_FIELD_TYPE = "string"

# legacy field types -> generated field types
FIELD_TYPES = {
    "unicode": "string",
    "textarea": "text",
    "integer": "integer",
    "float": "number",
    "boolean": "boolean",
    "datetime": "datetime",
    "file": "file",
    "password": "password",
}

# legacy step categories -> generated step categories, in conversion order
STEP_CATEGORIES = {
    "triggers": "trigger",
    "searches": "search",
    "actions": "write",
}

# generated step categories -> output directories
STEP_DIRECTORIES = {
    "trigger": "triggers",
    "search": "searches",
    "write": "writes",
}


def map_field_type(token) -> str:
    """
    Map a legacy field type token to a generated field type.

    The lookup is case-insensitive. Absent, non-string and unknown tokens
    fall back to "string".
    """
    if not token or not isinstance(token, str):
        return DEFAULT_FIELD_TYPE
    return FIELD_TYPES.get(token.lower(), DEFAULT_FIELD_TYPE)


def map_step_category(legacy_category: str) -> str:
    """Map a legacy step category ("actions") to its new name ("write")."""
    return STEP_CATEGORIES[legacy_category]


def step_directory(category: str) -> str:
    """Output directory for a generated step category ("write" -> "writes")."""
    return STEP_DIRECTORIES[category]
