"""
Render the index module that requires and registers every generated step.
"""

from collections.abc import Mapping

from app_convert.mapping import STEP_CATEGORIES, step_directory
from app_convert.models import LegacyApp, coerce_app
from app_convert.util.naming import camel_case, capitalize, snake_case
from app_convert.util.templates import TemplateLoader


def step_variable_name(key: str, category: str) -> str:
    """Variable holding a step module in the index ("new_contact" -> "newContactTrigger")."""
    return f"{camel_case(key)}{capitalize(camel_case(category))}"


def step_module_path(key: str, category: str) -> str:
    """Module path of a step relative to the app root ("triggers/new_contact")."""
    return f"{step_directory(category)}/{snake_case(key)}"


def build_index_context(legacy_app: LegacyApp | Mapping) -> dict:
    """
    Create template rendering context for the index module.

    Sections follow the category order triggers, searches, actions and keep
    the insertion order of each category's steps.

    Returns:
        Dictionary with "requires", "triggers", "searches" and "writes"
    """
    legacy_app = coerce_app(legacy_app)
    require_lines = []
    context = {}

    for legacy_category, category in STEP_CATEGORIES.items():
        lines = []

        for key in legacy_app.steps(legacy_category):
            var_name = step_variable_name(key, category)
            require_lines.append(
                f"const {var_name} = require('./{step_module_path(key, category)}');"
            )
            lines.append(f"[{var_name}.key]: {var_name},")

        context[step_directory(category)] = "\n".join(lines)

    context["requires"] = "\n".join(require_lines)
    return context


def render_index(legacy_app: LegacyApp | Mapping, loader: TemplateLoader | None = None) -> str:
    """
    Render the index module source.

    Args:
        legacy_app: LegacyApp or the raw legacy definition mapping
        loader: Template loader (defaults to the bundled templates)

    Returns:
        Rendered index.js source
    """
    loader = loader or TemplateLoader()
    return loader.render("index.js.j2", build_index_context(legacy_app))
