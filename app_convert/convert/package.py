"""
Render the package.json manifest of the converted app.
"""

from collections.abc import Mapping

from app_convert.models import LegacyApp, coerce_app
from app_convert.util.naming import kebab_case
from app_convert.util.templates import TemplateLoader

DEFAULT_PLATFORM_CORE_VERSION = "3.0.0"


def render_package_json(
    legacy_app: LegacyApp | Mapping,
    loader: TemplateLoader | None = None,
    platform_core_version: str = DEFAULT_PLATFORM_CORE_VERSION,
) -> str:
    """
    Render package.json from the app's general metadata.

    The package name is the kebab-cased title; the description is copied
    verbatim.
    """
    legacy_app = coerce_app(legacy_app)
    loader = loader or TemplateLoader()
    context = {
        "name": kebab_case(legacy_app.title),
        "description": legacy_app.description,
        "platform_core_version": platform_core_version,
    }
    return loader.render("package.json.j2", context)
