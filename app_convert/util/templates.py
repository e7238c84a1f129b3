"""
Template loading and rendering utilities using Jinja2.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from app_convert.exceptions import TemplateNotFoundError

# Templates ship inside the package
DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "convert"


class TemplateLoader:
    """
    Loads and renders the Jinja2 templates used for conversion.

    Templates are only ever looked up in a single directory; there is no
    workspace override.
    """

    def __init__(self, template_dir: Path = DEFAULT_TEMPLATE_DIR):
        """
        Initialize template loader.

        Args:
            template_dir: Directory holding the *.j2 templates
        """
        self.template_dir = Path(template_dir)
        self._env: Environment | None = None
        self._template_cache: dict[str, Template] = {}

    @property
    def env(self) -> Environment:
        """
        Get or create Jinja2 environment (cached).

        Returns:
            Cached Jinja2 Environment configured for template loading
        """
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader(str(self.template_dir)),
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
                undefined=StrictUndefined,
            )

        return self._env

    def get_template_path(self, template_name: str) -> Path:
        """
        Get path to template file.

        Args:
            template_name: Template name (e.g., "trigger.js.j2")

        Returns:
            Path to template file
        """
        template_path = self.template_dir / template_name
        if not template_path.is_file():
            raise TemplateNotFoundError(template_name, self.template_dir)
        return template_path

    def load_template(self, template_name: str) -> Template:
        """
        Load a Jinja2 template with caching.

        Args:
            template_name: Template name (e.g., "trigger.js.j2")

        Returns:
            Cached Jinja2 Template object
        """
        if template_name not in self._template_cache:
            # Verify template exists (will raise if not found)
            self.get_template_path(template_name)
            try:
                self._template_cache[template_name] = self.env.get_template(template_name)
            except (OSError, TemplateError) as e:
                raise TemplateNotFoundError(template_name, self.template_dir) from e

        return self._template_cache[template_name]

    def render(self, template_name: str, context: dict) -> str:
        """
        Render a template against a flat context.

        Args:
            template_name: Template name (e.g., "index.js.j2")
            context: Dictionary of template variables

        Returns:
            Rendered text
        """
        template = self.load_template(template_name)
        return template.render(**context)

    def list_available_templates(self) -> list[str]:
        """
        List all available templates.

        Returns:
            Sorted template names relative to the template directory
        """
        if not self.template_dir.exists():
            return []

        return sorted(
            str(template_file.relative_to(self.template_dir))
            for template_file in self.template_dir.rglob("*.j2")
        )
