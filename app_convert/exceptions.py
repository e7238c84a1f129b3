"""
Custom exceptions for app-convert with helpful error messages.
"""

from pathlib import Path


class AppConvertError(Exception):
    """Base exception for app-convert errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class DefinitionLoadError(AppConvertError):
    """Legacy app definition could not be read or parsed."""

    def __init__(self, path: str, error_details: str):
        message = f"Could not load legacy app definition {path}: {error_details}"
        suggestion = (
            "The definition must be a JSON (.json) or YAML (.yaml, .yml) export\n"
            "whose top level is a mapping with 'general', 'triggers', 'searches'\n"
            "and 'actions' keys:\n"
            f"  ls -l {path}"
        )
        super().__init__(message, suggestion)


class ConfigurationError(AppConvertError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the app-convert.yaml file.\n"
            "You can regenerate the default configuration:\n"
            "  mv app-convert.yaml app-convert.yaml.backup\n"
            "  app-convert init-config .\n\n"
            "Then merge your settings back from the backup."
        )
        super().__init__(message, suggestion)


class GenerationError(AppConvertError):
    """Errors during file generation."""

    pass


class TemplateNotFoundError(GenerationError):
    """A required template is missing or unreadable."""

    def __init__(self, template_name: str, template_dir: str | Path):
        self.template_name = template_name
        message = f"Template '{template_name}' not found in {template_dir}"
        suggestion = (
            "The bundled templates ship with the package. Reinstall app-convert:\n"
            "  pip install --force-reinstall app-convert"
        )
        super().__init__(message, suggestion)


class ConversionError(GenerationError):
    """A render or write task failed while converting an app."""

    def __init__(self, file_name: str, original_error: Exception, written: list[str] = None):
        self.file_name = file_name
        self.original_error = original_error
        self.written = list(written or [])

        message = f"Failed to generate {file_name}: {original_error}"
        if self.written:
            written_list = "\n  - ".join(self.written)
            message += f"\n\nFiles written before the failure:\n  - {written_list}"

        suggestion = (
            "No files were rolled back. Fix the problem and re-run the conversion;\n"
            "existing files in the output directory are overwritten."
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, AppConvertError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"
