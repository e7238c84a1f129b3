"""
CLI entry point for app-convert.
"""

import logging
from functools import wraps
from pathlib import Path

import typer

from app_convert.exceptions import AppConvertError, format_error_for_cli
from app_convert.util.progress import console

app = typer.Typer(
    name="app-convert",
    help="Convert a legacy app definition into a file-per-step app",
    add_completion=False,
)
logger = logging.getLogger(__name__)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AppConvertError as e:
            # Our custom exceptions with helpful messages
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            # Unexpected errors
            logger.exception("Unexpected error")
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            console.print("\n[yellow]This may be a bug. Please report it.[/yellow]")
            raise typer.Exit(1)

    return wrapper


@app.command()
@handle_errors
def convert(
    definition: Path = typer.Argument(..., help="Legacy app definition export (.json or .yaml)"),
    output_dir: Path = typer.Argument(..., help="Directory to write the converted app into"),
    config_file: Path | None = typer.Option(
        None, "--config", help="Configuration file (default: ./app-convert.yaml if present)"
    ),
    workers: int | None = typer.Option(
        None, "--workers", min=1, help="Number of files rendered and written in parallel"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Convert a legacy app definition."""
    from app_convert.config import load_config
    from app_convert.convert.converter import convert_app
    from app_convert.loader import load_legacy_app
    from app_convert.util.log import setup_logging
    from app_convert.util.progress import operation_status, show_summary

    setup_logging(verbose)

    config = load_config(config_file)
    legacy_app = load_legacy_app(definition)

    with operation_status(f"Converting {legacy_app.title or definition.name}"):
        written = convert_app(legacy_app, output_dir, config=config, max_workers=workers)

    show_summary(
        "Conversion Summary",
        {
            "Triggers": len(legacy_app.triggers),
            "Searches": len(legacy_app.searches),
            "Writes": len(legacy_app.actions),
            "Files written": len(written),
            "Output": str(output_dir),
        },
    )

    console.print("\n[dim]Next steps:[/dim]")
    console.print(f"  cd {output_dir}")
    console.print("  npm install")


@app.command(name="init-config")
@handle_errors
def init_config(
    directory: Path = typer.Argument(Path("."), help="Directory to write app-convert.yaml into"),
):
    """Write a default app-convert.yaml."""
    from app_convert.config import write_default_config

    config_file = write_default_config(directory)
    console.print(f"[green]✓ Wrote configuration to {config_file}[/green]")


@app.command()
def templates():
    """List the bundled conversion templates."""
    from app_convert.util.templates import TemplateLoader

    loader = TemplateLoader()
    available = loader.list_available_templates()

    if not available:
        console.print(f"[yellow]⚠ No templates found in {loader.template_dir}[/yellow]")
        raise typer.Exit(1)

    console.print(f"[bold]Templates in {loader.template_dir}:[/bold]")
    for name in available:
        console.print(f"  {name}")


if __name__ == "__main__":
    app()
