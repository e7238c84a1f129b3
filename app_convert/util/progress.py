"""
Progress tracking and reporting utilities using rich.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

console = Console()


@contextmanager
def operation_status(operation: str) -> Iterator[None]:
    """
    Context manager to show operation status.

    Usage:
        with operation_status("Converting app"):
            # do work
            pass

    Args:
        operation: Description of the operation

    Yields:
        None
    """
    console.print(f"[bold blue]{operation}...[/bold blue]")

    try:
        yield
        console.print(f"[green]✓ {operation} complete[/green]")
    except Exception as e:
        console.print(f"[red]✗ {operation} failed: {e}[/red]")
        raise


def report_file_written(file_name: str) -> None:
    """Report a single generated file (starting + done on one line)."""
    console.print(f"  Writing {file_name} [green]✓[/green]")


def show_summary(title: str, items: dict[str, str | int]):
    """
    Show a formatted summary box.

    Args:
        title: Summary title
        items: Dictionary of items to show (key: value pairs)
    """
    from rich.panel import Panel
    from rich.table import Table

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in items.items():
        table.add_row(key, str(value))

    panel = Panel(table, title=f"[bold]{title}[/bold]", border_style="blue")
    console.print(panel)
