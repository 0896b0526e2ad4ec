"""Console output helpers."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(stderr=True)


def print_kv(title: str, data: dict) -> None:
    """
    Print key-value pairs (for schema pull, render to file, config init).

    Args:
        title: Section title
        data: Key-value data
    """
    console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    for k, v in data.items():
        table.add_row(k, str(v))

    console.print(table)
    console.print()


def error(message: str) -> None:
    """Print an error line."""
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)
