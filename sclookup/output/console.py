"""Console output formatters using Rich."""

from rich.console import Console
from rich.markup import escape

from ..models import LookupResult, Navigation, ReferencesResult


def print_lookup(result: LookupResult, console: Console):
    """Print lookup entries, numbered for --select, methods with their arguments."""
    if result.was_partial:
        console.print(f"[yellow]No exact match, {len(result.entries)} partial matches:[/yellow]")
    for i, entry in enumerate(result.entries, 1):
        name = escape(entry.signature or entry.display_name)
        if entry.is_class:
            name = f"[bold]{name}[/bold]"
        console.print(f"  [{i}] {name}  [dim]{escape(entry.display_path)}[/dim]")


def print_references(result: ReferencesResult, console: Console):
    """Print decoded references in response order."""
    console.print(f"[bold]References to {escape(result.symbol or '')}:[/bold]")
    if not result.entries:
        console.print("[dim]No references found[/dim]")
        return
    for entry in result.entries:
        console.print(
            f"  {escape(entry.full_name)}  [dim]{escape(entry.display_path)}:{entry.offset}[/dim]"
        )


def print_navigation(nav: Navigation, console: Console):
    console.print(f"{escape(nav.path)}:{nav.position}")
