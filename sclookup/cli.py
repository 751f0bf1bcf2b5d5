"""Main CLI application."""

import logging
import sys
from pathlib import Path
from typing import Optional

import msgspec
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .graph import IntrospectionIndex
from .models import LookupStatus, Navigation, ReferencesStatus
from .queries import LookupQuery, ReferencesQuery
from .output import (
    print_json,
    print_lookup,
    print_references,
    print_navigation,
    lookup_to_dict,
    references_to_dict,
)

app = typer.Typer(
    name="sclookup",
    help="Look up class and method definitions in an introspection snapshot",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

INDEX_HELP = "Path to introspection snapshot JSON"

# Loaded indexes, keyed by snapshot path
_indexes: dict[Optional[Path], IntrospectionIndex] = {}


def get_index(index_path: Optional[Path]) -> IntrospectionIndex:
    """Load or return cached index.

    Without a snapshot path the index is empty and reports not ready.
    """
    if index_path in _indexes:
        return _indexes[index_path]

    if index_path is None:
        index = IntrospectionIndex()
    else:
        if not index_path.exists():
            err_console.print(f"[red]Error: snapshot not found: {index_path}[/red]")
            raise typer.Exit(1)
        try:
            index = IntrospectionIndex.load(index_path)
        except (msgspec.DecodeError, ValueError) as e:
            err_console.print(f"[red]Error: invalid snapshot {index_path}: {e}[/red]")
            raise typer.Exit(1)

    _indexes[index_path] = index
    return index


def _not_ready(json_output: bool, **context):
    if json_output:
        print_json({"error": "Introspection data not yet available", **context})
    else:
        console.print("[red]Introspection data not yet available[/red]")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Look up class and method definitions and decode references."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@app.command()
def lookup(
    query: str = typer.Argument(..., help="Class name, method name, or fragment"),
    index_path: Optional[Path] = typer.Option(
        None, "--index", "-i", envvar="SCLOOKUP_INDEX", help=INDEX_HELP
    ),
    select: Optional[int] = typer.Option(
        None, "--select", "-n", min=1, help="Act on the N-th entry (1-based)"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Look up a class (with its ancestors) or a method definition."""
    index = get_index(index_path)
    lookup_query = LookupQuery(index)
    result = lookup_query.execute(query)

    if result.status is LookupStatus.INDEX_NOT_READY:
        _not_ready(json_output, query=query)

    if result.status is LookupStatus.EMPTY:
        if json_output:
            print_json({"error": "No result for query", "query": query})
        else:
            console.print(f"[red]No result for query: {escape(query)}[/red]")
        raise typer.Exit(1)

    if select is not None:
        if select > len(result.entries):
            message = f"No entry {select}, found {len(result.entries)}"
            if json_output:
                print_json({"error": message, "query": query})
            else:
                console.print(f"[red]{message}[/red]")
            raise typer.Exit(1)
        selection = lookup_query.select(result, result.entries[select - 1])
        if isinstance(selection, Navigation):
            if json_output:
                print_json(selection)
            else:
                print_navigation(selection, console)
            return
        result = selection

    if json_output:
        print_json(lookup_to_dict(result))
    else:
        print_lookup(result, console)


@app.command()
def references(
    payload: Optional[Path] = typer.Argument(
        None, help="File with the references response; stdin when omitted or '-'"
    ),
    index_path: Optional[Path] = typer.Option(
        None, "--index", "-i", envvar="SCLOOKUP_INDEX", help=INDEX_HELP
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Decode a references response produced by the language process."""
    index = get_index(index_path)

    if payload is None or str(payload) == "-":
        data = sys.stdin.buffer.read()
    elif not payload.exists():
        err_console.print(f"[red]Error: payload not found: {payload}[/red]")
        raise typer.Exit(1)
    else:
        data = payload.read_bytes()

    result = ReferencesQuery(index).execute(data)

    if result.status is ReferencesStatus.INDEX_NOT_READY:
        _not_ready(json_output)

    if result.status is ReferencesStatus.MALFORMED:
        if json_output:
            print_json(references_to_dict(result))
        else:
            console.print(f"[red]Malformed references response: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)

    if json_output:
        print_json(references_to_dict(result))
    else:
        print_references(result, console)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
