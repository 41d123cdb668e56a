"""decograph CLI - program graph enrichment tool.

This module provides the command-line interface for decograph, running inner
attribute propagation over parsed program files and inspecting its inputs.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="decograph",
    help="Inner attribute propagation for object program graphs",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False

ProgramFiles = Annotated[
    list[Path],
    typer.Argument(
        help="Program JSON files",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich on stderr."""
    from decograph.core.config import get_config

    level = logging.DEBUG if verbose else get_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with debug logs"),
    ] = False,
) -> None:
    """decograph CLI - program graph enrichment."""
    from pydantic import ValidationError

    set_verbose(verbose)
    try:
        configure_logging(verbose)
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        err_console.print("[yellow]Hint:[/yellow] Check DECOGRAPH_* environment variables and .env")
        print_exception(e)
        raise typer.Exit(1)


@app.command()
def propagate(
    files: ProgramFiles,
    passes: Annotated[
        Optional[int],
        typer.Option("--passes", "-p", min=1, max=64, help="Number of propagation passes"),
    ] = None,
) -> None:
    """Run inner attribute propagation and print the resulting graph.

    Example:
        decograph propagate program.json
        decograph propagate a.json b.json --passes 8
    """
    from decograph.cli._tables import build_graph_nodes_table
    from decograph.services.propagation_service import PropagationService

    service = PropagationService(passes=passes)
    with console.status("[bold blue]Propagating..."):
        result = service.run(files)

    if result.graph is not None:
        console.print(build_graph_nodes_table(result.graph))

    if not result.success:
        err_console.print("[red]Error:[/red] Propagation failed")
        for error in result.errors:
            err_console.print(f"  - {error}")
        raise typer.Exit(1)

    console.print("[green]✓[/green] Propagation completed")
    console.print(f"  Objects: {result.objects_count}")
    console.print(f"  Decorators: {result.decorators_count}")
    console.print(f"  Abstracts: {result.abstracts_count}")
    console.print(f"  Graph nodes: {result.nodes_count}")
    console.print(f"  Edges: {result.edges_count}")
    if result.unresolved_count > 0:
        console.print(f"  [yellow]Unresolved decorators: {result.unresolved_count}[/yellow]")


@app.command()
def inspect(files: ProgramFiles) -> None:
    """List decorators and abstract definitions without propagating.

    Example:
        decograph inspect program.json
    """
    from decograph.cli._tables import build_abstracts_table, build_decorators_table
    from decograph.core.config import get_config
    from decograph.core.serializer import SerializationError, load_program
    from decograph.enrichers.inner_index import collect_decorators
    from decograph.graph.builder import build_graph

    try:
        programs = [load_program(path) for path in files]
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        print_exception(e)
        raise typer.Exit(1)

    graph = build_graph(programs)
    index = collect_decorators(graph, get_config().decorator_name)

    console.print(build_decorators_table(index))
    console.print(build_abstracts_table(index))
    console.print(f"  Decorators: {len(index.decorators)}")
    console.print(f"  Abstracts: {index.abstracts_count}")


if __name__ == "__main__":
    app()
