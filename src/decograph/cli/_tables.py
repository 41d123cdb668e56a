"""Rich table builders used by the CLI.

Kept separate to reduce duplication and keep the command module smaller.
"""

from __future__ import annotations

from rich.table import Table


def _label(definition) -> str:
    name = definition.name if definition.name is not None else "<anonymous>"
    if definition.line is not None:
        return f"{name} (line {definition.line})"
    return name


def build_graph_nodes_table(graph) -> Table:
    """Build graph node table for `propagate`."""
    table = Table(show_header=True, title="Graph Nodes")
    table.add_column("Object", style="cyan")
    table.add_column("Package")
    table.add_column("Attributes")
    table.add_column("Derived From")
    for node in graph.nodes:
        attributes = ", ".join(
            f"{attr.name}[{attr.depth}]" for attr in node.attributes
        )
        derived = ", ".join(_label(parent.body) for parent in graph.derived_from(node))
        table.add_row(_label(node.body), node.package, attributes, derived)
    return table


def build_decorators_table(index) -> Table:
    """Build decorator listing table for `inspect`."""
    table = Table(show_header=True, title="Decorators")
    table.add_column("Enclosing Object", style="cyan")
    table.add_column("Base")
    table.add_column("Line")
    table.add_column("Package")
    for entry in index.decorators:
        body = entry.node.body
        enclosing = _label(body.parent) if body.parent is not None else "-"
        table.add_row(
            enclosing,
            body.base or "",
            str(body.line) if body.line is not None else "",
            body.package,
        )
    return table


def build_abstracts_table(index) -> Table:
    """Build abstract index table for `inspect`."""
    table = Table(show_header=True, title="Abstracts")
    table.add_column("Name", style="cyan")
    table.add_column("Definitions")
    table.add_column("Packages")
    for name in sorted(index.abstracts):
        nodes = index.abstracts[name]
        packages = sorted({node.package for node in nodes})
        table.add_row(name, str(len(nodes)), ", ".join(packages))
    return table
