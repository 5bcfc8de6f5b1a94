"""Rich rendering utilities for circuit commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from ladder._bits import format_bits

if TYPE_CHECKING:
    from rich.console import Console

    from .query import CircuitSummary, TreeNode


def _bit(value: bool) -> str:  # noqa: FBT001
    return "[green]1[/green]" if value else "[red]0[/red]"


def _node_label(node: TreeNode) -> str:
    name = escape(node.name)
    if node.shorted:
        return f"[dim]↪ {name} (short)[/dim] → {_bit(node.output)}"
    if node.leaf:
        kind = "[magenta]leaf[/magenta]"
        details = f"in={_bit(node.input or False)} "
    else:
        kind = f"[cyan]{node.arrangement.value}[/cyan]"
        details = ""
    inverted = " [yellow]inverted[/yellow]" if node.inverted else ""
    return f"[bold]{name}[/bold] {kind}{inverted} {details}→ {_bit(node.output)}"


def render_circuit_tree(root: TreeNode, console: Console) -> None:
    """Render a circuit as a Rich tree.

    Args:
        root: Root of the tree built by get_circuit_tree.
        console: Rich Console to output to.

    """
    tree = Tree(_node_label(root))

    def add_children(branch: Tree, node: TreeNode) -> None:
        for child in node.children:
            add_children(branch.add(_node_label(child)), child)

    add_children(tree, root)
    console.print(tree)


def render_summary(summary: CircuitSummary, console: Console) -> None:
    """Render circuit counts as a Rich panel.

    Args:
        summary: Summary to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Contacts", justify="right")
    table.add_column("Leaves", justify="right", style="magenta")
    table.add_column("Shorts", justify="right", style="yellow")
    table.add_column("Output", justify="right")
    table.add_row(
        str(summary.contact_count),
        str(summary.leaf_count),
        str(summary.short_count),
        _bit(summary.output),
    )
    console.print(
        Panel(
            table,
            title=f"[bold]Circuit: {escape(summary.name)}[/bold]",
            border_style="cyan",
        ),
    )


def render_truth_table(leaf_names: list[str], rows: list[tuple[list[bool], bool]], console: Console) -> None:
    """Render a truth table as a Rich table.

    Args:
        leaf_names: Column headers, one per leaf in input order.
        rows: (inputs, output) pairs.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    for name in leaf_names:
        table.add_column(escape(name), justify="center", style="magenta")
    table.add_column("input", justify="center", style="dim")
    table.add_column("output", justify="center", style="bold")

    for inputs, output in rows:
        table.add_row(*("1" if bit else "0" for bit in inputs), format_bits(inputs), _bit(output))

    console.print(table)
