"""Circuit query functions for CLI commands.

This module provides pure functions for inspecting a circuit.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product
from typing import TYPE_CHECKING

from ladder._arrangement import Arrangement

if TYPE_CHECKING:
    from ladder._circuit import Circuit
    from ladder._eval_engine import EvaluationResult

MAX_TRUTH_TABLE_LEAVES = 16


class TooManyLeavesError(Exception):
    """Raised when a truth table would have too many rows to print."""

    def __init__(self, leaf_count: int) -> None:
        self.leaf_count = leaf_count
        super().__init__(
            f"Circuit has {leaf_count} leaves; truth tables are limited to {MAX_TRUTH_TABLE_LEAVES}",
        )


@dataclass(frozen=True, slots=True)
class CircuitSummary:
    """Counts describing a circuit's shape."""

    name: str
    contact_count: int
    leaf_count: int
    short_count: int
    output: bool


@dataclass(slots=True)
class TreeNode:
    """A contact in the circuit tree for rendering."""

    name: str
    arrangement: Arrangement
    inverted: bool
    output: bool
    leaf: bool
    input: bool | None = None
    shorted: bool = False
    children: list[TreeNode] = field(default_factory=list)


def get_circuit_summary(circuit: Circuit) -> CircuitSummary:
    reducer = circuit.reducer
    return CircuitSummary(
        name=circuit.name,
        contact_count=reducer.node_count,
        leaf_count=reducer.leaf_count,
        short_count=len(reducer.graph.shorts()),
        output=reducer.output(),
    )


def get_circuit_tree(circuit: Circuit, result: EvaluationResult[bool] | None = None) -> TreeNode:
    """Build the circuit tree for rendering.

    Structural children are nested under their parent. Short children appear
    under their short source too, marked as shorted and without their own
    subtree (it is already shown under the structural parent).

    Args:
        circuit: The circuit to render.
        result: Evaluation of the root. Computed when not given.

    Returns:
        The root TreeNode.

    """
    reducer = circuit.reducer
    graph = reducer.graph
    if result is None:
        result = reducer.evaluate_all()

    def build(handle: int, *, shorted: bool = False) -> TreeNode:
        contact = graph.store.contact(handle)
        leaf = graph.is_leaf(handle)
        node = TreeNode(
            name=circuit.name_of(handle),
            arrangement=Arrangement.from_program(contact.program),
            inverted=contact.state,
            output=result.get_output(handle),
            leaf=leaf,
            input=contact.input if leaf else None,
            shorted=shorted,
        )
        if shorted:
            return node
        structural = set(contact.children)
        for child in graph.children(handle):
            node.children.append(build(child, shorted=child not in structural))
        return node

    return build(reducer.root())


def truth_table(circuit: Circuit) -> list[tuple[list[bool], bool]]:
    """Evaluate the circuit for every combination of leaf inputs.

    Rows are ordered like binary counting over the leaves, first leaf most
    significant. The circuit's own inputs are restored afterwards.

    Raises:
        TooManyLeavesError: If the circuit has more than MAX_TRUTH_TABLE_LEAVES leaves.

    """
    reducer = circuit.reducer
    if reducer.leaf_count > MAX_TRUTH_TABLE_LEAVES:
        raise TooManyLeavesError(reducer.leaf_count)

    saved = reducer.input()
    rows: list[tuple[list[bool], bool]] = []
    try:
        for combination in product((False, True), repeat=reducer.leaf_count):
            inputs = list(combination)
            reducer.reinput(inputs)
            rows.append((inputs, reducer.output()))
    finally:
        reducer.reinput(saved)
    return rows
