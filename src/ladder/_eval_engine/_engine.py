"""Core evaluation engine for contact graphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Generic, TypeVar

from ladder._errors import InvalidHandleError
from ladder._graph import post_order

if TYPE_CHECKING:
    from ladder._graph import ContactGraph
    from ladder._logic import Logic
    from ladder._store import Handle

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class EvaluationResult(Generic[T]):
    """Result of evaluating the subgraph below one contact.

    This is an immutable snapshot: later writes to the reducer do not change
    it.

    Attributes:
        handle: The contact the evaluation started from.
        outputs: Output of every contact reachable from ``handle`` (included).
        folded: Value folded from the children of every internal contact.
            Leaves do not appear here.

    """

    handle: Handle
    outputs: dict[Handle, T] = field(default_factory=dict)
    folded: dict[Handle, T] = field(default_factory=dict)

    @property
    def output(self) -> T:
        """Output of the contact the evaluation started from."""
        return self.outputs[self.handle]

    def get_output(self, handle: Handle) -> T:
        """Get the output of a contact.

        Raises:
            KeyError: If the contact was not reached by this evaluation.

        """
        return self.outputs[handle]


def _fold(program: T, child_outputs: list[T], logic: Logic[T]) -> T:
    """Fold the outputs of an internal contact's children.

    The fold starts from the contact's program value and switches to its
    transition as soon as one child disagrees with it. For booleans this is
    AND when the program is set and OR when it is not.
    """
    for value in child_outputs:
        if value != program:
            return logic.transition(program)
    return program


def evaluate_all(graph: ContactGraph[T], logic: Logic[T], handle: Handle) -> EvaluationResult[T]:
    """Evaluate every contact reachable from ``handle``.

    Contacts are visited leaves first, so each one is computed exactly once
    even when it is shared by several parents through shorts. Nothing is
    cached between calls: the result always reflects the current bits.

    Args:
        graph: The contact graph to evaluate.
        logic: Transition and output rules for the value type.
        handle: Contact to start from (usually the root).

    Returns:
        EvaluationResult with the outputs of the reached contacts.

    Raises:
        InvalidHandleError: If ``handle`` does not exist.

    """
    if handle not in graph:
        raise InvalidHandleError(handle)

    outputs: dict[Handle, T] = {}
    folded: dict[Handle, T] = {}

    for node in post_order(handle, graph.children):
        bits = graph.store.get_bits(node)
        children = graph.children(node)
        if not children:
            outputs[node] = logic.output(bits, leaf=True)
        else:
            value = _fold(bits.program, [outputs[child] for child in children], logic)
            folded[node] = value
            outputs[node] = logic.output(replace(bits, input=value), leaf=False)
        logger.debug("Contact %d -> %r", node, outputs[node])

    return EvaluationResult(handle=handle, outputs=outputs, folded=folded)


def evaluate(graph: ContactGraph[T], logic: Logic[T], handle: Handle) -> T:
    """Compute the output of a single contact from the current bits.

    Leaves apply the logic's leaf rule to their stored bits. Internal contacts
    first fold their children's outputs, then apply the logic's output rule
    with the folded value in place of their input.

    Example:
        >>> from ladder._graph import ContactGraph
        >>> from ladder._logic import BooleanLogic
        >>> graph = ContactGraph(initial=False)
        >>> leaf = graph.add_child(graph.root())
        >>> graph.store.set_input(leaf, True)
        >>> evaluate(graph, BooleanLogic(), graph.root())
        True

    """
    return evaluate_all(graph, logic, handle).output
