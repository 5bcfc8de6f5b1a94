"""Reducer facade: ordered bit sequences in, a single output value out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from ._errors import LengthMismatchError
from ._eval_engine import EvaluationResult, evaluate, evaluate_all
from ._graph import ContactGraph
from ._logic import BooleanLogic, Logic

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ._store import Handle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Reducer(Generic[T]):
    """A hierarchy of contacts reduced to a single output value.

    The reducer starts with only the root contact (handle 0). Contacts are
    added under existing ones and never removed; shorts add extra child edges
    between existing contacts.

    Sequences passed to :meth:`reprogram` and :meth:`reconfigure` cover every
    contact in creation order, root included. Sequences passed to
    :meth:`reinput` cover the leaves only, again in creation order.

    Example:
        >>> reducer = Reducer()
        >>> series = reducer.add_contact(reducer.root())
        >>> reducer.add_contact(series)
        2
        >>> reducer.add_contact(series)
        3
        >>> reducer.reprogram([False, True, False, False])
        >>> reducer.reinput([True, True])
        >>> reducer.output()
        True

    """

    __slots__ = ("_graph", "_logic")

    def __init__(self, logic: Logic[T] | None = None) -> None:
        self._logic: Logic[T] = logic if logic is not None else cast("Logic[T]", BooleanLogic())
        self._graph: ContactGraph[T] = ContactGraph(self._logic.neutral)

    @property
    def graph(self) -> ContactGraph[T]:
        return self._graph

    @property
    def logic(self) -> Logic[T]:
        return self._logic

    # -- structure ----------------------------------------------------------

    def root(self) -> Handle:
        """Return the handle of the root contact."""
        return self._graph.root()

    def add_contact(self, parent: Handle) -> Handle:
        """Add a contact under ``parent`` and return its handle.

        Raises:
            InvalidHandleError: If ``parent`` does not exist.

        """
        return self._graph.add_child(parent)

    add_gate = add_contact

    def short(self, source: Handle, target: Handle) -> None:
        """Wire ``target`` as an additional child of ``source``.

        Raises:
            InvalidHandleError: If either handle does not exist.
            CycleError: If the edge would create a cycle.

        """
        self._graph.short(source, target)

    def children(self, handle: Handle) -> list[Handle]:
        return self._graph.children(handle)

    def leaves(self) -> list[Handle]:
        """Return the leaf handles in creation order (the input ordering)."""
        return self._graph.leaves()

    @property
    def node_count(self) -> int:
        return len(self._graph)

    @property
    def leaf_count(self) -> int:
        return len(self._graph.leaves())

    # -- writes -------------------------------------------------------------

    def _write(
        self,
        what: str,
        handles: Sequence[Handle],
        values: Sequence[T],
        setter: Callable[[Handle, T], None],
    ) -> None:
        values = list(values)
        if len(values) != len(handles):
            raise LengthMismatchError(what, expected=len(handles), actual=len(values))
        for handle, value in zip(handles, values, strict=True):
            setter(handle, value)
        logger.debug("Wrote %d %s values", len(values), what)

    def reprogram(self, values: Sequence[T]) -> None:
        """Overwrite the program bit of every contact.

        Raises:
            LengthMismatchError: If ``values`` does not cover every contact.
                Nothing is written in that case.

        """
        self._write("program", range(self.node_count), values, self._graph.store.set_program)

    def reconfigure(self, values: Sequence[T]) -> None:
        """Overwrite the state bit of every contact.

        Raises:
            LengthMismatchError: If ``values`` does not cover every contact.
                Nothing is written in that case.

        """
        self._write("state", range(self.node_count), values, self._graph.store.set_state)

    def reinput(self, values: Sequence[T]) -> None:
        """Overwrite the input bit of every leaf.

        Raises:
            LengthMismatchError: If ``values`` does not cover every leaf.
                Nothing is written in that case.

        """
        self._write("input", self.leaves(), values, self._graph.store.set_input)

    # -- reads --------------------------------------------------------------

    def configuration(self) -> list[T]:
        """Return the state bit of every contact in creation order."""
        return [contact.state for contact in self._graph.store]

    def program_state(self) -> list[T]:
        """Return the program bit of every contact in creation order."""
        return [contact.program for contact in self._graph.store]

    program = program_state

    def input(self) -> list[T]:
        """Return the input bit of every leaf in creation order."""
        store = self._graph.store
        return [store.contact(handle).input for handle in self.leaves()]

    def evaluate(self, handle: Handle) -> T:
        """Compute the output of any contact from the current bits."""
        return evaluate(self._graph, self._logic, handle)

    def evaluate_all(self) -> EvaluationResult[T]:
        """Compute the output of every contact reachable from the root."""
        return evaluate_all(self._graph, self._logic, self.root())

    def output(self) -> T:
        """Compute the output of the root from the current bits."""
        return self.evaluate(self.root())

    def __repr__(self) -> str:
        return f"Reducer(logic={self._logic!r}, contacts={self.node_count}, leaves={self.leaf_count})"
