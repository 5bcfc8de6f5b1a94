"""Capability protocols that define how values flow through a reducer.

A reducer is generic over the value type ``T`` of its contacts. Two
capabilities decide what the values mean:

- :class:`Transition` provides the neutral value of a fresh contact and the
  value an internal contact adopts when one of its children disagrees with
  its program.
- :class:`Output` turns the bits of a contact into its output value.

:class:`BooleanLogic` implements both for ``bool`` and gives the relay-logic
gate semantics. Any other value domain supplies its own implementation and
reuses the same graph, shorting and ordering machinery.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ._store import Bits

T = TypeVar("T")


@runtime_checkable
class Transition(Protocol[T]):
    """How raw values are produced and mutated."""

    @property
    def neutral(self) -> T:
        """Value given to the three bits of a newly created contact."""
        ...

    def transition(self, value: T) -> T:
        """Return the value that replaces ``value`` when a child disagrees with it."""
        ...


@runtime_checkable
class Output(Protocol[T]):
    """How a contact computes its own output."""

    def output(self, bits: Bits[T], *, leaf: bool) -> T:
        """Compute the output of a contact.

        Args:
            bits: The contact's bits. For an internal contact ``bits.input``
                holds the value folded from its children, not the stored one.
            leaf: Whether the contact has no children.

        """
        ...


@runtime_checkable
class Logic(Transition[T], Output[T], Protocol[T]):
    """Both capabilities together, as consumed by the evaluation engine."""


class BooleanLogic:
    """Relay-logic gate semantics over ``bool``.

    Leaves output ``program ^ input ^ state``. An internal contact folds its
    children with AND when ``program`` is set (series) and with OR otherwise
    (parallel); a set ``state`` inverts the result.

    Example:
        >>> from ladder._store import Bits
        >>> BooleanLogic().output(Bits(program=True, state=True, input=False), leaf=True)
        False

    """

    __slots__ = ()

    @property
    def neutral(self) -> bool:
        return False

    def transition(self, value: bool) -> bool:
        return not value

    def output(self, bits: Bits[bool], *, leaf: bool) -> bool:
        if leaf:
            return bits.program ^ bits.input ^ bits.state
        return bits.input ^ bits.state

    def __repr__(self) -> str:
        return "BooleanLogic()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BooleanLogic)

    def __hash__(self) -> int:
        return hash(BooleanLogic)
