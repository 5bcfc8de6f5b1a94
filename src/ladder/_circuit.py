"""Declarative circuit descriptions for boolean reducers.

A circuit lists its contacts by name, each under a previously declared
parent, followed by the shorts to add once every contact exists. Building a
circuit produces a :class:`Reducer` over ``bool`` together with the mapping
between contact names and handles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._arrangement import Arrangement
from ._reducer import Reducer

if TYPE_CHECKING:
    from typing import Self

    from ._store import Handle

logger = logging.getLogger(__name__)


class ContactSpec(BaseModel):
    """One contact of a circuit.

    Attributes:
        name: Unique name of the contact.
        parent: Name of the declared parent. Only the root has none.
        arrangement: Series (AND) or parallel (OR) combination; for a leaf
            this is its polarity.
        inverted: State bit; inverts the contact's output.
        input: Initial input bit. Ignored for internal contacts.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    parent: str | None = None
    arrangement: Arrangement = Arrangement.PARALLEL
    inverted: bool = False
    input: bool = False


class ShortSpec(BaseModel):
    """A short edge wiring ``to`` as an extra child of ``from``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")


class CircuitSpec(BaseModel):
    """A complete circuit: contacts in creation order, then shorts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "circuit"
    contacts: list[ContactSpec] = Field(min_length=1)
    shorts: list[ShortSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_references(self) -> Self:
        root, *rest = self.contacts
        if root.parent is not None:
            msg = f"The first contact ({root.name!r}) is the root and cannot have a parent"
            raise ValueError(msg)

        declared: set[str] = {root.name}
        for contact in rest:
            if contact.name in declared:
                msg = f"Duplicate contact name {contact.name!r}"
                raise ValueError(msg)
            if contact.parent is None:
                msg = f"Contact {contact.name!r} has no parent; only the first contact can be the root"
                raise ValueError(msg)
            if contact.parent not in declared:
                msg = f"Contact {contact.name!r} refers to undeclared parent {contact.parent!r}"
                raise ValueError(msg)
            declared.add(contact.name)

        for short in self.shorts:
            for end in (short.source, short.target):
                if end not in declared:
                    msg = f"Short {short.source!r} -> {short.target!r} refers to undeclared contact {end!r}"
                    raise ValueError(msg)
        return self


@dataclass(slots=True)
class Circuit:
    """A boolean reducer with named contacts.

    Attributes:
        name: Name of the circuit.
        reducer: The underlying reducer.
        handles: Contact name to handle.

    """

    name: str
    reducer: Reducer[bool]
    handles: dict[str, Handle] = field(default_factory=dict)

    @property
    def names(self) -> list[str]:
        """Contact names in creation order."""
        by_handle = {handle: name for name, handle in self.handles.items()}
        return [by_handle[handle] for handle in range(self.reducer.node_count)]

    def name_of(self, handle: Handle) -> str:
        for name, candidate in self.handles.items():
            if candidate == handle:
                return name
        msg = f"No contact with handle {handle}"
        raise KeyError(msg)

    def leaf_names(self) -> list[str]:
        """Leaf names in input order."""
        return [self.name_of(handle) for handle in self.reducer.leaves()]

    def to_spec(self) -> CircuitSpec:
        """Capture the current structure and bits as a circuit description."""
        reducer = self.reducer
        graph = reducer.graph
        leaves = set(reducer.leaves())
        contacts = [
            ContactSpec(
                name=self.name_of(contact.handle),
                parent=None if contact.parent is None else self.name_of(contact.parent),
                arrangement=Arrangement.from_program(contact.program),
                inverted=contact.state,
                input=contact.input if contact.handle in leaves else False,
            )
            for contact in graph.store
        ]
        shorts = [
            ShortSpec(source=self.name_of(source), target=self.name_of(target)) for source, target in graph.shorts()
        ]
        return CircuitSpec(name=self.name, contacts=contacts, shorts=shorts)


def build_circuit(spec: CircuitSpec) -> Circuit:
    """Build a named boolean reducer from a circuit description.

    Contacts are created in the order they are listed, so the listing order is
    the program/state ordering, and the order of the leaves among them is the
    input ordering.

    Raises:
        CycleError: If a short would create a cycle.

    """
    reducer: Reducer[bool] = Reducer()
    root, *rest = spec.contacts
    handles: dict[str, Handle] = {root.name: reducer.root()}
    for contact in rest:
        handles[contact.name] = reducer.add_contact(handles[contact.parent])  # type: ignore[index]

    for short in spec.shorts:
        reducer.short(handles[short.source], handles[short.target])

    # Listing order is creation order
    reducer.reprogram([contact.arrangement.program for contact in spec.contacts])
    reducer.reconfigure([contact.inverted for contact in spec.contacts])
    leaves = set(reducer.leaves())
    reducer.reinput([contact.input for contact in spec.contacts if handles[contact.name] in leaves])

    logger.debug(
        "Built circuit %r with %d contacts, %d leaves and %d shorts",
        spec.name,
        reducer.node_count,
        reducer.leaf_count,
        len(spec.shorts),
    )
    return Circuit(name=spec.name, reducer=reducer, handles=handles)
