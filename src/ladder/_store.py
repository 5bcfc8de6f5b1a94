"""Arena that owns every contact of a reducer."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar

from ._errors import InvalidHandleError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Handle: TypeAlias = int


@dataclass(frozen=True, slots=True)
class Bits(Generic[T]):
    """Snapshot of the three values held by a contact."""

    program: T
    state: T
    input: T


@dataclass(slots=True)
class Contact(Generic[T]):
    """A single node of the reducer.

    Contacts never reference each other directly: the parent and the
    structural children are stored as handles into the owning store.

    Attributes:
        handle: Position of the contact in creation order.
        program: Program bit (leaf polarity, or series/parallel selection).
        state: State bit (normal or inverted wiring).
        input: Input bit. Only meaningful for leaves.
        parent: Handle of the declared parent, None for the root.
        children: Structural children in insertion order.

    """

    handle: Handle
    program: T
    state: T
    input: T
    parent: Handle | None = None
    children: list[Handle] = field(default_factory=list)

    @property
    def bits(self) -> Bits[T]:
        return Bits(program=self.program, state=self.state, input=self.input)


class ContactStore(Generic[T]):
    """Owns all contacts and hands out stable integer handles.

    The root (handle 0) is allocated by the constructor; every other contact
    is created as the declared child of an existing one. Contacts are never
    removed.
    """

    __slots__ = ("_contacts", "_initial")

    def __init__(self, initial: T) -> None:
        self._initial = initial
        self._contacts: list[Contact[T]] = [Contact(handle=0, program=initial, state=initial, input=initial)]

    def create(self, parent: Handle, initial: T | None = None) -> Handle:
        """Allocate a new contact as the declared child of ``parent``.

        Args:
            parent: Handle of an existing contact.
            initial: Value for the three bits. Defaults to the store's neutral value.

        Returns:
            The handle of the new contact.

        Raises:
            InvalidHandleError: If ``parent`` does not exist.

        """
        owner = self.contact(parent)
        value = self._initial if initial is None else initial
        handle = len(self._contacts)
        self._contacts.append(Contact(handle=handle, program=value, state=value, input=value, parent=parent))
        owner.children.append(handle)
        logger.debug("Created contact %d under %d", handle, parent)
        return handle

    def contact(self, handle: Handle) -> Contact[T]:
        """Return the contact stored at ``handle``.

        Raises:
            InvalidHandleError: If ``handle`` does not exist.

        """
        if handle not in self:
            raise InvalidHandleError(handle)
        return self._contacts[handle]

    def get_bits(self, handle: Handle) -> Bits[T]:
        return self.contact(handle).bits

    def set_program(self, handle: Handle, value: T) -> None:
        self.contact(handle).program = value

    def set_state(self, handle: Handle, value: T) -> None:
        self.contact(handle).state = value

    def set_input(self, handle: Handle, value: T) -> None:
        self.contact(handle).input = value

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, handle: object) -> bool:
        # bool is an int subclass but never a valid handle
        return isinstance(handle, int) and not isinstance(handle, bool) and 0 <= handle < len(self._contacts)

    def __iter__(self) -> Iterator[Contact[T]]:
        return iter(self._contacts)
