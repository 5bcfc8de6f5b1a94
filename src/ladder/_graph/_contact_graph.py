"""Contact graph: structural and short edges over the contact store."""

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from ladder._errors import CycleError, InvalidHandleError
from ladder._store import ContactStore, Handle

from ._algorithms import is_reachable, reachable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContactGraph(Generic[T]):
    """A rooted directed acyclic graph of contacts.

    Two edge relations share the same handle space:

    - structural edges, created only when a contact is added under a parent;
    - short edges, added afterwards between existing contacts.

    Both relations are seen identically by :meth:`children`, so a contact that
    only gained children through shorts is internal, not a leaf.

    Attributes:
        store: The arena owning every contact of this graph.

    """

    __slots__ = ("_shorts", "store")

    def __init__(self, initial: T) -> None:
        self.store: ContactStore[T] = ContactStore(initial)
        self._shorts: dict[Handle, list[Handle]] = {}

    def root(self) -> Handle:
        """Return the handle of the root contact (always 0)."""
        return 0

    def add_child(self, parent: Handle) -> Handle:
        """Create a new contact as a structural child of ``parent``.

        Raises:
            InvalidHandleError: If ``parent`` does not exist.

        """
        return self.store.create(parent)

    def short(self, source: Handle, target: Handle) -> None:
        """Add ``target`` as an additional child of ``source``.

        Args:
            source: Contact that gains a child.
            target: Contact wired under ``source``.

        Raises:
            InvalidHandleError: If either handle does not exist.
            CycleError: If ``source`` is reachable from ``target``. The graph
                is left unchanged.

        """
        for handle in (source, target):
            if handle not in self.store:
                raise InvalidHandleError(handle)

        if is_reachable(target, source, self.children):
            raise CycleError(source, target)

        if target in self.children(source):
            logger.debug("Short %d -> %d already present", source, target)
            return

        self._shorts.setdefault(source, []).append(target)
        logger.debug("Shorted %d -> %d", source, target)

    def children(self, handle: Handle) -> list[Handle]:
        """Return the children of a contact.

        Structural children come first in insertion order, followed by the
        short children in the order the shorts were added.

        Raises:
            InvalidHandleError: If ``handle`` does not exist.

        """
        structural = self.store.contact(handle).children
        return [*structural, *self._shorts.get(handle, ())]

    def parent(self, handle: Handle) -> Handle | None:
        """Return the declared (structural) parent, None for the root."""
        return self.store.contact(handle).parent

    def is_leaf(self, handle: Handle) -> bool:
        """Check whether a contact has no children of either kind."""
        return not self.store.contact(handle).children and not self._shorts.get(handle)

    def leaves(self) -> list[Handle]:
        """Return every leaf in creation order."""
        return [contact.handle for contact in self.store if self.is_leaf(contact.handle)]

    def shorts(self) -> list[tuple[Handle, Handle]]:
        """Return every short edge as ``(source, target)`` pairs.

        Pairs are grouped by source in creation order, and in insertion order
        within a source.
        """
        return [(source, target) for source in sorted(self._shorts) for target in self._shorts[source]]

    def descendants(self, handle: Handle) -> frozenset[Handle]:
        """Return every contact reachable from ``handle`` through child edges."""
        self.store.contact(handle)
        return reachable(handle, self.children)

    def is_reachable(self, source: Handle, target: Handle) -> bool:
        """Check whether ``target`` is ``source`` or one of its descendants."""
        for handle in (source, target):
            if handle not in self.store:
                raise InvalidHandleError(handle)
        return is_reachable(source, target, self.children)

    def __len__(self) -> int:
        """Return the number of contacts in the graph."""
        return len(self.store)

    def __contains__(self, handle: object) -> bool:
        return handle in self.store

    def __iter__(self) -> Iterator[Handle]:
        return (contact.handle for contact in self.store)
