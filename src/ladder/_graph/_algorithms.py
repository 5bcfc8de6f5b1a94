"""Graph algorithms used by the contact graph and the evaluation engine."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def reachable(start: T, successors: Callable[[T], Iterable[T]]) -> frozenset[T]:
    """Collect every node reachable from ``start`` (excluding ``start`` unless on a cycle).

    Args:
        start: Node to walk from.
        successors: Function returning the direct successors of a node.

    Returns:
        Set of all nodes transitively reachable from ``start``.

    Example:
        >>> edges = {"a": ["b"], "b": ["c"], "c": []}
        >>> sorted(reachable("a", edges.__getitem__))
        ['b', 'c']

    """
    visited: set[T] = set()
    stack = list(successors(start))
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            stack.extend(successors(current))
    return frozenset(visited)


def is_reachable(source: T, target: T, successors: Callable[[T], Iterable[T]]) -> bool:
    """Check whether ``target`` can be reached from ``source``.

    Every node is considered reachable from itself. The walk stops as soon
    as ``target`` is found, so its cost is bounded by the subgraph reachable
    from ``source``.

    Args:
        source: Node to walk from.
        target: Node to look for.
        successors: Function returning the direct successors of a node.

    Returns:
        True if a (possibly empty) path leads from ``source`` to ``target``.

    """
    if source == target:
        return True
    visited: set[T] = {source}
    stack = list(successors(source))
    while stack:
        current = stack.pop()
        if current == target:
            return True
        if current not in visited:
            visited.add(current)
            stack.extend(successors(current))
    return False


def post_order(start: T, successors: Callable[[T], Iterable[T]]) -> list[T]:
    """Order the nodes reachable from ``start`` so successors come first.

    Each node appears exactly once, after all of its successors; ``start`` is
    always last. The graph must be acyclic.

    Args:
        start: Node to walk from.
        successors: Function returning the direct successors of a node.

    Returns:
        List of nodes in dependency order (leaves first).

    Example:
        >>> edges = {"a": ["b", "c"], "b": ["c"], "c": []}
        >>> post_order("a", edges.__getitem__)
        ['c', 'b', 'a']

    """
    order: list[T] = []
    done: set[T] = set()
    # (node, expanded) pairs; a node is emitted the second time it is popped
    stack: list[tuple[T, bool]] = [(start, False)]
    while stack:
        node, expanded = stack.pop()
        if node in done:
            continue
        if expanded:
            done.add(node)
            order.append(node)
            continue
        stack.append((node, True))
        # Reversed so the first successor is visited first
        stack.extend((succ, False) for succ in reversed(list(successors(node))) if succ not in done)
    return order
