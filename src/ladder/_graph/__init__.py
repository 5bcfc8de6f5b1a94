"""Graph module providing the contact graph and its algorithms.

This module contains:
- ContactGraph[T]: A rooted DAG of contacts with structural and short edges
- reachable / is_reachable: Depth-first reachability over a successor function
- post_order: Leaves-first ordering used by the evaluation engine
"""

from ._algorithms import is_reachable, post_order, reachable
from ._contact_graph import ContactGraph

__all__ = ["ContactGraph", "is_reachable", "post_order", "reachable"]
