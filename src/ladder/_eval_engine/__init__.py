"""Evaluation engine module for ladder.

This module provides pure functions for evaluating contact graphs. The
engine reads the current bits of the store and never writes to it.

Key types:
- EvaluationResult: Outputs of every contact reached by one evaluation
- evaluate: Output of a single contact
- evaluate_all: Outputs of the whole subgraph below a contact
"""

from ._engine import EvaluationResult, evaluate, evaluate_all

__all__ = [
    "EvaluationResult",
    "evaluate",
    "evaluate_all",
]
