"""Relay-logic reducer: a DAG of contacts evaluated into a single output."""

__all__ = [
    "Arrangement",
    "Bits",
    "BooleanLogic",
    "Circuit",
    "CircuitError",
    "CircuitSpec",
    "Contact",
    "ContactGraph",
    "ContactSpec",
    "ContactStore",
    "CycleError",
    "EvaluationResult",
    "Handle",
    "InvalidHandleError",
    "LengthMismatchError",
    "Logic",
    "Output",
    "ParseError",
    "Reducer",
    "ReducerError",
    "ShortSpec",
    "Transition",
    "build_circuit",
    "evaluate",
    "evaluate_all",
    "export_circuit",
    "format_bits",
    "format_symbols",
    "load_circuit",
    "parse_bits",
    "parse_symbols",
]

from ._arrangement import Arrangement
from ._bits import format_bits, format_symbols, parse_bits, parse_symbols
from ._circuit import Circuit, CircuitSpec, ContactSpec, ShortSpec, build_circuit
from ._errors import CircuitError, CycleError, InvalidHandleError, LengthMismatchError, ParseError, ReducerError
from ._eval_engine import EvaluationResult, evaluate, evaluate_all
from ._graph import ContactGraph
from ._io import export_circuit, load_circuit
from ._logic import BooleanLogic, Logic, Output, Transition
from ._reducer import Reducer
from ._store import Bits, Contact, ContactStore, Handle
