"""Exceptions raised by the reducer and its adapters."""


class ReducerError(Exception):
    """Base class for all errors raised by ladder."""


class InvalidHandleError(ReducerError, LookupError):
    """Raised when an operation references a handle that is not in the store."""

    def __init__(self, handle: int) -> None:
        self.handle = handle
        super().__init__(f"No contact with handle {handle}")


class CycleError(ReducerError):
    """Raised when a short would make a contact reachable from itself."""

    def __init__(self, source: int, target: int) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Shorting {source} -> {target} would create a cycle ({source} is reachable from {target})")


class LengthMismatchError(ReducerError, ValueError):
    """Raised when a bit sequence does not match the node or leaf count."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} {what} values, got {actual}")


class ParseError(ReducerError, ValueError):
    """Raised when a string contains a character outside the allowed alphabet."""

    def __init__(self, text: str, position: int, alphabet: str) -> None:
        self.text = text
        self.position = position
        self.alphabet = alphabet
        super().__init__(
            f"Invalid character {text[position]!r} at position {position} (expected one of {alphabet!r})",
        )


class CircuitError(ReducerError):
    """Raised when a circuit description cannot be loaded."""
