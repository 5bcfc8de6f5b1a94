"""Wiring arrangements of an internal contact."""

from enum import StrEnum
from typing import Self


class Arrangement(StrEnum):
    """How an internal contact combines its children.

    Each member carries a docstring, and maps onto the program bit of a
    boolean reducer.
    """

    SERIES = "series", "All children must conduct (AND). Program bit set."
    PARALLEL = "parallel", "Any child may conduct (OR). Program bit cleared."

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    @property
    def program(self) -> bool:
        """The program bit selecting this arrangement."""
        return self is Arrangement.SERIES

    @classmethod
    def from_program(cls, program: bool) -> Self:
        return cls.SERIES if program else cls.PARALLEL
