"""String adapters for reducer bit sequences.

Boolean reducers read and write ``'0'``/``'1'`` strings, one character per
contact (or per leaf for inputs). Character-valued reducers use one symbol per
character, optionally restricted to an alphabet.
"""

from collections.abc import Iterable

from ._errors import ParseError

BIT_ALPHABET = "01"


def parse_bits(text: str) -> list[bool]:
    """Parse a string of ``'0'`` and ``'1'`` characters.

    Example:
        >>> parse_bits("0110")
        [False, True, True, False]

    Raises:
        ParseError: On any other character.

    """
    bits: list[bool] = []
    for position, char in enumerate(text):
        if char not in BIT_ALPHABET:
            raise ParseError(text, position, BIT_ALPHABET)
        bits.append(char == "1")
    return bits


def format_bits(bits: Iterable[bool]) -> str:
    """Format booleans as a ``'0'``/``'1'`` string."""
    return "".join("1" if bit else "0" for bit in bits)


def parse_symbols(text: str, alphabet: str | None = None) -> list[str]:
    """Split a string into one symbol per character.

    Args:
        text: The symbols, one character each.
        alphabet: Allowed characters. Any character is accepted when None.

    Raises:
        ParseError: If a character is not in ``alphabet``.

    """
    if alphabet is not None:
        for position, char in enumerate(text):
            if char not in alphabet:
                raise ParseError(text, position, alphabet)
    return list(text)


def format_symbols(symbols: Iterable[str]) -> str:
    return "".join(symbols)
