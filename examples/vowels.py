"""A character-valued reducer that answers "does this word contain a vowel?".

Each leaf holds one letter of a three-letter word. A leaf outputs ``'y'`` if
its letter is a vowel and ``'n'`` otherwise. The root starts from its
program ``'n'`` and switches to ``'y'`` as soon as one leaf disagrees.

Run with ``python examples/vowels.py``.
"""

from ladder import Bits, Reducer, parse_symbols

VOWELS = frozenset("aeiouy")


class VowelLogic:
    """Transition and output rules over single characters."""

    @property
    def neutral(self) -> str:
        return "\0"

    def transition(self, value: str) -> str:  # noqa: ARG002
        return "y"

    def output(self, bits: Bits[str], *, leaf: bool) -> str:  # noqa: ARG002
        return "y" if bits.input in VOWELS else "n"


def build() -> Reducer[str]:
    reducer: Reducer[str] = Reducer(VowelLogic())
    for _ in range(3):
        reducer.add_contact(reducer.root())
    reducer.reprogram(["n", "\0", "\0", "\0"])
    return reducer


if __name__ == "__main__":
    reducer = build()
    for word in ("fox", "cat", "psm", "ibm", "dog", "tls"):
        reducer.reinput(parse_symbols(word))
        print(f"{word}: {reducer.output()}")  # noqa: T201
