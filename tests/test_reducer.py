"""Tests for the Reducer facade."""

from itertools import product

import pytest

from ladder import (
    Bits,
    BooleanLogic,
    CycleError,
    InvalidHandleError,
    LengthMismatchError,
    Reducer,
    format_bits,
    parse_bits,
    parse_symbols,
)


@pytest.fixture
def xor_reducer() -> Reducer[bool]:
    """The six-contact XOR circuit, programmed but not yet configured."""
    reducer: Reducer[bool] = Reducer()
    series_0 = reducer.add_gate(reducer.root())
    parallel_1 = reducer.add_gate(series_0)
    series_1 = reducer.add_gate(series_0)
    input_0 = reducer.add_gate(parallel_1)
    input_1 = reducer.add_gate(parallel_1)
    reducer.short(series_1, input_0)
    reducer.short(series_1, input_1)
    reducer.reprogram(parse_bits("010100"))
    return reducer


def _and_reducer() -> Reducer[bool]:
    reducer: Reducer[bool] = Reducer()
    series = reducer.add_contact(reducer.root())
    reducer.add_contact(series)
    reducer.add_contact(series)
    reducer.reprogram([False, True, False, False])
    return reducer


class TestReducerConstruction:
    """Tests for a freshly constructed reducer."""

    def test_only_root(self) -> None:
        reducer: Reducer[bool] = Reducer()
        assert reducer.root() == 0
        assert reducer.node_count == 1
        assert reducer.leaf_count == 1
        assert reducer.leaves() == [0]

    def test_neutral_bits(self) -> None:
        reducer: Reducer[bool] = Reducer()
        assert reducer.input() == [False]
        assert reducer.configuration() == [False]
        assert reducer.program_state() == [False]
        assert reducer.output() is False

    def test_default_logic(self) -> None:
        assert Reducer().logic == BooleanLogic()

    def test_repr(self) -> None:
        assert repr(Reducer()) == "Reducer(logic=BooleanLogic(), contacts=1, leaves=1)"


class TestReducerStructure:
    """Tests for add_contact and short."""

    def test_add_contact_grows_sequences(self) -> None:
        reducer: Reducer[bool] = Reducer()
        reducer.add_contact(reducer.root())
        assert len(reducer.input()) == 1
        assert len(reducer.configuration()) == 2

        series = reducer.add_contact(reducer.root())
        assert len(reducer.input()) == 2
        assert len(reducer.configuration()) == 3

        reducer.add_contact(series)
        assert len(reducer.input()) == 2
        assert len(reducer.configuration()) == 4
        assert reducer.output() is False

    def test_add_gate_is_add_contact(self) -> None:
        assert Reducer.add_gate is Reducer.add_contact

    def test_add_contact_unknown_parent(self) -> None:
        reducer: Reducer[bool] = Reducer()
        with pytest.raises(InvalidHandleError):
            reducer.add_contact(3)

    def test_short_cycle(self, xor_reducer: Reducer[bool]) -> None:
        with pytest.raises(CycleError):
            xor_reducer.short(4, 3)
        with pytest.raises(CycleError):
            xor_reducer.short(3, 0)

    def test_short_makes_leaf_internal(self) -> None:
        reducer: Reducer[bool] = Reducer()
        a = reducer.add_contact(reducer.root())
        b = reducer.add_contact(reducer.root())
        assert reducer.leaves() == [a, b]
        reducer.short(a, b)
        assert reducer.leaves() == [b]
        assert reducer.children(a) == [b]


class TestReducerWrites:
    """Tests for reprogram, reconfigure and reinput."""

    def test_reconfigure_read_back(self, xor_reducer: Reducer[bool]) -> None:
        state = parse_bits("101001")
        xor_reducer.reconfigure(state)
        assert xor_reducer.configuration() == state

    def test_reprogram_read_back(self, xor_reducer: Reducer[bool]) -> None:
        program = parse_bits("110011")
        xor_reducer.reprogram(program)
        assert xor_reducer.program_state() == program
        assert xor_reducer.program() == program

    def test_reinput_read_back(self, xor_reducer: Reducer[bool]) -> None:
        xor_reducer.reinput([True, False])
        assert xor_reducer.input() == [True, False]

    def test_writes_accept_any_sequence(self) -> None:
        reducer = _and_reducer()
        reducer.reinput((True, True))
        assert reducer.input() == [True, True]

    @pytest.mark.parametrize("length", [0, 1, 3])
    def test_reinput_length_mismatch(self, length: int) -> None:
        reducer = _and_reducer()
        reducer.reinput([False, True])
        with pytest.raises(LengthMismatchError) as exc_info:
            reducer.reinput([True] * length)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == length
        assert reducer.input() == [False, True]

    @pytest.mark.parametrize("length", [0, 3, 5])
    def test_reprogram_length_mismatch(self, length: int) -> None:
        reducer = _and_reducer()
        with pytest.raises(LengthMismatchError):
            reducer.reprogram([True] * length)
        assert reducer.program_state() == [False, True, False, False]

    @pytest.mark.parametrize("length", [0, 3, 5])
    def test_reconfigure_length_mismatch(self, length: int) -> None:
        reducer = _and_reducer()
        with pytest.raises(LengthMismatchError):
            reducer.reconfigure([True] * length)
        assert reducer.configuration() == [False] * 4

    def test_length_mismatch_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Expected 1 input values, got 2"):
            Reducer().reinput([True, True])

    def test_input_order_follows_creation_not_shape(self) -> None:
        reducer: Reducer[bool] = Reducer()
        a = reducer.add_contact(reducer.root())
        b = reducer.add_contact(reducer.root())
        leaf_a1 = reducer.add_contact(a)
        leaf_b1 = reducer.add_contact(b)
        leaf_a2 = reducer.add_contact(a)
        reducer.short(b, leaf_a2)
        assert reducer.leaves() == [leaf_a1, leaf_b1, leaf_a2]

        reducer.reinput([True, False, True])
        store = reducer.graph.store
        assert store.get_bits(leaf_a1).input is True
        assert store.get_bits(leaf_b1).input is False
        assert store.get_bits(leaf_a2).input is True


class TestReducerTruthTables:
    """Truth tables of small circuits."""

    @pytest.mark.parametrize(("program", "state", "input_"), list(product([False, True], repeat=3)))
    def test_single_leaf(self, program: bool, state: bool, input_: bool) -> None:  # noqa: FBT001
        reducer: Reducer[bool] = Reducer()
        reducer.add_contact(reducer.root())
        reducer.reprogram([False, program])
        reducer.reconfigure([False, state])
        reducer.reinput([input_])
        assert reducer.output() == (program ^ input_ ^ state)

    def test_and(self) -> None:
        reducer = _and_reducer()
        outputs = {}
        for inputs in product([False, True], repeat=2):
            reducer.reinput(list(inputs))
            outputs[format_bits(inputs)] = reducer.output()
        assert outputs == {"00": False, "01": False, "10": False, "11": True}

    def test_and_to_nand(self) -> None:
        reducer = _and_reducer()
        reducer.reconfigure([True, False, False, False])
        for a, b in product([False, True], repeat=2):
            reducer.reinput([a, b])
            assert reducer.output() == (not (a and b))

    def test_or_and_nor(self) -> None:
        reducer = _and_reducer()
        reducer.reprogram([False, False, False, False])
        for a, b in product([False, True], repeat=2):
            reducer.reinput([a, b])
            assert reducer.output() == (a or b)
        reducer.reconfigure([False, True, False, False])
        for a, b in product([False, True], repeat=2):
            reducer.reinput([a, b])
            assert reducer.output() == (not (a or b))


class TestXorScenario:
    """The two-leaf XOR circuit turned into XNOR by flipping one state bit."""

    def test_xor(self, xor_reducer: Reducer[bool]) -> None:
        xor_reducer.reconfigure(parse_bits("000100"))
        for inputs, expected in [("00", "0"), ("10", "1"), ("01", "1"), ("11", "0")]:
            xor_reducer.reinput(parse_bits(inputs))
            assert format_bits(xor_reducer.input()) == inputs
            assert format_bits(xor_reducer.configuration()) == "000100"
            assert format_bits([xor_reducer.output()]) == expected

    def test_xor_to_xnor(self, xor_reducer: Reducer[bool]) -> None:
        xor_reducer.reconfigure(parse_bits("000100"))
        xor_reducer.reconfigure(parse_bits("100100"))
        for inputs, expected in [("00", "1"), ("10", "0"), ("01", "0"), ("11", "1")]:
            xor_reducer.reinput(parse_bits(inputs))
            assert format_bits(xor_reducer.configuration()) == "100100"
            assert format_bits([xor_reducer.output()]) == expected
        assert format_bits(xor_reducer.program_state()) == "010100"

    def test_intermediate_outputs(self, xor_reducer: Reducer[bool]) -> None:
        xor_reducer.reconfigure(parse_bits("000100"))
        xor_reducer.reinput([True, False])
        result = xor_reducer.evaluate_all()
        # parallel_1 is OR, series_1 is NAND, series_0 is AND
        assert result.get_output(2) is True
        assert result.get_output(3) is True
        assert result.get_output(1) is True
        assert xor_reducer.evaluate(3) is True


class VowelLogic:
    """A leaf says 'y' when its letter is a vowel; parents adopt 'y' when any child does."""

    vowels = frozenset("aeiouy")

    @property
    def neutral(self) -> str:
        return "\0"

    def transition(self, value: str) -> str:  # noqa: ARG002
        return "y"

    def output(self, bits: Bits[str], *, leaf: bool) -> str:  # noqa: ARG002
        return "y" if bits.input in self.vowels else "n"


class TestCharacterReducer:
    """A reducer over characters with caller-supplied logic."""

    @pytest.fixture
    def reducer(self) -> Reducer[str]:
        reducer: Reducer[str] = Reducer(VowelLogic())
        reducer.add_gate(reducer.root())
        reducer.add_gate(reducer.root())
        reducer.add_gate(reducer.root())
        return reducer

    def test_neutral_values(self, reducer: Reducer[str]) -> None:
        assert reducer.input() == ["\0", "\0", "\0"]
        assert reducer.program_state() == ["\0"] * 4

    @pytest.mark.parametrize(
        ("word", "expected"),
        [("fox", "y"), ("cat", "y"), ("psm", "n"), ("ibm", "y"), ("dog", "y"), ("tls", "n")],
    )
    def test_contains_vowel(self, reducer: Reducer[str], word: str, expected: str) -> None:
        reducer.reinput(parse_symbols(word))
        reducer.reprogram(["n", "\0", "\0", "\0"])
        assert reducer.output() == expected

    def test_length_mismatch(self, reducer: Reducer[str]) -> None:
        with pytest.raises(LengthMismatchError):
            reducer.reinput(parse_symbols("ox"))
