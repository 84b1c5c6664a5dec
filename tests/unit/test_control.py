"""Tests for loop control signals."""

import pytest

from foreach_repeat import (
    BREAK,
    CONTINUE,
    REPEAT,
    Break,
    Continue,
    ControlKind,
    LoopControl,
    Repeat,
)


class TestVariants:
    """Test the three signal variants."""

    def test_kind_matches_variant(self):
        """Each variant reports its own kind."""
        assert Break(1).kind is ControlKind.BREAK
        assert Continue(1).kind is ControlKind.CONTINUE
        assert Repeat(1).kind is ControlKind.REPEAT

    def test_predicates(self):
        """Exactly one predicate holds per signal."""
        for signal in (Break(0), Continue(0), Repeat(0)):
            flags = [signal.is_break(), signal.is_continue(), signal.is_repeat()]
            assert flags.count(True) == 1

    def test_payload_defaults_to_none(self):
        assert Break().value is None
        assert Continue().value is None
        assert Repeat().value is None

    def test_payload_types_are_independent(self):
        """Payloads need not match each other."""
        signals = [Break("done"), Continue(3.5), Repeat([1, 2])]
        assert [s.value for s in signals] == ["done", 3.5, [1, 2]]

    def test_signals_are_immutable(self):
        signal = Break(1)
        with pytest.raises(AttributeError):
            signal.value = 2

    def test_structural_pattern_matching(self):
        """Variants destructure with match statements."""

        def describe(signal):
            match signal:
                case Break(value):
                    return f"break {value}"
                case Continue():
                    return "continue"
                case Repeat(value):
                    return f"repeat {value}"

        assert describe(Break(4)) == "break 4"
        assert describe(CONTINUE) == "continue"
        assert describe(Repeat("x")) == "repeat x"


class TestConstants:
    """Test the ready-made unit-payload signals."""

    def test_module_constants(self):
        assert BREAK == Break(None)
        assert CONTINUE == Continue(None)
        assert REPEAT == Repeat(None)

    def test_class_constants_are_the_module_constants(self):
        assert LoopControl.BREAK is BREAK
        assert LoopControl.CONTINUE is CONTINUE
        assert LoopControl.REPEAT is REPEAT


class TestEqualityAndOrdering:
    """Test comparison and hashing."""

    def test_equal_when_same_variant_and_payload(self):
        assert Break(3) == Break(3)
        assert Break(3) != Break(4)

    def test_different_variants_never_equal(self):
        assert Break(1) != Continue(1)
        assert Continue(1) != Repeat(1)

    def test_hashable(self):
        seen = {Break(1), Break(1), Continue(1), Repeat(1)}
        assert len(seen) == 3

    def test_variant_order(self):
        """Break sorts before Continue, which sorts before Repeat."""
        assert Break(99) < Continue(0) < Repeat(-5)
        assert sorted([Repeat(0), Break(0), Continue(0)]) == [Break(0), Continue(0), Repeat(0)]

    def test_payload_order_within_variant(self):
        assert Break(1) < Break(2)
        assert Repeat(5) >= Repeat(5)
        assert Continue(2) > Continue(1)

    def test_comparison_with_other_types(self):
        assert Break(1) != 1
        with pytest.raises(TypeError):
            Break(1) < 1


class TestDisplay:
    """Test text rendering."""

    def test_str(self):
        assert str(Break(17)) == "LoopControl.Break(17)"
        assert str(Continue("x")) == "LoopControl.Continue(x)"
        assert str(REPEAT) == "LoopControl.Repeat(None)"

    def test_repr(self):
        assert repr(Break(17)) == "Break(value=17)"
