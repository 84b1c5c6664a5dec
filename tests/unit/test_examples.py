"""Tests running the examples/loop_examples.py scenarios."""

from foreach_repeat import LoopState


class TestLoopExamples:
    """Each example function produces its documented result."""

    def test_smallest_divisor(self, loop_examples):
        assert loop_examples.smallest_divisor(323) == 17
        assert loop_examples.smallest_divisor(403) == 13
        assert loop_examples.smallest_divisor(101) is None

    def test_raise_all_to(self, loop_examples):
        assert loop_examples.raise_all_to([1, 2, 3, 4, 5], 5) == [5, 5, 5, 5, 5]
        assert loop_examples.raise_all_to([7, 0], 3) == [7, 3]

    def test_interleaved_digits(self, loop_examples):
        assert loop_examples.interleaved_digits() == (9, 133333579)

    def test_retries_succeed(self, loop_examples):
        result = loop_examples.run_with_retries(["a", "b", "c"], {"b": 2})
        assert result == ("ok", ["a", "b", "c"])

    def test_retries_exhausted(self, loop_examples):
        result = loop_examples.run_with_retries(["a", "b", "c"], {"b": 5}, max_tries=3)
        assert result == ("failed", "b")

    def test_take_until_blank(self, loop_examples):
        header, body = loop_examples.take_until_blank(["From: x", "To: y", "", "hi", "bye"])
        assert header == ["From: x", "To: y"]
        assert body == ["hi", "bye"]

    def test_count_steps(self, loop_examples):
        result = loop_examples.count_steps(range(6))
        assert result.state is LoopState.EXHAUSTED
        assert result.pulls == 6
        assert result.repeats == 3
        assert result.invocations == 9
