"""
Example loops demonstrating foreach_repeat.
Each function is a small, self-contained use of ``for_each_repeat``; the
test-suite runs them, so they double as executable documentation.
"""

from __future__ import annotations

from dataclasses import dataclass

from foreach_repeat import (
    CONTINUE,
    Break,
    Continue,
    LoopControl,
    Repeat,
    RepeatIter,
    for_each_repeat,
    for_each_repeat_result,
)


def smallest_divisor(n: int, limit: int = 100) -> int | None:
    """Smallest divisor of ``n`` in [2, limit), or None."""

    def check(x: int) -> LoopControl[int, None, int]:
        if n % x == 0:
            return Break(x)
        return LoopControl.CONTINUE

    return for_each_repeat(range(2, limit), check)


@dataclass
class Cell:
    """A mutable slot, standing in for iteration by reference."""

    value: int


def raise_all_to(values: list[int], target: int) -> list[int]:
    """Increment every element up to ``target``, one Repeat per step."""
    cells = [Cell(v) for v in values]

    def bump(cell: Cell) -> LoopControl[None, None, Cell]:
        if cell.value < target:
            cell.value += 1
            return Repeat(cell)
        return CONTINUE

    for_each_repeat(cells, bump)
    return [cell.value for cell in cells]


def interleaved_digits() -> tuple[int | None, int]:
    """Skip evens, append odd digits, repeat 3 four extra times, stop at 8+."""
    state = {"values": 0, "repeats": 0}

    def body(x: int) -> LoopControl[int, None, int]:
        if x % 2 == 0:
            return CONTINUE
        state["values"] = state["values"] * 10 + x
        if x == 3 and state["repeats"] <= 3:
            state["repeats"] += 1
            return Repeat(x)
        if x >= 8:
            return Break(x)
        return CONTINUE

    result = for_each_repeat(range(0, 11), body)
    return result, state["values"]


@dataclass(frozen=True)
class Attempt:
    """A job and how many times it has been tried."""

    job: str
    tries: int = 1


def run_with_retries(jobs: list[str], flaky: dict[str, int], max_tries: int = 3):
    """
    Run jobs in order, retrying each failure with Repeat.
    ``flaky`` maps a job name to how many attempts fail before it succeeds.
    Errors travel as data: the loop breaks with ``("failed", job)`` once a
    job exhausts its tries, and returns ``("ok", completed)`` otherwise.
    """
    completed: list[str] = []

    def step(attempt: Attempt) -> LoopControl[tuple[str, str], None, Attempt]:
        if attempt.tries > flaky.get(attempt.job, 0):
            completed.append(attempt.job)
            return CONTINUE
        if attempt.tries >= max_tries:
            return Break(("failed", attempt.job))
        return Repeat(Attempt(attempt.job, attempt.tries + 1))

    outcome = for_each_repeat((Attempt(job) for job in jobs), step)
    if outcome is not None:
        return outcome
    return ("ok", completed)


def take_until_blank(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split at the first blank line; the rest stays in the iterator."""
    header: list[str] = []
    it = RepeatIter(lines)

    def collect(line: str) -> LoopControl[None, None, str]:
        if not line.strip():
            return Break()
        header.append(line)
        return Continue()

    it.for_each_repeat(collect)
    return header, list(it)


def count_steps(source, every: int = 2):
    """Repeat every ``every``-th element once and report the loop counters."""

    def body(x: int | tuple[int]) -> LoopControl[None, None, object]:
        if isinstance(x, tuple):
            return CONTINUE
        if x % every == 0:
            return Repeat((x,))
        return CONTINUE

    return for_each_repeat_result(source, body)
