"""
Repeatable for-each over any iterable.
``for_each_repeat`` consumes a source by calling a callback on each element,
like ``try_for_each`` with early exit, except that the callback may also ask
for the body to run again with a substituted value:
    pull element ──► callback ──► Break(b)    → halt, result b
         ▲                  │
         │                  ├──► Continue(_) → pull next element
         │                  │
         └──────────────────┴──► Repeat(s)   → callback(s), source untouched
The loop halts only on Break or when the source is exhausted. A callback that
always answers Repeat never terminates; bounding retries is the caller's job.
The source is borrowed, not owned: after a Break, any elements not yet pulled
are still available from the caller's iterator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from foreach_repeat.logging import LogLevel, get_logger

from .control import ControlKind, LoopControl
from .exceptions import InvalidControlError

T = TypeVar("T")
B = TypeVar("B")
C = TypeVar("C")

_EXHAUSTED = object()


class LoopState(Enum):
    """State of a repeatable for-each loop."""

    BROKEN = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True)
class LoopResult(Generic[B]):
    """
    Outcome of a loop, with the counters collected while driving it.
    Attributes:
        value: The Break payload, or None when the source ran out
        state: LoopState.BROKEN or LoopState.EXHAUSTED
        invocations: Number of callback calls, Repeat re-runs included
        pulls: Number of elements taken from the source
        repeats: Number of Repeat signals received
    """

    value: B | None
    state: LoopState
    invocations: int = 0
    pulls: int = 0
    repeats: int = 0

    @property
    def broke(self) -> bool:
        """Whether the loop ended on a Break (even a Break carrying None)."""
        return self.state is LoopState.BROKEN

    @property
    def exhausted(self) -> bool:
        return self.state is LoopState.EXHAUSTED


def for_each_repeat_result(
    source: Iterable[T],
    f: Callable[[T], LoopControl[B, C, T]],
) -> LoopResult[B]:
    """
    Drive ``f`` over ``source`` and report how the loop ended.
    Args:
        source: Any iterable; iterators are advanced in place
        f: Callback returning Break, Continue or Repeat for each element
    Returns:
        LoopResult with the Break payload (if any) and step counters
    Raises:
        TypeError: If ``f`` is not callable or ``source`` is not iterable
        InvalidControlError: If ``f`` returns something other than a LoopControl
    """
    if not callable(f):
        raise TypeError(f"callback must be callable, got {type(f).__name__}")
    iterator = iter(source)
    logger = get_logger()
    tracing = logger.is_enabled_for(LogLevel.TRACE)
    invocations = 0
    pulls = 0
    repeats = 0
    current: Any = next(iterator, _EXHAUSTED)
    while current is not _EXHAUSTED:
        pulls += 1
        while True:
            signal = f(current)
            invocations += 1
            if not isinstance(signal, LoopControl):
                raise InvalidControlError(signal, invocations)
            if tracing:
                logger.trace(f"step {invocations}: {signal}", category="loop")
            if signal.kind is ControlKind.REPEAT:
                repeats += 1
                current = signal.value
                continue
            break
        if signal.kind is ControlKind.BREAK:
            result = LoopResult(signal.value, LoopState.BROKEN, invocations, pulls, repeats)
            _log_halt(result)
            return result
        current = next(iterator, _EXHAUSTED)
    result = LoopResult(None, LoopState.EXHAUSTED, invocations, pulls, repeats)
    _log_halt(result)
    return result


def for_each_repeat(
    source: Iterable[T],
    f: Callable[[T], LoopControl[B, C, T]],
) -> B | None:
    """
    Consume ``source``, calling ``f`` on each element; the returned
    LoopControl decides what happens next.
    Returns the payload of the first Break, or None if the source is
    exhausted first. Use ``for_each_repeat_result`` when a Break may carry
    None and the two cases must be told apart.
    Example:
        >>> from foreach_repeat import Break, CONTINUE
        >>> for_each_repeat(range(2, 100), lambda x: Break(x) if 403 % x == 0 else CONTINUE)
        13
    """
    return for_each_repeat_result(source, f).value


def _log_halt(result: LoopResult[Any]) -> None:
    logger = get_logger()
    if logger.is_enabled_for(LogLevel.DEBUG):
        logger.debug(
            f"loop halted ({result.state.name.lower()}) after {result.invocations} "
            f"invocations, {result.pulls} pulls, {result.repeats} repeats",
            category="loop",
        )


class RepeatIter(Iterator[T], Generic[T]):
    """
    Iterator wrapper that adds ``for_each_repeat`` as a method.
    The wrapper is itself an iterator, so elements left over after a Break
    can still be consumed:
        >>> from foreach_repeat import Break, CONTINUE
        >>> it = RepeatIter([1, 2, 3, 4])
        >>> it.for_each_repeat(lambda x: Break(x) if x == 2 else CONTINUE)
        2
        >>> list(it)
        [3, 4]
    """

    def __init__(self, source: Iterable[T]):
        self._iterator = iter(source)

    def __iter__(self) -> RepeatIter[T]:
        return self

    def __next__(self) -> T:
        return next(self._iterator)

    def for_each_repeat(self, f: Callable[[T], LoopControl[B, C, T]]) -> B | None:
        """See ``foreach_repeat.for_each_repeat``."""
        return for_each_repeat(self._iterator, f)

    def for_each_repeat_result(
        self, f: Callable[[T], LoopControl[B, C, T]]
    ) -> LoopResult[B]:
        """See ``foreach_repeat.for_each_repeat_result``."""
        return for_each_repeat_result(self._iterator, f)


__all__ = [
    "LoopState",
    "LoopResult",
    "RepeatIter",
    "for_each_repeat",
    "for_each_repeat_result",
]
