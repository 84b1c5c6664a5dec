"""
Loop control signals.
A callback driven by ``for_each_repeat`` answers every invocation with one of
three signals, emulating the loop keywords from inside a function:
    Break(value)     → stop the loop, ``value`` becomes the result
    Continue(value)  → advance the source, ``value`` is ignored
    Repeat(value)    → run the body again with ``value``, source untouched
The three payload types are independent. The name avoids confusion with
generic "control flow" vocabulary.
Example:
    >>> from foreach_repeat import Break, LoopControl, for_each_repeat
    >>> def first_divisor(x):
    ...     if 323 % x == 0:
    ...         return Break(x)
    ...     return LoopControl.CONTINUE
    >>> for_each_repeat(range(2, 100), first_divisor)
    17
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar, Generic, TypeVar

B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")


class ControlKind(Enum):
    """Action requested by a LoopControl. Declaration order is sort order."""

    BREAK = auto()
    CONTINUE = auto()
    REPEAT = auto()

    @property
    def label(self) -> str:
        return self.name.title()


@functools.total_ordering
class LoopControl(Generic[B, C, S]):
    """
    Base class of the three loop control signals.
    Instances are immutable and hashable. Two signals are equal when they are
    the same variant with equal payloads. Ordering compares the variant first
    (Break < Continue < Repeat) and then the payload.
    """

    kind: ClassVar[ControlKind]
    BREAK: ClassVar[LoopControl[None, Any, Any]]
    CONTINUE: ClassVar[LoopControl[Any, None, Any]]
    REPEAT: ClassVar[LoopControl[Any, Any, None]]

    value: Any

    def is_break(self) -> bool:
        return self.kind is ControlKind.BREAK

    def is_continue(self) -> bool:
        return self.kind is ControlKind.CONTINUE

    def is_repeat(self) -> bool:
        return self.kind is ControlKind.REPEAT

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LoopControl):
            return NotImplemented
        if self.kind is not other.kind:
            return self.kind.value < other.kind.value
        return self.value < other.value

    def __str__(self) -> str:
        return f"LoopControl.{self.kind.label}({self.value})"


@dataclass(frozen=True)
class Break(LoopControl[B, Any, Any]):
    """Break out of the loop, returning ``value`` as the result."""

    kind: ClassVar[ControlKind] = ControlKind.BREAK

    value: B = None


@dataclass(frozen=True)
class Continue(LoopControl[Any, C, Any]):
    """Skip the rest of the body and advance the source."""

    kind: ClassVar[ControlKind] = ControlKind.CONTINUE

    value: C = None


@dataclass(frozen=True)
class Repeat(LoopControl[Any, Any, S]):
    """Go back to the top of the body with ``value``, without advancing the source."""

    kind: ClassVar[ControlKind] = ControlKind.REPEAT

    value: S = None


BREAK: Break[None] = Break(None)
CONTINUE: Continue[None] = Continue(None)
REPEAT: Repeat[None] = Repeat(None)

LoopControl.BREAK = BREAK
LoopControl.CONTINUE = CONTINUE
LoopControl.REPEAT = REPEAT


__all__ = [
    "ControlKind",
    "LoopControl",
    "Break",
    "Continue",
    "Repeat",
    "BREAK",
    "CONTINUE",
    "REPEAT",
]
