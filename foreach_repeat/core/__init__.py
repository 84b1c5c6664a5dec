"""Core module for foreach_repeat.
Provides:
- Loop control signals (Break, Continue, Repeat)
- The repeatable for-each driver and its detailed result
- Package exceptions
"""

from foreach_repeat.core.control import (
    BREAK,
    CONTINUE,
    REPEAT,
    Break,
    Continue,
    ControlKind,
    LoopControl,
    Repeat,
)
from foreach_repeat.core.exceptions import (
    ConfigError,
    ForEachRepeatError,
    InvalidControlError,
)
from foreach_repeat.core.iterators import (
    LoopResult,
    LoopState,
    RepeatIter,
    for_each_repeat,
    for_each_repeat_result,
)

__all__ = [
    "ControlKind",
    "LoopControl",
    "Break",
    "Continue",
    "Repeat",
    "BREAK",
    "CONTINUE",
    "REPEAT",
    "LoopState",
    "LoopResult",
    "RepeatIter",
    "for_each_repeat",
    "for_each_repeat_result",
    "ForEachRepeatError",
    "InvalidControlError",
    "ConfigError",
]
