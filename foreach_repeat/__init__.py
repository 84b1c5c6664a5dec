"""foreach_repeat: a for-each that can break, continue or repeat.
``for_each_repeat`` consumes any iterable by calling a callback on each
element. The callback answers with a loop control signal:
- Break(value): stop and return ``value``
- Continue(): move on to the next element
- Repeat(value): run the callback again with ``value`` without advancing
Example:
    >>> from foreach_repeat import Break, LoopControl, for_each_repeat
    >>> def smallest_divisor(x):
    ...     if 323 % x == 0:
    ...         return Break(x)
    ...     return LoopControl.CONTINUE
    >>> for_each_repeat(range(2, 100), smallest_divisor)
    17
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

__version__ = "0.1.0"
__author__ = "foreach_repeat contributors"
from foreach_repeat.config import ForEachRepeatConfig, apply_config, load_config
from foreach_repeat.logging import LogLevel, configure_logging, get_logger

__all__ = [
    "for_each_repeat",
    "for_each_repeat_result",
    "RepeatIter",
    "LoopResult",
    "LoopState",
    "LoopControl",
    "ControlKind",
    "Break",
    "Continue",
    "Repeat",
    "BREAK",
    "CONTINUE",
    "REPEAT",
    "ForEachRepeatError",
    "InvalidControlError",
    "ConfigError",
    "ForEachRepeatConfig",
    "load_config",
    "apply_config",
    "configure_logging",
    "get_logger",
    "LogLevel",
]
