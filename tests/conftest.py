"""Pytest configuration and fixtures."""
import importlib.util
import io
import sys
from pathlib import Path
from typing import Generator

import pytest

from foreach_repeat import logging as fr_logging
from foreach_repeat.logging import ForEachRepeatLogger, LogLevel

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class CountingSource:
    """Iterator over a list that records how many elements were pulled."""

    def __init__(self, items):
        self._items = list(items)
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.pulls >= len(self._items):
            raise StopIteration
        item = self._items[self.pulls]
        self.pulls += 1
        return item


class Recorder:
    """Callback wrapper that records every element it was called with."""

    def __init__(self, body):
        self.body = body
        self.calls = []

    def __call__(self, item):
        self.calls.append(item)
        return self.body(item)


@pytest.fixture
def counting_source():
    """Factory for CountingSource."""
    return CountingSource


@pytest.fixture
def recorder():
    """Factory for Recorder."""
    return Recorder


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def captured_logger(log_stream) -> Generator[ForEachRepeatLogger, None, None]:
    """Install a TRACE-level global logger writing to a StringIO."""
    previous = fr_logging._logger
    logger = ForEachRepeatLogger(level=LogLevel.TRACE, color=False, stream=log_stream)
    fr_logging.set_logger(logger)
    yield logger
    logger.close()
    fr_logging._logger = previous


@pytest.fixture(autouse=True)
def _restore_global_logger() -> Generator[None, None, None]:
    previous = fr_logging._logger
    yield
    current = fr_logging._logger
    if current is not previous and current is not None:
        current.close()
    fr_logging._logger = previous


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """A temporary directory for config files."""
    return tmp_path


@pytest.fixture(scope="session")
def loop_examples():
    """The examples/loop_examples.py module."""
    path = EXAMPLES_DIR / "loop_examples.py"
    spec = importlib.util.spec_from_file_location("loop_examples", path)
    module = importlib.util.module_from_spec(spec)
    sys.modules["loop_examples"] = module
    spec.loader.exec_module(module)
    return module
