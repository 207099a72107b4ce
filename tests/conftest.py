"""Shared pytest fixtures for passgen tests."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator

import pytest
from loguru import logger


class CyclingByteSource:
    """Byte source that repeats a fixed sequence forever."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = itertools.cycle(list(values))
        self.calls = 0

    def next_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes(next(self._values) for _ in range(n))


class EmptyBufferSource(CyclingByteSource):
    """Refilling buffer that reports itself empty, so it is falsy."""

    def __len__(self) -> int:
        return 0


class BrokenByteSource:
    """Byte source whose backing device has gone away."""

    def next_bytes(self, n: int) -> bytes:
        raise OSError("random device unavailable")


@pytest.fixture
def zero_source() -> CyclingByteSource:
    return CyclingByteSource([0])


@pytest.fixture
def falsy_zero_source() -> EmptyBufferSource:
    return EmptyBufferSource([0])


@pytest.fixture
def cycling_source():
    """Factory for a byte source cycling through the given values.

    Returns:
        Callable taking an iterable of byte values
    """
    return CyclingByteSource


@pytest.fixture
def broken_source() -> BrokenByteSource:
    return BrokenByteSource()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture passgen log records at WARNING and above.

    Yields:
        List that fills with formatted log messages
    """
    messages: list[str] = []
    logger.enable("passgen")
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="WARNING",
    )
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("passgen")
