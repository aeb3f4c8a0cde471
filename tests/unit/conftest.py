"""
Общие fixtures для тестов rng

ScriptedEngine: детерминированный движок, возвращает заранее заданные
значения и записывает каждый вызов, чтобы тесты могли проверять
количество потреблённых draw.
"""

import random
from collections import deque

import pytest

from src.core.rng import SystemRandomEngine


class ScriptedEngine:
    """Движок, воспроизводящий очереди значений."""

    def __init__(self, ints=(), floats=(), chunks=()):
        self._ints = deque(ints)
        self._floats = deque(floats)
        self._chunks = deque(chunks)
        self.int_calls: list[tuple[int, int]] = []
        self.float_calls = 0
        self.bytes_calls = 0

    def next_bounded_int(self, min_value: int, max_value: int) -> int:
        self.int_calls.append((min_value, max_value))
        value = self._ints.popleft()
        if min_value == max_value:
            assert value == min_value
        else:
            assert min_value <= value < max_value, (value, min_value, max_value)
        return value

    def next_uniform_float(self) -> float:
        self.float_calls += 1
        return self._floats.popleft()

    def next_bytes(self, count: int) -> bytes:
        self.bytes_calls += 1
        chunk = self._chunks.popleft()
        assert len(chunk) == count
        return chunk

    @property
    def exhausted(self) -> bool:
        return not (self._ints or self._floats or self._chunks)


@pytest.fixture
def scripted_engine():
    """Фабрика ScriptedEngine."""
    return ScriptedEngine


@pytest.fixture
def seeded_engine():
    """SystemRandomEngine с фиксированным seed для статистических тестов."""
    return SystemRandomEngine(random.Random(20240611))
