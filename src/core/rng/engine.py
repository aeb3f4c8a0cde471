"""
Random Engine — Инъецируемый источник случайности

Модуль определяет единственный внешний коллаборатор всех random-утилит:
движок, который умеет ровно три примитивных draw-операции:

- next_bounded_int(min, max) → int в [min, max)
- next_uniform_float() → float в [0.0, 1.0)
- next_bytes(n) → n случайных байт

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Движок не криптографический и не сидируется этим слоем
2. Каждый примитив = один вызов в нижележащий генератор (атомарен под GIL),
   поэтому блокировки не требуются
3. Все публичные операции принимают engine=... для подмены в тестах
"""

import random
from typing import Final, Protocol, runtime_checkable


# =============================================================================
# ПРОТОКОЛ ДВИЖКА
# =============================================================================


@runtime_checkable
class RandomEngine(Protocol):
    """Capability с тремя примитивными draw-операциями."""

    def next_bounded_int(self, min_value: int, max_value: int) -> int:
        """Целое в [min_value, max_value); min_value при равенстве границ."""
        ...

    def next_uniform_float(self) -> float:
        """Float в полуинтервале [0.0, 1.0) с 53 битами энтропии."""
        ...

    def next_bytes(self, count: int) -> bytes:
        """count случайных байт."""
        ...


# =============================================================================
# РЕАЛИЗАЦИЯ ПО УМОЛЧАНИЮ
# =============================================================================


class SystemRandomEngine:
    """
    Адаптер над random.Random.

    Args:
        rng: Экземпляр random.Random (default: новый несидированный).
             Передача сидированного экземпляра допустима для тестов,
             но воспроизводимость не является контрактом этого слоя.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next_bounded_int(self, min_value: int, max_value: int) -> int:
        if min_value == max_value:
            return min_value
        return self._rng.randrange(min_value, max_value)

    def next_uniform_float(self) -> float:
        return self._rng.random()

    def next_bytes(self, count: int) -> bytes:
        return self._rng.randbytes(count)

    def __repr__(self) -> str:
        return f"SystemRandomEngine(rng={self._rng!r})"


# Process-wide движок (несидированный)
DEFAULT_ENGINE: Final[SystemRandomEngine] = SystemRandomEngine()


def resolve_engine(engine: RandomEngine | None = None) -> RandomEngine:
    """
    Возвращает переданный движок или DEFAULT_ENGINE.

    Args:
        engine: Явно инъецированный движок (optional)

    Returns:
        Движок для выполнения draw-операций
    """
    if engine is None:
        return DEFAULT_ENGINE
    return engine
