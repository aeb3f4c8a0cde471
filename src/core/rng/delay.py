"""
Delay — Случайная асинхронная задержка

Композиция Scalar Generator + asyncio.sleep. Длительность берётся
равномерно из [min_ms, max_ms). Отмена задачи пробрасывается как
asyncio.CancelledError, никогда не глотается.
"""

import asyncio
import logging

from pydantic import ValidationError

from src.core.rng.config import DelayBounds
from src.core.rng.engine import RandomEngine
from src.core.rng.errors import InvalidRangeError
from src.core.rng.scalar import next_int_in_range


async def delay(
    min_ms: int,
    max_ms: int,
    logger: logging.Logger | None = None,
    *,
    engine: RandomEngine | None = None,
) -> int:
    """
    Приостанавливает текущую задачу на случайное число миллисекунд.

    Если передан logger, длительность логируется на DEBUG до ожидания,
    а отмена логируется перед повторным поднятием CancelledError.

    Args:
        min_ms: Минимальная задержка (ms, >= 0)
        max_ms: Максимальная задержка (ms, исключительно, >= min_ms)
        logger: Логгер для DEBUG-сообщений (optional)
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Фактически выбранная длительность в миллисекундах

    Raises:
        InvalidRangeError: Если min_ms < 0 или max_ms < min_ms
        asyncio.CancelledError: Если задача отменена во время ожидания
    """
    try:
        bounds = DelayBounds(min_ms=min_ms, max_ms=max_ms)
    except ValidationError as exc:
        raise InvalidRangeError(
            f"Invalid delay bounds: min_ms={min_ms}, max_ms={max_ms}"
        ) from exc

    ms = next_int_in_range(bounds.min_ms, bounds.max_ms, engine=engine)

    if logger is None:
        await asyncio.sleep(ms / 1000)
        return ms

    logger.debug("Delaying for %dms...", ms)

    try:
        await asyncio.sleep(ms / 1000)
    except asyncio.CancelledError:
        logger.debug("Delay was cancelled")
        raise

    return ms
