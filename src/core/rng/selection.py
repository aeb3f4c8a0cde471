"""
Range & Selection Layer — Decimal из float и взвешенный выбор

- next_decimal: дешёвый decimal в диапазоне из 53-bit float
  (для полной 28-значной точности: next_decimal_uniform_in_range)
- weighted_random_selection: выбор элемента с вероятностью weight_i / sum

АЛГОРИТМ ВЫБОРА: streaming weighted reservoir
    w_i = weight_i / max(weights)          (нормировка, total не переполняется)
    total = 0
    для каждого i с w_i > 0:
        total += w_i
        если next_float() * total < w_i → текущий выбор = i

Элемент i остаётся выбранным с вероятностью w_i / total_final.
Один draw на каждый элемент с положительным весом, элементы с нулевым
весом пропускаются без draw. Предусловия проверяются до первого draw.
"""

import math
from decimal import Decimal, localcontext
from typing import Sequence, TypeVar

from src.core.rng.config import DECIMAL_CONTEXT
from src.core.rng.decimal_uniform import as_decimal, round_to_digits
from src.core.rng.engine import RandomEngine, resolve_engine
from src.core.rng.errors import InvalidArgumentError, NullArgumentError
from src.core.rng.scalar import next_float

T = TypeVar("T")


# =============================================================================
# DECIMAL ИЗ FLOAT
# =============================================================================


def next_decimal(
    min_value: Decimal | int | float | str,
    max_value: Decimal | int | float | str,
    rounding_digits: int | None = None,
    *,
    engine: RandomEngine | None = None,
) -> Decimal:
    """
    Decimal в [min_value, max_value) на основе next_float().

    Только 53 бита энтропии: дешевле, но не равномерен на уровне
    28 знаков. Тот же контракт rescale-then-round, что и у
    next_decimal_uniform_in_range.

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница
        rounding_digits: Количество дробных знаков результата (optional)
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Decimal в [min_value, max_value]

    Raises:
        InvalidRangeError: Если rounding_digits вне [0, 28]
    """
    low = as_decimal(min_value)
    high = as_decimal(max_value)

    # Decimal(float) точен, округление происходит только в арифметике
    fraction = Decimal(next_float(engine=engine))

    with localcontext(DECIMAL_CONTEXT):
        result = fraction * (high - low) + low

    if rounding_digits is not None:
        result = round_to_digits(result, rounding_digits)

    return result


# =============================================================================
# ВЗВЕШЕННЫЙ ВЫБОР
# =============================================================================


def _validate_selection_inputs(items: Sequence[T], weights: Sequence[float]) -> None:
    if items is None:
        raise NullArgumentError("items must not be None")

    if weights is None:
        raise NullArgumentError("weights must not be None")

    count = len(items)
    if count == 0 or count != len(weights):
        raise InvalidArgumentError(
            "items and weights must have the same length and not be empty, "
            f"got len(items)={count}, len(weights)={len(weights)}"
        )

    for index, weight in enumerate(weights):
        if not math.isfinite(weight):
            raise InvalidArgumentError(
                f"weights must be finite, got weights[{index}]={weight}"
            )
        if weight < 0:
            raise InvalidArgumentError(
                f"All weights must be non-negative, got weights[{index}]={weight}"
            )

    if max(float(w) for w in weights) == 0:
        raise InvalidArgumentError("Total weight must be greater than zero")


def weighted_random_selection(
    items: Sequence[T],
    weights: Sequence[float],
    *,
    engine: RandomEngine | None = None,
) -> T:
    """
    Выбор одного элемента с вероятностью, пропорциональной его весу.

    Args:
        items: Элементы (len >= 1)
        weights: Неотрицательные конечные веса, индекс-в-индекс с items
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Выбранный элемент

    Raises:
        NullArgumentError: Если items или weights равны None
        InvalidArgumentError: Если длины различаются, списки пусты,
            есть отрицательный/NaN/Inf вес, или сумма весов == 0

    Examples:
        >>> weighted_random_selection(["A", "B"], [0, 5])
        'B'
    """
    _validate_selection_inputs(items, weights)

    engine = resolve_engine(engine)

    # Веса нормируются на максимальный: total <= len(weights), без overflow
    scale = max(float(w) for w in weights)

    total = 0.0
    selected_index = -1
    last_positive_index = -1

    for index, weight in enumerate(weights):
        if weight == 0:
            continue

        w = float(weight) / scale
        total += w
        last_positive_index = index

        # Новый элемент забирает выбор с вероятностью w / total
        if next_float(engine=engine) * total < w:
            selected_index = index

    # При draw из [0, 1) выбор сделан всегда; fallback на последний
    # положительный вес, нулевой вес не выбирается никогда.
    if selected_index < 0:
        selected_index = last_positive_index

    return items[selected_index]
