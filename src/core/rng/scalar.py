"""
Scalar Generator — Range/type адаптеры над движком

Тонкий слой над RandomEngine:
- Целые в [0, max) и [min, max) с валидацией границ
- Float в [0, 1) и в произвольном диапазоне
- Full-range int32: каждый из 2^32 битовых паттернов равновероятен

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вырожденные границы (max == 0, min == max) не являются ошибкой
2. next_int32: один draw шириной ровно 2^32, без модульного сокращения
3. Никакого состояния между вызовами
"""

from src.core.rng.config import INT32_MAX, INT32_MIN, UINT32_MASK
from src.core.rng.engine import RandomEngine, resolve_engine
from src.core.rng.errors import InvalidRangeError


# =============================================================================
# ЦЕЛЫЕ
# =============================================================================


def next_int(max_value: int, *, engine: RandomEngine | None = None) -> int:
    """
    Неотрицательное случайное целое меньше max_value.

    Args:
        max_value: Исключительная верхняя граница (>= 0)
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Целое в [0, max_value); 0 если max_value == 0

    Raises:
        InvalidRangeError: Если max_value < 0

    Examples:
        >>> next_int(0)
        0
        >>> 0 <= next_int(10) < 10
        True
    """
    if max_value < 0:
        raise InvalidRangeError(f"max_value must be non-negative, got {max_value}")

    return resolve_engine(engine).next_bounded_int(0, max_value)


def next_int_in_range(
    min_value: int,
    max_value: int,
    *,
    engine: RandomEngine | None = None,
) -> int:
    """
    Случайное целое в [min_value, max_value).

    Args:
        min_value: Включительная нижняя граница
        max_value: Исключительная верхняя граница (>= min_value)
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Целое в [min_value, max_value); min_value если границы равны

    Raises:
        InvalidRangeError: Если min_value > max_value

    Examples:
        >>> next_int_in_range(5, 5)
        5
    """
    if min_value > max_value:
        raise InvalidRangeError(
            f"min_value must be <= max_value, got min_value={min_value}, max_value={max_value}"
        )

    return resolve_engine(engine).next_bounded_int(min_value, max_value)


# =============================================================================
# FLOAT
# =============================================================================


def next_float(*, engine: RandomEngine | None = None) -> float:
    """Float в [0.0, 1.0), напрямую из движка."""
    return resolve_engine(engine).next_uniform_float()


def next_float_in_range(
    min_value: float,
    max_value: float,
    *,
    engine: RandomEngine | None = None,
) -> float:
    """
    Float в диапазоне [min_value, max_value).

    Аффинное отображение next_float() * (max - min) + min. На экстремальных
    магнитудах округление float может дать ровно max_value: это принятая
    аппроксимация.

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Float между min_value и max_value
    """
    return next_float(engine=engine) * (max_value - min_value) + min_value


# =============================================================================
# FULL-RANGE INT32
# =============================================================================


def next_int32(*, engine: RandomEngine | None = None) -> int:
    """
    Signed 32-bit целое, равномерно по всему диапазону.

    Один bounded draw по [-2^31, 2^31): ширина ровно 2^32, поэтому
    каждый битовый паттерн равновероятен без композиции и без bias к нулю.

    Returns:
        Целое в [INT32_MIN, INT32_MAX]
    """
    return resolve_engine(engine).next_bounded_int(INT32_MIN, INT32_MAX + 1)


def to_uint32(value: int) -> int:
    """
    Unsigned-интерпретация 32-bit слова.

    Examples:
        >>> to_uint32(-1)
        4294967295
        >>> to_uint32(7)
        7
    """
    return value & UINT32_MASK


def to_int32(value: int) -> int:
    """
    Signed-интерпретация 32-bit слова (two's complement).

    Examples:
        >>> to_int32(4294967295)
        -1
        >>> to_int32(2**31)
        -2147483648
    """
    word = value & UINT32_MASK
    if word > INT32_MAX:
        return word - (UINT32_MASK + 1)
    return word
