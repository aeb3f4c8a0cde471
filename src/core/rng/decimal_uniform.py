"""
Uniform Decimal Generator — Равномерный decimal по всему unit-диапазону

Строит Decimal, равномерно распределённый на [0, 1) с максимальной
точностью формата (28 дробных знаков): unscaled magnitude равномерна
на целых [0, 10^28) при scale = 28.

Формат хранит 96-bit magnitude в трёх 32-bit словах (lo, mid, hi).
lo и mid покрывают всё 32-bit пространство, hi ограничено
[0, HI_WORD_UPPER_EXCLUSIVE).

СТРАТЕГИЯ: composed full-range draws with rejection
    lo  = next_int32()                                  (точно, 2^32 паттернов)
    mid = next_int32()                                  (точно, 2^32 паттернов)
    hi  = engine.next_bounded_int(0, HI_WORD_UPPER_EXCLUSIVE)   (без modulo)
    u   = compose_decimal(lo, mid, hi, scale=28)
    u >= 1 → вся тройка отбрасывается, draw повторяется

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [0, 1), scale = 28
2. Rejection loop без лимита итераций (вероятность retry < 1.5e-9)
3. Нет modulo bias: каждое слово берётся unbiased примитивом
4. Аффинный rescale и округление выполняются в копии DECIMAL_CONTEXT
"""

import logging
from decimal import Decimal, localcontext
from typing import NamedTuple

from src.core.rng.config import (
    DECIMAL_CONTEXT,
    DECIMAL_MAGNITUDE_BITS,
    DECIMAL_MAX_SCALE,
    DECIMAL_SCALE,
    HI_WORD_UPPER_EXCLUSIVE,
    INT32_MIN,
    ROUNDING_CONTEXT,
    UINT32_MASK,
)
from src.core.rng.engine import RandomEngine, resolve_engine
from src.core.rng.errors import InvalidArgumentError, InvalidRangeError
from src.core.rng.scalar import next_int32, to_uint32

logger = logging.getLogger(__name__)


# =============================================================================
# БИТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


class DecimalBits(NamedTuple):
    """
    Разложение decimal на (lo, mid, hi, sign, scale).

    Слова возвращаются в unsigned-интерпретации [0, 2^32).
    """
    lo: int  # биты 0..31 magnitude
    mid: int  # биты 32..63 magnitude
    hi: int  # биты 64..95 magnitude
    negative: bool
    scale: int  # количество дробных знаков [0, 28]


def _validate_word(name: str, value: int) -> None:
    if not INT32_MIN <= value <= UINT32_MASK:
        raise InvalidRangeError(
            f"{name} must fit in a 32-bit word [{INT32_MIN}, {UINT32_MASK}], got {value}"
        )


def compose_decimal(
    lo: int,
    mid: int,
    hi: int,
    negative: bool = False,
    scale: int = 0,
) -> Decimal:
    """
    Точное построение Decimal из трёх 32-bit слов.

    magnitude = uint(hi) << 64 | uint(mid) << 32 | uint(lo)
    value = (-1)^negative * magnitude / 10^scale

    Слова могут быть переданы как signed, так и unsigned:
    отрицательное слово интерпретируется как two's complement.

    Args:
        lo: Младшее слово
        mid: Среднее слово
        hi: Старшее слово
        negative: Знак
        scale: Количество дробных знаков [0, 28]

    Returns:
        Decimal без округления (контекст не участвует)

    Raises:
        InvalidRangeError: Если scale вне [0, 28] или слово не 32-bit

    Examples:
        >>> compose_decimal(1, 0, 0, scale=28)
        Decimal('1E-28')
        >>> compose_decimal(-1, 0, 0)
        Decimal('4294967295')
        >>> compose_decimal(0, 1, 0, negative=True, scale=2)
        Decimal('-42949672.96')
    """
    if not 0 <= scale <= DECIMAL_MAX_SCALE:
        raise InvalidRangeError(
            f"scale must be in [0, {DECIMAL_MAX_SCALE}], got {scale}"
        )

    _validate_word("lo", lo)
    _validate_word("mid", mid)
    _validate_word("hi", hi)

    magnitude = (to_uint32(hi) << 64) | (to_uint32(mid) << 32) | to_uint32(lo)
    digits = tuple(int(d) for d in str(magnitude))

    return Decimal((1 if negative else 0, digits, -scale))


def decompose_decimal(value: Decimal) -> DecimalBits:
    """
    Разложение Decimal на 32-bit слова (обратная к compose_decimal).

    Значения с экспонентой > 0 приводятся к scale = 0, значения с более
    чем 28 дробными знаками допустимы только если лишние знаки нулевые.

    Args:
        value: Конечный Decimal, помещающийся в 96-bit magnitude

    Returns:
        DecimalBits

    Raises:
        InvalidArgumentError: Если значение NaN/Inf или не помещается в формат

    Examples:
        >>> decompose_decimal(Decimal('-42949672.96'))
        DecimalBits(lo=0, mid=1, hi=0, negative=True, scale=2)
    """
    if not value.is_finite():
        raise InvalidArgumentError(f"value must be finite, got {value}")

    sign, digits, exponent = value.as_tuple()
    magnitude = int("".join(str(d) for d in digits))

    if exponent > 0:
        magnitude *= 10**exponent
        exponent = 0

    # Лишние дробные знаки допустимы только как trailing zeros
    while exponent < -DECIMAL_MAX_SCALE and magnitude % 10 == 0:
        magnitude //= 10
        exponent += 1

    if exponent < -DECIMAL_MAX_SCALE:
        raise InvalidArgumentError(
            f"value has more than {DECIMAL_MAX_SCALE} significant fractional digits: {value}"
        )

    if magnitude >> DECIMAL_MAGNITUDE_BITS:
        raise InvalidArgumentError(
            f"value magnitude exceeds {DECIMAL_MAGNITUDE_BITS} bits: {value}"
        )

    return DecimalBits(
        lo=magnitude & UINT32_MASK,
        mid=(magnitude >> 32) & UINT32_MASK,
        hi=(magnitude >> 64) & UINT32_MASK,
        negative=bool(sign),
        scale=-exponent,
    )


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_digits(value: Decimal, digits: int) -> Decimal:
    """
    Округление до digits дробных знаков (half away from zero).

    Значения, у которых дробных знаков уже не больше digits, возвращаются
    без изменений (без дополнения нулями).

    Args:
        value: Исходное значение
        digits: Количество дробных знаков [0, 28]

    Returns:
        Округлённое значение

    Raises:
        InvalidRangeError: Если digits вне [0, 28]

    Examples:
        >>> round_to_digits(Decimal('2.345'), 2)
        Decimal('2.35')
        >>> round_to_digits(Decimal('-2.345'), 2)
        Decimal('-2.35')
        >>> round_to_digits(Decimal('5.5'), 4)
        Decimal('5.5')
    """
    if not 0 <= digits <= DECIMAL_MAX_SCALE:
        raise InvalidRangeError(
            f"rounding digits must be in [0, {DECIMAL_MAX_SCALE}], got {digits}"
        )

    if value.as_tuple().exponent >= -digits:
        return value

    with localcontext(ROUNDING_CONTEXT):
        return value.quantize(Decimal(1).scaleb(-digits))


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Приведение границы диапазона к Decimal.

    float конвертируется через repr (7.54 → Decimal('7.54')),
    а не через точное двоичное значение.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


# =============================================================================
# UNIFORM DECIMAL
# =============================================================================


def next_decimal_uniform(*, engine: RandomEngine | None = None) -> Decimal:
    """
    Равномерный дискретный Decimal в [0, 1) со scale = 28.

    Каждая попытка потребляет три bounded-int draw из движка.
    При u >= 1 вся тройка отбрасывается.

    Args:
        engine: Движок (default: DEFAULT_ENGINE)

    Returns:
        Decimal в [0.0000000000000000000000000000, 0.9999999999999999999999999999]
    """
    engine = resolve_engine(engine)

    while True:
        lo = next_int32(engine=engine)
        mid = next_int32(engine=engine)
        hi = engine.next_bounded_int(0, HI_WORD_UPPER_EXCLUSIVE)

        candidate = compose_decimal(lo, mid, hi, scale=DECIMAL_SCALE)

        if candidate < 1:
            return candidate

        logger.debug("Rejected uniform decimal candidate %s (>= 1), redrawing", candidate)


def next_decimal_uniform_in_range(
    min_value: Decimal | int | float | str,
    max_value: Decimal | int | float | str,
    rounding_digits: int | None = None,
    *,
    engine: RandomEngine | None = None,
) -> Decimal:
    """
    Равномерный Decimal в [min_value, max_value).

    Аффинный rescale: min + (max - min) * u, где u = next_decimal_uniform().
    Округление (если задано) применяется после rescale.

    При min_value == max_value результат равен min_value при любом u.
    При min_value = 0, max_value = 1 результат равен u.
    Rescale выполняется с 29 значащими цифрами (вся 96-bit magnitude),
    поэтому результат может совпасть с max_value, но не превысить его.

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

    u = next_decimal_uniform(engine=engine)

    with localcontext(DECIMAL_CONTEXT):
        result = low + (high - low) * u

    if rounding_digits is not None:
        result = round_to_digits(result, rounding_digits)

    return result
