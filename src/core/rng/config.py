"""
RNG Config — Константы формата и модели параметров

Константы fixed-point decimal формата (96-bit magnitude, scale ≤ 28)
и 32-bit слов, а также immutable Pydantic модель границ задержки.
"""

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# 32-BIT СЛОВА
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# Маска для unsigned-интерпретации 32-bit слова
UINT32_MASK: Final[int] = 0xFFFFFFFF


# =============================================================================
# FIXED-POINT DECIMAL
# =============================================================================

# Максимальное количество дробных знаков формата
DECIMAL_MAX_SCALE: Final[int] = 28

# Scale всех значений Uniform Decimal Generator
DECIMAL_SCALE: Final[int] = 28

# Magnitude хранится в трёх 32-bit словах (lo, mid, hi)
DECIMAL_MAGNITUDE_BITS: Final[int] = 96

# hi-слово ограничено [0, C): при hi >= C magnitude >= 10^28 всегда.
# 10^28 / 2^64 ≈ 542101086.24, поэтому C = 542101087 и при hi == C - 1
# изредка получается значение >= 1.0 (отсекается rejection loop).
HI_WORD_UPPER_EXCLUSIVE: Final[int] = 542_101_087

# Контекст для аффинных преобразований: 29 значащих цифр, столько же,
# сколько у максимальной 96-bit magnitude (2^96 - 1 = 79228162514264337593543950335).
# Границы формата представимы в нём точно.
# Используется только как шаблон для localcontext() (копия на вызов).
DECIMAL_CONTEXT: Final[Context] = Context(prec=29, rounding=ROUND_HALF_EVEN)

# Округление до N дробных знаков: half away from zero.
# +1 разряд: перенос при 9.99..9 → 10.00..0
ROUNDING_CONTEXT: Final[Context] = Context(prec=30, rounding=ROUND_HALF_UP)


# =============================================================================
# DELAY
# =============================================================================


class DelayBounds(BaseModel):
    """
    Границы случайной задержки в миллисекундах.

    Immutable модель (frozen=True). Длительность берётся из [min_ms, max_ms).
    """

    min_ms: int = Field(..., ge=0, description="Минимальная задержка (ms, включительно)")
    max_ms: int = Field(..., ge=0, description="Максимальная задержка (ms, исключительно)")

    model_config = {"frozen": True}

    @field_validator("max_ms")
    @classmethod
    def validate_max_not_below_min(cls, v: int, info) -> int:
        """Проверка, что max_ms >= min_ms"""
        if "min_ms" in info.data:
            min_ms = info.data["min_ms"]
            if v < min_ms:
                raise ValueError(f"max_ms {v} must be >= min_ms {min_ms}")
        return v
