"""
Core rng modules

Stateless thread-safe random-утилиты поверх инъецируемого движка:
scalar генераторы, равномерный 28-значный decimal, взвешенный выбор,
случайная задержка.
"""

# Engine
from src.core.rng.engine import (
    DEFAULT_ENGINE,
    RandomEngine,
    SystemRandomEngine,
    resolve_engine,
)

# Errors
from src.core.rng.errors import (
    InvalidArgumentError,
    InvalidRangeError,
    NullArgumentError,
    RandomUtilError,
)

# Config
from src.core.rng.config import (
    DECIMAL_CONTEXT,
    DECIMAL_MAX_SCALE,
    DECIMAL_SCALE,
    HI_WORD_UPPER_EXCLUSIVE,
    INT32_MAX,
    INT32_MIN,
    DelayBounds,
)

# Scalar Generator
from src.core.rng.scalar import (
    next_float,
    next_float_in_range,
    next_int,
    next_int32,
    next_int_in_range,
    to_int32,
    to_uint32,
)

# Uniform Decimal Generator
from src.core.rng.decimal_uniform import (
    DecimalBits,
    as_decimal,
    compose_decimal,
    decompose_decimal,
    next_decimal_uniform,
    next_decimal_uniform_in_range,
    round_to_digits,
)

# Range & Selection
from src.core.rng.selection import (
    next_decimal,
    weighted_random_selection,
)

# Delay
from src.core.rng.delay import delay

__all__ = [
    # Engine
    "DEFAULT_ENGINE",
    "RandomEngine",
    "SystemRandomEngine",
    "resolve_engine",
    # Errors
    "InvalidArgumentError",
    "InvalidRangeError",
    "NullArgumentError",
    "RandomUtilError",
    # Config
    "DECIMAL_CONTEXT",
    "DECIMAL_MAX_SCALE",
    "DECIMAL_SCALE",
    "HI_WORD_UPPER_EXCLUSIVE",
    "INT32_MAX",
    "INT32_MIN",
    "DelayBounds",
    # Scalar Generator
    "next_float",
    "next_float_in_range",
    "next_int",
    "next_int32",
    "next_int_in_range",
    "to_int32",
    "to_uint32",
    # Uniform Decimal Generator
    "DecimalBits",
    "as_decimal",
    "compose_decimal",
    "decompose_decimal",
    "next_decimal_uniform",
    "next_decimal_uniform_in_range",
    "round_to_digits",
    # Range & Selection
    "next_decimal",
    "weighted_random_selection",
    # Delay
    "delay",
]
