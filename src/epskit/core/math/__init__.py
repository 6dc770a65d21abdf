"""
Core math modules для epskit

Сравнения float с учётом вычислительной погрешности.
"""

# Formats
from epskit.core.math.formats import (
    FLOAT16,
    FLOAT32,
    FLOAT64,
    ZERO_TOLERANCE_SCALE,
    FloatFormat,
)

# Tolerance comparisons
from epskit.core.math.tolerance import (
    DEFAULT_COMPARATOR,
    EqualAlsoGreater,
    GreaterAlsoLess,
    LessAlsoGreater,
    NegativeAlsoPositive,
    NonzeroAlsoPositive,
    NotEqualAlsoGreater,
    PositiveAlsoNegative,
    ToleranceComparator,
    ZeroAlsoPositive,
    equal,
    equal_also_greater,
    equal_optional,
    greater,
    greater_also_less,
    greater_or_equal,
    is_negative,
    is_negative_also_positive,
    is_nonzero,
    is_nonzero_also_positive,
    is_not_negative,
    is_not_positive,
    is_positive,
    is_positive_also_negative,
    is_zero,
    is_zero_also_positive,
    less,
    less_also_greater,
    less_or_equal,
    not_equal,
    not_equal_also_greater,
    not_equal_optional,
    tolerance,
)

# Intervals
from epskit.core.math.intervals import (
    Bound,
    ClosedInterval,
    HalfOpenInterval,
    LowerBound,
    UpperBound,
    UpperBoundInclusive,
    closed,
    from_lower,
    half_open,
    in_range,
    out_of_range,
    through,
    up_to,
)

# Powers of two
from epskit.core.math.powers import is_power_of_two, is_power_of_two_float

__all__ = [
    # Formats
    "FLOAT16",
    "FLOAT32",
    "FLOAT64",
    "ZERO_TOLERANCE_SCALE",
    "FloatFormat",
    # Tolerance — Comparator
    "DEFAULT_COMPARATOR",
    "ToleranceComparator",
    # Tolerance — Result types
    "EqualAlsoGreater",
    "GreaterAlsoLess",
    "LessAlsoGreater",
    "NegativeAlsoPositive",
    "NonzeroAlsoPositive",
    "NotEqualAlsoGreater",
    "PositiveAlsoNegative",
    "ZeroAlsoPositive",
    # Tolerance — Functions
    "equal",
    "equal_also_greater",
    "equal_optional",
    "greater",
    "greater_also_less",
    "greater_or_equal",
    "is_negative",
    "is_negative_also_positive",
    "is_nonzero",
    "is_nonzero_also_positive",
    "is_not_negative",
    "is_not_positive",
    "is_positive",
    "is_positive_also_negative",
    "is_zero",
    "is_zero_also_positive",
    "less",
    "less_also_greater",
    "less_or_equal",
    "not_equal",
    "not_equal_also_greater",
    "not_equal_optional",
    "tolerance",
    # Intervals — Types
    "Bound",
    "ClosedInterval",
    "HalfOpenInterval",
    "LowerBound",
    "UpperBound",
    "UpperBoundInclusive",
    # Intervals — Functions
    "closed",
    "from_lower",
    "half_open",
    "in_range",
    "out_of_range",
    "through",
    "up_to",
    # Powers of two
    "is_power_of_two",
    "is_power_of_two_float",
]
