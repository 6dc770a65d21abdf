"""
Powers of Two — проверки на степень двойки

- is_power_of_two: для целых (ровно один установленный бит)
- is_power_of_two_float: для двоичных float, включая отрицательные
  степени (0.5, 0.25, ...) и субнормальные числа
"""

import math


def is_power_of_two(value: int) -> bool:
    """
    Проверка, что целое число является степенью двойки.

    Args:
        value: Целое число

    Returns:
        True если value > 0 и в двоичной записи ровно один единичный бит

    Raises:
        TypeError: Если value не int (bool отклоняется)

    Examples:
        >>> is_power_of_two(1024)
        True
        >>> is_power_of_two(-4)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")

    return value > 0 and value & (value - 1) == 0


def is_power_of_two_float(value: float) -> bool:
    """
    Проверка, что float является степенью двойки.

    Работает для отрицательных степеней: мантисса frexp равна ровно 0.5
    только у 2**k. Знак не игнорируется: -4.0 не является степенью двойки.

    Args:
        value: Значение float

    Returns:
        True если value > 0, конечно и равно 2**k для целого k

    Examples:
        >>> is_power_of_two_float(0.25)
        True
        >>> is_power_of_two_float(3.0)
        False
    """
    value = float(value)

    if not (value > 0 and math.isfinite(value)):
        return False

    mantissa, _ = math.frexp(value)
    return mantissa == 0.5
