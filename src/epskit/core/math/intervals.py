"""
Intervals — принадлежность диапазону с учётом погрешности

Пять видов границ:
- HalfOpenInterval     [lower, upper)
- ClosedInterval       [lower, upper]
- LowerBound           [lower, +inf)
- UpperBound           (-inf, upper)
- UpperBoundInclusive  (-inf, upper]

Принадлежность собирается из скалярных tolerance-сравнений.
out_of_range НЕ определён как not in_range: для ClosedInterval
out_of_range = less(v, lower) or greater(v, upper), что на границе
полосы допуска может не совпадать с отрицанием in_range.

Модели иммутабельны (frozen=True). Двусторонние интервалы проверяют
lower <= upper при создании; сами проверки принадлежности не бросают
исключений.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from epskit.core.math.tolerance import DEFAULT_COMPARATOR, ToleranceComparator

# =============================================================================
# ВИДЫ ГРАНИЦ
# =============================================================================


class _TwoSidedInterval(BaseModel):
    """Общая валидация двусторонних интервалов"""

    lower: float = Field(..., description="Нижняя граница")
    upper: float = Field(..., description="Верхняя граница")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "_TwoSidedInterval":
        """Проверка, что lower <= upper (NaN границы отклоняются)"""
        if not self.lower <= self.upper:
            raise ValueError(f"lower {self.lower} must be <= upper {self.upper}")
        return self


class HalfOpenInterval(_TwoSidedInterval):
    """[lower, upper)"""


class ClosedInterval(_TwoSidedInterval):
    """[lower, upper]"""


class LowerBound(BaseModel):
    """[lower, +inf)"""

    lower: float = Field(..., description="Нижняя граница (включительно)")

    model_config = {"frozen": True}


class UpperBound(BaseModel):
    """(-inf, upper)"""

    upper: float = Field(..., description="Верхняя граница (не включительно)")

    model_config = {"frozen": True}


class UpperBoundInclusive(BaseModel):
    """(-inf, upper]"""

    upper: float = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}


Bound = Union[HalfOpenInterval, ClosedInterval, LowerBound, UpperBound, UpperBoundInclusive]


# =============================================================================
# ФАБРИКИ
# =============================================================================


def half_open(lower: float, upper: float) -> HalfOpenInterval:
    return HalfOpenInterval(lower=lower, upper=upper)


def closed(lower: float, upper: float) -> ClosedInterval:
    return ClosedInterval(lower=lower, upper=upper)


def from_lower(lower: float) -> LowerBound:
    return LowerBound(lower=lower)


def up_to(upper: float) -> UpperBound:
    return UpperBound(upper=upper)


def through(upper: float) -> UpperBoundInclusive:
    return UpperBoundInclusive(upper=upper)


# =============================================================================
# ПРИНАДЛЕЖНОСТЬ
# =============================================================================


def in_range(
    value: float,
    bound: Bound,
    comparator: Optional[ToleranceComparator] = None,
) -> bool:
    """
    Проверка, что value лежит в диапазоне с учётом погрешности.

    Args:
        value: Проверяемое значение
        bound: Диапазон (один из пяти видов границ)
        comparator: Компаратор формата (default: float64)

    Returns:
        True если value принадлежит диапазону

    Raises:
        TypeError: Если bound не является поддерживаемым видом границы

    Examples:
        >>> in_range(1.0 + 1e-16, closed(0.0, 1.0))
        True
        >>> in_range(1.0, half_open(0.0, 1.0))
        False
    """
    cmp = comparator or DEFAULT_COMPARATOR

    if isinstance(bound, HalfOpenInterval):
        return cmp.greater_or_equal(value, bound.lower) and cmp.less(value, bound.upper)
    if isinstance(bound, ClosedInterval):
        return cmp.greater_or_equal(value, bound.lower) and cmp.less_or_equal(value, bound.upper)
    if isinstance(bound, LowerBound):
        return cmp.greater_or_equal(value, bound.lower)
    if isinstance(bound, UpperBound):
        return cmp.less(value, bound.upper)
    if isinstance(bound, UpperBoundInclusive):
        return cmp.less_or_equal(value, bound.upper)

    raise TypeError(f"Unsupported bound type: {type(bound).__name__}")


def out_of_range(
    value: float,
    bound: Bound,
    comparator: Optional[ToleranceComparator] = None,
) -> bool:
    """
    Проверка, что value лежит вне диапазона с учётом погрешности.

    Определяется напрямую через строгие сравнения, а не как not in_range.

    Args:
        value: Проверяемое значение
        bound: Диапазон (один из пяти видов границ)
        comparator: Компаратор формата (default: float64)

    Returns:
        True если value вне диапазона

    Raises:
        TypeError: Если bound не является поддерживаемым видом границы
    """
    cmp = comparator or DEFAULT_COMPARATOR

    if isinstance(bound, HalfOpenInterval):
        return cmp.less(value, bound.lower) or cmp.greater_or_equal(value, bound.upper)
    if isinstance(bound, ClosedInterval):
        return cmp.less(value, bound.lower) or cmp.greater(value, bound.upper)
    if isinstance(bound, LowerBound):
        return cmp.less(value, bound.lower)
    if isinstance(bound, UpperBound):
        return cmp.greater_or_equal(value, bound.upper)
    if isinstance(bound, UpperBoundInclusive):
        return cmp.greater(value, bound.upper)

    raise TypeError(f"Unsupported bound type: {type(bound).__name__}")
