"""
Tolerance Comparisons — сравнения float с учётом вычислительной погрешности

Модуль реализует семейство сравнений на основе единственного
масштабируемого допуска:

    tolerance(v) = u * clamp(|16 * v|, u, max_finite)

где u: unit roundoff формата, max_finite: наибольшее конечное значение.
Допуск растёт пропорционально |v| и никогда не схлопывается в ноль
около нуля. Все порядковые сравнения, равенство и диапазоны используют
один и тот же допуск; проверки нуля и знака используют фиксированный
порог 16 * u.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. tolerance(v) > 0 для любого конечного v
2. Допуск вычисляется только от lhs: equal(a, b) может отличаться от equal(b, a)
3. Трихотомия: для конечных a, b ровно одно из less / equal / greater истинно
4. Комбинированные варианты (*_also_*) вычисляют допуск один раз и
   возвращают взаимоисключающие флаги
5. NaN не обрабатывается специально: все упорядоченные сравнения с NaN
   дают False, not_equal даёт True (not_equal всегда == not equal)
6. Операции тотальны: переполнение float16 / float32 до inf не порождает
   предупреждений numpy, допуск ограничивается max_finite

Модульные функции работают с Python float (FLOAT64). Для других форматов
используется ToleranceComparator(FLOAT32) и т.п.
"""

import functools
from typing import Any, Callable, NamedTuple, Optional, TypeVar

import numpy as np

from epskit.core.math.formats import FLOAT64, ZERO_TOLERANCE_SCALE, FloatFormat

_F = TypeVar("_F", bound=Callable[..., Any])


def _saturating(method: _F) -> _F:
    """
    Выполнение метода без сигналов numpy о переполнении.

    Переполнение до ±inf в float16 / float32 (приведение операнда,
    16 * v, rhs ± eps) является штатным путём: результат ограничивается
    max_finite или корректно сравнивается с inf.
    """

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with np.errstate(over="ignore"):
            return method(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


# =============================================================================
# РЕЗУЛЬТАТЫ КОМБИНИРОВАННЫХ СРАВНЕНИЙ
# =============================================================================


class EqualAlsoGreater(NamedTuple):
    """Результат equal_also_greater: равенство + признак lhs > rhs"""

    is_equal: bool
    is_greater: bool


class NotEqualAlsoGreater(NamedTuple):
    """Результат not_equal_also_greater: неравенство + признак lhs > rhs"""

    is_not_equal: bool
    is_greater: bool


class GreaterAlsoLess(NamedTuple):
    """Результат greater_also_less"""

    is_greater: bool
    is_less: bool


class LessAlsoGreater(NamedTuple):
    """Результат less_also_greater"""

    is_less: bool
    is_greater: bool


class ZeroAlsoPositive(NamedTuple):
    """Результат is_zero_also_positive"""

    is_zero: bool
    is_positive: bool


class NonzeroAlsoPositive(NamedTuple):
    """Результат is_nonzero_also_positive"""

    is_nonzero: bool
    is_positive: bool


class PositiveAlsoNegative(NamedTuple):
    """Результат is_positive_also_negative"""

    is_positive: bool
    is_negative: bool


class NegativeAlsoPositive(NamedTuple):
    """Результат is_negative_also_positive"""

    is_negative: bool
    is_positive: bool


# =============================================================================
# КОМПАРАТОР
# =============================================================================


class ToleranceComparator:
    """
    Набор tolerance-сравнений для заданного формата float.

    Не хранит состояния кроме констант формата; безопасен для
    одновременного использования из любого числа потоков.

    Комбинированные методы (*_also_*) предназначены для случаев, когда
    основная ветка это первое условие, но во второй ветке важен второй
    признак. Они быстрее двух отдельных вызовов: допуск вычисляется
    один раз.
    """

    def __init__(self, fmt: FloatFormat = FLOAT64):
        """
        Args:
            fmt: Формат чисел (default: FLOAT64)
        """
        self.format = fmt

        scalar = fmt.scalar
        self._scalar = scalar
        self._unit_roundoff = scalar(fmt.unit_roundoff)
        self._max_finite = scalar(fmt.max_finite)
        self._scale = scalar(ZERO_TOLERANCE_SCALE)
        self._zero_eps = fmt.zero_tolerance

    def __repr__(self) -> str:
        return f"ToleranceComparator({self.format.name})"

    # -------------------------------------------------------------------------
    # Допуск
    # -------------------------------------------------------------------------

    @_saturating
    def tolerance(self, value: Any) -> Any:
        """
        Масштабируемый допуск для значения.

        tolerance(v) = u * clamp(|16 * v|, u, max_finite)

        Порядок min/max выбран так, что NaN пропагирует в результат,
        а ±inf ограничивается max_finite.

        Args:
            value: Значение, относительно которого вычисляется допуск

        Returns:
            Допуск в скалярном типе формата

        Examples:
            >>> ToleranceComparator().tolerance(1.0)
            3.552713678800501e-15
            >>> ToleranceComparator().tolerance(0.0)
            4.930380657631324e-32
        """
        value = self._scalar(value)
        magnitude = max(min(abs(self._scale * value), self._max_finite), self._unit_roundoff)
        return self._unit_roundoff * magnitude

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    @_saturating
    def equal(self, lhs: Any, rhs: Any) -> bool:
        """
        Равенство lhs и rhs с учётом погрешности.

        Допуск вычисляется от lhs. Для симметричного поведения вызывающая
        сторона выбирает канонический порядок операндов.

        Examples:
            >>> ToleranceComparator().equal(1.0, 1.0 + 1e-16)
            True
            >>> ToleranceComparator().equal(1.0, 1.01)
            False
        """
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)
        return bool(lhs < rhs + eps and lhs > rhs - eps)

    @_saturating
    def not_equal(self, lhs: Any, rhs: Any) -> bool:
        """
        Неравенство lhs и rhs с учётом погрешности.

        Вычисляется напрямую, без вызова equal. Для конечных операндов
        совпадает с lhs >= rhs + eps or lhs <= rhs - eps; для NaN даёт True.
        """
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)
        return not (lhs < rhs + eps) or not (lhs > rhs - eps)

    @_saturating
    def equal_also_greater(self, lhs: Any, rhs: Any) -> EqualAlsoGreater:
        """
        Равенство с признаком lhs > rhs.

        Для случаев, когда основная ветка это равенство, но при неравенстве
        важен порядок.

        Returns:
            EqualAlsoGreater(is_equal, is_greater), флаги взаимоисключающие
        """
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)

        is_greater = bool(lhs >= rhs + eps)
        is_equal = bool(lhs > rhs - eps) and not is_greater

        return EqualAlsoGreater(is_equal, is_greater)

    @_saturating
    def not_equal_also_greater(self, lhs: Any, rhs: Any) -> NotEqualAlsoGreater:
        """
        Неравенство с признаком lhs > rhs.

        Для случаев, когда основная ветка это неравенство (например, ранний
        выход из функции), а порядок важен.

        Returns:
            NotEqualAlsoGreater(is_not_equal, is_greater)
        """
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)

        is_greater = bool(lhs >= rhs + eps)
        is_not_equal = not (lhs > rhs - eps) or is_greater

        return NotEqualAlsoGreater(is_not_equal, is_greater)

    def equal_optional(self, lhs: Optional[Any], rhs: Optional[Any]) -> bool:
        """
        Равенство с поддержкой None.

        Returns:
            True если оба None; False если None ровно один; иначе equal(lhs, rhs)
        """
        if lhs is None or rhs is None:
            return lhs is None and rhs is None
        return self.equal(lhs, rhs)

    def not_equal_optional(self, lhs: Optional[Any], rhs: Optional[Any]) -> bool:
        """
        Неравенство с поддержкой None.

        Returns:
            False если оба None; True если None ровно один; иначе not_equal(lhs, rhs)
        """
        if lhs is None or rhs is None:
            return (lhs is None) != (rhs is None)
        return self.not_equal(lhs, rhs)

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    @_saturating
    def greater(self, lhs: Any, rhs: Any) -> bool:
        """lhs > rhs с учётом погрешности"""
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        return bool(lhs >= rhs + self.tolerance(lhs))

    @_saturating
    def greater_also_less(self, lhs: Any, rhs: Any) -> GreaterAlsoLess:
        """
        lhs > rhs с признаком lhs < rhs.

        Между флагами лежит полоса равенства шириной 2 * tolerance(lhs),
        поэтому оба флага не могут быть истинны одновременно.
        """
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)

        is_less = bool(lhs <= rhs - eps)
        is_greater = bool(lhs >= rhs + eps)

        return GreaterAlsoLess(is_greater, is_less)

    @_saturating
    def less(self, lhs: Any, rhs: Any) -> bool:
        """lhs < rhs с учётом погрешности"""
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        return bool(lhs <= rhs - self.tolerance(lhs))

    @_saturating
    def less_also_greater(self, lhs: Any, rhs: Any) -> LessAlsoGreater:
        """lhs < rhs с признаком lhs > rhs"""
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        eps = self.tolerance(lhs)

        is_greater = bool(lhs >= rhs + eps)
        is_less = bool(lhs <= rhs - eps)

        return LessAlsoGreater(is_less, is_greater)

    @_saturating
    def greater_or_equal(self, lhs: Any, rhs: Any) -> bool:
        """lhs >= rhs с учётом погрешности (не less)"""
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        return bool(lhs > rhs - self.tolerance(lhs))

    @_saturating
    def less_or_equal(self, lhs: Any, rhs: Any) -> bool:
        """lhs <= rhs с учётом погрешности (не greater)"""
        lhs, rhs = self._scalar(lhs), self._scalar(rhs)
        return bool(lhs < rhs + self.tolerance(lhs))

    # -------------------------------------------------------------------------
    # Ноль и знак (фиксированный порог 16 * u)
    # -------------------------------------------------------------------------

    @_saturating
    def is_zero(self, value: Any) -> bool:
        """
        Проверка на ноль с фиксированным порогом.

        Порог не масштабируется: у нуля нет величины, относительно
        которой можно было бы масштабировать допуск.

        Examples:
            >>> ToleranceComparator().is_zero(1e-20)
            True
            >>> ToleranceComparator().is_zero(1e-3)
            False
        """
        return bool(abs(self._scalar(value)) < self._zero_eps)

    @_saturating
    def is_zero_also_positive(self, value: Any) -> ZeroAlsoPositive:
        """
        Проверка на ноль с признаком положительности.

        Returns:
            ZeroAlsoPositive(is_zero, is_positive)
        """
        value = self._scalar(value)
        eps = self._zero_eps

        is_positive = bool(value >= eps)
        is_zero = not is_positive and bool(value > -eps)

        return ZeroAlsoPositive(is_zero, is_positive)

    @_saturating
    def is_nonzero(self, value: Any) -> bool:
        """Проверка на ненулевое значение с фиксированным порогом"""
        return bool(abs(self._scalar(value)) >= self._zero_eps)

    @_saturating
    def is_nonzero_also_positive(self, value: Any) -> NonzeroAlsoPositive:
        """
        Проверка на ненулевое значение с признаком положительности.

        Returns:
            NonzeroAlsoPositive(is_nonzero, is_positive)
        """
        value = self._scalar(value)
        eps = self._zero_eps

        is_positive = bool(value >= eps)
        is_nonzero = is_positive or bool(value <= -eps)

        return NonzeroAlsoPositive(is_nonzero, is_positive)

    @_saturating
    def is_positive(self, value: Any) -> bool:
        return bool(self._scalar(value) >= self._zero_eps)

    @_saturating
    def is_positive_also_negative(self, value: Any) -> PositiveAlsoNegative:
        value = self._scalar(value)
        eps = self._zero_eps

        is_negative = bool(value <= -eps)
        is_positive = bool(value >= eps)

        return PositiveAlsoNegative(is_positive, is_negative)

    @_saturating
    def is_negative(self, value: Any) -> bool:
        return bool(self._scalar(value) <= -self._zero_eps)

    @_saturating
    def is_negative_also_positive(self, value: Any) -> NegativeAlsoPositive:
        value = self._scalar(value)
        eps = self._zero_eps

        is_positive = bool(value >= eps)
        is_negative = bool(value <= -eps)

        return NegativeAlsoPositive(is_negative, is_positive)

    @_saturating
    def is_not_positive(self, value: Any) -> bool:
        return bool(self._scalar(value) < self._zero_eps)

    @_saturating
    def is_not_negative(self, value: Any) -> bool:
        return bool(self._scalar(value) > -self._zero_eps)


# Компаратор для Python float
DEFAULT_COMPARATOR = ToleranceComparator(FLOAT64)


# =============================================================================
# МОДУЛЬНЫЕ ФУНКЦИИ (FLOAT64)
# =============================================================================


def tolerance(value: float) -> float:
    """
    Масштабируемый допуск для Python float.

    Examples:
        >>> tolerance(1e10) == 2.220446049250313e-16 * 16e10
        True
    """
    return DEFAULT_COMPARATOR.tolerance(value)


def equal(lhs: float, rhs: float) -> bool:
    """Равенство с учётом погрешности (допуск от lhs)"""
    return DEFAULT_COMPARATOR.equal(lhs, rhs)


def not_equal(lhs: float, rhs: float) -> bool:
    """Неравенство с учётом погрешности"""
    return DEFAULT_COMPARATOR.not_equal(lhs, rhs)


def equal_also_greater(lhs: float, rhs: float) -> EqualAlsoGreater:
    """Равенство с признаком lhs > rhs, допуск вычисляется один раз"""
    return DEFAULT_COMPARATOR.equal_also_greater(lhs, rhs)


def not_equal_also_greater(lhs: float, rhs: float) -> NotEqualAlsoGreater:
    """Неравенство с признаком lhs > rhs, допуск вычисляется один раз"""
    return DEFAULT_COMPARATOR.not_equal_also_greater(lhs, rhs)


def equal_optional(lhs: Optional[float], rhs: Optional[float]) -> bool:
    return DEFAULT_COMPARATOR.equal_optional(lhs, rhs)


def not_equal_optional(lhs: Optional[float], rhs: Optional[float]) -> bool:
    return DEFAULT_COMPARATOR.not_equal_optional(lhs, rhs)


def greater(lhs: float, rhs: float) -> bool:
    """lhs > rhs с учётом погрешности"""
    return DEFAULT_COMPARATOR.greater(lhs, rhs)


def greater_also_less(lhs: float, rhs: float) -> GreaterAlsoLess:
    return DEFAULT_COMPARATOR.greater_also_less(lhs, rhs)


def less(lhs: float, rhs: float) -> bool:
    """lhs < rhs с учётом погрешности"""
    return DEFAULT_COMPARATOR.less(lhs, rhs)


def less_also_greater(lhs: float, rhs: float) -> LessAlsoGreater:
    return DEFAULT_COMPARATOR.less_also_greater(lhs, rhs)


def greater_or_equal(lhs: float, rhs: float) -> bool:
    """lhs >= rhs с учётом погрешности"""
    return DEFAULT_COMPARATOR.greater_or_equal(lhs, rhs)


def less_or_equal(lhs: float, rhs: float) -> bool:
    """lhs <= rhs с учётом погрешности"""
    return DEFAULT_COMPARATOR.less_or_equal(lhs, rhs)


def is_zero(value: float) -> bool:
    """|value| < 16 * u"""
    return DEFAULT_COMPARATOR.is_zero(value)


def is_zero_also_positive(value: float) -> ZeroAlsoPositive:
    return DEFAULT_COMPARATOR.is_zero_also_positive(value)


def is_nonzero(value: float) -> bool:
    """|value| >= 16 * u"""
    return DEFAULT_COMPARATOR.is_nonzero(value)


def is_nonzero_also_positive(value: float) -> NonzeroAlsoPositive:
    return DEFAULT_COMPARATOR.is_nonzero_also_positive(value)


def is_positive(value: float) -> bool:
    """value >= 16 * u"""
    return DEFAULT_COMPARATOR.is_positive(value)


def is_positive_also_negative(value: float) -> PositiveAlsoNegative:
    return DEFAULT_COMPARATOR.is_positive_also_negative(value)


def is_negative(value: float) -> bool:
    """value <= -16 * u"""
    return DEFAULT_COMPARATOR.is_negative(value)


def is_negative_also_positive(value: float) -> NegativeAlsoPositive:
    return DEFAULT_COMPARATOR.is_negative_also_positive(value)


def is_not_positive(value: float) -> bool:
    """value < 16 * u"""
    return DEFAULT_COMPARATOR.is_not_positive(value)


def is_not_negative(value: float) -> bool:
    """value > -16 * u"""
    return DEFAULT_COMPARATOR.is_not_negative(value)
