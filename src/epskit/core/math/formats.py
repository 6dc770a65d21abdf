"""
FloatFormat — параметры формата IEEE-754 для tolerance-сравнений

Каждый формат описывается двумя константами:
- unit_roundoff: наименьшее u, при котором 1.0 + u != 1.0 (machine epsilon)
- max_finite: наибольшее конечное значение формата

Компаратор пишется один раз против FloatFormat и специализируется
форматом (float16 / float32 / float64). Вся арифметика выполняется
в скалярном типе формата (scalar), чтобы tolerance вычислялся с той же
точностью, что и сравниваемые значения.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Final

import numpy as np

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Множитель фиксированного порога нуля: |v| < ZERO_TOLERANCE_SCALE * unit_roundoff
# Этот же множитель масштабирует |v| при вычислении tolerance(v)
ZERO_TOLERANCE_SCALE: Final[int] = 16


# =============================================================================
# FLOAT FORMAT
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """
    Числовой формат с плавающей точкой.

    Attributes:
        name: Имя формата (например, 'float64')
        unit_roundoff: Machine epsilon формата
        max_finite: Наибольшее конечное значение формата
        scalar: Конвертер операнда в скалярный тип формата
    """

    name: str
    unit_roundoff: float
    max_finite: float
    scalar: Callable[[Any], Any] = field(default=float, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 < self.unit_roundoff < 1.0:
            raise ValueError(
                f"unit_roundoff must be in (0, 1), got {self.unit_roundoff} for {self.name}"
            )
        if not self.max_finite > 1.0:
            raise ValueError(f"max_finite must be > 1, got {self.max_finite} for {self.name}")

    @classmethod
    def from_numpy(cls, dtype: Any) -> "FloatFormat":
        """
        Построение формата из numpy dtype через numpy.finfo.

        Args:
            dtype: numpy floating тип (np.float16, np.float32, ...)

        Returns:
            FloatFormat со скалярным типом numpy

        Raises:
            ValueError: Если dtype не является floating типом
        """
        np_dtype = np.dtype(dtype)
        if np_dtype.kind != "f":
            raise ValueError(f"dtype must be a floating type, got {np_dtype}")

        info = np.finfo(np_dtype)
        return cls(
            name=np_dtype.name,
            unit_roundoff=float(info.eps),
            max_finite=float(info.max),
            scalar=np_dtype.type,
        )

    @property
    def zero_tolerance(self) -> Any:
        """Фиксированный порог нуля 16 * unit_roundoff в скалярном типе формата"""
        return self.scalar(ZERO_TOLERANCE_SCALE * self.unit_roundoff)


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ФОРМАТЫ
# =============================================================================

# Python float (IEEE-754 binary64)
FLOAT64: Final[FloatFormat] = FloatFormat(
    name="float64",
    unit_roundoff=sys.float_info.epsilon,
    max_finite=sys.float_info.max,
    scalar=float,
)

# IEEE-754 binary32 (numpy.float32)
FLOAT32: Final[FloatFormat] = FloatFormat.from_numpy(np.float32)

# IEEE-754 binary16 (numpy.float16)
FLOAT16: Final[FloatFormat] = FloatFormat.from_numpy(np.float16)
