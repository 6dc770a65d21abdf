"""
Тесты для FloatFormat

Проверяет:
1. Константы предопределённых форматов
2. Построение формата из numpy dtype
3. Валидацию констант
4. Фиксированный порог нуля
"""

import sys

import numpy as np
import pytest

from epskit.core.math.formats import (
    FLOAT16,
    FLOAT32,
    FLOAT64,
    ZERO_TOLERANCE_SCALE,
    FloatFormat,
)


class TestPredefinedFormats:
    """Тесты для FLOAT16 / FLOAT32 / FLOAT64"""

    def test_float64_matches_sys_float_info(self) -> None:
        """FLOAT64 использует константы Python float"""
        assert FLOAT64.name == "float64"
        assert FLOAT64.unit_roundoff == sys.float_info.epsilon
        assert FLOAT64.max_finite == sys.float_info.max
        assert FLOAT64.scalar is float

    def test_float32_matches_finfo(self) -> None:
        """FLOAT32 использует numpy.finfo(float32)"""
        info = np.finfo(np.float32)

        assert FLOAT32.name == "float32"
        assert FLOAT32.unit_roundoff == float(info.eps)
        assert FLOAT32.max_finite == float(info.max)
        assert FLOAT32.scalar is np.float32

    def test_float16_matches_finfo(self) -> None:
        info = np.finfo(np.float16)

        assert FLOAT16.unit_roundoff == float(info.eps)
        assert FLOAT16.max_finite == float(info.max)

    def test_precision_ordering(self) -> None:
        """Чем уже формат, тем больше unit roundoff"""
        assert FLOAT64.unit_roundoff < FLOAT32.unit_roundoff < FLOAT16.unit_roundoff
        assert FLOAT64.max_finite > FLOAT32.max_finite > FLOAT16.max_finite

    def test_unit_roundoff_definition(self) -> None:
        """1 + u отличимо от 1, 1 + u/2 неотличимо"""
        for fmt in (FLOAT64, FLOAT32, FLOAT16):
            one = fmt.scalar(1.0)
            u = fmt.scalar(fmt.unit_roundoff)

            assert one + u != one, fmt.name
            assert one + u / fmt.scalar(2.0) == one, fmt.name


class TestZeroTolerance:
    """Тесты для zero_tolerance"""

    def test_scale_constant(self) -> None:
        assert ZERO_TOLERANCE_SCALE == 16

    def test_float64_zero_tolerance(self) -> None:
        assert FLOAT64.zero_tolerance == 16 * sys.float_info.epsilon

    def test_zero_tolerance_in_scalar_type(self) -> None:
        """Порог нуля возвращается в скалярном типе формата"""
        assert isinstance(FLOAT32.zero_tolerance, np.float32)
        assert float(FLOAT32.zero_tolerance) == pytest.approx(16 * FLOAT32.unit_roundoff)


class TestFromNumpy:
    """Тесты для FloatFormat.from_numpy"""

    def test_accepts_dtype_instance_and_type(self) -> None:
        """Принимает как тип, так и экземпляр dtype"""
        assert FloatFormat.from_numpy(np.float32) == FloatFormat.from_numpy(np.dtype("float32"))

    def test_float64_from_numpy_equals_float64(self) -> None:
        """Сравнение форматов не учитывает scalar"""
        assert FloatFormat.from_numpy(np.float64) == FLOAT64

    def test_rejects_integer_dtype(self) -> None:
        with pytest.raises(ValueError, match="must be a floating type"):
            FloatFormat.from_numpy(np.int32)


class TestValidation:
    """Тесты валидации констант формата"""

    def test_non_positive_unit_roundoff_raises(self) -> None:
        with pytest.raises(ValueError, match="unit_roundoff must be in"):
            FloatFormat(name="bad", unit_roundoff=0.0, max_finite=10.0)

        with pytest.raises(ValueError, match="unit_roundoff must be in"):
            FloatFormat(name="bad", unit_roundoff=-1e-3, max_finite=10.0)

    def test_unit_roundoff_above_one_raises(self) -> None:
        with pytest.raises(ValueError, match="unit_roundoff must be in"):
            FloatFormat(name="bad", unit_roundoff=1.5, max_finite=10.0)

    def test_small_max_finite_raises(self) -> None:
        with pytest.raises(ValueError, match="max_finite must be > 1"):
            FloatFormat(name="bad", unit_roundoff=1e-3, max_finite=0.5)

    def test_nan_constants_raise(self) -> None:
        with pytest.raises(ValueError):
            FloatFormat(name="bad", unit_roundoff=float("nan"), max_finite=10.0)

    def test_format_is_frozen(self) -> None:
        """FloatFormat иммутабелен"""
        with pytest.raises(AttributeError):
            FLOAT64.unit_roundoff = 1e-3  # type: ignore[misc]
