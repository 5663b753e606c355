"""
Тесты для модуля Numbers

Проверяет:
1. Односторонние ограничения и clamp01
2. Проверки диапазона с дефолтом
3. Проценты с защитой от деления на ноль
4. Банковское округление
5. Чётность
"""

from decimal import Decimal

import pytest

from utility_library.core.numbers import (
    clamp01,
    clamp_max,
    clamp_min,
    in_range,
    is_even,
    is_in_range,
    is_odd,
    percentage_of,
    round_decimal_points,
    round_to_two_decimal_points,
)


class TestOneSidedClamp:
    """Тесты для clamp_min / clamp_max / clamp01"""

    def test_clamp_min(self) -> None:
        assert clamp_min(-3, 0) == 0
        assert clamp_min(7, 0) == 7

    def test_clamp_max(self) -> None:
        assert clamp_max(15.0, 10.0) == 10.0
        assert clamp_max(5.0, 10.0) == 5.0

    def test_clamp01_float(self) -> None:
        """Float ограничивается [0.0, 1.0]"""
        assert clamp01(1.5) == 1.0
        assert clamp01(-0.2) == 0.0
        assert clamp01(0.3) == 0.3

    def test_clamp01_keeps_type(self) -> None:
        """Тип результата совпадает с типом value"""
        result = clamp01(Decimal("1.7"))
        assert result == Decimal(1)
        assert isinstance(result, Decimal)


class TestRanges:
    """Тесты для is_in_range / in_range"""

    def test_bounds_inclusive(self) -> None:
        """Границы включены"""
        assert is_in_range(0, 0, 10) is True
        assert is_in_range(10, 0, 10) is True
        assert is_in_range(11, 0, 10) is False

    def test_in_range_returns_value(self) -> None:
        assert in_range(5, 0, 10, -1) == 5

    def test_in_range_returns_default(self) -> None:
        assert in_range(15, 0, 10, -1) == -1
        assert in_range(-0.5, 0.0, 1.0, 0.0) == 0.0


class TestPercentageOf:
    """Тесты для percentage_of"""

    def test_basic(self) -> None:
        assert percentage_of(25, 200) == pytest.approx(12.5)
        assert percentage_of(1, 3) == pytest.approx(33.333333, rel=1e-6)

    def test_zero_whole(self) -> None:
        """Деление на ноль → 0.0"""
        assert percentage_of(5, 0) == 0.0


class TestRounding:
    """Тесты для round_decimal_points / round_to_two_decimal_points"""

    def test_digits(self) -> None:
        assert round_decimal_points(3.14159, 3) == pytest.approx(3.142)
        assert round_to_two_decimal_points(3.14159) == pytest.approx(3.14)

    def test_half_even(self) -> None:
        """Середина округляется к чётному"""
        assert round_decimal_points(2.5, 0) == 2.0
        assert round_decimal_points(3.5, 0) == 4.0
        assert round_decimal_points(Decimal("0.125"), 2) == Decimal("0.12")
        assert round_decimal_points(Decimal("0.135"), 2) == Decimal("0.14")

    def test_decimal_keeps_type(self) -> None:
        result = round_to_two_decimal_points(Decimal("1.005"))
        assert isinstance(result, Decimal)
        assert result == Decimal("1.00")

    def test_negative_points_raises(self) -> None:
        with pytest.raises(ValueError, match="decimal_points must be non-negative"):
            round_decimal_points(1.5, -1)


class TestParity:
    """Тесты для is_even / is_odd"""

    def test_even(self) -> None:
        assert is_even(4) is True
        assert is_even(0) is True
        assert is_even(7) is False

    def test_odd_negative(self) -> None:
        """Отрицательные нечётные распознаются"""
        assert is_odd(-3) is True
        assert is_odd(-4) is False
