"""
Numbers — Помощники для числовых значений

Односторонние ограничения, проверки диапазона с дефолтом, проценты,
округление и чётность для любых вещественных чисел (int, float, Decimal,
Fraction).
"""

from numbers import Integral, Real
from typing import TypeVar

from utility_library.core.comparable import clamp

N = TypeVar("N", bound=Real)


# =============================================================================
# ОГРАНИЧЕНИЯ
# =============================================================================


def clamp_min(value: N, min_value: N) -> N:
    """
    Ограничение только снизу.

    Examples:
        >>> clamp_min(-3, 0)
        0
        >>> clamp_min(7, 0)
        7
    """
    return min_value if value < min_value else value


def clamp_max(value: N, max_value: N) -> N:
    """Ограничение только сверху."""
    return max_value if value > max_value else value


def clamp01(value: N) -> N:
    """
    Ограничение диапазоном [0, 1].

    Границы приводятся к типу value (0 и 1 для int, 0.0 и 1.0 для float).
    """
    kind = type(value)
    return clamp(value, kind(0), kind(1))


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def is_in_range(value: N, min_value: N, max_value: N) -> bool:
    """Проверка min_value <= value <= max_value (границы включены)."""
    return min_value <= value <= max_value


def in_range(value: N, min_value: N, max_value: N, default: N) -> N:
    """
    Значение, если оно в диапазоне [min_value, max_value], иначе default.

    Args:
        value: Проверяемое значение
        min_value: Нижняя граница (включена)
        max_value: Верхняя граница (включена)
        default: Значение вне диапазона

    Returns:
        value или default

    Examples:
        >>> in_range(5, 0, 10, -1)
        5
        >>> in_range(15, 0, 10, -1)
        -1
    """
    return value if is_in_range(value, min_value, max_value) else default


def percentage_of(part: Real, whole: Real) -> float:
    """
    Доля part от whole в процентах.

    Деление на ноль не выполняется: при whole == 0 возвращается 0.0.

    Examples:
        >>> percentage_of(25, 200)
        12.5
        >>> percentage_of(5, 0)
        0.0
    """
    if whole == 0:
        return 0.0
    return float(part) / float(whole) * 100.0


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_decimal_points(value: N, decimal_points: int) -> N:
    """
    Округление до decimal_points знаков после точки.

    Банковское округление (half-even), как встроенный round(): 2.5 → 2,
    3.5 → 4. Decimal округляется точно и остаётся Decimal.

    Raises:
        ValueError: decimal_points < 0

    Examples:
        >>> round_decimal_points(3.14159, 3)
        3.142
        >>> round_decimal_points(Decimal("0.125"), 2)
        Decimal('0.12')
    """
    if decimal_points < 0:
        raise ValueError(f"decimal_points must be non-negative, got {decimal_points}")
    return round(value, decimal_points)


def round_to_two_decimal_points(value: N) -> N:
    return round_decimal_points(value, 2)


# =============================================================================
# ЧЁТНОСТЬ
# =============================================================================


def is_even(value: Integral) -> bool:
    return value % 2 == 0


def is_odd(value: Integral) -> bool:
    return value % 2 != 0
