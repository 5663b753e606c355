"""
Comparable — Предикаты порядка и ограничение диапазоном

Обобщённые помощники для любых упорядочиваемых значений
(int, float, Decimal, str, datetime, tuple, пользовательские типы с __lt__/__gt__).

Модуль обеспечивает:
- Проверку попадания в интервал с настраиваемым включением границ (between)
- Ограничение значения границами (clamp)
- Реляционные предикаты (less_than, less_or_equal, greater_than, greater_or_equal, equal_to)
- Трёхзначное сравнение (compare)

ИНВАРИАНТЫ:
1. value=None никогда не сравнивается: MissingValueError
2. Порядок границ НЕ нормализуется (between(5, 10, 0) → False)
3. Все операции чистые, без побочных эффектов
"""

from typing import Any, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingValueError(ValueError):
    """
    Сравнение невозможно: проверяемое значение отсутствует (None).

    Наследует ValueError, поэтому ловится и общим обработчиком ValueError.
    """


def _require_value(value: Any) -> None:
    if value is None:
        raise MissingValueError("value must not be None")


# =============================================================================
# ТРЁХЗНАЧНОЕ СРАВНЕНИЕ
# =============================================================================


def compare(value: T, other: T) -> int:
    """
    Трёхзначное сравнение двух значений одного типа.

    Args:
        value: Проверяемое значение (не None)
        other: Значение для сравнения

    Returns:
        -1 если value < other
         0 если ни одно не больше другого
        +1 если value > other

    Raises:
        MissingValueError: Если value is None

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare("b", "a")
        1
        >>> compare(3.0, 3)
        0
    """
    _require_value(value)

    if value < other:
        return -1
    if value > other:
        return 1
    return 0


# =============================================================================
# ИНТЕРВАЛЫ
# =============================================================================


def between(
    value: T,
    lower: T,
    upper: T,
    include_lower: bool = False,
    include_upper: bool = False,
) -> bool:
    """
    Проверка, лежит ли значение между границами.

    Алгоритм:
        (include_lower and value == lower)
        or (include_upper and value == upper)
        or (lower < value < upper)

    ВАЖНО: границы не переупорядочиваются. Если lower > upper, строгий
    интервал пуст и результат определяется только флагами включения.

    Args:
        value: Проверяемое значение (не None)
        lower: Нижняя граница
        upper: Верхняя граница
        include_lower: Считать равенство нижней границе попаданием
        include_upper: Считать равенство верхней границе попаданием

    Returns:
        True если значение в интервале

    Raises:
        MissingValueError: Если value is None

    Examples:
        >>> between(5, 0, 10)
        True
        >>> between(0, 0, 10)
        False
        >>> between(0, 0, 10, include_lower=True)
        True
        >>> between(5, 10, 0)
        False
    """
    lower_result = compare(value, lower)
    upper_result = compare(value, upper)

    return (
        (include_lower and lower_result == 0)
        or (include_upper and upper_result == 0)
        or (lower_result > 0 and upper_result < 0)
    )


def clamp(value: T, min_value: T, max_value: T) -> T:
    """
    Ограничение значения границами [min_value, max_value].

    Сначала проверяется нижняя граница, затем верхняя. При
    min_value > max_value результат не нормализуется: значение ниже
    min_value даёт min_value, остальные значения выше max_value дают
    max_value.

    Args:
        value: Исходное значение (не None)
        min_value: Минимальное допустимое значение
        max_value: Максимальное допустимое значение

    Returns:
        min_value, max_value или само value (тот же объект)

    Raises:
        MissingValueError: Если value is None

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp("z", "a", "m")
        'm'
    """
    if less_than(value, min_value):
        return min_value
    if greater_than(value, max_value):
        return max_value
    return value


# =============================================================================
# РЕЛЯЦИОННЫЕ ПРЕДИКАТЫ
# =============================================================================


def less_than(value: T, other: T) -> bool:
    """value < other. MissingValueError если value is None."""
    return compare(value, other) < 0


def less_or_equal(value: T, other: T) -> bool:
    """value <= other. MissingValueError если value is None."""
    return compare(value, other) <= 0


def greater_than(value: T, other: T) -> bool:
    """value > other. MissingValueError если value is None."""
    return compare(value, other) > 0


def greater_or_equal(value: T, other: T) -> bool:
    """value >= other. MissingValueError если value is None."""
    return compare(value, other) >= 0


def equal_to(value: T, other: T) -> bool:
    """
    Равенство через сравнение: ни одно значение не меньше и не больше другого.

    Для частично упорядоченных типов (например, множеств) несравнимые
    значения тоже дают True.
    """
    return compare(value, other) == 0
