"""
Type Defaults — Нулевые значения и классификация типов

Используется конвертером как источник значения при неудачной конверсии.
"""

import types
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Union, get_args, get_origin

# Типы-значения с "нулевым" экземпляром. Порядок важен: bool раньше int.
_ZERO_VALUES: Final[tuple[tuple[type, Any], ...]] = (
    (bool, False),
    (int, 0),
    (float, 0.0),
    (complex, 0j),
    (Decimal, Decimal(0)),
    (Fraction, Fraction(0)),
    (str, ""),
    (bytes, b""),
)

NUMERIC_TYPES: Final[tuple[type, ...]] = (int, float, complex, Decimal, Fraction)


def is_optional_type(tp: Any) -> bool:
    """
    Проверка, является ли аннотация Optional[X] / X | None.

    Examples:
        >>> is_optional_type(int | None)
        True
        >>> is_optional_type(int)
        False
    """
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return type(None) in get_args(tp)
    return False


def default_value(tp: Any) -> Any:
    """
    Нулевое значение для типа.

    Для типов-значений (bool, int, float, complex, Decimal, Fraction,
    str, bytes и их наследников) возвращается нулевой экземпляр базового
    типа, для всего остального (в том числе Optional[...] и классов
    пользователя) — None.

    Args:
        tp: Целевой тип или аннотация

    Returns:
        Нулевое значение или None

    Examples:
        >>> default_value(int)
        0
        >>> default_value(str)
        ''
        >>> default_value(int | None) is None
        True
    """
    if not isinstance(tp, type):
        return None

    for base, zero in _ZERO_VALUES:
        if issubclass(tp, base):
            return zero

    return None


def is_numeric_type(tp: Any) -> bool:
    """
    Числовой ли тип. bool числом не считается.

    Optional[X] проверяется по X.
    """
    if is_optional_type(tp):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return len(args) == 1 and is_numeric_type(args[0])

    if not isinstance(tp, type) or issubclass(tp, bool):
        return False

    return issubclass(tp, NUMERIC_TYPES)
