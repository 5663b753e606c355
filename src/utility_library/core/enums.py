"""
Enums — Помощники для перечислений

Битовые флаги (enum.Flag / enum.IntFlag): установка, сброс, проверка.
Поиск члена по имени с дефолтом и позиция члена по значению.
"""

import operator
from enum import Enum, Flag
from functools import reduce
from typing import Any, TypeVar

F = TypeVar("F", bound=Flag)
E = TypeVar("E", bound=Enum)


# =============================================================================
# ФЛАГИ
# =============================================================================


def set_flag(value: F, flag: F) -> F:
    return value | flag


def set_flags(value: F, *flags: F) -> F:
    """
    Установка нескольких флагов (побитовое ИЛИ).

    Examples:
        >>> class Access(Flag):
        ...     READ = 1
        ...     WRITE = 2
        ...     EXECUTE = 4
        >>> set_flags(Access.READ, Access.WRITE, Access.EXECUTE) == Access(7)
        True
    """
    return reduce(operator.or_, flags, value)


def clear_flag(value: F, flag: F) -> F:
    return value & ~flag


def clear_flags(value: F, *flags: F) -> F:
    """Сброс нескольких флагов (побитовое И с дополнением)."""
    return reduce(lambda acc, flag: acc & ~flag, flags, value)


def contains_flag(value: F, flag: F) -> bool:
    """
    True если в value установлены все биты flag.

    Для составного flag требуются все его биты, а не хотя бы один.
    """
    return (value & flag) == flag


# =============================================================================
# ПОИСК
# =============================================================================


def from_string(enum_type: type[E], name: str, default: E | None = None) -> E | None:
    """
    Член перечисления по имени (с учётом регистра) или default.

    Examples:
        >>> class Color(Enum):
        ...     RED = 1
        >>> from_string(Color, "RED")
        <Color.RED: 1>
        >>> from_string(Color, "red") is None
        True
    """
    return enum_type.__members__.get(name, default)


def enum_index(enum_type: type[Enum], value: Any) -> int:
    """
    Позиция члена с указанным значением в порядке итерации enum_type.

    Returns:
        Индекс (с нуля) или -1, если значения нет
    """
    for index, member in enumerate(enum_type):
        if member.value == value:
            return index
    return -1
