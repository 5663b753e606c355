"""
Converter — Конверсия значений с маскированием ошибок

Модуль обеспечивает конверсию произвольного значения к заранее известному
типу через pydantic TypeAdapter в lax-режиме:
- числовые строки → числа ("42" → 42, "2.5" → 2.5)
- строки/числа → bool ("true", "1", 0)
- любое значение кроме None → str через format() (True → "True")
- float/Decimal → int с банковским округлением (3.7 → 4, 2.5 → 2)
- Optional[X], Decimal, date/datetime и прочие типы, известные pydantic

Разделитель дробной части всегда ".", от локали процесса результат
не зависит.

ДВА ВАРИАНТА:
1. cast_to: МАСКИРУЕТ ошибку и возвращает нулевое значение типа
   (default_value). Результат 0 неотличим от неудачной конверсии!
   Каждая замаскированная ошибка пишется в лог на уровне DEBUG.
2. try_cast_to: никогда не бросает исключение, возвращает
   ConversionResult(success, value, error) — успех виден явно.

Строгий режим (ConverterConfig(strict=True)) бросает ConversionError.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import ConfigDict, PydanticUserError, TypeAdapter

from utility_library.core.conversion.types import default_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Конфигурация TypeAdapter для "плоских" типов
_ADAPTER_CONFIG = ConfigDict(
    arbitrary_types_allowed=True,
    coerce_numbers_to_str=True,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(ValueError):
    """Конверсия невозможна (только строгий режим)."""

    def __init__(self, value: Any, target_type: Any, reason: str):
        self.value = value
        self.target_type = target_type
        self.reason = reason
        super().__init__(f"Cannot convert {value!r} to {_type_name(target_type)}: {reason}")


# =============================================================================
# RESULT / CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат try_cast_to."""

    success: bool
    value: Any  # Конвертированное значение или default_value(target_type)
    error: str | None = None


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация Converter.

    strict=False — маскирование ошибок (значение по умолчанию типа).
    strict=True — ConversionError вместо маскирования.
    """

    strict: bool = False
    log_failures: bool = True


# =============================================================================
# ADAPTERS
# =============================================================================


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", repr(target_type))


@lru_cache(maxsize=256)
def _adapter_for(target_type: Any) -> TypeAdapter:
    try:
        return TypeAdapter(target_type, config=_ADAPTER_CONFIG)
    except PydanticUserError:
        # BaseModel, dataclass и TypedDict несут собственный config
        return TypeAdapter(target_type)


def _round_for_int(value: Any, target_type: Any) -> Any:
    # Конечные float/Decimal → int с округлением half-even, как round()
    if target_type is not int:
        return value
    if isinstance(value, float) and math.isfinite(value):
        return round(value)
    if isinstance(value, Decimal) and value.is_finite():
        return round(value)
    return value


# =============================================================================
# CONVERTER
# =============================================================================


class Converter:
    """Конвертер значений с настраиваемой политикой ошибок.

    Порядок:
    1. Значение уже точно нужного типа → возвращается как есть
    2. str: format(value) для любого значения кроме None
    3. int: конечные float/Decimal округляются (half-even)
    4. pydantic TypeAdapter.validate_python (lax)
    5. Любая ошибка → ConversionError (strict) или default_value(target_type)
    """

    def __init__(self, config: ConverterConfig | None = None):
        self.config = config or ConverterConfig()

    def try_convert(self, value: Any, target_type: type[T]) -> ConversionResult:
        """Конверсия без исключений; результат содержит признак успеха."""
        if isinstance(target_type, type) and type(value) is target_type:
            return ConversionResult(success=True, value=value)

        try:
            if target_type is str and value is not None:
                converted = format(value)
            else:
                converted = _adapter_for(target_type).validate_python(
                    _round_for_int(value, target_type)
                )
        # Маскируется любая ошибка, включая исключения из валидаторов
        # моделей и __post_init__ датаклассов
        except Exception as exc:
            return ConversionResult(
                success=False,
                value=default_value(target_type),
                error=str(exc),
            )

        return ConversionResult(success=True, value=converted)

    def convert(self, value: Any, target_type: type[T]) -> T:
        """
        Конверсия с политикой из config.

        Args:
            value: Исходное значение (любое, включая None)
            target_type: Целевой тип или аннотация (int, float | None, ...)

        Returns:
            Конвертированное значение или default_value(target_type)

        Raises:
            ConversionError: Только при config.strict=True
        """
        result = self.try_convert(value, target_type)
        if result.success:
            return result.value

        if self.config.strict:
            raise ConversionError(value, target_type, result.error or "unknown error")

        if self.config.log_failures:
            logger.debug(
                "Conversion of %r to %s failed, using default %r",
                value,
                _type_name(target_type),
                result.value,
            )
        return result.value


_DEFAULT_CONVERTER = Converter()


# =============================================================================
# FUNCTIONS
# =============================================================================


def cast_to(value: Any, target_type: type[T]) -> T:
    """
    Конверсия с МАСКИРОВАНИЕМ ошибок.

    ВНИМАНИЕ: при любой ошибке возвращается нулевое значение типа без
    исключения. cast_to("0", int) и cast_to("oops", int) оба дают 0.
    Если нужно различать эти случаи — try_cast_to.

    Для str нулевое значение — пустая строка "", а не None: неудачная
    конверсия в str даёт "" (см. default_value). Для Optional[str] — None.

    Examples:
        >>> cast_to("42", int)
        42
        >>> cast_to("not a number", int)
        0
        >>> cast_to("2.5", float)
        2.5
    """
    return _DEFAULT_CONVERTER.convert(value, target_type)


def try_cast_to(value: Any, target_type: type[T]) -> ConversionResult:
    """
    Конверсия с явным результатом. Никогда не бросает исключение.

    Examples:
        >>> try_cast_to("oops", int).success
        False
    """
    return _DEFAULT_CONVERTER.try_convert(value, target_type)


def as_int(value: Any) -> int:
    return cast_to(value, int)


def as_float(value: Any) -> float:
    return cast_to(value, float)


def as_decimal(value: Any) -> Decimal:
    return cast_to(value, Decimal)


def as_bool(value: Any) -> bool:
    return cast_to(value, bool)


def as_str(value: Any, format_spec: str | None = None) -> str | None:
    """
    Строковое представление; None остаётся None.

    Args:
        value: Исходное значение
        format_spec: Спецификация format() (например, ".2f")
    """
    if value is None:
        return None
    if format_spec is None:
        return str(value)
    return format(value, format_spec)


def as_invariant_string(value: Any) -> str:
    """Строковое представление, не зависящее от локали; None → ""."""
    if value is None:
        return ""
    return format(value)


def is_none(value: Any) -> bool:
    return value is None


def is_not_none(value: Any) -> bool:
    return value is not None
