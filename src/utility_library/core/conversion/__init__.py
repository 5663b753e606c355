"""
Conversion helpers: конверсия с маскированием ошибок и нулевые значения типов.
"""

from utility_library.core.conversion.converter import (
    ConversionError,
    ConversionResult,
    Converter,
    ConverterConfig,
    as_bool,
    as_decimal,
    as_float,
    as_int,
    as_invariant_string,
    as_str,
    cast_to,
    is_none,
    is_not_none,
    try_cast_to,
)
from utility_library.core.conversion.types import (
    NUMERIC_TYPES,
    default_value,
    is_numeric_type,
    is_optional_type,
)

__all__ = [
    # Classes
    "ConversionError",
    "ConversionResult",
    "Converter",
    "ConverterConfig",
    # Functions
    "as_bool",
    "as_decimal",
    "as_float",
    "as_int",
    "as_invariant_string",
    "as_str",
    "cast_to",
    "is_none",
    "is_not_none",
    "try_cast_to",
    # Types
    "NUMERIC_TYPES",
    "default_value",
    "is_numeric_type",
    "is_optional_type",
]
