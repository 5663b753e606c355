"""
utility_library — набор независимых помощников для коллекций, сравнения
и конверсии значений.
"""

from utility_library.core.collection import (
    add_range_unique,
    add_unique,
    get_or_add,
    merge_dictionaries,
    merge_into,
    try_add,
)
from utility_library.core.comparable import (
    MissingValueError,
    between,
    clamp,
    compare,
    equal_to,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
)
from utility_library.core.conversion import (
    ConversionError,
    ConversionResult,
    Converter,
    ConverterConfig,
    cast_to,
    try_cast_to,
)

__all__ = [
    # Comparable
    "MissingValueError",
    "between",
    "clamp",
    "compare",
    "equal_to",
    "greater_or_equal",
    "greater_than",
    "less_or_equal",
    "less_than",
    # Collections
    "add_range_unique",
    "add_unique",
    "get_or_add",
    "merge_dictionaries",
    "merge_into",
    "try_add",
    # Conversion
    "ConversionError",
    "ConversionResult",
    "Converter",
    "ConverterConfig",
    "cast_to",
    "try_cast_to",
]
