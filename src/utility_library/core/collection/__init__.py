"""
Collection helpers: уникальная вставка для коллекций, слияние и доступ
для словарей.
"""

from utility_library.core.collection.mappings import (
    add_or_replace,
    get_or_add,
    get_value,
    merge_dictionaries,
    merge_into,
    remove_value,
    try_add,
)
from utility_library.core.collection.sequences import (
    add_range,
    add_range_unique,
    add_unique,
    after,
    before,
    distinct,
    find,
    find_all,
    get_and_remove,
    get_and_remove_value,
    insert_range_unique,
    insert_unique,
    is_empty,
    is_equivalent_to,
    is_null_or_empty,
    move_down,
    move_up,
    random_item,
    random_items,
    random_where,
    remove_end_repeat,
    remove_start_repeat,
    swap,
    try_get_value,
    weighted_random,
    weighted_random_items,
    without,
)

__all__ = [
    # Mappings
    "add_or_replace",
    "get_or_add",
    "get_value",
    "merge_dictionaries",
    "merge_into",
    "remove_value",
    "try_add",
    # Sequences
    "add_range",
    "add_range_unique",
    "add_unique",
    "after",
    "before",
    "distinct",
    "find",
    "find_all",
    "get_and_remove",
    "get_and_remove_value",
    "insert_range_unique",
    "insert_unique",
    "is_empty",
    "is_equivalent_to",
    "is_null_or_empty",
    "move_down",
    "move_up",
    "random_item",
    "random_items",
    "random_where",
    "remove_end_repeat",
    "remove_start_repeat",
    "swap",
    "try_get_value",
    "weighted_random",
    "weighted_random_items",
    "without",
]
