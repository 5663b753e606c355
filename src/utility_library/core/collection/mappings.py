"""
Mappings — Слияние и безопасный доступ к словарям

Модуль обеспечивает:
- Слияние нескольких словарей в новый (merge_dictionaries)
- Слияние на месте с принудительной перезаписью (merge_into)
- Получение с вставкой по умолчанию (get_or_add)
- Вставку только отсутствующего ключа (try_add)
- Замену, пакетное добавление, удаление по значению, проверки пустоты

ИЗВЕСТНЫЕ ОСОБЕННОСТИ:
1. merge_dictionaries([d]) возвращает САМ d, а не копию (aliasing).
   Для гарантированно нового словаря: copy_single=True.
2. merge_dictionaries([]) возвращает None, а не пустой словарь.
3. try_add возвращает True при ВСТАВКЕ, тогда как sequences.add_unique
   возвращает True, если элемент УЖЕ БЫЛ. Полярности не объединены.
4. get_or_add изменяет словарь при промахе, хотя выглядит как чтение.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")

Pairs = Mapping[K, V] | Iterable[tuple[K, V]]


def _iter_pairs(pairs: Pairs) -> Iterable[tuple[K, V]]:
    if isinstance(pairs, Mapping):
        return pairs.items()
    return pairs


# =============================================================================
# ПУСТОТА
# =============================================================================


def is_null_or_empty(mapping: Mapping | None) -> bool:
    """True если словарь None или пуст."""
    return mapping is None or len(mapping) == 0


def is_empty(mapping: Mapping) -> bool:
    """
    Проверка, что словарь пуст.

    Raises:
        ValueError: Если mapping is None
    """
    if mapping is None:
        raise ValueError("mapping must not be None")
    return len(mapping) == 0


# =============================================================================
# СЛИЯНИЕ
# =============================================================================


def merge_dictionaries(
    mappings: Iterable[Mapping[K, V]],
    copy_single: bool = False,
) -> Mapping[K, V] | None:
    """
    Слияние нескольких словарей. При совпадении ключей побеждает более
    поздний словарь.

    Порядок ключей результата: порядок первого появления. Значения:
    последняя запись.

    Args:
        mappings: Словари в порядке приоритета (последний главный)
        copy_single: Возвращать копию и для единственного словаря

    Returns:
        - None, если словарей нет
        - тот же объект, если словарь один (copy_single=False)
        - новый dict во всех остальных случаях

    Examples:
        >>> merge_dictionaries([])
        >>> merge_dictionaries([{"a": 1, "b": 2}, {"b": 3, "c": 4}])
        {'a': 1, 'b': 3, 'c': 4}
    """
    sources = list(mappings)

    if not sources:
        return None

    if len(sources) == 1 and not copy_single:
        return sources[0]

    merged: dict[K, V] = dict(sources[0])
    for source in sources[1:]:
        merged.update(source)

    return merged


def merge_into(
    target: MutableMapping[K, V],
    *sources: Mapping[K, V],
) -> MutableMapping[K, V]:
    """
    Слияние источников в target на месте с безусловной перезаписью.

    Args:
        target: Изменяемый целевой словарь
        *sources: Источники в порядке применения

    Returns:
        Тот же target (для цепочек вызовов)
    """
    for source in sources:
        add_range(target, source, replace_existing=True)
    return target


# =============================================================================
# ДОБАВЛЕНИЕ
# =============================================================================


def try_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Вставка значения, только если ключа ещё нет.

    Returns:
        True если значение ВСТАВЛЕНО, False если ключ уже был
        (словарь не изменяется)

    Examples:
        >>> data = {}
        >>> try_add(data, "k", 1)
        True
        >>> try_add(data, "k", 2)
        False
        >>> data
        {'k': 1}
    """
    if key in mapping:
        return False
    mapping[key] = value
    return True


def add_or_replace(
    mapping: MutableMapping[K, V], key: K, value: V
) -> MutableMapping[K, V]:
    """Безусловная запись key → value; возвращает тот же словарь."""
    mapping[key] = value
    return mapping


def add_range(
    mapping: MutableMapping[K, V],
    pairs: Pairs,
    replace_existing: bool,
) -> MutableMapping[K, V]:
    """
    Пакетное добавление пар.

    Args:
        mapping: Целевой словарь
        pairs: Словарь или итерируемое пар (key, value)
        replace_existing: Перезаписывать существующие ключи

    Returns:
        Тот же словарь
    """
    for key, value in _iter_pairs(pairs):
        if replace_existing or key not in mapping:
            mapping[key] = value
    return mapping


# =============================================================================
# ДОСТУП
# =============================================================================


def get_value(mapping: Mapping[K, V], key: K | None, default: V | None = None) -> V | None:
    """Значение по ключу или default; ключ None всегда даёт default."""
    if key is None:
        return default
    return mapping.get(key, default)


def get_or_add(mapping: MutableMapping[K, V], key: K, default: V | None = None) -> V | None:
    """
    Существующее значение или вставка default.

    ВАЖНО: при промахе словарь изменяется (растёт на один ключ).

    Examples:
        >>> data = {}
        >>> get_or_add(data, "missing", 5)
        5
        >>> get_or_add(data, "missing", 7)
        5
        >>> data
        {'missing': 5}
    """
    if key in mapping:
        return mapping[key]
    mapping[key] = default
    return default


# =============================================================================
# УДАЛЕНИЕ
# =============================================================================


def remove_value(mapping: MutableMapping[K, V], value: V) -> bool:
    """
    Удаление первого (в порядке итерации) ключа, которому соответствует value.

    Returns:
        True если ключ найден и удалён
    """
    for key, current in mapping.items():
        if current == value:
            del mapping[key]
            return True
    return False
