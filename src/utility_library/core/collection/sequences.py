"""
Sequences — Уникальная вставка и помощники для списков и множеств

Модуль обеспечивает:
- Добавление без дубликатов для любой коллекции (list, set, deque, ...)
- Пакетное добавление с подсчётом уже существующих элементов
- Вставку без дубликатов по индексу для списков
- Перестановку, извлечение, соседей, дедупликацию для списков
- Проверки пустоты и сравнение по составу (включая нехешируемые элементы)
- Поиск, перемещение элементов, удаление повторов на краях
- Случайный и взвешенный выбор (rng для воспроизводимости)

ПОЛЯРНОСТЬ ВОЗВРАЩАЕМЫХ ЗНАЧЕНИЙ (известная несогласованность):
- add_unique / add_range_unique сообщают, что элемент УЖЕ БЫЛ в коллекции
- insert_unique / insert_range_unique сообщают, что элемент ВСТАВЛЕН
- mappings.try_add сообщает, что ключ ВСТАВЛЕН
Обе конвенции сохранены под разными именами; не объединять.

Членство проверяется через `in`, то есть через __eq__ (и __hash__ для set).
"""

import random
from collections.abc import (
    Callable,
    Collection,
    Iterable,
    MutableSequence,
    MutableSet,
    Sequence,
)
from typing import Any, TypeVar

T = TypeVar("T")


# =============================================================================
# ПУСТОТА
# =============================================================================


def is_null_or_empty(collection: Collection | None) -> bool:
    """True если коллекция None или не содержит элементов."""
    return collection is None or len(collection) == 0


def is_empty(collection: Collection) -> bool:
    """
    Проверка, что коллекция пуста.

    Raises:
        ValueError: Если collection is None (в отличие от is_null_or_empty)
    """
    if collection is None:
        raise ValueError("collection must not be None")
    return len(collection) == 0


# =============================================================================
# УНИКАЛЬНОЕ ДОБАВЛЕНИЕ
# =============================================================================


def _append(collection: Any, item: Any) -> None:
    if isinstance(collection, MutableSet):
        collection.add(item)
    elif hasattr(collection, "append"):
        collection.append(item)
    elif hasattr(collection, "add"):
        collection.add(item)
    else:
        raise TypeError(
            f"{type(collection).__name__} supports neither append() nor add()"
        )


def add_unique(collection: Any, item: T) -> bool:
    """
    Добавление элемента, только если его ещё нет в коллекции.

    ВАЖНО: возвращается признак того, что элемент УЖЕ БЫЛ в коллекции,
    а не признак вставки.

    Args:
        collection: Изменяемая коллекция с append() или add()
        item: Добавляемый элемент

    Returns:
        True если элемент уже присутствовал (коллекция не изменена),
        False если элемент был добавлен

    Examples:
        >>> items = [1, 2]
        >>> add_unique(items, 3)
        False
        >>> add_unique(items, 3)
        True
        >>> items
        [1, 2, 3]
    """
    already_has = item in collection
    if not already_has:
        _append(collection, item)
    return already_has


def add_range_unique(collection: Any, items: Iterable[T]) -> int:
    """
    Пакетный add_unique в порядке следования items.

    Дубликаты внутри самого items учитываются: после первой вставки
    повторное вхождение считается уже существующим.

    Args:
        collection: Изменяемая коллекция с append() или add()
        items: Добавляемые элементы

    Returns:
        Количество элементов, которые УЖЕ БЫЛИ в коллекции

    Examples:
        >>> items = [1, 2]
        >>> add_range_unique(items, [2, 3, 3])
        2
        >>> items
        [1, 2, 3]
    """
    count = 0
    for item in items:
        if add_unique(collection, item):
            count += 1
    return count


def add_range(target: MutableSet[T], items: Iterable[T]) -> None:
    """Добавление всех элементов во множество."""
    for item in items:
        target.add(item)


def insert_unique(target: MutableSequence[T], index: int, item: T) -> bool:
    """
    Вставка элемента по индексу, только если его ещё нет в списке.

    Returns:
        True если элемент ВСТАВЛЕН, False если уже присутствовал
    """
    if item in target:
        return False
    target.insert(index, item)
    return True


def insert_range_unique(
    target: MutableSequence[T], start_index: int, items: Iterable[T]
) -> int:
    """
    Последовательная вставка отсутствующих элементов начиная с start_index.

    Вставленные элементы идут подряд в исходном порядке; пропущенные
    (уже существующие) не сдвигают позицию вставки.

    Returns:
        Количество ВСТАВЛЕННЫХ элементов

    Examples:
        >>> items = ["a", "d"]
        >>> insert_range_unique(items, 1, ["b", "a", "c"])
        2
        >>> items
        ['a', 'b', 'c', 'd']
    """
    index = start_index
    inserted = 0
    for item in items:
        if insert_unique(target, index, item):
            index += 1
            inserted += 1
    return inserted


# =============================================================================
# ПОМОЩНИКИ ДЛЯ СПИСКОВ
# =============================================================================


def swap(target: MutableSequence[T], index1: int, index2: int) -> MutableSequence[T]:
    """Перестановка двух элементов на месте; возвращает тот же список."""
    target[index1], target[index2] = target[index2], target[index1]
    return target


def get_and_remove(target: MutableSequence[T], index: int) -> T:
    """Извлечение элемента по индексу с удалением. IndexError вне границ."""
    return target.pop(index)


def before(target: MutableSequence[T], item: T) -> T | None:
    """
    Элемент перед item.

    Returns:
        Предыдущий элемент или None, если item первый или отсутствует
    """
    if item not in target:
        return None
    index = target.index(item)
    return target[index - 1] if index > 0 else None


def after(target: MutableSequence[T], item: T) -> T | None:
    """
    Элемент после item.

    Returns:
        Следующий элемент или None, если item последний или отсутствует
    """
    if item not in target:
        return None
    index = target.index(item)
    return target[index + 1] if index < len(target) - 1 else None


def distinct(target: MutableSequence[T]) -> MutableSequence[T]:
    """
    Удаление повторов на месте с сохранением порядка первых вхождений.

    Работает и для нехешируемых элементов (проверка через ==).
    """
    seen: list[T] = []
    for item in target:
        if item not in seen:
            seen.append(item)
    target[:] = seen
    return target


def without(source: Iterable[T], item: T) -> list[T]:
    """Новый список без всех вхождений item; source не изменяется."""
    return [element for element in source if element != item]


def is_equivalent_to(source: Iterable[T], target: Iterable[T]) -> bool:
    """
    Сравнение по составу: одинаковые элементы с одинаковой кратностью,
    порядок игнорируется. Элементы сравниваются через ==, поэтому
    подходят и нехешируемые (списки, словари).

    Examples:
        >>> is_equivalent_to([1, 2, 2], [2, 1, 2])
        True
        >>> is_equivalent_to([1, 2], [1, 2, 2])
        False
        >>> is_equivalent_to([[1], [2]], [[2], [1]])
        True
    """
    remaining = list(target)
    for item in source:
        try:
            remaining.remove(item)
        except ValueError:
            return False
    return not remaining


# =============================================================================
# ПОИСК И ИЗВЛЕЧЕНИЕ
# =============================================================================


def try_get_value(source: Collection[T], item: T, default: T | None = None) -> T | None:
    """Элемент коллекции, равный item, или default, если такого нет."""
    for element in source:
        if element == item:
            return element
    return default


def get_and_remove_value(
    target: MutableSequence[T], item: T, default: T | None = None
) -> T | None:
    """
    Извлечение первого элемента, равного item, с удалением.

    Returns:
        Удалённый элемент или default, если item отсутствует
    """
    for index, element in enumerate(target):
        if element == item:
            del target[index]
            return element
    return default


def find(source: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Первый элемент, удовлетворяющий predicate, или None."""
    return next((element for element in source if predicate(element)), None)


def find_all(source: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Все элементы, удовлетворяющие predicate, в исходном порядке."""
    return [element for element in source if predicate(element)]


# =============================================================================
# ПЕРЕМЕЩЕНИЕ И ПОВТОРЫ
# =============================================================================


def move_up(target: MutableSequence[T], item: T, step: int = 1) -> bool:
    """
    Сдвиг item на step позиций к началу списка.

    Args:
        target: Список (изменяется на месте)
        item: Перемещаемый элемент (первое вхождение)
        step: Число позиций, >= 1

    Returns:
        True если элемент перемещён; False если item отсутствует,
        step < 1 или сдвиг вышел бы за начало списка

    Examples:
        >>> items = ["a", "b", "c"]
        >>> move_up(items, "c")
        True
        >>> items
        ['a', 'c', 'b']
    """
    if step < 1 or item not in target:
        return False
    index = target.index(item)
    if index < step:
        return False
    del target[index]
    target.insert(index - step, item)
    return True


def move_down(target: MutableSequence[T], item: T, step: int = 1) -> bool:
    """
    Сдвиг item на step позиций к концу списка.

    Returns:
        True если элемент перемещён; False если item отсутствует,
        step < 1 или сдвиг вышел бы за конец списка
    """
    if step < 1 or item not in target:
        return False
    index = target.index(item)
    if index >= len(target) - step:
        return False
    del target[index]
    target.insert(index + step, item)
    return True


def remove_start_repeat(target: MutableSequence[T], persist_one: bool = True) -> int:
    """
    Удаление подряд идущих повторов первого элемента.

    Args:
        target: Список (изменяется на месте)
        persist_one: False — при наличии повторов удалить и сам первый элемент

    Returns:
        Количество удалённых элементов

    Examples:
        >>> items = [1, 1, 1, 2, 1]
        >>> remove_start_repeat(items)
        2
        >>> items
        [1, 2, 1]
    """
    if len(target) < 2:
        return 0
    first = target[0]
    run = 1
    while run < len(target) and target[run] == first:
        run += 1
    if run == 1:
        return 0
    removed = run - 1 if persist_one else run
    del target[run - removed:run]
    return removed


def remove_end_repeat(target: MutableSequence[T], persist_one: bool = True) -> int:
    """
    Удаление подряд идущих повторов последнего элемента.

    Зеркально remove_start_repeat: [2, 1, 1, 1] → [2, 1].

    Returns:
        Количество удалённых элементов
    """
    if len(target) < 2:
        return 0
    last = target[-1]
    start = len(target) - 1
    while start > 0 and target[start - 1] == last:
        start -= 1
    run = len(target) - start
    if run == 1:
        return 0
    removed = run - 1 if persist_one else run
    del target[len(target) - removed:]
    return removed


# =============================================================================
# СЛУЧАЙНЫЙ ВЫБОР
# =============================================================================


def random_item(
    source: Sequence[T], rng: random.Random | None = None, default: T | None = None
) -> T | None:
    """Случайный элемент или default для пустой последовательности."""
    if not source:
        return default
    return (rng or random).choice(source)


def random_where(
    source: Iterable[T],
    predicate: Callable[[T], bool],
    rng: random.Random | None = None,
) -> T | None:
    """Случайный элемент среди удовлетворяющих predicate, иначе None."""
    return random_item(find_all(source, predicate), rng)


def random_items(
    source: Sequence[T],
    count: int,
    allow_repeat: bool = False,
    rng: random.Random | None = None,
) -> list[T]:
    """
    count случайных элементов.

    Args:
        source: Исходная последовательность
        count: Число элементов
        allow_repeat: True — выбор с возвращением (позиция может повториться)
        rng: Генератор случайных чисел (для воспроизводимости)

    Raises:
        ValueError: count < 0 или count > len(source) без повторов
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    generator = rng or random
    if allow_repeat:
        if not source:
            return []
        return generator.choices(source, k=count)
    if count > len(source):
        raise ValueError(f"count {count} exceeds collection size {len(source)}")
    return generator.sample(list(source), count)


def weighted_random(
    source: Sequence[T],
    weight: Callable[[T], float],
    rng: random.Random | None = None,
) -> T | None:
    """
    Случайный элемент с вероятностью, пропорциональной weight(item).

    Returns:
        Выбранный элемент или None, если последовательность пуста
        или сумма весов не положительна

    Raises:
        ValueError: Отрицательный вес
    """
    weights = _weights_of(source, weight)
    if not source or sum(weights) <= 0:
        return None
    return (rng or random).choices(source, weights=weights, k=1)[0]


def weighted_random_items(
    source: Sequence[T],
    weight: Callable[[T], float],
    count: int,
    rng: random.Random | None = None,
) -> list[T]:
    """
    count различных (по позиции) элементов, выбранных по весам без возвращения.

    Элементы с нулевым весом не выбираются.

    Raises:
        ValueError: count < 0, count больше числа элементов с положительным
            весом, или отрицательный вес
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    pool = list(source)
    weights = _weights_of(pool, weight)
    available = sum(1 for w in weights if w > 0)
    if count > available:
        raise ValueError(f"count {count} exceeds number of weighted items {available}")

    generator = rng or random
    picked: list[T] = []
    for _ in range(count):
        index = generator.choices(range(len(pool)), weights=weights, k=1)[0]
        picked.append(pool.pop(index))
        weights.pop(index)
    return picked


def _weights_of(source: Iterable[T], weight: Callable[[T], float]) -> list[float]:
    weights = [weight(element) for element in source]
    for value in weights:
        if value < 0:
            raise ValueError(f"weight must be non-negative, got {value}")
    return weights
