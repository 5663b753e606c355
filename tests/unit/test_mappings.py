"""
Тесты для модуля Mappings

Проверяет:
1. merge_dictionaries: None для пустого входа, aliasing для одного словаря,
   last-write-wins и порядок ключей для нескольких
2. merge_into: слияние на месте с перезаписью
3. get_or_add: побочная вставка при промахе
4. try_add: полярность True = вставлено
5. add_or_replace / add_range / get_value / remove_value / пустота
"""

from collections import OrderedDict

import pytest

from utility_library.core.collection.mappings import (
    add_or_replace,
    add_range,
    get_or_add,
    get_value,
    is_empty,
    is_null_or_empty,
    merge_dictionaries,
    merge_into,
    remove_value,
    try_add,
)

# =============================================================================
# ТЕСТЫ СЛИЯНИЯ
# =============================================================================


class TestMergeDictionaries:
    """Тесты для merge_dictionaries"""

    def test_empty_input_returns_none(self) -> None:
        """Пустой вход → None, а не пустой словарь"""
        assert merge_dictionaries([]) is None

    def test_single_input_is_aliased(self) -> None:
        """Единственный словарь возвращается как есть (тот же объект)"""
        source = {"a": 1}
        result = merge_dictionaries([source])
        assert result == {"a": 1}
        assert result is source

    def test_single_input_copy_single(self) -> None:
        """copy_single=True возвращает новый словарь"""
        source = {"a": 1}
        result = merge_dictionaries([source], copy_single=True)
        assert result == {"a": 1}
        assert result is not source

    def test_later_wins(self) -> None:
        """Более поздние словари перезаписывают значения"""
        result = merge_dictionaries([{"a": 1, "b": 2}, {"b": 3, "c": 4}])
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_key_order_first_appearance(self) -> None:
        """Порядок ключей — порядок первого появления"""
        result = merge_dictionaries([{"b": 1}, {"a": 2}, {"b": 3}])
        assert list(result) == ["b", "a"]
        assert result["b"] == 3

    def test_inputs_not_mutated(self) -> None:
        """Входные словари не изменяются при N > 1"""
        first = {"a": 1}
        second = {"a": 2}
        result = merge_dictionaries([first, second])
        assert first == {"a": 1}
        assert second == {"a": 2}
        assert result is not first

    def test_accepts_generator(self) -> None:
        """Вход может быть генератором"""
        result = merge_dictionaries(d for d in [{"x": 1}, {"y": 2}])
        assert result == {"x": 1, "y": 2}


class TestMergeInto:
    """Тесты для merge_into"""

    def test_in_place_overwrite(self) -> None:
        """Слияние на месте, возвращается target"""
        target = {"a": 1, "b": 1}
        result = merge_into(target, {"b": 2}, {"c": 3, "a": 9})
        assert result is target
        assert target == {"a": 9, "b": 2, "c": 3}

    def test_no_sources(self) -> None:
        target = {"a": 1}
        assert merge_into(target) == {"a": 1}

    def test_other_mutable_mapping(self) -> None:
        target = OrderedDict(a=1)
        merge_into(target, {"a": 2})
        assert target["a"] == 2


# =============================================================================
# ТЕСТЫ ДОБАВЛЕНИЯ И ДОСТУПА
# =============================================================================


class TestGetOrAdd:
    """Тесты для get_or_add"""

    def test_miss_inserts_default(self) -> None:
        """Промах вставляет default и увеличивает размер"""
        data: dict[str, int] = {}
        assert get_or_add(data, "missing", 5) == 5
        assert len(data) == 1
        assert data == {"missing": 5}

    def test_hit_returns_existing(self) -> None:
        """Повторный вызов с другим default возвращает исходное значение"""
        data: dict[str, int] = {}
        get_or_add(data, "missing", 5)
        assert get_or_add(data, "missing", 7) == 5
        assert data == {"missing": 5}

    def test_existing_none_value_is_a_hit(self) -> None:
        """Ключ со значением None считается найденным"""
        data = {"k": None}
        assert get_or_add(data, "k", 3) is None
        assert data == {"k": None}


class TestTryAdd:
    """Тесты для try_add"""

    def test_first_call_inserts(self) -> None:
        """Первый вызов вставляет и возвращает True"""
        data: dict[str, str] = {}
        assert try_add(data, "k", "v") is True
        assert data == {"k": "v"}

    def test_repeat_call_unchanged(self) -> None:
        """Повторный вызов возвращает False и не изменяет словарь"""
        data = {"k": "v"}
        assert try_add(data, "k", "other") is False
        assert data == {"k": "v"}


class TestAddHelpers:
    """Тесты для add_or_replace / add_range"""

    def test_add_or_replace(self) -> None:
        data = {"a": 1}
        assert add_or_replace(data, "a", 2) is data
        assert data == {"a": 2}

    def test_add_range_without_replace(self) -> None:
        """replace_existing=False сохраняет существующие значения"""
        data = {"a": 1}
        add_range(data, [("a", 2), ("b", 3)], replace_existing=False)
        assert data == {"a": 1, "b": 3}

    def test_add_range_with_replace(self) -> None:
        data = {"a": 1}
        add_range(data, {"a": 2, "b": 3}, replace_existing=True)
        assert data == {"a": 2, "b": 3}


class TestGetValue:
    """Тесты для get_value"""

    def test_existing_key(self) -> None:
        assert get_value({"a": 1}, "a") == 1

    def test_missing_key_default(self) -> None:
        assert get_value({"a": 1}, "b", 0) == 0
        assert get_value({"a": 1}, "b") is None

    def test_none_key_default(self) -> None:
        """Ключ None всегда даёт default, даже если он есть в словаре"""
        assert get_value({None: 1}, None, -1) == -1


# =============================================================================
# ТЕСТЫ УДАЛЕНИЯ И ПУСТОТЫ
# =============================================================================


class TestRemoveValue:
    """Тесты для remove_value"""

    def test_removes_first_match_only(self) -> None:
        data = {"a": 1, "b": 2, "c": 1}
        assert remove_value(data, 1) is True
        assert data == {"b": 2, "c": 1}

    def test_missing_value(self) -> None:
        data = {"a": 1}
        assert remove_value(data, 5) is False
        assert data == {"a": 1}


class TestEmptiness:
    """Тесты для is_null_or_empty / is_empty"""

    def test_is_null_or_empty(self) -> None:
        assert is_null_or_empty(None) is True
        assert is_null_or_empty({}) is True
        assert is_null_or_empty({"a": 1}) is False

    def test_is_empty_none_raises(self) -> None:
        with pytest.raises(ValueError, match="mapping must not be None"):
            is_empty(None)
