"""
Тесты для модуля Enums

Проверяет:
1. Установку и сброс флагов
2. contains_flag для одиночных и составных флагов
3. Поиск члена по имени и позиции по значению
"""

from enum import Enum, Flag, IntFlag

from utility_library.core.enums import (
    clear_flag,
    clear_flags,
    contains_flag,
    enum_index,
    from_string,
    set_flag,
    set_flags,
)


class Access(Flag):
    NONE = 0
    READ = 1
    WRITE = 2
    EXECUTE = 4


class Permission(IntFlag):
    VIEW = 1
    EDIT = 2
    ADMIN = 4


class Color(Enum):
    RED = 10
    GREEN = 20
    BLUE = 30


class TestFlags:
    """Тесты для set_flag / set_flags / clear_flag / clear_flags"""

    def test_set_flag(self) -> None:
        assert set_flag(Access.READ, Access.WRITE) == Access.READ | Access.WRITE

    def test_set_flags(self) -> None:
        result = set_flags(Access.NONE, Access.READ, Access.EXECUTE)
        assert result == Access.READ | Access.EXECUTE
        assert set_flags(Access.READ) == Access.READ

    def test_clear_flag(self) -> None:
        value = Access.READ | Access.WRITE
        assert clear_flag(value, Access.WRITE) == Access.READ
        assert clear_flag(Access.READ, Access.WRITE) == Access.READ

    def test_clear_flags(self) -> None:
        value = Access.READ | Access.WRITE | Access.EXECUTE
        assert clear_flags(value, Access.READ, Access.EXECUTE) == Access.WRITE

    def test_int_flag(self) -> None:
        value = set_flag(Permission.VIEW, Permission.EDIT)
        assert int(value) == 3
        assert clear_flag(value, Permission.VIEW) == Permission.EDIT


class TestContainsFlag:
    """Тесты для contains_flag"""

    def test_single_flag(self) -> None:
        value = Access.READ | Access.EXECUTE
        assert contains_flag(value, Access.READ) is True
        assert contains_flag(value, Access.WRITE) is False

    def test_composite_flag_requires_all_bits(self) -> None:
        """Составной флаг: нужны все биты"""
        value = Access.READ | Access.WRITE
        assert contains_flag(value, Access.READ | Access.WRITE) is True
        assert contains_flag(Access.READ, Access.READ | Access.WRITE) is False

    def test_flag_value_is_not_a_bit_index(self) -> None:
        """EXECUTE = 4 проверяется как бит 4, а не как 1 << 4"""
        assert contains_flag(Access.EXECUTE, Access.EXECUTE) is True
        assert contains_flag(Permission.ADMIN | Permission.VIEW, Permission.ADMIN) is True


class TestLookup:
    """Тесты для from_string / enum_index"""

    def test_from_string(self) -> None:
        assert from_string(Color, "GREEN") is Color.GREEN

    def test_from_string_unknown_returns_default(self) -> None:
        assert from_string(Color, "green") is None
        assert from_string(Color, "PURPLE", Color.RED) is Color.RED

    def test_enum_index(self) -> None:
        assert enum_index(Color, 10) == 0
        assert enum_index(Color, 30) == 2
        assert enum_index(Color, 99) == -1
