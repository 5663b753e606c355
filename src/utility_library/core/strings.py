"""
Strings — Помощники для строк

Модуль обеспечивает:
- Проверки пустоты и проверки формата (int, float, Decimal, bool)
- Обрезку до максимальной длины с суффиксом
- Поиск и сравнение сразу с несколькими значениями (с учётом регистра или без)
- Удаление и замену нескольких подстрок за один вызов
- Регистр и пробелы (первая буква, Title Case, пробел перед заглавной)
- Шаблоны с подстановочным знаком "*" и регулярные выражения

Разбор чисел не зависит от локали: разделитель дробной части всегда ".".
None в предикатах даёт False, а не исключение.
"""

import re
from collections.abc import Iterable, Sequence
from decimal import Decimal, InvalidOperation

_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_SPACE_ON_UPPER_PATTERN = re.compile(r"([A-Z])(?=[a-z])|(?<=[a-z])([A-Z]|[0-9]+)")
_WORD_PATTERN = re.compile(r"\S+")
_DIGIT_PATTERN = re.compile(r"\d")


# =============================================================================
# ПУСТОТА
# =============================================================================


def is_null_or_empty(value: str | None) -> bool:
    return value is None or value == ""


def is_empty_or_white_space(value: str | None) -> bool:
    """True для None, пустой строки и строки только из пробельных символов."""
    return value is None or value.strip() == ""


def if_empty_or_white_space(value: str | None, default: str) -> str:
    """value, если в нём есть непробельные символы, иначе default."""
    return default if is_empty_or_white_space(value) else value


# =============================================================================
# ПРОВЕРКИ ФОРМАТА
# =============================================================================


def is_int(value: str | None) -> bool:
    """
    Строка — целое число в десятичной записи (знак и пробелы по краям допустимы).

    Examples:
        >>> is_int(" -42 ")
        True
        >>> is_int("4.2")
        False
    """
    return value is not None and _INT_PATTERN.fullmatch(value) is not None


def is_float(value: str | None) -> bool:
    """Строка разбирается как float ("2.5", "1e3", "nan"); "2,5" — нет."""
    if value is None:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


def is_decimal(value: str | None) -> bool:
    if value is None:
        return False
    try:
        Decimal(value.strip())
    except InvalidOperation:
        return False
    return True


def is_bool(value: str | None) -> bool:
    """Только "true" / "false" без учёта регистра и пробелов по краям."""
    return value is not None and value.strip().lower() in ("true", "false")


def is_number(value: str | None) -> bool:
    """True если строка содержит хотя бы одну цифру."""
    return bool(value) and _DIGIT_PATTERN.search(value) is not None


# =============================================================================
# ДЛИНА
# =============================================================================


def trim_to_max_length(value: str | None, max_length: int, suffix: str = "") -> str | None:
    """
    Обрезка до max_length символов.

    Суффикс добавляется только если строка действительно обрезана и
    не входит в max_length.

    Raises:
        ValueError: max_length < 0

    Examples:
        >>> trim_to_max_length("abcdef", 3, "...")
        'abc...'
        >>> trim_to_max_length("abc", 3, "...")
        'abc'
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    if value is None or len(value) <= max_length:
        return value
    return value[:max_length] + suffix


# =============================================================================
# ПОИСК И СРАВНЕНИЕ
# =============================================================================


def _fold(value: str, ignore_case: bool) -> str:
    return value.casefold() if ignore_case else value


def contains(value: str | None, sub: str, ignore_case: bool = False) -> bool:
    if value is None:
        return False
    return _fold(sub, ignore_case) in _fold(value, ignore_case)


def contains_any(value: str | None, values: Iterable[str], ignore_case: bool = False) -> bool:
    """True если value содержит хотя бы одну из подстрок."""
    return any(contains(value, sub, ignore_case) for sub in values)


def contains_all(value: str | None, values: Iterable[str], ignore_case: bool = False) -> bool:
    """
    True если value содержит каждую из подстрок.

    Для пустого набора подстрок — True (как all()), кроме value=None.
    """
    if value is None:
        return False
    return all(contains(value, sub, ignore_case) for sub in values)


def equals_any(value: str | None, values: Iterable[str], ignore_case: bool = False) -> bool:
    """True если value равно одному из values."""
    if value is None:
        return False
    folded = _fold(value, ignore_case)
    return any(folded == _fold(candidate, ignore_case) for candidate in values)


# =============================================================================
# УДАЛЕНИЕ И ЗАМЕНА
# =============================================================================


def remove_chars(value: str | None, chars: Iterable[str]) -> str | None:
    """Удаление всех вхождений каждого символа из chars."""
    if not value:
        return value
    return value.translate({ord(char): None for char in chars})


def remove_all(value: str, substrings: Iterable[str]) -> str:
    """Последовательное удаление всех вхождений каждой подстроки."""
    for sub in substrings:
        if sub:
            value = value.replace(sub, "")
    return value


def replace_all(value: str, old_values: Iterable[str], new_values: str | Sequence[str]) -> str:
    """
    Замена нескольких подстрок.

    Args:
        value: Исходная строка
        old_values: Заменяемые подстроки (обрабатываются по порядку)
        new_values: Одна строка для всех замен или последовательность
            замен, сопоставленных с old_values по позиции

    Raises:
        ValueError: new_values короче old_values

    Examples:
        >>> replace_all("a-b_c", ["-", "_"], " ")
        'a b c'
        >>> replace_all("x y", ["x", "y"], ["1", "2"])
        '1 2'
    """
    old_values = list(old_values)
    if isinstance(new_values, str):
        replacements = [new_values] * len(old_values)
    else:
        replacements = list(new_values)
        if len(replacements) < len(old_values):
            raise ValueError(
                f"new_values has {len(replacements)} items, "
                f"expected at least {len(old_values)}"
            )

    for old, new in zip(old_values, replacements):
        value = value.replace(old, new)
    return value


def replace_with(value: str, pattern: str, replacement: str) -> str:
    """Замена всех совпадений регулярного выражения."""
    return re.sub(pattern, replacement, value)


def reverse(value: str) -> str:
    return value[::-1]


# =============================================================================
# РЕГИСТР И ПРОБЕЛЫ
# =============================================================================


def to_upper_first_letter(value: str | None) -> str:
    """
    Первая буква заглавная, остальные без изменений.

    None, пустая строка и строка из пробелов → "".
    """
    if is_empty_or_white_space(value):
        return ""
    return value[0].upper() + value[1:]


def to_title_case(value: str) -> str:
    """
    Каждое слово с заглавной буквы, остальные буквы строчные.

    Пробельные символы между словами сохраняются.
    """
    return _WORD_PATTERN.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), value)


def space_on_upper(value: str) -> str:
    """
    Пробел перед заглавной буквой, начинающей слово, и перед группой цифр.

    Examples:
        >>> space_on_upper("HelloWorld")
        'Hello World'
        >>> space_on_upper("XMLParser")
        'XML Parser'
        >>> space_on_upper("version2Update")
        'version 2 Update'
    """
    return _SPACE_ON_UPPER_PATTERN.sub(r" \1\2", value).lstrip()


# =============================================================================
# ШАБЛОНЫ
# =============================================================================


def _wildcard_to_regex(pattern: str) -> re.Pattern:
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.DOTALL)


def is_like(value: str | None, pattern: str) -> bool:
    """
    Сравнение с шаблоном, где "*" — любая (в том числе пустая) подстрока.

    Прочие символы сравниваются буквально, с учётом регистра.

    Examples:
        >>> is_like("report_2024.csv", "report_*.csv")
        True
        >>> is_like("Report.csv", "report*")
        False
    """
    if value is None:
        return False
    return _wildcard_to_regex(pattern).fullmatch(value) is not None


def is_like_any(value: str | None, patterns: Iterable[str]) -> bool:
    return any(is_like(value, pattern) for pattern in patterns)


def is_match(value: str | None, pattern: str) -> bool:
    """True если регулярное выражение находит совпадение в любом месте строки."""
    return value is not None and re.search(pattern, value) is not None


def match(value: str | None, pattern: str) -> str:
    """Первое совпадение регулярного выражения или "", если совпадений нет."""
    if value is None:
        return ""
    found = re.search(pattern, value)
    return found.group(0) if found else ""


def match_values(value: str | None, pattern: str) -> list[str]:
    """Все совпадения регулярного выражения (полные совпадения, не группы)."""
    if value is None:
        return []
    return [found.group(0) for found in re.finditer(pattern, value)]
