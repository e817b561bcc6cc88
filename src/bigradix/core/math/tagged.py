"""
Tagged Literals — Префиксная нотация систем счисления

Тегированная строка совместима с синтаксисом целочисленных литералов Python:
- "0b" → база 2
- "0o" → база 8
- "0x" → база 16
- ""   → база 10
- "<base>_" → любая другая база (например "13_a" == 10)

Формат: [-][tag]digits

Порядок разбора:
1. Необязательный ведущий "-" (снимается до анализа тега)
2. Обобщённый тег: часть до первого "_" состоит только из ASCII цифр
3. Двухсимвольный префикс 0b/0o/0x (только строчные)
4. Иначе — десятичная запись
Знак применяется после разбора беззнаковых цифр.
"""

from types import MappingProxyType
from typing import Final, Mapping

from bigradix.core.errors import EmptyInput, InvalidDigit
from bigradix.core.math.digit_codec import MAX_BASE, MIN_BASE, SIGN, validate_base
from bigradix.core.math.radix_decoder import decode_magnitude
from bigradix.core.math.radix_encoder import encode_magnitude

# =============================================================================
# ТАБЛИЦА ТЕГОВ
# =============================================================================

# Разделитель обобщённого тега "<base>_"
TAG_SEPARATOR: Final[str] = "_"

# Общеизвестные префиксы (синтаксис литералов Python)
WELL_KNOWN_TAGS: Final[Mapping[int, str]] = MappingProxyType(
    {
        2: "0b",
        8: "0o",
        16: "0x",
        10: "",
    }
)

# Обратная таблица для разбора двухсимвольных префиксов
_PREFIX_BASES: Final[Mapping[str, int]] = MappingProxyType(
    {tag: base for base, tag in WELL_KNOWN_TAGS.items() if tag}
)

_PREFIX_LENGTH: Final[int] = 2

_DECIMAL_BASE: Final[int] = 10


# =============================================================================
# ТЕГ ДЛЯ БАЗЫ
# =============================================================================


def tag_for_base(base: int) -> str:
    """
    Тег системы счисления.

    Examples:
        >>> tag_for_base(16)
        '0x'
        >>> tag_for_base(10)
        ''
        >>> tag_for_base(13)
        '13_'
    """
    validate_base(base)
    if base in WELL_KNOWN_TAGS:
        return WELL_KNOWN_TAGS[base]
    return f"{base}{TAG_SEPARATOR}"


# =============================================================================
# РАЗБОР
# =============================================================================


def _is_ascii_decimal(text: str) -> bool:
    # str.isdigit() принимает и не-ASCII цифры ("٣", "²")
    return bool(text) and text.isascii() and text.isdigit()


def split_tag(unsigned: str) -> tuple[int, str]:
    """
    Разделение беззнаковой тегированной строки на (base, digits).

    Raises:
        InvalidDigit: Если обобщённый тег задаёт базу вне [2, 36]

    Examples:
        >>> split_tag("13_a")
        (13, 'a')
        >>> split_tag("0xff")
        (16, 'ff')
        >>> split_tag("42")
        (10, '42')
    """
    tag, separator, rest = unsigned.partition(TAG_SEPARATOR)
    if separator and _is_ascii_decimal(tag):
        # Тег разбирается собственным декодером: int() ограничен по длине строки
        base = decode_magnitude(tag, _DECIMAL_BASE)
        if not MIN_BASE <= base <= MAX_BASE:
            raise InvalidDigit(
                f"The tag '{tag}{TAG_SEPARATOR}' does not name a base in [{MIN_BASE}, {MAX_BASE}].",
                base=base,
                position=0,
            )
        return base, rest

    prefix = unsigned[:_PREFIX_LENGTH]
    if prefix in _PREFIX_BASES:
        return _PREFIX_BASES[prefix], unsigned[_PREFIX_LENGTH:]

    return _DECIMAL_BASE, unsigned


def decode_tagged_with_base(literal: str) -> tuple[int, int]:
    """
    Разбор тегированной строки с возвратом базы, определённой по тегу.

    Args:
        literal: Строка вида [-][tag]digits

    Returns:
        (base, value): база литерала и целое число со знаком

    Raises:
        EmptyInput: Для "", "-", а также для тега без цифр ("0x", "13_")
        InvalidDigit: Для символов вне алфавита базы или недопустимого тега

    Examples:
        >>> decode_tagged_with_base("-0xff")
        (16, -255)
        >>> decode_tagged_with_base("42")
        (10, 42)
    """
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, got {type(literal).__name__}")

    if not literal:
        raise EmptyInput()

    negative = literal.startswith(SIGN)
    unsigned = literal[len(SIGN):] if negative else literal
    if not unsigned:
        raise EmptyInput("Cannot parse a bare sign to an integer.")

    base, digits = split_tag(unsigned)
    try:
        magnitude = decode_magnitude(digits, base)
    except InvalidDigit as e:
        # Позиция относительно исходной строки (знак + тег)
        if e.position is not None:
            e.position += len(literal) - len(digits)
        raise
    return base, -magnitude if negative else magnitude


def decode_tagged(literal: str) -> int:
    """
    Разбор тегированной строки.

    Examples:
        >>> decode_tagged("13_a")
        10
        >>> decode_tagged("-0xff")
        -255
        >>> decode_tagged("0")
        0
    """
    _, value = decode_tagged_with_base(literal)
    return value


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def encode_tagged(value: int, base: int) -> str:
    """
    Форматирование value в тегированную строку.

    Ноль никогда не получает знак: encode_tagged(0, 16) == "0x0".

    Examples:
        >>> encode_tagged(10, 13)
        '13_a'
        >>> encode_tagged(-255, 16)
        '-0xff'
        >>> encode_tagged(-42, 10)
        '-42'
    """
    digits = encode_magnitude(value, base)
    tagged = tag_for_base(base) + digits
    if value < 0:
        return SIGN + tagged
    return tagged
