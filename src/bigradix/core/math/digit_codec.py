"""
Digit Codec — Символ ↔ значение цифры

Отображение одного символа в числовое значение цифры в заданной базе и обратно:
- '0'..'9' → 0..9
- 'a'..'z' → 10..35 (только строчные ASCII буквы)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Декодированное значение всегда строго меньше базы
2. Любая буква отклоняется при base <= 10 (даже если её значение < base невозможно)
3. Заглавные буквы и не-ASCII цифры никогда не принимаются
4. value_digit — точная инверсия digit_value на [0, base)
"""

from typing import Final

from bigradix.core.errors import InvalidBase, InvalidDigit

# =============================================================================
# ПАРАМЕТРЫ СИСТЕМ СЧИСЛЕНИЯ
# =============================================================================

# Минимальная база (двоичная система)
MIN_BASE: Final[int] = 2

# Максимальная база: 10 цифр + 26 строчных букв
MAX_BASE: Final[int] = 36

# Алфавит цифр в каноническом (строчном) виде
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Наименьшая база, в которой буквы являются допустимыми цифрами
FIRST_LETTER_BASE: Final[int] = 11

# Единственное представление знака ("+" не используется)
SIGN: Final[str] = "-"


# =============================================================================
# ВАЛИДАЦИЯ БАЗЫ
# =============================================================================


def is_valid_base(base: object) -> bool:
    """
    Проверка, что base — int (не bool) в диапазоне [MIN_BASE, MAX_BASE].

    Examples:
        >>> is_valid_base(16)
        True
        >>> is_valid_base(1)
        False
        >>> is_valid_base(True)
        False
    """
    if isinstance(base, bool) or not isinstance(base, int):
        return False
    return MIN_BASE <= base <= MAX_BASE


def validate_base(base: object) -> int:
    """
    Валидация базы.

    Args:
        base: Проверяемое значение

    Returns:
        base без изменений

    Raises:
        InvalidBase: Если base не int в диапазоне [2, 36]
    """
    if not is_valid_base(base):
        raise InvalidBase(base)
    return base  # type: ignore[return-value]


# =============================================================================
# СИМВОЛ → ЗНАЧЕНИЕ
# =============================================================================


def digit_value(char: str, base: int) -> int:
    """
    Значение цифры char в системе с основанием base.

    Args:
        char: Один символ
        base: Основание системы счисления (валидность не проверяется)

    Returns:
        Значение цифры в диапазоне [0, base)

    Raises:
        InvalidDigit: Если символ не ASCII цифра и не строчная ASCII буква,
            если это буква при base <= 10, или если значение >= base

    Examples:
        >>> digit_value("7", 8)
        7
        >>> digit_value("f", 16)
        15
        >>> digit_value("a", 9)
        Traceback (most recent call last):
            ...
        bigradix.core.errors.InvalidDigit: The character 'a' is not a digit in base 9.
    """
    if len(char) != 1:
        raise InvalidDigit(f"Expected a single character, got {char!r}.", char=char, base=base)

    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    elif "a" <= char <= "z":
        # Буквы не нужны для баз до 10 включительно
        if base < FIRST_LETTER_BASE:
            raise InvalidDigit(
                f"The character {char!r} is not a digit in base {base}.",
                char=char,
                base=base,
            )
        value = ord(char) - ord("a") + 10
    else:
        raise InvalidDigit(
            f"The character {char!r} is not a digit in base {base}.",
            char=char,
            base=base,
        )

    if value >= base:
        raise InvalidDigit(
            f"The character {char!r} represents {value} which is not less than base {base}.",
            char=char,
            base=base,
        )

    return value


# =============================================================================
# ЗНАЧЕНИЕ → СИМВОЛ
# =============================================================================


def value_digit(value: int, base: int) -> str:
    """
    Символ цифры для значения value.

    Предусловие: 0 <= value < base. Вызывается только кодировщиком
    с остатками от деления на base, поэтому дополнительная проверка не нужна.

    Examples:
        >>> value_digit(10, 13)
        'a'
        >>> value_digit(0, 2)
        '0'
    """
    return DIGIT_ALPHABET[value]
