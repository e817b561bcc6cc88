"""
Radix Encoder — int → строка цифр

Форматирование целого числа произвольной точности в систему счисления
с основанием base методом последовательного деления:
    value, remainder = divmod(value, base)
Остатки дают цифры от младшей к старшей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 → "0" в любой базе, без знака
2. Отрицательные значения → "-" + цифры модуля
3. Ведущие нули никогда не появляются
4. Только строчные буквы
"""

from bigradix.core.math.digit_codec import SIGN, validate_base, value_digit


def _validate_value(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")
    return value


def encode_magnitude(value: int, base: int) -> str:
    """
    Цифры модуля abs(value) без знака.

    Args:
        value: Целое число (знак игнорируется)
        base: Основание системы счисления [2, 36]

    Returns:
        Каноническая строка цифр без ведущих нулей

    Raises:
        InvalidBase: Если base вне [2, 36]
        TypeError: Если value не int

    Examples:
        >>> encode_magnitude(-255, 16)
        'ff'
        >>> encode_magnitude(0, 2)
        '0'
    """
    validate_base(base)
    magnitude = abs(_validate_value(value))

    if magnitude == 0:
        return "0"

    digits = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, base)
        digits.append(value_digit(remainder, base))
    return "".join(reversed(digits))


def encode_to_base(value: int, base: int) -> str:
    """
    Форматирование value в базе base (без тега).

    Examples:
        >>> encode_to_base(13, 2)
        '1101'
        >>> encode_to_base(-255, 16)
        '-ff'
        >>> encode_to_base(0, 36)
        '0'
    """
    digits = encode_magnitude(value, base)
    if value < 0:
        return SIGN + digits
    return digits
