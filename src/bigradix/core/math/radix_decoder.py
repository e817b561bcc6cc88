"""
Radix Decoder — Строка цифр → int

Разбор строки цифр в системе счисления с основанием base в целое число
произвольной точности.

Алгоритм (старшая цифра первой, схема Горнера):
    acc = 0
    for d in digits: acc = acc * base + d
Эквивалентно Σ d[len-1-i] × base^i. Промежуточные значения — Python int,
поэтому усечение невозможно при любом количестве цифр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая строка и одиночный "-" → EmptyInput
2. Первый невалидный символ → InvalidDigit (без частичного результата)
3. Знак допускается только один раз и только в начале
4. "+" никогда не принимается
"""

from bigradix.core.errors import EmptyInput, InvalidDigit
from bigradix.core.math.digit_codec import SIGN, digit_value, validate_base


def decode_magnitude(digits: str, base: int) -> int:
    """
    Разбор беззнаковой строки цифр.

    Args:
        digits: Строка цифр без знака
        base: Основание системы счисления [2, 36]

    Returns:
        Неотрицательное целое

    Raises:
        EmptyInput: Если digits пустая
        InvalidDigit: Если встретился символ вне алфавита базы (включая "-")
        InvalidBase: Если base вне [2, 36]

    Examples:
        >>> decode_magnitude("1101", 2)
        13
        >>> decode_magnitude("ff", 16)
        255
    """
    validate_base(base)

    if not digits:
        raise EmptyInput()

    acc = 0
    for position, char in enumerate(digits):
        try:
            acc = acc * base + digit_value(char, base)
        except InvalidDigit as e:
            e.position = position
            raise
    return acc


def decode_from_base(digits: str, base: int) -> int:
    """
    Разбор строки цифр с необязательным ведущим "-".

    Args:
        digits: Строка цифр, возможно с ведущим "-"
        base: Основание системы счисления [2, 36]

    Returns:
        Целое число со знаком

    Raises:
        EmptyInput: Для "" и "-"
        InvalidDigit: Для любого символа вне алфавита базы
        InvalidBase: Если base вне [2, 36]

    Examples:
        >>> decode_from_base("1101", 2)
        13
        >>> decode_from_base("-ff", 16)
        -255
        >>> decode_from_base("0", 7)
        0
    """
    if not isinstance(digits, str):
        raise TypeError(f"digits must be str, got {type(digits).__name__}")

    if digits.startswith(SIGN):
        magnitude = digits[len(SIGN):]
        if not magnitude:
            raise EmptyInput("Cannot parse a bare sign to an integer.")
        try:
            return -decode_magnitude(magnitude, base)
        except InvalidDigit as e:
            # Позиция относительно исходной строки (со знаком)
            if e.position is not None:
                e.position += len(SIGN)
            raise

    return decode_magnitude(digits, base)
