"""
Radix Conversion Errors

Таксономия ошибок разбора и форматирования целых чисел в системах счисления.

Иерархия:
    RadixConversionError (ValueError)
    ├── EmptyInput    — пустая строка или одиночный знак без цифр
    ├── InvalidDigit  — символ не является цифрой в данной базе
    └── InvalidBase   — база вне диапазона [2, 36]

try-варианты публичного API перехватывают ТОЛЬКО EmptyInput и InvalidDigit.
InvalidBase означает ошибку вызывающего кода и всегда пропагирует.
"""

from typing import Optional


class RadixConversionError(ValueError):
    """Базовый класс ошибок конверсии."""

    pass


class EmptyInput(RadixConversionError):
    """
    Пустая строка цифр.

    Возникает для "" и для строки, состоящей только из знака ("-"),
    а также для тегированной строки без цифр после префикса ("0x", "13_").
    """

    def __init__(self, message: str = "Cannot parse an empty string to an integer."):
        super().__init__(message)


class InvalidDigit(RadixConversionError):
    """
    Символ не может быть декодирован в данной базе.

    Attributes:
        char: Невалидный символ (None для ошибок уровня тега)
        base: База, в которой выполнялся разбор
        position: Индекс символа в исходной строке (если известен)
    """

    def __init__(
        self,
        message: str,
        char: Optional[str] = None,
        base: Optional[int] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.char = char
        self.base = base
        self.position = position


class InvalidBase(RadixConversionError):
    """База не является целым числом в диапазоне [2, 36]."""

    def __init__(self, base: object):
        super().__init__(f"Base must be an integer in [2, 36], got {base!r}")
        self.base = base
