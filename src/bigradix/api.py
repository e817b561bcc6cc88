"""
Public API — строгие и try-варианты разбора и форматирования

Строгие функции (parse_*, format_*) поднимают исключения на некорректном вводе.
try-функции возвращают ParseResult(ok, value) и никогда не поднимают
EmptyInput/InvalidDigit: value == 0 при неудаче.

Любое другое исключение (TypeError для не-str, InvalidBase для
недопустимой базы, переданной вызывающим кодом) — ошибка программиста
и пропагирует.
"""

import logging
from typing import NamedTuple

import structlog

from bigradix.core.domain import Conversion
from bigradix.core.errors import EmptyInput, InvalidDigit
from bigradix.core.math.digit_codec import validate_base
from bigradix.core.math.radix_decoder import decode_from_base
from bigradix.core.math.radix_encoder import encode_to_base
from bigradix.core.math.tagged import (
    decode_tagged,
    decode_tagged_with_base,
    encode_tagged,
)

# Без configure_logging события уходят в stdlib logging и отсекаются его уровнем
logger = structlog.wrap_logger(logging.getLogger(__name__))


class ParseResult(NamedTuple):
    """Результат try-разбора: распаковывается как (ok, value)."""

    ok: bool
    value: int


_FAILED = ParseResult(ok=False, value=0)


# =============================================================================
# ЯВНАЯ БАЗА
# =============================================================================


def parse_from_base(digits: str, base: int) -> int:
    """
    Разбор строки цифр в базе base.

    Raises:
        EmptyInput: Для "" и "-"
        InvalidDigit: Для символов вне алфавита базы
        InvalidBase: Если base вне [2, 36]
    """
    return decode_from_base(digits, base)


def try_parse_from_base(digits: str, base: int) -> ParseResult:
    """
    Разбор строки цифр без исключений.

    Examples:
        >>> try_parse_from_base("1101", 2)
        ParseResult(ok=True, value=13)
        >>> try_parse_from_base("12", 2)
        ParseResult(ok=False, value=0)
    """
    try:
        return ParseResult(ok=True, value=decode_from_base(digits, base))
    except (EmptyInput, InvalidDigit) as e:
        logger.debug(
            "radix_parse_rejected",
            base=base,
            error=type(e).__name__,
            input_length=len(digits),
        )
        return _FAILED


def format_to_base(value: int, base: int) -> str:
    """Запись value в базе base без тега и без ведущих нулей."""
    return encode_to_base(value, base)


# =============================================================================
# ТЕГИРОВАННАЯ НОТАЦИЯ
# =============================================================================


def parse_tagged(literal: str) -> int:
    """
    Разбор тегированной строки ("0xff", "-0b101", "13_a", "42").

    Raises:
        EmptyInput: Для "", "-" и тега без цифр
        InvalidDigit: Для символов вне алфавита базы или недопустимого тега
    """
    return decode_tagged(literal)


def try_parse_tagged(literal: str) -> ParseResult:
    """
    Разбор тегированной строки без исключений.

    Examples:
        >>> try_parse_tagged("13_a")
        ParseResult(ok=True, value=10)
        >>> try_parse_tagged("magic string")
        ParseResult(ok=False, value=0)
    """
    try:
        return ParseResult(ok=True, value=decode_tagged(literal))
    except (EmptyInput, InvalidDigit) as e:
        logger.debug(
            "radix_parse_rejected",
            base=None,
            error=type(e).__name__,
            input_length=len(literal),
        )
        return _FAILED


def format_tagged(value: int, base: int) -> str:
    """Тегированная запись value: "0b"/"0o"/"0x"/"" или "<base>_"."""
    return encode_tagged(value, base)


# =============================================================================
# КОНВЕРСИЯ МЕЖДУ БАЗАМИ
# =============================================================================


def convert_base(digits: str, base_from: int, base_to: int) -> Conversion:
    """
    Перевод строки цифр из base_from в base_to.

    Args:
        digits: Строка цифр в base_from (возможно с "-")
        base_from: База исходной строки
        base_to: Целевая база

    Returns:
        Conversion со всеми представлениями значения

    Raises:
        EmptyInput, InvalidDigit: Некорректная строка цифр
        InvalidBase: Любая из баз вне [2, 36]

    Examples:
        >>> convert_base("ff", 16, 2).converted
        '11111111'
    """
    validate_base(base_to)
    value = decode_from_base(digits, base_from)
    conversion = Conversion.from_value(digits, value, base_from, base_to)
    logger.debug("radix_converted", base_from=base_from, base_to=base_to)
    return conversion


def convert_tagged(literal: str, base_to: int) -> Conversion:
    """
    Перевод тегированной строки в base_to.

    base_from в результате — база, определённая по тегу литерала.

    Examples:
        >>> convert_tagged("-0xff", 13).tagged
        '-13_168'
    """
    validate_base(base_to)
    base_from, value = decode_tagged_with_base(literal)
    conversion = Conversion.from_value(literal, value, base_from, base_to)
    logger.debug("radix_converted", base_from=base_from, base_to=base_to)
    return conversion
