"""
Тесты для модуля Radix Decoder

Проверяет:
1. Разбор положительных и отрицательных строк цифр
2. EmptyInput для "" и "-"
3. InvalidDigit на первом невалидном символе (с позицией)
4. Значения за пределами 64 бит
5. Согласованность со встроенным int(s, base)
"""

import pytest

from bigradix.core.errors import EmptyInput, InvalidBase, InvalidDigit
from bigradix.core.math.digit_codec import DIGIT_ALPHABET, MAX_BASE, MIN_BASE, SIGN
from bigradix.core.math.radix_decoder import decode_from_base, decode_magnitude

# Двоичная строка и её значение (более 600 бит)
LARGE_BINARY = (
    "1" * 242 + "0" * 32 + "1" * 150 + "0" * 44 + "1" * 57 + "0" * 88 + "1" * 60
)
LARGE_BINARY_VALUE = int(LARGE_BINARY, 2)


# =============================================================================
# ТЕСТЫ decode_magnitude
# =============================================================================


class TestDecodeMagnitude:
    """Тесты для decode_magnitude"""

    def test_examples(self) -> None:
        """Базовые примеры"""
        assert decode_magnitude("1101", 2) == 13
        assert decode_magnitude("17", 8) == 15
        assert decode_magnitude("ff", 16) == 255
        assert decode_magnitude("a", 13) == 10
        assert decode_magnitude("zz", 36) == 36 * 36 - 1

    def test_leading_zeros_accepted(self) -> None:
        """Ведущие нули допускаются на входе"""
        assert decode_magnitude("0007", 10) == 7
        assert decode_magnitude("000", 2) == 0

    def test_sign_rejected(self) -> None:
        """Знак в беззнаковой строке — InvalidDigit"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_magnitude("-1", 10)
        assert exc_info.value.position == 0

    def test_empty_rejected(self) -> None:
        """Пустая строка — EmptyInput"""
        with pytest.raises(EmptyInput):
            decode_magnitude("", 10)


# =============================================================================
# ТЕСТЫ decode_from_base
# =============================================================================


class TestDecodeFromBase:
    """Тесты для decode_from_base"""

    def test_binary_example(self) -> None:
        """"1101" в базе 2 == 13"""
        assert decode_from_base("1101", 2) == 13

    @pytest.mark.parametrize("base", range(MIN_BASE, MAX_BASE + 1))
    def test_zero_in_every_base(self, base: int) -> None:
        """"0" == 0 в любой базе"""
        assert decode_from_base("0", base) == 0

    @pytest.mark.parametrize(
        "digits, expected",
        [("a", 10), ("b", 11), ("c", 12), ("d", 13), ("e", 14), ("f", 15)],
    )
    def test_hex_letters(self, digits: str, expected: int) -> None:
        """Шестнадцатеричные буквы"""
        assert decode_from_base(digits, 16) == expected

    def test_a_in_base_13(self) -> None:
        """"a" в базе 13 == 10"""
        assert decode_from_base("a", 13) == 10

    def test_negative(self) -> None:
        """Ведущий "-" даёт отрицательное значение"""
        assert decode_from_base("-1101", 2) == -13
        assert decode_from_base("-ff", 16) == -255
        assert decode_from_base("-0", 10) == 0

    @pytest.mark.parametrize("value", [1, 2, 7, 255, 2**31 - 1, 2**32, 2**63, 2**64 + 1])
    def test_negative_binary_matches_builtin(self, value: int) -> None:
        """Отрицательные двоичные строки согласованы с bin()"""
        assert decode_from_base("-" + bin(value)[2:], 2) == -value

    def test_large_binary(self) -> None:
        """Значение за пределами 64 бит не усекается"""
        result = decode_from_base(LARGE_BINARY, 2)
        assert result == LARGE_BINARY_VALUE
        assert result.bit_length() == len(LARGE_BINARY)

    def test_large_decimal(self) -> None:
        """Большое десятичное значение (52!)"""
        digits = "80658175170943878571660636856403766975289505440883277824000000000000"
        assert decode_from_base(digits, 10) == int(digits)

    @pytest.mark.parametrize("base", range(MIN_BASE, MAX_BASE + 1))
    def test_matches_builtin_int(self, base: int) -> None:
        """Согласованность с int(s, base) для всех цифр базы"""
        digits = DIGIT_ALPHABET[:base][::-1] * 5
        assert decode_from_base(digits, base) == int(digits, base)
        assert decode_from_base(SIGN + digits, base) == -int(digits, base)


# =============================================================================
# ТЕСТЫ ОШИБОК
# =============================================================================


class TestDecodeFromBaseErrors:
    """Тесты ошибок decode_from_base"""

    @pytest.mark.parametrize("base", [2, 10, 16, 36])
    def test_empty_string(self, base: int) -> None:
        """"" → EmptyInput"""
        with pytest.raises(EmptyInput, match="empty string"):
            decode_from_base("", base)

    def test_bare_sign(self) -> None:
        """"-" → EmptyInput"""
        with pytest.raises(EmptyInput, match="bare sign"):
            decode_from_base("-", 10)

    def test_double_sign(self) -> None:
        """"--1" → InvalidDigit на позиции 1"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_from_base("--1", 10)
        assert exc_info.value.char == "-"
        assert exc_info.value.position == 1

    def test_plus_sign_rejected(self) -> None:
        """Явный "+" не принимается"""
        with pytest.raises(InvalidDigit):
            decode_from_base("+1", 10)

    def test_letter_above_base(self) -> None:
        """"l" в базе 13 отклоняется"""
        with pytest.raises(InvalidDigit):
            decode_from_base("l", 13)

    @pytest.mark.parametrize("base", [9, 10])
    def test_letter_in_small_base(self, base: int) -> None:
        """"a" в базах 9, 10 отклоняется"""
        with pytest.raises(InvalidDigit):
            decode_from_base("a", base)

    @pytest.mark.parametrize("value", [0, 1, 15, 255, 4096, 2**31 - 1])
    def test_hex_digit_in_binary(self, value: int) -> None:
        """Шестнадцатеричная строка с 'f' невалидна в базе 2"""
        with pytest.raises(InvalidDigit):
            decode_from_base(format(value, "x") + "f", 2)

    def test_first_invalid_position_reported(self) -> None:
        """Позиция первого невалидного символа"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_from_base("1012", 2)
        assert exc_info.value.position == 3

    def test_position_includes_sign(self) -> None:
        """Позиция отсчитывается от начала строки со знаком"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_from_base("-12", 2)
        assert exc_info.value.position == 2

    def test_uppercase_rejected(self) -> None:
        """Заглавные шестнадцатеричные цифры не принимаются"""
        with pytest.raises(InvalidDigit):
            decode_from_base("FF", 16)

    def test_whitespace_rejected(self) -> None:
        """Пробелы не обрезаются"""
        with pytest.raises(InvalidDigit):
            decode_from_base(" 1", 10)
        with pytest.raises(InvalidDigit):
            decode_from_base("1 ", 10)

    @pytest.mark.parametrize("base", [0, 1, 37])
    def test_invalid_base(self, base: int) -> None:
        """База вне диапазона — InvalidBase"""
        with pytest.raises(InvalidBase):
            decode_from_base("1", base)

    def test_non_string_rejected(self) -> None:
        """Не-строка — TypeError"""
        with pytest.raises(TypeError, match="digits must be str"):
            decode_from_base(1101, 2)  # type: ignore[arg-type]
