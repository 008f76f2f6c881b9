"""
Тесты для Construction & Parsing

Проверяет:
1. Разложение native int (включая границы int64)
2. Разбор десятичных строк и канонизацию
3. Таксономию ошибок (EmptyInput, SignOnly, InvalidCharacter)
4. ParseConfig (max_digits, native_bits)
"""

import logging

import pytest

from src.core.math.digits import ZERO, DigitStore, is_canonical
from src.core.math.parsing import (
    DEFAULT_PARSE_CONFIG,
    INT64_MAX,
    INT64_MIN,
    DecimalParseError,
    DigitLimitExceeded,
    EmptyInput,
    InvalidCharacter,
    NativeRangeError,
    ParseConfig,
    SignOnly,
    digits_from_int,
    native_range,
    parse_decimal,
)

# =============================================================================
# NATIVE INT
# =============================================================================


class TestDigitsFromInt:
    """Тесты для digits_from_int"""

    def test_zero_has_one_digit(self) -> None:
        assert digits_from_int(0) == ZERO

    def test_positive(self) -> None:
        assert digits_from_int(1203) == DigitStore((3, 0, 2, 1), False)

    def test_negative(self) -> None:
        assert digits_from_int(-45) == DigitStore((5, 4), True)

    def test_int64_min_converts_exactly(self) -> None:
        """abs(INT64_MIN) не переполняется"""
        assert digits_from_int(INT64_MIN) == parse_decimal("-9223372036854775808")

    def test_int64_max(self) -> None:
        assert digits_from_int(INT64_MAX) == parse_decimal("9223372036854775807")

    def test_beyond_int64_accepted_by_default(self) -> None:
        value = 10**30 + 7
        assert digits_from_int(value) == parse_decimal(str(value))

    def test_result_canonical(self) -> None:
        for value in (0, 1, -1, 10, -1000, INT64_MIN):
            assert is_canonical(digits_from_int(value))

    @pytest.mark.parametrize("value", [True, False, 1.5, "12", None])
    def test_non_int_rejected(self, value) -> None:
        with pytest.raises(TypeError):
            digits_from_int(value)  # type: ignore[arg-type]


class TestNativeBits:
    """Тесты для проверки диапазона native_bits"""

    def test_native_range(self) -> None:
        assert native_range(8) == (-128, 127)
        assert native_range(64) == (INT64_MIN, INT64_MAX)

    def test_strict_int64_accepts_bounds(self) -> None:
        config = ParseConfig(native_bits=64)
        assert not digits_from_int(INT64_MIN, config).is_zero
        assert not digits_from_int(INT64_MAX, config).is_zero

    def test_strict_int64_rejects_overflow(self) -> None:
        config = ParseConfig(native_bits=64)
        with pytest.raises(NativeRangeError) as exc_info:
            digits_from_int(INT64_MAX + 1, config)
        assert exc_info.value.bits == 64

        with pytest.raises(OverflowError):
            digits_from_int(INT64_MIN - 1, config)


# =============================================================================
# DECIMAL STRING
# =============================================================================


class TestParseDecimal:
    """Тесты для parse_decimal"""

    def test_positive(self) -> None:
        assert parse_decimal("9025467891111682738") == digits_from_int(9025467891111682738)

    def test_negative(self) -> None:
        assert parse_decimal("-7762836615529837640") == digits_from_int(-7762836615529837640)

    def test_leading_zeros_stripped(self) -> None:
        assert parse_decimal("000120") == DigitStore((0, 2, 1), False)

    def test_negative_zero_is_zero(self) -> None:
        assert parse_decimal("-0") == ZERO
        assert parse_decimal("-0000") == ZERO

    def test_zero(self) -> None:
        assert parse_decimal("0") == ZERO


class TestParseErrors:
    """Тесты таксономии ошибок разбора"""

    def test_empty_input(self) -> None:
        with pytest.raises(EmptyInput):
            parse_decimal("")

    def test_sign_only(self) -> None:
        with pytest.raises(SignOnly) as exc_info:
            parse_decimal("-")
        assert exc_info.value.text == "-"

    def test_invalid_character_reports_position(self) -> None:
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_decimal("89i1o4")
        assert exc_info.value.position == 2
        assert exc_info.value.character == "i"

    @pytest.mark.parametrize("text", ["+5", " 5", "5 ", "1_000", "--5", "5-", "1.0", "0x1f"])
    def test_rejected_forms(self, text: str) -> None:
        with pytest.raises(InvalidCharacter):
            parse_decimal(text)

    def test_non_ascii_digits_rejected(self) -> None:
        """str.isdigit() принимает эти символы, парсер — нет"""
        with pytest.raises(InvalidCharacter):
            parse_decimal("١٢")
        with pytest.raises(InvalidCharacter):
            parse_decimal("2²")

    def test_all_errors_are_value_errors(self) -> None:
        for text in ("", "-", "abc"):
            with pytest.raises(ValueError):
                parse_decimal(text)
            with pytest.raises(DecimalParseError):
                parse_decimal(text)

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_decimal(123)  # type: ignore[arg-type]

    def test_rejection_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.math.parsing"):
            with pytest.raises(SignOnly):
                parse_decimal("-")
        assert "sign only" in caplog.text


class TestParseConfig:
    """Тесты для ParseConfig"""

    def test_default_is_unlimited(self) -> None:
        assert DEFAULT_PARSE_CONFIG.max_digits is None
        assert DEFAULT_PARSE_CONFIG.native_bits is None

    def test_max_digits_enforced(self) -> None:
        config = ParseConfig(max_digits=5)
        assert not parse_decimal("-12345", config).is_zero

        with pytest.raises(DigitLimitExceeded) as exc_info:
            parse_decimal("123456", config)
        assert exc_info.value.digit_count == 6
        assert exc_info.value.max_digits == 5

    def test_invalid_character_checked_before_limit(self) -> None:
        with pytest.raises(InvalidCharacter):
            parse_decimal("12345x7", ParseConfig(max_digits=3))

    @pytest.mark.parametrize("kwargs", [{"max_digits": 0}, {"max_digits": -1}, {"native_bits": 1}])
    def test_invalid_config_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            ParseConfig(**kwargs)

    def test_config_frozen(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.max_digits = 10  # type: ignore[misc]
