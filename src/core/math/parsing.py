"""
Construction & Parsing — построение канонического DigitStore

Источники значения:
- native int: разложение abs(value) повторным divmod на 10 (LSD first)
- decimal string: грамматика '-'? [0-9]+ (только ASCII цифры)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда проходит canonicalize() ("-0" → 0, "007" → 7)
2. Ошибка разбора обнаруживается до построения значения: частично
   построенный DigitStore никогда не наблюдаем
3. Все ошибки разбора — подклассы DecimalParseError (ValueError)

Python int не ограничен по ширине, поэтому abs() минимального int64
вычисляется на более широком промежуточном значении и не переполняется.
Явная проверка диапазона фиксированной ширины включается через
ParseConfig.native_bits.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.core.math.digits import DIGIT_BASE, DigitStore, canonicalize

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символ знака отрицательного числа
MINUS_SIGN: Final[str] = "-"

# Допустимые символы цифр (ASCII only: str.isdigit() принимает '²', '٣' и т.п.)
ASCII_DIGITS: Final[str] = "0123456789"

# Границы signed 64-bit
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalParseError(ValueError):
    """
    Базовая ошибка разбора десятичной строки.

    Наследует ValueError: вызывающий код может ловить как конкретный вид
    ошибки, так и ValueError целиком.
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class EmptyInput(DecimalParseError):
    """Пустая строка"""

    def __init__(self, text: str = ""):
        super().__init__("Cannot parse an empty string as an integer", text)


class SignOnly(DecimalParseError):
    """Строка состоит только из знака, цифр нет"""

    def __init__(self, text: str):
        super().__init__(f"Sign without digits: {text!r}", text)


class InvalidCharacter(DecimalParseError):
    """Недопустимый символ вне ведущего знака"""

    def __init__(self, text: str, position: int):
        self.position = position
        self.character = text[position]
        super().__init__(
            f"Invalid character {self.character!r} at position {position} in {text!r}",
            text,
        )


class DigitLimitExceeded(DecimalParseError):
    """Число цифр превышает ParseConfig.max_digits"""

    def __init__(self, text: str, digit_count: int, max_digits: int):
        self.digit_count = digit_count
        self.max_digits = max_digits
        super().__init__(
            f"Decimal string has {digit_count} digits, limit is {max_digits}",
            text,
        )


class NativeRangeError(OverflowError):
    """Native int вне signed диапазона ParseConfig.native_bits"""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"{value} does not fit in a signed {bits}-bit integer")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParseConfig:
    """Конфигурация построения значений.

    - max_digits: максимум цифр в десятичной строке (None — без ограничения)
    - native_bits: ширина native int для проверки диапазона
      (None — любой Python int, 64 — строго signed 64-bit)
    """

    max_digits: Optional[int] = None
    native_bits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")
        if self.native_bits is not None and self.native_bits <= 1:
            raise ValueError(f"native_bits must be greater than 1, got {self.native_bits}")


DEFAULT_PARSE_CONFIG: Final[ParseConfig] = ParseConfig()


# =============================================================================
# NATIVE INT
# =============================================================================


def native_range(bits: int) -> tuple[int, int]:
    """
    Signed диапазон для заданной ширины.

    Examples:
        >>> native_range(8)
        (-128, 127)
        >>> native_range(64) == (INT64_MIN, INT64_MAX)
        True
    """
    bound = 1 << (bits - 1)
    return (-bound, bound - 1)


def digits_from_int(value: int, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> DigitStore:
    """
    Построение DigitStore из native int.

    sign = value < 0; abs(value) раскладывается повторным divmod на 10,
    младшая цифра первой. Для 0 результат содержит ровно одну цифру.

    Args:
        value: Целое (bool не принимается)
        config: Конфигурация (проверка native_bits)

    Returns:
        Канонический DigitStore

    Raises:
        TypeError: Если value не int или является bool
        NativeRangeError: Если value вне диапазона config.native_bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    if config.native_bits is not None:
        low, high = native_range(config.native_bits)
        if not low <= value <= high:
            raise NativeRangeError(value, config.native_bits)

    negative = value < 0
    remaining = -value if negative else value

    digits: list[int] = []
    while True:
        remaining, digit = divmod(remaining, DIGIT_BASE)
        digits.append(digit)
        if remaining == 0:
            break

    return canonicalize(digits, negative)


# =============================================================================
# DECIMAL STRING
# =============================================================================


def parse_decimal(text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> DigitStore:
    """
    Разбор десятичной строки вида '-'? [0-9]+.

    Строка проверяется целиком до построения magnitude. Цифры читаются
    справа налево (младшая первой), результат канонизируется.

    Args:
        text: Десятичная строка
        config: Конфигурация (ограничение max_digits)

    Returns:
        Канонический DigitStore

    Raises:
        TypeError: Если text не str
        EmptyInput: Пустая строка
        SignOnly: Только "-"
        InvalidCharacter: Символ не из ASCII_DIGITS вне ведущего знака
        DigitLimitExceeded: Цифр больше config.max_digits

    Examples:
        >>> parse_decimal("-0042")
        DigitStore(digits=(2, 4), negative=True)
        >>> parse_decimal("-0")
        DigitStore(digits=(0,), negative=False)
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if not text:
        logger.debug("Rejected decimal text: empty input")
        raise EmptyInput(text)

    negative = text[0] == MINUS_SIGN
    start = 1 if negative else 0

    if start == len(text):
        logger.debug("Rejected decimal text %r: sign only", text)
        raise SignOnly(text)

    for position in range(start, len(text)):
        if text[position] not in ASCII_DIGITS:
            logger.debug("Rejected decimal text %r: invalid character at %d", text, position)
            raise InvalidCharacter(text, position)

    digit_count = len(text) - start
    if config.max_digits is not None and digit_count > config.max_digits:
        logger.debug(
            "Rejected decimal text: %d digits over limit %d", digit_count, config.max_digits
        )
        raise DigitLimitExceeded(text, digit_count, config.max_digits)

    digits = [ord(text[i]) - ord("0") for i in range(len(text) - 1, start - 1, -1)]
    return canonicalize(digits, negative)
