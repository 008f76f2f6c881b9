"""
Core math modules для BigInt

Примитивы sign-magnitude представления и беззнаковой арифметики над цифрами.
"""

# Digit Store & Canonicalizer
from src.core.math.digits import (
    DIGIT_BASE,
    ZERO,
    ZERO_DIGITS,
    DigitStore,
    canonicalize,
    is_canonical,
)

# Magnitude Kernel
from src.core.math.magnitude import (
    MagnitudeOrder,
    MagnitudeUnderflow,
    add_magnitudes,
    compare_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Construction & Parsing
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

# Formatting
from src.core.math.formatting import DECIMAL_TEXT_PATTERN, format_decimal

__all__ = [
    # Digit Store — Constants
    "DIGIT_BASE",
    "ZERO",
    "ZERO_DIGITS",
    # Digit Store — Types
    "DigitStore",
    # Digit Store — Functions
    "canonicalize",
    "is_canonical",
    # Magnitude — Types
    "MagnitudeOrder",
    # Magnitude — Exceptions
    "MagnitudeUnderflow",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Parsing — Constants
    "DEFAULT_PARSE_CONFIG",
    "INT64_MAX",
    "INT64_MIN",
    # Parsing — Exceptions
    "DecimalParseError",
    "DigitLimitExceeded",
    "EmptyInput",
    "InvalidCharacter",
    "NativeRangeError",
    "SignOnly",
    # Parsing — Types
    "ParseConfig",
    # Parsing — Functions
    "digits_from_int",
    "native_range",
    "parse_decimal",
    # Formatting
    "DECIMAL_TEXT_PATTERN",
    "format_decimal",
]
