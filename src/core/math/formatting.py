"""
Formatting — десятичное текстовое представление DigitStore

Грамматика результата: '-'? digit+, без ведущих нулей (кроме "0").
Знак выводится только при negative == True, канонический ноль → "0".
"""

from typing import Final

from src.core.math.digits import DigitStore

# Регулярное выражение грамматики отрендеренного значения
DECIMAL_TEXT_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"

_DIGIT_CHARS: Final[str] = "0123456789"


def format_decimal(store: DigitStore) -> str:
    """
    Рендеринг значения: знак, затем цифры от старшей к младшей.

    Examples:
        >>> format_decimal(DigitStore((1, 2, 3), True))
        '-321'
        >>> format_decimal(DigitStore((0,), False))
        '0'
    """
    body = "".join(_DIGIT_CHARS[d] for d in reversed(store.digits))
    if store.negative:
        return "-" + body
    return body
