"""
Digit Store — Sign-Magnitude представление и канонизация

Базовое представление произвольного целого:
- magnitude: последовательность десятичных цифр, младшая цифра первой
- negative: флаг знака, значим только при magnitude != 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (canonical form):
1. Каждая цифра в диапазоне [0, 9]
2. Нет старших нулей, кроме единственной цифры 0
3. Ноль всегда неотрицательный (ровно одно представление нуля)
4. magnitude никогда не пустая

Все остальные модули читают и производят DigitStore только через canonicalize().
"""

from dataclasses import dataclass
from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание позиционной системы (одна десятичная цифра на элемент)
DIGIT_BASE: Final[int] = 10

# Каноническая magnitude нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# DIGIT STORE
# =============================================================================


@dataclass(frozen=True)
class DigitStore:
    """
    Immutable снимок значения: цифры (LSD first) + знак.

    Замена состояния BigInt — это одно присваивание нового DigitStore,
    поэтому промежуточное (неканоническое) состояние снаружи не видно.
    """

    digits: tuple[int, ...]
    negative: bool = False

    @property
    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def __len__(self) -> int:
        return len(self.digits)


# Каноническое значение 0
ZERO: Final[DigitStore] = DigitStore(ZERO_DIGITS, False)


# =============================================================================
# CANONICALIZER
# =============================================================================


def canonicalize(digits: Sequence[int], negative: bool) -> DigitStore:
    """
    Восстановление canonical form после любой операции над magnitude.

    Алгоритм:
        пока len > 1 и старшая цифра == 0 → удалить старшую цифру
        если осталась единственная цифра 0 → negative = False

    Пустая последовательность трактуется как 0.

    Args:
        digits: Цифры magnitude (LSD first), возможно со старшими нулями
        negative: Флаг знака до нормализации

    Returns:
        Канонический DigitStore

    Examples:
        >>> canonicalize([3, 0, 0], False)
        DigitStore(digits=(3,), negative=False)
        >>> canonicalize([0, 0], True)
        DigitStore(digits=(0,), negative=False)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1

    if end == 0:
        return ZERO

    trimmed = tuple(digits[:end])
    if trimmed == ZERO_DIGITS:
        return ZERO

    return DigitStore(trimmed, bool(negative))


def is_canonical(store: DigitStore) -> bool:
    """
    Проверка всех четырёх инвариантов canonical form.

    Args:
        store: Проверяемое значение

    Returns:
        True если store удовлетворяет инвариантам 1-4
    """
    digits = store.digits

    if len(digits) == 0:
        return False

    for digit in digits:
        if type(digit) is not int or not 0 <= digit < DIGIT_BASE:
            return False

    if len(digits) > 1 and digits[-1] == 0:
        return False

    if digits == ZERO_DIGITS and store.negative:
        return False

    return True
