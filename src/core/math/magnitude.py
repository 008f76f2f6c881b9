"""
Magnitude Kernel — беззнаковая арифметика над последовательностями цифр

Операции игнорируют знак и работают только с magnitude (LSD first):
- compare_magnitudes: порядок двух magnitude
- add_magnitudes: сложение с переносом (carry)
- subtract_magnitudes: вычитание с заёмом (borrow), требует a >= b
- multiply_magnitudes: школьное умножение O(len(a) * len(b))

Входы должны быть каноническими (без старших нулей): на этом держится правило
"длиннее → больше" в compare_magnitudes.

Результаты add/subtract/multiply НЕ канонические (возможны старшие нули),
вызывающий код обязан пропустить их через canonicalize().
"""

from enum import IntEnum
from typing import Sequence

from src.core.math.digits import DIGIT_BASE


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MagnitudeUnderflow(ArithmeticError):
    """
    Нарушение предусловия subtract_magnitudes: уменьшаемое меньше вычитаемого.

    Signed composition всегда упорядочивает операнды через compare_magnitudes,
    поэтому через публичный BigInt эта ошибка недостижима.
    """

    pass


# =============================================================================
# COMPARATOR
# =============================================================================


class MagnitudeOrder(IntEnum):
    """Результат сравнения двух magnitude"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> MagnitudeOrder:
    """
    Сравнение magnitude без учёта знака.

    Правило:
    1. Более длинная последовательность больше (валидно для canonical form)
    2. При равной длине — поразрядно от старшей цифры к младшей,
       первая различающаяся позиция решает

    Examples:
        >>> compare_magnitudes([1, 2], [9])
        <MagnitudeOrder.GREATER: 1>
        >>> compare_magnitudes([1, 2], [2, 1])
        <MagnitudeOrder.GREATER: 1>
        >>> compare_magnitudes([5], [5])
        <MagnitudeOrder.EQUAL: 0>
    """
    if len(a) != len(b):
        return MagnitudeOrder.GREATER if len(a) > len(b) else MagnitudeOrder.LESS

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return MagnitudeOrder.GREATER if a[i] > b[i] else MagnitudeOrder.LESS

    return MagnitudeOrder.EQUAL


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Беззнаковое сложение с переносом.

    Для каждой позиции: sum = a[i] + b[i] + carry,
    цифра = sum mod 10, carry = sum div 10.
    Цикл идёт, пока есть цифры хотя бы в одном операнде или ненулевой carry.

    Returns:
        Цифры суммы (LSD first), длина <= max(len(a), len(b)) + 1
    """
    result: list[int] = []
    carry = 0
    len_a = len(a)
    len_b = len(b)
    i = 0

    while i < len_a or i < len_b or carry:
        total = carry
        if i < len_a:
            total += a[i]
        if i < len_b:
            total += b[i]
        carry, digit = divmod(total, DIGIT_BASE)
        result.append(digit)
        i += 1

    return result


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Беззнаковое вычитание a - b с заёмом.

    ПРЕДУСЛОВИЕ: magnitude(a) >= magnitude(b).

    Для каждой позиции: diff = a[i] - b[i] - borrow;
    если diff < 0 → diff += 10, borrow = 1, иначе borrow = 0.

    Предусловие проверяется без отдельного сравнения: b длиннее a или
    ненулевой borrow после старшей позиции означают a < b.

    Returns:
        Цифры разности (LSD first), длина == len(a), возможны старшие нули

    Raises:
        MagnitudeUnderflow: Если magnitude(a) < magnitude(b)
    """
    len_a = len(a)
    len_b = len(b)
    if len_b > len_a:
        raise MagnitudeUnderflow(
            f"Minuend has {len_a} digits, subtrahend has {len_b}: "
            f"subtract_magnitudes requires a >= b"
        )

    result: list[int] = []
    borrow = 0

    for i in range(len_a):
        diff = a[i] - borrow
        if i < len_b:
            diff -= b[i]
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow:
        raise MagnitudeUnderflow("Borrow out of the most significant digit: a < b")

    return result


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Школьное умножение (schoolbook convolution).

    Для каждой пары позиций (i, j):
        current = result[i + j] + a[i] * b[j] + carry
        result[i + j] = current mod 10
        carry = current div 10
    Внутренний цикл продолжается за пределами b, пока carry != 0.

    Буфер результата имеет длину len(a) + len(b), этого всегда достаточно.
    Сложность O(len(a) * len(b)), быстрые алгоритмы не используются.

    Returns:
        Цифры произведения (LSD first), длина == len(a) + len(b)
    """
    len_b = len(b)
    result = [0] * (len(a) + len_b)

    for i, digit_a in enumerate(a):
        if digit_a == 0:
            continue
        carry = 0
        j = 0
        while j < len_b or carry:
            current = result[i + j] + carry
            if j < len_b:
                current += digit_a * b[j]
            carry, result[i + j] = divmod(current, DIGIT_BASE)
            j += 1

    return result
