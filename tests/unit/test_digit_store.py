"""
Тесты для Digit Store и Canonicalizer

Проверяет:
1. Удаление старших нулей
2. Неотрицательность канонического нуля
3. Идемпотентность канонизации
4. Проверку инвариантов is_canonical
"""

import pytest

from src.core.math.digits import (
    ZERO,
    ZERO_DIGITS,
    DigitStore,
    canonicalize,
    is_canonical,
)


class TestCanonicalize:
    """Тесты для canonicalize"""

    def test_strips_leading_zeros(self) -> None:
        """Старшие нули удаляются (003 → 3)"""
        assert canonicalize([3, 0, 0], False) == DigitStore((3,), False)

    def test_keeps_inner_zeros(self) -> None:
        """Нули внутри числа сохраняются"""
        assert canonicalize([0, 1, 0, 2, 0], True) == DigitStore((0, 1, 0, 2), True)

    def test_all_zeros_become_single_zero(self) -> None:
        """Последовательность нулей → одна цифра 0"""
        assert canonicalize([0, 0, 0], False).digits == ZERO_DIGITS

    def test_negative_zero_forced_non_negative(self) -> None:
        """Отрицательный ноль → неотрицательный"""
        result = canonicalize([0, 0], True)
        assert result == ZERO
        assert result.negative is False

    def test_empty_sequence_is_zero(self) -> None:
        """Пустая magnitude трактуется как 0"""
        assert canonicalize([], True) == ZERO

    def test_idempotent(self) -> None:
        """Повторная канонизация не меняет значение"""
        once = canonicalize([5, 4, 0, 0], True)
        twice = canonicalize(once.digits, once.negative)
        assert once == twice

    def test_returns_tuple_digits(self) -> None:
        """Результат immutable"""
        result = canonicalize([1, 2], False)
        assert isinstance(result.digits, tuple)


class TestDigitStore:
    """Тесты для DigitStore"""

    def test_is_zero(self) -> None:
        assert ZERO.is_zero
        assert not DigitStore((1,), False).is_zero

    def test_len(self) -> None:
        assert len(DigitStore((1, 2, 3), False)) == 3

    def test_frozen(self) -> None:
        """Состояние нельзя изменить после создания"""
        store = DigitStore((1,), False)
        with pytest.raises(AttributeError):
            store.negative = True  # type: ignore[misc]


class TestIsCanonical:
    """Тесты для is_canonical"""

    @pytest.mark.parametrize(
        "store",
        [
            DigitStore((0,), False),
            DigitStore((1,), True),
            DigitStore((0, 0, 1), False),
            DigitStore((9, 9, 9), True),
        ],
    )
    def test_canonical_values(self, store: DigitStore) -> None:
        assert is_canonical(store)

    @pytest.mark.parametrize(
        "store",
        [
            DigitStore((), False),
            DigitStore((1, 0), False),
            DigitStore((0,), True),
            DigitStore((10,), False),
            DigitStore((-1,), False),
        ],
    )
    def test_non_canonical_values(self, store: DigitStore) -> None:
        assert not is_canonical(store)
