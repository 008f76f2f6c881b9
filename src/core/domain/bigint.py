"""
BigInt — знаковое целое произвольной точности

Value type поверх DigitStore:
- Signed composition: +, -, *, унарные -, +, abs()
- Сравнения: ==, !=, <, >, <=, >= (с BigInt и int)
- Increment/decrement: pre_*/post_* формы
- Десятичный рендеринг через str()
- Интеграция с Pydantic v2 (поле модели, сериализация в decimal text)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Состояние экземпляра — один immutable DigitStore в canonical form
2. Бинарные операторы чистые: операнды не меняются, возвращается новый BigInt
3. Compound операторы (+=, -=, *=) и increment/decrement заменяют состояние
   одним присваиванием: неканоническое промежуточное значение не видно
   даже читателю из другого потока
4. Арифметика и сравнения не бросают исключений (нет деления, нет overflow)

Экземпляр изменяем in-place, поэтому BigInt не hashable.
"""

from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.math.digits import ZERO, DigitStore, canonicalize
from src.core.math.formatting import DECIMAL_TEXT_PATTERN, format_decimal
from src.core.math.magnitude import (
    MagnitudeOrder,
    add_magnitudes,
    compare_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from src.core.math.parsing import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    digits_from_int,
    parse_decimal,
)

_ONE = DigitStore((1,), False)


# =============================================================================
# SIGNED COMPOSITION
# =============================================================================


def _signed_add(a: DigitStore, b: DigitStore) -> DigitStore:
    """
    Сложение со знаком.

    - Знаки совпадают: сумма magnitude, общий знак
    - Знаки различны: большая magnitude минус меньшая,
      знак операнда с большей (или равной) magnitude
    """
    if a.negative == b.negative:
        return canonicalize(add_magnitudes(a.digits, b.digits), a.negative)

    if compare_magnitudes(a.digits, b.digits) >= MagnitudeOrder.EQUAL:
        return canonicalize(subtract_magnitudes(a.digits, b.digits), a.negative)

    return canonicalize(subtract_magnitudes(b.digits, a.digits), b.negative)


def _negate(a: DigitStore) -> DigitStore:
    if a.is_zero:
        return ZERO
    return DigitStore(a.digits, not a.negative)


def _signed_subtract(a: DigitStore, b: DigitStore) -> DigitStore:
    return _signed_add(a, _negate(b))


def _signed_multiply(a: DigitStore, b: DigitStore) -> DigitStore:
    # Нулевая magnitude канонизируется в неотрицательный ноль
    return canonicalize(multiply_magnitudes(a.digits, b.digits), a.negative != b.negative)


def _less_than(a: DigitStore, b: DigitStore) -> bool:
    """
    Порядок: отрицательное меньше; для двух отрицательных порядок magnitude
    обратный; для двух неотрицательных — прямой.
    """
    if a.negative != b.negative:
        return a.negative

    order = compare_magnitudes(a.digits, b.digits)
    if a.negative:
        return order == MagnitudeOrder.GREATER
    return order == MagnitudeOrder.LESS


def _equal(a: DigitStore, b: DigitStore) -> bool:
    # Оба значения канонические: структурного сравнения достаточно
    return a.negative == b.negative and a.digits == b.digits


def _coerce(value: Any) -> Optional[DigitStore]:
    """DigitStore операнда или None для неподдерживаемого типа."""
    if isinstance(value, BigInt):
        return value._store
    if isinstance(value, int) and not isinstance(value, bool):
        return digits_from_int(value)
    return None


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Знаковое целое произвольной точности в sign-magnitude представлении.

    Конструирование:
        BigInt()            → 0
        BigInt(-42)         → из native int
        BigInt("-42")       → из десятичной строки
        BigInt(other)       → копия

    Ошибки строкового конструктора — подклассы DecimalParseError
    (EmptyInput, SignOnly, InvalidCharacter).

    Examples:
        >>> BigInt("13206478842272655311") + BigInt("80250025245863872589")
        BigInt('93456504088136527900')
        >>> str(BigInt("-0"))
        '0'
    """

    __slots__ = ("_store",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union[int, str, "BigInt", None] = None) -> None:
        if value is None:
            store = ZERO
        elif isinstance(value, BigInt):
            store = value._store
        elif isinstance(value, str):
            store = parse_decimal(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            store = digits_from_int(value)
        else:
            raise TypeError(
                f"BigInt() argument must be int, str or BigInt, got {type(value).__name__}"
            )
        self._store: DigitStore = store

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_store(cls, store: DigitStore) -> "BigInt":
        instance = cls.__new__(cls)
        instance._store = store
        return instance

    @classmethod
    def from_int(cls, value: int, config: Optional[ParseConfig] = None) -> "BigInt":
        """
        Построение из native int с явной конфигурацией.

        Args:
            value: Целое
            config: ParseConfig (например, native_bits=64 для строгого int64)

        Raises:
            TypeError: Если value не int
            NativeRangeError: Если value вне диапазона config.native_bits
        """
        return cls._from_store(digits_from_int(value, config or DEFAULT_PARSE_CONFIG))

    @classmethod
    def from_str(cls, text: str, config: Optional[ParseConfig] = None) -> "BigInt":
        """
        Построение из десятичной строки с явной конфигурацией.

        Args:
            text: Строка вида '-'? [0-9]+
            config: ParseConfig (например, max_digits)

        Raises:
            DecimalParseError: Подкласс по виду ошибки
        """
        return cls._from_store(parse_decimal(text, config or DEFAULT_PARSE_CONFIG))

    # -------------------------------------------------------------------------
    # Read-only представление
    # -------------------------------------------------------------------------

    @property
    def store(self) -> DigitStore:
        """Текущий канонический DigitStore (immutable снимок)."""
        return self._store

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры magnitude, младшая первой."""
        return self._store.digits

    @property
    def negative(self) -> bool:
        return self._store.negative

    @property
    def is_zero(self) -> bool:
        return self._store.is_zero

    @property
    def sign(self) -> int:
        """-1, 0 или 1"""
        store = self._store
        if store.is_zero:
            return 0
        return -1 if store.negative else 1

    def copy(self) -> "BigInt":
        return BigInt._from_store(self._store)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_add(self._store, store))

    def __radd__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_add(store, self._store))

    def __iadd__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        self._store = _signed_add(self._store, store)
        return self

    def __sub__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_subtract(self._store, store))

    def __rsub__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_subtract(store, self._store))

    def __isub__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        self._store = _signed_subtract(self._store, store)
        return self

    def __mul__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_multiply(self._store, store))

    def __rmul__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return BigInt._from_store(_signed_multiply(store, self._store))

    def __imul__(self, other: Any) -> "BigInt":
        store = _coerce(other)
        if store is None:
            return NotImplemented
        self._store = _signed_multiply(self._store, store)
        return self

    def __neg__(self) -> "BigInt":
        return BigInt._from_store(_negate(self._store))

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        store = self._store
        return BigInt._from_store(DigitStore(store.digits, False))

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def pre_increment(self) -> "BigInt":
        """++x: прибавить 1 и вернуть сам экземпляр."""
        self._store = _signed_add(self._store, _ONE)
        return self

    def post_increment(self) -> "BigInt":
        """x++: прибавить 1, вернуть снимок значения до изменения."""
        snapshot = self._store
        self._store = _signed_add(snapshot, _ONE)
        return BigInt._from_store(snapshot)

    def pre_decrement(self) -> "BigInt":
        """--x: вычесть 1 и вернуть сам экземпляр."""
        self._store = _signed_subtract(self._store, _ONE)
        return self

    def post_decrement(self) -> "BigInt":
        """x--: вычесть 1, вернуть снимок значения до изменения."""
        snapshot = self._store
        self._store = _signed_subtract(snapshot, _ONE)
        return BigInt._from_store(snapshot)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return _equal(self._store, store)

    def __ne__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return not _equal(self._store, store)

    def __lt__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return _less_than(self._store, store)

    def __gt__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return _less_than(store, self._store)

    def __le__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return not _less_than(store, self._store)

    def __ge__(self, other: Any) -> bool:
        store = _coerce(other)
        if store is None:
            return NotImplemented
        return not _less_than(self._store, store)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self._store.is_zero

    def __int__(self) -> int:
        store = self._store
        value = 0
        for digit in reversed(store.digits):
            value = value * 10 + digit
        return -value if store.negative else value

    def __str__(self) -> str:
        return format_decimal(self._store)

    def __repr__(self) -> str:
        return f"BigInt('{format_decimal(self._store)}')"

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "BigInt":
        """
        Валидатор поля Pydantic: BigInt (копируется), int или decimal str.

        Pydantic превращает ValueError в ValidationError, поэтому
        неподдерживаемый тип сообщается через ValueError.
        """
        if isinstance(value, BigInt):
            return value.copy()
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Expected BigInt, int or decimal string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=DECIMAL_TEXT_PATTERN))
