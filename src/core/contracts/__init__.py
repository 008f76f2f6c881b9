"""
Contract Validation Module

Модуль для валидации текстового представления BigInt против JSON Schema.
"""

from .validators import (
    ContractValidator,
    DecimalTextValidator,
    SchemaLoader,
    validate_decimal_text,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalTextValidator",
    # Functions
    "validate_decimal_text",
]
