"""
Domain value types.

Contains the public arbitrary-precision BigInt.
"""

from src.core.domain.bigint import BigInt

__all__ = [
    "BigInt",
]
