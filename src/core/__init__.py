"""
Core arbitrary-precision integer engine.

Digit store, canonicalization, magnitude kernel, parsing and the public BigInt
value type. Nothing here depends on I/O or external systems.
"""
