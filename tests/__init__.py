"""
Test suite for the decimal BigInt engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
