"""
Test suite for cryptomath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
