"""
Test suite for array primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
