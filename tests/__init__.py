"""
Test suite for bizdash

Contains:
- tests/unit/          : Unit tests for individual modules
"""
