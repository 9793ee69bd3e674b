"""
Test suite for Fraction Calculator

Contains:
- tests/unit/          : Unit tests for core modules and the calculator session
"""
