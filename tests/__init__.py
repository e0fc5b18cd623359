"""
Test suite for chinese-numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
