"""
Domain models and value objects.

Contains SignedNumeral — the unit of conversion — and its Sign.
"""

from chinese_numerals.domain.numeral import Sign, SignedNumeral

__all__ = [
    "Sign",
    "SignedNumeral",
]
