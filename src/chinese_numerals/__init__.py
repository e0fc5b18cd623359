"""
chinese_numerals — целые числа произвольной величины в китайской записи.

Четыре системы наименования разрядов (五经算术):
- SHORT (下数), MYRIAD (万进), MID (中数), LONG (上数)

Два набора иероглифов (simplified/traditional) и два регистра
(обычный 小写 / финансовый 大写).

Example:
    >>> from chinese_numerals import Scale, SignedNumeral
    >>> num = SignedNumeral.from_int(1_0203_0405, Scale.SHORT)
    >>> str(num)
    '一垓零二兆零三万零四百零五'
    >>> f"{num:#}"
    '壹垓零贰兆零叁万零肆佰零伍'
"""

from chinese_numerals.core import (
    BOUNDED_MAX_ABS,
    LONG_SCALE_MAX_ABS,
    MID_SCALE_MAX_ABS,
    MYRIAD_SCALE_MAX_ABS,
    SHORT_SCALE_MAX_ABS,
    Case,
    MagnitudeForm,
    OutOfRangeError,
    Scale,
    Symbol,
    Variant,
    max_abs,
    render_symbols,
)
from chinese_numerals.domain import Sign, SignedNumeral
from chinese_numerals.engines import get_engine

__version__ = "0.2.0"

__all__ = [
    # Domain
    "Sign",
    "SignedNumeral",
    # Selectors
    "Scale",
    "MagnitudeForm",
    "Variant",
    "Case",
    # Symbols
    "Symbol",
    "render_symbols",
    "get_engine",
    # Limits
    "SHORT_SCALE_MAX_ABS",
    "BOUNDED_MAX_ABS",
    "MYRIAD_SCALE_MAX_ABS",
    "MID_SCALE_MAX_ABS",
    "LONG_SCALE_MAX_ABS",
    "max_abs",
    # Errors
    "OutOfRangeError",
]
