"""
Core — символы, таблицы глифов, системы и диапазоны значений.

Модули ядра не зависят от движков и доменной модели.
"""

from chinese_numerals.core.errors import OutOfRangeError, describe_value
from chinese_numerals.core.magnitude import (
    BOUNDED_MAX_ABS,
    LONG_SCALE_BASE_WIDTH,
    LONG_SCALE_MAX_ABS,
    LONG_SCALE_TIER_COUNT,
    MID_SCALE_MAX_ABS,
    MYRIAD_SCALE_MAX_ABS,
    SHORT_SCALE_MAX_ABS,
    check_bound,
    check_magnitude,
    max_abs,
    parse_decimal,
)
from chinese_numerals.core.render_tables import (
    LOWER_SIMPLIFIED,
    LOWER_TRADITIONAL,
    UPPER_SIMPLIFIED,
    UPPER_TRADITIONAL,
    Case,
    RenderTable,
    Variant,
    get_render_table,
    render_symbol,
    render_symbols,
)
from chinese_numerals.core.scale import MagnitudeForm, Scale
from chinese_numerals.core.symbols import (
    DIGITS,
    LARGE_NAMES,
    SYMBOLS,
    Symbol,
    digit_symbol,
    is_marker,
    positional_marker,
)

__all__ = [
    # Symbols
    "Symbol",
    "SYMBOLS",
    "DIGITS",
    "LARGE_NAMES",
    "digit_symbol",
    "is_marker",
    "positional_marker",
    # Render tables
    "Variant",
    "Case",
    "RenderTable",
    "LOWER_SIMPLIFIED",
    "LOWER_TRADITIONAL",
    "UPPER_SIMPLIFIED",
    "UPPER_TRADITIONAL",
    "get_render_table",
    "render_symbol",
    "render_symbols",
    # Scales & magnitude
    "Scale",
    "MagnitudeForm",
    "SHORT_SCALE_MAX_ABS",
    "BOUNDED_MAX_ABS",
    "MYRIAD_SCALE_MAX_ABS",
    "MID_SCALE_MAX_ABS",
    "LONG_SCALE_MAX_ABS",
    "LONG_SCALE_BASE_WIDTH",
    "LONG_SCALE_TIER_COUNT",
    "max_abs",
    "check_bound",
    "check_magnitude",
    "parse_decimal",
    # Errors
    "OutOfRangeError",
    "describe_value",
]
