"""
Symbols — Замкнутый набор символов китайской записи чисел

25 символов: цифры 0–9, позиционные маркеры (十, 百, 千), 万,
десять названий больших чисел (亿 … 载) и знак минуса.

Порядок символов фиксирован: индекс 9 + p — маркер позиции p
в short scale (下数), т.е. SYMBOLS[10] = TEN, SYMBOLS[13] = MYRIAD,
SYMBOLS[14] = YI, …, SYMBOLS[23] = ZAI.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class Symbol(str, Enum):
    """Символ китайской записи числа (без привязки к глифу)"""

    # Цифры
    ZERO = "ZERO"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"
    SIX = "SIX"
    SEVEN = "SEVEN"
    EIGHT = "EIGHT"
    NINE = "NINE"

    # Маркеры внутри группы
    TEN = "TEN"
    HUNDRED = "HUNDRED"
    THOUSAND = "THOUSAND"

    # 万 и названия больших чисел (五经算术)
    MYRIAD = "MYRIAD"
    YI = "YI"
    ZHAO = "ZHAO"
    JING = "JING"
    GAI = "GAI"
    ZI = "ZI"
    RANG = "RANG"
    GOU = "GOU"
    JIAN = "JIAN"
    ZHENG = "ZHENG"
    ZAI = "ZAI"

    NEGATIVE = "NEGATIVE"


# =============================================================================
# ORDERED VIEWS
# =============================================================================

SYMBOLS: Final[tuple[Symbol, ...]] = tuple(Symbol)

DIGITS: Final[tuple[Symbol, ...]] = SYMBOLS[0:10]

LARGE_NAMES: Final[tuple[Symbol, ...]] = SYMBOLS[14:24]

# Индекс первого маркера (TEN) и последнего названия (ZAI)
FIRST_MARKER_INDEX: Final[int] = 10
LAST_MARKER_INDEX: Final[int] = 23


def digit_symbol(digit: int) -> Symbol:
    """
    Символ десятичной цифры.

    Raises:
        ValueError: Если digit вне 0..9
    """
    if not 0 <= digit <= 9:
        raise ValueError(f"Digit must be in 0..9, got {digit}")
    return DIGITS[digit]


def positional_marker(index: int) -> Symbol:
    """
    Маркер по абсолютному индексу в SYMBOLS.

    Args:
        index: Индекс маркера (10 = TEN … 23 = ZAI)

    Returns:
        Маркер-символ

    Raises:
        ValueError: Если индекс вне диапазона маркеров
    """
    if not FIRST_MARKER_INDEX <= index <= LAST_MARKER_INDEX:
        raise ValueError(
            f"Marker index must be in {FIRST_MARKER_INDEX}..{LAST_MARKER_INDEX}, got {index}"
        )
    return SYMBOLS[index]


def symbol_index(symbol: Symbol) -> int:
    """Позиция символа в SYMBOLS"""
    return SYMBOLS.index(symbol)


def is_marker(symbol: Symbol) -> bool:
    """True для маркеров (十 … 载), False для цифр и знака"""
    return FIRST_MARKER_INDEX <= symbol_index(symbol) <= LAST_MARKER_INDEX
