"""
Magnitude — Диапазоны абсолютных значений по системам

Каждая система имеет две формы представления абсолютного значения:
- BOUNDED: фиксированная ширина (u64-диапазон для SHORT, u128 для остальных)
- UNBOUNDED: произвольная точность, ограниченная исчерпанием словаря
  из десяти названий больших чисел (亿 … 载)

Потолки (включительно):
    SHORT   : 10^15 - 1          (15 позиций, 十 … 载)
    MYRIAD  : 10^48 - 1          (12 групп по 4 цифры)
    MID     : 10^88 - 1          (11 групп по 8 цифр)
    LONG    : 10^8192 - 1        (16 · 2^(10-1) цифр, см. LONG_SCALE_TIER_COUNT)

Проверка диапазона всегда выполняется до рендеринга.
"""

import logging
from typing import Final

from chinese_numerals.core.errors import OutOfRangeError, describe_value
from chinese_numerals.core.scale import MagnitudeForm, Scale

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ СИСТЕМ
# =============================================================================

# Ширина группы в десятичных цифрах
SHORT_SCALE_GROUP_WIDTH: Final[int] = 1
MYRIAD_SCALE_GROUP_WIDTH: Final[int] = 4
MID_SCALE_GROUP_WIDTH: Final[int] = 8

# Количество групп (группа 0 + по одной на каждый маркер)
SHORT_SCALE_GROUP_COUNT: Final[int] = 15
MYRIAD_SCALE_GROUP_COUNT: Final[int] = 12
MID_SCALE_GROUP_COUNT: Final[int] = 11

# LONG: ширина базового яруса и число ярусов (ярус 0 + 兆 … 载)
LONG_SCALE_BASE_WIDTH: Final[int] = 16
LONG_SCALE_TIER_COUNT: Final[int] = 10


# =============================================================================
# ПОТОЛКИ
# =============================================================================

SHORT_SCALE_MAX_ABS: Final[int] = 10 ** (SHORT_SCALE_GROUP_WIDTH * SHORT_SCALE_GROUP_COUNT) - 1

# u128::MAX — ёмкость bounded формы для MYRIAD/MID/LONG
BOUNDED_MAX_ABS: Final[int] = 2**128 - 1

MYRIAD_SCALE_MAX_ABS: Final[int] = 10 ** (MYRIAD_SCALE_GROUP_WIDTH * MYRIAD_SCALE_GROUP_COUNT) - 1

MID_SCALE_MAX_ABS: Final[int] = 10 ** (MID_SCALE_GROUP_WIDTH * MID_SCALE_GROUP_COUNT) - 1

LONG_SCALE_MAX_ABS: Final[int] = 10 ** (LONG_SCALE_BASE_WIDTH * 2 ** (LONG_SCALE_TIER_COUNT - 1)) - 1

_UNBOUNDED_MAX_ABS: Final[dict[Scale, int]] = {
    Scale.SHORT: SHORT_SCALE_MAX_ABS,
    Scale.MYRIAD: MYRIAD_SCALE_MAX_ABS,
    Scale.MID: MID_SCALE_MAX_ABS,
    Scale.LONG: LONG_SCALE_MAX_ABS,
}


def max_abs(scale: Scale, form: MagnitudeForm = MagnitudeForm.BOUNDED) -> int:
    """
    Максимальное абсолютное значение для системы и формы.

    SHORT не имеет отдельной unbounded формы: её потолок 10^15 - 1
    меньше u64::MAX.

    Args:
        scale: Система
        form: Форма представления

    Returns:
        Потолок (включительно)
    """
    scale = Scale(scale)
    ceiling = _UNBOUNDED_MAX_ABS[scale]
    if MagnitudeForm(form) is MagnitudeForm.BOUNDED:
        return min(ceiling, BOUNDED_MAX_ABS)
    return ceiling


def check_bound(
    scale: Scale,
    magnitude: int,
    limit: int,
    form: MagnitudeForm,
) -> int:
    """
    Проверка абсолютного значения против явного потолка.

    Общая проверка для max_abs системы и для потолка конкретного движка
    (например, LONG с уменьшенным tier_count).

    Args:
        scale: Система (для сообщения об ошибке)
        magnitude: Абсолютное значение (>= 0)
        limit: Потолок (включительно)
        form: Форма, к которой относится потолок

    Returns:
        magnitude без изменений

    Raises:
        ValueError: Если magnitude отрицательный
        OutOfRangeError: Если magnitude > limit
    """
    if magnitude < 0:
        raise ValueError(f"Magnitude cannot be negative: {describe_value(-magnitude)}")

    if magnitude > limit:
        logger.debug(
            "Rejected magnitude %s for %s (%s form)",
            describe_value(magnitude),
            Scale(scale).label,
            MagnitudeForm(form).value,
        )
        raise OutOfRangeError(scale, magnitude, form)

    return magnitude


def check_magnitude(
    scale: Scale,
    magnitude: int,
    form: MagnitudeForm = MagnitudeForm.BOUNDED,
) -> int:
    """
    Проверка, что абсолютное значение выражается в системе.

    Raises:
        ValueError: Если magnitude отрицательный
        OutOfRangeError: Если magnitude превышает max_abs(scale, form)
    """
    return check_bound(scale, magnitude, max_abs(scale, form), form)


# =============================================================================
# ДЕСЯТИЧНЫЙ ВВОД
# =============================================================================

# Длина куска при разборе: ниже лимита int/str конверсии интерпретатора
_PARSE_CHUNK_DIGITS: Final[int] = 1000


def parse_decimal(text: str) -> int:
    """
    Разбор десятичной строки произвольной длины.

    int(text) отказывает на строках длиннее sys.get_int_max_str_digits();
    значения LONG системы доходят до 8192 цифр, поэтому строка
    разбирается кусками.

    Args:
        text: Строка вида '-?[0-9]+' (допускаются '_' между цифрами и '+')

    Returns:
        Целое со знаком

    Raises:
        ValueError: Если строка не является десятичным целым

    Examples:
        >>> parse_decimal("-1_0203_0405")
        -102030405
    """
    body = text.strip().replace("_", "")
    negative = body.startswith("-")
    if body[:1] in ("-", "+"):
        body = body[1:]

    if not body or not body.isascii() or not body.isdigit():
        raise ValueError(f"Not a decimal integer: {text[:32]!r}")

    value = 0
    for start in range(0, len(body), _PARSE_CHUNK_DIGITS):
        chunk = body[start : start + _PARSE_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)

    return -value if negative else value
