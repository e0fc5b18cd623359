"""
Trimming — Подавление ведущей «一» перед «十»

В обычной (lowercase) записи 一十三 сокращается до 十三, 一十万 — до 十万.
Финансовая (uppercase) запись никогда не сокращается: 壹拾叁.

Правило: ведущая группа (значение после деления на 10^4 до упора,
для SHORT — всё значение целиком) лежит в [10, 19].
"""

from typing import Final, Optional

from chinese_numerals.core.symbols import Symbol

TRIM_LOWER_BOUND: Final[int] = 10
TRIM_UPPER_BOUND: Final[int] = 19


def leading_value(magnitude: int, divisor: Optional[int]) -> int:
    """
    Значение ведущей группы.

    Args:
        magnitude: Абсолютное значение
        divisor: Делитель группы (10^4) или None — значение целиком

    Returns:
        magnitude, поделённый на divisor, пока он >= divisor
    """
    if divisor is None:
        return magnitude
    if divisor < 2:
        raise ValueError(f"Divisor must be >= 2, got {divisor}")

    while magnitude >= divisor:
        magnitude //= divisor
    return magnitude


def trim_leading_one(
    symbols: list[Symbol],
    magnitude: int,
    divisor: Optional[int],
) -> list[Symbol]:
    """
    Удаление ведущей ONE (последней в порядке младший-первым).

    Args:
        symbols: Символы, младший разряд первым
        magnitude: Абсолютное значение, из которого они получены
        divisor: Делитель ведущей группы (см. leading_value)

    Returns:
        Новый список без ведущей ONE, либо копия исходного

    Raises:
        RuntimeError: Если ведущая группа в [10, 19], а последний символ не ONE
    """
    lead = leading_value(magnitude, divisor)
    if TRIM_LOWER_BOUND <= lead <= TRIM_UPPER_BOUND:
        if not symbols or symbols[-1] is not Symbol.ONE:
            raise RuntimeError(f"Expected leading ONE for leading value {lead}")
        return symbols[:-1]
    return list(symbols)
