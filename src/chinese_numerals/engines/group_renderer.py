"""
Group Renderer — Рендеринг одной группы цифр

Базовый случай для всех систем: каждая ненулевая цифра получает
позиционный маркер (十, 百, 千, …), единицы — без маркера.

Порядок результата: младший разряд первым.

    4005 → [FIVE, ZERO, THOUSAND, FOUR]   (四千零五)
    1010 → [TEN, ONE, ZERO, THOUSAND, ONE] (一千零一十)
"""

from typing import Final

from chinese_numerals.core.symbols import DIGITS, SYMBOLS, Symbol

# Маркер позиции p — SYMBOLS[9 + p]
_MARKER_BASE_INDEX: Final[int] = 9

# Максимальная ширина группы: позиции 0..14 (до 载 включительно)
MAX_GROUP_WIDTH: Final[int] = 15


def render_group(value: int, width: int = 4) -> list[Symbol]:
    """
    Символы для значения внутри одной группы.

    Перед ненулевой цифрой вставляется ZERO, если уже есть символы и
    предыдущая (младшая) цифра была нулевой.

    Args:
        value: Значение группы, 0 <= value < 10^width
        width: Ширина группы в цифрах (1..15)

    Returns:
        Список символов, младший разряд первым (пустой для 0)

    Raises:
        ValueError: Если width или value вне допустимого диапазона

    Examples:
        >>> render_group(405)
        [<Symbol.FIVE: 'FIVE'>, <Symbol.ZERO: 'ZERO'>, <Symbol.HUNDRED: 'HUNDRED'>, <Symbol.FOUR: 'FOUR'>]
    """
    if not 1 <= width <= MAX_GROUP_WIDTH:
        raise ValueError(f"Group width must be in 1..{MAX_GROUP_WIDTH}, got {width}")
    if not 0 <= value < 10**width:
        raise ValueError(f"Group value {value} does not fit {width} digits")

    symbols: list[Symbol] = []
    prev_digit = 1

    for position in range(width):
        value, digit = divmod(value, 10)

        if digit:
            if symbols and prev_digit == 0:
                symbols.append(Symbol.ZERO)
            if position > 0:
                symbols.append(SYMBOLS[_MARKER_BASE_INDEX + position])
            symbols.append(DIGITS[digit])

        prev_digit = digit
        if not value:
            break

    return symbols
