"""
Errors — Единственная ошибка ядра: выход за диапазон системы

OutOfRangeError фиксируется до начала рендеринга: частично построенная
последовательность символов никогда не возвращается.
"""

import math
from typing import Final, Optional

from chinese_numerals.core.scale import MagnitudeForm, Scale

# Порог (в битах), после которого int → str упирается в лимит интерпретатора
# (sys.get_int_max_str_digits() = 4300 по умолчанию)
_SAFE_STR_BITS: Final[int] = 14_000


def describe_value(value: int) -> str:
    """
    Безопасное текстовое представление целого для сообщений.

    Для очень больших чисел возвращает порядок величины вместо
    полной десятичной записи.

    Examples:
        >>> describe_value(12345)
        '12345'
        >>> describe_value(10 ** 8192)
        '~10^8192'
    """
    if value.bit_length() <= _SAFE_STR_BITS:
        return str(value)
    # int(...) по bit_length даёт нижнюю оценку порядка; уточняем сдвигом
    exponent = math.floor((value.bit_length() - 1) * math.log10(2))
    if value >= 10 ** (exponent + 1):
        exponent += 1
    return f"~10^{exponent}"


class OutOfRangeError(Exception):
    """
    Абсолютное значение не выражается в выбранной системе.

    Attributes:
        scale: Система, отклонившая значение
        absolute_value: Точное абсолютное значение, вызвавшее ошибку
        form: Форма представления (bounded/unbounded), если известна
    """

    def __init__(self, scale: Scale, absolute_value: int, form: Optional[MagnitudeForm] = None):
        self.scale = Scale(scale)
        self.absolute_value = absolute_value
        self.form = MagnitudeForm(form) if form is not None else None
        super().__init__(
            f"Absolute value {describe_value(absolute_value)} out of range "
            f"for a {self.scale.label} number"
        )

    def __reduce__(self):
        return (type(self), (self.scale, self.absolute_value, self.form))
