"""
Scale — Системы наименования разрядов (五经算术)

- SHORT (下数): каждое название в 10 раз больше предыдущего
- MYRIAD (万进): каждое название в 1,0000 раз больше предыдущего
- MID (中数): каждое название в 1,0000,0000 раз больше предыдущего
- LONG (上数): каждое название — квадрат предыдущего (亿亿曰兆, 兆兆曰京)
"""

from enum import Enum


class Scale(str, Enum):
    """Система наименования разрядов"""

    SHORT = "short"
    MYRIAD = "myriad"
    MID = "mid"
    LONG = "long"

    @property
    def label(self) -> str:
        """Название для сообщений об ошибках"""
        return _LABELS[self]


_LABELS = {
    Scale.SHORT: "short scale",
    Scale.MYRIAD: "myriad scale",
    Scale.MID: "mid-scale",
    Scale.LONG: "long scale",
}


class MagnitudeForm(str, Enum):
    """Форма представления абсолютного значения"""

    # Фиксированная ширина: u64 для SHORT, u128 для остальных систем
    BOUNDED = "bounded"
    # Произвольная точность, ограниченная только словарём названий
    UNBOUNDED = "unbounded"
