"""
Linear Scale Engine — Общий алгоритм для SHORT, MYRIAD и MID

Значение разбивается на группы фиксированной ширины (1, 4 или 8 цифр).
Группа g >= 1 получает маркер SYMBOLS[first_marker + g - 1]:

    SHORT  (w=1): 十, 百, 千, 万, 亿, 兆, …, 载
    MYRIAD (w=4): 万, 亿, 兆, 京, …, 载
    MID    (w=8): 亿, 兆, 京, …, 载

Содержимое группы рендерится вложенным рендерером:
    SHORT  → символ цифры
    MYRIAD → render_group(·, 4)
    MID    → MYRIAD engine

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Filler ZERO вставляется перед ненулевой группой, если уже есть символы
   и предыдущая (младшая) группа < 10^(w-1) — пропущенная (0) и неполная
   группа обрабатываются одинаково
2. Маркеры идут в строго возрастающем порядке ярусов
3. Диапазон проверяется до начала рендеринга
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Optional

from chinese_numerals.core.magnitude import check_bound
from chinese_numerals.core.scale import MagnitudeForm, Scale
from chinese_numerals.core.symbols import LAST_MARKER_INDEX, SYMBOLS, Symbol, symbol_index
from chinese_numerals.engines.trimming import trim_leading_one

# Делитель ведущей группы для подавления «一十» (MYRIAD/MID/LONG)
MYRIAD_TRIM_DIVISOR: Final[int] = 10**4

GroupRenderer = Callable[[int], list[Symbol]]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LinearScaleConfig:
    """
    Дескриптор линейной системы.

    group_count ограничен числом доступных маркеров от first_marker до 载.
    """

    scale: Scale
    group_width: int
    group_count: int
    first_marker: Symbol
    trim_divisor: Optional[int] = MYRIAD_TRIM_DIVISOR

    def __post_init__(self) -> None:
        if self.group_width < 1:
            raise ValueError(f"group_width must be >= 1, got {self.group_width}")

        available = LAST_MARKER_INDEX - symbol_index(self.first_marker) + 2
        if not 1 <= self.group_count <= available:
            raise ValueError(
                f"group_count for {self.scale.label} must be in 1..{available}, "
                f"got {self.group_count}"
            )

    @property
    def group_base(self) -> int:
        """10^w — делитель одной группы"""
        return 10**self.group_width

    @property
    def full_group_threshold(self) -> int:
        """10^(w-1) — группа ниже порога не занимает старшую позицию"""
        return 10 ** (self.group_width - 1)

    @property
    def max_abs(self) -> int:
        return 10 ** (self.group_width * self.group_count) - 1

    def marker(self, group_index: int) -> Symbol:
        """Маркер группы g >= 1"""
        return SYMBOLS[symbol_index(self.first_marker) + group_index - 1]


# =============================================================================
# ENGINE
# =============================================================================


class LinearScaleEngine:
    """
    Движок линейной системы.

    Stateless: один экземпляр безопасно разделяется между потоками.
    """

    def __init__(self, config: LinearScaleConfig, interior: GroupRenderer):
        """
        Args:
            config: Дескриптор системы
            interior: Рендерер содержимого группы (значение < 10^w → символы)
        """
        self.config = config
        self._interior = interior

    @property
    def scale(self) -> Scale:
        return self.config.scale

    @property
    def max_abs(self) -> int:
        """Максимальное абсолютное значение, выражаемое движком"""
        return self.config.max_abs

    def check(self, magnitude: int) -> int:
        """
        Проверка диапазона.

        Raises:
            ValueError: Если magnitude отрицательный
            OutOfRangeError: Если magnitude > max_abs
        """
        # Потолок движка — словарь названий, т.е. unbounded форма
        return check_bound(self.scale, magnitude, self.max_abs, MagnitudeForm.UNBOUNDED)

    def to_symbols(self, magnitude: int) -> list[Symbol]:
        """
        Символы значения, младший разряд первым (без сокращения 一十).

        Args:
            magnitude: Абсолютное значение

        Returns:
            Список символов; пустой для 0

        Raises:
            OutOfRangeError: Если значение вне диапазона системы
        """
        num = self.check(magnitude)
        cfg = self.config
        base = cfg.group_base
        threshold = cfg.full_group_threshold

        symbols: list[Symbol] = []
        prev_group = threshold

        for group_index in range(cfg.group_count):
            num, group = divmod(num, base)

            if group:
                if symbols and prev_group < threshold:
                    symbols.append(Symbol.ZERO)
                if group_index > 0:
                    symbols.append(cfg.marker(group_index))
                symbols.extend(self._interior(group))

            prev_group = group
            if not num:
                break

        return symbols

    def to_symbols_trimmed(self, magnitude: int) -> list[Symbol]:
        """Символы с подавлением ведущей 一 перед 十 (lowercase запись)"""
        return trim_leading_one(self.to_symbols(magnitude), magnitude, self.config.trim_divisor)
