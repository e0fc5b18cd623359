"""
Long Scale Engine — Самоподобная система 上数

«上数者，数穷则变。若言万万曰亿，亿亿曰兆、兆兆曰京也。»

Каждое следующее название — квадрат предыдущего:
    亿 = 10^8, 兆 = 10^16, 京 = 10^32, 垓 = 10^64, …, 载 = 10^4096

Ярусы (ширина в цифрах):
    ярус 0        : 16 цифр, рендер через MID (до 亿 включительно)
    ярус 1 (兆)    : 16 цифр
    ярус 2 (京)    : 32 цифры
    ярус t (t>=2) : 16 · 2^(t-1) цифр

Содержимое яруса, не помещающееся в базовые 16 цифр, рендерится
рекурсивно этим же движком (亿兆, 兆京 и т.д.).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Filler ZERO — по тому же правилу, что и в линейных системах, но порог
   и предыдущее значение масштабируются вместе с делителем яруса
2. Глубина рекурсии ограничена tier_count (явная константа)
3. Диапазон проверяется до начала рендеринга
"""

from dataclasses import dataclass
from typing import Final

from chinese_numerals.core.errors import describe_value
from chinese_numerals.core.magnitude import (
    LONG_SCALE_BASE_WIDTH,
    LONG_SCALE_TIER_COUNT,
    check_bound,
)
from chinese_numerals.core.scale import MagnitudeForm, Scale
from chinese_numerals.core.symbols import LAST_MARKER_INDEX, SYMBOLS, Symbol, symbol_index
from chinese_numerals.engines.linear_scale import MYRIAD_TRIM_DIVISOR, LinearScaleEngine
from chinese_numerals.engines.trimming import trim_leading_one

# Маркер яруса 1; ярус t >= 1 получает SYMBOLS[_TIER_MARKER_INDEX + t - 1]
_TIER_MARKER_INDEX: Final[int] = symbol_index(Symbol.ZHAO)

# Ярус 0 + по ярусу на каждый маркер 兆 … 载
MAX_TIER_COUNT: Final[int] = LAST_MARKER_INDEX - _TIER_MARKER_INDEX + 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LongScaleConfig:
    """
    Конфигурация LONG системы.

    tier_count задаёт потолок явно: max_abs = 10^(base_width · 2^(tier_count-1)) - 1.
    По умолчанию используются все десять названий (потолок 10^8192 - 1).
    """

    base_width: int = LONG_SCALE_BASE_WIDTH
    tier_count: int = LONG_SCALE_TIER_COUNT

    def __post_init__(self) -> None:
        if self.base_width < 8 or self.base_width % 8:
            raise ValueError(f"base_width must be a positive multiple of 8, got {self.base_width}")
        if not 1 <= self.tier_count <= MAX_TIER_COUNT:
            raise ValueError(f"tier_count must be in 1..{MAX_TIER_COUNT}, got {self.tier_count}")

    @property
    def max_digits(self) -> int:
        """Количество десятичных цифр, покрываемых всеми ярусами"""
        return self.base_width * 2 ** (self.tier_count - 1)

    @property
    def max_abs(self) -> int:
        return 10**self.max_digits - 1


# =============================================================================
# ENGINE
# =============================================================================


class LongScaleEngine:
    """
    Движок LONG системы.

    Ярус 0 и остатки, помещающиеся в base_width цифр, делегируются
    MID движку; большие остатки — рекурсивно самому себе.
    """

    scale: Final[Scale] = Scale.LONG

    def __init__(self, mid_engine: LinearScaleEngine, config: LongScaleConfig | None = None):
        """
        Args:
            mid_engine: MID движок для базового яруса
            config: Конфигурация ярусов (default: LongScaleConfig())
        """
        self.config = config or LongScaleConfig()
        if mid_engine.max_abs < 10**self.config.base_width - 1:
            raise ValueError(
                f"Mid engine cannot render {self.config.base_width}-digit tiers "
                f"(max_abs={describe_value(mid_engine.max_abs)})"
            )
        self._mid = mid_engine

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
        return self._tiers(num)

    def to_symbols_trimmed(self, magnitude: int) -> list[Symbol]:
        """Символы с подавлением ведущей 一 перед 十 (lowercase запись)"""
        return trim_leading_one(self.to_symbols(magnitude), magnitude, MYRIAD_TRIM_DIVISOR)

    def _tiers(self, num: int) -> list[Symbol]:
        base_divisor = 10**self.config.base_width
        divisor = base_divisor
        threshold = divisor // 10

        symbols: list[Symbol] = []
        prev_group = threshold

        for tier in range(self.config.tier_count):
            num, group = divmod(num, divisor)

            if group:
                if symbols and prev_group < threshold:
                    symbols.append(Symbol.ZERO)
                if tier > 0:
                    symbols.append(SYMBOLS[_TIER_MARKER_INDEX + tier - 1])
                if group < base_divisor:
                    symbols.extend(self._mid.to_symbols(group))
                else:
                    # 亿兆, 兆京, …: остаток сам является числом LONG системы
                    symbols.extend(self._tiers(group))

            prev_group = group
            if tier > 0:
                # Порог и младший блок — в единицах нового делителя
                prev_group *= divisor
                divisor *= divisor
                threshold = divisor // 10

            if not num:
                break

        return symbols
