"""
Engines — движки разложения значения на символы.

Дескрипторы линейных систем и общие экземпляры движков:
- SHORT  : ширина 1, 15 позиций, содержимое — символ цифры
- MYRIAD : ширина 4, 12 групп, содержимое — render_group
- MID    : ширина 8, 11 групп, содержимое — MYRIAD движок
- LONG   : самоподобные ярусы, база — MID движок

Все движки stateless и разделяются между потоками.
"""

from typing import Final, Union

from chinese_numerals.core.magnitude import (
    MID_SCALE_GROUP_COUNT,
    MID_SCALE_GROUP_WIDTH,
    MYRIAD_SCALE_GROUP_COUNT,
    MYRIAD_SCALE_GROUP_WIDTH,
    SHORT_SCALE_GROUP_COUNT,
    SHORT_SCALE_GROUP_WIDTH,
)
from chinese_numerals.core.scale import Scale
from chinese_numerals.core.symbols import Symbol, digit_symbol
from chinese_numerals.engines.group_renderer import render_group
from chinese_numerals.engines.linear_scale import (
    MYRIAD_TRIM_DIVISOR,
    LinearScaleConfig,
    LinearScaleEngine,
)
from chinese_numerals.engines.long_scale import LongScaleConfig, LongScaleEngine
from chinese_numerals.engines.trimming import leading_value, trim_leading_one

ScaleEngine = Union[LinearScaleEngine, LongScaleEngine]


# =============================================================================
# DESCRIPTORS
# =============================================================================

SHORT_SCALE_CONFIG: Final[LinearScaleConfig] = LinearScaleConfig(
    scale=Scale.SHORT,
    group_width=SHORT_SCALE_GROUP_WIDTH,
    group_count=SHORT_SCALE_GROUP_COUNT,
    first_marker=Symbol.TEN,
    # 下数: 一十 сокращается только для значений 10..19 целиком
    trim_divisor=None,
)

MYRIAD_SCALE_CONFIG: Final[LinearScaleConfig] = LinearScaleConfig(
    scale=Scale.MYRIAD,
    group_width=MYRIAD_SCALE_GROUP_WIDTH,
    group_count=MYRIAD_SCALE_GROUP_COUNT,
    first_marker=Symbol.MYRIAD,
    trim_divisor=MYRIAD_TRIM_DIVISOR,
)

MID_SCALE_CONFIG: Final[LinearScaleConfig] = LinearScaleConfig(
    scale=Scale.MID,
    group_width=MID_SCALE_GROUP_WIDTH,
    group_count=MID_SCALE_GROUP_COUNT,
    first_marker=Symbol.YI,
    trim_divisor=MYRIAD_TRIM_DIVISOR,
)


# =============================================================================
# ENGINES
# =============================================================================


def _render_myriad_group(value: int) -> list[Symbol]:
    return render_group(value, MYRIAD_SCALE_GROUP_WIDTH)


SHORT_SCALE_ENGINE: Final[LinearScaleEngine] = LinearScaleEngine(
    SHORT_SCALE_CONFIG,
    interior=lambda digit: [digit_symbol(digit)],
)

MYRIAD_SCALE_ENGINE: Final[LinearScaleEngine] = LinearScaleEngine(
    MYRIAD_SCALE_CONFIG,
    interior=_render_myriad_group,
)

MID_SCALE_ENGINE: Final[LinearScaleEngine] = LinearScaleEngine(
    MID_SCALE_CONFIG,
    interior=MYRIAD_SCALE_ENGINE.to_symbols,
)

LONG_SCALE_ENGINE: Final[LongScaleEngine] = LongScaleEngine(MID_SCALE_ENGINE)

_ENGINES: Final[dict[Scale, ScaleEngine]] = {
    Scale.SHORT: SHORT_SCALE_ENGINE,
    Scale.MYRIAD: MYRIAD_SCALE_ENGINE,
    Scale.MID: MID_SCALE_ENGINE,
    Scale.LONG: LONG_SCALE_ENGINE,
}


def get_engine(scale: Scale) -> ScaleEngine:
    """Общий движок системы"""
    return _ENGINES[Scale(scale)]


__all__ = [
    # Types
    "ScaleEngine",
    "LinearScaleConfig",
    "LinearScaleEngine",
    "LongScaleConfig",
    "LongScaleEngine",
    # Descriptors
    "SHORT_SCALE_CONFIG",
    "MYRIAD_SCALE_CONFIG",
    "MID_SCALE_CONFIG",
    "MYRIAD_TRIM_DIVISOR",
    # Engines
    "SHORT_SCALE_ENGINE",
    "MYRIAD_SCALE_ENGINE",
    "MID_SCALE_ENGINE",
    "LONG_SCALE_ENGINE",
    "get_engine",
    # Building blocks
    "render_group",
    "leading_value",
    "trim_leading_one",
]
