"""
Render Tables — Отображение символов в глифы

Четыре таблицы (variant × case), построенные как цепочка переопределений:

    LOWER_SIMPLIFIED (база, тотальная)
      ├── UPPER_SIMPLIFIED   (цифры 1–9, 拾佰仟, 万)
      └── LOWER_TRADITIONAL  (萬, 億, 兆, 溝, 澗, 載, 負)
            └── UPPER_TRADITIONAL (цифры 1–9 с 貳/叄/陸, 拾佰仟)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая таблица тотальна: любой из 25 символов имеет глиф
2. Названия больших чисел не имеют финансовой (uppercase) формы и
   всегда берутся из lowercase таблицы того же варианта
3. UPPER_TRADITIONAL отличается от UPPER_SIMPLIFIED только цифрами 2, 3, 6
   и символами, чья lowercase форма зависит от варианта
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final, Optional

from chinese_numerals.core.symbols import SYMBOLS, Symbol


# =============================================================================
# ENUMS
# =============================================================================


class Variant(str, Enum):
    """Набор иероглифов"""

    SIMPLIFIED = "simplified"
    TRADITIONAL = "traditional"


class Case(str, Enum):
    """Регистр записи: обычный (小写) или финансовый (大写)"""

    LOWER = "lower"
    UPPER = "upper"


# =============================================================================
# RENDER TABLE
# =============================================================================


@dataclass(frozen=True)
class RenderTable:
    """
    Слой таблицы глифов: собственные переопределения + ссылка на родителя.

    Таблица без родителя обязана покрывать все символы.
    """

    name: str
    overrides: Mapping[Symbol, str] = field(repr=False)
    parent: Optional["RenderTable"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

        if self.parent is None:
            missing = [s.name for s in SYMBOLS if s not in self.overrides]
            if missing:
                raise ValueError(f"Base table {self.name!r} is not total, missing: {missing}")

        for symbol, glyph in self.overrides.items():
            if len(glyph) != 1:
                raise ValueError(f"Glyph for {symbol.name} must be one character, got {glyph!r}")

    def lookup(self, symbol: Symbol) -> str:
        """
        Глиф символа с fallback на родительскую таблицу.

        Args:
            symbol: Символ

        Returns:
            Один иероглиф
        """
        table: Optional[RenderTable] = self
        while table is not None:
            glyph = table.overrides.get(symbol)
            if glyph is not None:
                return glyph
            table = table.parent
        # Недостижимо для тотальной базы
        raise KeyError(symbol)

    def render(self, symbols: Iterable[Symbol]) -> str:
        """Конкатенация глифов последовательности"""
        return "".join(self.lookup(s) for s in symbols)


# =============================================================================
# TABLES
# =============================================================================

_LOWER_SIMPLIFIED_GLYPHS: Final[str] = "零一二三四五六七八九十百千万亿兆京垓秭穰沟涧正载负"

LOWER_SIMPLIFIED: Final[RenderTable] = RenderTable(
    name="lower_simplified",
    overrides=dict(zip(SYMBOLS, _LOWER_SIMPLIFIED_GLYPHS)),
)

LOWER_TRADITIONAL: Final[RenderTable] = RenderTable(
    name="lower_traditional",
    overrides={
        Symbol.MYRIAD: "萬",
        Symbol.YI: "億",
        Symbol.ZHAO: "兆",
        Symbol.GOU: "溝",
        Symbol.JIAN: "澗",
        Symbol.ZAI: "載",
        Symbol.NEGATIVE: "負",
    },
    parent=LOWER_SIMPLIFIED,
)

# Финансовые цифры и маркеры внутри группы, общие для обоих вариантов
_FINANCIAL_OVERRIDES: Final[Mapping[Symbol, str]] = MappingProxyType(
    {
        Symbol.ONE: "壹",
        Symbol.TWO: "贰",
        Symbol.THREE: "叁",
        Symbol.FOUR: "肆",
        Symbol.FIVE: "伍",
        Symbol.SIX: "陆",
        Symbol.SEVEN: "柒",
        Symbol.EIGHT: "捌",
        Symbol.NINE: "玖",
        Symbol.TEN: "拾",
        Symbol.HUNDRED: "佰",
        Symbol.THOUSAND: "仟",
    }
)

UPPER_SIMPLIFIED: Final[RenderTable] = RenderTable(
    name="upper_simplified",
    overrides={**_FINANCIAL_OVERRIDES, Symbol.MYRIAD: "万"},
    parent=LOWER_SIMPLIFIED,
)

UPPER_TRADITIONAL: Final[RenderTable] = RenderTable(
    name="upper_traditional",
    overrides={
        **_FINANCIAL_OVERRIDES,
        Symbol.TWO: "貳",
        Symbol.THREE: "叄",
        Symbol.SIX: "陸",
    },
    parent=LOWER_TRADITIONAL,
)

_TABLES: Final[Mapping[tuple[Variant, Case], RenderTable]] = MappingProxyType(
    {
        (Variant.SIMPLIFIED, Case.LOWER): LOWER_SIMPLIFIED,
        (Variant.SIMPLIFIED, Case.UPPER): UPPER_SIMPLIFIED,
        (Variant.TRADITIONAL, Case.LOWER): LOWER_TRADITIONAL,
        (Variant.TRADITIONAL, Case.UPPER): UPPER_TRADITIONAL,
    }
)


# =============================================================================
# API
# =============================================================================


def get_render_table(variant: Variant, case: Case) -> RenderTable:
    """Таблица для комбинации variant × case"""
    return _TABLES[(Variant(variant), Case(case))]


def render_symbol(symbol: Symbol, variant: Variant, case: Case) -> str:
    """
    Глиф одного символа.

    Examples:
        >>> render_symbol(Symbol.MYRIAD, Variant.TRADITIONAL, Case.UPPER)
        '萬'
        >>> render_symbol(Symbol.TWO, Variant.SIMPLIFIED, Case.UPPER)
        '贰'
    """
    return get_render_table(variant, case).lookup(symbol)


def render_symbols(symbols: Iterable[Symbol], variant: Variant, case: Case) -> str:
    """
    Строка из последовательности символов (старший разряд первым).

    Args:
        symbols: Последовательность символов в порядке чтения
        variant: Набор иероглифов
        case: Регистр

    Returns:
        Готовая строка
    """
    return get_render_table(variant, case).render(symbols)
