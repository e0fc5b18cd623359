"""
Тесты для Group Renderer и Trimming

Проверяет:
1. Позиционные маркеры внутри группы
2. Вставку filler ZERO после нулевых цифр
3. Границы width/value
4. Подавление ведущей 一 перед 十
"""

import pytest

from chinese_numerals.core.render_tables import LOWER_SIMPLIFIED
from chinese_numerals.core.symbols import Symbol
from chinese_numerals.engines.group_renderer import MAX_GROUP_WIDTH, render_group
from chinese_numerals.engines.trimming import leading_value, trim_leading_one


def _text(value: int, width: int = 4) -> str:
    return LOWER_SIMPLIFIED.render(reversed(render_group(value, width)))


# =============================================================================
# ТЕСТЫ: render_group
# =============================================================================


class TestRenderGroup:
    """Тесты рендеринга одной группы"""

    def test_zero_is_empty(self) -> None:
        assert render_group(0) == []

    def test_least_significant_first(self) -> None:
        """Порядок: младший разряд первым"""
        assert render_group(405) == [Symbol.FIVE, Symbol.ZERO, Symbol.HUNDRED, Symbol.FOUR]

    @pytest.mark.parametrize(
        "value, expected",
        [
            (7, "七"),
            (10, "一十"),
            (15, "一十五"),
            (100, "一百"),
            (110, "一百一十"),
            (1001, "一千零一"),
            (1010, "一千零一十"),
            (1234, "一千二百三十四"),
            (4005, "四千零五"),
            (9999, "九千九百九十九"),
        ],
    )
    def test_myriad_group(self, value: int, expected: str) -> None:
        assert _text(value) == expected

    def test_single_zero_for_consecutive_zeros(self) -> None:
        """Несколько подряд идущих нулей дают один ZERO"""
        assert render_group(1001).count(Symbol.ZERO) == 1

    def test_no_trailing_zero(self) -> None:
        """Нули в младших разрядах не дают ZERO"""
        assert Symbol.ZERO not in render_group(1200)

    def test_wide_group(self) -> None:
        """Группа шире 4 цифр использует маркеры 万, 亿, …"""
        assert _text(10**5 + 1, 6) == "一亿零一"

    def test_width_bounds(self) -> None:
        with pytest.raises(ValueError, match="width"):
            render_group(1, 0)
        with pytest.raises(ValueError, match="width"):
            render_group(1, MAX_GROUP_WIDTH + 1)

    def test_value_must_fit(self) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            render_group(10000, 4)
        with pytest.raises(ValueError, match="does not fit"):
            render_group(-1, 4)


# =============================================================================
# ТЕСТЫ: Trimming
# =============================================================================


class TestTrimming:
    """Тесты подавления 一十"""

    @pytest.mark.parametrize(
        "magnitude, expected",
        [
            (15, 15),
            (100100, 10),
            (10**9, 10),
            (12345, 1),
            (9999, 9999),
        ],
    )
    def test_leading_value(self, magnitude: int, expected: int) -> None:
        assert leading_value(magnitude, 10**4) == expected

    def test_leading_value_whole(self) -> None:
        """divisor=None — значение целиком"""
        assert leading_value(100100, None) == 100100

    def test_leading_value_invalid_divisor(self) -> None:
        with pytest.raises(ValueError, match="Divisor"):
            leading_value(100, 1)

    def test_trims_leading_one(self) -> None:
        symbols = [Symbol.FIVE, Symbol.TEN, Symbol.ONE]
        assert trim_leading_one(symbols, 15, 10**4) == [Symbol.FIVE, Symbol.TEN]
        # Исходный список не изменяется
        assert symbols == [Symbol.FIVE, Symbol.TEN, Symbol.ONE]

    def test_keeps_other_values(self) -> None:
        symbols = render_group(110)
        assert trim_leading_one(symbols, 110, None) == symbols

    def test_bounds_are_inclusive(self) -> None:
        assert trim_leading_one(render_group(10), 10, None) == [Symbol.TEN]
        assert trim_leading_one(render_group(19), 19, None) == [Symbol.NINE, Symbol.TEN]
        assert trim_leading_one(render_group(20), 20, None)[-1] is Symbol.TWO

    def test_inconsistent_symbols_rejected(self) -> None:
        """Ведущая группа в [10, 19] без ведущей ONE — нарушение инварианта"""
        with pytest.raises(RuntimeError, match="Expected leading ONE"):
            trim_leading_one([Symbol.TWO], 12, None)
