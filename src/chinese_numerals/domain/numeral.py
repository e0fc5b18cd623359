"""
SignedNumeral — Число со знаком в выбранной системе

Immutable Pydantic модель: знак + абсолютное значение + система + форма.

Поток данных:
    (sign, magnitude, scale) → engine.to_symbols[_trimmed] (младший первым)
    → + NEGATIVE / ZERO в конец → reverse → таблица глифов → строка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude == 0 → sign == NIL (независимо от переданного знака)
2. magnitude != 0 → sign ∈ {NEGATIVE, POSITIVE}
3. magnitude <= max_abs(scale, form), иначе OutOfRangeError
4. Рендеринг тотален для любого валидного экземпляра
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from chinese_numerals.core.errors import describe_value
from chinese_numerals.core.magnitude import check_magnitude, max_abs
from chinese_numerals.core.render_tables import Case, Variant, render_symbols
from chinese_numerals.core.scale import MagnitudeForm, Scale
from chinese_numerals.core.symbols import Symbol
from chinese_numerals.engines import get_engine


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    NEGATIVE = "negative"
    NIL = "nil"
    POSITIVE = "positive"


# =============================================================================
# SIGNED NUMERAL MODEL
# =============================================================================


class SignedNumeral(BaseModel):
    """
    Целое со знаком, выражаемое китайскими цифрами.

    Immutable модель (frozen=True). Создаётся напрямую (с валидацией)
    или через фабрики from_int / from_abs / new_non_positive.
    """

    magnitude: int = Field(0, description="Абсолютное значение (>= 0)")
    sign: Sign = Field(
        Sign.NIL,
        validate_default=True,
        description="Знак; для нулевого значения всегда NIL",
    )
    scale: Scale = Field(..., description="Система наименования разрядов")
    form: MagnitudeForm = Field(
        MagnitudeForm.BOUNDED, description="Форма представления абсолютного значения"
    )

    model_config = {"frozen": True}

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude_non_negative(cls, v: int) -> int:
        """Абсолютное значение не может быть отрицательным"""
        if v < 0:
            raise ValueError(f"magnitude cannot be negative: {describe_value(-v)}")
        return v

    @field_validator("sign")
    @classmethod
    def normalize_sign(cls, v: Sign, info: ValidationInfo) -> Sign:
        """
        Нормализация знака.

        Ноль всегда без знака; ненулевое значение без знака запрещено.
        """
        magnitude = info.data.get("magnitude")
        if magnitude is None:
            return v
        if magnitude == 0:
            return Sign.NIL
        if v is Sign.NIL:
            raise ValueError("sign NIL requires zero magnitude")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "SignedNumeral":
        """Проверка потолка системы (OutOfRangeError, не ValidationError)"""
        check_magnitude(self.scale, self.magnitude, self.form)
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_abs(
        cls,
        sign: Sign,
        abs_value: int,
        scale: Scale,
        form: MagnitudeForm = MagnitudeForm.BOUNDED,
    ) -> "SignedNumeral":
        """
        Нормализующая фабрика (sign, magnitude) → SignedNumeral.

        Args:
            sign: Знак (игнорируется для нуля)
            abs_value: Абсолютное значение
            scale: Система
            form: Форма представления

        Raises:
            OutOfRangeError: Если abs_value превышает потолок
        """
        if abs_value == 0:
            sign = Sign.NIL
        return cls(magnitude=abs_value, sign=sign, scale=scale, form=form)

    @classmethod
    def from_int(
        cls,
        value: int,
        scale: Scale,
        form: MagnitudeForm = MagnitudeForm.BOUNDED,
    ) -> "SignedNumeral":
        """
        Конверсия целого со знаком.

        Examples:
            >>> SignedNumeral.from_int(-15, Scale.MYRIAD).to_lowercase_simp()
            '负十五'

        Raises:
            OutOfRangeError: Если |value| превышает потолок
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")

        if value < 0:
            return cls.from_abs(Sign.NEGATIVE, -value, scale, form)
        return cls.from_abs(Sign.POSITIVE, value, scale, form)

    @classmethod
    def new_non_positive(
        cls,
        abs_value: int,
        scale: Scale,
        form: MagnitudeForm = MagnitudeForm.BOUNDED,
    ) -> "SignedNumeral":
        """Неположительное число по абсолютному значению (−abs_value)"""
        return cls.from_abs(Sign.NEGATIVE, abs_value, scale, form)

    @classmethod
    def max_value(
        cls, scale: Scale, form: MagnitudeForm = MagnitudeForm.BOUNDED
    ) -> "SignedNumeral":
        """Максимальное число, выражаемое в системе и форме"""
        return cls.from_abs(Sign.POSITIVE, max_abs(scale, form), scale, form)

    @classmethod
    def min_value(
        cls, scale: Scale, form: MagnitudeForm = MagnitudeForm.BOUNDED
    ) -> "SignedNumeral":
        """Минимальное число, выражаемое в системе и форме"""
        return cls.from_abs(Sign.NEGATIVE, max_abs(scale, form), scale, form)

    # -------------------------------------------------------------------------
    # Значение
    # -------------------------------------------------------------------------

    @property
    def value(self) -> int:
        """Целое со знаком"""
        return -self.magnitude if self.sign is Sign.NEGATIVE else self.magnitude

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def symbols(self, case: Case = Case.LOWER) -> tuple[Symbol, ...]:
        """
        Последовательность символов в порядке чтения (старший первым).

        LOWER применяет подавление ведущей 一 перед 十; UPPER — нет.

        Args:
            case: Регистр записи

        Returns:
            Кортеж символов
        """
        engine = get_engine(self.scale)
        if Case(case) is Case.LOWER:
            chars = engine.to_symbols_trimmed(self.magnitude)
        else:
            chars = engine.to_symbols(self.magnitude)

        if self.sign is Sign.NEGATIVE:
            chars.append(Symbol.NEGATIVE)
        elif self.sign is Sign.NIL:
            chars.append(Symbol.ZERO)

        return tuple(reversed(chars))

    def render(self, variant: Variant = Variant.SIMPLIFIED, case: Case = Case.LOWER) -> str:
        """
        Строковая запись числа.

        Args:
            variant: Набор иероглифов
            case: Регистр записи

        Returns:
            Китайская запись числа
        """
        return render_symbols(self.symbols(case), variant, case)

    def to_lowercase(self, variant: Variant = Variant.SIMPLIFIED) -> str:
        """Обычная запись (小写数字)"""
        return self.render(variant, Case.LOWER)

    def to_uppercase(self, variant: Variant = Variant.SIMPLIFIED) -> str:
        """Финансовая запись (大写数字)"""
        return self.render(variant, Case.UPPER)

    def to_lowercase_simp(self) -> str:
        return self.to_lowercase(Variant.SIMPLIFIED)

    def to_lowercase_trad(self) -> str:
        return self.to_lowercase(Variant.TRADITIONAL)

    def to_uppercase_simp(self) -> str:
        return self.to_uppercase(Variant.SIMPLIFIED)

    def to_uppercase_trad(self) -> str:
        return self.to_uppercase(Variant.TRADITIONAL)

    def __str__(self) -> str:
        return self.to_lowercase_simp()

    def __format__(self, format_spec: str) -> str:
        """
        "" → lowercase simplified, "#" → uppercase simplified.
        """
        if format_spec == "":
            return self.to_lowercase_simp()
        if format_spec == "#":
            return self.to_uppercase_simp()
        raise ValueError(f"Invalid format specifier {format_spec!r} for SignedNumeral")

    def __repr_args__(self) -> Any:
        # Полный repr числа LONG системы упирается в лимит int → str
        for name, value in super().__repr_args__():
            if name == "magnitude" and describe_value(value).startswith("~"):
                yield name, describe_value(value)
            else:
                yield name, value
