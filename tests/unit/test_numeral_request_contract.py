"""
Tests for JSON Schema Contract Validators

Комплексное тестирование numeral_request контракта:
- Валидность самой схемы
- Валидация правильных запросов
- Детекция нарушений required полей, типов и enum
- Рендеринг запроса и разбор десятичных строк
"""

import pytest
from jsonschema import ValidationError

from chinese_numerals import MagnitudeForm, OutOfRangeError, Scale, Sign
from chinese_numerals.contracts import (
    NumeralRequestValidator,
    SchemaLoader,
    numeral_from_request,
    render_numeral_request,
    validate_numeral_request,
)
from chinese_numerals.core.errors import describe_value
from chinese_numerals.core.magnitude import check_bound, check_magnitude, parse_decimal


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный numeral_request для тестирования."""
    return {
        "value": 102030405,
        "scale": "mid",
        "form": "bounded",
        "variant": "traditional",
        "case": "upper",
    }


# =============================================================================
# SCHEMA LOADING TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем."""

    def test_schema_loads_and_is_valid(self):
        """Схема загружается и проходит meta-validation."""
        schema = SchemaLoader().load_schema("numeral_request")
        assert schema["title"] == "numeral_request"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("numeral_request") is loader.load_schema("numeral_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATION TESTS
# =============================================================================


class TestNumeralRequestValidation:
    """Тесты валидации numeral_request."""

    def test_valid_request(self, valid_request):
        validate_numeral_request(valid_request)
        assert NumeralRequestValidator().is_valid(valid_request)

    def test_minimal_request(self):
        validate_numeral_request({"value": -7, "scale": "short"})

    def test_decimal_string_value(self):
        validate_numeral_request({"value": "-1" + "0" * 100, "scale": "long"})

    @pytest.mark.parametrize("field", ["value", "scale"])
    def test_missing_required_field(self, valid_request, field):
        del valid_request[field]
        with pytest.raises(ValidationError, match="required"):
            validate_numeral_request(valid_request)

    @pytest.mark.parametrize(
        "field, bad",
        [
            ("scale", "huge"),
            ("form", "fixed"),
            ("variant", "cantonese"),
            ("case", "title"),
        ],
    )
    def test_enum_violation(self, valid_request, field, bad):
        valid_request[field] = bad
        with pytest.raises(ValidationError):
            validate_numeral_request(valid_request)

    @pytest.mark.parametrize("bad", [1.5, True, None, "12a", "", "0x10", "١٢"])
    def test_invalid_value(self, valid_request, bad):
        valid_request["value"] = bad
        with pytest.raises(ValidationError):
            validate_numeral_request(valid_request)

    def test_additional_properties_rejected(self, valid_request):
        valid_request["locale"] = "zh-CN"
        with pytest.raises(ValidationError):
            validate_numeral_request(valid_request)

    def test_iter_errors_reports_all(self):
        errors = list(NumeralRequestValidator().iter_errors({"scale": "huge", "case": "title"}))
        assert len(errors) == 3


# =============================================================================
# RENDERING TESTS
# =============================================================================


class TestNumeralRequestRendering:
    """Тесты построения и рендеринга запроса."""

    def test_render_full_request(self, valid_request):
        assert render_numeral_request(valid_request) == "壹億零貳佰零叄萬零肆佰零伍"

    def test_render_defaults(self):
        """По умолчанию: bounded, simplified, lower"""
        assert render_numeral_request({"value": 10005, "scale": "myriad"}) == "一万零五"

    def test_numeral_from_request(self):
        num = numeral_from_request({"value": "-15", "scale": "short", "form": "unbounded"})
        assert num.sign is Sign.NEGATIVE
        assert num.magnitude == 15
        assert num.scale is Scale.SHORT
        assert num.form is MagnitudeForm.UNBOUNDED

    def test_integral_float_value(self):
        """JSON число 5.0 проходит схему как integer и рендерится как 5"""
        request = {"value": 5.0, "scale": "myriad"}
        validate_numeral_request(request)
        assert render_numeral_request(request) == "五"

        num = numeral_from_request({"value": -10.0, "scale": "mid"})
        assert num.value == -10
        assert type(num.magnitude) is int

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError, match="short scale"):
            render_numeral_request({"value": 10**15, "scale": "short"})

    def test_long_decimal_string(self):
        """8192-значная строка — за пределами лимита int(str)"""
        request = {"value": "-" + "9" * 8192, "scale": "long", "form": "unbounded"}
        text = render_numeral_request(request)
        assert text.startswith("负九")
        assert "载" in text

    def test_long_decimal_string_bounded(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            render_numeral_request({"value": "9" * 8192, "scale": "long"})
        assert exc_info.value.form is MagnitudeForm.BOUNDED


# =============================================================================
# MAGNITUDE HELPERS TESTS
# =============================================================================


class TestMagnitudeHelpers:
    """Тесты разбора и описания значений."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("42", 42),
            ("+42", 42),
            ("-42", -42),
            (" 7 ", 7),
            ("-1_0203_0405", -102030405),
        ],
    )
    def test_parse_decimal(self, text, expected):
        assert parse_decimal(text) == expected

    def test_parse_decimal_long(self):
        assert parse_decimal("1" + "0" * 5000) == 10**5000

    @pytest.mark.parametrize("text", ["", "-", "1.5", "abc", "١٢", "1e5"])
    def test_parse_decimal_invalid(self, text):
        with pytest.raises(ValueError, match="Not a decimal integer"):
            parse_decimal(text)

    def test_describe_value(self):
        assert describe_value(12345) == "12345"
        assert describe_value(10**8192) == "~10^8192"
        assert describe_value(10**8192 - 1) == "~10^8191"

    def test_check_magnitude(self):
        assert check_magnitude(Scale.MID, 10**20) == 10**20
        with pytest.raises(ValueError):
            check_magnitude(Scale.MID, -1)
        with pytest.raises(OutOfRangeError):
            check_magnitude(Scale.MID, 10**88, MagnitudeForm.UNBOUNDED)

    def test_check_bound_explicit_limit(self):
        """Явный потолок и форма попадают в ошибку"""
        assert check_bound(Scale.LONG, 10**64 - 1, 10**64 - 1, MagnitudeForm.UNBOUNDED) == 10**64 - 1
        with pytest.raises(OutOfRangeError, match="long scale") as exc_info:
            check_bound(Scale.LONG, 10**64, 10**64 - 1, MagnitudeForm.UNBOUNDED)
        assert exc_info.value.form is MagnitudeForm.UNBOUNDED
        with pytest.raises(ValueError, match="cannot be negative"):
            check_bound(Scale.LONG, -1, 10, MagnitudeForm.BOUNDED)
