"""
Contract Validation Module

Валидация JSON запросов на рендеринг китайских чисел.
"""

from .validators import (
    ContractValidator,
    NumeralRequestValidator,
    SchemaLoader,
    numeral_from_request,
    render_numeral_request,
    validate_numeral_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumeralRequestValidator",
    # Functions
    "validate_numeral_request",
    "numeral_from_request",
    "render_numeral_request",
]
