"""
Contract Validation Module

Модуль для валидации JSON контрактов bigradix.
"""

from .validators import (
    ContractValidator,
    ConversionValidator,
    SchemaLoader,
    TaggedLiteralValidator,
    validate_conversion,
    validate_tagged_literal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionValidator",
    "TaggedLiteralValidator",
    # Functions
    "validate_conversion",
    "validate_tagged_literal",
]
