"""
Contract Validation Module

Модуль для валидации JSON контрактов геометрических примитивов.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    Vector3Validator,
    parse_vector3_payload,
    validate_vector3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Vector3Validator",
    # Functions
    "validate_vector3",
    "parse_vector3_payload",
]
