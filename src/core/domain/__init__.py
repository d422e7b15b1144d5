"""
Domain models and value objects.

Contains fundamental geometric value objects like Vector3.
"""

from src.core.domain.vector import (
    DEFAULT_TOLERANCE,
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    ZERO,
    ImmutableViolation,
    InvalidArgument,
    Matrix4x4Like,
    Vector3,
    VectorTolerance,
)

__all__ = [
    # Vector model
    "Vector3",
    "VectorTolerance",
    "Matrix4x4Like",
    # Constants
    "DEFAULT_TOLERANCE",
    "ZERO",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    # Exceptions
    "InvalidArgument",
    "ImmutableViolation",
]
