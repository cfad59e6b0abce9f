"""
Common types and errors shared across all modules.

This module provides the geometric primitives and the error taxonomy used by
text layout synthesis, marker alignment, and the OCR document model.
"""

from src.common.exceptions import (
    DegenerateInputError,
    EmptyInputError,
    EmptyTextError,
    InvalidPositionError,
    LengthMismatchError,
    NullInputError,
    PerspectiveMappingError,
    TempFileError,
)
from src.common.types import Point, Quadrilateral

__all__ = [
    "Point",
    "Quadrilateral",
    "PerspectiveMappingError",
    "NullInputError",
    "EmptyTextError",
    "InvalidPositionError",
    "LengthMismatchError",
    "EmptyInputError",
    "DegenerateInputError",
    "TempFileError",
]
