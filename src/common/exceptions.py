"""
Error taxonomy for the perspective mapping pipeline.

Every error signals an invalid caller-supplied precondition, so nothing here
is retried or recovered internally. Most errors also derive from the builtin
exception a caller would naturally catch (``ValueError``, ``TypeError``,
``OSError``).
"""


class PerspectiveMappingError(Exception):
    """Base class for all errors raised by this package."""


class NullInputError(PerspectiveMappingError, TypeError):
    """A required aggregate argument was ``None``."""


class EmptyTextError(PerspectiveMappingError, ValueError):
    """Transcription is blank or missing when synthesis was requested."""

    def __init__(self, message: str = "Text is blank, cannot generate characters"):
        super().__init__(message)


class InvalidPositionError(PerspectiveMappingError, ValueError):
    """Block quadrilateral is missing or lacks one or more corners."""

    def __init__(self, message: str = "Text position is missing or incomplete"):
        super().__init__(message)


class LengthMismatchError(PerspectiveMappingError, ValueError):
    """Two point sequences that must correspond by index differ in length."""


class EmptyInputError(PerspectiveMappingError, ValueError):
    """A point sequence is empty."""


class DegenerateInputError(PerspectiveMappingError, ValueError):
    """Point groups are too small to form a single pair."""


class TempFileError(PerspectiveMappingError, OSError):
    """A temporary file or directory could not be created or written."""
