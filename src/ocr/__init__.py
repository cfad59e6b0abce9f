"""Recognition contract and document model.

Core Components:
    - engine: TextRecognizer contract and the file-staging base class
    - document: PerspectiveContent aggregate and its validating factory
"""

from .document import PerspectiveContent, build_perspective_content
from .engine import StagedFileRecognizer, TextRecognizer

__all__ = [
    "TextRecognizer",
    "StagedFileRecognizer",
    "PerspectiveContent",
    "build_perspective_content",
]
