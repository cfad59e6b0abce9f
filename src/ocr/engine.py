"""Recognition engine contract.

The OCR engine itself is an external collaborator. This module only fixes
the contract every engine adapter fulfils: given raw image bytes, return the
recognized text units in reading order, each with ``text`` and
``block_position`` populated and ``characters`` left empty.

Adapters for engines that only read from disk can derive from
:class:`StagedFileRecognizer`, which stages the bytes into a temporary file
that is removed as soon as recognition finishes.

Example:
    >>> class MyEngine(StagedFileRecognizer):
    ...     def recognize_file(self, path):
    ...         return [RecognizedTextUnit(text="ab", block_position=quad)]
    >>> units = MyEngine().recognize(image_bytes)
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from src.common.exceptions import NullInputError
from src.text_layout.types import RecognizedTextUnit
from src.utils.temp_files import staged_file

logger = logging.getLogger(__name__)


class TextRecognizer(ABC):
    """Abstract recognizer returning block-level text units."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> List[RecognizedTextUnit]:
        """Recognize text blocks in an encoded image.

        Args:
            image_bytes: Encoded image (PNG, JPEG, ...).

        Returns:
            Units in reading order with empty ``characters``.
        """


class StagedFileRecognizer(TextRecognizer):
    """Recognizer base for engines that read images from a file path.

    Args:
        file_name: Suffix used for the staged file name; engines that sniff
            the format from the extension should pass e.g. ``"page.png"``.
    """

    def __init__(self, file_name: str = "image"):
        self.file_name = file_name

    def recognize(self, image_bytes: bytes) -> List[RecognizedTextUnit]:
        if image_bytes is None:
            raise NullInputError("image_bytes is None")

        with staged_file(image_bytes, self.file_name) as path:
            units = self.recognize_file(path)

        logger.info(f"Recognized {len(units)} text blocks")
        return units

    @abstractmethod
    def recognize_file(self, path: Path) -> List[RecognizedTextUnit]:
        """Recognize text blocks in the image stored at ``path``."""
