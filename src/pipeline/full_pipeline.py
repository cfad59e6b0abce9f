"""
Full End-to-End Pipeline

Recognizes an image, synthesizes character geometry for every block and
bundles the result into a PerspectiveContent.
"""

import logging
from typing import Optional

from src.ocr.document import PerspectiveContent, build_perspective_content
from src.ocr.engine import TextRecognizer
from src.text_layout.config_loader import LayoutConfig
from src.text_layout.synthesizer import CharacterLayoutSynthesizer

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """End-to-end pipeline from image bytes to a PerspectiveContent."""

    def __init__(
        self,
        recognizer: TextRecognizer,
        layout_config: Optional[LayoutConfig] = None,
    ):
        """
        Initialize pipeline.

        Args:
            recognizer: Engine adapter returning block-level units.
            layout_config: Character layout configuration (bundled default if None).
        """
        self.recognizer = recognizer
        self.synthesizer = CharacterLayoutSynthesizer(config=layout_config)

    def process(self, image_bytes: bytes) -> PerspectiveContent:
        """
        Process one encoded image.

        Args:
            image_bytes: Encoded image

        Returns:
            PerspectiveContent with characters synthesized for every unit

        Raises:
            EmptyTextError, InvalidPositionError: If a recognized unit cannot be
                laid out.
            ValueError: If nothing was recognized.
        """
        units = self.recognizer.recognize(image_bytes)
        logger.info(f"[Stage 1/2] Recognition returned {len(units)} units")

        for unit in units:
            self.synthesizer.apply(unit)
        logger.info("[Stage 2/2] Character layout synthesized")

        return build_perspective_content(units)


def recognize_document(
    recognizer: TextRecognizer,
    image_bytes: bytes,
    layout_config: Optional[LayoutConfig] = None,
) -> PerspectiveContent:
    """Convenience function for one-shot document processing."""
    return DocumentPipeline(recognizer, layout_config=layout_config).process(
        image_bytes
    )
