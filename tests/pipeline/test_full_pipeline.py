"""Integration tests for the end-to-end document pipeline."""

import pytest

from src.common.exceptions import EmptyTextError
from src.common.types import Quadrilateral
from src.ocr.engine import TextRecognizer
from src.pipeline.full_pipeline import DocumentPipeline, recognize_document
from src.text_layout.config_loader import LayoutConfig, WidthMultipliersConfig
from src.text_layout.types import RecognizedTextUnit


class StubRecognizer(TextRecognizer):
    """Recognizer returning fixed blocks regardless of the image."""

    def __init__(self, blocks):
        self.blocks = blocks
        self.calls = []

    def recognize(self, image_bytes):
        self.calls.append(image_bytes)
        return [
            RecognizedTextUnit(text=text, block_position=Quadrilateral.from_box(*box))
            for text, box in self.blocks
        ]


class TestDocumentPipeline:
    """Tests for DocumentPipeline."""

    def test_populates_every_unit(self):
        recognizer = StubRecognizer(
            [("发票号码：123", (10, 10, 210, 40)), ("竖", (300, 0, 320, 100))]
        )
        content = DocumentPipeline(recognizer).process(b"image")

        assert recognizer.calls == [b"image"]
        assert len(content.units) == 2
        for unit in content.units:
            assert len(unit.characters) == len(unit.text)
            assert unit.is_complete

    def test_uses_layout_config(self):
        config = LayoutConfig(width_multipliers=WidthMultipliersConfig(uppercase=3.0))
        recognizer = StubRecognizer([("Ab", (0, 0, 100, 20))])

        content = recognize_document(recognizer, b"image", layout_config=config)
        first = content.units[0].characters[0].position

        assert first.top_right.x - first.top_left.x == pytest.approx(75.0)

    def test_blank_unit_fails(self):
        recognizer = StubRecognizer([("ok", (0, 0, 50, 10)), ("  ", (0, 20, 50, 30))])

        with pytest.raises(EmptyTextError):
            recognize_document(recognizer, b"image")

    def test_nothing_recognized(self):
        with pytest.raises(ValueError, match="None or empty"):
            recognize_document(StubRecognizer([]), b"image")
