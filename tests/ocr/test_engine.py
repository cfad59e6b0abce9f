"""Unit tests for the recognizer contract."""

from pathlib import Path

import pytest

from src.common.exceptions import NullInputError
from src.common.types import Quadrilateral
from src.ocr.engine import StagedFileRecognizer, TextRecognizer
from src.text_layout.types import RecognizedTextUnit


class RecordingRecognizer(StagedFileRecognizer):
    """Recognizer stub that records what it saw on disk."""

    def __init__(self, fail: bool = False):
        super().__init__(file_name="page.png")
        self.fail = fail
        self.seen_path = None
        self.seen_bytes = None

    def recognize_file(self, path: Path):
        self.seen_path = path
        self.seen_bytes = path.read_bytes()
        if self.fail:
            raise RuntimeError("engine crashed")
        return [
            RecognizedTextUnit(text="ab", block_position=Quadrilateral.from_box(0, 0, 100, 20))
        ]


class TestTextRecognizer:
    """Test the abstract contract."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            TextRecognizer()


class TestStagedFileRecognizer:
    """Test temp-file staging around recognition."""

    def test_stages_bytes(self):
        """Test the engine reads the staged bytes from a real file."""
        recognizer = RecordingRecognizer()
        units = recognizer.recognize(b"\x89PNG fake image")

        assert recognizer.seen_bytes == b"\x89PNG fake image"
        assert recognizer.seen_path.name.endswith("_page.png")
        assert units[0].text == "ab"
        assert units[0].characters == []

    def test_file_removed_after_success(self):
        recognizer = RecordingRecognizer()
        recognizer.recognize(b"data")

        assert not recognizer.seen_path.exists()

    def test_file_removed_after_failure(self):
        """Test the staged file is removed when the engine raises."""
        recognizer = RecordingRecognizer(fail=True)

        with pytest.raises(RuntimeError, match="engine crashed"):
            recognizer.recognize(b"data")

        assert not recognizer.seen_path.exists()

    def test_none_bytes(self):
        with pytest.raises(NullInputError):
            RecordingRecognizer().recognize(None)
