"""Unit tests for scoped temporary files."""

import pytest

from src.common.exceptions import TempFileError
from src.utils.temp_files import staged_directory, staged_file


class TestStagedFile:
    """Tests for staged_file."""

    def test_writes_and_removes(self):
        with staged_file(b"hello", "note.txt") as path:
            assert path.read_bytes() == b"hello"
            assert path.name.startswith("temp")
            assert path.name.endswith("_note.txt")

        assert not path.exists()

    def test_removed_on_error(self):
        with pytest.raises(RuntimeError):
            with staged_file(b"data") as path:
                raise RuntimeError("boom")

        assert not path.exists()

    def test_custom_directory(self, tmp_path):
        with staged_file(b"x", directory=tmp_path) as path:
            assert path.parent == tmp_path

        assert list(tmp_path.iterdir()) == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(TempFileError):
            with staged_file(b"x", directory=tmp_path / "missing"):
                pass


class TestStagedDirectory:
    """Tests for staged_directory."""

    def test_removed_with_contents(self):
        with staged_directory() as directory:
            (directory / "a.txt").write_text("a")
            (directory / "sub").mkdir()
            assert directory.is_dir()

        assert not directory.exists()
