"""Unit tests for the document-level container."""

import pytest

from src.common.types import Quadrilateral
from src.ocr.document import PerspectiveContent, build_perspective_content
from src.text_layout.types import RecognizedTextUnit


@pytest.fixture
def complete_units():
    """Fixture providing two units with synthesized characters."""
    units = [
        RecognizedTextUnit(text="标题", block_position=Quadrilateral.from_box(0, 0, 80, 20)),
        RecognizedTextUnit(text="Total: 42", block_position=Quadrilateral.from_box(0, 30, 90, 45)),
    ]
    for unit in units:
        unit.generate_characters()
    return units


class TestBuildPerspectiveContent:
    """Test validation when bundling units."""

    def test_complete_units(self, complete_units):
        content = build_perspective_content(complete_units)

        assert isinstance(content, PerspectiveContent)
        assert content.units == complete_units
        assert content.units is not complete_units

    @pytest.mark.parametrize("units", [None, []])
    def test_empty(self, units):
        with pytest.raises(ValueError, match="None or empty"):
            build_perspective_content(units)

    def test_unit_without_characters(self, complete_units):
        """Test a unit that was never synthesized is rejected."""
        complete_units.append(
            RecognizedTextUnit(text="x", block_position=Quadrilateral.from_box(0, 0, 5, 5))
        )
        with pytest.raises(ValueError, match="Unit 2"):
            build_perspective_content(complete_units)

    def test_none_unit(self, complete_units):
        complete_units.insert(0, None)
        with pytest.raises(ValueError, match="Unit 0"):
            build_perspective_content(complete_units)


class TestPerspectiveContent:
    """Test PerspectiveContent helpers."""

    def test_text(self, complete_units):
        assert PerspectiveContent(complete_units).text == "标题\nTotal: 42"

    def test_find_units(self, complete_units):
        content = PerspectiveContent(complete_units)
        assert content.find_units("Total") == [complete_units[1]]
        assert content.find_units("missing") == []

    def test_dict_round_trip(self, complete_units):
        content = PerspectiveContent(complete_units)
        assert PerspectiveContent.from_dict(content.to_dict()) == content
