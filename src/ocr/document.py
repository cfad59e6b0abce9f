"""Document-level container for recognized text units.

A :class:`PerspectiveContent` bundles every unit recognized on one page. It is
the input of the downstream perspective mapping stage, which expects each
unit to be complete (text, block position and synthesized characters).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from src.text_layout.types import RecognizedTextUnit

logger = logging.getLogger(__name__)


@dataclass
class PerspectiveContent:
    """Ordered recognized units of a single document.

    Attributes:
        units: Text units in reading order.
    """

    units: List[RecognizedTextUnit] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Transcriptions joined by newlines."""
        return "\n".join(unit.text or "" for unit in self.units)

    def find_units(self, text: str) -> List[RecognizedTextUnit]:
        """Return units whose transcription contains ``text``."""
        return [unit for unit in self.units if unit.text and text in unit.text]

    def to_dict(self) -> Dict[str, Any]:
        return {"units": [unit.to_dict() for unit in self.units]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PerspectiveContent":
        return cls(
            units=[RecognizedTextUnit.from_dict(item) for item in data.get("units", [])]
        )


def build_perspective_content(
    units: Optional[Sequence[RecognizedTextUnit]],
) -> PerspectiveContent:
    """Validate units and bundle them into a PerspectiveContent.

    Args:
        units: Recognized units with synthesized characters.

    Returns:
        PerspectiveContent holding a copy of the unit list.

    Raises:
        ValueError: If ``units`` is None or empty, or any unit is incomplete.
    """
    if not units:
        raise ValueError("units is None or empty")

    for index, unit in enumerate(units):
        if unit is None or not unit.is_complete:
            raise ValueError(f"Unit {index} is None or incomplete")

    logger.debug(f"Built perspective content with {len(units)} units")
    return PerspectiveContent(units=list(units))
