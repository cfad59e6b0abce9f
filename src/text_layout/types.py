"""Type definitions for the text layout module.

This module defines the recognized-text data model: the unit returned by a
recognizer, the per-character geometry synthesized for it, and the reference
marker wrapper used when validating marker layouts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from src.common.types import Quadrilateral


class CharacterClass(Enum):
    """Width class of a single character, in classification priority order."""

    CJK = "cjk"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CJK_PUNCTUATION = "cjk_punctuation"
    ASCII_PUNCTUATION = "ascii_punctuation"
    OTHER = "other"


class LayoutOrientation(Enum):
    """Reading axis along which characters are tiled."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only text."""
    return text is None or not text.strip()


@dataclass
class CharacterInfo:
    """Synthesized geometry of one character.

    Attributes:
        character: The character itself (one code point).
        position: Axis-aligned quadrilateral around the character.
    """

    character: Optional[str]
    position: Optional[Quadrilateral]

    @property
    def is_empty(self) -> bool:
        """True when the character is missing or the position incomplete."""
        return (
            not self.character
            or self.position is None
            or not self.position.is_complete
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "character": self.character,
            "position": self.position.to_dict() if self.position else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterInfo":
        position = data.get("position")
        return cls(
            character=data.get("character"),
            position=Quadrilateral.from_dict(position) if position else None,
        )


@dataclass
class RecognizedTextUnit:
    """One block of text reported by a recognizer.

    The recognizer fills ``text`` and ``block_position``; ``characters`` stays
    empty until layout synthesis populates it with one entry per code point
    of ``text``, in order. Code points are not grapheme clusters: a decomposed
    "e" + U+0301 yields two entries, so normalize to NFC upstream when
    combining marks matter.

    Attributes:
        text: Raw transcription of the block.
        block_position: Quadrilateral of the whole block.
        characters: Per-character geometry (empty before synthesis).
    """

    text: Optional[str] = None
    block_position: Optional[Quadrilateral] = None
    characters: List[CharacterInfo] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when text, block position and every character are present."""
        if is_blank(self.text):
            return False
        if self.block_position is None or not self.block_position.is_complete:
            return False
        if not self.characters:
            return False
        return not any(
            info is None or info.is_empty for info in self.characters
        )

    def generate_characters(self, config=None) -> List[CharacterInfo]:
        """Synthesize and store per-character geometry for this unit.

        See :func:`src.text_layout.synthesizer.generate_characters`.
        """
        from src.text_layout.synthesizer import generate_characters

        return generate_characters(self, config=config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "block_position": (
                self.block_position.to_dict() if self.block_position else None
            ),
            "characters": [info.to_dict() for info in self.characters],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecognizedTextUnit":
        block_position = data.get("block_position")
        return cls(
            text=data.get("text"),
            block_position=(
                Quadrilateral.from_dict(block_position) if block_position else None
            ),
            characters=[
                CharacterInfo.from_dict(item) for item in data.get("characters", [])
            ],
        )


@dataclass
class ReferenceMarker:
    """A detected text unit paired with where a template expects it.

    Attributes:
        unit: The detected unit; its ``block_position`` is the observed place.
        reference_position: Expected quadrilateral on the reference template.
    """

    unit: RecognizedTextUnit
    reference_position: Quadrilateral

    @property
    def text(self) -> Optional[str]:
        return self.unit.text

    @property
    def detected_position(self) -> Optional[Quadrilateral]:
        return self.unit.block_position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit.to_dict(),
            "reference_position": self.reference_position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReferenceMarker":
        return cls(
            unit=RecognizedTextUnit.from_dict(data["unit"]),
            reference_position=Quadrilateral.from_dict(data["reference_position"]),
        )
