"""
Character layout synthesis.

Recognizers often report a single quadrilateral for a whole block of text.
This module derives one quadrilateral per character from the block geometry
and the transcription alone:

1. Measure the block rotation from its top edge and fold it into [0, 90)
2. Pick the reading axis (vertical when the block is taller than wide)
3. Split the block along that axis (class-weighted widths when horizontal,
   uniform heights when vertical)
4. Rotate each character centre about the block's top-left corner and build
   an axis-aligned box around it

The fold in step 1 only serves near-upright or near-inverted text, and only
the centres are rotated, not the boxes themselves. Both are accepted
approximations for near-axis-aligned text.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from src.common.exceptions import EmptyTextError, InvalidPositionError, NullInputError
from src.common.types import Point, Quadrilateral

from .character_classes import classify_text
from .config_loader import LayoutConfig, get_default_config
from .types import (
    CharacterClass,
    CharacterInfo,
    LayoutOrientation,
    RecognizedTextUnit,
    is_blank,
)

logger = logging.getLogger(__name__)


def calculate_rotation_angle(block_position: Quadrilateral) -> float:
    """
    Calculate the folded rotation angle of a block in degrees.

    The raw angle of the top edge is folded: magnitudes >= 180 become
    ``360 - |angle|``, magnitudes >= 90 become ``180 - |angle|``, anything
    smaller is kept as measured (with its sign).

    Args:
        block_position: Complete block quadrilateral.

    Returns:
        Folded angle in degrees.

    Example:
        >>> calculate_rotation_angle(Quadrilateral.from_box(0, 0, 100, 20))
        0.0
    """
    top_left = block_position.top_left
    top_right = block_position.top_right

    angle = float(
        np.degrees(np.arctan2(top_right.y - top_left.y, top_right.x - top_left.x))
    )
    magnitude = abs(angle)
    if magnitude >= 180:
        angle = 360 - magnitude
    elif magnitude >= 90:
        angle = 180 - magnitude

    return angle


def rotate_point(
    x: float, y: float, center_x: float, center_y: float, angle_degrees: float
) -> Tuple[float, float]:
    """Rotate (x, y) about (center_x, center_y) by ``angle_degrees``."""
    radians = np.radians(angle_degrees)
    cos = float(np.cos(radians))
    sin = float(np.sin(radians))

    x -= center_x
    y -= center_y

    x_new = x * cos - y * sin
    y_new = x * sin + y * cos

    return x_new + center_x, y_new + center_y


def determine_orientation(region_width: float, region_height: float) -> LayoutOrientation:
    """Vertical when the block is strictly taller than wide."""
    if region_height > region_width:
        return LayoutOrientation.VERTICAL
    return LayoutOrientation.HORIZONTAL


class CharacterLayoutSynthesizer:
    """
    Rotation-aware, class-weighted per-character layout.

    The synthesizer is stateless apart from its configuration and never keeps
    a reference to the units it processes.

    Example:
        >>> synthesizer = CharacterLayoutSynthesizer()
        >>> unit = RecognizedTextUnit(
        ...     text="ab", block_position=Quadrilateral.from_box(0, 0, 100, 20)
        ... )
        >>> [c.position.center.to_tuple() for c in synthesizer.synthesize(unit)]
        [(25.0, 10.0), (75.0, 10.0)]
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize the synthesizer.

        Args:
            config: Layout configuration. If None, loads the bundled default.
        """
        self.config = config if config is not None else get_default_config()

    def synthesize(self, unit: RecognizedTextUnit) -> List[CharacterInfo]:
        """
        Compute per-character geometry for a unit without modifying it.

        Args:
            unit: Unit with non-blank ``text`` and complete ``block_position``.

        Returns:
            One CharacterInfo per code point of ``unit.text``, in order.

        Raises:
            NullInputError: If unit is None.
            EmptyTextError: If the text is blank or missing.
            InvalidPositionError: If the block position is missing or incomplete.
        """
        if unit is None:
            raise NullInputError("unit is None")

        text = unit.text
        block_position = unit.block_position

        if is_blank(text):
            raise EmptyTextError()

        if block_position is None or not block_position.is_complete:
            raise InvalidPositionError()

        angle = calculate_rotation_angle(block_position)

        origin = block_position.top_left
        region_width = block_position.top_right.x - origin.x
        region_height = block_position.bottom_left.y - origin.y
        orientation = determine_orientation(region_width, region_height)

        logger.debug(
            f"Block '{text}': angle={angle:.2f}, width={region_width:.1f}, "
            f"height={region_height:.1f}, orientation={orientation.value}"
        )

        sizes = self._character_sizes(text, region_width, region_height, orientation)

        characters = []
        offset_x = origin.x
        offset_y = origin.y
        for character, (width, height) in zip(text, sizes):
            center_x, center_y = rotate_point(
                offset_x + width / 2,
                offset_y + height / 2,
                origin.x,
                origin.y,
                angle,
            )

            if orientation == LayoutOrientation.VERTICAL:
                offset_y += height
            else:
                offset_x += width

            characters.append(
                CharacterInfo(
                    character=character,
                    position=Quadrilateral.from_box(
                        center_x - width / 2,
                        center_y - height / 2,
                        center_x + width / 2,
                        center_y + height / 2,
                    ),
                )
            )

        logger.debug(f"Synthesized {len(characters)} characters for '{text}'")
        return characters

    def apply(self, unit: RecognizedTextUnit) -> List[CharacterInfo]:
        """
        Synthesize and assign ``unit.characters`` in a single write.

        The unit is left untouched when any precondition fails.
        """
        characters = self.synthesize(unit)
        unit.characters = characters
        return characters

    def _character_sizes(
        self,
        text: str,
        region_width: float,
        region_height: float,
        orientation: LayoutOrientation,
    ) -> List[Tuple[float, float]]:
        """Return (width, height) for every character of ``text``."""
        count = len(text)

        if orientation == LayoutOrientation.VERTICAL:
            height = region_height / count
            return [(region_width, height)] * count

        classes = classify_text(text)
        multipliers = self.config.width_multipliers

        weighted_count = 0.0
        for character_class in CharacterClass:
            weighted_count += multipliers.for_class(character_class) * classes.count(
                character_class
            )
        unit_width = region_width / weighted_count

        return [
            (multipliers.for_class(character_class) * unit_width, region_height)
            for character_class in classes
        ]


def synthesize_characters(
    unit: RecognizedTextUnit, config: Optional[LayoutConfig] = None
) -> List[CharacterInfo]:
    """
    Convenience function for one-shot synthesis without mutation.

    Example:
        >>> unit = RecognizedTextUnit(
        ...     text="你好", block_position=Quadrilateral.from_box(0, 0, 80, 40)
        ... )
        >>> len(synthesize_characters(unit))
        2
    """
    return CharacterLayoutSynthesizer(config=config).synthesize(unit)


def generate_characters(
    unit: RecognizedTextUnit, config: Optional[LayoutConfig] = None
) -> List[CharacterInfo]:
    """Synthesize characters and store them on ``unit.characters``."""
    return CharacterLayoutSynthesizer(config=config).apply(unit)
