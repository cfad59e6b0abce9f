"""
Visualization Utilities

Debug overlays for synthesized character layouts.
"""

import cv2
import numpy as np
from typing import Sequence, Tuple

from src.text_layout.types import RecognizedTextUnit

Color = Tuple[int, int, int]


def draw_quadrilateral(
    image: np.ndarray, corners: np.ndarray, color: Color, thickness: int = 1
) -> np.ndarray:
    """Draw a closed 4-corner outline in place and return the image."""
    pts = np.round(corners).astype(np.int32).reshape(-1, 1, 2)
    cv2.polylines(image, [pts], isClosed=True, color=color, thickness=thickness)
    return image


def draw_character_layout(
    image: np.ndarray,
    units: Sequence[RecognizedTextUnit],
    block_color: Color = (0, 0, 255),
    character_color: Color = (0, 255, 0),
    thickness: int = 1,
) -> np.ndarray:
    """
    Draw block and character quadrilaterals on a copy of the image.

    Args:
        image: BGR or grayscale image array
        units: Units to draw; units without characters only get their block
        block_color: BGR color for block outlines
        character_color: BGR color for character outlines
        thickness: Line thickness in pixels

    Returns:
        Annotated copy of the image
    """
    canvas = image.copy()
    if canvas.ndim == 2:
        canvas = cv2.cvtColor(canvas, cv2.COLOR_GRAY2BGR)

    for unit in units:
        if unit.block_position is not None and unit.block_position.is_complete:
            draw_quadrilateral(
                canvas, unit.block_position.to_numpy(), block_color, thickness
            )
        for info in unit.characters:
            if not info.is_empty:
                draw_quadrilateral(
                    canvas, info.position.to_numpy(), character_color, thickness
                )

    return canvas
