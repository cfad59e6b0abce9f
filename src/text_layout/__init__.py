"""
Character Layout Synthesis

Derives per-character quadrilaterals for recognized text blocks when the
recognizer only reports a block-level quadrilateral and the transcription.

Core Components:
    - types: Data structures (RecognizedTextUnit, CharacterInfo, ReferenceMarker)
    - character_classes: Width classes by code point
    - config_loader: Width multipliers with Pydantic validation
    - synthesizer: Rotation-aware, class-weighted layout

Example:
    >>> from src.common import Quadrilateral
    >>> from src.text_layout import RecognizedTextUnit, generate_characters
    >>> unit = RecognizedTextUnit(
    ...     text="ab", block_position=Quadrilateral.from_box(0, 0, 100, 20)
    ... )
    >>> len(generate_characters(unit))
    2
"""

from .character_classes import (
    classify_character,
    classify_text,
    count_character_classes,
)
from .config_loader import (
    LayoutConfig,
    WidthMultipliersConfig,
    get_default_config,
    load_config,
)
from .synthesizer import (
    CharacterLayoutSynthesizer,
    calculate_rotation_angle,
    generate_characters,
    rotate_point,
    synthesize_characters,
)
from .types import (
    CharacterClass,
    CharacterInfo,
    LayoutOrientation,
    RecognizedTextUnit,
    ReferenceMarker,
)

__all__ = [
    # Types
    "CharacterClass",
    "CharacterInfo",
    "LayoutOrientation",
    "RecognizedTextUnit",
    "ReferenceMarker",
    # Configuration
    "LayoutConfig",
    "WidthMultipliersConfig",
    "load_config",
    "get_default_config",
    # Classification
    "classify_character",
    "classify_text",
    "count_character_classes",
    # Synthesis
    "CharacterLayoutSynthesizer",
    "calculate_rotation_angle",
    "rotate_point",
    "synthesize_characters",
    "generate_characters",
]
