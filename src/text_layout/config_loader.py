"""Configuration loader with Pydantic validation for the text layout module.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from src.utils.io import load_yaml

from .types import CharacterClass

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class WidthMultipliersConfig(BaseModel):
    """Width multipliers per character class, relative to a lowercase letter.

    Attributes:
        cjk: CJK ideographs
        uppercase: Uppercase Latin letters
        lowercase: Lowercase Latin letters (the unit width)
        cjk_punctuation: CJK / full-width punctuation
        ascii_punctuation: ASCII punctuation
        other: Everything else (digits, spaces, trailing CJK punctuation)
    """

    cjk: float = Field(default=2.0, gt=0.0)
    uppercase: float = Field(default=1.3, gt=0.0)
    lowercase: float = Field(default=1.0, gt=0.0)
    cjk_punctuation: float = Field(default=2.0, gt=0.0)
    ascii_punctuation: float = Field(default=1.0, gt=0.0)
    other: float = Field(default=1.0, gt=0.0)

    def for_class(self, character_class: CharacterClass) -> float:
        """Look up the multiplier for a character class."""
        return getattr(self, character_class.value)


class LayoutConfig(BaseModel):
    """Complete text layout configuration.

    Attributes:
        width_multipliers: Per-class width multipliers for horizontal layout
    """

    width_multipliers: WidthMultipliersConfig = Field(
        default_factory=WidthMultipliersConfig
    )


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> LayoutConfig:
    """Load and validate layout configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated LayoutConfig object

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config()
        >>> config.width_multipliers.uppercase
        1.3
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading text layout config from {config_path}")

    config_dict = load_yaml(config_path) or {}

    return LayoutConfig(**config_dict)


def get_default_config() -> LayoutConfig:
    """Get default configuration from bundled config.yaml file.

    Falls back to hardcoded defaults if the bundled file is missing.
    """
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return LayoutConfig()
