"""
Configuration loader for the Alignment module.

Loads and validates configuration from config.yaml file.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from src.alignment.types import AlignmentConfig, SimilarityConfig
from src.utils.io import load_yaml

logger = logging.getLogger(__name__)

# Default configuration path (relative to this file)
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> AlignmentConfig:
    """
    Load alignment configuration from YAML file.

    Args:
        config_path: Path to the configuration YAML file.

    Returns:
        Validated AlignmentConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config is invalid or missing required fields.

    Example:
        >>> config = load_config()
        >>> print(config.similarity.min_markers)
        3
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug(f"Loading alignment config from {config_path}")

    raw_config = load_yaml(config_path)

    try:
        config = _parse_config(raw_config)
        _validate_config(config)
        logger.info("Successfully loaded alignment configuration")
        return config
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration file: {e}") from e


def _parse_config(raw: Dict[str, Any]) -> AlignmentConfig:
    """Parse raw dictionary into structured config objects."""
    similarity = raw["similarity"]

    return AlignmentConfig(
        similarity=SimilarityConfig(
            min_markers=int(similarity["min_markers"]),
            min_shape_similarity=float(similarity["min_shape_similarity"]),
            min_offset_score=float(similarity["min_offset_score"]),
        ),
    )


def _validate_config(config: AlignmentConfig) -> None:
    """
    Validate configuration values for logical consistency.

    Raises:
        ValueError: If any configuration value is invalid.
    """
    if config.similarity.min_markers < 2:
        raise ValueError("min_markers must be at least 2")

    for name in ("min_shape_similarity", "min_offset_score"):
        value = getattr(config.similarity, name)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be in [0, 1], got {value}")

    logger.debug("Configuration validation passed")
