"""
Main processor for the Alignment module.

Validates a detected marker layout against its reference template before a
perspective transform is computed:
1. Marker count check
2. Shape similarity (matched_group_similarity)
3. Offset score (pairwise_offset_score)

Implements fail-fast strategy: stops at first failure.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np

from src.alignment.config_loader import load_config
from src.alignment.spatial_similarity import (
    matched_group_similarity,
    pairwise_offset_score,
)
from src.alignment.types import (
    AlignmentConfig,
    DecisionStatus,
    MarkerValidationResult,
    RejectionReason,
)
from src.common.exceptions import InvalidPositionError
from src.common.types import Point
from src.text_layout.types import ReferenceMarker

logger = logging.getLogger(__name__)


def marker_centers(
    markers: Sequence[ReferenceMarker],
) -> Tuple[List[Point], List[Point]]:
    """
    Collect corresponding reference and detected centres by index.

    Raises:
        InvalidPositionError: If a marker has no detected position or either
            quadrilateral is incomplete.
    """
    reference_points = []
    detected_points = []
    for index, marker in enumerate(markers):
        if marker.detected_position is None:
            raise InvalidPositionError(f"Marker {index} has no detected position")
        reference_points.append(marker.reference_position.center)
        detected_points.append(marker.detected_position.center)
    return reference_points, detected_points


class MarkerLayoutValidator:
    """
    Decide whether detected markers match their reference template.

    Example:
        >>> validator = MarkerLayoutValidator()
        >>> result = validator.validate(markers)
        >>> if result.is_pass():
        ...     print(f"Shape score: {result.shape_score:.3f}")
    """

    def __init__(
        self,
        config: Optional[AlignmentConfig] = None,
        config_path: Optional[Path] = None,
    ):
        """
        Initialize the validator.

        Args:
            config: Pre-loaded configuration object. If None, will load from file.
            config_path: Path to config file. If None, uses default location.
        """
        if config is not None:
            self.config = config
            logger.info("Using provided configuration")
        else:
            self.config = load_config(config_path) if config_path else load_config()
            logger.info("Loaded configuration from file")

    def validate(self, markers: Sequence[ReferenceMarker]) -> MarkerValidationResult:
        """
        Execute the marker validation checks.

        Args:
            markers: Reference markers; each pairs a detected unit with its
                expected template position.

        Returns:
            MarkerValidationResult with decision and scores.
        """
        thresholds = self.config.similarity
        marker_count = len(markers)

        if marker_count < thresholds.min_markers:
            logger.warning(
                f"Marker validation REJECTED: {marker_count} markers "
                f"< minimum {thresholds.min_markers}"
            )
            return MarkerValidationResult(
                decision=DecisionStatus.REJECT,
                rejection_reason=RejectionReason.INSUFFICIENT_MARKERS,
                marker_count=marker_count,
            )

        reference_points, detected_points = marker_centers(markers)

        shape_score = matched_group_similarity(reference_points, detected_points)
        offset_score = pairwise_offset_score(reference_points, detected_points)
        logger.info(
            f"Marker scores: shape={shape_score:.4f}, offset={offset_score:.4f}"
        )

        # NaN never satisfies a threshold
        if not (
            np.isfinite(shape_score) and shape_score >= thresholds.min_shape_similarity
        ):
            logger.warning(
                f"Marker validation REJECTED: shape similarity {shape_score:.4f} "
                f"< {thresholds.min_shape_similarity}"
            )
            return MarkerValidationResult(
                decision=DecisionStatus.REJECT,
                rejection_reason=RejectionReason.SHAPE_MISMATCH,
                marker_count=marker_count,
                shape_score=shape_score,
                offset_score=offset_score,
            )

        # A non-positive threshold disables the offset stage; the score is
        # unbounded below for shifts toward negative x/y
        if thresholds.min_offset_score > 0 and not (
            np.isfinite(offset_score) and offset_score >= thresholds.min_offset_score
        ):
            logger.warning(
                f"Marker validation REJECTED: offset score {offset_score:.4f} "
                f"< {thresholds.min_offset_score}"
            )
            return MarkerValidationResult(
                decision=DecisionStatus.REJECT,
                rejection_reason=RejectionReason.OFFSET_TOO_LARGE,
                marker_count=marker_count,
                shape_score=shape_score,
                offset_score=offset_score,
            )

        logger.info("Marker validation PASSED")
        return MarkerValidationResult(
            decision=DecisionStatus.PASS,
            rejection_reason=RejectionReason.NONE,
            marker_count=marker_count,
            shape_score=shape_score,
            offset_score=offset_score,
        )


def validate_marker_layout(
    markers: Sequence[ReferenceMarker],
    config: Optional[AlignmentConfig] = None,
) -> MarkerValidationResult:
    """
    Convenience function for one-shot marker validation.

    Example:
        >>> result = validate_marker_layout(markers)
        >>> print(result.get_error_message())
        All checks passed
    """
    validator = MarkerLayoutValidator(config=config)
    return validator.validate(markers)
