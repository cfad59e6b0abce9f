"""
Marker Layout Alignment

Scores how well detected markers match a reference template before a
perspective transform is applied.

Pipeline stages:
1. Marker count check
2. Shape similarity (translation independent)
3. Offset score (translation sensitive)
"""

from src.alignment.config_loader import load_config
from src.alignment.processor import (
    MarkerLayoutValidator,
    marker_centers,
    validate_marker_layout,
)
from src.alignment.spatial_similarity import (
    calculate_average_distance,
    matched_group_similarity,
    pairwise_offset_score,
)
from src.alignment.types import (
    AlignmentConfig,
    DecisionStatus,
    MarkerValidationResult,
    RejectionReason,
    SimilarityConfig,
)

__all__ = [
    "MarkerLayoutValidator",
    "validate_marker_layout",
    "marker_centers",
    "load_config",
    "pairwise_offset_score",
    "matched_group_similarity",
    "calculate_average_distance",
    "AlignmentConfig",
    "SimilarityConfig",
    "MarkerValidationResult",
    "DecisionStatus",
    "RejectionReason",
]
