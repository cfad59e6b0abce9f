"""
Data types and structures for the Alignment module.

Provides type-safe containers for configuration and marker validation results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DecisionStatus(Enum):
    """Marker validation outcomes."""

    PASS = "PASS"
    REJECT = "REJECT"


class RejectionReason(Enum):
    """Specific reasons for rejection."""

    INSUFFICIENT_MARKERS = "Insufficient Markers"  # Fewer markers than required
    SHAPE_MISMATCH = "Shape Mismatch"  # Layout shape differs from template
    OFFSET_TOO_LARGE = "Offset Too Large"  # Markers displaced from template
    NONE = "None"  # No rejection (passed all checks)


@dataclass
class SimilarityConfig:
    """Thresholds for marker layout similarity."""

    min_markers: int
    min_shape_similarity: float  # Decision threshold for matched_group_similarity
    min_offset_score: float  # Decision threshold for pairwise_offset_score


@dataclass
class AlignmentConfig:
    """Complete alignment module configuration."""

    similarity: SimilarityConfig


@dataclass
class MarkerValidationResult:
    """
    Output from marker layout validation.

    Attributes:
        decision: PASS or REJECT status.
        rejection_reason: Specific reason if rejected, NONE otherwise.
        marker_count: Number of markers compared.
        shape_score: matched_group_similarity of reference vs detected
            centres (None if rejected before scoring).
        offset_score: pairwise_offset_score of reference vs detected
            centres (None if rejected before scoring).
    """

    decision: DecisionStatus
    rejection_reason: RejectionReason
    marker_count: int
    shape_score: Optional[float] = None
    offset_score: Optional[float] = None

    def is_pass(self) -> bool:
        """Check if the validation passed."""
        return self.decision == DecisionStatus.PASS

    def get_error_message(self) -> str:
        """Get human-readable error message."""
        if self.is_pass():
            return "All checks passed"

        reason_messages = {
            RejectionReason.INSUFFICIENT_MARKERS: (
                f"Only {self.marker_count} markers available"
            ),
            RejectionReason.SHAPE_MISMATCH: (
                f"Shape similarity {self.shape_score:.3f} below threshold"
                if self.shape_score is not None
                else "Shape similarity check failed"
            ),
            RejectionReason.OFFSET_TOO_LARGE: (
                f"Offset score {self.offset_score:.3f} below threshold"
                if self.offset_score is not None
                else "Offset check failed"
            ),
        }

        return reason_messages.get(
            self.rejection_reason, f"Rejected: {self.rejection_reason.value}"
        )
