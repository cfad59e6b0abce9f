"""
Unit tests for spatial_similarity module.
"""

import numpy as np
import pytest

from src.alignment.spatial_similarity import (
    calculate_average_distance,
    matched_group_similarity,
    pairwise_offset_score,
    to_point_array,
)
from src.common.exceptions import (
    DegenerateInputError,
    EmptyInputError,
    LengthMismatchError,
)
from src.common.types import Point

LAYOUT = np.array(
    [[20, 30], [370, 30], [370, 270], [20, 270], [195, 150]], dtype=np.float64
)


class TestToPointArray:
    """Tests for to_point_array conversion."""

    def test_point_objects(self):
        arr = to_point_array([Point(x=1, y=2), Point(x=3, y=4)])
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4]])

    def test_empty(self):
        assert to_point_array([]).shape == (0, 2)

    def test_invalid_shape(self):
        with pytest.raises(ValueError, match="Expected points with shape"):
            to_point_array([[1, 2, 3]])


class TestPairwiseOffsetScore:
    """Tests for pairwise_offset_score."""

    def test_identical_groups(self):
        """Test a group compared with itself scores exactly 1."""
        assert pairwise_offset_score(LAYOUT, LAYOUT) == 1.0

    def test_single_point_identity(self):
        assert pairwise_offset_score([[7, -3]], [[7, -3]]) == 1.0

    def test_known_value_along_x(self):
        """Test a pure x offset of 3 gives 1 / (1 + 3 + 0)."""
        assert pairwise_offset_score([[0, 0]], [[3, 0]]) == pytest.approx(0.25)

    def test_known_value_with_bearing(self):
        """Test the bearing is added to the mean distance."""
        score = pairwise_offset_score([[0, 0]], [[0, 2]])
        assert score == pytest.approx(1 / (1 + 2 + np.pi / 2))

    def test_averages_over_pairs(self):
        """Test distances and bearings are averaged per index."""
        score = pairwise_offset_score([[0, 0], [10, 10]], [[4, 0], [10, 10]])
        assert score == pytest.approx(1 / (1 + 2.0 + 0.0))

    def test_monotonic_in_offset(self):
        """Test larger offsets in the same direction score lower."""
        near = pairwise_offset_score(LAYOUT, LAYOUT + [1, 0])
        far = pairwise_offset_score(LAYOUT, LAYOUT + [5, 0])
        assert 0 < far < near < 1

    def test_translation_sensitive(self):
        """Test a pure translation lowers the score."""
        assert pairwise_offset_score(LAYOUT, LAYOUT + [2, 2]) < 1.0

    def test_accepts_points(self):
        group = [Point(x=0, y=0), Point(x=5, y=5)]
        assert pairwise_offset_score(group, group) == 1.0

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            pairwise_offset_score(LAYOUT, LAYOUT[:3])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            pairwise_offset_score([], [])


class TestCalculateAverageDistance:
    """Tests for calculate_average_distance."""

    def test_unit_square(self):
        square = [[0, 0], [1, 0], [1, 1], [0, 1]]
        expected = (4 + 2 * np.sqrt(2)) / 6
        assert calculate_average_distance(square) == pytest.approx(expected)

    def test_single_point(self):
        assert calculate_average_distance([[1, 1]]) == 0.0


class TestMatchedGroupSimilarity:
    """Tests for matched_group_similarity."""

    def test_identical_groups(self):
        """Test a group compared with itself scores exactly 1."""
        assert matched_group_similarity(LAYOUT, LAYOUT) == 1.0

    def test_two_points(self):
        """Test the smallest valid group (one pair)."""
        assert matched_group_similarity([[0, 0], [3, 4]], [[0, 0], [3, 4]]) == 1.0

    def test_translation_invariant(self):
        """Test a translated copy still scores 1."""
        score = matched_group_similarity(LAYOUT, LAYOUT + [40, -25])
        assert score == pytest.approx(1.0)

    def test_uniform_scale(self):
        """Test doubling the group halves every ratio: 1 / (1 + 0.5)."""
        score = matched_group_similarity(LAYOUT, LAYOUT * 2)
        assert score == pytest.approx(1 / 1.5)

    def test_rotation_lowers_score(self):
        """Test rotating the detected group adds bearing differences."""
        rotated = LAYOUT @ np.array([[0.0, 1.0], [-1.0, 0.0]])
        score = matched_group_similarity(LAYOUT, rotated)
        assert score < matched_group_similarity(LAYOUT, LAYOUT + [10, 10])

    def test_coincident_detected_points(self):
        """Test zero detected distances propagate as inf instead of raising."""
        collapsed = np.zeros_like(LAYOUT)
        assert matched_group_similarity(LAYOUT, collapsed) == 0.0

    def test_coincident_reference_points(self):
        """Test a degenerate reference group yields NaN."""
        collapsed = np.zeros((3, 2))
        assert np.isnan(matched_group_similarity(collapsed, collapsed))

    def test_order_sensitive(self):
        """Test permuting one group without the other changes the score."""
        permuted = LAYOUT[[1, 0, 2, 3, 4]]
        assert matched_group_similarity(LAYOUT, permuted) < 1.0

    def test_single_point(self):
        with pytest.raises(DegenerateInputError):
            matched_group_similarity([[0, 0]], [[0, 0]])

    def test_empty(self):
        with pytest.raises(DegenerateInputError):
            matched_group_similarity([], [])

    def test_length_mismatch(self):
        with pytest.raises(DegenerateInputError, match="differ in length"):
            matched_group_similarity(LAYOUT, LAYOUT[:4])
