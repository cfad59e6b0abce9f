"""
Spatial similarity scores for corresponding point groups.

Both scores compare two ordered point sequences whose elements correspond by
index (element i of one group is the same landmark as element i of the
other). No correspondence search is performed, so permuting one group
without the other invalidates the result.

- ``pairwise_offset_score``: translation-sensitive, based on the offset of
  each point from its counterpart.
- ``matched_group_similarity``: compares the internal shape of each group
  (pairwise distance ratios and bearings), independent of translation.
"""

import logging
from typing import Sequence, Union

import numpy as np

from src.common.exceptions import (
    DegenerateInputError,
    EmptyInputError,
    LengthMismatchError,
)
from src.common.types import Point

logger = logging.getLogger(__name__)

PointGroup = Union[np.ndarray, Sequence[Point], Sequence[Sequence[float]]]


def to_point_array(points: PointGroup) -> np.ndarray:
    """
    Convert a point group to a float64 array of shape (N, 2).

    Args:
        points: Sequence of Point objects or array-like of [x, y] pairs.

    Returns:
        Array of shape (N, 2); (0, 2) for an empty group.

    Raises:
        ValueError: If the input cannot be read as (N, 2) coordinates.
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64)
    else:
        points = list(points)
        if not points:
            return np.empty((0, 2), dtype=np.float64)
        arr = np.array(
            [p.to_list() if isinstance(p, Point) else p for p in points],
            dtype=np.float64,
        )

    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected points with shape (N, 2), got {arr.shape}")

    return arr


def _pair_indices(count: int):
    """Index arrays (i, j) for every unordered pair with i < j."""
    return np.triu_indices(count, k=1)


def calculate_average_distance(points: PointGroup) -> float:
    """
    Average Euclidean distance over all unordered pairs of a group.

    Returns 0.0 when the group has fewer than two points.
    """
    arr = to_point_array(points)
    i, j = _pair_indices(len(arr))
    if len(i) == 0:
        return 0.0
    distances = np.hypot(*(arr[j] - arr[i]).T)
    return float(distances.mean())


def pairwise_offset_score(group1: PointGroup, group2: PointGroup) -> float:
    """
    Score how closely each point of group2 sits on its counterpart in group1.

    For every index i, the distance and the bearing
    ``atan2(b.y - a.y, b.x - a.x)`` from ``group1[i]`` to ``group2[i]`` are
    averaged, and the score is ``1 / (1 + mean_distance + mean_bearing)``.

    Args:
        group1: Reference points.
        group2: Corresponding points, same length as group1.

    Returns:
        Similarity score; 1.0 when every pair coincides.

    Raises:
        LengthMismatchError: If the groups differ in length.
        EmptyInputError: If the groups are empty.

    Example:
        >>> pairwise_offset_score([[0, 0], [10, 0]], [[0, 0], [10, 0]])
        1.0
        >>> pairwise_offset_score([[0, 0]], [[3, 0]])
        0.25
    """
    a = to_point_array(group1)
    b = to_point_array(group2)

    if len(a) != len(b):
        raise LengthMismatchError(
            f"Point groups differ in length: {len(a)} vs {len(b)}"
        )
    if len(a) == 0:
        raise EmptyInputError("Point groups are empty")

    offsets = b - a
    distances = np.hypot(offsets[:, 0], offsets[:, 1])
    angles = np.arctan2(offsets[:, 1], offsets[:, 0])

    mean_distance = distances.sum() / len(a)
    mean_angle = angles.sum() / len(a)

    score = float(1 / (1 + mean_distance + mean_angle))
    logger.debug(
        f"Offset score {score:.4f} (mean distance {mean_distance:.3f}, "
        f"mean bearing {mean_angle:.3f} rad)"
    )
    return score


def matched_group_similarity(group1: PointGroup, group2: PointGroup) -> float:
    """
    Score the shape similarity of two corresponding point groups.

    For every unordered pair (i, j) the distance ratio
    ``(d1 / mean_d1) / (d2 / mean_d1)`` and the bearing difference
    ``|angle1 - angle2|`` are averaged, where ``mean_d1`` is the average
    pairwise distance of group1. The score is
    ``1 / (1 + |1 - mean_ratio| + mean_angle_difference)``.

    Division follows IEEE semantics: coincident points yield inf or nan
    instead of raising.

    Args:
        group1: Reference points.
        group2: Corresponding points, same length as group1.

    Returns:
        Similarity score; 1.0 for identical groups of distinct points.

    Raises:
        DegenerateInputError: If the groups differ in length or contain
            fewer than two points.

    Example:
        >>> square = [[0, 0], [1, 0], [1, 1], [0, 1]]
        >>> matched_group_similarity(square, square)
        1.0
    """
    a = to_point_array(group1)
    b = to_point_array(group2)

    if len(a) != len(b):
        raise DegenerateInputError(
            f"Point groups differ in length: {len(a)} vs {len(b)}"
        )
    if len(a) < 2:
        raise DegenerateInputError(
            f"At least 2 points are required to form a pair, got {len(a)}"
        )

    i, j = _pair_indices(len(a))
    delta1 = a[j] - a[i]
    delta2 = b[j] - b[i]

    distances1 = np.hypot(delta1[:, 0], delta1[:, 1])
    distances2 = np.hypot(delta2[:, 0], delta2[:, 1])
    angles1 = np.arctan2(delta1[:, 1], delta1[:, 0])
    angles2 = np.arctan2(delta2[:, 1], delta2[:, 0])

    average_distance = distances1.mean()

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = (distances1 / average_distance) / (distances2 / average_distance)

    comparisons = len(i)
    mean_ratio = ratios.sum() / comparisons
    mean_angle_difference = np.abs(angles1 - angles2).sum() / comparisons

    score = float(1 / (1 + np.abs(1 - mean_ratio) + mean_angle_difference))
    logger.debug(
        f"Shape similarity {score:.4f} over {comparisons} pairs "
        f"(mean ratio {mean_ratio:.4f}, mean angle diff {mean_angle_difference:.4f})"
    )
    return score
