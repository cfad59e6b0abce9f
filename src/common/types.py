"""
Common geometric types for the perspective mapping pipeline.

This module provides Pydantic-based definitions for the two geometric
primitives shared by every stage: a 2D point and an ordered four-corner
quadrilateral.

These types provide:
- Validation and conversion of coordinates (single precision, finite)
- Consistent corner ordering: top-left, top-right, bottom-right, bottom-left
- Conversion helpers to and from numpy arrays and plain lists
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import BaseModel, Field, field_validator

from src.common.exceptions import InvalidPositionError

Number = Union[int, float, np.integer, np.floating]


class Point(BaseModel):
    """
    Type-safe representation of a 2D point (x, y).

    Coordinates are stored at single precision: every value is rounded
    through ``numpy.float32`` on construction, so arithmetic done in double
    precision always starts from float32-representable inputs.

    Attributes:
        x: X-coordinate (horizontal, grows to the right).
        y: Y-coordinate (vertical, grows downwards).

    Example:
        >>> point = Point(x=100, y=200.5)
        >>> point.to_tuple()
        (100.0, 200.5)
        >>> Point.from_numpy(np.array([150, 250])).x
        150.0
    """

    x: float = Field(..., description="X-coordinate (horizontal)")
    y: float = Field(..., description="Y-coordinate (vertical)")

    @field_validator("x", "y", mode="before")
    @classmethod
    def _convert_to_float32(cls, v: Number) -> float:
        """
        Round a coordinate to single precision and reject non-finite values.

        Args:
            v: Coordinate value (int or float, python or numpy).

        Returns:
            Coordinate as a python float holding a float32 value.
        """
        if isinstance(v, bool) or not isinstance(
            v, (int, float, np.integer, np.floating)
        ):
            raise ValueError(f"Coordinate must be numeric, got {type(v)}")
        with np.errstate(over="ignore"):
            value = np.float32(v)
        if not np.isfinite(value):
            raise ValueError(f"Coordinate must be finite, got {v}")
        return float(value)

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Point":
        """
        Create Point from numpy array.

        Args:
            arr: Numpy array of shape (2,) with [x, y] coordinates.

        Returns:
            Point instance.

        Raises:
            ValueError: If array shape is not (2,).
        """
        arr = np.asarray(arr)
        if arr.shape != (2,):
            raise ValueError(f"Expected array of shape (2,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]))

    @classmethod
    def from_list(cls, coords: Sequence[Number]) -> "Point":
        """
        Create Point from list [x, y].

        Raises:
            ValueError: If list does not contain exactly 2 elements.
        """
        if len(coords) != 2:
            raise ValueError(f"Expected list with 2 elements, got {len(coords)}")
        return cls(x=coords[0], y=coords[1])

    def to_numpy(self, dtype: type = np.float32) -> np.ndarray:
        """Convert Point to numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=dtype)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert Point to tuple (x, y)."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert Point to list [x, y]."""
        return [self.x, self.y]

    def distance_to(self, other: "Point") -> float:
        """
        Calculate Euclidean distance to another point.

        Args:
            other: Target point.

        Returns:
            Euclidean distance as float.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return float(np.sqrt(dx * dx + dy * dy))

    def __repr__(self) -> str:
        """String representation of Point."""
        return f"Point(x={self.x}, y={self.y})"


class Quadrilateral(BaseModel):
    """
    Ordered four-corner region [TL, TR, BR, BL].

    Corners may be missing (``None``). Completeness is the only validity
    invariant: convexity, ordering and degeneracy are never checked, so
    callers must supply geometrically sane corners.

    Attributes:
        top_left: Top-left corner.
        top_right: Top-right corner.
        bottom_right: Bottom-right corner.
        bottom_left: Bottom-left corner.

    Example:
        >>> quad = Quadrilateral.from_box(0, 0, 100, 20)
        >>> quad.is_complete
        True
        >>> quad.center.to_tuple()
        (50.0, 10.0)
    """

    top_left: Optional[Point] = None
    top_right: Optional[Point] = None
    bottom_right: Optional[Point] = None
    bottom_left: Optional[Point] = None

    @property
    def is_complete(self) -> bool:
        """True when all four corners are present."""
        return None not in self.corners()

    def corners(self) -> Tuple[Optional[Point], ...]:
        """Return the corners in [TL, TR, BR, BL] order."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    @classmethod
    def from_points(
        cls, points: Union[np.ndarray, Sequence[Sequence[Number]]]
    ) -> "Quadrilateral":
        """
        Create Quadrilateral from 4 points in [TL, TR, BR, BL] order.

        Args:
            points: Array-like of shape (4, 2).

        Raises:
            ValueError: If the input does not have shape (4, 2).
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.shape != (4, 2):
            raise ValueError(
                f"Expected 4 points with shape (4, 2), got {arr.shape}"
            )
        tl, tr, br, bl = (Point.from_numpy(p) for p in arr)
        return cls(top_left=tl, top_right=tr, bottom_right=br, bottom_left=bl)

    @classmethod
    def from_box(
        cls, x_min: Number, y_min: Number, x_max: Number, y_max: Number
    ) -> "Quadrilateral":
        """Create an axis-aligned Quadrilateral from box edges."""
        return cls(
            top_left=Point(x=x_min, y=y_min),
            top_right=Point(x=x_max, y=y_min),
            bottom_right=Point(x=x_max, y=y_max),
            bottom_left=Point(x=x_min, y=y_max),
        )

    def to_numpy(self, dtype: type = np.float32) -> np.ndarray:
        """
        Convert Quadrilateral to numpy array of shape (4, 2).

        Raises:
            InvalidPositionError: If any corner is missing.
        """
        if not self.is_complete:
            raise InvalidPositionError(
                "Cannot convert incomplete quadrilateral to array"
            )
        return np.array([p.to_list() for p in self.corners()], dtype=dtype)

    @property
    def center(self) -> Point:
        """Mean of the four corners."""
        center_x, center_y = self.to_numpy(dtype=np.float64).mean(axis=0)
        return Point(x=center_x, y=center_y)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict (missing corners become None)."""
        return {
            name: (corner.to_list() if corner is not None else None)
            for name, corner in zip(
                ("top_left", "top_right", "bottom_right", "bottom_left"),
                self.corners(),
            )
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quadrilateral":
        """Inverse of :meth:`to_dict`."""
        return cls(
            **{
                name: (Point.from_list(data[name]) if data.get(name) else None)
                for name in ("top_left", "top_right", "bottom_right", "bottom_left")
            }
        )
