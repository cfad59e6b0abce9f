"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import pytest


@pytest.fixture
def horizontal_block():
    """Fixture providing an unrotated 100x20 block at the origin."""
    from src.common.types import Quadrilateral

    return Quadrilateral.from_box(0, 0, 100, 20)


@pytest.fixture
def vertical_block():
    """Fixture providing an unrotated 20x100 (taller than wide) block."""
    from src.common.types import Quadrilateral

    return Quadrilateral.from_box(0, 0, 20, 100)


@pytest.fixture
def reference_quadrilaterals():
    """Fixture providing four template marker positions on a 400x300 page."""
    from src.common.types import Quadrilateral

    return [
        Quadrilateral.from_box(20, 20, 80, 40),  # Top-left marker
        Quadrilateral.from_box(320, 20, 380, 40),  # Top-right marker
        Quadrilateral.from_box(320, 260, 380, 280),  # Bottom-right marker
        Quadrilateral.from_box(20, 260, 80, 280),  # Bottom-left marker
    ]


@pytest.fixture
def make_markers(reference_quadrilaterals):
    """Fixture building reference markers whose detections are transformed.

    Call with ``scale`` and ``offset`` to place the detected quadrilaterals at
    ``reference * scale + offset``.
    """
    import numpy as np

    from src.common.types import Quadrilateral
    from src.text_layout.types import RecognizedTextUnit, ReferenceMarker

    def _make(scale=1.0, offset=(0.0, 0.0), count=4):
        markers = []
        for i, reference in enumerate(reference_quadrilaterals[:count]):
            detected = reference.to_numpy(dtype=np.float64) * scale + np.array(offset)
            unit = RecognizedTextUnit(
                text=f"M{i}", block_position=Quadrilateral.from_points(detected)
            )
            markers.append(ReferenceMarker(unit=unit, reference_position=reference))
        return markers

    return _make
