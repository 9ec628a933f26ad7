"""
Planar geometry helpers for the letter ring.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in ring (screen) coordinates, y grows downwards."""
    x: float
    y: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


def circle_positions(
    center: tuple[float, float],
    radius: float,
    n_points: int,
    start_angle: float = -math.pi / 2
) -> npt.NDArray[np.float64]:
    """
    Evenly distribute points on a circle.

    Args:
        center: (x, y) coordinates of the circle center.
        radius: Radius of the circle.
        n_points: Number of points.
        start_angle: Angle of the first point in radians. The default puts it
            at the top of the circle in screen coordinates.

    Returns:
        An array of shape (n_points, 2) with the (x, y) coordinates.
    """
    if n_points <= 0:
        return np.empty((0, 2), dtype=np.float64)
    cx, cy = center
    theta = start_angle + np.arange(n_points) * (2.0 * np.pi / n_points)
    return np.c_[cx + radius * np.cos(theta), cy + radius * np.sin(theta)]


def nearest_within(
    centers: npt.NDArray[np.float64],
    point: Point,
    radius: float
) -> int | None:
    """
    Index of the center closest to `point`, if it lies within `radius`.

    Args:
        centers: (N, 2) array of candidate centers.
        point: The query point.
        radius: Maximum accepted distance.

    Returns:
        The index of the nearest center, or None if nothing is close enough.
    """
    if len(centers) == 0:
        return None
    d = np.linalg.norm(centers - point.to_array(), axis=1)
    i = int(np.argmin(d))
    if d[i] > radius:
        return None
    return i
