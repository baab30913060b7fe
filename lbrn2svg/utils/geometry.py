"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points: list[tuple[float, float]] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Coerce a point list into an Nx2 float array (empty input → shape (0, 2))."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def apply_affine(matrix: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map Nx2 points through a 3x3 affine matrix."""
    if len(points) == 0:
        return np.empty((0, 2))
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (homogeneous @ matrix.T)[:, :2]


def flip_y(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Negate the y column. LightBurn's y axis points up, SVG's points down."""
    flipped = points.copy()
    flipped[:, 1] = -flipped[:, 1]
    return flipped


def rect_corners(width: float, height: float) -> NDArray[np.float64]:
    """Corners of a width×height box centered on the origin."""
    w, h = width / 2, height / 2
    return np.array([[-w, -h], [w, -h], [w, h], [-w, h]])


def ellipse_points(rx: float, ry: float, n: int = 32) -> NDArray[np.float64]:
    """Cardinal extrema followed by n uniform perimeter samples."""
    cardinal = np.array([[rx, 0.0], [-rx, 0.0], [0.0, ry], [0.0, -ry]])
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    sampled = np.column_stack([rx * np.cos(angles), ry * np.sin(angles)])
    return np.vstack([cardinal, sampled])
