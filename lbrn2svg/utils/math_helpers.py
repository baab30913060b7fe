"""Math helpers: cubic Bezier evaluation and extrema. No engine imports."""

from __future__ import annotations

import math

Point = tuple[float, float]


def derivative_roots(p0: float, c0: float, c1: float, p1: float, eps: float = 1e-8) -> list[float]:
    """Parameters t in (0, 1) where one axis of a cubic Bezier has zero slope.

    The derivative is a quadratic A·t² + B·t + C with
    A = -P0 + 3C0 - 3C1 + P1, B = 2(P0 - 2C0 + C1), C = C0 - P0.
    """
    a = -p0 + 3 * c0 - 3 * c1 + p1
    b = 2 * (p0 - 2 * c0 + c1)
    c = c0 - p0

    roots: list[float] = []
    if abs(a) < eps:
        if abs(b) > eps:
            roots.append(-c / b)
    else:
        disc = b * b - 4 * a * c
        if disc >= 0:
            sqrt_d = math.sqrt(disc)
            roots.append((-b + sqrt_d) / (2 * a))
            roots.append((-b - sqrt_d) / (2 * a))
    return [t for t in roots if 0 < t < 1]


def bezier_extrema_params(p0: Point, c0: Point, c1: Point, p1: Point, eps: float = 1e-8) -> list[float]:
    """Endpoints plus every per-axis extremum parameter, deduplicated, in ascending order."""
    ts = {0.0, 1.0}
    ts.update(derivative_roots(p0[0], c0[0], c1[0], p1[0], eps))
    ts.update(derivative_roots(p0[1], c0[1], c1[1], p1[1], eps))
    return sorted(ts)


def cubic_point(p0: Point, c0: Point, c1: Point, p1: Point, t: float) -> Point:
    """Evaluate a cubic Bezier at t."""
    mt = 1 - t
    w0 = mt * mt * mt
    w1 = 3 * mt * mt * t
    w2 = 3 * mt * t * t
    w3 = t * t * t
    return (
        w0 * p0[0] + w1 * c0[0] + w2 * c1[0] + w3 * p1[0],
        w0 * p0[1] + w1 * c0[1] + w2 * c1[1] + w3 * p1[1],
    )
