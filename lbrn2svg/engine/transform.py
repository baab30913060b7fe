"""Affine transform composition and application.

Composition is never cached on the shape tree; callers compose on demand when
they descend into a group.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from lbrn2svg.engine.config import DEFAULT_CONFIG, ConverterConfig
from lbrn2svg.models.project import AffineTransform
from lbrn2svg.utils.geometry import apply_affine, flip_y


def compose(outer: AffineTransform, inner: AffineTransform) -> AffineTransform:
    """Return the transform equivalent to applying ``inner`` first, then ``outer``."""
    return AffineTransform.from_matrix(outer.as_matrix() @ inner.as_matrix())


def apply(transform: AffineTransform, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map local Nx2 points into LightBurn's global (y-up) space."""
    return apply_affine(transform.as_matrix(), points)


def to_document_space(transform: AffineTransform, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map local points into SVG document space (global space with y negated)."""
    if len(points) == 0:
        return np.empty((0, 2))
    return flip_y(apply(transform, points))


def to_svg_matrix(transform: AffineTransform, config: ConverterConfig = DEFAULT_CONFIG) -> str:
    """SVG ``matrix(...)`` attribute value with the y row negated."""
    t = transform
    values = (t.a, -t.b, t.c, -t.d, t.e, -t.f)
    return "matrix(" + " ".join(config.fmt(v) for v in values) + ")"


def to_svg_group_matrix(transform: AffineTransform, config: ConverterConfig = DEFAULT_CONFIG) -> str:
    """``matrix(...)`` for a container whose children already carry the y flip.

    Children render as flip·child, so the container uses flip·group·flip and the
    product equals flip·group·child, the same map the bounds use.
    """
    t = transform
    values = (t.a, -t.b, -t.c, t.d, t.e, -t.f)
    return "matrix(" + " ".join(config.fmt(v) for v in values) + ")"
