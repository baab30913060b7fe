"""Per-conversion state: the warnings accumulator and the geometry reuse cache.

Both objects are created fresh for each conversion call and never shared
between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lbrn2svg.models.project import PathPrimitive, PrimitiveMode, Vertex

logger = logging.getLogger(__name__)


@dataclass
class Diagnostics:
    """Collects human-readable warnings for shapes that were dropped or degraded."""

    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.debug("diagnostic: %s", message)

    def extend(self, messages: list[str] | tuple[str, ...]) -> None:
        self.warnings.extend(messages)

    @property
    def count(self) -> int:
        return len(self.warnings)

    def __bool__(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class PrimitiveData:
    mode: PrimitiveMode
    primitives: tuple[PathPrimitive, ...]


@dataclass
class GeometryCache:
    """Path definitions seen so far in document order, keyed by (VertID, PrimID).

    Pair definitions exist only for shapes that carry both ids.

    Definitions are also indexed per component so a shape that shares only its
    vertex list (or only its primitive list) with an earlier one still resolves.
    """

    _definitions: dict[tuple[int, int], tuple[tuple[Vertex, ...], PrimitiveData]] = field(
        default_factory=dict
    )
    _vertices: dict[int, tuple[Vertex, ...]] = field(default_factory=dict)
    _primitives: dict[int, PrimitiveData] = field(default_factory=dict)

    def store_vertices(self, vert_id: int, vertices: tuple[Vertex, ...]) -> None:
        self._vertices[vert_id] = vertices

    def store_primitives(self, prim_id: int, data: PrimitiveData) -> None:
        self._primitives[prim_id] = data

    def store_definition(
        self,
        vert_id: int | None,
        prim_id: int | None,
        vertices: tuple[Vertex, ...],
        data: PrimitiveData,
    ) -> None:
        if vert_id is None or prim_id is None:
            return
        self._definitions[(vert_id, prim_id)] = (vertices, data)

    def lookup_definition(
        self, vert_id: int | None, prim_id: int | None
    ) -> tuple[tuple[Vertex, ...], PrimitiveData] | None:
        if vert_id is None or prim_id is None:
            return None
        return self._definitions.get((vert_id, prim_id))

    def lookup_vertices(self, vert_id: int) -> tuple[Vertex, ...] | None:
        return self._vertices.get(vert_id)

    def lookup_primitives(self, prim_id: int) -> PrimitiveData | None:
        return self._primitives.get(prim_id)

    def __len__(self) -> int:
        return len(self._definitions)
