"""Fluted column: a single-walled open tube with sinusoidal grooves."""

from __future__ import annotations

import math

import numpy as np

from pillargen.errors import GenerationError
from pillargen.mesh import MeshData, compute_vertex_normals


def fluted_column(
    height: float,
    radius: float,
    segments: int,
    flutes: int,
    flute_depth: float,
) -> MeshData:
    """Fluted column: 2 * (segments+1) verts, 6 * segments indices.

    Bottom ring at y=0 then top ring at y=height. The seam vertex is repeated
    so u runs 0..1 without wrapping. No caps.
    """
    if segments < 3:
        raise GenerationError(f"Fluted column needs at least 3 segments, got {segments}")

    ring = segments + 1
    positions = []
    uvs = []
    indices = []

    for row, y in enumerate((0.0, height)):
        for seg in range(ring):
            angle = 2.0 * math.pi * seg / segments
            r = radius + math.sin(angle * flutes) * flute_depth
            positions.append((math.cos(angle) * r, y, math.sin(angle) * r))
            uvs.append((seg / segments, float(row)))

    for seg in range(segments):
        bottom = seg
        top = seg + ring
        indices.extend([bottom, top, bottom + 1])
        indices.extend([bottom + 1, top, top + 1])

    positions_arr = np.array(positions, dtype=np.float64)
    indices_arr = np.array(indices, dtype=np.uint32)
    return MeshData(
        positions=positions_arr,
        normals=compute_vertex_normals(positions_arr, indices_arr),
        uvs=np.array(uvs, dtype=np.float64),
        indices=indices_arr,
    )
