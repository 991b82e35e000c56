"""Hollow-shell extrusion of a 2D cross-section into a closed pillar mesh."""

from __future__ import annotations

import math

import numpy as np

from pillargen.mesh import MeshData, compute_vertex_normals
from pillargen.warning_policy import WarningPolicy, emit_warning

# Vertex slots per cross-section point, in buffer order.
OUTER_BOTTOM = 0
OUTER_TOP = 1
INNER_BOTTOM = 2
INNER_TOP = 3
VERTS_PER_POINT = 4

# Points closer than this to the origin have no usable direction.
ZERO_LENGTH = 1e-9


def extrude(
    cross_section: np.ndarray,
    height: float,
    thickness: float,
    *,
    warning_policy: WarningPolicy | None = None,
) -> MeshData:
    """Loft a cross-section ring into a hollow shell.

    The ring is always closed: the last point connects back to the first,
    whether or not the turtle path returned to its start. Each point gets an
    inner twin pulled ``thickness`` toward the 2D origin, and every edge of
    the ring yields two triangles for each of the outer wall, inner wall,
    bottom cap and top cap. The extrusion axis is +Y; cross-section (x, y)
    maps to (x, z).

    Layout per point ``i``: vertices ``4i .. 4i+3`` are outer-bottom,
    outer-top, inner-bottom, inner-top. UVs are ``(i / N, 0)`` at the bottom
    and ``(i / N, 1)`` at the top.

    With fewer than 3 points a W01 warning is emitted and an empty mesh is
    returned.
    """
    points = np.asarray(cross_section, dtype=np.float64).reshape(-1, 2)
    n = len(points)
    if n < 3:
        emit_warning(
            "W01",
            f"Cross-section has {n} point(s); at least 3 are needed to build a shell",
            policy=warning_policy,
        )
        return MeshData.empty()

    positions = []
    uvs = []
    indices = []

    for i, (ox, oy) in enumerate(points):
        length = math.hypot(ox, oy)
        if length > ZERO_LENGTH:
            dx, dy = ox / length, oy / length
        else:
            emit_warning(
                "W03",
                f"Cross-section point {i} lies on the origin; its wall has no thickness",
                policy=warning_policy,
            )
            dx, dy = 0.0, 0.0
        ix = ox - dx * thickness
        iy = oy - dy * thickness

        positions.append((ox, 0.0, oy))
        positions.append((ox, height, oy))
        positions.append((ix, 0.0, iy))
        positions.append((ix, height, iy))

        u = i / n
        uvs.extend([(u, 0.0), (u, 1.0), (u, 0.0), (u, 1.0)])

    for i in range(n):
        a = i * VERTS_PER_POINT
        b = ((i + 1) % n) * VERTS_PER_POINT

        # Outer wall
        indices.extend([a + OUTER_BOTTOM, b + OUTER_BOTTOM, a + OUTER_TOP])
        indices.extend([a + OUTER_TOP, b + OUTER_BOTTOM, b + OUTER_TOP])
        # Inner wall, reversed winding
        indices.extend([a + INNER_BOTTOM, a + INNER_TOP, b + INNER_BOTTOM])
        indices.extend([b + INNER_BOTTOM, a + INNER_TOP, b + INNER_TOP])
        # Bottom cap
        indices.extend([a + OUTER_BOTTOM, b + INNER_BOTTOM, a + INNER_BOTTOM])
        indices.extend([a + OUTER_BOTTOM, b + OUTER_BOTTOM, b + INNER_BOTTOM])
        # Top cap, opposite winding to the bottom
        indices.extend([a + OUTER_TOP, a + INNER_TOP, b + INNER_TOP])
        indices.extend([a + OUTER_TOP, b + INNER_TOP, b + OUTER_TOP])

    positions_arr = np.array(positions, dtype=np.float64)
    indices_arr = np.array(indices, dtype=np.uint32)
    return MeshData(
        positions=positions_arr,
        normals=compute_vertex_normals(positions_arr, indices_arr),
        uvs=np.array(uvs, dtype=np.float64),
        indices=indices_arr,
    )
