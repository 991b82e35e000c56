"""Indexed triangle mesh buffers shared by every generator."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class MeshData:
    """Generated mesh geometry."""

    positions: np.ndarray  # (N, 3) float64
    normals: np.ndarray  # (N, 3) float64
    uvs: np.ndarray  # (N, 2) float64
    indices: np.ndarray  # (M,) uint32

    @classmethod
    def empty(cls) -> MeshData:
        return cls(
            positions=np.zeros((0, 3), dtype=np.float64),
            normals=np.zeros((0, 3), dtype=np.float64),
            uvs=np.zeros((0, 2), dtype=np.float64),
            indices=np.zeros(0, dtype=np.uint32),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def is_empty(self) -> bool:
        return len(self.positions) == 0


def compute_vertex_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Smooth per-vertex normals from the triangles that use each vertex.

    Face normals are accumulated unnormalized, so larger faces weigh more.
    Vertices whose accumulated normal is zero (unused, or only touching
    degenerate faces) get ``(0, 0, 0)``.
    """
    normals = np.zeros_like(positions, dtype=np.float64)
    if len(indices) == 0:
        return normals

    tris = indices.reshape(-1, 3).astype(np.int64)
    v0 = positions[tris[:, 0]]
    v1 = positions[tris[:, 1]]
    v2 = positions[tris[:, 2]]
    face_normals = np.cross(v1 - v0, v2 - v0)

    for corner in range(3):
        np.add.at(normals, tris[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1)
    nonzero = lengths > 1e-12
    normals[nonzero] /= lengths[nonzero, None]
    normals[~nonzero] = 0.0
    return normals


def bounds(mesh: MeshData) -> tuple[list[float], list[float]]:
    """Axis-aligned (min, max) of a non-empty mesh."""
    return mesh.positions.min(axis=0).tolist(), mesh.positions.max(axis=0).tolist()
