"""glTF/GLB assembly via pygltflib."""

from __future__ import annotations

import struct
from pathlib import Path

import numpy as np
import pygltflib

from pillargen.errors import ExportError
from pillargen.generation import GeneratedPillar


def export_gltf(generated: list[GeneratedPillar], output_path: Path) -> None:
    """Write generated pillars to a GLB file.

    One mesh and one node per pillar, in input order. Pillars whose mesh is
    empty (degenerate cross-sections) are left out of the scene.
    """
    try:
        gltf = build_gltf(generated)
        output_path.write_bytes(_glb_bytes(gltf))
    except Exception as e:
        if isinstance(e, ExportError):
            raise
        raise ExportError(f"Failed to export glTF: {e}") from e


def build_gltf(generated: list[GeneratedPillar]) -> pygltflib.GLTF2:
    """Build the complete glTF2 structure."""
    gltf = pygltflib.GLTF2(
        scene=0,
        scenes=[pygltflib.Scene(nodes=[])],
        nodes=[],
        meshes=[],
        accessors=[],
        bufferViews=[],
        buffers=[],
    )

    blob_data = bytearray()
    scene_nodes: list[int] = []

    for item in generated:
        mesh = item.mesh
        if mesh.is_empty:
            continue
        pillar = item.pillar

        pos_acc = _write_buffer_view_and_accessor(
            gltf,
            blob_data,
            mesh.positions.astype(np.float32),
            pygltflib.FLOAT,
            pygltflib.VEC3,
            pygltflib.ARRAY_BUFFER,
            include_min_max=True,
        )
        norm_acc = _write_buffer_view_and_accessor(
            gltf,
            blob_data,
            mesh.normals.astype(np.float32),
            pygltflib.FLOAT,
            pygltflib.VEC3,
            pygltflib.ARRAY_BUFFER,
        )
        uv_acc = _write_buffer_view_and_accessor(
            gltf,
            blob_data,
            mesh.uvs.astype(np.float32),
            pygltflib.FLOAT,
            pygltflib.VEC2,
            pygltflib.ARRAY_BUFFER,
        )
        idx_acc = _write_buffer_view_and_accessor(
            gltf,
            blob_data,
            mesh.indices.astype(np.uint32),
            pygltflib.UNSIGNED_INT,
            pygltflib.SCALAR,
            pygltflib.ELEMENT_ARRAY_BUFFER,
        )

        gltf_prim = pygltflib.Primitive(
            attributes=pygltflib.Attributes(
                POSITION=pos_acc,
                NORMAL=norm_acc,
                TEXCOORD_0=uv_acc,
            ),
            indices=idx_acc,
        )
        gltf_prim.extras = {"pillar_type": pillar.type}

        mesh_idx = len(gltf.meshes)
        mesh_name = pillar.name or pillar.id
        gltf.meshes.append(pygltflib.Mesh(name=mesh_name, primitives=[gltf_prim]))

        node = pygltflib.Node(name=mesh_name, mesh=mesh_idx)
        if pillar.transform is not None and pillar.transform.translation is not None:
            node.translation = list(pillar.transform.translation)
        scene_nodes.append(len(gltf.nodes))
        gltf.nodes.append(node)

    gltf.scenes[0].nodes = scene_nodes
    if blob_data:
        gltf.buffers = [pygltflib.Buffer(byteLength=len(blob_data))]
        gltf.set_binary_blob(bytes(blob_data))

    return gltf


def _glb_bytes(gltf: pygltflib.GLTF2) -> bytes:
    """Serialize to GLB. A scene with no geometry is written as a JSON-only GLB.

    pygltflib always emits a BIN chunk, and a buffer must be at least one byte.
    """
    if gltf.buffers:
        return b"".join(gltf.save_to_bytes())
    json_blob = gltf.gltf_to_json(separators=(",", ":"), indent=None).encode("utf-8")
    json_blob += b" " * (-len(json_blob) % 4)
    length = 12 + 8 + len(json_blob)
    return b"".join(
        [
            pygltflib.MAGIC,
            struct.pack("<II", pygltflib.GLTF_VERSION, length),
            struct.pack("<I", len(json_blob)),
            pygltflib.JSON.encode("ascii"),
            json_blob,
        ]
    )


def _write_buffer_view_and_accessor(
    gltf: pygltflib.GLTF2,
    blob_data: bytearray,
    data_array: np.ndarray,
    component_type: int,
    accessor_type: str,
    target: int | None = None,
    *,
    include_min_max: bool = False,
) -> int:
    """Write a buffer view and accessor, returning the accessor index."""
    offset = len(blob_data)
    data_bytes = data_array.tobytes()
    blob_data.extend(data_bytes)

    bv_idx = len(gltf.bufferViews)
    bv = pygltflib.BufferView(
        buffer=0,
        byteOffset=offset,
        byteLength=len(data_bytes),
    )
    if target is not None:
        bv.target = target
    gltf.bufferViews.append(bv)

    acc_kwargs: dict = {
        "bufferView": bv_idx,
        "byteOffset": 0,
        "componentType": component_type,
        "count": len(data_array),
        "type": accessor_type,
    }
    if include_min_max:
        acc_kwargs["min"] = data_array.min(axis=0).tolist()
        acc_kwargs["max"] = data_array.max(axis=0).tolist()

    acc_idx = len(gltf.accessors)
    gltf.accessors.append(pygltflib.Accessor(**acc_kwargs))
    return acc_idx
