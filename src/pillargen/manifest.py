"""Build manifest for pillargen build output."""

from __future__ import annotations

import hashlib
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path

from pillargen import __version__
from pillargen.generation import GeneratedPillar


def _sha256_of_file(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _git_sha() -> str | None:
    """Return current git HEAD SHA, or None outside a work tree."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def build_manifest(
    *,
    input_path: Path,
    output_path: Path,
    generated: list[GeneratedPillar],
    command_args: list[str] | None = None,
) -> dict:
    """Build a manifest dict describing a build run.

    Call it after the GLB has been written; it hashes the output file.
    """
    manifest: dict = {
        "manifest_version": 1,
        "tool": {
            "name": "pillargen",
            "version": __version__,
            "python": sys.version.split()[0],
            "git_sha": _git_sha(),
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "input": {
            "path": str(input_path),
            "sha256": _sha256_of_file(input_path),
        },
        "output": {
            "path": str(output_path),
            "sha256": _sha256_of_file(output_path),
        },
        "pillars": [
            {
                "id": item.pillar.id,
                "type": item.pillar.type,
                "vertices": item.mesh.vertex_count,
                "triangles": item.mesh.triangle_count,
            }
            for item in generated
        ],
    }

    if command_args is not None:
        manifest["command_args"] = command_args

    return manifest
