"""Per-pillar geometry generation: grammar -> turtle -> shell."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pillargen.column import fluted_column
from pillargen.errors import GenerationError
from pillargen.extrusion import extrude
from pillargen.grammar import build_rule_map, expand
from pillargen.mesh import MeshData
from pillargen.models import Pillar, PillarSpec
from pillargen.turtle import interpret
from pillargen.warning_policy import WarningPolicy


@dataclass
class GeneratedPillar:
    pillar: Pillar
    mesh: MeshData


def generate_cross_section(
    pillar: Pillar, *, warning_policy: WarningPolicy | None = None
) -> np.ndarray:
    """Expand an ``lsystem`` pillar's grammar and walk it into a cross-section."""
    if pillar.type != "lsystem":
        raise GenerationError(
            f"Pillar {pillar.id!r} of type {pillar.type!r} has no L-system", pillar_id=pillar.id
        )
    rules = build_rule_map(pillar.rules, warning_policy=warning_policy)
    symbols = expand(pillar.axiom, rules, pillar.iterations)
    return interpret(symbols, pillar.angle, pillar.segment_length)


def generate_pillar(pillar: Pillar, *, warning_policy: WarningPolicy | None = None) -> MeshData:
    """Generate deterministic geometry for a single pillar."""
    if pillar.type == "lsystem":
        cross_section = generate_cross_section(pillar, warning_policy=warning_policy)
        return extrude(
            cross_section,
            pillar.height,
            pillar.thickness,
            warning_policy=warning_policy,
        )
    if pillar.type == "fluted":
        return fluted_column(
            pillar.height,
            pillar.radius,
            pillar.segments,
            pillar.flutes,
            pillar.flute_depth,
        )
    raise GenerationError(f"Unknown pillar type: {pillar.type!r}", pillar_id=pillar.id)


def generate_spec(
    spec: PillarSpec, *, warning_policy: WarningPolicy | None = None
) -> list[GeneratedPillar]:
    """Generate every pillar in a spec, in document order.

    Each call starts from scratch; there is no state carried between calls,
    so a changed spec is regenerated by calling again.
    """
    return [
        GeneratedPillar(pillar=p, mesh=generate_pillar(p, warning_policy=warning_policy))
        for p in spec.pillars
    ]
