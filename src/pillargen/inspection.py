"""Inspection diagnostics for pillar specs."""

from __future__ import annotations

from pillargen.extrusion import extrude
from pillargen.generation import generate_pillar
from pillargen.grammar import build_rule_map, expand, expansion_lengths
from pillargen.mesh import bounds
from pillargen.models import Pillar, PillarSpec
from pillargen.turtle import interpret
from pillargen.warning_policy import WarningPolicy

# Expanded strings longer than this are reported by predicted length only.
DEFAULT_SYMBOL_LIMIT = 1_000_000


def inspect_spec(
    spec: PillarSpec,
    *,
    selected_pillar_ids: set[str] | None = None,
    warning_policy: WarningPolicy | None = None,
    symbol_limit: int = DEFAULT_SYMBOL_LIMIT,
) -> dict[str, object]:
    """Inspect a validated spec and return deterministic diagnostics.

    Expansion growth is predicted from symbol counts before anything is
    expanded. An ``lsystem`` pillar whose final string would exceed
    ``symbol_limit`` symbols gets ``expansion_lengths`` only, with
    ``mesh_skipped`` set, and contributes nothing to the mesh totals.
    """
    pillars = [
        _pillar_payload(p, warning_policy, symbol_limit)
        for p in spec.pillars
        if selected_pillar_ids is None or p.id in selected_pillar_ids
    ]
    return {
        "inspect_schema_version": 1,
        "summary": {
            "spec_version": spec.version,
            "pillar_count": len(spec.pillars),
            "vertex_count": sum(p.get("vertex_count", 0) for p in pillars),
            "triangle_count": sum(p.get("triangle_count", 0) for p in pillars),
            "skipped_count": sum(1 for p in pillars if p.get("mesh_skipped")),
        },
        "pillars": pillars,
    }


def validate_selected_pillar_ids(spec: PillarSpec, selected_ids: set[str]) -> list[str]:
    """Return sorted unknown pillar ids."""
    known_ids = {p.id for p in spec.pillars}
    return sorted(pid for pid in selected_ids if pid not in known_ids)


def _pillar_payload(
    pillar: Pillar, warning_policy: WarningPolicy | None, symbol_limit: int
) -> dict:
    payload: dict = {"id": pillar.id, "type": pillar.type}
    if pillar.type == "lsystem":
        rules = build_rule_map(pillar.rules, warning_policy=warning_policy)
        lengths = expansion_lengths(pillar.axiom, rules, pillar.iterations)
        payload["expansion_lengths"] = lengths
        if lengths[-1] > symbol_limit:
            payload["mesh_skipped"] = True
            return payload
        symbols = expand(pillar.axiom, rules, pillar.iterations)
        cross_section = interpret(symbols, pillar.angle, pillar.segment_length)
        payload["cross_section_points"] = len(cross_section)
        mesh = extrude(
            cross_section, pillar.height, pillar.thickness, warning_policy=warning_policy
        )
    else:
        mesh = generate_pillar(pillar, warning_policy=warning_policy)

    payload["vertex_count"] = mesh.vertex_count
    payload["triangle_count"] = mesh.triangle_count
    payload["empty"] = mesh.is_empty
    if not mesh.is_empty:
        lo, hi = bounds(mesh)
        payload["bounds"] = {"min": lo, "max": hi}
    return payload


def render_text(payload: dict[str, object]) -> str:
    """Render human-readable text output for inspect diagnostics."""
    lines: list[str] = []
    lines.append(f"inspect_schema_version: {payload['inspect_schema_version']}")

    summary = payload["summary"]
    lines.append("summary:")
    lines.append(f"  spec_version: {summary['spec_version']}")
    lines.append(f"  pillar_count: {summary['pillar_count']}")
    lines.append(f"  vertex_count: {summary['vertex_count']}")
    lines.append(f"  triangle_count: {summary['triangle_count']}")
    if summary["skipped_count"]:
        lines.append(f"  skipped_count: {summary['skipped_count']}")

    lines.append("pillars:")
    pillars = payload.get("pillars", [])
    if not pillars:
        lines.append("  (none)")
    for p in pillars:
        lines.append(f"  - id: {p['id']}")
        lines.append(f"    type: {p['type']}")
        if "expansion_lengths" in p:
            lengths = " -> ".join(str(n) for n in p["expansion_lengths"])
            lines.append(f"    expansion_lengths: {lengths}")
        if p.get("mesh_skipped"):
            lines.append("    mesh_skipped: true")
            continue
        if "cross_section_points" in p:
            lines.append(f"    cross_section_points: {p['cross_section_points']}")
        lines.append(f"    vertex_count: {p['vertex_count']}")
        lines.append(f"    triangle_count: {p['triangle_count']}")
        if p["empty"]:
            lines.append("    empty: true")
        else:
            lines.append(f"    bounds.min: {_fmt_vec(p['bounds']['min'])}")
            lines.append(f"    bounds.max: {_fmt_vec(p['bounds']['max'])}")
    return "\n".join(lines) + "\n"


def _fmt_vec(vec: list[float]) -> str:
    return "[" + ", ".join(f"{v:.6f}" for v in vec) + "]"
