"""Semantic validation for parsed pillar specs."""

from __future__ import annotations

import math

from pillargen.errors import ValidationError
from pillargen.models import PillarSpec


def _spec_version(spec: PillarSpec) -> tuple[int, int]:
    """Parse spec version string to (major, minor) tuple."""
    parts = spec.version.split(".")
    if len(parts) == 2:
        try:
            return (int(parts[0]), int(parts[1]))
        except ValueError:
            pass
    return (0, 1)


def validate(spec: PillarSpec) -> None:
    """Run all semantic validation checks on a parsed spec.

    Raises:
        ValidationError: On any semantic rule violation.
    """
    version = _spec_version(spec)

    _check_fluted_version_gate(spec, version)
    _check_unique_pillar_ids(spec)
    _check_no_nan_infinity(spec)
    _check_height_positive(spec)
    _check_rule_symbols(spec)
    _check_lsystem_ranges(spec)
    _check_fluted_ranges(spec)


def _check_fluted_version_gate(spec: PillarSpec, version: tuple[int, int]) -> None:
    """Reject fluted pillars in specs with version < 0.2."""
    if version >= (0, 2):
        return
    for pillar in spec.pillars:
        if pillar.type == "fluted":
            raise ValidationError(
                f"Pillar {pillar.id!r} uses type 'fluted' which requires version >= 0.2, "
                f"but spec declares version {spec.version!r}"
            )


def _check_unique_pillar_ids(spec: PillarSpec) -> None:
    seen: set[str] = set()
    for pillar in spec.pillars:
        if pillar.id in seen:
            raise ValidationError(f"Duplicate pillar id: {pillar.id!r}")
        seen.add(pillar.id)


def _check_no_nan_infinity(spec: PillarSpec) -> None:
    """Reject NaN or ±Infinity in any numeric field."""
    for pillar in spec.pillars:
        values = {
            "height": pillar.height,
            "angle": pillar.angle,
            "segment_length": pillar.segment_length,
            "thickness": pillar.thickness,
            "radius": pillar.radius,
            "flute_depth": pillar.flute_depth,
        }
        for key, val in values.items():
            if val is not None and not math.isfinite(val):
                raise ValidationError(f"Non-finite value {val} in pillar {pillar.id!r} {key}")
        if pillar.transform and pillar.transform.translation:
            for v in pillar.transform.translation:
                if not math.isfinite(v):
                    raise ValidationError(
                        f"Non-finite value {v} in pillar {pillar.id!r} translation"
                    )


def _check_height_positive(spec: PillarSpec) -> None:
    for pillar in spec.pillars:
        if pillar.height <= 0:
            raise ValidationError(f"Pillar {pillar.id!r} has non-positive height={pillar.height}")


def _check_rule_symbols(spec: PillarSpec) -> None:
    for pillar in spec.pillars:
        for rule in pillar.rules or []:
            if len(rule.symbol) != 1:
                raise ValidationError(
                    f"Pillar {pillar.id!r}: rule symbol must be a single character, "
                    f"got {rule.symbol!r}"
                )


def _check_lsystem_ranges(spec: PillarSpec) -> None:
    for pillar in spec.pillars:
        if pillar.type != "lsystem":
            continue
        if pillar.iterations < 0:
            raise ValidationError(
                f"Pillar {pillar.id!r} has negative iterations={pillar.iterations}"
            )
        if pillar.segment_length <= 0:
            raise ValidationError(
                f"Pillar {pillar.id!r} has non-positive segment_length={pillar.segment_length}"
            )
        if pillar.thickness < 0:
            raise ValidationError(
                f"Pillar {pillar.id!r} has negative thickness={pillar.thickness}"
            )


def _check_fluted_ranges(spec: PillarSpec) -> None:
    for pillar in spec.pillars:
        if pillar.type != "fluted":
            continue
        if pillar.radius <= 0:
            raise ValidationError(f"Pillar {pillar.id!r} has non-positive radius={pillar.radius}")
        if pillar.segments < 3:
            raise ValidationError(
                f"Pillar {pillar.id!r} needs at least 3 segments, got {pillar.segments}"
            )
        if pillar.flutes < 0:
            raise ValidationError(f"Pillar {pillar.id!r} has negative flutes={pillar.flutes}")
