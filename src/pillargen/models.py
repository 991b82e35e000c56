"""Pydantic v2 schema models for pillargen v0.1–v0.2 specs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

PILLAR_TYPES: frozenset[str] = frozenset({"lsystem", "fluted"})

_LSYSTEM_FIELDS = ("axiom", "rules", "iterations", "angle", "segment_length", "thickness")
_FLUTED_FIELDS = ("radius", "segments", "flutes", "flute_depth")


class Rule(BaseModel):
    model_config = ConfigDict(extra="forbid")

    symbol: str
    replacement: str = ""


class Transform(BaseModel):
    model_config = ConfigDict(extra="forbid")

    translation: tuple[float, float, float] | None = None


class Pillar(BaseModel):
    """One pillar definition.

    ``lsystem`` pillars take their cross-section from an L-system expanded and
    walked by a turtle; ``fluted`` pillars are a fluted open column. Defaults
    for unset fields are filled in by ``_fill_defaults`` per type, so a field
    belonging to the other type is always ``None``.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["lsystem", "fluted"]
    id: str
    name: str | None = None
    height: float = 5.0
    transform: Transform | None = None
    # lsystem fields
    axiom: str | None = None
    rules: list[Rule] | None = None
    iterations: int | None = None
    angle: float | None = None
    segment_length: float | None = None
    thickness: float | None = None
    # fluted fields (v0.2+)
    radius: float | None = None
    segments: int | None = None
    flutes: int | None = None
    flute_depth: float | None = None

    @field_validator("rules", mode="before")
    @classmethod
    def normalize_rules(cls, v: object) -> object:
        # {F: "F+F"} is shorthand for [{symbol: F, replacement: "F+F"}]
        if isinstance(v, dict):
            return [{"symbol": k, "replacement": r} for k, r in v.items()]
        return v

    @model_validator(mode="after")
    def _fill_defaults(self) -> Pillar:
        if self.type == "lsystem":
            for name in _FLUTED_FIELDS:
                if getattr(self, name) is not None:
                    raise ValueError(f"'lsystem' pillar must not have {name!r}")
            if self.axiom is None:
                self.axiom = "F"
            if self.rules is None:
                self.rules = []
            if self.iterations is None:
                self.iterations = 3
            if self.angle is None:
                self.angle = 90.0
            if self.segment_length is None:
                self.segment_length = 1.0
            if self.thickness is None:
                self.thickness = 0.1
        else:
            for name in _LSYSTEM_FIELDS:
                if getattr(self, name) is not None:
                    raise ValueError(f"'fluted' pillar must not have {name!r}")
            if self.radius is None:
                self.radius = 1.0
            if self.segments is None:
                self.segments = 32
            if self.flutes is None:
                self.flutes = 8
            if self.flute_depth is None:
                self.flute_depth = 0.1
        return self


class PillarSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str
    units: Literal["meters"] = "meters"
    pillars: list[Pillar] = []
