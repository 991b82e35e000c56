"""Tests for semantic validation."""

import pytest

from pillargen.errors import ValidationError
from pillargen.models import Pillar, PillarSpec
from pillargen.parser import parse_yaml
from pillargen.validation import validate


def _spec(*pillars: Pillar, version: str = "0.2") -> PillarSpec:
    return PillarSpec(version=version, pillars=list(pillars))


class TestValidate:
    def test_valid_specs_pass(self, square_pillar_yaml, koch_pillar_yaml, mixed_pillars_yaml):
        for source in (square_pillar_yaml, koch_pillar_yaml, mixed_pillars_yaml):
            validate(parse_yaml(source))

    def test_empty_spec_passes(self):
        validate(PillarSpec(version="0.1"))

    def test_duplicate_pillar_ids(self):
        spec = _spec(Pillar(type="lsystem", id="a"), Pillar(type="fluted", id="a"))
        with pytest.raises(ValidationError, match="Duplicate pillar id"):
            validate(spec)

    def test_fluted_requires_v02(self):
        spec = _spec(Pillar(type="fluted", id="c"), version="0.1")
        with pytest.raises(ValidationError, match="requires version >= 0.2"):
            validate(spec)

    def test_multi_char_rule_symbol(self):
        spec = _spec(Pillar(type="lsystem", id="p", rules={"FF": "F"}))
        with pytest.raises(ValidationError, match="single character"):
            validate(spec)

    def test_empty_rule_symbol(self):
        spec = _spec(Pillar(type="lsystem", id="p", rules=[{"symbol": "", "replacement": "F"}]))
        with pytest.raises(ValidationError, match="single character"):
            validate(spec)

    def test_negative_iterations(self):
        spec = _spec(Pillar(type="lsystem", id="p", iterations=-1))
        with pytest.raises(ValidationError, match="negative iterations"):
            validate(spec)

    def test_zero_iterations_allowed(self):
        validate(_spec(Pillar(type="lsystem", id="p", iterations=0)))

    def test_non_positive_height(self):
        spec = _spec(Pillar(type="lsystem", id="p", height=0.0))
        with pytest.raises(ValidationError, match="non-positive height"):
            validate(spec)

    def test_non_positive_segment_length(self):
        spec = _spec(Pillar(type="lsystem", id="p", segment_length=-1.0))
        with pytest.raises(ValidationError, match="segment_length"):
            validate(spec)

    def test_negative_thickness(self):
        spec = _spec(Pillar(type="lsystem", id="p", thickness=-0.1))
        with pytest.raises(ValidationError, match="negative thickness"):
            validate(spec)

    def test_zero_thickness_allowed(self):
        validate(_spec(Pillar(type="lsystem", id="p", thickness=0.0)))

    def test_nan_rejected(self):
        spec = _spec(Pillar(type="lsystem", id="p", angle=float("nan")))
        with pytest.raises(ValidationError, match="Non-finite"):
            validate(spec)

    def test_infinite_translation_rejected(self):
        spec = _spec(
            Pillar(type="fluted", id="c", transform={"translation": (0.0, float("inf"), 0.0)})
        )
        with pytest.raises(ValidationError, match="Non-finite"):
            validate(spec)

    def test_fluted_too_few_segments(self):
        spec = _spec(Pillar(type="fluted", id="c", segments=2))
        with pytest.raises(ValidationError, match="at least 3 segments"):
            validate(spec)

    def test_fluted_non_positive_radius(self):
        spec = _spec(Pillar(type="fluted", id="c", radius=0.0))
        with pytest.raises(ValidationError, match="radius"):
            validate(spec)
