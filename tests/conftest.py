"""Shared spec fixtures."""

import pytest


@pytest.fixture
def square_pillar_yaml():
    return """\
version: "0.1"
units: meters
pillars:
  - type: lsystem
    id: square
    axiom: "F+F+F+F"
    iterations: 0
    angle: 90
    segment_length: 1.0
    height: 2.0
    thickness: 0.2
"""


@pytest.fixture
def koch_pillar_yaml():
    return """\
version: "0.2"
units: meters
pillars:
  - type: lsystem
    id: koch
    name: Koch Pillar
    axiom: "F+XF+F+XF"
    rules:
      - symbol: X
        replacement: "XF-F+F-XF+F+XF-F+F-X"
    iterations: 2
    angle: 90
    segment_length: 0.2
    height: 5.0
    thickness: 0.1
    transform:
      translation: [3.0, 0.0, 0.0]
"""


@pytest.fixture
def mixed_pillars_yaml():
    return """\
version: "0.2"
pillars:
  - type: lsystem
    id: branchy
    axiom: "F[-F]F+F+F"
    rules:
      F: "FF"
    iterations: 1
    angle: 90
  - type: fluted
    id: doric
    height: 4.0
    radius: 0.5
    segments: 16
    flutes: 8
    flute_depth: 0.05
"""


@pytest.fixture
def runaway_pillar_yaml():
    return """\
version: "0.2"
pillars:
  - type: lsystem
    id: runaway
    axiom: F
    rules:
      F: FF
    iterations: 40
"""
