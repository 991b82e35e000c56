"""Turtle interpretation of L-system strings into 2D cross-sections."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np


@dataclass(frozen=True)
class TurtleState:
    """Turtle position and heading (degrees, 0 = +X, counter-clockwise positive)."""

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def forward(self, step: float) -> TurtleState:
        rad = math.radians(self.heading)
        return replace(self, x=self.x + math.cos(rad) * step, y=self.y + math.sin(rad) * step)

    def turn(self, degrees: float) -> TurtleState:
        return replace(self, heading=self.heading + degrees)


def interpret(symbols: str, angle_degrees: float, step_length: float) -> np.ndarray:
    """Walk ``symbols`` with a turtle and collect the cross-section.

    Commands:
        F  move forward by ``step_length`` and record the new position
        +  turn by ``-angle_degrees``
        -  turn by ``+angle_degrees``
        [  push the current state
        ]  pop and restore a state (no-op when the stack is empty)

    Every other character is ignored. Branches do not start a new polyline:
    all recorded points go into one flat sequence in traversal order.

    Returns:
        (N, 2) float64 array of points, one per ``F``.
    """
    state = TurtleState()
    stack: list[TurtleState] = []
    points: list[tuple[float, float]] = []

    for c in symbols:
        if c == "F":
            state = state.forward(step_length)
            points.append(state.position)
        elif c == "+":
            state = state.turn(-angle_degrees)
        elif c == "-":
            state = state.turn(angle_degrees)
        elif c == "[":
            stack.append(state)
        elif c == "]":
            if stack:
                state = stack.pop()

    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array(points, dtype=np.float64)
