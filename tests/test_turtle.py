"""Tests for turtle interpretation."""

import numpy as np
import pytest

from pillargen.turtle import TurtleState, interpret


class TestInterpret:
    def test_no_commands_no_points(self):
        pts = interpret("XYZAB", 90, 1)
        assert pts.shape == (0, 2)

    def test_turns_and_brackets_alone_no_points(self):
        assert interpret("+-[]+[-]", 45, 1).shape == (0, 2)

    def test_empty_string(self):
        assert interpret("", 90, 1).shape == (0, 2)

    def test_single_forward(self):
        np.testing.assert_allclose(interpret("F", 90, 1), [[1.0, 0.0]])

    def test_origin_not_recorded(self):
        pts = interpret("FF", 90, 2.5)
        np.testing.assert_allclose(pts, [[2.5, 0.0], [5.0, 0.0]])

    def test_minus_turns_counter_clockwise(self):
        np.testing.assert_allclose(interpret("-F", 90, 1), [[0.0, 1.0]], atol=1e-12)

    def test_plus_turns_clockwise(self):
        np.testing.assert_allclose(interpret("+F", 90, 1), [[0.0, -1.0]], atol=1e-12)

    def test_square(self):
        pts = interpret("F+F+F+F", 90, 1)
        np.testing.assert_allclose(
            pts, [[1.0, 0.0], [1.0, -1.0], [0.0, -1.0], [0.0, 0.0]], atol=1e-12
        )

    def test_unknown_symbols_ignored(self):
        np.testing.assert_array_equal(interpret("XFYF", 90, 1), interpret("FF", 90, 1))

    def test_unmatched_close_bracket_is_noop(self):
        np.testing.assert_array_equal(interpret("]F", 90, 1), interpret("F", 90, 1))

    def test_unmatched_close_bracket_keeps_state(self):
        # the stray ] must not reset the heading set by -
        np.testing.assert_array_equal(interpret("-]]F", 90, 1), interpret("-F", 90, 1))

    def test_branch_restores_position_and_heading(self):
        pts = interpret("F[+F]F", 90, 1)
        np.testing.assert_allclose(pts, [[1.0, 0.0], [1.0, -1.0], [2.0, 0.0]], atol=1e-12)

    def test_nested_branches(self):
        pts = interpret("F[-F[-F]F]F", 90, 1)
        np.testing.assert_allclose(
            pts,
            [[1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [1.0, 2.0], [2.0, 0.0]],
            atol=1e-12,
        )

    def test_unclosed_branch(self):
        pts = interpret("F[-F", 90, 1)
        np.testing.assert_allclose(pts, [[1.0, 0.0], [1.0, 1.0]], atol=1e-12)

    def test_non_right_angle(self):
        pts = interpret("-F", 60, 2)
        np.testing.assert_allclose(pts, [[1.0, np.sqrt(3)]], atol=1e-12)

    def test_deterministic(self):
        a = interpret("F[-F]F+F+F[+F-F]F", 25.7, 0.3)
        b = interpret("F[-F]F+F+F[+F-F]F", 25.7, 0.3)
        np.testing.assert_array_equal(a, b)


class TestTurtleState:
    def test_defaults(self):
        s = TurtleState()
        assert s.position == (0.0, 0.0)
        assert s.heading == 0.0

    def test_forward_returns_new_state(self):
        s = TurtleState()
        moved = s.forward(2.0)
        assert s.position == (0.0, 0.0)
        assert moved.position == pytest.approx((2.0, 0.0))

    def test_turn(self):
        assert TurtleState().turn(-90).heading == -90
