"""Tests for math helpers."""

import math

from collage.utils.math_helpers import (
    aspect_ratio,
    cumulative_rounded_errors,
    round_half_away,
    round_px,
)


def test_round_half_away_from_zero():
    assert list(round_half_away([0.5, 1.5, 2.5, -0.5, -2.5, 2.4])) == [1.0, 2.0, 3.0, -1.0, -3.0, 2.0]


def test_round_px_returns_int():
    assert round_px(412.5) == 413
    assert isinstance(round_px(3.2), int)


def test_cumulative_rounded_errors():
    assert list(cumulative_rounded_errors(-164.8, 2)) == [-165.0, -330.0]
    assert list(cumulative_rounded_errors(0.25, 4)) == [0.0, 1.0, 1.0, 1.0]


def test_aspect_ratio():
    assert aspect_ratio(300, 200) == 1.5
    assert math.isnan(aspect_ratio(300, 0))
