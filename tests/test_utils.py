"""Tests for helper utilities."""

import pytest

from perfect_circle.constants import COLOR_SCORE_GREAT, COLOR_SCORE_GOOD, COLOR_SCORE_BAD
from perfect_circle.utils import gradient_color, lerp_color, score_color


@pytest.mark.parametrize("score, expected", [
    (100, COLOR_SCORE_GREAT),
    (90.5, COLOR_SCORE_GREAT),
    (90, COLOR_SCORE_GOOD),
    (70, COLOR_SCORE_GOOD),
    (69.9, COLOR_SCORE_BAD),
    (0, COLOR_SCORE_BAD),
])
def test_score_color_thresholds(score, expected):
    assert score_color(score) == expected


def test_lerp_color_clamps():
    assert lerp_color((0, 0, 0), (100, 200, 250), 0.5) == (50, 100, 125)
    assert lerp_color((0, 0, 0), (100, 200, 250), 2.0) == (100, 200, 250)


def test_gradient_color_stops():
    stops = [(255, 0, 0), (0, 0, 255), (0, 255, 0)]
    assert gradient_color(stops, 0.0) == (255, 0, 0)
    assert gradient_color(stops, 0.5) == (0, 0, 255)
    assert gradient_color(stops, 1.0) == (0, 255, 0)
