"""Helper utility functions."""

from typing import Tuple

from perfect_circle.constants import (
    COLOR_SCORE_GREAT, COLOR_SCORE_GOOD, COLOR_SCORE_BAD,
    SCORE_GREAT_THRESHOLD, SCORE_GOOD_THRESHOLD
)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out function."""
    if t < 0.5:
        return 2 * t * t
    else:
        return 1 - (-2 * t + 2) ** 2 / 2


def lerp_color(
    c1: Tuple[int, int, int],
    c2: Tuple[int, int, int],
    t: float
) -> Tuple[int, int, int]:
    """Interpolate between two RGB colors."""
    t = clamp(t, 0.0, 1.0)
    return (
        int(lerp(c1[0], c2[0], t)),
        int(lerp(c1[1], c2[1], t)),
        int(lerp(c1[2], c2[2], t))
    )


def gradient_color(colors, t: float) -> Tuple[int, int, int]:
    """Sample a multi-stop gradient at position t in [0, 1]."""
    if len(colors) == 1:
        return colors[0]
    t = clamp(t, 0.0, 1.0)
    scaled = t * (len(colors) - 1)
    index = min(int(scaled), len(colors) - 2)
    return lerp_color(colors[index], colors[index + 1], scaled - index)


def score_color(score: float) -> Tuple[int, int, int]:
    """Display color for a score: green above 90, orange from 70, else red."""
    if score > SCORE_GREAT_THRESHOLD:
        return COLOR_SCORE_GREAT
    elif score >= SCORE_GOOD_THRESHOLD:
        return COLOR_SCORE_GOOD
    else:
        return COLOR_SCORE_BAD
