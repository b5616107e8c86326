"""Circle scoring - how closely a drawn path approximates a perfect circle."""

import logging
import math
from typing import List, Optional

import numpy as np

from perfect_circle.constants import CLOSED_TOLERANCE, DEFAULT_SAMPLE_RATE
from perfect_circle.path import DrawingPath, Point

logger = logging.getLogger(__name__)


def is_closed(path: DrawingPath, tolerance: float = CLOSED_TOLERANCE) -> Optional[bool]:
    """
    Check if the path starts and ends at approximately the same point.

    The test is per axis: both |dx| and |dy| between the first and the
    current point must be under the tolerance. Returns None for an empty path.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    if path.is_empty:
        return None

    start = path.first_point
    end = path.current_point
    return abs(start[0] - end[0]) < tolerance and abs(start[1] - end[1]) < tolerance


def sample_stride(sample_rate: float) -> int:
    """Keep every Nth point, N = 1 / sample_rate rounded half up."""
    if not 0 < sample_rate <= 1:
        raise ValueError(f"sample_rate must be in (0, 1], got {sample_rate}")
    return max(1, math.floor(1 / sample_rate + 0.5))


def extract_sampled_points(
    path: DrawingPath,
    sample_rate: float = DEFAULT_SAMPLE_RATE
) -> List[Point]:
    """
    Subsample the path's points, counting every coordinate in drawing order.

    Curve elements contribute their control points too, so the count is over
    all recorded coordinates rather than over segments.
    """
    return _take_every(path, sample_stride(sample_rate))


def _take_every(path: DrawingPath, stride: int) -> List[Point]:
    return [
        point
        for count, point in enumerate(path.iter_points(), start=1)
        if count % stride == 0
    ]


def calculate_circle_score(
    path: DrawingPath,
    sample_rate: float = DEFAULT_SAMPLE_RATE
) -> Optional[float]:
    """
    Score a drawn path from 0 to 100 by its deviation from a circle.

    The expected circle is centred on the path's bounding rect and inscribed
    in its shorter side. Returns None when there is nothing to grade (empty
    path or no sampled points) and 0 for a path that is not closed.
    """
    stride = sample_stride(sample_rate)
    closed = is_closed(path)
    if closed is None:
        return None
    if not closed:
        return 0.0

    x, y, width, height = path.bounding_rect()
    center = np.array([x + width / 2, y + height / 2])
    radius = min(width, height) / 2

    sampled = _take_every(path, stride)
    if not sampled:
        logger.debug("No sampled points in a %d element path", len(path))
        return None

    points = np.asarray(sampled, dtype=float)
    distances = np.hypot(points[:, 0] - center[0], points[:, 1] - center[1])
    total_deviation = float(np.sum(np.abs(distances - radius)))

    max_possible_deviation = radius * len(sampled)
    if max_possible_deviation <= 0:
        # Flat stroke: zero width or height
        return 0.0

    score = max(0.0, 100 * (1 - total_deviation / max_possible_deviation))
    logger.debug(
        "Scored %d samples: radius=%.1f deviation=%.1f score=%.1f",
        len(sampled), radius, total_deviation, score
    )
    return score
