"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from perfect_circle.path import DrawingPath


CENTER = (150.0, 150.0)
RADIUS = 100.0


def circle_points(center, radius, count, radii=None):
    """Points evenly spaced on a circle, starting at angle 0.

    If radii is given, point i uses radii[i % len(radii)] instead of radius.
    """
    points = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        r = radii[i % len(radii)] if radii else radius
        points.append((center[0] + r * math.cos(angle), center[1] + r * math.sin(angle)))
    return points


@pytest.fixture
def circle_path():
    """36 points on a circle of radius 100 around (150, 150), first point repeated."""
    points = circle_points(CENTER, RADIUS, 36)
    return DrawingPath.from_points(points + [points[0]])


@pytest.fixture
def wobbly_path():
    """36 points alternating between radius 2R and R/2, closed."""
    r = 50.0
    points = circle_points(CENTER, r, 36, radii=[2 * r, r / 2])
    return DrawingPath.from_points(points + [points[0]])


@pytest.fixture
def open_path():
    return DrawingPath.from_points([(0, 0), (20, 0)])


@pytest.fixture
def single_point_path():
    return DrawingPath.from_points([(42, 42)])
