"""Square drawing canvas."""

from typing import Optional, Tuple

import pygame

from perfect_circle.constants import (
    COLOR_CANVAS, COLOR_CENTER_MARKER, CENTER_MARKER_SIZE,
    BORDER_GRADIENT, BORDER_WIDTH, BORDER_RADIUS
)
from perfect_circle.path import DrawingPath


class Canvas:
    """Square area the player draws in. Path points are in canvas coordinates."""

    def __init__(self, top_left: Tuple[float, float], size: float):
        self.top_left = top_left
        self.size = size
        self.rect = pygame.Rect(int(top_left[0]), int(top_left[1]), int(size), int(size))

    @property
    def center(self) -> Tuple[float, float]:
        """Canvas center in canvas coordinates."""
        return (self.size / 2, self.size / 2)

    def screen_to_canvas(
        self,
        screen_x: float,
        screen_y: float,
        strict: bool = True
    ) -> Optional[Tuple[float, float]]:
        """
        Convert screen coordinates to canvas coordinates.

        Returns None if outside the canvas, unless strict is False (a drag that
        started on the canvas keeps reporting points after leaving it).
        """
        rel_x = screen_x - self.top_left[0]
        rel_y = screen_y - self.top_left[1]

        if strict and (rel_x < 0 or rel_x >= self.size or rel_y < 0 or rel_y >= self.size):
            return None
        return (rel_x, rel_y)

    def canvas_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return (self.top_left[0] + x, self.top_left[1] + y)

    def draw(self, renderer, path: DrawingPath, color: Tuple[int, int, int], line_width: int):
        """Draw the canvas background, center marker, stroke and border."""
        surface = renderer.screen
        pygame.draw.rect(surface, COLOR_CANVAS, self.rect)

        # Fixed center marker
        center = self.canvas_to_screen(*self.center)
        pygame.draw.circle(surface, COLOR_CENTER_MARKER, center, CENTER_MARKER_SIZE // 2)

        # Stroke, clipped to the canvas
        points = [self.canvas_to_screen(x, y) for x, y in path.end_points()]
        previous_clip = surface.get_clip()
        surface.set_clip(self.rect)
        if len(points) >= 2:
            pygame.draw.lines(surface, color, False, points, line_width)
            # Round joints so thick strokes don't show gaps
            if line_width > 2:
                for point in points:
                    pygame.draw.circle(surface, color, point, line_width / 2)
        elif len(points) == 1:
            pygame.draw.circle(surface, color, points[0], max(1, line_width / 2))
        surface.set_clip(previous_clip)

        renderer.draw_gradient_border(self.rect, BORDER_GRADIENT, BORDER_WIDTH, BORDER_RADIUS)
