"""Stroke controls: color swatches and line width slider."""

from typing import List, Optional, Tuple

import pygame

from perfect_circle.constants import (
    STROKE_COLORS, SWATCH_SIZE, SWATCH_SPACING,
    LINE_WIDTH_MIN, LINE_WIDTH_MAX, LINE_WIDTH_STEP,
    SLIDER_HEIGHT, SLIDER_KNOB_RADIUS,
    COLOR_SLIDER_TRACK, COLOR_SLIDER_FILL, COLOR_SLIDER_KNOB, COLOR_TEXT,
    FONT_SIZE_LABEL
)
from perfect_circle.utils import clamp


class ColorPicker:
    """Row of color swatches after a "Color:" label."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.swatches: List[Tuple[Tuple[int, int, int], pygame.Rect]] = []
        self.label_pos = (0, 0)

    def layout(self, center_x: int, y: int):
        """Create swatch rects centered on center_x at height y."""
        self.swatches = []
        count = len(STROKE_COLORS)
        row_width = count * SWATCH_SIZE + (count - 1) * SWATCH_SPACING
        label_width = self.renderer.get_font(FONT_SIZE_LABEL).size("Color:")[0] + SWATCH_SPACING
        start_x = center_x - (row_width + label_width) // 2

        self.label_pos = (start_x, y + SWATCH_SIZE // 2)
        x = start_x + label_width
        for color in STROKE_COLORS:
            self.swatches.append((color, pygame.Rect(x, y, SWATCH_SIZE, SWATCH_SIZE)))
            x += SWATCH_SIZE + SWATCH_SPACING

    def handle_event(self, event: pygame.event.Event) -> Optional[Tuple[int, int, int]]:
        """Handle input events. Returns the picked color, if any."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for color, rect in self.swatches:
                if rect.collidepoint(event.pos):
                    return color
        return None

    def draw(self, selected: Tuple[int, int, int]):
        self.renderer.draw_label("Color:", self.label_pos, COLOR_TEXT)

        for color, rect in self.swatches:
            pygame.draw.rect(self.renderer.screen, color, rect, border_radius=SWATCH_SIZE // 2)
            if color == selected:
                pygame.draw.rect(
                    self.renderer.screen, COLOR_TEXT,
                    rect.inflate(6, 6), 3,
                    border_radius=SWATCH_SIZE // 2 + 3
                )


class LineWidthSlider:
    """Horizontal slider for the stroke width, snapped to whole steps."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.track: Optional[pygame.Rect] = None
        self.label_pos = (0, 0)
        self.dragging = False

    def layout(self, left: int, right: int, y: int):
        """Place the label at left and the track up to right, centered on y."""
        self.label_pos = (left, y)
        label_width = self.renderer.get_font(FONT_SIZE_LABEL).size("Line Width:")[0]
        track_left = left + label_width + 2 * SLIDER_KNOB_RADIUS
        self.track = pygame.Rect(
            track_left, y - SLIDER_HEIGHT // 2,
            max(1, right - SLIDER_KNOB_RADIUS - track_left), SLIDER_HEIGHT
        )

    def value_at(self, x: float) -> int:
        """Slider value for a screen x coordinate."""
        t = clamp((x - self.track.left) / self.track.width, 0.0, 1.0)
        raw = LINE_WIDTH_MIN + t * (LINE_WIDTH_MAX - LINE_WIDTH_MIN)
        steps = round((raw - LINE_WIDTH_MIN) / LINE_WIDTH_STEP)
        return int(LINE_WIDTH_MIN + steps * LINE_WIDTH_STEP)

    def knob_x(self, value: int) -> float:
        t = (value - LINE_WIDTH_MIN) / (LINE_WIDTH_MAX - LINE_WIDTH_MIN)
        return self.track.left + t * self.track.width

    def handle_event(self, event: pygame.event.Event) -> Optional[int]:
        """Handle input events. Returns the new width while dragging."""
        if self.track is None:
            return None

        grab_area = self.track.inflate(2 * SLIDER_KNOB_RADIUS, 2 * SLIDER_KNOB_RADIUS)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if grab_area.collidepoint(event.pos):
                self.dragging = True
                return self.value_at(event.pos[0])
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self.value_at(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        return None

    def draw(self, value: int):
        self.renderer.draw_label("Line Width:", self.label_pos, COLOR_TEXT)

        screen = self.renderer.screen
        pygame.draw.rect(screen, COLOR_SLIDER_TRACK, self.track, border_radius=SLIDER_HEIGHT // 2)

        knob = self.knob_x(value)
        filled = pygame.Rect(self.track.left, self.track.top, knob - self.track.left, self.track.height)
        if filled.width > 0:
            pygame.draw.rect(screen, COLOR_SLIDER_FILL, filled, border_radius=SLIDER_HEIGHT // 2)

        pygame.draw.circle(screen, COLOR_SLIDER_KNOB, (knob, self.track.centery), SLIDER_KNOB_RADIUS)
        pygame.draw.circle(screen, COLOR_SLIDER_TRACK, (knob, self.track.centery), SLIDER_KNOB_RADIUS, 1)
