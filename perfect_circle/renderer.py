"""Main rendering logic for the game."""

import logging
import os
from typing import Dict, Optional, Tuple

import pygame

import perfect_circle.constants as constants
from perfect_circle.constants import (
    COLOR_BACKGROUND, COLOR_TEXT, FONT_FILE,
    FONT_SIZE_TITLE, FONT_SIZE_LABEL, FONT_SIZE_SCORE
)
from perfect_circle.utils import gradient_color

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "assets")

# Path of the registered custom font, None means pygame's default font
_font_path: Optional[str] = None


def register_fonts(assets_dir: str = ASSETS_DIR) -> Optional[str]:
    """
    One-time font registration, run by the game at startup.

    Returns the path of the custom font, or None if it is not available.
    """
    global _font_path
    path = os.path.join(assets_dir, FONT_FILE)
    if os.path.isfile(path):
        _font_path = path
        logger.info("Registered font %s", path)
    else:
        _font_path = None
        logger.warning("Font %s not found, using default font", path)
    return _font_path


class Renderer:
    """Handles all rendering for the game."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._last_height = 0
        self._font_cache: Dict[int, pygame.font.Font] = {}
        self._update_fonts()

    def _update_fonts(self):
        """Update font sizes based on current window height."""
        h = constants.WINDOW_HEIGHT
        if h == self._last_height:
            return  # No change needed

        self._last_height = h
        self._font_cache.clear()
        self.font_title = self.get_font(FONT_SIZE_TITLE)
        self.font_label = self.get_font(FONT_SIZE_LABEL)
        self.font_score = self.get_font(FONT_SIZE_SCORE)

    def get_font(self, size: int) -> pygame.font.Font:
        """Font at a size given for a 900px high window, scaled to the current one."""
        scaled = max(12, int(size * constants.WINDOW_HEIGHT / 900.0))
        font = self._font_cache.get(scaled)
        if font is None:
            font = pygame.font.Font(_font_path, scaled)
            self._font_cache[scaled] = font
        return font

    def clear(self):
        """Clear the screen with background color."""
        self.screen.fill(COLOR_BACKGROUND)

    def draw_text(
        self,
        text: str,
        position: Tuple[float, float],
        color: Tuple[int, int, int] = COLOR_TEXT,
        font_size: str = "label",
        center: bool = False,
        scale: float = 1.0
    ) -> pygame.Rect:
        """Draw text on the screen."""
        # Update fonts if window size changed
        self._update_fonts()

        if font_size == "title":
            font = self.font_title
        elif font_size == "score":
            font = self.font_score
        else:
            font = self.font_label

        text_surface = font.render(text, True, color)
        if scale != 1.0:
            w, h = text_surface.get_size()
            text_surface = pygame.transform.smoothscale(
                text_surface, (max(1, int(w * scale)), max(1, int(h * scale)))
            )

        if center:
            rect = text_surface.get_rect(center=position)
        else:
            rect = text_surface.get_rect(topleft=position)
        self.screen.blit(text_surface, rect)
        return rect

    def draw_label(
        self,
        text: str,
        midleft: Tuple[float, float],
        color: Tuple[int, int, int] = COLOR_TEXT
    ) -> pygame.Rect:
        """Draw a control label vertically centered on midleft."""
        self._update_fonts()
        text_surface = self.font_label.render(text, True, color)
        rect = text_surface.get_rect(midleft=midleft)
        self.screen.blit(text_surface, rect)
        return rect

    def draw_gradient_border(
        self,
        rect: pygame.Rect,
        colors,
        width: int,
        border_radius: int = 0
    ):
        """
        Draw a rounded border whose color runs left to right through the stops.

        The gradient is painted column by column on a separate surface and
        masked with the rounded outline.
        """
        outer = rect.inflate(width, width)
        gradient = pygame.Surface(outer.size, pygame.SRCALPHA)
        span = max(1, outer.width - 1)
        for x in range(outer.width):
            color = gradient_color(colors, x / span)
            pygame.draw.line(gradient, color, (x, 0), (x, outer.height - 1))

        mask = pygame.Surface(outer.size, pygame.SRCALPHA)
        pygame.draw.rect(
            mask, (255, 255, 255, 255), mask.get_rect(), width,
            border_radius=border_radius + width // 2
        )
        gradient.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        self.screen.blit(gradient, outer.topleft)
