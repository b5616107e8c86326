"""Main game loop and input handling."""

import logging

import pygame

import perfect_circle.constants as constants
from perfect_circle.constants import FPS, PADDING, WINDOW_SCALE
from perfect_circle.canvas import Canvas
from perfect_circle.renderer import Renderer, register_fonts
from perfect_circle.session import DrawingSession
from perfect_circle.ui.controls import ColorPicker, LineWidthSlider
from perfect_circle.ui.hud import HUD

logger = logging.getLogger(__name__)


class Game:
    """Main game class managing the window, input and the game loop."""

    def __init__(self):
        pygame.init()
        pygame.display.set_caption("Perfect Circle")

        # Calculate window size based on screen resolution
        display_info = pygame.display.Info()
        screen_w, screen_h = display_info.current_w, display_info.current_h

        # Portrait 2:3 window scaled to a percentage of the screen height
        if screen_h > 0:
            window_height = int(screen_h * WINDOW_SCALE)
            window_width = int(window_height * 2 / 3)
            if screen_w > 0 and window_width > screen_w:
                window_width = int(screen_w * WINDOW_SCALE)
                window_height = int(window_width * 3 / 2)
        else:
            window_width, window_height = constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT

        # Update constants module so UI components use correct sizes
        constants.WINDOW_WIDTH = window_width
        constants.WINDOW_HEIGHT = window_height
        logger.info("Window size %dx%d", window_width, window_height)

        self.screen = pygame.display.set_mode((window_width, window_height))
        self.clock = pygame.time.Clock()
        self.running = True

        self.window_width = window_width
        self.window_height = window_height

        # One-time font registration, before any font is created
        register_fonts()
        self.renderer = Renderer(self.screen)

        self.session = DrawingSession()

        # UI components
        self.hud = HUD(self.renderer)
        self.color_picker = ColorPicker(self.renderer)
        self.line_width_slider = LineWidthSlider(self.renderer)
        self.canvas = self._create_layout()

    def _create_layout(self) -> Canvas:
        """Lay out controls, canvas and score labels top to bottom."""
        w, h = self.window_width, self.window_height
        center_x = w // 2

        self.color_picker.layout(center_x, int(h * 0.10))
        self.line_width_slider.layout(2 * PADDING, w - 2 * PADDING, int(h * 0.19))

        canvas_size = min(w - 4 * PADDING, int(h * 0.58))
        canvas_top = int(h * 0.24)
        canvas = Canvas((center_x - canvas_size / 2, canvas_top), canvas_size)

        canvas_bottom = canvas_top + canvas_size
        self.hud.layout(
            center_x,
            int(h * 0.05),
            canvas_bottom + int(h * 0.06),
            canvas_bottom + int(h * 0.11)
        )
        return canvas

    def handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return

            # Controls only take input while no drawing is in progress
            if not self.session.is_drawing:
                color = self.color_picker.handle_event(event)
                if color is not None:
                    self.session.stroke_color = color
                    continue

                width = self.line_width_slider.handle_event(event)
                if width is not None:
                    self.session.set_line_width(width)
                    continue
                if self.line_width_slider.dragging:
                    continue

            self._handle_drawing_event(event)

    def _handle_drawing_event(self, event: pygame.event.Event):
        """Feed pointer events on the canvas into the drawing session."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            point = self.canvas.screen_to_canvas(*event.pos)
            if point is not None:
                self.session.drag(point)

        elif event.type == pygame.MOUSEMOTION and self.session.is_drawing:
            point = self.canvas.screen_to_canvas(*event.pos, strict=False)
            self.session.drag(point)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.session.is_drawing:
                self.session.end_gesture(pygame.time.get_ticks())

    def draw(self):
        """Draw the whole screen."""
        now = pygame.time.get_ticks()
        self.renderer.clear()

        self.hud.draw_title()
        self.color_picker.draw(self.session.stroke_color)
        self.line_width_slider.draw(self.session.line_width)

        self.canvas.draw(
            self.renderer,
            self.session.path,
            self.session.stroke_color,
            self.session.line_width
        )

        self.hud.draw_scores(
            self.session.score,
            self.session.high_score,
            self.session.high_score_emphasis(now)
        )

        pygame.display.flip()

    def run(self):
        """Main game loop."""
        while self.running:
            self.handle_events()
            self.draw()
            self.clock.tick(FPS)

        pygame.quit()
