"""Drawing session: gesture lifecycle, live score and high score."""

import logging
from enum import Enum, auto
from typing import Optional

from perfect_circle.constants import (
    DEFAULT_SAMPLE_RATE, DEFAULT_STROKE_COLOR, DEFAULT_LINE_WIDTH,
    LINE_WIDTH_MIN, LINE_WIDTH_MAX, HIGH_SCORE_HOLD, HIGH_SCORE_EASE
)
from perfect_circle.path import DrawingPath, Point
from perfect_circle.scoring import calculate_circle_score
from perfect_circle.utils import clamp, ease_in_out_quad

logger = logging.getLogger(__name__)


class GestureState(Enum):
    """Drag gesture state."""
    IDLE = auto()
    DRAWING = auto()


class DrawingSession:
    """
    Application state for one run of the game.

    Holds the path being drawn, the latest score and the high score. The
    score is None until a drawing has produced a gradable path. The high
    score only ever goes up and lives as long as the process.
    """

    def __init__(self, sample_rate: float = DEFAULT_SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.state = GestureState.IDLE
        self.path = DrawingPath()

        self.score: Optional[float] = None
        self.high_score = 0.0
        self.high_score_time: Optional[int] = None  # ms tick of last new high score

        # Stroke appearance
        self.stroke_color = DEFAULT_STROKE_COLOR
        self.line_width = DEFAULT_LINE_WIDTH

    @property
    def is_drawing(self) -> bool:
        return self.state == GestureState.DRAWING

    def set_line_width(self, width: float):
        self.line_width = int(clamp(round(width), LINE_WIDTH_MIN, LINE_WIDTH_MAX))

    def drag(self, point: Point) -> Optional[float]:
        """Handle a drag sample: the first one starts the path, later ones extend it."""
        if not self.is_drawing:
            self.begin_gesture(point)
            return None
        return self.add_point(point)

    def begin_gesture(self, point: Point):
        """Start a new drawing at the given point."""
        self.path = DrawingPath()
        self.path.move_to(point)
        self.state = GestureState.DRAWING

    def add_point(self, point: Point) -> Optional[float]:
        """Extend the path and rescore it. Keeps the previous score on None."""
        self.path.line_to(point)
        new_score = calculate_circle_score(self.path, self.sample_rate)
        if new_score is not None:
            self.score = new_score
        return new_score

    def end_gesture(self, now: int = 0) -> bool:
        """
        Finish the drawing, score it one last time and clear the path.

        Returns True if the drawing set a new high score.
        """
        if not self.is_drawing:
            return False

        final_score = calculate_circle_score(self.path, self.sample_rate)
        if final_score is not None:
            self.score = final_score

        self.state = GestureState.IDLE
        self.path = DrawingPath()

        if self.score is not None and self.score > self.high_score:
            logger.info("New high score: %.1f (was %.1f)", self.score, self.high_score)
            self.high_score = self.score
            self.high_score_time = now
            return True

        logger.info("Drawing finished, score: %s", self._format_score(self.score))
        return False

    def high_score_emphasis(self, now: int) -> float:
        """
        Celebration strength after a new high score, from 0 to 1.

        Ramps up over the hold time, then eases back to 0.
        """
        if self.high_score_time is None:
            return 0.0

        elapsed = now - self.high_score_time
        if elapsed < 0:
            return 0.0
        if elapsed < HIGH_SCORE_HOLD:
            return ease_in_out_quad(elapsed / HIGH_SCORE_HOLD)
        elapsed -= HIGH_SCORE_HOLD
        if elapsed < HIGH_SCORE_EASE:
            return 1.0 - ease_in_out_quad(elapsed / HIGH_SCORE_EASE)
        return 0.0

    @staticmethod
    def _format_score(score: Optional[float]) -> str:
        return "n/a" if score is None else f"{score:.1f}"
