"""Score display (Heads-Up Display)."""

from typing import Optional, Tuple

from perfect_circle.constants import (
    COLOR_TEXT, COLOR_SCORE_GREAT, HIGH_SCORE_SCALE
)
from perfect_circle.utils import lerp, lerp_color, score_color


class HUD:
    """Title, live score and high score."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.title_pos: Tuple[int, int] = (0, 0)
        self.score_pos: Tuple[int, int] = (0, 0)
        self.high_score_pos: Tuple[int, int] = (0, 0)

    def layout(self, center_x: int, title_y: int, score_y: int, high_score_y: int):
        self.title_pos = (center_x, title_y)
        self.score_pos = (center_x, score_y)
        self.high_score_pos = (center_x, high_score_y)

    @staticmethod
    def format_score(score: Optional[float]) -> str:
        """Whole percent, truncated like the score label always has been."""
        if score is None:
            return "--"
        return f"{int(score)}%"

    def draw_title(self):
        self.renderer.draw_text("Draw a Circle", self.title_pos, COLOR_TEXT, font_size="title", center=True)

    def draw_scores(self, score: Optional[float], high_score: float, emphasis: float):
        """Draw score and high score. emphasis in [0, 1] grows and greens the high score."""
        color = COLOR_TEXT if score is None else score_color(score)
        self.renderer.draw_text(
            f"Score: {self.format_score(score)}",
            self.score_pos,
            color,
            font_size="score",
            center=True
        )

        self.renderer.draw_text(
            f"High Score: {self.format_score(high_score)}",
            self.high_score_pos,
            lerp_color(COLOR_TEXT, COLOR_SCORE_GREAT, emphasis),
            font_size="score",
            center=True,
            scale=lerp(1.0, HIGH_SCORE_SCALE, emphasis)
        )
