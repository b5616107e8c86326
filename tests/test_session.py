"""Tests for the drawing session (gesture lifecycle and high score)."""

from perfect_circle.constants import (
    DEFAULT_LINE_WIDTH, DEFAULT_STROKE_COLOR, HIGH_SCORE_HOLD, HIGH_SCORE_EASE,
    LINE_WIDTH_MIN, LINE_WIDTH_MAX
)
from perfect_circle.session import DrawingSession, GestureState
from tests.conftest import CENTER, RADIUS, circle_points


def draw(session, points, now=0):
    for point in points:
        session.drag(point)
    return session.end_gesture(now)


def closed_circle():
    points = circle_points(CENTER, RADIUS, 36)
    return points + [points[0]]


def test_new_session_defaults():
    session = DrawingSession()
    assert session.state == GestureState.IDLE
    assert session.score is None
    assert session.high_score == 0.0
    assert session.path.is_empty
    assert session.stroke_color == DEFAULT_STROKE_COLOR
    assert session.line_width == DEFAULT_LINE_WIDTH


def test_first_drag_starts_drawing_without_scoring():
    session = DrawingSession()
    assert session.drag((10, 10)) is None
    assert session.is_drawing
    assert session.path.current_point == (10.0, 10.0)
    assert session.score is None


def test_live_score_updates_while_drawing():
    session = DrawingSession()
    session.drag((0, 0))
    assert session.drag((20, 0)) == 0.0
    assert session.score == 0.0


def test_live_score_keeps_previous_value_when_not_evaluable():
    session = DrawingSession()
    session.drag((0, 0))
    session.drag((50, 0))
    assert session.score == 0.0
    # Back near the start, but still too few points to sample
    assert session.drag((1, 1)) is None
    assert session.score == 0.0


def test_end_gesture_sets_high_score_and_clears_path():
    session = DrawingSession()
    assert draw(session, closed_circle(), now=500) is True
    assert session.state == GestureState.IDLE
    assert session.path.is_empty
    assert session.score >= 99.9
    assert session.high_score == session.score
    assert session.high_score_time == 500


def test_high_score_never_decreases():
    session = DrawingSession()
    draw(session, closed_circle())
    best = session.high_score

    assert draw(session, [(0, 0), (20, 0)], now=100) is False
    assert session.score == 0.0
    assert session.high_score == best


def test_end_gesture_when_idle_is_a_no_op():
    session = DrawingSession()
    assert session.end_gesture(100) is False
    assert session.high_score == 0.0
    assert session.high_score_time is None


def test_single_tap_leaves_scores_untouched():
    session = DrawingSession()
    assert draw(session, [(5, 5)]) is False
    assert session.score is None
    assert session.high_score == 0.0


def test_new_gesture_starts_fresh_path():
    session = DrawingSession()
    draw(session, [(0, 0), (30, 30)])
    session.drag((100, 100))
    assert session.path.first_point == (100.0, 100.0)
    assert len(session.path) == 1


def test_high_score_emphasis_timeline():
    session = DrawingSession()
    assert session.high_score_emphasis(0) == 0.0

    draw(session, closed_circle(), now=1000)
    assert session.high_score_emphasis(1000) == 0.0
    assert session.high_score_emphasis(1000 + HIGH_SCORE_HOLD // 2) == 0.5
    assert session.high_score_emphasis(1000 + HIGH_SCORE_HOLD) == 1.0
    assert session.high_score_emphasis(1000 + HIGH_SCORE_HOLD + HIGH_SCORE_EASE // 2) == 0.5
    assert session.high_score_emphasis(1000 + HIGH_SCORE_HOLD + HIGH_SCORE_EASE) == 0.0


def test_set_line_width_is_clamped_and_whole():
    session = DrawingSession()
    session.set_line_width(3.4)
    assert session.line_width == 3
    session.set_line_width(50)
    assert session.line_width == LINE_WIDTH_MAX
    session.set_line_width(-2)
    assert session.line_width == LINE_WIDTH_MIN
