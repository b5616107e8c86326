"""Drawing path model: an ordered list of path-construction elements."""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]  # (x, y, width, height)


class ElementType(Enum):
    """Kinds of path-construction elements."""
    MOVE_TO = auto()
    LINE_TO = auto()
    QUAD_CURVE_TO = auto()
    CURVE_TO = auto()
    CLOSE_SUBPATH = auto()


# Number of points each element carries (control points first, end point last)
POINTS_PER_ELEMENT = {
    ElementType.MOVE_TO: 1,
    ElementType.LINE_TO: 1,
    ElementType.QUAD_CURVE_TO: 2,
    ElementType.CURVE_TO: 3,
    ElementType.CLOSE_SUBPATH: 0,
}


class PathElement:
    """A single element of a drawing path."""

    def __init__(self, element_type: ElementType, points: Tuple[Point, ...] = ()):
        expected = POINTS_PER_ELEMENT[element_type]
        if len(points) != expected:
            raise ValueError(
                f"{element_type.name} takes {expected} point(s), got {len(points)}"
            )
        self.type = element_type
        self.points = tuple((float(x), float(y)) for x, y in points)

    @property
    def end_point(self) -> Optional[Point]:
        return self.points[-1] if self.points else None

    def __eq__(self, other):
        if not isinstance(other, PathElement):
            return NotImplemented
        return self.type == other.type and self.points == other.points

    def __repr__(self):
        return f"PathElement({self.type.name}, {self.points})"


class DrawingPath:
    """
    Append-only path recorded during a single drag gesture.

    Points are stored in drawing order. The first element is always a move;
    the current point is the end point of the most recent element.
    """

    def __init__(self):
        self.elements: List[PathElement] = []
        self._subpath_start: Optional[Point] = None
        self._current_point: Optional[Point] = None

    @classmethod
    def from_points(cls, points) -> "DrawingPath":
        """Build a polyline path: a move to the first point, lines to the rest."""
        path = cls()
        for i, point in enumerate(points):
            if i == 0:
                path.move_to(point)
            else:
                path.line_to(point)
        return path

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def first_point(self) -> Optional[Point]:
        """First recorded point (the start of the drawing)."""
        for element in self.elements:
            if element.points:
                return element.points[0]
        return None

    @property
    def current_point(self) -> Optional[Point]:
        """Most recently recorded end point."""
        return self._current_point

    def _append(self, element: PathElement):
        if element.type != ElementType.MOVE_TO and self._current_point is None:
            raise ValueError("Path must start with move_to")
        self.elements.append(element)

    def move_to(self, point: Point):
        element = PathElement(ElementType.MOVE_TO, (point,))
        self._append(element)
        self._subpath_start = element.end_point
        self._current_point = element.end_point

    def line_to(self, point: Point):
        element = PathElement(ElementType.LINE_TO, (point,))
        self._append(element)
        self._current_point = element.end_point

    def quad_curve_to(self, control: Point, point: Point):
        element = PathElement(ElementType.QUAD_CURVE_TO, (control, point))
        self._append(element)
        self._current_point = element.end_point

    def curve_to(self, control1: Point, control2: Point, point: Point):
        element = PathElement(ElementType.CURVE_TO, (control1, control2, point))
        self._append(element)
        self._current_point = element.end_point

    def close_subpath(self):
        """Close the current subpath; the current point returns to its start."""
        self._append(PathElement(ElementType.CLOSE_SUBPATH))
        self._current_point = self._subpath_start

    def iter_points(self) -> Iterator[Point]:
        """Yield every recorded point, control points included, in order."""
        for element in self.elements:
            yield from element.points

    def end_points(self) -> List[Point]:
        """End point of each element, for drawing the stroke as a polyline."""
        return [e.end_point for e in self.elements if e.end_point is not None]

    def bounding_rect(self) -> Optional[Rect]:
        """Smallest axis-aligned rect containing all points, or None if empty."""
        points = list(self.iter_points())
        if not points:
            return None
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        min_x, min_y = min(xs), min(ys)
        return (min_x, min_y, max(xs) - min_x, max(ys) - min_y)
