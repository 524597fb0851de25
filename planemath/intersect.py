"""Line, segment and rectangle intersection via the determinant method."""
from .types import Point, Rect


def _intersect(p1: Point, p2: Point, p3: Point, p4: Point, segments: bool) -> Point | None:
    """Shared core for line and segment intersection.

    Parallel and collinear inputs (zero determinant) never intersect, even
    when collinear segments overlap. In segment mode the parameters must lie
    strictly inside (0, 1), so touching endpoints do not count.
    """
    (x1, y1), (x2, y2), (x3, y3), (x4, y4) = p1, p2, p3, p4
    den = (y4-y3)*(x2-x1) - (x4-x3)*(y2-y1)
    if den == 0:
        return None
    ua = ((x4-x3)*(y1-y3) - (y4-y3)*(x1-x3)) / den
    ub = ((x2-x1)*(y1-y3) - (y2-y1)*(x1-x3)) / den
    if segments and not (0 < ua < 1 and 0 < ub < 1):
        return None
    return (x1 + ua*(x2-x1), y1 + ua*(y2-y1))

def line_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersection of the infinite lines through p1-p2 and p3-p4, or None if parallel."""
    return _intersect(p1, p2, p3, p4, segments=False)

def segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersection of segments p1-p2 and p3-p4, or None if they do not cross."""
    return _intersect(p1, p2, p3, p4, segments=True)

def rect_segment_intersection(rect: Rect | tuple[float, float, float, float],
                              p1: Point, p2: Point) -> Point | None:
    """First intersection of segment p1-p2 with the sides of *rect*.

    Sides are tried in the order left, top, right, bottom and the first hit
    is returned, not the nearest one.
    """
    x, y, w, h = rect
    sides = [
        ((x, y), (x, y+h)),        # left
        ((x, y), (x+w, y)),        # top
        ((x+w, y), (x+w, y+h)),    # right
        ((x, y+h), (x+w, y+h)),    # bottom
    ]
    for a, b in sides:
        hit = segment_intersection(a, b, p1, p2)
        if hit is not None:
            return hit
    return None
