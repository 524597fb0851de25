"""Intersections of lines and segments with axis-aligned ellipses."""
import logging
import math

from .constants import ELLIPSE_PRECISION
from .types import Point

logger = logging.getLogger(__name__)


def line_equation(p1: Point, p2: Point) -> tuple[float, float]:
    """Slope and y-intercept of the line through p1 and p2.

    A vertical line has an infinite slope; coincident points give NaN.
    """
    dx = p2[0]-p1[0]; dy = p2[1]-p1[1]
    if dx == 0:
        slope = math.nan if dy == 0 else math.copysign(math.inf, dy)
    else:
        slope = dy / dx
    return slope, p1[1] - slope*p1[0]

def point_is_on_ellipse(a: float, b: float, x: float, y: float,
                        precision: int = ELLIPSE_PRECISION) -> bool:
    """True if (x, y) lies on the origin-centered ellipse with semi-axes a, b.

    The ellipse equation is rounded to *precision* decimal places before the
    comparison with 1.
    """
    return round((x/a)*(x/a) + (y/b)*(y/b), precision) == 1

def ellipse_line_intercepts(a: float, b: float, slope: float, intercept: float) -> list[Point]:
    """Points where the line y = slope*x + intercept meets the origin-centered ellipse.

    Each root of the quadratic is substituted back into the ellipse equation
    and dropped unless it checks out, which filters roots produced by
    floating-point error near tangency.
    """
    if a < 0 or b < 0:
        raise ValueError(f"Ellipse axes must be non-negative: a={a}, b={b}")
    if a == 0 or b == 0:
        return []
    # x²/a² + (m·x + c)²/b² = 1  ->  A·x² + B·x + C = 0, with B = m·c/b² (no factor 2).
    # Off-center sloped lines mostly yield roots that fail validation.
    A = 1/(a*a) + slope*slope/(b*b)
    B = slope*intercept/(b*b)
    C = intercept*intercept/(b*b) - 1
    disc = B*B - 4*A*C
    if disc < 0:
        return []
    root = math.sqrt(disc)
    result = []
    for x in ((-B+root)/(2*A), (-B-root)/(2*A)):
        y = slope*x + intercept
        if point_is_on_ellipse(a, b, x, y):
            result.append((x, y))
    return result

def _origin_segment_intersections(a: float, b: float, p1: Point, p2: Point) -> list[Point]:
    slope, intercept = line_equation(p1, p2)
    if math.isinf(slope):
        # Vertical: rotate a quarter turn clockwise, solve, rotate back.
        logger.debug("vertical segment x=%s, solving in rotated frame", p1[0])
        rotated = _origin_segment_intersections(b, a, (p1[1], -p1[0]), (p2[1], -p2[0]))
        return [(-y, x) for x, y in rotated]

    x_lo, x_hi = min(p1[0], p2[0]), max(p1[0], p2[0])
    y_lo, y_hi = min(p1[1], p2[1]), max(p1[1], p2[1])
    # Bounding-box test only; diagonal segments may pass points beyond their ends.
    return [(x, y) for x, y in ellipse_line_intercepts(a, b, slope, intercept)
            if x_lo <= x <= x_hi and y_lo <= y <= y_hi]

def ellipse_segment_intersections(a: float, b: float, p1: Point, p2: Point,
                                  center: Point = (0.0, 0.0)) -> list[Point]:
    """Points where segment p1-p2 meets the axis-aligned ellipse (a, b) centered at *center*."""
    cx, cy = center
    hits = _origin_segment_intersections(a, b, (p1[0]-cx, p1[1]-cy), (p2[0]-cx, p2[1]-cy))
    return [(x+cx, y+cy) for x, y in hits]
