"""Endpoint-to-center conversion for elliptical arcs (SVG-style arc parameters)."""
import logging
import math

from .constants import ARC_RADIUS_EPSILON
from .geometry import GeometryError, angle_between, length_between, radians_to_degrees, unit_vector
from .types import ArcResult, Point

logger = logging.getLogger(__name__)


def _candidate(start: Point, end: Point, radius: float, angle: float) -> tuple[Point, float, float]:
    """Center at *radius* from start along *angle*, with the start/end angles seen from it."""
    u = unit_vector(angle)
    center = (start[0] + u[0]*radius, start[1] + u[1]*radius)
    return center, angle_between(start, center), angle_between(end, center)

def _short_arc_is_clockwise(start_angle: float, end_angle: float) -> bool:
    """Direction of the shorter arc between two angles (radians, in [0, 2*pi))."""
    if abs(end_angle - start_angle) > math.pi:
        if end_angle > start_angle:
            return end_angle - 2*math.pi > start_angle
        return end_angle > start_angle - 2*math.pi
    return end_angle > start_angle

def _center_side(start_angle: float, end_angle: float, is_large_arc: bool, is_clockwise: bool) -> int:
    """Which candidate circle matches the flags: +1 keeps the first, -1 selects the other."""
    if _short_arc_is_clockwise(start_angle, end_angle):
        correct = is_large_arc != is_clockwise
    else:
        correct = is_large_arc == is_clockwise
    return 1 if correct else -1

def circular_arc_center(start: Point, end: Point, radius: float,
                        is_large_arc: bool, is_clockwise: bool) -> ArcResult:
    """Center and start/end angles (degrees) of a circular arc of *radius* from start to end.

    Two circles of the given radius pass through two distinct points; the
    flags pick one. Raises GeometryError when the endpoints coincide or lie
    further apart than the diameter (beyond ARC_RADIUS_EPSILON).
    """
    if radius <= 0:
        raise ValueError(f"Radius must be positive: radius={radius}")
    if start[0] == end[0] and start[1] == end[1]:
        raise GeometryError(f"Arc start and end coincide: ({start[0]:.6f}, {start[1]:.6f})")

    chord = length_between(end, start)
    clamped = False
    if chord > 2*radius:
        if abs(chord - 2*radius) > ARC_RADIUS_EPSILON:
            raise GeometryError(
                f"Chord longer than diameter: chord={chord:.6f}, diameter={2*radius:.6f}")
        logger.debug("clamping arc radius %r to half chord %r", radius, chord/2)
        radius = chord / 2
        clamped = True

    # Half the angle the chord subtends at the center; exactly 0 when clamped.
    radius_angle = 0.0 if clamped else math.acos((chord/2) / radius)
    segment_angle = angle_between(end, start)

    center, sa, ea = _candidate(start, end, radius, segment_angle + radius_angle)
    if _center_side(sa, ea, is_large_arc, is_clockwise) < 0:
        center, sa, ea = _candidate(start, end, radius, segment_angle - radius_angle)

    return ArcResult(center, radians_to_degrees(sa), radians_to_degrees(ea))

def arc_center(start: Point, end: Point, radius_x: float, radius_y: float,
               is_large_arc: bool, is_clockwise: bool) -> ArcResult:
    """Center parameterization of an axis-aligned elliptical arc.

    The endpoints are scaled onto the unit circle, solved there, and the
    center is scaled back. The returned angles are those of the scaled
    (circular) problem, in degrees.
    """
    if radius_x <= 0 or radius_y <= 0:
        raise ValueError(f"Radii must be positive: radius_x={radius_x}, radius_y={radius_y}")
    res = circular_arc_center(
        (start[0]/radius_x, start[1]/radius_y), (end[0]/radius_x, end[1]/radius_y),
        1.0, is_large_arc, is_clockwise,
    )
    (cx, cy) = res.center
    return ArcResult((cx*radius_x, cy*radius_y), res.start_angle, res.end_angle)
