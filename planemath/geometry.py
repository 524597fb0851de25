"""Vector helpers and scalar utilities shared by the intersection and arc code."""
import math
from typing import Sequence

from .types import Point

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised when a request has no valid geometric solution."""

# ============================================================
# Vector Math
# ============================================================
def vector_length(vx: float, vy: float) -> float:
    """Length of the vector (vx, vy)."""
    return math.sqrt(vx*vx + vy*vy)

def vector_angle(vx: float, vy: float) -> float:
    """Angle of the vector (vx, vy) in radians, in [0, 2*pi).

    The vector must be non-zero.
    """
    angle = math.acos(vx / vector_length(vx, vy))
    # acos only covers the upper half plane; reflect for negative y (0 stays 0)
    if vy < 0 and angle > 0:
        angle = 2*math.pi - angle
    return angle

def unit_vector(angle: float) -> Point:
    """Unit vector pointing along *angle* (radians)."""
    return (math.cos(angle), math.sin(angle))

def angle_between(p1: Point, p2: Point) -> float:
    """Angle of the vector p2 -> p1, in radians."""
    return vector_angle(p1[0]-p2[0], p1[1]-p2[1])

def length_between(p1: Point, p2: Point) -> float:
    """Length of the vector p2 -> p1."""
    return vector_length(p1[0]-p2[0], p1[1]-p2[1])

# ============================================================
# Scalar Utilities
# ============================================================
def euclidean_distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p2[0]-p1[0])**2 + (p2[1]-p1[1])**2)

def clamp(value: float, lo: float, hi: float) -> float:
    return hi if value >= hi else lo if value <= lo else value

def degrees_to_radians(degrees: float) -> float:
    return (degrees / 180.0) * math.pi

def radians_to_degrees(radians: float) -> float:
    return (radians / math.pi) * 180.0

def great_circle_distance(radius: float, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Shortest distance over the surface of a sphere between two lat/lon points (degrees).

    Result is in the unit of *radius*.
    """
    lat1, lon1 = degrees_to_radians(lat1), degrees_to_radians(lon1)
    lat2, lon2 = degrees_to_radians(lat2), degrees_to_radians(lon2)
    return radius * math.acos(math.sin(lat1)*math.sin(lat2)
                              + math.cos(lat1)*math.cos(lat2)*math.cos(lon1-lon2))

def point_on_circle(angle: float, radius: float) -> Point:
    """Point at *angle* degrees on a circle, relative to its center."""
    a = degrees_to_radians(angle)
    return (radius*math.cos(a), radius*math.sin(a))

def point_on_ellipse(angle: float, width: float, height: float) -> Point:
    """Point at *angle* degrees on an ellipse of full *width* x *height*, relative to its center."""
    a = degrees_to_radians(angle)
    return (width/2*math.cos(a), height/2*math.sin(a))

def median(values: Sequence[float]) -> float:
    """Median of an already sorted sequence. Returns 0.0 when empty."""
    n = len(values)
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2:
        return values[mid]
    return (values[mid-1] + values[mid]) / 2

def linear_interpolation(lo: float, hi: float, t: float) -> float:
    """Interpolate between *lo* and *hi*; *t* is clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    if t == 0.0:
        return lo
    if t == 1.0:
        return hi
    return (1.0-t)*lo + t*hi
