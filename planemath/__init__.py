"""Planar geometry: line/segment/ellipse intersections and arc center solving."""

from .types import Point, Size, Rect, ArcResult
from .geometry import (
    GeometryError,
    vector_length, vector_angle, unit_vector, angle_between, length_between,
    euclidean_distance, clamp, degrees_to_radians, radians_to_degrees,
    great_circle_distance, point_on_circle, point_on_ellipse,
    median, linear_interpolation,
)
from .intersect import line_intersection, segment_intersection, rect_segment_intersection
from .ellipse import (
    line_equation, point_is_on_ellipse,
    ellipse_line_intercepts, ellipse_segment_intersections,
)
from .arc import circular_arc_center, arc_center
