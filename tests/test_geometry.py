"""Tests for planemath/geometry.py vector and scalar helpers."""
import math
import pytest
from planemath.geometry import (
    GeometryError,
    vector_length, vector_angle, unit_vector, angle_between, length_between,
    euclidean_distance, clamp, degrees_to_radians, radians_to_degrees,
    great_circle_distance, point_on_circle, point_on_ellipse,
    median, linear_interpolation,
)


def test_geometry_error_is_value_error():
    assert issubclass(GeometryError, ValueError)


# --- vector_length ---

def test_vector_length_345():
    assert vector_length(3, 4) == 5.0
    assert vector_length(-3, -4) == 5.0


# --- vector_angle ---

@pytest.mark.parametrize("vx, vy, expected", [
    (1, 0, 0.0),
    (0, 1, math.pi / 2),
    (-1, 0, math.pi),
    (0, -1, 3 * math.pi / 2),
    (1, 1, math.pi / 4),
    (1, -1, 7 * math.pi / 4),
    (-1, -1, 5 * math.pi / 4),
])
def test_vector_angle_quadrants(vx, vy, expected):
    assert abs(vector_angle(vx, vy) - expected) < 1e-12


def test_vector_angle_range(rng):
    for vx, vy in rng.uniform(-100, 100, size=(200, 2)):
        a = vector_angle(float(vx), float(vy))
        assert 0 <= a < 2 * math.pi
        assert abs(math.cos(a) - vx / math.hypot(vx, vy)) < 1e-9
        assert abs(math.sin(a) - vy / math.hypot(vx, vy)) < 1e-9


def test_vector_angle_tiny_negative_y_stays_zero():
    assert vector_angle(1.0, -1e-17) == 0.0


def test_vector_angle_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        vector_angle(0, 0)


# --- unit_vector ---

def test_unit_vector():
    u = unit_vector(math.pi / 2)
    assert abs(u[0]) < 1e-15
    assert abs(u[1] - 1.0) < 1e-15
    assert abs(vector_length(*unit_vector(1.234)) - 1.0) < 1e-15


# --- angle_between / length_between ---

def test_angle_between_points_from_second_to_first():
    # Vector from (1, 1) to (1, 3) points straight up
    assert abs(angle_between((1, 3), (1, 1)) - math.pi / 2) < 1e-12
    assert abs(angle_between((1, 1), (1, 3)) - 3 * math.pi / 2) < 1e-12


def test_length_between():
    assert length_between((4, 6), (1, 2)) == 5.0


# --- scalar helpers ---

def test_euclidean_distance():
    assert euclidean_distance((1, 2), (4, 6)) == 5.0


@pytest.mark.parametrize("value, expected", [(-1, 0), (0, 0), (0.5, 0.5), (1, 1), (7, 1)])
def test_clamp(value, expected):
    assert clamp(value, 0, 1) == expected


def test_degrees_radians():
    assert abs(degrees_to_radians(360.0) - 2 * math.pi) < 1e-15
    assert abs(radians_to_degrees(2 * math.pi) - 360.0) < 1e-12
    assert abs(radians_to_degrees(degrees_to_radians(123.4)) - 123.4) < 1e-12


def test_great_circle_distance_bellingham_mt_vernon():
    d = great_circle_distance(3963, -48.791485, -122.482967, -48.419859, -122.339973)
    assert abs(d - 26.5233299782886) < 1e-6


def test_great_circle_distance_quarter_meridian():
    d = great_circle_distance(1.0, 0, 0, 90, 0)
    assert abs(d - math.pi / 2) < 1e-12


def test_point_on_circle():
    p = point_on_circle(90, 2.0)
    assert abs(p[0]) < 1e-12
    assert abs(p[1] - 2.0) < 1e-12


def test_point_on_ellipse_uses_half_extents():
    p = point_on_ellipse(0, 10, 4)
    assert abs(p[0] - 5.0) < 1e-12
    q = point_on_ellipse(270, 10, 4)
    assert abs(q[1] + 2.0) < 1e-12


def test_median():
    assert median([]) == 0.0
    assert median([4.0]) == 4.0
    assert median([1.0, 2.0, 9.0]) == 2.0
    assert median([1.0, 2.0, 4.0, 9.0]) == 3.0


def test_linear_interpolation():
    assert linear_interpolation(10, 20, 0.25) == 12.5
    assert linear_interpolation(10, 20, -3) == 10
    assert linear_interpolation(10, 20, 3) == 20
    assert linear_interpolation(0.1, 0.7, 1.0) == 0.7
