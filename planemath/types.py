"""Shared value types for planar geometry."""
from typing import NamedTuple

Point = tuple[float, float]


class _SizeFields(NamedTuple):
    width: float; height: float


class Size(_SizeFields):
    """Width/height pair. Both extents must be non-negative."""
    __slots__ = ()

    def __new__(cls, width: float, height: float):
        if width < 0:
            raise ValueError(f"Width must be non-negative: width={width}")
        if height < 0:
            raise ValueError(f"Height must be non-negative: height={height}")
        return super().__new__(cls, width, height)


class _RectFields(NamedTuple):
    x: float; y: float; width: float; height: float


class Rect(_RectFields):
    """Axis-aligned rectangle, y growing downward (top = y, bottom = y + height)."""
    __slots__ = ()

    def __new__(cls, x: float, y: float, width: float, height: float):
        if width < 0:
            raise ValueError(f"Width must be non-negative: width={width}")
        if height < 0:
            raise ValueError(f"Height must be non-negative: height={height}")
        return super().__new__(cls, x, y, width, height)

    @classmethod
    def from_point_size(cls, p: Point, size: Size) -> "Rect":
        return cls(p[0], p[1], size[0], size[1])

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class ArcResult(NamedTuple):
    """Center parameterization of an arc; angles in degrees."""
    center: Point
    start_angle: float
    end_angle: float
