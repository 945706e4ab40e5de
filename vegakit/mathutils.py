"""Vector math, interpolation, angles and unit conversion helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from vegakit.converter import Origins

__all__ = [
    "Vector2",
    "PIXELS_PER_METER",
    "FLOAT_EPSILON",
    "origin_offset",
    "clamp",
    "clamp01",
    "lerp",
    "lerp_vector",
    "lerp_color",
    "sqr_magnitude",
    "magnitude",
    "get_normal",
    "normal_vector",
    "distance",
    "dot",
    "cross",
    "radian_to_degree",
    "degree_to_radian",
    "angle_radian",
    "angle",
    "angle_vector",
    "angle_to_cos",
    "angle_to_sin",
    "project_on_slope",
    "rotate_vector",
    "can_file_open",
    "pixel_to_meter",
    "meter_to_pixel",
    "is_equal",
]

PIXELS_PER_METER = 100.0
METERS_PER_PIXEL = 1.0 / PIXELS_PER_METER
# Machine epsilon of a single-precision float.
FLOAT_EPSILON = 1.1920928955078125e-07

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vector2:
    """Immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


def origin_offset(preset: Origins, width: float, height: float) -> Vector2:
    """Return the origin point a preset selects inside a box of the given size."""
    index = int(preset)
    return Vector2(width * (index % 3) * 0.5, height * (index // 3) * 0.5)


def clamp(value: float, minimum: float, maximum: float) -> float:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def lerp(start: float, end: float, t: float, clamp_t: bool = True) -> float:
    if clamp_t:
        t = clamp01(t)
    return start + (end - start) * t


def lerp_vector(start: Vector2, end: Vector2, t: float, clamp_t: bool = True) -> Vector2:
    if clamp_t:
        t = clamp01(t)
    return start + (end - start) * t


def lerp_color(start: Color, end: Color, t: float, clamp_t: bool = True) -> Color:
    """Interpolate two RGBA colours channel by channel, truncating to bytes."""
    if clamp_t:
        t = clamp01(t)
    r, g, b, a = (int(lerp(s, e, t, clamp_t)) & 0xFF for s, e in zip(start, end))
    return (r, g, b, a)


def sqr_magnitude(vec: Vector2) -> float:
    return vec.x * vec.x + vec.y * vec.y


def magnitude(vec: Vector2) -> float:
    return math.sqrt(sqr_magnitude(vec))


def get_normal(vec: Vector2) -> Vector2:
    """Return ``vec`` scaled to unit length, or the zero vector."""
    mag = magnitude(vec)
    if mag == 0:
        return Vector2(0.0, 0.0)
    return vec / mag


def normal_vector(v1: Vector2, v2: Vector2) -> Vector2:
    """Unit normal of the segment from ``v1`` to ``v2``."""
    v = v2 - v1
    normal = Vector2(v.y, -v.x)
    mag = magnitude(normal)
    if mag != 0:
        normal = normal / mag
    return normal


def distance(p1: Vector2, p2: Vector2) -> float:
    return magnitude(p2 - p1)


def dot(v1: Vector2, v2: Vector2) -> float:
    return v1.x * v2.x + v1.y * v2.y


def cross(v1: Vector2, v2: Vector2) -> float:
    return v1.x * v2.y - v1.y * v2.x


def radian_to_degree(radian: float) -> float:
    return radian * (180.0 / math.pi)


def degree_to_radian(degree: float) -> float:
    return degree * (math.pi / 180.0)


def angle_radian(vec: Vector2) -> float:
    return math.atan2(vec.y, vec.x)


def angle(vec: Vector2) -> float:
    """Direction of ``vec`` in degrees."""
    return radian_to_degree(angle_radian(vec))


def angle_vector(degree: float) -> Vector2:
    """Unit vector pointing at ``degree``."""
    return Vector2(angle_to_cos(degree), angle_to_sin(degree))


def angle_to_cos(degree: float) -> float:
    return math.cos(degree_to_radian(degree))


def angle_to_sin(degree: float) -> float:
    return math.sin(degree_to_radian(degree))


def project_on_slope(velocity: Vector2, slope_normal: Vector2) -> Vector2:
    """Remove from ``velocity`` its component along the unit ``slope_normal``."""
    return velocity - slope_normal * dot(velocity, slope_normal)


def rotate_vector(angle_degrees: float, target: Vector2) -> Vector2:
    """Rotate ``target`` by ``angle_degrees`` (clockwise on a y-down screen)."""
    rad = degree_to_radian(angle_degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    return Vector2(cos * target.x - sin * target.y, sin * target.x + cos * target.y)


def can_file_open(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def pixel_to_meter(vec: Vector2) -> Vector2:
    return Vector2(vec.x * METERS_PER_PIXEL, vec.y * METERS_PER_PIXEL)


def meter_to_pixel(vec: Vector2) -> Vector2:
    return Vector2(vec.x * PIXELS_PER_METER, vec.y * PIXELS_PER_METER)


def is_equal(a: float, b: float) -> bool:
    return abs(a - b) <= FLOAT_EPSILON