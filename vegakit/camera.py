"""Orthographic 2D camera holding a view with zoom relative to a base size."""

from __future__ import annotations

import math
from dataclasses import dataclass

from vegakit.mathutils import Vector2

__all__ = ["FloatRect", "OrthoCamera"]


@dataclass(frozen=True)
class FloatRect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> Vector2:
        return Vector2(self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)


_DEFAULT_VIEW = FloatRect(0.0, 0.0, 1000.0, 1000.0)
_FULL_VIEWPORT = FloatRect(0.0, 0.0, 1.0, 1.0)


def _wrap_degrees(angle: float) -> float:
    wrapped = math.fmod(angle, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    return wrapped


class OrthoCamera:
    """A view (center, size, rotation, viewport) with a zoom factor.

    The zoom scales the base size set through ``set_size``; the view size is
    always ``base size * zoom`` after a size or zoom change.
    """

    def __init__(
        self,
        center: Vector2 | None = None,
        size: Vector2 | None = None,
        *,
        rect: FloatRect | None = None,
    ) -> None:
        view = rect if rect is not None else _DEFAULT_VIEW
        self._center = center if center is not None else view.center
        self._size = size if size is not None else view.size
        self._base_size = size if size is not None else Vector2(1.0, 1.0)
        self._rotation = 0.0
        self._viewport = _FULL_VIEWPORT
        self._zoom = 1.0

    @property
    def center(self) -> Vector2:
        return self._center

    @property
    def size(self) -> Vector2:
        return self._size

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def viewport(self) -> FloatRect:
        return self._viewport

    @property
    def zoom(self) -> float:
        return self._zoom

    def set_center(self, x: float, y: float) -> None:
        self._center = Vector2(x, y)

    def set_size(self, width: float, height: float) -> None:
        self._base_size = Vector2(width, height)
        self._size = self._base_size * self._zoom

    def set_rotation(self, angle: float) -> None:
        self._rotation = _wrap_degrees(angle)

    def set_viewport(self, viewport: FloatRect) -> None:
        self._viewport = viewport

    def reset(self, rectangle: FloatRect) -> None:
        """Show exactly ``rectangle``, with no rotation."""
        self._center = rectangle.center
        self._size = rectangle.size
        self._rotation = 0.0

    def move(self, offset_x: float, offset_y: float) -> None:
        self._center = self._center + Vector2(offset_x, offset_y)

    def rotate(self, angle: float) -> None:
        self.set_rotation(self._rotation + angle)

    def set_zoom(self, factor: float) -> None:
        self._zoom = factor
        self._size = self._base_size * factor

    def copy(self) -> OrthoCamera:
        other = OrthoCamera.__new__(OrthoCamera)
        other.__dict__.update(self.__dict__)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrthoCamera):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        return (
            f"OrthoCamera(center={self._center}, size={self._size}, "
            f"rotation={self._rotation}, zoom={self._zoom})"
        )