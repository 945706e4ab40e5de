"""Uniform random numbers, directions and identifiers."""

from __future__ import annotations

import math
import random

from vegakit.mathutils import Vector2, rotate_vector
from vegakit.uuidgen import random_uuid

__all__ = ["RandomSource"]


class RandomSource:
    """A source of uniformly distributed values, optionally seeded."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def integer(self, minimum: int, maximum: int) -> int:
        """Return an integer in ``[minimum, maximum]``."""
        if minimum > maximum:
            raise ValueError(f"empty range: {minimum} > {maximum}")
        return self._rng.randint(minimum, maximum)

    def uniform(self, minimum: float, maximum: float) -> float:
        """Return a float in ``[minimum, maximum)``."""
        if minimum > maximum:
            raise ValueError(f"empty range: {minimum} > {maximum}")
        value = minimum + (maximum - minimum) * self._rng.random()
        return minimum if value >= maximum and maximum > minimum else value

    def boolean(self) -> bool:
        return self.integer(0, 1) == 1

    def in_unit_circle(self) -> Vector2:
        """Return a random point on the unit circle."""
        theta = self.uniform(0.0, 2.0 * math.pi)
        return Vector2(math.cos(theta), math.sin(theta))

    def direction(
        self, angle_min: float, angle_max: float, base: Vector2 = Vector2(1.0, 0.0)
    ) -> Vector2:
        """Rotate ``base`` by a random angle in degrees between the bounds."""
        return rotate_vector(self.uniform(angle_min, angle_max), base)

    def uuid(self) -> str:
        """Return a random version 4 identifier as text."""
        return str(random_uuid(self._rng))