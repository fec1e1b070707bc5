"""Two-dimensional coordinate pair with vector arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from naturegp.errors import DivisionByZeroError, IndexOutOfRangeError


@dataclass(eq=False, slots=True)
class XY:
    """A mutable pair of coordinates (x, y)."""

    x: float = 0.0
    y: float = 0.0

    resolution = 1e-7

    @classmethod
    def from_scalar(cls, scalar: float) -> XY:
        """Build a pair with both coordinates equal to ``scalar``."""
        return cls(scalar, scalar)

    @classmethod
    def zero(cls) -> XY:
        return cls(0.0, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XY):
            return NotImplemented
        return self.is_equal(other, self.resolution)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: XY) -> XY:
        return self.added(other)

    def __sub__(self, other: XY) -> XY:
        return self.subtracted(other)

    def __mul__(self, scalar: float) -> XY:
        return self.multiplied(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> XY:
        return self.divided(scalar)

    def __neg__(self) -> XY:
        return self.reversed()

    def coords(self) -> tuple[float, float]:
        return self.x, self.y

    def coord(self, index: int) -> float:
        """Return the coordinate at 1-based ``index``."""
        if index == 1:
            return self.x
        if index == 2:
            return self.y
        raise IndexOutOfRangeError(f"coordinate index {index} is not 1 or 2")

    def set_coord(self, index: int, value: float) -> None:
        """Set the coordinate at 1-based ``index``."""
        if index == 1:
            self.x = value
        elif index == 2:
            self.y = value
        else:
            raise IndexOutOfRangeError(f"coordinate index {index} is not 1 or 2")

    def set_coords(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_linear_form02(self, xy1: XY, xy2: XY) -> None:
        """Set self to xy1 + xy2."""
        self.x = xy1.x + xy2.x
        self.y = xy1.y + xy2.y

    def set_linear_form12(self, a1: float, xy1: XY, xy2: XY) -> None:
        """Set self to a1 * xy1 + xy2."""
        self.x = a1 * xy1.x + xy2.x
        self.y = a1 * xy1.y + xy2.y

    def set_linear_form22(self, a1: float, xy1: XY, a2: float, xy2: XY) -> None:
        """Set self to a1 * xy1 + a2 * xy2."""
        self.x = a1 * xy1.x + a2 * xy2.x
        self.y = a1 * xy1.y + a2 * xy2.y

    def set_linear_form23(
        self, a1: float, xy1: XY, a2: float, xy2: XY, xy3: XY
    ) -> None:
        """Set self to a1 * xy1 + a2 * xy2 + xy3."""
        self.x = a1 * xy1.x + a2 * xy2.x + xy3.x
        self.y = a1 * xy1.y + a2 * xy2.y + xy3.y

    def crossed(self, other: XY) -> float:
        """Return the scalar cross product."""
        return self.x * other.y - self.y * other.x

    def cross_magnitude(self, other: XY) -> float:
        return abs(self.crossed(other))

    def cross_square_magnitude(self, other: XY) -> float:
        value = self.crossed(other)
        return value * value

    def dot(self, other: XY) -> float:
        return self.x * other.x + self.y * other.y

    def added(self, other: XY) -> XY:
        return XY(self.x + other.x, self.y + other.y)

    def subtracted(self, other: XY) -> XY:
        return XY(self.x - other.x, self.y - other.y)

    def multiplied(self, scalar: float) -> XY:
        return XY(self.x * scalar, self.y * scalar)

    def divided(self, scalar: float) -> XY:
        return XY(self.x / scalar, self.y / scalar)

    def reversed(self) -> XY:
        return XY(-self.x, -self.y)

    def reverse(self) -> None:
        self.x = -self.x
        self.y = -self.y

    def add(self, other: XY) -> None:
        self.x += other.x
        self.y += other.y

    def subtract(self, other: XY) -> None:
        self.x -= other.x
        self.y -= other.y

    def multiply(self, scalar: float) -> None:
        self.x *= scalar
        self.y *= scalar

    def divide(self, scalar: float) -> None:
        self.x /= scalar
        self.y /= scalar

    def multiply_xy(self, other: XY) -> None:
        """Multiply coordinate-wise by ``other``."""
        self.x *= other.x
        self.y *= other.y

    def square_modulus(self) -> float:
        return self.x**2 + self.y**2

    def modulus(self) -> float:
        return math.sqrt(self.square_modulus())

    def _checked_modulus(self) -> float:
        m = self.modulus()
        if m <= self.resolution:
            raise DivisionByZeroError("vector modulus is below resolution")
        return m

    def normalize(self) -> None:
        m = self._checked_modulus()
        self.x /= m
        self.y /= m

    def normalized(self) -> XY:
        m = self._checked_modulus()
        return XY(self.x / m, self.y / m)

    def is_equal(self, other: XY, tolerance: float) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance