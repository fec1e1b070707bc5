"""Three-dimensional coordinate triple with vector arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from naturegp.errors import DivisionByZeroError, IndexOutOfRangeError


@dataclass(eq=False, slots=True)
class XYZ:
    """A mutable triple of coordinates (x, y, z)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    resolution = 1e-7

    @classmethod
    def from_scalar(cls, scalar: float) -> XYZ:
        """Build a triple with all coordinates equal to ``scalar``."""
        return cls(scalar, scalar, scalar)

    @classmethod
    def zero(cls) -> XYZ:
        return cls(0.0, 0.0, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XYZ):
            return NotImplemented
        return self.is_equal(other, self.resolution)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: XYZ) -> XYZ:
        return self.added(other)

    def __sub__(self, other: XYZ) -> XYZ:
        return self.subtracted(other)

    def __mul__(self, scalar: float) -> XYZ:
        return self.multiplied(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> XYZ:
        return self.divided(scalar)

    def __neg__(self) -> XYZ:
        return self.reversed()

    def coords(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def coord(self, index: int) -> float:
        """Return the coordinate at 1-based ``index``."""
        if index == 1:
            return self.x
        if index == 2:
            return self.y
        if index == 3:
            return self.z
        raise IndexOutOfRangeError(f"coordinate index {index} is not 1, 2 or 3")

    def set_coord(self, index: int, value: float) -> None:
        """Set the coordinate at 1-based ``index``."""
        if index == 1:
            self.x = value
        elif index == 2:
            self.y = value
        elif index == 3:
            self.z = value
        else:
            raise IndexOutOfRangeError(f"coordinate index {index} is not 1, 2 or 3")

    def set_coords(self, x: float, y: float, z: float) -> None:
        self.x = x
        self.y = y
        self.z = z

    def set_linear_form02(self, xyz1: XYZ, xyz2: XYZ) -> None:
        """Set self to xyz1 + xyz2."""
        self.x = xyz1.x + xyz2.x
        self.y = xyz1.y + xyz2.y
        self.z = xyz1.z + xyz2.z

    def set_linear_form12(self, a1: float, xyz1: XYZ, xyz2: XYZ) -> None:
        """Set self to a1 * xyz1 + xyz2."""
        self.x = a1 * xyz1.x + xyz2.x
        self.y = a1 * xyz1.y + xyz2.y
        self.z = a1 * xyz1.z + xyz2.z

    def set_linear_form22(self, a1: float, xyz1: XYZ, a2: float, xyz2: XYZ) -> None:
        """Set self to a1 * xyz1 + a2 * xyz2."""
        self.x = a1 * xyz1.x + a2 * xyz2.x
        self.y = a1 * xyz1.y + a2 * xyz2.y
        self.z = a1 * xyz1.z + a2 * xyz2.z

    def set_linear_form23(
        self, a1: float, xyz1: XYZ, a2: float, xyz2: XYZ, xyz3: XYZ
    ) -> None:
        """Set self to a1 * xyz1 + a2 * xyz2 + xyz3."""
        self.x = a1 * xyz1.x + a2 * xyz2.x + xyz3.x
        self.y = a1 * xyz1.y + a2 * xyz2.y + xyz3.y
        self.z = a1 * xyz1.z + a2 * xyz2.z + xyz3.z

    def set_linear_form33(
        self, a1: float, xyz1: XYZ, a2: float, xyz2: XYZ, a3: float, xyz3: XYZ
    ) -> None:
        """Set self to a1 * xyz1 + a2 * xyz2 + a3 * xyz3."""
        self.x = a1 * xyz1.x + a2 * xyz2.x + a3 * xyz3.x
        self.y = a1 * xyz1.y + a2 * xyz2.y + a3 * xyz3.y
        self.z = a1 * xyz1.z + a2 * xyz2.z + a3 * xyz3.z

    def set_linear_form34(
        self,
        a1: float,
        xyz1: XYZ,
        a2: float,
        xyz2: XYZ,
        a3: float,
        xyz3: XYZ,
        xyz4: XYZ,
    ) -> None:
        """Set self to a1 * xyz1 + a2 * xyz2 + a3 * xyz3 + xyz4."""
        self.x = a1 * xyz1.x + a2 * xyz2.x + a3 * xyz3.x + xyz4.x
        self.y = a1 * xyz1.y + a2 * xyz2.y + a3 * xyz3.y + xyz4.y
        self.z = a1 * xyz1.z + a2 * xyz2.z + a3 * xyz3.z + xyz4.z

    def _cross_components(self, other: XYZ) -> tuple[float, float, float]:
        return (
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def cross_cross(self, left: XYZ, right: XYZ) -> None:
        """Replace self with self x (left x right)."""
        cx, cy, cz = left._cross_components(right)
        self.x, self.y, self.z = (
            self.y * cz - self.z * cy,
            self.z * cx - self.x * cz,
            self.x * cy - self.y * cx,
        )

    def cross_crossed(self, left: XYZ, right: XYZ) -> XYZ:
        """Return self x (left x right)."""
        result = XYZ(self.x, self.y, self.z)
        result.cross_cross(left, right)
        return result

    def dot_cross(self, left: XYZ, right: XYZ) -> float:
        """Return self . (left x right)."""
        cx, cy, cz = left._cross_components(right)
        return self.x * cx + self.y * cy + self.z * cz

    def crossed(self, other: XYZ) -> XYZ:
        return XYZ(*self._cross_components(other))

    def cross(self, other: XYZ) -> None:
        self.x, self.y, self.z = self._cross_components(other)

    def cross_square_magnitude(self, other: XYZ) -> float:
        cx, cy, cz = self._cross_components(other)
        return cx**2 + cy**2 + cz**2

    def cross_magnitude(self, other: XYZ) -> float:
        return math.sqrt(self.cross_square_magnitude(other))

    def dot(self, other: XYZ) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def added(self, other: XYZ) -> XYZ:
        return XYZ(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtracted(self, other: XYZ) -> XYZ:
        return XYZ(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiplied(self, scalar: float) -> XYZ:
        return XYZ(self.x * scalar, self.y * scalar, self.z * scalar)

    def divided(self, scalar: float) -> XYZ:
        return XYZ(self.x / scalar, self.y / scalar, self.z / scalar)

    def reversed(self) -> XYZ:
        return XYZ(-self.x, -self.y, -self.z)

    def reverse(self) -> None:
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def add(self, other: XYZ) -> None:
        self.x += other.x
        self.y += other.y
        self.z += other.z

    def subtract(self, other: XYZ) -> None:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def multiply(self, scalar: float) -> None:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar

    def divide(self, scalar: float) -> None:
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar

    def multiply_xyz(self, other: XYZ) -> None:
        """Multiply coordinate-wise by ``other``."""
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z

    def square_modulus(self) -> float:
        return self.x**2 + self.y**2 + self.z**2

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
        self.z /= m

    def normalized(self) -> XYZ:
        m = self._checked_modulus()
        return XYZ(self.x / m, self.y / m, self.z / m)

    def is_equal(self, other: XYZ, tolerance: float) -> bool:
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) <= tolerance
            and abs(self.z - other.z) <= tolerance
        )