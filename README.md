# naturegp

Small, dependency-free geometry primitives: `XY` for two-component and
`XYZ` for three-component coordinate vectors. Both are mutable
dataclasses. Equality between vectors is checked coordinate by
coordinate against a fixed resolution of `1e-7` (the class attribute
`resolution`), so values that differ only by floating-point noise
compare equal. Because equality is approximate, vectors are not
hashable.

## Installation

```
pip install .
```

## Usage

```python
from naturegp.xy import XY
from naturegp.xyz import XYZ
from naturegp.errors import DivisionByZeroError, IndexOutOfRangeError

a = XYZ(1.0, 0.0, 0.0)
b = XYZ(0.0, 1.0, 0.0)

a.crossed(b)          # XYZ(x=0.0, y=0.0, z=1.0)
a.dot(b)              # 0.0
a.added(b)            # new vector, a is unchanged
a.add(b)              # modifies a in place

v = XY(3.0, 4.0)
v.modulus()           # 5.0
v.normalized()        # XY(x=0.6, y=0.8)
v.coords()            # (3.0, 4.0)
x, y = v              # vectors are iterable

XY.zero().normalized()          # raises DivisionByZeroError
XYZ.from_scalar(2.0)            # XYZ(x=2.0, y=2.0, z=2.0)

v.coord(1)            # 3.0, coordinates are indexed from 1
v.set_coord(2, 7.0)
v.coord(3)            # raises IndexOutOfRangeError
```

Methods ending in `-ed` (`added`, `subtracted`, `multiplied`, `divided`,
`crossed`, `normalized`, `reversed`, `cross_crossed`) return a new vector;
their counterparts (`add`, `subtract`, `multiply`, `divide`, `cross`,
`normalize`, `reverse`, `cross_cross`) change the vector in place.
`multiply_xy` and `multiply_xyz` multiply coordinate by coordinate.

For `XY`, `crossed` returns the scalar cross product. For `XYZ`,
`cross_crossed(left, right)` gives `self x (left x right)` and
`dot_cross(left, right)` gives `self . (left x right)`.

The operators `+`, `-` (binary and unary), `*` by a scalar (on either
side) and `/` by a scalar return new vectors.

The `set_linear_form*` methods set a vector to a linear combination of
others, for example:

```python
a = XYZ(1.0, 2.0, 3.0)
b = XYZ(4.0, 5.0, 6.0)
c = XYZ(7.0, 8.0, 9.0)
d = XYZ(1.0, 1.0, 1.0)

target = XYZ.zero()
target.set_linear_form34(1.0, a, 2.0, b, 3.0, c, d)   # a + 2b + 3c + d
```

`is_equal(other, tolerance)` compares with a tolerance of your choice.

## Errors

Both error types derive from `NatureError`. `IndexOutOfRangeError` is
also an `IndexError`, and `DivisionByZeroError`, raised by `normalize`
and `normalized` when the modulus is at or below the resolution, is also
a `ZeroDivisionError`. Plain `divide` and `divided` do no such check.

## Running the tests

```
pip install .[test]
pytest
```