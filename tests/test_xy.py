import math

import pytest

from naturegp.errors import DivisionByZeroError, IndexOutOfRangeError
from naturegp.xy import XY


def vec(x, y):
    return XY(x, y)


def test_copy():
    a = vec(1.0, 2.0)
    b = XY(*a.coords())
    assert a.x == b.x
    assert a.y == b.y


def test_add_subtract():
    a = vec(1.0, 2.0)
    b = vec(4.0, 5.0)
    a_copy = XY(a.x, a.y)
    b_copy = XY(b.x, b.y)
    a_copy.add(b)
    b_copy.subtract(a)
    assert a_copy == vec(5.0, 7.0)
    assert b_copy == vec(3.0, 3.0)


def test_added_subtracted():
    a = vec(1.0, 2.0)
    b = vec(4.0, 5.0)
    assert a.added(b) == vec(5.0, 7.0)
    assert b.subtracted(a) == vec(3.0, 3.0)
    assert a + b == vec(5.0, 7.0)
    assert b - a == vec(3.0, 3.0)


def test_multiply_divide():
    a = vec(2.0, 4.0)
    a.multiply(2.0)
    assert a == vec(4.0, 8.0)
    a.divide(4.0)
    assert a == vec(1.0, 2.0)


def test_multiplied_divided():
    a = vec(2.0, 4.0)
    assert a.multiplied(2.0) == vec(4.0, 8.0)
    assert a.divided(2.0) == vec(1.0, 2.0)
    assert 2.0 * a == vec(4.0, 8.0)
    assert a / 2.0 == vec(1.0, 2.0)


def test_reverse_reversed():
    a = vec(1.0, -2.0)
    reversed_a = a.reversed()
    assert reversed_a == vec(-1.0, 2.0)
    assert a == vec(1.0, -2.0)
    assert -a == vec(-1.0, 2.0)
    a.reverse()
    assert a == vec(-1.0, 2.0)


def test_crossed_and_dot():
    a = vec(1.0, 0.0)
    b = vec(0.0, 1.0)
    assert a.crossed(b) == 1.0
    assert a.dot(b) == 0.0
    assert a.dot(a) == 1.0


def test_normalize_success():
    a = vec(3.0, 4.0)
    a.normalize()
    assert a == vec(0.6, 0.8)
    assert abs(a.modulus() - 1.0) < 1e-10


def test_normalized_success():
    a = vec(3.0, 4.0)
    assert a.normalized() == vec(0.6, 0.8)
    assert a == vec(3.0, 4.0)


def test_normalize_failure():
    a = XY.zero()
    with pytest.raises(DivisionByZeroError):
        a.normalize()
    with pytest.raises(DivisionByZeroError):
        a.normalized()


def test_coord_access():
    a = vec(1.0, 2.0)
    assert a.coord(1) == 1.0
    assert a.coord(2) == 2.0
    with pytest.raises(IndexOutOfRangeError):
        a.coord(4)
    a.set_coord(1, 5.0)
    assert a.x == 5.0
    with pytest.raises(IndexOutOfRangeError):
        a.coord(0)


def test_set_coord():
    a = XY.zero()
    a.set_coord(1, 7.0)
    assert a.x == 7.0
    with pytest.raises(IndexOutOfRangeError):
        a.set_coord(4, 1.0)
    assert a == vec(7.0, 0.0)


def test_cross_magnitude():
    a = vec(1.0, 0.0)
    b = vec(0.0, 1.0)
    assert a.cross_magnitude(b) == 1.0
    assert a.cross_square_magnitude(b) == 1.0


def test_is_equal():
    a = vec(1.0, 2.0)
    b = vec(1.000001, 2.0)
    assert a.is_equal(b, 1e-3)
    assert not a.is_equal(b, 1e-7)


def test_set_linear_forms():
    a = vec(1.0, 2.0)
    b = vec(4.0, 5.0)
    c = vec(7.0, 8.0)
    target = XY.zero()

    target.set_linear_form23(1.0, a, 2.0, b, c)
    assert target == vec(1.0 * 1.0 + 2.0 * 4.0 + 7.0, 1.0 * 2.0 + 2.0 * 5.0 + 8.0)

    target.set_linear_form22(1.0, a, 2.0, b)
    assert target == vec(1.0 * 1.0 + 2.0 * 4.0, 1.0 * 2.0 + 2.0 * 5.0)

    target.set_linear_form12(1.0, a, b)
    assert target == vec(1.0 * 1.0 + 4.0, 1.0 * 2.0 + 5.0)

    target.set_linear_form02(a, b)
    assert target == vec(1.0 + 4.0, 2.0 + 5.0)


def test_coords():
    a = vec(1.1, 2.2)
    x, y = a.coords()
    assert vec(x, y) == vec(1.1, 2.2)
    assert tuple(a) == (1.1, 2.2)


def test_mutating_operations():
    a = vec(1.0, 2.0)
    b = vec(2.0, 3.0)
    a.add(b)
    assert a == vec(3.0, 5.0)
    a.subtract(b)
    assert a == vec(1.0, 2.0)
    a.multiply(2.0)
    assert a == vec(2.0, 4.0)
    a.divide(2.0)
    assert a == vec(1.0, 2.0)
    a.multiply_xy(b)
    assert a == vec(2.0, 6.0)


def test_setters():
    a = XY.zero()
    a.x = 1.0
    a.y = 2.0
    assert a == vec(1.0, 2.0)
    a.set_coords(4.0, 5.0)
    assert a == vec(4.0, 5.0)


def test_from_scalar():
    assert XY.from_scalar(5.0) == vec(5.0, 5.0)


def test_new():
    a = XY(1.0, 2.0)
    assert a == vec(1.0, 2.0)


def test_zero():
    assert XY.zero() == vec(0.0, 0.0)


def test_modulus_square_modulus():
    a = vec(3.0, 4.0)
    b = XY.from_scalar(1.0)
    assert a.modulus() == 5.0
    assert a.square_modulus() == 25.0
    assert b.modulus() == math.sqrt(2.0)
    assert b.square_modulus() == 2.0


def test_equality_with_other_type():
    assert (vec(1.0, 2.0) == (1.0, 2.0)) is False