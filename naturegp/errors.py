"""Exceptions raised by the geometric primitives."""


class NatureError(Exception):
    """Base class for all errors raised by this package."""


class IndexOutOfRangeError(NatureError, IndexError):
    """A coordinate index lies outside the valid range."""


class DivisionByZeroError(NatureError, ZeroDivisionError):
    """A vector is too small to be divided by its own modulus."""