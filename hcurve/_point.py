"""
The Point2D value class.
"""

import numbers

import numpy as np


class Point2D:
    """ Point2D(x, y)

    Immutable 2D point or vector. Arithmetic produces new points; scalar
    multiplication, addition and subtraction are available as methods
    (mul, add, sub) and as the corresponding operators.

    A Point2D behaves as a sequence of two floats, so it can be unpacked,
    indexed and passed to numpy.
    """

    __slots__ = ['_x', '_y']

    # Let numpy scalars defer to our operators, e.g. np.float64(2) * p
    __array_ufunc__ = None

    def __init__(self, x, y):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    @classmethod
    def from_any(cls, p):
        """ from_any(p)

        Get a Point2D from a Point2D, a 2-element sequence or an array
        with two elements.
        """
        if isinstance(p, cls):
            return p
        if isinstance(p, np.ndarray):
            p = p.ravel()
        try:
            x, y = [float(i) for i in p]
        except (TypeError, ValueError):
            raise ValueError('Cannot interpret %r as a 2D point.' % (p, ))
        return cls(x, y)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __setattr__(self, key, val):
        raise AttributeError('Point2D is immutable.')

    def __delattr__(self, key):
        raise AttributeError('Point2D is immutable.')

    def __repr__(self):
        return '<Point2D %1.4g, %1.4g>' % (self._x, self._y)

    def __len__(self):
        return 2

    def __iter__(self):
        yield self._x
        yield self._y

    def __getitem__(self, index):
        return (self._x, self._y)[index]

    def __eq__(self, other):
        if isinstance(other, Point2D):
            return self._x == other._x and self._y == other._y
        return NotImplemented

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash((self._x, self._y))

    ## Vector arithmetic

    def mul(self, s):
        """ Scalar multiplication. """
        return Point2D(self._x * s, self._y * s)

    def add(self, p):
        """ Point addition. """
        return Point2D(self._x + p[0], self._y + p[1])

    def sub(self, p):
        """ Point subtraction. """
        return Point2D(self._x - p[0], self._y - p[1])

    def __mul__(self, s):
        if isinstance(s, numbers.Real):
            return self.mul(s)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, p):
        if isinstance(p, Point2D):
            return self.add(p)
        return NotImplemented

    def __sub__(self, p):
        if isinstance(p, Point2D):
            return self.sub(p)
        return NotImplemented

    def __neg__(self):
        return Point2D(-self._x, -self._y)


ZERO = Point2D(0.0, 0.0)
