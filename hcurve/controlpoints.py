"""
The control points that a curve passes through, and the dragging of these
points by the user.
"""

import numbers

import numpy as np

from ._point import Point2D
from .new_pointset import PointSet
from .errors import OutOfRange


def random_positions(n=8, rng=None):
    """ random_positions(n=8, rng=None)

    Get n positions laid out from left to right with some random jitter:
    point i is at x = 40 + 80*i + U(0, 30) and y = 150 + U(0, 150). rng
    can be a numpy Generator or a seed.
    """
    rng = np.random.default_rng(rng)
    xx = 40 + np.arange(n) * 80 + rng.random(n) * 30.0
    yy = 150 + rng.random(n) * 150.0
    return [Point2D(x, y) for x, y in zip(xx, yy)]


class ControlPoint:
    """ ControlPoint(index, position)

    A control point in a ControlPointSet. The index is fixed, the position
    is replaced (never modified in place) when the point is dragged.
    """

    __slots__ = ['index', 'position']

    def __init__(self, index, position):
        self.index = index
        self.position = Point2D.from_any(position)

    def __repr__(self):
        return '<ControlPoint %i at %1.4g, %1.4g>' % (
            self.index, self.position.x, self.position.y)

    def intersects(self, cursor, radius):
        """ Whether the cursor is within the square of the given half-width
        around this point.
        """
        p = self.position
        return abs(cursor[0] - p.x) < radius and abs(cursor[1] - p.y) < radius


class ControlPointSet:
    """ ControlPointSet(positions)

    An ordered set of control points. The order is the order in which the
    curve passes through the points, and the number of points is fixed at
    construction. The positions can be given as a list of Point2D objects
    or 2-element tuples, or as an Nx2 array.

    At most one point is selected at a time; the selected point follows
    the cursor via update_drag().
    """

    def __init__(self, positions):
        if isinstance(positions, np.ndarray):
            positions = PointSet(positions).to_points()
        self._points = tuple(ControlPoint(i, p) for i, p in enumerate(positions))
        self._selected = None

    @classmethod
    def from_random(cls, n=8, rng=None):
        """ from_random(n=8, rng=None)

        Create a set of n control points at random positions. See
        random_positions().
        """
        return cls(random_positions(n, rng))

    def __repr__(self):
        return '<ControlPointSet with %i points>' % len(self._points)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self.positions())

    def __getitem__(self, index):
        return self._points[index].position

    @property
    def selected(self):
        """ The index of the point being dragged, or None.
        """
        return self._selected

    def positions(self):
        """ positions()

        Get a snapshot of the positions of all control points, as a tuple
        of Point2D objects.
        """
        return tuple(cp.position for cp in self._points)

    def as_pointset(self):
        """ as_pointset()

        Get a snapshot of the positions as an Nx2 PointSet.
        """
        pp = np.zeros((len(self._points), 2), np.float64)
        for cp in self._points:
            pp[cp.index] = cp.position.x, cp.position.y
        return PointSet(pp)

    ## Dragging

    def hit_test(self, cursor, radius=25.0):
        """ hit_test(cursor, radius=25.0)

        Get the index of the first control point for which the cursor is
        within the square of half-width radius around the point. The x and
        y distances are checked independently. Returns None if no point is
        hit. When the squares of multiple points contain the cursor, the
        point that comes first in the set wins.
        """
        cursor = Point2D.from_any(cursor)
        for cp in self._points:
            if cp.intersects(cursor, radius):
                return cp.index
        return None

    def begin_drag(self, index):
        """ begin_drag(index)

        Select the control point with the given index as the one to drag.
        """
        if (isinstance(index, bool) or not isinstance(index, numbers.Integral)
                                    or not 0 <= index < len(self._points)):
            raise OutOfRange('Cannot drag control point %r; there are %i '
                             'control points.' % (index, len(self._points)))
        self._selected = int(index)

    def update_drag(self, cursor):
        """ update_drag(cursor)

        Move the selected control point to the cursor position. Does
        nothing if no point is selected. Returns whether a point was moved.
        """
        if self._selected is None:
            return False
        self._points[self._selected].position = Point2D.from_any(cursor)
        return True

    def end_drag(self):
        """ end_drag()

        Clear the selection.
        """
        self._selected = None
