import numbers

import numpy as np

from ._point import Point2D


# PointSet subclasses ndarray, so that a polyline or a snapshot of control
# points can be passed to any function that takes a numpy array, including
# the plot functions of visvis.
class PointSet(np.ndarray):
    """ The PointSet class represents an ordered set of points or vectors.
    The shape of the array is NxD, with N the number of points, and D the
    dimensionality of each point. For curves D is 2.

    This class inherits from np.ndarray; you can treat it as a regular
    array. Indexing with a single integer gives a 1xD PointSet, use
    point() to get a Point2D.

    Parameters
    ----------
    input : various
        If input is an integer, it specifies the dimensionality of the
        points, and an empty pointset is created. If input is a tuple or
        list of scalars, it specifies a point, with which the pointset is
        initialized. A list of points (e.g. Point2D instances) gives a
        pointset with these points. If input is a numpy array, the
        pointset is a view on that array (ndim must be 2).
    dtype : dtype descrsiption
        The data type of the numpy array. If not given, the result will
        be float64.

    """

    def __new__(cls, input, dtype=np.float64):
        if isinstance(input, int):
            # ndim is given, start empty pointset
            return np.ndarray.__new__(cls, (0, input), dtype=dtype)
        elif isinstance(input, (tuple, list)):
            input = list(input)
            if all([isinstance(i, numbers.Real) for i in input]):
                # Point is given, initialize with that point
                a = np.array(input, dtype=dtype).reshape(1, len(input))
            else:
                # Sequence of points
                a = np.array([tuple(p) for p in input], dtype=dtype)
                if a.ndim != 2:
                    raise ValueError('Points given to PointSet must all '
                                     'have the same dimension.')
            return a.view(cls)
        elif isinstance(input, np.ndarray):
            # Array is given, turn into pointset
            if not input.ndim == 2:
                raise ValueError('Arrays given to PointSet must have ndim=2.')
            if input.dtype != np.dtype(dtype):
                input = input.astype(dtype)
            return input.view(cls)
        else:
            # Don't know what to do
            raise ValueError('Invalid type to instantiate PointSet with (%r)' % type(input))

    def __str__(self):
        """ print() shows elements as normal. """
        return self[...].__str__()

    def __repr__(self):
        """" Return short(one line) string representation of the pointset. """
        if len(self) == 0:
            return "<Empty PointSet (np.ndarray) for points of %i dimensions>" % (
                 self.shape[1], )
        elif len(self) == 1:
            r = ', '.join(['%1.4g' % i for i in np.asarray(self)[0, :]])
            return "<PointSet (np.ndarray) with 1 point: %s>" % r
        else:
            return "<PointSet (np.ndarray) with %i points of %i dimensions>" % (
                len(self), self.shape[1])

    def __array_wrap__(self, out, context=None, return_scalar=False):
        """ So that we return a native numpy array (or scalar) when a
        reducting ufunc is applied (such as sum(), std(), etc.)
        """
        if not out.shape:
            return out.dtype.type(out)  # Scalar
        elif out.shape != self.shape:
            return np.asarray(out)
        else:
            return out

    def ravel(self, *args, **kwargs):
        # Return numpy array on ravel
        return np.ndarray.ravel(self, *args, **kwargs)[...]

    def __getitem__(self, index):
        """ Get a point or part of the pointset. """

        # Single index from numpy scalar
        if isinstance(index, np.ndarray) and index.size == 1:
            index = int(index.ravel()[0])

        if isinstance(index, tuple):
            # Multiple indexes: return as array
            return np.asarray(self)[index]
        elif isinstance(index, slice):
            # Slice: return subset
            return np.ndarray.__getitem__(self, index)
        elif isinstance(index, numbers.Integral):
            # Single index: return point
            a = np.ndarray.__getitem__(self, int(index))
            return a.reshape(1, len(a))
        else:
            # Probably some other form of subslicing
            return np.asarray(self)[index]

    def point(self, index):
        """ point(index)

        Get the point at the given index as a Point2D. Only available for
        2D pointsets.
        """
        if self.shape[1] != 2:
            raise ValueError('point() only works for 2D pointsets.')
        x, y = np.asarray(self)[index]
        return Point2D(x, y)

    def to_points(self):
        """ to_points()

        Get a list of Point2D instances, one for each point in this set.
        """
        if self.shape[1] != 2:
            raise ValueError('to_points() only works for 2D pointsets.')
        return [Point2D(x, y) for x, y in np.asarray(self)]

    def append(self, *p):
        """ Append a point to this pointset. One can give the elements
        of the points as separate arguments. Alternatively, a tuple,
        Point2D or numpy array can be given.
        """
        p = self._as_point(*p)

        # resize
        self.resize((self.shape[0]+1, self.shape[1]), refcheck=False)

        # append point
        np.asarray(self)[-1] = p

    def _as_point(self, *p):
        """ Return as something that can be applied to a row in the array.
        Check whether the point-dimensions match with this point set.
        """

        # the point directly given?
        if len(p) == 1 and not isinstance(p[0], numbers.Real):
            p = p[0]

        if isinstance(p, np.ndarray):
            p = p.ravel()
        elif isinstance(p, Point2D):
            p = tuple(p)
        elif not isinstance(p, (tuple, list)):
            raise ValueError('Invalid point')

        # check whether we can append it
        if len(p) != self.shape[1]:
            tmp = "Given point does not match dimension of pointset."
            raise ValueError(tmp)

        return p
