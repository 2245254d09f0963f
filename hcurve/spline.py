"""
Evaluation of the piecewise cubic Hermite curve through a sequence of
control points, with tangents estimated using the Catmull-Rom rule.

The tangent at control point i is (p[i+1] - p[i-1]) * k, where k is the
smoothness. The tangent is zero at the first and last point of the
sequence, so the curve starts and ends flat. Segment i runs from point i
to point i+1 and is given by

    curve(i, s) = p[i]*h1(s) + p[i+1]*h2(s) + t[i]*h3(s) + t[i+1]*h4(s)

with s in [0, 1] and h1-h4 the Hermite basis functions (see
hcurve.interp.get_hermite_coefs).
"""

import numbers

import numpy as np

from ._point import Point2D, ZERO
from .new_pointset import PointSet
from .controlpoints import ControlPointSet
from .errors import OutOfRange, InsufficientPoints
from .interp import get_hermite_coefs, get_lut


def _as_array(points):
    """ Get the given points as an Nx2 float64 array.
    """
    if isinstance(points, ControlPointSet):
        a = points.as_pointset()
    elif isinstance(points, np.ndarray):
        a = np.asarray(points, np.float64)
    else:
        a = np.array([tuple(Point2D.from_any(p)) for p in points], np.float64)
        a = a.reshape(-1, 2)
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError('Control points must be an Nx2 array or a '
                         'sequence of 2D points.')
    return np.asarray(a)


def _check_index(index, n, what):
    if (isinstance(index, bool) or not isinstance(index, numbers.Integral)
                                or not 0 <= index < n):
        raise OutOfRange('Invalid %s index %r (expected 0..%i).' % (
                         what, index, n - 1))
    return int(index)


def get_tangent(points, i, k):
    """ get_tangent(points, i, k)

    Get the Catmull-Rom tangent at control point i as a Point2D. The
    tangent is zero for the first and last point of the whole sequence,
    and (p[i+1] - p[i-1]) * k otherwise.
    """
    pp = PointSet(_as_array(points))
    i = _check_index(i, len(pp), 'control point')
    if i == 0 or i == len(pp) - 1:
        return ZERO
    return (pp.point(i + 1) - pp.point(i - 1)) * k


def get_tangents(points, k):
    """ get_tangents(points, k)

    Get the tangents at all control points as an Nx2 PointSet. See
    get_tangent().
    """
    pp = _as_array(points)
    tt = np.zeros_like(pp)
    tt[1:-1] = (pp[2:] - pp[:-2]) * k
    return PointSet(tt)


def get_curve_point(points, i, s, k):
    """ get_curve_point(points, i, s, k)

    Get the point on segment i (between control point i and i+1) for
    the parameter s. At s=0 this is exactly control point i; at s=1 it is
    exactly control point i+1.
    """
    pp = PointSet(_as_array(points))
    if len(pp) < 2:
        raise InsufficientPoints('Need at least 2 control points, got %i.'
                                 % len(pp))
    i = _check_index(i, len(pp) - 1, 'segment')
    h1, h2, h3, h4 = get_hermite_coefs(s)
    p1, p2 = pp.point(i), pp.point(i + 1)
    t1, t2 = get_tangent(pp, i, k), get_tangent(pp, i + 1, k)
    return p1 * h1 + p2 * h2 + t1 * h3 + t2 * h4


def sample_curve(points, k, steps=25, include_end=False):
    """ sample_curve(points, k, steps=25, include_end=False)

    Sample the curve through the given control points with smoothness k.
    Returns a PointSet that starts with the first control point, followed
    by steps samples for each segment, at s = 0, 1/steps, ..., (steps-1)/steps.
    Draw it as a connected polyline.

    The end of the last segment (s=1) is not sampled, unless include_end is
    True, in which case the last control point is appended.

    Parameters
    ----------
    points : ControlPointSet, Nx2 array, or sequence of points
        The control points; at least two.
    k : float
        The smoothness, a multiplier for the tangents. Usually between 0
        and 1, but any value is allowed.
    steps : int
        The number of samples per segment; at least one.
    include_end : bool
        Whether to include the very end of the curve.

    """
    pp = _as_array(points)
    if len(pp) < 2:
        raise InsufficientPoints('Need at least 2 control points, got %i.'
                                 % len(pp))
    lut = get_lut(steps)
    tt = np.asarray(get_tangents(pp, k))

    # Apply coefficients (steps) to positions and tangents (segments)
    h1, h2, h3, h4 = [lut[:, c].reshape(1, -1, 1) for c in range(4)]
    samples = (pp[:-1, None, :] * h1 + pp[1:, None, :] * h2 +
               tt[:-1, None, :] * h3 + tt[1:, None, :] * h4)

    parts = [pp[:1], samples.reshape(-1, 2)]
    if include_end:
        h1, h2, h3, h4 = get_lut(steps, True)[-1]
        end = pp[-2] * h1 + pp[-1] * h2 + tt[-2] * h3 + tt[-1] * h4
        parts.append(end.reshape(1, 2))
    return PointSet(np.concatenate(parts, 0))


class SplineEvaluator:
    """ SplineEvaluator(steps=25, include_end=False)

    Callable that samples the curve through a set of control points for a
    given smoothness, i.e. ``evaluator(points, k)``. See sample_curve().
    The evaluator holds only the sampling settings; each call is
    independent of the previous ones.
    """

    def __init__(self, steps=25, include_end=False):
        get_lut(steps, include_end)  # check steps
        self._steps = int(steps)
        self._include_end = bool(include_end)

    def __repr__(self):
        return '<SplineEvaluator with %i steps per segment>' % self._steps

    @property
    def steps(self):
        """ The number of samples per segment.
        """
        return self._steps

    @property
    def include_end(self):
        """ Whether the end of the last segment is sampled.
        """
        return self._include_end

    def __call__(self, points, k):
        return sample_curve(points, k, self._steps, self._include_end)
