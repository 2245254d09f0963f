"""
Cubic Hermite basis coefficients and lookup tables.
"""

import numbers

import numpy as np
import numba

from ..errors import InvalidSampleCount

# Keep a cache of calculated luts
LUTS = {}


def get_hermite_coefs(t):
    """ get_hermite_coefs(t)

    Calculates the coefficients of the cubic Hermite basis for the given
    value of t (between 0 and 1 for a point within the segment) and returns
    them as a tuple (h1, h2, h3, h4). These are the weights to be applied to
    the start position, the end position, the start tangent and the end
    tangent of a segment, respectively. At t=0 the result is exactly
    (1, 0, 0, 0), and at t=1 exactly (0, 1, 0, 0).

    If the coefficients for a whole segment are needed, consider using
    get_lut() instead.
    """
    out = np.zeros((4, ), np.float64)
    set_hermite_coefs(float(t), out)
    return tuple(out)


@numba.jit(nopython=True)
def set_hermite_coefs(t, out):
    """ set_hermite_coefs(t, out)

    Calculate the Hermite coefficients and store them in the given array.
    See get_hermite_coefs() for details.
    """
    out[0] =   2*t**3 - 3*t**2 + 1
    out[1] = - 2*t**3 + 3*t**2
    out[2] =     t**3 - 2*t**2 + t
    out[3] =     t**3 -   t**2


def get_lut(steps, include_end=False):
    """ get_lut(steps, include_end=False)

    Get the look-up table with the Hermite coefficients for sampling a
    segment in the given amount of steps. Returns a read-only float64
    array of shape (steps, 4), where row j holds the coefficients for
    t = j / steps. Note that t=1 is not in the table, since it coincides
    with t=0 of the next segment. If include_end is True, an extra row for
    t=1 is added.

    Tables are cached, so asking for the same table twice gives the same
    array.
    """
    # Check steps
    if (isinstance(steps, bool) or not isinstance(steps, numbers.Integral)
                                or steps < 1):
        raise InvalidSampleCount('The number of steps must be an integer '
                                 'of at least 1, not %r.' % (steps, ))
    steps = int(steps)
    include_end = bool(include_end)

    # Create lut if not existing yet
    key = steps, include_end
    if key not in LUTS:
        n = steps + 1 if include_end else steps
        lut = np.zeros((n, 4), np.float64)
        _calculate_lut(lut, steps)
        lut.flags.writeable = False
        LUTS[key] = lut

    return LUTS[key]


@numba.jit(nopython=True)
def _calculate_lut(lut, steps):
    for j in range(lut.shape[0]):
        t = j / steps  # not accumulated
        set_hermite_coefs(t, lut[j])
