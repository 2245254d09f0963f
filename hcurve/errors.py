"""
Exceptions raised on invalid input. All of these are raised before any
state is modified.
"""


class OutOfRange(IndexError):
    """ Raised when an index does not refer to an existing control point
    or segment.
    """


class InsufficientPoints(ValueError):
    """ Raised when a curve is requested for fewer than two control points.
    """


class InvalidSampleCount(ValueError):
    """ Raised when the number of samples per segment is not a positive
    integer.
    """
