# flake8: noqa
""" Hcurve - Hermite curve editing toolkit

Smooth curves through a set of draggable control points, using cubic
Hermite interpolation with Catmull-Rom tangents.
"""

__version__ = '0.1.0'


# Check compat
import sys
if sys.version_info < (3, 8):
    raise RuntimeError('Hcurve requires at least Python 3.8')

# Imports

from ._utils import Parameters
from ._point import Point2D
from .new_pointset import PointSet

from .errors import OutOfRange, InsufficientPoints, InvalidSampleCount

from .interp import get_hermite_coefs

from .controlpoints import ControlPoint, ControlPointSet, random_positions

from .spline import (get_tangent, get_tangents, get_curve_point,
                     sample_curve, SplineEvaluator)

from .editor import (PointerEvent, DrawingSurface, RecordingSurface,
                     CurveEditor)

# Clean up
del sys
