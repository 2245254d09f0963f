"""
The editor glues the control points and the curve evaluation to the
outside world. It has two entry points: handle_pointer_event(), to be
called for each pointer (mouse) event, and render_frame(), to be called
once per frame. The caller is responsible for not calling these
concurrently.
"""

from ._utils import Parameters
from ._point import Point2D
from .controlpoints import ControlPointSet
from .errors import InsufficientPoints, InvalidSampleCount
from .spline import sample_curve


POINTER_EVENT_KINDS = ('down', 'move', 'up')


class PointerEvent:
    """ PointerEvent(kind, x, y)

    A pointer event of kind 'down', 'move' or 'up', at position (x, y) in
    the coordinate frame of the control points.
    """

    __slots__ = ['kind', 'x', 'y']

    def __init__(self, kind, x, y):
        if kind not in POINTER_EVENT_KINDS:
            raise ValueError('Invalid pointer event kind: %r' % (kind, ))
        self.kind = kind
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return '<PointerEvent %s at %1.4g, %1.4g>' % (self.kind, self.x, self.y)

    @property
    def position(self):
        return Point2D(self.x, self.y)


class DrawingSurface:
    """ DrawingSurface()

    Interface for the surface that the editor draws to. Subclasses
    implement fill_circle() and stroke_polyline(). The editor only writes
    to the surface; it never queries it.
    """

    def fill_circle(self, center, radius, color):
        """ Draw a filled circle at center (a Point2D).
        """
        raise NotImplementedError()

    def stroke_polyline(self, points, color):
        """ Draw lines that connect the given points (an Nx2 PointSet).
        """
        raise NotImplementedError()


class RecordingSurface(DrawingSurface):
    """ RecordingSurface()

    Drawing surface that does not draw anything, but keeps a list of the
    draw calls as (name, args) tuples.
    """

    def __init__(self):
        self.calls = []

    def fill_circle(self, center, radius, color):
        self.calls.append(('fill_circle', (center, radius, color)))

    def stroke_polyline(self, points, color):
        self.calls.append(('stroke_polyline', (points, color)))

    def clear(self):
        self.calls[:] = []


class CurveEditor:
    """ CurveEditor(points, params=None, **kwargs)

    An editable curve through a set of control points. The points can be
    a ControlPointSet or anything that ControlPointSet accepts. Params
    can be given as a dict or Parameters object and/or keyword arguments;
    see default_params for the available parameters.
    """

    def __init__(self, points, params=None, **kwargs):
        if not isinstance(points, ControlPointSet):
            points = ControlPointSet(points)
        self._points = points
        self._params = self.default_params()
        self.set_params(params, **kwargs)

    @classmethod
    def default_params(cls):
        """ Get the default params for the editor (as a Parameters object).
        """
        params = Parameters()
        params.smoothness = 0.5
        params.steps = 25
        params.include_end = False
        params.hit_radius = 25.0
        params.point_radius = 6.0
        params.point_color = '#0084b4'
        params.curve_color = '#333333'
        return params

    @property
    def params(self):
        """ Get params structure (as a Parameters object).
        """
        return self._params

    def set_params(self, params=None, **kwargs):
        """ set_params(params=None, **kwargs)

        Set any number of parameters. The parameters are set from the
        given dict or Parameters object, and then with the given keyword
        arguments. Raises ValueError for unknown parameters, in which case
        no parameter is changed.
        """
        D = {}
        if params:
            for key in params:
                D[key] = params[key]
        D.update(kwargs)

        invalidKeys = [key for key in D if key not in self._params]
        if invalidKeys:
            raise ValueError('Invalid param given: ' + ', '.join(invalidKeys))

        for key in D:
            self._params[key] = D[key]

    @property
    def points(self):
        """ The ControlPointSet being edited.
        """
        return self._points

    @property
    def smoothness(self):
        """ The smoothness (tangent multiplier) of the curve.
        """
        return self._params.smoothness

    @smoothness.setter
    def smoothness(self, value):
        self._params.smoothness = float(value)

    def set_smoothness_from_slider(self, value):
        """ set_smoothness_from_slider(value)

        Set the smoothness from a slider value between 0 and 100.
        """
        self.smoothness = value / 100.0

    def handle_pointer_event(self, event):
        """ handle_pointer_event(event)

        Handle a PointerEvent. A 'down' event selects the control point
        under the cursor (if any), 'move' events drag the selected point,
        and an 'up' event moves the point to its final position and
        releases it. Returns whether a control point was moved or selected.
        """
        points = self._points
        if event.kind == 'down':
            index = points.hit_test(event.position, self._params.hit_radius)
            if index is None:
                return False
            points.begin_drag(index)
            return True
        elif event.kind == 'move':
            return points.update_drag(event.position)
        elif event.kind == 'up':
            moved = points.update_drag(event.position)
            points.end_drag()
            return moved
        else:
            raise ValueError('Invalid pointer event kind: %r' % (event.kind, ))

    def evaluate(self):
        """ evaluate()

        Sample the curve for the current control points and params. Returns
        an Nx2 PointSet. See hcurve.sample_curve().
        """
        params = self._params
        return sample_curve(self._points, params.smoothness, params.steps,
                            params.include_end)

    def render_frame(self, surface):
        """ render_frame(surface)

        Draw the control points and the curve to the given DrawingSurface.
        If the curve cannot be evaluated (too few points or an invalid
        number of steps), only the points are drawn. Returns whether the
        curve was drawn.
        """
        params = self._params

        # Render points
        for p in self._points.positions():
            surface.fill_circle(p, params.point_radius, params.point_color)

        # Render curve
        try:
            curve = self.evaluate()
        except (InsufficientPoints, InvalidSampleCount):
            return False
        surface.stroke_polyline(curve, params.curve_color)
        return True
