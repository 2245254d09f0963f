import visvis as vv

from hcurve import (ControlPointSet, CurveEditor, PointerEvent, PointSet,
                    DrawingSurface)


def hex_to_rgb(color):
    """ Convert a color string like '#0084b4' to an RGB tuple of floats.
    """
    color = color.lstrip('#')
    if len(color) != 6:
        raise ValueError('Invalid color: %r' % color)
    return tuple(int(color[i:i+2], 16) / 255.0 for i in (0, 2, 4))


class VisvisSurface(DrawingSurface):
    """ VisvisSurface(axes)

    Drawing surface on a visvis axes. All circles drawn in one frame
    are shown as markers of a single line object, and the polyline
    replaces the curve of the previous frame. Call begin_frame() and
    end_frame() around the drawing of each frame.
    """

    def __init__(self, axes):
        self._axes = axes
        self._circles = PointSet(2)
        self._circle_style = None

        # Init lines for points and curve
        tmp = PointSet(2)
        self._points_line = vv.plot(tmp, ls='', ms='o', mc='b', mw=12,
                                    axes=axes, axesAdjust=False)
        self._curve_line = vv.plot(tmp, ls='-', lc='k', lw=2, ms='',
                                   axes=axes, axesAdjust=False)

    def begin_frame(self):
        self._circles = PointSet(2)
        self._circle_style = None

    def end_frame(self):
        self._points_line.SetPoints(self._circles)
        if self._circle_style is not None:
            radius, color = self._circle_style
            self._points_line.mw = 2 * radius
            self._points_line.mc = hex_to_rgb(color)
        self._axes.Draw()

    def fill_circle(self, center, radius, color):
        self._circles.append(center)
        self._circle_style = radius, color

    def stroke_polyline(self, points, color):
        self._curve_line.SetPoints(points)
        self._curve_line.lc = hex_to_rgb(color)


class CurveByHand:
    """ CurveByHand(n=8, seed=None)

    Demo application to draw a smooth curve through control points that
    can be dragged with the mouse.

    Up/down changes the smoothness, left/right the number of steps per
    segment, and E toggles whether the end of the curve is sampled.
    """

    def __init__(self, n=8, seed=None):

        # Setup visualization
        self._fig = fig = vv.figure()
        self._a1 = a1 = vv.subplot(111)
        a1.cameraType = '2d'
        a1.daspectAuto = False
        a1.axis.showGrid = True

        # Init editor with control points
        points = ControlPointSet.from_random(n, seed)
        self._editor = CurveEditor(points)
        self._surface = VisvisSurface(a1)
        a1.SetLimits((0, 80 * n + 80), (0, 450))

        # Bind to events
        a1.eventMouseDown.Bind(self.on_down)
        a1.eventMotion.Bind(self.on_motion)
        a1.eventMouseUp.Bind(self.on_up)
        fig.eventKeyDown.Bind(self.on_key_down)

        # Frame driver
        self._timer = vv.Timer(fig, 20, False)
        self._timer.Bind(self.on_frame)
        self._timer.Start()

        print('Drag the points to change the curve.')
        print('Use up/down to control smoothness, left/right to control '
              'the steps per segment, and E to toggle sampling the end.')
        print(self._editor.params)

    @property
    def editor(self):
        return self._editor

    def on_down(self, event):
        if event.button != 1:
            return False
        hit = self._editor.handle_pointer_event(
                        PointerEvent('down', event.x2d, event.y2d))
        # Prevent dragging the camera when a point is hit
        return hit

    def on_motion(self, event):
        return self._editor.handle_pointer_event(
                        PointerEvent('move', event.x2d, event.y2d))

    def on_up(self, event):
        return self._editor.handle_pointer_event(
                        PointerEvent('up', event.x2d, event.y2d))

    def on_key_down(self, event):

        params = self._editor.params

        # Update params
        if event.key == vv.KEY_UP:
            params.smoothness = round(params.smoothness + 0.05, 2)
        elif event.key == vv.KEY_DOWN:
            params.smoothness = round(params.smoothness - 0.05, 2)
        elif event.key == vv.KEY_RIGHT:
            params.steps += 1
        elif event.key == vv.KEY_LEFT:
            params.steps -= 1
        elif event.text.upper() == 'E':
            params.include_end = not params.include_end
        else:
            return

        # Correct
        if params.steps < 1:
            params.steps = 1

        print('Using smoothness %1.2f with %i steps per segment%s.' % (
                params.smoothness, params.steps,
                ' (including end)' if params.include_end else ''))

    def on_frame(self, event=None):
        self._surface.begin_frame()
        self._editor.render_frame(self._surface)
        self._surface.end_frame()


if __name__ == '__main__':
    v = CurveByHand()
    vv.use().Run()
