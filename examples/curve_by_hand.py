"""
Demo app that shows a smooth curve through eight control points, which can
be dragged with the mouse. The smoothness of the curve can be controlled
using the up/down keys, the number of steps per segment using left/right.
"""

from hcurve.apps.curve_by_hand import CurveByHand
import visvis as vv

app = CurveByHand()

vv.use().Run()
