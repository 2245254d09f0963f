"""
Visualize the Hermite basis functions, and the effect of the smoothness
on a curve through a fixed set of points.
"""

import hcurve
import visvis as vv
import numpy as np


# Input
points = hcurve.ControlPointSet.from_random(8, 0)
smoothnesses = 0.0, 0.5, 1.0

# Calculate basis functions
tt = np.arange(0, 1, 0.005)
vv0 = np.zeros_like(tt)
vv1 = np.zeros_like(tt)
vv2 = np.zeros_like(tt)
vv3 = np.zeros_like(tt)
for i in range(len(tt)):
    cc = hcurve.get_hermite_coefs(tt[i])
    vv0[i] = cc[0]
    vv1[i] = cc[1]
    vv2[i] = cc[2]
    vv3[i] = cc[3]

# Sample curves
curves = [hcurve.sample_curve(points, k, 25, True) for k in smoothnesses]


# Visualize
fig = vv.figure(1); vv.clf()
fig.position = 57.00, 45.00,  948.00, 969.00

vv.subplot(211)
vv.title('The Hermite basis functions')
vv.plot(tt, vv0, lc='r')
vv.plot(tt, vv1, lc='g')
vv.plot(tt, vv2, lc='b')
vv.plot(tt, vv3, lc='m')
a = vv.gca()
a.legend = 'h1 (start)', 'h2 (end)', 'h3 (start tangent)', 'h4 (end tangent)'

vv.subplot(212)
vv.plot(points.as_pointset(), ms='o', mc='b', ls='')
for curve, lc in zip(curves, 'rgk'):
    vv.plot(curve, lc=lc)
a = vv.gca()
a.legend = ['points'] + ['k = %1.1f' % k for k in smoothnesses]

vv.use().Run()
