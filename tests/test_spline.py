import numpy as np

from hcurve import (Point2D, PointSet, ControlPointSet, OutOfRange,
                    InsufficientPoints, InvalidSampleCount, SplineEvaluator,
                    get_tangent, get_tangents, get_curve_point, sample_curve)
from hcurve.testing import raises, run_tests_if_main


LINE = [(0, 0), (100, 0), (200, 0)]
WAVE = [(40, 150), (120, 290), (200, 170), (280, 260), (360, 160),
        (440, 300), (520, 180), (600, 220)]


def test_tangents():

    tt = get_tangents(LINE, 0.5)
    assert isinstance(tt, PointSet)
    assert tt.shape == (3, 2)
    assert tt.point(0) == Point2D(0, 0)
    assert tt.point(1) == Point2D(100, 0)
    assert tt.point(2) == Point2D(0, 0)

    assert get_tangent(LINE, 0, 0.5) == Point2D(0, 0)
    assert get_tangent(LINE, 1, 0.5) == Point2D(100, 0)
    assert get_tangent(LINE, 2, 0.5) == Point2D(0, 0)

    # Interior tangents
    for i in range(1, 7):
        expected = (Point2D(*WAVE[i+1]) - Point2D(*WAVE[i-1])) * 0.3
        assert get_tangent(WAVE, i, 0.3) == expected
        assert get_tangents(WAVE, 0.3).point(i) == expected


def test_tangents_endpoints_always_zero():

    for k in (0, 0.5, 1, -2, 10):
        for pp in (LINE, WAVE, [(1, 2), (3, 4)]):
            tt = get_tangents(pp, k)
            assert tt.point(0) == Point2D(0, 0)
            assert tt.point(-1) == Point2D(0, 0)
            assert get_tangent(pp, 0, k) == Point2D(0, 0)
            assert get_tangent(pp, len(pp) - 1, k) == Point2D(0, 0)


def test_tangents_scale_with_k():

    tt1 = get_tangents(WAVE, 0.25)
    tt2 = get_tangents(WAVE, 0.5)
    assert np.all(tt2[1:-1] == 2 * tt1[1:-1])
    assert np.all(tt2[0] == 0) and np.all(tt2[-1] == 0)

    for i in range(1, 7):
        assert get_tangent(WAVE, i, 0.5) == get_tangent(WAVE, i, 0.25) * 2


def test_tangent_invalid_index():

    for i in (-1, 3, 1.5):
        with raises(OutOfRange):
            get_tangent(LINE, i, 0.5)


def test_curve_point():

    # At s=0, exactly the control point
    for k in (0, 0.5, 1.3):
        for i in range(7):
            assert get_curve_point(WAVE, i, 0, k) == Point2D(*WAVE[i])
            assert get_curve_point(WAVE, i, 1, k) == Point2D(*WAVE[i+1])

    # Approaches the next point
    steps = 25
    s = (steps - 1) / steps
    for i in range(7):
        p = get_curve_point(WAVE, i, s, 0.5)
        q = Point2D(*WAVE[i + 1])
        d1 = p - q
        d2 = Point2D(*WAVE[i]) - q
        assert (d1.x**2 + d1.y**2) < 0.01 * (d2.x**2 + d2.y**2)

    # Invalid segments
    with raises(OutOfRange):
        get_curve_point(WAVE, 7, 0.5, 0.5)
    with raises(OutOfRange):
        get_curve_point(WAVE, -1, 0.5, 0.5)
    with raises(InsufficientPoints):
        get_curve_point([(1, 1)], 0, 0.5, 0.5)


def test_curve_point_straight_line():

    # Collinear points produce a straight line
    assert get_curve_point(LINE, 0, 0, 0.5) == Point2D(0, 0)
    p = get_curve_point(LINE, 0, 0.75, 0.5)
    assert 0 < p.x < 100
    assert p.y == 0
    assert abs(p.x - 70.3125) < 1e-9


def test_sample_curve_straight_line():

    curve = sample_curve(LINE, 0.5, 4)
    assert isinstance(curve, PointSet)
    assert curve.shape == (1 + 2 * 4, 2)
    assert curve.point(0) == Point2D(0, 0)
    assert curve.point(1) == Point2D(0, 0)
    assert curve.point(5) == Point2D(100, 0)
    assert np.all(curve[:, 1] == 0)
    assert abs(curve[4, 0] - 70.3125) < 1e-9

    # Moves along the line without going back
    xx = curve[:, 0]
    assert np.all(np.diff(xx) >= 0)
    assert xx.max() < 200


def test_sample_curve():

    for steps in (1, 2, 25):
        curve = sample_curve(WAVE, 0.5, steps)
        assert curve.shape == (1 + 7 * steps, 2)
        assert curve.point(0) == Point2D(*WAVE[0])

        # Each segment starts exactly at its control point
        for i in range(7):
            assert curve.point(1 + i * steps) == Point2D(*WAVE[i])

        # Agrees with point-wise evaluation
        for i in range(7):
            for j in range(steps):
                p = get_curve_point(WAVE, i, j / steps, 0.5)
                q = curve.point(1 + i * steps + j)
                assert abs(p.x - q.x) < 1e-9 and abs(p.y - q.y) < 1e-9

    # The last point is not reached by default
    curve = sample_curve(WAVE, 0.5, 25)
    assert curve.point(-1) != Point2D(*WAVE[-1])


def test_sample_curve_include_end():

    curve = sample_curve(WAVE, 0.5, 10, include_end=True)
    assert curve.shape == (1 + 7 * 10 + 1, 2)
    assert curve.point(-1) == Point2D(*WAVE[-1])
    assert np.all(curve[:-1] == sample_curve(WAVE, 0.5, 10))


def test_sample_curve_smoothness():

    # Zero smoothness: flat tangents everywhere
    curve = sample_curve(LINE, 0, 4)
    assert curve.point(3) == Point2D(50, 0)

    # Any k is allowed
    for k in (-1, 0, 2, 100):
        curve = sample_curve(WAVE, k, 5)
        assert curve.point(0) == Point2D(*WAVE[0])
        assert np.all(np.isfinite(curve))

    # Different smoothness, different curve (but same control points)
    c1 = sample_curve(WAVE, 0.2, 5)
    c2 = sample_curve(WAVE, 0.8, 5)
    assert not np.all(c1 == c2)
    assert np.all(c1[1::5] == c2[1::5])


def test_sample_curve_inputs():

    expected = sample_curve(WAVE, 0.5, 5)

    # Control point set, array and points give the same result
    assert np.all(sample_curve(ControlPointSet(WAVE), 0.5, 5) == expected)
    assert np.all(sample_curve(np.array(WAVE), 0.5, 5) == expected)
    assert np.all(sample_curve(PointSet(np.array(WAVE)), 0.5, 5) == expected)
    pp = [Point2D(*p) for p in WAVE]
    assert np.all(sample_curve(pp, 0.5, 5) == expected)

    # Input is not modified
    a = np.array(WAVE, np.float64)
    sample_curve(a, 0.5, 5)
    assert np.all(a == np.array(WAVE))

    # Minimal case
    curve = sample_curve([(0, 0), (10, 10)], 0.5, 2)
    assert curve.shape == (3, 2)
    assert curve.point(2) == Point2D(5, 5)

    with raises(ValueError):
        sample_curve(np.zeros((4, 3)), 0.5)


def test_sample_curve_errors():

    with raises(InsufficientPoints):
        sample_curve([], 0.5)
    with raises(InsufficientPoints):
        sample_curve([(1, 1)], 0.5)
    with raises(InsufficientPoints):
        sample_curve(ControlPointSet([(1, 1)]), 0.5)
    with raises(InsufficientPoints):
        sample_curve(np.zeros((0, 2)), 0.5)

    with raises(InvalidSampleCount):
        sample_curve(WAVE, 0.5, 0)
    with raises(InvalidSampleCount):
        sample_curve(WAVE, 0.5, -3)
    with raises(InvalidSampleCount):
        sample_curve(WAVE, 0.5, 2.5)


def test_spline_evaluator():

    evaluator = SplineEvaluator()
    assert evaluator.steps == 25
    assert not evaluator.include_end
    assert '25 steps' in repr(evaluator)

    pp = ControlPointSet(WAVE)
    curve1 = evaluator(pp, 0.5)
    assert np.all(curve1 == sample_curve(WAVE, 0.5))

    # No memory between calls
    curve2 = evaluator(pp, 0.5)
    assert curve2 is not curve1
    assert np.all(curve1 == curve2)
    pp.begin_drag(3)
    pp.update_drag((0, 0))
    curve3 = evaluator(pp, 0.5)
    assert not np.all(curve3 == curve1)

    evaluator = SplineEvaluator(4, True)
    assert evaluator(LINE, 0.5).shape == (10, 2)

    with raises(InvalidSampleCount):
        SplineEvaluator(0)
    with raises(InsufficientPoints):
        SplineEvaluator()([(1, 1)], 0.5)


run_tests_if_main()
