from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from beamcalc.core.calc_methods import (
    SimplySupportedAnalyzer, TwoSpanUnequalAnalyzer
)
from beamcalc.core.postprocessing.equations import Equation
from beamcalc.core.preprocessing import Beam, Material
from beamcalc.core.utils import sample_positions


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


STEEL = Material('Steel', {'EI': 8.4e12})
EI = 8400


def slope(equation, x, h=1e-6):
    return (equation(x + h).y - equation(x - h).y) / (2 * h)


def curvature(equation, x, h=1e-3):
    return (equation(x + h).y - 2 * equation(x).y
            + equation(x - h).y) / h ** 2


class TestTwoSpanDeflection(TestCase):

    def test_equal_spans(self):
        beam = Beam(4, 4, STEEL)
        deflection = TwoSpanUnequalAnalyzer().deflection(beam, 10)
        for x in (0.5, 1.5, 1.6861, 3.2):
            assert_allclose(
                deflection(x).y,
                10 * x * (4 ** 3 - 3 * 4 * x ** 2 + 2 * x ** 3)
                / (48 * EI) * 1000,
                err_msg='Each span of a symmetric two-span beam must deflect '
                        'like a propped cantilever.'
            )
            assert_allclose(
                deflection(x).y, deflection(8 - x).y,
                err_msg='Equal spans must give a symmetric deflection.'
            )

    def test_slope_continuity(self):
        for l1, l2 in ((3, 5), (4, 4), (6, 2.5)):
            beam = Beam(l1, l2, STEEL)
            deflection = TwoSpanUnequalAnalyzer().deflection(beam, 10)
            h = 1e-6
            left = (deflection(l1).y - deflection(l1 - h).y) / h
            right = (deflection(l1 + h).y - deflection(l1).y) / h
            numpy_allclose(
                left, right, atol=1e-4,
                err_msg='The deflection curve must not kink at the middle '
                        'support.'
            )

    def test_curvature(self):
        beam = Beam(3, 5, STEEL)
        analyzer = TwoSpanUnequalAnalyzer()
        deflection = analyzer.deflection(beam, 10)
        moment = analyzer.bending_moment(beam, 10)
        for x in (1, 2.2, 4.5, 7):
            numpy_allclose(
                -curvature(deflection, x) / 1000 * EI, moment(x).y,
                atol=1e-4, rtol=1e-5,
                err_msg='The bending moment must equal -EI times the '
                        'curvature of the deflection curve.'
            )

    def test_hogging_short_span(self):
        beam = Beam(1, 8, STEEL)
        deflection = TwoSpanUnequalAnalyzer().deflection(beam, 10)
        self.assertLess(
            deflection(0.5).y, 0,
            msg='A short span next to a long one must be lifted up.'
        )
        self.assertGreater(deflection(5).y, 0)


class TestSimplySupportedDeflection(TestCase):

    def test_symmetry_and_slope(self):
        beam = Beam(5, 0, STEEL)
        deflection = SimplySupportedAnalyzer().deflection(beam, 12)
        for x in (0.3, 1, 2.4):
            assert_allclose(deflection(x).y, deflection(5 - x).y)
        numpy_allclose(slope(deflection, 2.5), 0, atol=1e-6)
        numpy_allclose(
            slope(deflection, 1e-6, h=1e-7),
            12 * 5 ** 3 / (24 * EI) * 1000, rtol=1e-5,
            err_msg='The end rotation must equal wL³/(24EI).'
        )

    def test_curvature(self):
        beam = Beam(5, 0, STEEL)
        analyzer = SimplySupportedAnalyzer()
        deflection = analyzer.deflection(beam, 12)
        moment = analyzer.bending_moment(beam, 12)
        for x in (0.7, 2.5, 4.1):
            numpy_allclose(
                -curvature(deflection, x) / 1000 * EI, moment(x).y,
                atol=1e-4, rtol=1e-5
            )


class TestShearIsMomentSlope(TestCase):

    def test_slope(self):
        for analyzer, beam in ((SimplySupportedAnalyzer(), Beam(4, 0, STEEL)),
                               (TwoSpanUnequalAnalyzer(), Beam(3, 5, STEEL))):
            moment = analyzer.bending_moment(beam, 10)
            shear = analyzer.shear_force(beam, 10)
            for x in (0.4, 1.9, 2.5, 3.6):
                numpy_allclose(slope(moment, x), shear(x).y, atol=1e-6)


class TestEquation(TestCase):

    def test_abstract(self):
        with self.assertRaises(TypeError):
            Equation(Beam(4, 0, STEEL), 10)

    def test_negative_position(self):
        beam = Beam(4, 0, STEEL)
        moment = SimplySupportedAnalyzer().bending_moment(beam, 10)
        self.assertEqual(moment(-1).y, 0)
        self.assertEqual(moment(-1).x, -1)


class TestSamplePositions(TestCase):

    def test_positions(self):
        assert_allclose(sample_positions(2), [0, 0.5, 1, 1.5, 2])
        assert_allclose(sample_positions(1.2, 0.5), [0, 0.5, 1, 1.2])
        assert_allclose(sample_positions(0.3, 0.5), [0, 0.3])
        x = sample_positions(7.3, 0.1)
        self.assertEqual(x[-1], 7.3)
        self.assertEqual(len(x), 74)
        self.assertTrue(np.all(np.diff(x) > 0))

    def test_invalid_step(self):
        for step in (0, -0.5, float('nan')):
            with self.assertRaises(ValueError):
                sample_positions(4, step)
