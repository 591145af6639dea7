from dataclasses import FrozenInstanceError
from itertools import product
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from beamcalc.core.calc_methods import (
    SimplySupportedAnalyzer, TwoSpanUnequalAnalyzer
)
from beamcalc.core.engine import BeamAnalysis
from beamcalc.core.exceptions import (
    BeamAnalysisError, InvalidGeometryError, InvalidMaterialError,
    UnsupportedConditionError
)
from beamcalc.core.postprocessing import Point, Quantity
from beamcalc.core.preprocessing import Beam, Condition, Material
from beamcalc.core.solution import ReactionSolver


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


STEEL = Material('Steel', {'EI': 8.4e12, 'GA': 1.1e9})
"""EI of 8.4e12 N mm^2 equals 8400 kN m^2."""

SPANS = (0.5, 1, 3, 4, 5, 12.25)
LOADS = (-7.5, 1, 10, 33.3)


class TestMaterial(TestCase):

    def test_properties(self):
        assert_allclose(STEEL.EI, 8.4e12)
        assert_allclose(STEEL.GA, 1.1e9)
        self.assertEqual(STEEL.name, 'Steel')

    def test_immutable(self):
        properties = {'EI': 1e12}
        m = Material('Timber', properties)
        properties['EI'] = 5
        assert_allclose(
            m.EI, 1e12,
            err_msg='Changing the dictionary a material was created from '
                    'must not change the material.'
        )
        with self.assertRaises(TypeError):
            m.properties['EI'] = 2
        with self.assertRaises(FrozenInstanceError):
            m.name = 'Steel'

    def test_missing_property(self):
        m = Material('Unknown', {'GA': 1})
        with self.assertRaises(InvalidMaterialError):
            _ = m.EI
        with self.assertRaises(InvalidMaterialError):
            _ = Material('Void', {'EI': 0}).EI
        with self.assertRaises(InvalidMaterialError):
            _ = Material('Void', {'EI': float('nan')}).EI
        with self.assertRaises(InvalidMaterialError):
            _ = Material('Void', {'EI': 'stiff'}).EI

    def test_validation(self):
        with self.assertRaises(TypeError):
            Material(1, {'EI': 1})
        with self.assertRaises(TypeError):
            Material('Steel', [('EI', 1)])


class TestBeam(TestCase):

    def test_single_span(self):
        beam = Beam(4, 0, STEEL)
        self.assertFalse(beam.is_two_span)
        self.assertEqual(beam.length, 4)
        self.assertIs(beam.material, STEEL)

    def test_two_span(self):
        beam = Beam(3, 5, STEEL)
        self.assertTrue(beam.is_two_span)
        self.assertEqual(beam.length, 8)
        assert_allclose(beam.reactions(10).total, 80)
        with self.assertRaises(InvalidGeometryError):
            Beam(4, 0, STEEL).reactions(10)

    def test_invalid_geometry(self):
        for primary, secondary in ((0, 0), (-1, 2), (2, -1),
                                   (float('nan'), 1), (1, float('inf'))):
            with self.assertRaises(
                    InvalidGeometryError,
                    msg=f'Beam({primary}, {secondary}) must be rejected.'):
                Beam(primary, secondary, STEEL)
        with self.assertRaises(TypeError):
            Beam(4, 0, {'EI': 1})
        with self.assertRaises(TypeError):
            Beam('4', 0, STEEL)

    def test_frozen(self):
        beam = Beam(4, 0, STEEL)
        with self.assertRaises(FrozenInstanceError):
            beam.primary_span = 0


class TestCondition(TestCase):

    def test_lookup(self):
        self.assertIs(Condition('simply-supported'),
                      Condition.SIMPLY_SUPPORTED)
        self.assertIs(Condition('two-span-unequal'),
                      Condition.TWO_SPAN_UNEQUAL)
        self.assertEqual(str(Condition.TWO_SPAN_UNEQUAL), 'two-span-unequal')
        with self.assertRaises(ValueError):
            Condition('nonexistent')


class TestReactionSolver(TestCase):

    def test_equilibrium(self):
        solver = ReactionSolver()
        for w, l1, l2 in product(LOADS, SPANS, SPANS):
            r = solver.solve(w, l1, l2)
            numpy_allclose(
                r.R1 + r.R2 + r.R3, w * (l1 + l2), rtol=1e-9, atol=1e-12,
                err_msg=f'Vertical equilibrium violated for w={w}, l1={l1}, '
                        f'l2={l2}.'
            )
            assert_allclose(r.total, r.R1 + r.R2 + r.R3)

    def test_equal_spans(self):
        r = ReactionSolver().solve(10, 4, 4)
        assert_allclose(
            [r.M1, r.R1, r.R2, r.R3], [-20, 15, 50, 15],
            err_msg='Equal spans must give M1 = -wL²/8 and the reactions '
                    '3wL/8, 10wL/8, 3wL/8.'
        )

    def test_unequal_spans(self):
        r = ReactionSolver().solve(10, 3, 5)
        assert_allclose(r.M1, -23.75)
        assert_allclose(r.R1, 15 - 23.75 / 3)
        assert_allclose(r.R3, 25 - 23.75 / 5)
        assert_allclose(r.R2, 80 - r.R1 - r.R3)
        assert_allclose(r.total, 80)

    def test_moment_equilibrium(self):
        for w, l1, l2 in product(LOADS, SPANS, SPANS):
            r = ReactionSolver().solve(w, l1, l2)
            length = l1 + l2
            numpy_allclose(
                r.R1 * length + r.R2 * l2, w * length ** 2 / 2,
                rtol=1e-9, atol=1e-10,
                err_msg='The moments about the right end support must be in '
                        'equilibrium.'
            )

    def test_invalid_spans(self):
        solver = ReactionSolver()
        for l1, l2 in ((0, 5), (3, 0), (-3, 5), (3, float('inf'))):
            with self.assertRaises(InvalidGeometryError):
                solver.solve(10, l1, l2)
        with self.assertRaises(ValueError):
            solver.solve(float('nan'), 3, 5)

    def test_debug_logging(self):
        solver = ReactionSolver(debug=True)
        self.addCleanup(
            lambda: [solver.logger.removeHandler(h)
                     for h in list(solver.logger.handlers)]
        )
        with self.assertLogs(solver.logger, level='DEBUG') as logs:
            solver.solve(10, 3, 5)
        self.assertIn('R2 (kN)', '\n'.join(logs.output))


class TestSimplySupportedAnalyzer(TestCase):

    def setUp(self):
        self.analyzer = SimplySupportedAnalyzer()
        self.beam = Beam(4, 0, STEEL)

    def test_concrete_scenario(self):
        moment = self.analyzer.bending_moment(self.beam, 10)
        shear = self.analyzer.shear_force(self.beam, 10)
        self.assertEqual(moment(2), Point(2.0, 20.0))
        self.assertEqual(shear(0).y, 20)
        self.assertEqual(shear(4).y, -20)
        self.assertEqual(shear(2).y, 0)

    def test_boundary_conditions(self):
        for length, w in product(SPANS, LOADS):
            beam = Beam(length, 0, STEEL)
            moment = self.analyzer.bending_moment(beam, w)
            deflection = self.analyzer.deflection(beam, w)
            for x in (0, length):
                self.assertEqual(
                    moment(x).y, 0,
                    msg='The bending moment must vanish at the supports.'
                )
                self.assertEqual(
                    deflection(x).y, 0,
                    msg='The deflection must vanish at the supports.'
                )

    def test_maximum_moment(self):
        for length, w in product(SPANS, (1, 10, 33.3)):
            beam = Beam(length, 0, STEEL)
            moment = self.analyzer.bending_moment(beam, w)
            x = np.linspace(0, length, 101)
            y = np.array([moment(xi).y for xi in x])
            assert_allclose(moment(length / 2).y, w * length ** 2 / 8)
            assert_allclose(y.max(), w * length ** 2 / 8)
            assert_allclose(x[y.argmax()], length / 2)

    def test_midspan_deflection(self):
        deflection = self.analyzer.deflection(self.beam, 10)
        assert_allclose(
            deflection(2).y, 5 * 10 * 4 ** 4 / (384 * 8400) * 1000,
            err_msg='The midspan deflection must equal 5wL⁴/(384EI), '
                    'converted to mm.'
        )

    def test_correction(self):
        plain = self.analyzer.deflection(self.beam, 10)
        corrected = self.analyzer.deflection(self.beam, 10, correction=1.25)
        for x in (0.5, 1, 2.7):
            assert_allclose(corrected(x).y, 1.25 * plain(x).y)

    def test_secondary_span_ignored(self):
        beam = Beam(4, 2, STEEL)
        moment = self.analyzer.bending_moment(beam, 10)
        self.assertEqual(moment(2).y, 20)
        self.assertEqual(moment(5).y, 0)

    def test_missing_stiffness(self):
        beam = Beam(4, 0, Material('Unknown', {}))
        self.assertEqual(self.analyzer.bending_moment(beam, 10)(2).y, 20)
        with self.assertRaises(InvalidMaterialError):
            self.analyzer.deflection(beam, 10)

    def test_pure(self):
        shear = self.analyzer.shear_force(self.beam, 10)
        self.assertEqual(shear(1.3), shear(1.3))
        with self.assertRaises(FrozenInstanceError):
            shear.load = 5


class TestTwoSpanUnequalAnalyzer(TestCase):

    def setUp(self):
        self.analyzer = TwoSpanUnequalAnalyzer()
        self.beam = Beam(3, 5, STEEL)
        self.reactions = ReactionSolver().solve(10, 3, 5)

    def test_concrete_scenario(self):
        moment = self.analyzer.bending_moment(self.beam, 10)
        shear = self.analyzer.shear_force(self.beam, 10)
        self.assertTrue(np.isfinite(moment(3).y))
        self.assertTrue(np.isfinite(shear(3).y))
        assert_allclose(
            moment.span_one(3), moment.span_two(3),
            err_msg='The bending moment must be continuous at the middle '
                    'support.'
        )
        assert_allclose(moment(3).y, self.reactions.M1)
        assert_allclose(shear(0).y, self.reactions.R1)
        assert_allclose(shear(8).y, -self.reactions.R3)

    def test_shear_jump(self):
        for l1, l2 in product(SPANS, SPANS):
            beam = Beam(l1, l2, STEEL)
            shear = self.analyzer.shear_force(beam, 10)
            r = ReactionSolver().solve(10, l1, l2)
            numpy_allclose(
                shear.span_two(l1) - shear.span_one(l1), r.R2,
                rtol=1e-9, atol=1e-9,
                err_msg='The shear force must jump by R2 at the middle '
                        'support.'
            )
            self.assertEqual(
                shear(l1).y, shear.span_one(l1),
                msg='The middle support belongs to the first span.'
            )

    def test_moment_vanishes_at_ends(self):
        for l1, l2 in product(SPANS, SPANS):
            beam = Beam(l1, l2, STEEL)
            moment = self.analyzer.bending_moment(beam, 10)
            self.assertEqual(moment(0).y, 0)
            numpy_allclose(moment(beam.length).y, 0, atol=1e-9)

    def test_deflection_vanishes_at_supports(self):
        for (l1, l2), w in product(product(SPANS, SPANS), LOADS):
            beam = Beam(l1, l2, STEEL)
            deflection = self.analyzer.deflection(beam, w)
            for x in (0, l1, beam.length):
                self.assertEqual(
                    deflection(x).y, 0,
                    msg=f'The deflection must vanish at x={x} for l1={l1}, '
                        f'l2={l2}.'
                )

    def test_outside_domain(self):
        moment = self.analyzer.bending_moment(self.beam, 10)
        shear = self.analyzer.shear_force(self.beam, 10)
        deflection = self.analyzer.deflection(self.beam, 10)
        for x in (8.5, 100):
            self.assertEqual(moment(x).y, 0)
            self.assertEqual(shear(x).y, 0)
            self.assertEqual(deflection(x).y, 0)

    def test_single_span_rejected(self):
        beam = Beam(4, 0, STEEL)
        with self.assertRaises(InvalidGeometryError):
            self.analyzer.bending_moment(beam, 10)
        with self.assertRaises(InvalidGeometryError):
            self.analyzer.shear_force(beam, 10)
        with self.assertRaises(InvalidGeometryError):
            self.analyzer.deflection(beam, 10)

    def test_correction(self):
        plain = self.analyzer.deflection(self.beam, 10)
        corrected = self.analyzer.deflection(self.beam, 10, correction=0.8)
        for x in (1, 3.5, 6):
            assert_allclose(corrected(x).y, 0.8 * plain(x).y)


class TestBeamAnalysis(TestCase):

    def setUp(self):
        self.engine = BeamAnalysis()
        self.single = Beam(4, 0, STEEL)
        self.double = Beam(3, 5, STEEL)

    def test_unsupported_condition(self):
        queries = (self.engine.get_deflection, self.engine.get_bending_moment,
                   self.engine.get_shear_force)
        for query in queries:
            with self.assertRaises(UnsupportedConditionError):
                query(self.single, 10, 'nonexistent')
        with self.assertRaises(BeamAnalysisError):
            self.engine.get_shear_force(self.single, 10, 'cantilever')
        with self.assertRaises(UnsupportedConditionError):
            BeamAnalysis(default_condition='nonexistent')

    def test_unsupported_condition_logged(self):
        with self.assertLogs(self.engine.logger, level='ERROR'):
            with self.assertRaises(UnsupportedConditionError):
                self.engine.get_bending_moment(self.single, 10, 'fixed')

    def test_result(self):
        result = self.engine.get_bending_moment(
            self.single, 10, 'simply-supported')
        self.assertIs(result.beam, self.single)
        self.assertEqual(result.load, 10)
        self.assertIs(result.condition, Condition.SIMPLY_SUPPORTED)
        self.assertIs(result.quantity, Quantity.BENDING_MOMENT)
        self.assertEqual(result.equation(2).y, 20)

    def test_condition_identifiers(self):
        by_name = self.engine.get_shear_force(
            self.double, 10, 'two-span-unequal')
        by_member = self.engine.get_shear_force(
            self.double, 10, Condition.TWO_SPAN_UNEQUAL)
        for x in (0, 1.5, 3, 4, 8):
            self.assertEqual(by_name.equation(x), by_member.equation(x))
        self.assertEqual(
            self.engine.conditions, ('simply-supported', 'two-span-unequal')
        )

    def test_default_condition(self):
        result = self.engine.get_deflection(self.single, 10)
        self.assertIs(result.condition, Condition.SIMPLY_SUPPORTED)
        engine = BeamAnalysis(default_condition='two-span-unequal')
        result = engine.get_deflection(self.double, 10)
        self.assertIs(result.condition, Condition.TWO_SPAN_UNEQUAL)

    def test_correction(self):
        plain = self.engine.get_deflection(
            self.double, 10, 'two-span-unequal')
        corrected = self.engine.get_deflection(
            self.double, 10, 'two-span-unequal', correction=2)
        assert_allclose(corrected.equation(5).y, 2 * plain.equation(5).y)

    def test_invalid_geometry(self):
        with self.assertRaises(InvalidGeometryError):
            self.engine.get_bending_moment(self.single, 10, 'two-span-unequal')

    def test_invalid_load(self):
        with self.assertRaises(ValueError):
            self.engine.get_shear_force(self.single, float('inf'))
        with self.assertRaises(TypeError):
            self.engine.get_shear_force(self.single, '10')

    def test_analyze(self):
        results = self.engine.analyze(self.double, 10, 'two-span-unequal')
        self.assertEqual(set(results), set(Quantity))
        for quantity, result in results.items():
            self.assertIs(result.quantity, quantity)
            self.assertIs(result.beam, self.double)

    def test_sample(self):
        result = self.engine.get_bending_moment(self.single, 10)
        x, y = result.sample()
        assert_allclose(x, np.arange(0, 4.5, 0.5))
        assert_allclose(y, 10 * x * (4 - x) / 2)
        x, _ = result.sample(step=1.5)
        assert_allclose(
            x, [0, 1.5, 3, 4],
            err_msg='The end support must always be sampled.'
        )
        with self.assertRaises(ValueError):
            result.sample(step=0)

    def test_sample_two_span(self):
        result = self.engine.get_deflection(
            self.double, 10, 'two-span-unequal')
        x, y = result.sample()
        self.assertEqual(x[-1], 8)
        self.assertEqual(y[0], 0)
        self.assertEqual(y[6], 0)
        self.assertEqual(y[-1], 0)

    def test_table(self):
        result = self.engine.get_shear_force(self.single, 10)
        table = result.table(step=1)
        self.assertIn('Shear Force (kN)', table)
        self.assertIn('20.000000', table)
