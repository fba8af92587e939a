import logging
from types import MappingProxyType
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from sbeam.core.calc_methods.analyzer import Analyzer
from sbeam.core.calc_methods.simply_supported import SimplySupported
from sbeam.core.calc_methods.two_span_unequal import TwoSpanUnequal
from sbeam.core.exceptions import (
    InvalidCondition, InvalidGeometry, InvalidMaterial, SBeamError
)
from sbeam.core.postprocessing.results import EquationResult, PointSample
from sbeam.core.preprocessing.beam import Beam
from sbeam.core.preprocessing.material import Material
from sbeam.core.solution.beam_analysis import BeamAnalysis


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


def steel():
    return Material('steel', {'E': 200000, 'I': 0.0001})


def derivative(equation, x, h=1e-5):
    return (equation(x + h).y - equation(x - h).y) / (2 * h)


SS = 'simply-supported'


class TestMaterial(TestCase):

    def test_flexural_rigidity(self):
        assert_allclose(steel().flexural_rigidity, 20.0)
        assert_allclose(
            Material('timber', {'EI': 1500, 'E': 1, 'I': 1}
                     ).flexural_rigidity, 1500,
            err_msg='A given "EI" takes precedence over "E" * "I".'
        )

    def test_missing_rigidity(self):
        with self.assertRaises(InvalidMaterial):
            _ = Material('foam', {'E': 10}).flexural_rigidity
        with self.assertRaises(InvalidMaterial):
            _ = Material('void', {'EI': 0}).flexural_rigidity

    def test_invalid_properties(self):
        with self.assertRaises(InvalidMaterial):
            Material('', {'EI': 1})
        with self.assertRaises(InvalidMaterial):
            Material('steel', {'E': 'stiff'})
        with self.assertRaises(InvalidMaterial):
            Material('steel', {'E': float('nan')})
        with self.assertRaises(InvalidMaterial):
            Material('steel', [('E', 1)])

    def test_immutable(self):
        props = {'EI': 10}
        material = Material('steel', props)
        props['EI'] = 20
        self.assertEqual(material.properties['EI'], 10)
        self.assertIsInstance(material.properties, MappingProxyType)
        with self.assertRaises(TypeError):
            material.properties['EI'] = 30
        with self.assertRaises(AttributeError):
            material.name = 'iron'


class TestBeam(TestCase):

    def test_total_span(self):
        self.assertEqual(Beam(3, 5, steel()).total_span, 8)
        self.assertEqual(Beam(4, 0, steel()).total_span, 4)

    def test_required_arguments(self):
        with self.assertRaises(TypeError):
            Beam(4, steel())
        with self.assertRaises(TypeError):
            Beam(4, 0)

    def test_invalid_geometry(self):
        for primary, secondary in ((0, 1), (-2, 1), (float('inf'), 0),
                                   ('4', 0), (True, 0), (4, -1),
                                   (4, float('nan'))):
            with self.assertRaises(InvalidGeometry, msg=(primary, secondary)):
                Beam(primary, secondary, steel())

    def test_invalid_material(self):
        with self.assertRaises(TypeError):
            Beam(4, 0, {'E': 1, 'I': 1})

    def test_shared_material(self):
        material = steel()
        self.assertIs(Beam(1, 0, material).material,
                      Beam(2, 0, material).material)


class TestExceptions(TestCase):

    def test_hierarchy(self):
        for error in (InvalidCondition, InvalidGeometry, InvalidMaterial):
            self.assertTrue(issubclass(error, SBeamError))
            self.assertTrue(issubclass(error, ValueError))

    def test_invalid_condition_message(self):
        error = InvalidCondition('fixed-fixed', ('a', 'b'))
        self.assertEqual(error.condition, 'fixed-fixed')
        self.assertEqual(error.available, ('a', 'b'))
        self.assertIn('fixed-fixed', str(error))


class TestSimplySupported(TestCase):

    def setUp(self):
        self.beam = Beam(4, 0, steel())
        self.analyzer = SimplySupported()
        self.load = 10

    def test_bending_moment(self):
        moment = self.analyzer.get_bending_moment_equation(self.beam, 10)
        assert_allclose(moment(2).y, 20,
                        err_msg='Midspan moment must equal W * L^2 / 8.')
        assert_allclose(moment(0).y, 0)
        assert_allclose(moment(4).y, 0)
        for x in np.linspace(0, 4, 41):
            self.assertLessEqual(moment(x).y, 20 + 1e-12)

    def test_shear_force(self):
        shear = self.analyzer.get_shear_force_equation(self.beam, 10)
        assert_allclose(shear(0).y, 20)
        assert_allclose(shear(4).y, -20)
        assert_allclose(shear(2).y, 0)

    def test_shear_is_moment_derivative(self):
        moment = self.analyzer.get_bending_moment_equation(self.beam, 10)
        shear = self.analyzer.get_shear_force_equation(self.beam, 10)
        for x in np.linspace(0.1, 3.9, 20):
            numpy_allclose(derivative(moment, x), shear(x).y, atol=1e-5,
                           err_msg=f'V != dM/dx at x={x}')

    def test_moment_is_curvature(self):
        deflection = self.analyzer.get_deflection_equation(self.beam, 10)
        moment = self.analyzer.get_bending_moment_equation(self.beam, 10)
        h = 1e-3
        for x in (0.5, 1.3, 2.0, 3.7):
            curvature = (deflection(x + h).y - 2 * deflection(x).y +
                         deflection(x - h).y) / h ** 2
            numpy_allclose(curvature * 20, moment(x).y, rtol=1e-4,
                           err_msg=f'EI w\'\' != M at x={x}')

    def test_deflection(self):
        deflection = self.analyzer.get_deflection_equation(self.beam, 10)
        assert_allclose(deflection(0).y, 0)
        assert_allclose(deflection(4).y, 0)
        assert_allclose(
            deflection(2).y, -5 * 10 * 4 ** 4 / (384 * 20),
            err_msg='Midspan deflection must equal -5 W L^4 / (384 EI).'
        )

    def test_deflection_scale(self):
        deflection = SimplySupported(deflection_scale=1000
                                     ).get_deflection_equation(self.beam, 10)
        assert_allclose(deflection(2).y, -5 * 10 * 4 ** 4 / (384 * 20) * 1000)

    def test_deflection_needs_rigidity(self):
        beam = Beam(4, 0, Material('bare', {'E': 1}))
        with self.assertRaises(InvalidMaterial):
            self.analyzer.get_deflection_equation(beam, 10)
        # moment and shear do not read material properties
        self.analyzer.get_bending_moment_equation(beam, 10)

    def test_secondary_span_ignored(self):
        beam = Beam(4, 6, steel())
        shear = self.analyzer.get_shear_force_equation(beam, 10)
        self.assertEqual(self.analyzer.total_span(beam), 4)
        self.assertIsNone(shear(5))

    def test_out_of_domain(self):
        for build in (self.analyzer.get_deflection_equation,
                      self.analyzer.get_bending_moment_equation,
                      self.analyzer.get_shear_force_equation):
            equation = build(self.beam, 10)
            for x in (-1e-9, -3, 4 + 1e-9, 100):
                self.assertIsNone(equation(x))
            for x in np.linspace(0, 4, 17):
                point = equation(x)
                self.assertIsInstance(point, PointSample)
                self.assertEqual(point.x, x)
                self.assertTrue(np.isfinite(point.y))

    def test_idempotent(self):
        equation = self.analyzer.get_deflection_equation(self.beam, 10)
        self.assertEqual(equation(1.5), equation(1.5))


class TestTwoSpanUnequal(TestCase):

    def setUp(self):
        self.beam = Beam(3, 5, Material('timber', {'EI': 1500}))
        self.analyzer = TwoSpanUnequal()

    def test_reactions(self):
        r = self.analyzer.reactions(self.beam, 5)
        assert_allclose(r.m1, 5 * (27 + 125) / 64)
        assert_allclose(r.r1, 7.5 - r.m1 / 3)
        assert_allclose(r.r3, 12.5 - r.m1 / 5)
        assert_allclose(r.r1 + r.r2 + r.r3, 40,
                        err_msg='Reactions must balance the total load.')
        assert_allclose(r.v1, r.r1)
        assert_allclose(r.v2, r.r1 - 15)
        assert_allclose(r.v3, r.v2 + r.r2)
        assert_allclose(r.v4, -r.r3)

    def test_moment_equilibrium(self):
        r = self.analyzer.reactions(self.beam, 5)
        assert_allclose(r.r2 * 3 + r.r3 * 8, 5 * 8 * 4,
                        err_msg='Moments about the left support must vanish.')

    def test_equal_spans(self):
        beam = Beam(4, 4, Material('timber', {'EI': 1500}))
        r = self.analyzer.reactions(beam, 2)
        assert_allclose(r.m1, 2 * 16 / 8)
        assert_allclose(r.r1, 3 * 2 * 4 / 8)
        assert_allclose(r.r2, 10 * 2 * 4 / 8)

    def test_shear_discontinuity(self):
        shear = self.analyzer.get_shear_force_equation(self.beam, 5)
        r = self.analyzer.reactions(self.beam, 5)
        eps = 1e-9
        assert_allclose(shear(3 + eps).y - shear(3 - eps).y, r.r2,
                        err_msg='Shear jump at the middle support must '
                                'equal R2.')
        assert_allclose(shear(3).y, r.v3,
                        err_msg='The middle support includes its reaction.')
        assert_allclose(shear(0).y, r.r1)
        assert_allclose(shear(8).y, -r.r3)

    def test_bending_moment(self):
        moment = self.analyzer.get_bending_moment_equation(self.beam, 5)
        r = self.analyzer.reactions(self.beam, 5)
        assert_allclose(moment(0).y, 0)
        assert_allclose(moment(8).y, 0)
        assert_allclose(moment(3).y, -r.m1)
        numpy_allclose(moment(3 + 1e-9).y, -r.m1, atol=1e-7,
                       err_msg='Moment must be continuous at the middle '
                               'support.')

    def test_shear_is_moment_derivative(self):
        moment = self.analyzer.get_bending_moment_equation(self.beam, 5)
        shear = self.analyzer.get_shear_force_equation(self.beam, 5)
        for x in np.concatenate([np.linspace(0.1, 2.9, 8),
                                 np.linspace(3.1, 7.9, 12)]):
            numpy_allclose(derivative(moment, x), shear(x).y, atol=1e-5,
                           err_msg=f'V != dM/dx at x={x}')

    def test_deflection(self):
        deflection = self.analyzer.get_deflection_equation(self.beam, 5)
        assert_allclose(deflection(0).y, 0)
        assert_allclose(deflection(3).y, 0)
        assert_allclose(deflection(8).y, 0,
                        err_msg='Deflection must vanish at the right end.')
        self.assertLess(deflection(5.5).y, 0)

    def test_deflection_slope_continuity(self):
        deflection = self.analyzer.get_deflection_equation(self.beam, 5)
        h = 1e-6
        left = (deflection(3).y - deflection(3 - h).y) / h
        right = (deflection(3 + h).y - deflection(3).y) / h
        numpy_allclose(left, right, atol=1e-4)

    def test_moment_is_curvature(self):
        deflection = self.analyzer.get_deflection_equation(self.beam, 5)
        moment = self.analyzer.get_bending_moment_equation(self.beam, 5)
        h = 1e-3
        for x in (1.0, 2.2, 4.5, 7.0):
            curvature = (deflection(x + h).y - 2 * deflection(x).y +
                         deflection(x - h).y) / h ** 2
            numpy_allclose(curvature * 1500, moment(x).y, rtol=1e-4,
                           atol=1e-6)

    def test_out_of_domain(self):
        for build in (self.analyzer.get_deflection_equation,
                      self.analyzer.get_bending_moment_equation,
                      self.analyzer.get_shear_force_equation):
            equation = build(self.beam, 5)
            self.assertIsNone(equation(-0.1))
            self.assertIsNone(equation(8.1))
            for x in np.linspace(0, 8, 33):
                self.assertTrue(np.isfinite(equation(x).y))

    def test_single_span_rejected(self):
        beam = Beam(3, 0, Material('timber', {'EI': 1500}))
        with self.assertRaises(InvalidGeometry):
            self.analyzer.get_bending_moment_equation(beam, 5)


class TestBeamAnalysis(TestCase):

    def setUp(self):
        self.analysis = BeamAnalysis()
        self.beam = Beam(4, 0, steel())
        self.two_span = Beam(3, 5, steel())

    def test_result(self):
        result = self.analysis.get_bending_moment(self.beam, 10,
                                                  'simply-supported')
        self.assertIsInstance(result, EquationResult)
        self.assertIs(result.beam, self.beam)
        self.assertEqual(result.load, 10)
        self.assertEqual(result.total_span, 4)
        assert_allclose(result.equation(2).y, 20)

    def test_missing_condition(self):
        for get in (self.analysis.get_deflection,
                    self.analysis.get_bending_moment,
                    self.analysis.get_shear_force):
            with self.assertRaises(InvalidCondition):
                get(self.two_span, 5)
            with self.assertRaises(InvalidCondition):
                get(self.two_span, 5, None)
            with self.assertRaises(InvalidCondition):
                get(self.two_span, 5, ['two-span-unequal'])

    def test_dispatch(self):
        for condition, analyzer in self.analysis.analyzer.items():
            beam = self.two_span
            for get, build in (
                    (self.analysis.get_deflection,
                     analyzer.get_deflection_equation),
                    (self.analysis.get_bending_moment,
                     analyzer.get_bending_moment_equation),
                    (self.analysis.get_shear_force,
                     analyzer.get_shear_force_equation)):
                result = get(beam, 5, condition)
                expected = build(beam, 5)
                for x in (0, 1.5, 3, 4):
                    self.assertEqual(result.equation(x), expected(x))

    def test_invalid_condition(self):
        for get in (self.analysis.get_deflection,
                    self.analysis.get_bending_moment,
                    self.analysis.get_shear_force):
            with self.assertRaises(InvalidCondition):
                get(self.beam, 10, 'fixed-fixed')

    def test_conditions(self):
        self.assertEqual(self.analysis.conditions,
                         ('simply-supported', 'two-span-unequal'))

    def test_register(self):
        class Cantilever(SimplySupported):
            def get_bending_moment_equation(self, beam, load):
                length = beam.primary_span
                return self._bounded(
                    lambda x: -load * (length - x) ** 2 / 2, length
                )

        self.analysis.register('cantilever', Cantilever())
        self.assertIn('cantilever', self.analysis.conditions)
        moment = self.analysis.get_bending_moment(self.beam, 10, 'cantilever')
        assert_allclose(moment.equation(0).y, -80)
        with self.assertRaises(TypeError):
            self.analysis.register('bad', object())

    def test_invalid_analyzer_mapping(self):
        with self.assertRaises(TypeError):
            BeamAnalysis(analyzer={'simply-supported': 'nope'})

    def test_no_caching(self):
        first = self.analysis.get_deflection(self.beam, 10, SS)
        second = self.analysis.get_deflection(self.beam, 10, SS)
        self.assertIsNot(first.equation, second.equation)
        self.assertEqual(first.equation(1), second.equation(1))

    def test_abstract_analyzer(self):
        with self.assertRaises(TypeError):
            Analyzer()

    def test_debug_logging(self):
        class TracedAnalysis(BeamAnalysis):
            pass

        self.assertEqual(TracedAnalysis().logger.level, logging.WARNING)
        analysis = TracedAnalysis(analyzer={SS: SimplySupported()},
                                  debug=True)
        self.assertEqual(analysis.logger.level, logging.DEBUG)
        quiet = TracedAnalysis()
        self.assertEqual(quiet.logger.level, logging.DEBUG,
                         msg='A later instance without debug must not reset '
                             'the shared logger.')
        with self.assertLogs(analysis.logger, level='ERROR'):
            with self.assertRaises(InvalidCondition):
                analysis.get_shear_force(self.beam, 10, 'fixed-fixed')


class TestEquationResult(TestCase):

    def setUp(self):
        self.analysis = BeamAnalysis()
        self.beam = Beam(4, 0, steel())

    def test_sample(self):
        result = self.analysis.get_bending_moment(self.beam, 10, SS)
        xs, ys = result.sample(0.5)
        assert_allclose(xs, np.linspace(0, 4, 9))
        assert_allclose(ys, 5 * (4 * xs - xs ** 2))

    def test_sample_includes_end(self):
        result = self.analysis.get_shear_force(self.beam, 10, SS)
        xs, ys = result.sample(0.3)
        self.assertEqual(xs[-1], 4)
        assert_allclose(ys[-1], -20)
        self.assertTrue(np.all(np.diff(xs) > 0))

    def test_sample_two_span(self):
        result = self.analysis.get_deflection(Beam(3, 5, steel()), 5,
                                              'two-span-unequal')
        xs, _ = result.sample()
        self.assertEqual(xs[0], 0)
        self.assertEqual(xs[-1], 8)

    def test_sample_step(self):
        result = self.analysis.get_shear_force(self.beam, 10, SS)
        for step in (0, -0.1):
            with self.assertRaises(ValueError):
                result.sample(step)

    def test_sample_drops_none(self):
        result = EquationResult(
            self.beam, 1, lambda x: PointSample(x, x) if x < 2 else None
        )
        xs, ys = result.sample(1)
        assert_allclose(xs, [0, 1])
        assert_allclose(ys, [0, 1])

    def test_extreme(self):
        result = self.analysis.get_deflection(self.beam, 10, SS)
        point = result.extreme(0.5)
        assert_allclose(point.x, 2)
        assert_allclose(point.y, -5 * 10 * 4 ** 4 / (384 * 20))

    def test_extreme_without_samples(self):
        result = EquationResult(self.beam, 1, lambda x: None)
        with self.assertRaises(ValueError):
            result.extreme(0.5)

    def test_table(self):
        result = self.analysis.get_bending_moment(self.beam, 10, SS)
        table = result.table(2, 2)
        self.assertIn('20.00', table)
        self.assertIn('x', table.splitlines()[1])
