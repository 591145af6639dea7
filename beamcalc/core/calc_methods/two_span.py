from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from beamcalc.core.calc_methods.base import Analyzer
from beamcalc.core.exceptions import InvalidGeometryError
from beamcalc.core.postprocessing.equations import Equation
from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition
from beamcalc.core.solution.reactions import Reactions, ReactionSolver
from beamcalc.core.utils import EI_TO_KNM2, M_TO_MM, check_finite


@dataclass(frozen=True, eq=False)
class _TwoSpanEquation(Equation):
    """Piecewise equation over the spans :math:`[0, L_1]` and
    :math:`(L_1, L_1 + L_2]`. The shared support belongs to the first span.
    """

    reactions: Reactions

    def evaluate(self, x):
        if x <= self.beam.primary_span:
            return self.span_one(x)
        return self.span_two(x)

    @abstractmethod
    def span_one(self, x: float) -> float:
        """Value on the first span."""

    @abstractmethod
    def span_two(self, x: float) -> float:
        """Value on the second span."""


@dataclass(frozen=True, eq=False)
class TwoSpanMoment(_TwoSpanEquation):
    r"""Bending moment of the two-span beam.

    .. math::
        M(x) = \begin{cases}
            R_1 x - \dfrac{w x^2}{2} & 0 \le x \le L_1 \\
            R_1 x + R_2 (x - L_1) - \dfrac{w x^2}{2} & L_1 < x \le L_1 + L_2
        \end{cases}
    """

    def span_one(self, x):
        return self.reactions.R1 * x - self.load * x ** 2 / 2

    def span_two(self, x):
        r = self.reactions
        return (r.R1 * x + r.R2 * (x - self.beam.primary_span)
                - self.load * x ** 2 / 2)


@dataclass(frozen=True, eq=False)
class TwoSpanShear(_TwoSpanEquation):
    r"""Shear force of the two-span beam.

    .. math::
        V(x) = \begin{cases}
            R_1 - w x & 0 \le x \le L_1 \\
            R_1 + R_2 - w x & L_1 < x \le L_1 + L_2
        \end{cases}

    The middle reaction causes a jump of :math:`R_2` at :math:`x = L_1`;
    :py:meth:`span_one` and :py:meth:`span_two` evaluate both sides.
    """

    def span_one(self, x):
        return self.reactions.R1 - self.load * x

    def span_two(self, x):
        r = self.reactions
        return r.R1 + r.R2 - self.load * x


@dataclass(frozen=True, eq=False)
class TwoSpanDeflection(_TwoSpanEquation):
    r"""Deflection of the two-span beam in mm.

    Integrating :math:`EI \, \delta'' = -M` twice with
    :math:`\delta = 0` at all three supports gives, per span, the deflection
    of a uniformly loaded simple span superposed with that of the support
    moment :math:`M_1` acting at the shared support:

    .. math::
        EI \, \delta(x) = x (L_1 - x) \left[
            \dfrac{w (L_1^2 + L_1 x - x^2)}{24}
            + \dfrac{M_1 (L_1 + x)}{6 L_1} \right]

    on the first span and, with :math:`u = x - L_1` and
    :math:`v = L_1 + L_2 - x`,

    .. math::
        EI \, \delta(x) = u v \left[
            \dfrac{w (L_2^2 + L_2 u - u^2)}{24}
            + \dfrac{M_1 (L_2 + v)}{6 L_2} \right]

    on the second. The slopes of both spans agree at the shared support
    because :math:`M_1` satisfies the three-moment equation. Deflections in
    the direction of the load are positive.

    Parameters
    ----------
    ei : :any:`float`
        Flexural rigidity in kN m\ :sup:`2`.
    correction : :any:`float`, default=1.0
        Factor multiplied into the deflection.
    """

    ei: float = 1.0
    correction: float = 1.0

    def _scale(self, delta):
        return delta / self.ei * M_TO_MM * self.correction

    def span_one(self, x):
        l1, w, m1 = self.beam.primary_span, self.load, self.reactions.M1
        return self._scale(x * (l1 - x) * (
            w * (l1 ** 2 + l1 * x - x ** 2) / 24 + m1 * (l1 + x) / (6 * l1)
        ))

    def span_two(self, x):
        l1, l2 = self.beam.primary_span, self.beam.secondary_span
        w, m1 = self.load, self.reactions.M1
        u, v = x - l1, self.beam.length - x
        return self._scale(u * v * (
            w * (l2 ** 2 + l2 * u - u ** 2) / 24 + m1 * (l2 + v) / (6 * l2)
        ))


@dataclass(eq=False)
class TwoSpanUnequalAnalyzer(Analyzer):
    r"""Analysis of a continuous beam over two spans and three supports.

    Equal and unequal spans share one set of equations; all of them are
    built from the reactions of :any:`ReactionSolver`.

    Parameters
    ----------
    debug : :any:`bool`, default=False
        Enable debug logging.
    solver : :any:`ReactionSolver`, optional
        Solver for the support reactions. A new one is created by default.

    Raises
    ------
    InvalidGeometryError
        The analysed beam needs a secondary span greater than zero.

    Examples
    --------
    >>> from beamcalc import Beam, Material
    >>> from beamcalc.core.calc_methods import TwoSpanUnequalAnalyzer
    >>> beam = Beam(4, 4, Material('Steel', {'EI': 8.4e12}))
    >>> moment = TwoSpanUnequalAnalyzer().bending_moment(beam, 10)
    >>> moment(4).y
    -20.0
    """

    condition: ClassVar[Condition] = Condition.TWO_SPAN_UNEQUAL

    solver: ReactionSolver = None

    def __post_init__(self):
        if self.solver is None:
            self.solver = ReactionSolver(debug=self.debug)

    def reactions(self, beam: Beam, load: float) -> Reactions:
        """Support reactions of ``beam`` under the load ``load``."""
        load = self._check(beam, load)
        if not beam.is_two_span:
            self.logger.error(
                "Two-span analysis requested for a single-span beam.")
            raise InvalidGeometryError(
                'A two-span analysis requires a secondary span greater than '
                'zero.'
            )
        return self.solver.solve(load, beam.primary_span, beam.secondary_span)

    def deflection(self, beam: Beam, load: float,
                   correction: float = 1.0) -> TwoSpanDeflection:
        reactions = self.reactions(beam, load)
        correction = check_finite(correction, 'correction')
        ei = beam.material.EI * EI_TO_KNM2
        self.logger.debug(
            f"Deflection of L1={beam.primary_span} m, "
            f"L2={beam.secondary_span} m, EI={ei} kNm², "
            f"correction={correction}"
        )
        return TwoSpanDeflection(beam, float(load), reactions, ei, correction)

    def bending_moment(self, beam: Beam, load: float) -> TwoSpanMoment:
        reactions = self.reactions(beam, load)
        return TwoSpanMoment(beam, float(load), reactions)

    def shear_force(self, beam: Beam, load: float) -> TwoSpanShear:
        reactions = self.reactions(beam, load)
        return TwoSpanShear(beam, float(load), reactions)
