from dataclasses import dataclass
from typing import ClassVar

from beamcalc.core.calc_methods.base import Analyzer
from beamcalc.core.postprocessing.equations import Equation
from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition
from beamcalc.core.utils import EI_TO_KNM2, M_TO_MM, check_finite


@dataclass(frozen=True, eq=False)
class _SingleSpanEquation(Equation):

    @property
    def span(self) -> float:
        return self.beam.primary_span


@dataclass(frozen=True, eq=False)
class SimplySupportedMoment(_SingleSpanEquation):
    r"""Bending moment :math:`M(x) = \dfrac{w x (L - x)}{2}`."""

    def evaluate(self, x):
        return self.load * x * (self.span - x) / 2


@dataclass(frozen=True, eq=False)
class SimplySupportedShear(_SingleSpanEquation):
    r"""Shear force :math:`V(x) = w \left(\dfrac{L}{2} - x\right)`."""

    def evaluate(self, x):
        return self.load * (self.span / 2 - x)


@dataclass(frozen=True, eq=False)
class SimplySupportedDeflection(_SingleSpanEquation):
    r"""Deflection of a uniformly loaded simple span in mm.

    .. math::
        \delta(x) = c \cdot \dfrac{w x (L - x)(L^2 + L x - x^2)}{24 EI}

    which equals the usual :math:`w x (L^3 - 2 L x^2 + x^3) / (24 EI)` but
    vanishes exactly at both supports. Deflections in the direction of the
    load are positive; :math:`c` is the correction factor.

    Parameters
    ----------
    ei : :any:`float`
        Flexural rigidity in kN m\ :sup:`2`.
    correction : :any:`float`, default=1.0
        Factor multiplied into the deflection.
    """

    ei: float = 1.0
    correction: float = 1.0

    def evaluate(self, x):
        length, w = self.span, self.load
        delta = (w * x * (length - x) * (length ** 2 + length * x - x ** 2)
                 / (24 * self.ei))
        return delta * M_TO_MM * self.correction


@dataclass(eq=False)
class SimplySupportedAnalyzer(Analyzer):
    r"""Analysis of a single span resting on two end supports.

    Only :py:attr:`Beam.primary_span` is considered; a secondary span is
    ignored. The moment diagram is the parabola :math:`w x (L - x) / 2`
    with its maximum :math:`w L^2 / 8` at midspan, the shear force falls
    linearly from :math:`+wL/2` to :math:`-wL/2`.

    Examples
    --------
    >>> from beamcalc import Beam, Material
    >>> from beamcalc.core.calc_methods import SimplySupportedAnalyzer
    >>> beam = Beam(4, 0, Material('Steel', {'EI': 8.4e12}))
    >>> shear = SimplySupportedAnalyzer().shear_force(beam, 10)
    >>> shear(0).y, shear(4).y
    (20.0, -20.0)
    """

    condition: ClassVar[Condition] = Condition.SIMPLY_SUPPORTED

    def deflection(self, beam: Beam, load: float,
                   correction: float = 1.0) -> SimplySupportedDeflection:
        load = self._check(beam, load)
        correction = check_finite(correction, 'correction')
        ei = beam.material.EI * EI_TO_KNM2
        self.logger.debug(
            f"Deflection of L={beam.primary_span} m, w={load} kN/m, "
            f"EI={ei} kNm², correction={correction}"
        )
        return SimplySupportedDeflection(beam, load, ei, correction)

    def bending_moment(self, beam: Beam, load: float) -> SimplySupportedMoment:
        return SimplySupportedMoment(beam, self._check(beam, load))

    def shear_force(self, beam: Beam, load: float) -> SimplySupportedShear:
        return SimplySupportedShear(beam, self._check(beam, load))
