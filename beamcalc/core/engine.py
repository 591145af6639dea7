from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from beamcalc.core.calc_methods import (
    Analyzer, SimplySupportedAnalyzer, TwoSpanUnequalAnalyzer
)
from beamcalc.core.exceptions import UnsupportedConditionError
from beamcalc.core.logger_mixin import LoggerMixin
from beamcalc.core.postprocessing.results import AnalysisResult, Quantity
from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition


@dataclass(eq=False)
class BeamAnalysis(LoggerMixin):
    """Facade selecting the analyzer for a support condition.

    The engine holds exactly one analyzer per :any:`Condition`. Each query
    looks up the analyzer for the requested condition and returns an
    :any:`AnalysisResult` whose equation is bound to the given beam and
    load. Nothing is cached between requests.

    Parameters
    ----------
    default_condition : :any:`Condition` or :any:`str`, \
    default='simply-supported'
        Condition used by queries that do not name one.
    debug : :any:`bool`, default=False
        Enable debug logging for the engine and its analyzers.

    Raises
    ------
    UnsupportedConditionError
        :py:attr:`default_condition` is not a known condition.

    Examples
    --------
    >>> from beamcalc import Beam, BeamAnalysis, Material
    >>> beam = Beam(3, 5, Material('Steel', {'EI': 8.4e12}))
    >>> engine = BeamAnalysis()
    >>> result = engine.get_shear_force(beam, 10, 'two-span-unequal')
    >>> result.condition
    <Condition.TWO_SPAN_UNEQUAL: 'two-span-unequal'>
    >>> engine.get_shear_force(beam, 10, 'cantilever')
    Traceback (most recent call last):
    ...
    beamcalc.core.exceptions.UnsupportedConditionError: Unsupported \
condition 'cantilever'. Supported conditions: simply-supported, \
two-span-unequal.
    """

    default_condition: Condition = Condition.SIMPLY_SUPPORTED
    debug: bool = False

    _analyzers: Mapping[Condition, Analyzer] = field(init=False, repr=False)

    def __post_init__(self):
        self._analyzers = MappingProxyType({
            Condition.SIMPLY_SUPPORTED:
                SimplySupportedAnalyzer(debug=self.debug),
            Condition.TWO_SPAN_UNEQUAL:
                TwoSpanUnequalAnalyzer(debug=self.debug),
        })
        if self.default_condition is None:
            self.default_condition = Condition.SIMPLY_SUPPORTED
        self.default_condition = self._resolve(self.default_condition)
        self.logger.info(
            "Beam analysis created with default condition '%s'.",
            self.default_condition
        )

    @property
    def conditions(self) -> tuple:
        """Names of all supported conditions."""
        return tuple(c.value for c in self._analyzers)

    def _resolve(self, condition) -> Condition:
        if condition is None:
            return self.default_condition
        try:
            resolved = Condition(condition)
        except ValueError:
            resolved = None
        if resolved not in self._analyzers:
            self.logger.error("No analyzer for condition %r.", condition)
            raise UnsupportedConditionError(condition, self.conditions)
        return resolved

    def analyzer(self, condition=None) -> Analyzer:
        """Returns the analyzer registered for ``condition``.

        Raises
        ------
        UnsupportedConditionError
            No analyzer is registered for ``condition``.
        """
        condition = self._resolve(condition)
        analyzer = self._analyzers[condition]
        self.logger.info(
            "Using %s for condition '%s'.",
            analyzer.__class__.__name__, condition
        )
        return analyzer

    def _result(self, beam, condition, quantity, equation):
        return AnalysisResult(
            beam=beam, load=equation.load, equation=equation,
            condition=condition, quantity=quantity
        )

    def get_deflection(self, beam: Beam, load: float, condition=None,
                       correction: float = 1.0) -> AnalysisResult:
        """Deflection of ``beam`` under ``load`` in mm.

        Parameters
        ----------
        beam : :any:`Beam`
            The analysed beam.
        load : :any:`float`
            Uniformly distributed load in kN/m.
        condition : :any:`Condition` or :any:`str`, optional
            The support condition, by default :py:attr:`default_condition`.
        correction : :any:`float`, default=1.0
            Calibration factor multiplied into every deflection value.

        Raises
        ------
        UnsupportedConditionError
            No analyzer is registered for ``condition``.
        InvalidGeometryError
            The beam geometry does not fit the condition.
        InvalidMaterialError
            The material has no valid flexural rigidity ``EI``.
        """
        analyzer = self.analyzer(condition)
        equation = analyzer.deflection(beam, load, correction=correction)
        return self._result(beam, analyzer.condition,
                            Quantity.DEFLECTION, equation)

    def get_bending_moment(self, beam: Beam, load: float,
                           condition=None) -> AnalysisResult:
        """Bending moment of ``beam`` under ``load`` in kN m.

        See :py:meth:`get_deflection` for the parameters and errors.
        """
        analyzer = self.analyzer(condition)
        equation = analyzer.bending_moment(beam, load)
        return self._result(beam, analyzer.condition,
                            Quantity.BENDING_MOMENT, equation)

    def get_shear_force(self, beam: Beam, load: float,
                        condition=None) -> AnalysisResult:
        """Shear force of ``beam`` under ``load`` in kN.

        See :py:meth:`get_deflection` for the parameters and errors.
        """
        analyzer = self.analyzer(condition)
        equation = analyzer.shear_force(beam, load)
        return self._result(beam, analyzer.condition,
                            Quantity.SHEAR_FORCE, equation)

    def analyze(self, beam: Beam, load: float, condition=None,
                correction: float = 1.0) -> dict:
        """All three result quantities of ``beam`` at once.

        Returns
        -------
        :any:`dict`
            The :any:`AnalysisResult` of every :any:`Quantity`.
        """
        return {
            Quantity.DEFLECTION: self.get_deflection(
                beam, load, condition, correction=correction),
            Quantity.BENDING_MOMENT: self.get_bending_moment(
                beam, load, condition),
            Quantity.SHEAR_FORCE: self.get_shear_force(
                beam, load, condition),
        }
