from dataclasses import dataclass
from enum import Enum

import numpy as np

from beamcalc.core.logger_mixin import table_points
from beamcalc.core.postprocessing.equations import Equation
from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition
from beamcalc.core.utils import DEFAULT_STEP, sample_positions


class Quantity(Enum):
    """Result quantities of a beam analysis and their display labels."""

    DEFLECTION = 'Deflection (mm)'
    BENDING_MOMENT = 'Bending Moment (kN-m)'
    SHEAR_FORCE = 'Shear Force (kN)'

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    r"""The outcome of one analysis request.

    Parameters
    ----------
    beam : :any:`Beam`
        The analysed beam.
    load : :any:`float`
        Uniformly distributed load in kN/m.
    equation : :any:`Equation`
        The requested quantity as a function of the position along the
        beam.
    condition : :any:`Condition`
        The support condition the beam was analysed for.
    quantity : :any:`Quantity`
        The kind of result the equation describes.

    Examples
    --------
    >>> from beamcalc import BeamAnalysis, Beam, Material
    >>> beam = Beam(4, 0, Material('Steel', {'EI': 8.4e12}))
    >>> result = BeamAnalysis().get_bending_moment(beam, 10)
    >>> result.equation(2)
    Point(x=2.0, y=20.0)
    >>> x, y = result.sample(step=1)
    >>> y
    array([ 0., 15., 20., 15.,  0.])
    """

    beam: Beam
    load: float
    equation: Equation
    condition: Condition
    quantity: Quantity

    def sample(self, step: float = DEFAULT_STEP):
        """Evaluates the equation along its domain at a fixed step.

        Parameters
        ----------
        step : :any:`float`, default=0.5
            Distance between two sampled positions in m.

        Returns
        -------
        :any:`tuple` of :any:`numpy.ndarray`
            The positions and the corresponding values. Both supports at the
            ends of the beam are always contained.

        Raises
        ------
        ValueError
            :py:attr:`step` has to be greater than zero.
        """
        x = sample_positions(self.equation.span, step)
        y = np.array([self.equation(xi).y for xi in x])
        return x, y

    def table(self, step: float = DEFAULT_STEP, decimals: int = 6) -> str:
        """The sampled points as a grid table."""
        x, y = self.sample(step)
        return table_points(x, y, label=self.quantity.label,
                            decimals=decimals)
