from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from beamcalc.core.logger_mixin import LoggerMixin
from beamcalc.core.postprocessing.equations import Equation
from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition
from beamcalc.core.utils import check_finite


@dataclass(eq=False)
class Analyzer(LoggerMixin, ABC):
    """Closed-form analysis of a beam for one support condition.

    An analyzer holds no per-call state. Each method binds the given beam
    and load into a new :any:`Equation`.

    Parameters
    ----------
    debug : :any:`bool`, default=False
        Enable debug logging.
    """

    condition: ClassVar[Condition]

    debug: bool = False

    def _check(self, beam: Beam, load: float) -> float:
        if not isinstance(beam, Beam):
            raise TypeError('beam has to be a Beam.')
        return check_finite(load, 'load')

    @abstractmethod
    def deflection(self, beam: Beam, load: float,
                   correction: float = 1.0) -> Equation:
        """Deflection in mm, multiplied by ``correction``."""

    @abstractmethod
    def bending_moment(self, beam: Beam, load: float) -> Equation:
        """Bending moment in kN m, sagging positive."""

    @abstractmethod
    def shear_force(self, beam: Beam, load: float) -> Equation:
        """Shear force in kN, the derivative of the bending moment."""
