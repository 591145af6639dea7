from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple

from beamcalc.core.preprocessing.beam import Beam


class Point(NamedTuple):
    """A sampled point of an equation, ``y`` evaluated at position ``x``."""

    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Equation(ABC):
    r"""A result quantity of a loaded beam as a pure function of position.

    Instances are immutable value objects bound to a beam and a load.
    Calling an equation with a position :math:`x` (in m, measured from the
    left end support) returns a :any:`Point`. Positions outside
    :math:`[0, L]` lie outside the beam and evaluate to zero.

    Parameters
    ----------
    beam : :any:`Beam`
        The analysed beam.
    load : :any:`float`
        Uniformly distributed load :math:`w` in kN/m.
    """

    beam: Beam
    load: float

    def __call__(self, x: float) -> Point:
        x = float(x)
        if x < 0 or x > self.span:
            return Point(x, 0.0)
        return Point(x, self.evaluate(x))

    @property
    def span(self) -> float:
        """Length of the domain the equation is defined on."""
        return self.beam.length

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Value of the quantity at a position inside the domain."""
