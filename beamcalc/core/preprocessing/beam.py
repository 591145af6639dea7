from dataclasses import dataclass

from beamcalc.core.exceptions import InvalidGeometryError
from beamcalc.core.preprocessing.material import Material
from beamcalc.core.solution.reactions import Reactions, ReactionSolver
from beamcalc.core.utils import check_finite


@dataclass(frozen=True, eq=False)
class Beam:
    r"""Create a beam with one or two spans.

    Parameters
    ----------
    primary_span : :any:`float`
        Length of the first span :math:`L_1` in m.
    secondary_span : :any:`float`
        Length of the second span :math:`L_2` in m. A value of zero
        describes a single-span beam.
    material : :any:`Material`
        The material of the beam.

    Raises
    ------
    InvalidGeometryError
        :py:attr:`primary_span` has to be greater than zero.
    InvalidGeometryError
        :py:attr:`secondary_span` must not be negative.
    InvalidGeometryError
        Both spans have to be finite numbers.
    TypeError
        :py:attr:`material` has to be a :any:`Material`.

    Examples
    --------
    >>> from beamcalc import Beam, Material
    >>> beam = Beam(3, 5, Material('Timber', {'EI': 2.5e12}))
    >>> beam.is_two_span, beam.length
    (True, 8.0)
    """

    primary_span: float
    secondary_span: float
    material: Material

    def __post_init__(self):
        for name in ('primary_span', 'secondary_span'):
            try:
                value = check_finite(getattr(self, name), name)
            except ValueError as error:
                raise InvalidGeometryError(str(error)) from None
            object.__setattr__(self, name, value)
        if self.primary_span <= 0:
            raise InvalidGeometryError(
                'primary_span has to be greater than zero.'
            )
        if self.secondary_span < 0:
            raise InvalidGeometryError('secondary_span must not be negative.')
        if not isinstance(self.material, Material):
            raise TypeError('material has to be a Material.')

    @property
    def is_two_span(self) -> bool:
        """:python:`True` if the beam rests on three supports."""
        return self.secondary_span > 0

    @property
    def length(self) -> float:
        """Total length of the beam in m."""
        return self.primary_span + self.secondary_span

    def reactions(self, load: float, solver: ReactionSolver = None
                  ) -> Reactions:
        """Support reactions of the two-span beam under ``load`` in kN/m.

        Raises
        ------
        InvalidGeometryError
            The beam has a single span only.
        """
        if not self.is_two_span:
            raise InvalidGeometryError(
                'Reactions are only defined for a two-span beam.'
            )
        solver = solver if solver is not None else ReactionSolver()
        return solver.solve(load, self.primary_span, self.secondary_span)
