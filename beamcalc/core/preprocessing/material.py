import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from beamcalc.core.exceptions import InvalidMaterialError


@dataclass(frozen=True, eq=False)
class Material:
    r"""Create a named bundle of material properties for a beam.

    Parameters
    ----------
    name : :any:`str`
        Name of the material, e.g. :python:`'Steel S235'`.
    properties : :any:`dict`
        Material properties keyed by their symbol, e.g.
        :python:`{'EI': 8.4e12, 'GA': 1.2e6}`. The flexural rigidity
        :math:`EI` is expected in N mm\ :sup:`2`.

    Raises
    ------
    TypeError
        :py:attr:`name` has to be a string and :py:attr:`properties` a
        mapping.

    Notes
    -----
        The properties are copied into a read-only mapping, so neither the
        material nor the caller's dictionary can change the material after
        construction. Which keys are present is not validated here: an
        analysis reading a missing property raises
        :any:`InvalidMaterialError` at the moment it needs the value.

    Examples
    --------
    >>> from beamcalc import Material
    >>> steel = Material('Steel', {'EI': 8.4e12})
    >>> steel.EI
    8400000000000.0
    """

    name: str
    properties: Mapping[str, float]

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError('name has to be a string.')
        if not isinstance(self.properties, Mapping):
            raise TypeError('properties has to be a mapping.')
        object.__setattr__(
            self, 'properties', MappingProxyType(dict(self.properties))
        )

    def get(self, key: str) -> float:
        """Returns the property ``key`` as a positive finite number.

        Raises
        ------
        InvalidMaterialError
            The property is missing or not a positive finite number.
        """
        if key not in self.properties:
            raise InvalidMaterialError(
                f'Material {self.name!r} has no property {key!r}.'
            )
        try:
            value = float(self.properties[key])
        except (TypeError, ValueError):
            raise InvalidMaterialError(
                f'Property {key!r} of material {self.name!r} has to be a '
                f'number.'
            ) from None
        if not math.isfinite(value) or value <= 0:
            raise InvalidMaterialError(
                f'Property {key!r} of material {self.name!r} has to be '
                f'greater than zero.'
            )
        return value

    @property
    def EI(self) -> float:
        """Flexural rigidity in N mm\\ :sup:`2`."""
        return self.get('EI')

    @property
    def GA(self) -> float:
        """Shear rigidity."""
        return self.get('GA')
