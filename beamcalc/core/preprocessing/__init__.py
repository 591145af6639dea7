from beamcalc.core.preprocessing.beam import Beam
from beamcalc.core.preprocessing.condition import Condition
from beamcalc.core.preprocessing.material import Material


__all__ = [
    'Beam',
    'Condition',
    'Material',
]
