from beamcalc.core import (
    calc_methods, postprocessing, preprocessing, solution
)
from beamcalc.core.calc_methods import *  # noqa: F401, F403
from beamcalc.core.engine import BeamAnalysis
from beamcalc.core.exceptions import (
    BeamAnalysisError,
    InvalidGeometryError,
    InvalidMaterialError,
    UnsupportedConditionError,
)
from beamcalc.core.postprocessing import *  # noqa: F401, F403
from beamcalc.core.preprocessing import *  # noqa: F401, F403
from beamcalc.core.solution import *  # noqa: F401, F403

__all__ = [
    'BeamAnalysis',
    'BeamAnalysisError',
    'calc_methods',
    'InvalidGeometryError',
    'InvalidMaterialError',
    'postprocessing',
    'preprocessing',
    'solution',
    'UnsupportedConditionError',
]
