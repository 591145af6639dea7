from beamcalc.core.postprocessing.equations import Equation, Point
from beamcalc.core.postprocessing.results import AnalysisResult, Quantity


__all__ = [
    'AnalysisResult',
    'Equation',
    'Point',
    'Quantity',
]
