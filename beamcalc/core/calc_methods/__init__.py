from beamcalc.core.calc_methods.base import Analyzer
from beamcalc.core.calc_methods.simply_supported import (
    SimplySupportedAnalyzer,
    SimplySupportedDeflection,
    SimplySupportedMoment,
    SimplySupportedShear,
)
from beamcalc.core.calc_methods.two_span import (
    TwoSpanDeflection,
    TwoSpanMoment,
    TwoSpanShear,
    TwoSpanUnequalAnalyzer,
)

__all__ = [
    'Analyzer',
    'SimplySupportedAnalyzer',
    'SimplySupportedDeflection',
    'SimplySupportedMoment',
    'SimplySupportedShear',
    'TwoSpanDeflection',
    'TwoSpanMoment',
    'TwoSpanShear',
    'TwoSpanUnequalAnalyzer',
]
