from beamcalc.core import (
    AnalysisResult, Beam, BeamAnalysis, BeamAnalysisError, Condition,
    InvalidGeometryError, InvalidMaterialError, Material, Point, Quantity,
    Reactions, ReactionSolver, UnsupportedConditionError
)

__all__ = [
    'AnalysisResult',
    'Beam',
    'BeamAnalysis',
    'BeamAnalysisError',
    'Condition',
    'InvalidGeometryError',
    'InvalidMaterialError',
    'Material',
    'Point',
    'Quantity',
    'Reactions',
    'ReactionSolver',
    'UnsupportedConditionError',
]
