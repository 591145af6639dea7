from beamcalc.core.solution.reactions import Reactions, ReactionSolver


__all__ = [
    'Reactions',
    'ReactionSolver',
]
