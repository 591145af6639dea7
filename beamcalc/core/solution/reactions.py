from dataclasses import dataclass

from beamcalc.core.exceptions import InvalidGeometryError
from beamcalc.core.logger_mixin import LoggerMixin, table_reactions
from beamcalc.core.utils import check_finite


@dataclass(frozen=True)
class Reactions:
    r"""Support reactions of a uniformly loaded two-span continuous beam.

    Parameters
    ----------
    M1 : :any:`float`
        Bending moment at the shared middle support in kN m. Negative values
        denote hogging.
    R1 : :any:`float`
        Vertical reaction at the left end support in kN.
    R2 : :any:`float`
        Vertical reaction at the middle support in kN.
    R3 : :any:`float`
        Vertical reaction at the right end support in kN.
    """

    M1: float
    R1: float
    R2: float
    R3: float

    @property
    def total(self) -> float:
        """Sum of the vertical reactions, equal to the total applied load."""
        return self.R1 + self.R2 + self.R3


@dataclass(eq=False)
class ReactionSolver(LoggerMixin):
    r"""Solves the support reactions of a two-span continuous beam.

    The beam rests on three rigid supports and carries the uniformly
    distributed load :math:`w` over both spans. The single redundant, the
    moment at the middle support, follows from the three-moment equation

    .. math::
        M_1 = -\dfrac{w L_1^3 + w L_2^3}{8 (L_1 + L_2)}.

    Each span is then treated as a simple span loaded by :math:`w` and the
    end moment :math:`M_1`, which yields the end reactions

    .. math::
        R_1 = \dfrac{M_1}{L_1} + \dfrac{w L_1}{2}, \qquad
        R_3 = \dfrac{M_1}{L_2} + \dfrac{w L_2}{2},

    while the middle reaction closes the vertical equilibrium

    .. math::
        R_2 = w (L_1 + L_2) - R_1 - R_3.

    Parameters
    ----------
    debug : :any:`bool`, default=False
        Enable debug logging of the computed reactions.

    Examples
    --------
    >>> from beamcalc.core.solution import ReactionSolver
    >>> r = ReactionSolver().solve(10, 4, 4)
    >>> r.M1, r.R1, r.R2, r.R3
    (-20.0, 15.0, 50.0, 15.0)
    """

    debug: bool = False

    def solve(self, w: float, l1: float, l2: float) -> Reactions:
        """Computes the reactions for load ``w`` and spans ``l1``, ``l2``.

        Raises
        ------
        InvalidGeometryError
            Both spans have to be finite and greater than zero.
        """
        w = check_finite(w, 'w')
        for name, span in (('l1', l1), ('l2', l2)):
            try:
                span = check_finite(span, name)
            except ValueError as error:
                raise InvalidGeometryError(str(error)) from None
            if span <= 0:
                self.logger.error(
                    "Span %s=%s is not positive, reactions are undefined.",
                    name, span
                )
                raise InvalidGeometryError(
                    f'Both spans of a two-span beam have to be greater than '
                    f'zero, got {name}={span}.'
                )
        l1, l2 = float(l1), float(l2)

        m1 = -(w * l1 ** 3 + w * l2 ** 3) / (8 * (l1 + l2))
        r1 = m1 / l1 + w * l1 / 2
        r3 = m1 / l2 + w * l2 / 2
        r2 = w * (l1 + l2) - r1 - r3
        reactions = Reactions(M1=m1, R1=r1, R2=r2, R3=r3)

        self.logger.debug(
            f"Reactions for w={w}, L1={l1}, L2={l2}: \n"
            f"{table_reactions(reactions)}"
        )
        return reactions
