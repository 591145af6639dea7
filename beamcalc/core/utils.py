import math

import numpy as np

EI_TO_KNM2 = 1e-9
"""Conversion of the flexural rigidity from N mm^2 (``E`` in N/mm^2 times
``I`` in mm^4) to kN m^2."""

M_TO_MM = 1e3
"""Conversion of deflections from m to mm."""

DEFAULT_STEP = 0.5
"""Default sampling step along the beam in m."""


def check_finite(value, name: str):
    """Raise a :any:`ValueError` if ``value`` is not a finite real number."""
    if isinstance(value, str):
        raise TypeError(f'"{name}" has to be a real number.')
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TypeError(f'"{name}" has to be a real number.') from None
    if not math.isfinite(value):
        raise ValueError(f'"{name}" has to be a finite number.')
    return value


def sample_positions(length: float, step: float = DEFAULT_STEP):
    r"""Positions along a beam of the given length at a fixed step.

    Parameters
    ----------
    length : :any:`float`
        Length of the sampled domain, starting at :math:`x = 0`.
    step : :any:`float`, default=0.5
        Distance between two consecutive positions.

    Returns
    -------
    :any:`numpy.ndarray`
        The positions :math:`0, s, 2s, \dots` up to ``length``. The end
        point is always contained, even if ``length`` is not a multiple of
        ``step``.

    Raises
    ------
    ValueError
        :py:attr:`step` has to be greater than zero.

    Examples
    --------
    >>> from beamcalc.core.utils import sample_positions
    >>> sample_positions(2.0)
    array([0. , 0.5, 1. , 1.5, 2. ])
    >>> sample_positions(1.2, 0.5)
    array([0. , 0.5, 1. , 1.2])
    """
    step = check_finite(step, 'step')
    if step <= 0:
        raise ValueError('"step" has to be greater than zero.')
    n = int(np.floor(length / step + 1e-9))
    x = np.arange(n + 1) * step
    if np.isclose(x[-1], length, rtol=0, atol=1e-9 * max(step, 1.0)):
        x[-1] = length
    else:
        x = np.append(x, length)
    return x
