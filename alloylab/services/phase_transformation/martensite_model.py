"""Koistinen-Marburger model for athermal martensite transformation.

The fraction of martensite formed is a function of undercooling below Ms:
    f_m = 1 - exp(-alpha * (Ms - T))

The as-quenched fraction is evaluated at the quench medium temperature,
since the athermal transformation depends only on the lowest temperature
reached.
"""
import math
from dataclasses import dataclass
from typing import Mapping

from ..elements import quench_config
from .critical_temperatures import ms_from_composition


@dataclass(frozen=True)
class MartensiteResult:
    """As-quenched martensite prediction.

    Attributes
    ----------
    fraction : float
        Martensite volume fraction (0 to 1)
    ms : float
        Martensite start temperature (deg C)
    quench_temperature : float
        Temperature reached in the quench medium (deg C)
    """
    fraction: float
    ms: float
    quench_temperature: float


class KoistinenMarburgerModel:
    """Koistinen-Marburger athermal martensite transformation model.

    f_m(T) = 1 - exp(-alpha * (Ms - T))  for T < Ms
    f_m(T) = 0                            for T >= Ms

    Parameters
    ----------
    ms : float
        Martensite start temperature (deg C)
    alpha : float
        Rate parameter (1/K), default 0.011
    """

    # Default K-M coefficient (typical for steels)
    DEFAULT_ALPHA = 0.011

    def __init__(self, ms: float, alpha: float = DEFAULT_ALPHA):
        self.ms = ms
        self.alpha = alpha

    def fraction_at_temperature(self, temperature: float) -> float:
        """Calculate martensite fraction at a given temperature.

        Parameters
        ----------
        temperature : float
            Current temperature in deg C

        Returns
        -------
        float
            Martensite fraction (0 to 1)
        """
        if self.ms <= temperature:
            return 0.0

        undercooling = self.ms - temperature
        f = 1.0 - math.exp(-self.alpha * undercooling)
        return min(max(f, 0.0), 1.0)

    @classmethod
    def from_composition(cls, composition: Mapping[str, float]) -> 'KoistinenMarburgerModel':
        """Create model from composition using the Ms regression."""
        return cls(ms=ms_from_composition(composition))


def martensite_fraction(composition: Mapping[str, float], quench_medium) -> MartensiteResult:
    """As-quenched martensite fraction for a composition and quench medium.

    Parameters
    ----------
    composition : dict
        Normalized element weight percentages
    quench_medium : str
        'Water', 'Oil' or 'Air'; anything else is treated as oil

    Returns
    -------
    MartensiteResult
    """
    model = KoistinenMarburgerModel.from_composition(composition)
    t_quench = quench_config(quench_medium).quench_temperature
    return MartensiteResult(
        fraction=model.fraction_at_temperature(t_quench),
        ms=model.ms,
        quench_temperature=t_quench,
    )
