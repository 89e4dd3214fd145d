"""Mechanical property prediction from composition and quench response.

Yield strength follows Hall-Petch with a solid-solution friction stress and
V/Ti grain refinement. Hardness is estimated from carbon equivalent and the
as-quenched martensite fraction; UTS from yield strength with a
martensite-dependent tensile ratio.

References:
- Hall, E.O. (1951); Petch, N.J. (1953) grain size strengthening
- ASTM E140 for hardness scale conversion
"""
from dataclasses import dataclass
from typing import Mapping, Tuple
import math

from .numeric import round_half_up


# Hall-Petch slope (MPa um^0.5) for steel
HALL_PETCH_KY = 21.0

# Lower bound on the V/Ti grain refinement factor
MIN_REFINEMENT_FACTOR = 0.3

# Grain size floor (um); keeps d^-0.5 finite
MIN_GRAIN_SIZE = 0.1

HRC_CAP = 65

STRENGTHENING_LABELS = ('Solid Solution', 'Grain Refinement', 'Precipitation', 'Martensite')


def clamp_grain_size(grain_size) -> float:
    """Grain size in um, with non-numeric or sub-floor values raised to the floor."""
    try:
        d = float(grain_size)
    except (TypeError, ValueError):
        return MIN_GRAIN_SIZE
    if not math.isfinite(d) or d < MIN_GRAIN_SIZE:
        return MIN_GRAIN_SIZE
    return d


@dataclass(frozen=True)
class MechanicalProperties:
    """Predicted mechanical properties.

    Attributes
    ----------
    sigma0 : int
        Lattice friction stress, rounded (MPa)
    effective_grain_size : float
        Grain size after V/Ti refinement (um)
    yield_strength : int
        Hall-Petch yield strength (MPa)
    hardness_hrc : int
        Rockwell C equivalent, capped at 65
    hardness_hv : int
        Vickers hardness
    uts : int
        Ultimate tensile strength (MPa)
    """
    sigma0: int
    effective_grain_size: float
    yield_strength: int
    hardness_hrc: int
    hardness_hv: int
    uts: int


class MechanicalPropertyPredictor:
    """Predicts strength and hardness for a normalized composition.

    Parameters
    ----------
    composition : dict
        Normalized element weight percentages
    """

    def __init__(self, composition: Mapping[str, float]):
        self.comp = composition

    def _wt(self, symbol: str) -> float:
        return self.comp.get(symbol, 0.0)

    def friction_stress(self) -> float:
        """Lattice friction stress sigma_0 (MPa).

        sigma_0 = 70 + 32*Mn + 84*Si + 35*Ni + 38*Cr + 11*Mo + 350*C
        """
        return (70 + 32 * self._wt('Mn') + 84 * self._wt('Si') + 35 * self._wt('Ni')
                + 38 * self._wt('Cr') + 11 * self._wt('Mo') + 350 * self._wt('C'))

    def refinement_factor(self) -> float:
        """Grain refinement from V and Ti microalloying.

        factor = 1 - 0.05*V - 0.03*Ti, floored at 0.3
        """
        factor = 1 - 0.05 * self._wt('V') - 0.03 * self._wt('Ti')
        return max(MIN_REFINEMENT_FACTOR, factor)

    def effective_grain_size(self, grain_size: float) -> float:
        """Refined grain size (um)."""
        return clamp_grain_size(grain_size) * self.refinement_factor()

    def yield_strength(self, grain_size: float) -> int:
        """Hall-Petch yield strength, rounded to the nearest MPa.

        sigma_y = sigma_0 + k_y * d_eff^(-1/2)
        """
        d_eff = self.effective_grain_size(grain_size)
        return round_half_up(self.friction_stress() + HALL_PETCH_KY * d_eff ** -0.5)

    @staticmethod
    def hrc_equivalent(ce: float, martensite_fraction: float) -> float:
        """Uncapped Rockwell C estimate: 20 + 60*CE + 20*f_m."""
        return 20 + 60 * ce + 20 * martensite_fraction

    @classmethod
    def hardness(cls, ce: float, martensite_fraction: float) -> Tuple[int, int]:
        """Hardness in HRC and HV.

        HRC is capped at 65 and rounded. HV uses the linear conversion
        HV = 3.1 * (9.87*HRC + 51) on the uncapped HRC estimate.

        Returns
        -------
        tuple
            (HRC, HV)
        """
        hrc = cls.hrc_equivalent(ce, martensite_fraction)
        hv = 3.1 * (hrc * 9.87 + 51)
        return min(HRC_CAP, round_half_up(hrc)), round_half_up(hv)

    @staticmethod
    def uts(yield_strength: float, martensite_fraction: float) -> int:
        """Ultimate tensile strength from YS: YS * (1.25 + 0.15*f_m)."""
        return round_half_up(yield_strength * (1.25 + 0.15 * martensite_fraction))

    def strengthening_contributions(self, martensite_fraction: float) -> Tuple[Tuple[str, float], ...]:
        """Relative strengthening mechanism indices (0-100).

        Qualitative indicators for display, not additive stress terms.
        """
        values = (
            3 * self._wt('Ni') + 4 * self._wt('Mn') + 8 * self._wt('Si'),
            120 * self._wt('V') + 80 * self._wt('Ti'),
            300 * self._wt('C') + 80 * self._wt('V'),
            martensite_fraction * 100,
        )
        return tuple(
            (label, min(100.0, float(v))) for label, v in zip(STRENGTHENING_LABELS, values)
        )

    def predict(self, grain_size: float, ce: float, martensite_fraction: float) -> MechanicalProperties:
        """Predict all mechanical properties.

        Parameters
        ----------
        grain_size : float
            Prior austenite grain size (um)
        ce : float
            Carbon equivalent
        martensite_fraction : float
            As-quenched martensite fraction (0 to 1)

        Returns
        -------
        MechanicalProperties
        """
        ys = self.yield_strength(grain_size)
        hrc, hv = self.hardness(ce, martensite_fraction)
        return MechanicalProperties(
            sigma0=round_half_up(self.friction_stress()),
            effective_grain_size=self.effective_grain_size(grain_size),
            yield_strength=ys,
            hardness_hrc=hrc,
            hardness_hv=hv,
            uts=self.uts(ys, martensite_fraction),
        )
