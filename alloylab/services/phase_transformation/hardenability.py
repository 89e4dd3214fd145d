"""Carbon equivalent and hardenability classification.

CE (Dearden & O'Neill form):
    CE = C + Mn/6 + (Cr + Mo + V)/5 + Ni/15

The formula was calibrated on low-alloy steels. Stainless-range chromium
contents give CE well above 1 and always land in the last bin; the formula
is kept as is.
"""
import math
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class HardenabilityClass:
    """Hardenability classification for one CE bin.

    Attributes
    ----------
    upper_bound : float
        Exclusive upper CE bound of the bin
    probability : float
        Probability of a successful through-hardening quench
    risk : str
        Quench risk label
    label : str
        Qualitative hardenability label
    """
    upper_bound: float
    probability: float
    risk: str
    label: str

    def to_dict(self) -> dict:
        return {
            'probability': self.probability,
            'risk': self.risk,
            'label': self.label,
        }


# Ordered, non-overlapping CE bins; probability is non-increasing down the table
HARDENABILITY_CLASSES = (
    HardenabilityClass(0.25, 0.95, 'Low', 'Excellent'),
    HardenabilityClass(0.35, 0.82, 'Low-Medium', 'Good'),
    HardenabilityClass(0.45, 0.65, 'Medium', 'Fair'),
    HardenabilityClass(0.60, 0.40, 'High', 'Poor'),
    HardenabilityClass(math.inf, 0.15, 'Very High', 'Critical'),
)


def carbon_equivalent(composition: Mapping[str, float]) -> float:
    """Carbon equivalent of a composition.

    Parameters
    ----------
    composition : dict
        Element weight percentages

    Returns
    -------
    float
        CE in wt%
    """
    C = composition.get('C', 0.0)
    Mn = composition.get('Mn', 0.0)
    Cr = composition.get('Cr', 0.0)
    Mo = composition.get('Mo', 0.0)
    V = composition.get('V', 0.0)
    Ni = composition.get('Ni', 0.0)
    return C + Mn / 6 + (Cr + Mo + V) / 5 + Ni / 15


def classify_hardenability(ce: float) -> HardenabilityClass:
    """Return the first bin whose upper bound exceeds CE."""
    for cls in HARDENABILITY_CLASSES:
        if ce < cls.upper_bound:
            return cls
    return HARDENABILITY_CLASSES[-1]
