"""Static reference data: alloying elements and quench media.

All tables are read-only and built once at import time. Model functions
receive them by reference and never modify them.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class ElementData:
    """Reference attributes of an alloying element.

    Attributes
    ----------
    symbol : str
        Chemical symbol
    name : str
        Element name
    cost : float
        Raw material cost (USD/kg)
    density : float
        Density (g/cm^3)
    max_wt_pct : float or None
        Upper bound for user-set weight percent; None for the balance element
    """
    symbol: str
    name: str
    cost: float
    density: float
    max_wt_pct: Optional[float]


@dataclass(frozen=True)
class QuenchConfig:
    """Quench medium parameters.

    Attributes
    ----------
    name : str
        Medium label as shown to users
    quench_temperature : float
        Bath / ambient temperature reached at the end of the quench (deg C)
    cooling_rate : float
        Representative linear cooling rate from austenitizing (deg C/s)
    """
    name: str
    quench_temperature: float
    cooling_rate: float


# Balance element
BALANCE_ELEMENT = 'Fe'

# Element order is also the composition listing order in reports
ELEMENTS = ('Fe', 'Ni', 'Cr', 'Mo', 'C', 'Mn', 'Si', 'Ti', 'V')

ALLOYING_ELEMENTS = tuple(el for el in ELEMENTS if el != BALANCE_ELEMENT)

CARBON_MAX_WT_PCT = 2.0
ALLOY_MAX_WT_PCT = 30.0

ELEMENT_DATA = MappingProxyType({
    'Fe': ElementData('Fe', 'Iron', 0.09, 7.87, None),
    'Ni': ElementData('Ni', 'Nickel', 13.5, 8.908, ALLOY_MAX_WT_PCT),
    'Cr': ElementData('Cr', 'Chromium', 9.8, 7.19, ALLOY_MAX_WT_PCT),
    'Mo': ElementData('Mo', 'Molybdenum', 34.0, 10.28, ALLOY_MAX_WT_PCT),
    'C': ElementData('C', 'Carbon', 0.5, 2.26, CARBON_MAX_WT_PCT),
    'Mn': ElementData('Mn', 'Manganese', 1.9, 7.21, ALLOY_MAX_WT_PCT),
    'Si': ElementData('Si', 'Silicon', 1.4, 2.33, ALLOY_MAX_WT_PCT),
    'Ti': ElementData('Ti', 'Titanium', 11.0, 4.51, ALLOY_MAX_WT_PCT),
    'V': ElementData('V', 'Vanadium', 28.5, 6.11, ALLOY_MAX_WT_PCT),
})

ELEMENT_COSTS = MappingProxyType({el: d.cost for el, d in ELEMENT_DATA.items()})
ELEMENT_DENSITIES = MappingProxyType({el: d.density for el, d in ELEMENT_DATA.items()})

# Quench media
QUENCH_WATER = 'Water'
QUENCH_OIL = 'Oil'
QUENCH_AIR = 'Air'

QUENCH_MEDIA = (QUENCH_WATER, QUENCH_OIL, QUENCH_AIR)

DEFAULT_QUENCH_MEDIUM = QUENCH_OIL

QUENCH_CONFIGS = MappingProxyType({
    QUENCH_WATER: QuenchConfig(QUENCH_WATER, quench_temperature=25.0, cooling_rate=300.0),
    QUENCH_OIL: QuenchConfig(QUENCH_OIL, quench_temperature=80.0, cooling_rate=80.0),
    QUENCH_AIR: QuenchConfig(QUENCH_AIR, quench_temperature=200.0, cooling_rate=15.0),
})


def resolve_quench_medium(medium) -> str:
    """Map a user-supplied quench medium onto a known one.

    Matching is case-insensitive; anything unrecognised falls back to oil.

    Parameters
    ----------
    medium : str or None
        Requested quench medium

    Returns
    -------
    str
        One of QUENCH_MEDIA
    """
    if isinstance(medium, str):
        wanted = medium.strip().lower()
        for name in QUENCH_MEDIA:
            if name.lower() == wanted:
                return name
    return DEFAULT_QUENCH_MEDIUM


def quench_config(medium) -> QuenchConfig:
    """Quench parameters for a medium, with the oil fallback applied."""
    return QUENCH_CONFIGS[resolve_quench_medium(medium)]
