"""Composition normalization.

Iron is the balance element: it is never set directly and is always derived
as the complement of the alloying additions. Every model downstream expects
a composition that has been through normalize_composition().
"""
import math
from typing import Dict, Mapping, Optional, Tuple

from .elements import ALLOYING_ELEMENTS, BALANCE_ELEMENT, ELEMENT_DATA, ELEMENTS


# Default design (316L-type stainless with V microalloying)
DEFAULT_COMPOSITION = {
    'Fe': 71.0, 'Ni': 8.0, 'Cr': 18.0, 'Mo': 0.5, 'C': 0.08,
    'Mn': 1.5, 'Si': 0.5, 'Ti': 0.02, 'V': 0.4,
}


def clamp_weight(symbol: str, value) -> float:
    """Clamp a weight percent to the element's allowed range.

    Non-numeric and non-finite values count as zero.

    Parameters
    ----------
    symbol : str
        Element symbol (must be in ELEMENT_DATA)
    value : float
        Requested weight percent

    Returns
    -------
    float
        Weight percent in [0, max_wt_pct]
    """
    try:
        wt = float(value)
    except (TypeError, ValueError):
        return 0.0
    # <= also maps -0.0 to 0.0
    if not math.isfinite(wt) or wt <= 0.0:
        return 0.0
    cap = ELEMENT_DATA[symbol].max_wt_pct
    if cap is not None and wt > cap:
        return cap
    return wt


def alloy_total(composition: Mapping[str, float]) -> float:
    """Sum of all non-balance element weights."""
    return sum(composition.get(el, 0.0) for el in ALLOYING_ELEMENTS)


def normalize_composition(raw: Optional[Mapping[str, float]]) -> Dict[str, float]:
    """Resolve the balance element and clamp alloying additions.

    Fe = max(0, 100 - sum(non-Fe)). Missing elements are zero, unknown
    symbols are dropped and any Fe value in the input is ignored.

    Parameters
    ----------
    raw : dict
        Element weight percentages, e.g. {'Cr': 18.0, 'Ni': 8.0}

    Returns
    -------
    dict
        Weight percentages for every element, in ELEMENTS order
    """
    raw = raw or {}
    alloying = {el: clamp_weight(el, raw.get(el, 0.0)) for el in ALLOYING_ELEMENTS}
    balance = max(0.0, 100.0 - alloy_total(alloying))

    normalized = {}
    for el in ELEMENTS:
        normalized[el] = balance if el == BALANCE_ELEMENT else alloying[el]
    return normalized


def is_over_alloyed(composition: Mapping[str, float]) -> bool:
    """True when the additions alone exceed 100 wt% (Fe clamped to zero)."""
    return alloy_total(composition) > 100.0


def composition_key(composition: Mapping[str, float]) -> Tuple[float, ...]:
    """Hashable key of a normalized composition, in ELEMENTS order."""
    return tuple(float(composition.get(el, 0.0)) for el in ELEMENTS)


def composition_from_key(key: Tuple[float, ...]) -> Dict[str, float]:
    return dict(zip(ELEMENTS, key))
