"""Critical transformation temperature calculations from alloy composition.

Implements Andrews (1965) type empirical formulae for the martensite start
temperature and the Ac1/Ac3 heating transformation temperatures.

References:
    Andrews, K.W. (1965) JISI, 203, 721-727.
"""
import math
from typing import Dict, Mapping

from ..numeric import round_half_up


def calculate_critical_temperatures(composition: Mapping[str, float]) -> Dict[str, float]:
    """Calculate Ac1, Ac3 and Ms from composition.

    Parameters
    ----------
    composition : dict
        Element weight percentages: {'C': 0.08, 'Mn': 1.5, ...}

    Returns
    -------
    dict
        {'Ac1': int, 'Ac3': int, 'Ms': float}
        Ac1 and Ac3 are rounded to the nearest degree.
    """
    C = composition.get('C', 0.0)
    Mn = composition.get('Mn', 0.0)
    Si = composition.get('Si', 0.0)
    Cr = composition.get('Cr', 0.0)
    Ni = composition.get('Ni', 0.0)
    Mo = composition.get('Mo', 0.0)
    V = composition.get('V', 0.0)

    return {
        'Ac1': round_half_up(calc_ac1(Mn, Ni, Si, Cr, Mo)),
        'Ac3': round_half_up(calc_ac3(C, Mn, Ni, Si, Cr, Mo, V)),
        'Ms': calc_ms(C, Mn, Ni, Cr, Mo),
    }


def calc_ac1(Mn: float, Ni: float, Si: float, Cr: float, Mo: float) -> float:
    """Ac1 temperature.

    Ac1 = 723 - 10.7*Mn - 16.9*Ni + 29.1*Si + 16.9*Cr - 16.9*Mo

    Parameters
    ----------
    Mn, Ni, Si, Cr, Mo : float
        Element weight percentages

    Returns
    -------
    float
        Ac1 temperature in deg C
    """
    return 723 - 10.7 * Mn - 16.9 * Ni + 29.1 * Si + 16.9 * Cr - 16.9 * Mo


def calc_ac3(C: float, Mn: float, Ni: float, Si: float, Cr: float,
             Mo: float, V: float) -> float:
    """Ac3 temperature.

    Ac3 = 910 - 203*sqrt(C) - 15.2*Ni + 44.7*Si + 104*V + 31.5*Mo
          - 30*Mn - 11*Cr

    Parameters
    ----------
    C, Mn, Ni, Si, Cr, Mo, V : float
        Element weight percentages

    Returns
    -------
    float
        Ac3 temperature in deg C
    """
    return (910 - 203 * math.sqrt(max(C, 0.0)) - 15.2 * Ni + 44.7 * Si
            + 104 * V + 31.5 * Mo - 30 * Mn - 11 * Cr)


def calc_ms(C: float, Mn: float, Ni: float, Cr: float, Mo: float) -> float:
    """Martensite start temperature.

    Ms = 539 - 423*C - 30.4*Mn - 17.7*Ni - 12.1*Cr - 7.5*Mo

    Parameters
    ----------
    C, Mn, Ni, Cr, Mo : float
        Element weight percentages

    Returns
    -------
    float
        Ms temperature in deg C
    """
    return 539 - 423 * C - 30.4 * Mn - 17.7 * Ni - 12.1 * Cr - 7.5 * Mo


def ms_from_composition(composition: Mapping[str, float]) -> float:
    """Ms for a composition dict; missing elements count as zero."""
    return calc_ms(
        composition.get('C', 0.0),
        composition.get('Mn', 0.0),
        composition.get('Ni', 0.0),
        composition.get('Cr', 0.0),
        composition.get('Mo', 0.0),
    )
