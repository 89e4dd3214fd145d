"""Physical and economic properties by rule of mixtures.

Density uses the harmonic (mass-weighted specific volume) form, cost the
arithmetic mass-weighted mean. Only elements present in the reference
tables with positive weight take part; an alloy with none is outside the
domain of both mixtures.
"""
from dataclasses import dataclass
from typing import Mapping, Tuple
import logging

from alloylab.exceptions import DomainError, EMPTY_COMPOSITION
from .elements import ELEMENT_COSTS, ELEMENT_DENSITIES
from .numeric import round_half_up

logger = logging.getLogger(__name__)


# Sustainability penalty per wt% for supply-critical / high-footprint elements
SUSTAINABILITY_PENALTIES = {'Ni': 3.0, 'Mo': 4.0, 'V': 2.5, 'Ti': 2.0}

# Elements below this weight are left out of the cost breakdown
COST_BREAKDOWN_MIN_WT = 0.05


@dataclass(frozen=True)
class CostShare:
    """Contribution of one element to raw material cost."""
    element: str
    wt_pct: float
    cost_share_pct: float


def _present(composition: Mapping[str, float], table: Mapping[str, float]):
    for el, wt in composition.items():
        if el in table and wt > 0:
            yield el, wt


def density(composition: Mapping[str, float]) -> float:
    """Alloy density (g/cm^3).

    rho = sum(w_i) / sum(w_i / rho_i)

    Raises
    ------
    DomainError
        If no element with a reference density has positive weight
    """
    total_wt = 0.0
    specific_volume = 0.0
    for el, wt in _present(composition, ELEMENT_DENSITIES):
        total_wt += wt
        specific_volume += wt / ELEMENT_DENSITIES[el]
    if total_wt <= 0 or specific_volume <= 0:
        logger.debug("Density undefined for composition %s", dict(composition))
        raise DomainError(EMPTY_COMPOSITION, 'density is undefined for an empty composition')
    return total_wt / specific_volume


def cost(composition: Mapping[str, float]) -> float:
    """Raw material cost (USD/kg).

    cost = sum(w_i * c_i) / sum(w_i)

    Raises
    ------
    DomainError
        If no element with a reference cost has positive weight
    """
    total_wt = 0.0
    total_cost = 0.0
    for el, wt in _present(composition, ELEMENT_COSTS):
        total_wt += wt
        total_cost += wt * ELEMENT_COSTS[el]
    if total_wt <= 0:
        logger.debug("Cost undefined for composition %s", dict(composition))
        raise DomainError(EMPTY_COMPOSITION, 'cost is undefined for an empty composition')
    return total_cost / total_wt


def sustainability_score(composition: Mapping[str, float]) -> int:
    """Sustainability score from 0 (worst) to 100.

    Starts at 100 and subtracts a fixed penalty per wt% of Ni, Mo, V and Ti.
    """
    score = 100.0
    for el, penalty in SUSTAINABILITY_PENALTIES.items():
        score -= composition.get(el, 0.0) * penalty
    return max(0, min(100, round_half_up(score)))


def cost_breakdown(composition: Mapping[str, float]) -> Tuple[CostShare, ...]:
    """Per-element share of raw material cost, heaviest element first."""
    total_cost = sum(wt * ELEMENT_COSTS.get(el, 0.0) for el, wt in composition.items())
    shares = []
    for el, wt in composition.items():
        if wt <= COST_BREAKDOWN_MIN_WT:
            continue
        pct = (wt * ELEMENT_COSTS.get(el, 0.0)) / total_cost * 100 if total_cost > 0 else 0.0
        shares.append(CostShare(el, wt, pct))
    shares.sort(key=lambda s: -s.wt_pct)
    return tuple(shares)
