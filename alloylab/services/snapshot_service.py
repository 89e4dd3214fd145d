"""Property snapshot aggregation.

A PropertySnapshot is the complete, immutable result of evaluating one
(composition, process parameters) pair through every model. Evaluation is
a pure function of its inputs and is memoized on the normalized input
tuple, so repeated requests for the same design share one snapshot.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Tuple
import logging

from .composition import (
    composition_from_key, composition_key, is_over_alloyed, normalize_composition,
)
from .elements import QUENCH_WATER, resolve_quench_medium
from .mechanical_properties import MechanicalPropertyPredictor, clamp_grain_size
from .narrative import NarrativeContext, generate_narrative
from .phase_transformation import (
    CurvePoint, HardenabilityClass, OverlayPoint, PhaseStability, TTTCurve,
    calculate_critical_temperatures, carbon_equivalent, check_phase_stability,
    classify_hardenability, generate_cooling_path, generate_ttt_curve,
    martensite_fraction, merge_curves,
)
from .physical_properties import CostShare, cost, cost_breakdown, density, sustainability_score

logger = logging.getLogger(__name__)


SNAPSHOT_CACHE_SIZE = 256


@dataclass(frozen=True)
class ProcessParameters:
    """Heat treatment process inputs.

    Attributes
    ----------
    quench_medium : str
        'Water', 'Oil' or 'Air' (unknown values are evaluated as oil)
    grain_size : float
        Prior austenite grain size (um)
    target_yield_strength : float
        Design target (MPa); informational only, never enters the models
    """
    quench_medium: str = QUENCH_WATER
    grain_size: float = 25.0
    target_yield_strength: float = 600.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> 'ProcessParameters':
        data = data or {}
        defaults = cls()
        return cls(
            quench_medium=data.get('quench_medium', defaults.quench_medium),
            grain_size=data.get('grain_size', defaults.grain_size),
            target_yield_strength=data.get('target_yield_strength',
                                           defaults.target_yield_strength),
        )


@dataclass(frozen=True)
class PropertySnapshot:
    """All derived properties of one design evaluation."""
    composition: Tuple[Tuple[str, float], ...]
    quench_medium: str
    grain_size: float
    over_alloyed: bool
    # Phase transformation
    ms: float
    martensite_fraction: float
    quench_temperature: float
    carbon_equivalent: float
    hardenability: HardenabilityClass
    phase_stability: PhaseStability
    ac1: int
    ac3: int
    # Mechanical
    sigma0: int
    effective_grain_size: float
    yield_strength: int
    hardness_hrc: int
    hardness_hv: int
    uts: int
    strengthening: Tuple[Tuple[str, float], ...]
    # Physical
    density: float
    cost: float
    sustainability: int
    cost_breakdown: Tuple[CostShare, ...]
    # Curves
    ttt: TTTCurve
    cooling_path: Tuple[CurvePoint, ...]
    narrative: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def composition_dict(self) -> Dict[str, float]:
        return dict(self.composition)

    @property
    def phase_warnings(self) -> Tuple[str, ...]:
        return self.phase_stability.warnings

    @property
    def specific_strength(self) -> float:
        """UTS / density (MPa per g/cm^3)."""
        return self.uts / self.density

    @property
    def ttt_overlay(self) -> List[OverlayPoint]:
        """TTT curve with the cooling path merged onto its temperature samples."""
        return merge_curves(self.ttt.points, self.cooling_path)

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable dictionary."""
        return {
            'composition': self.composition_dict,
            'quench_medium': self.quench_medium,
            'grain_size': self.grain_size,
            'over_alloyed': self.over_alloyed,
            'ms': self.ms,
            'martensite_fraction': self.martensite_fraction,
            'quench_temperature': self.quench_temperature,
            'carbon_equivalent': self.carbon_equivalent,
            'hardenability': self.hardenability.to_dict(),
            'phase_stability': self.phase_stability.to_dict(),
            'ac1': self.ac1,
            'ac3': self.ac3,
            'sigma0': self.sigma0,
            'effective_grain_size': self.effective_grain_size,
            'yield_strength': self.yield_strength,
            'hardness_hrc': self.hardness_hrc,
            'hardness_hv': self.hardness_hv,
            'uts': self.uts,
            'strengthening': dict(self.strengthening),
            'density': self.density,
            'cost': self.cost,
            'sustainability': self.sustainability,
            'specific_strength': self.specific_strength,
            'cost_breakdown': [
                {'element': s.element, 'wt_pct': s.wt_pct, 'cost_share_pct': s.cost_share_pct}
                for s in self.cost_breakdown
            ],
            'ttt': self.ttt.to_dict(),
            'cooling_path': [p._asdict() for p in self.cooling_path],
            'ttt_overlay': [p._asdict() for p in self.ttt_overlay],
            'narrative': list(self.narrative),
        }


def evaluate(composition: Optional[Mapping[str, float]],
             process: Optional[ProcessParameters] = None) -> PropertySnapshot:
    """Evaluate a design.

    Parameters
    ----------
    composition : dict
        Element weight percentages; Fe is derived, other entries clamped
    process : ProcessParameters, optional
        Defaults to ProcessParameters()

    Returns
    -------
    PropertySnapshot

    Raises
    ------
    DomainError
        If the composition is empty (density and cost undefined)
    """
    process = process or ProcessParameters()
    normalized = normalize_composition(composition)
    return _evaluate_cached(
        composition_key(normalized),
        resolve_quench_medium(process.quench_medium),
        clamp_grain_size(process.grain_size),
    )


@lru_cache(maxsize=SNAPSHOT_CACHE_SIZE)
def _evaluate_cached(key: Tuple[float, ...], quench_medium: str,
                     grain_size: float) -> PropertySnapshot:
    logger.debug("Evaluating design %s, %s quench, %.2f um", key, quench_medium, grain_size)
    comp = composition_from_key(key)

    # Phase transformation
    martensite = martensite_fraction(comp, quench_medium)
    ce = carbon_equivalent(comp)
    hardenability = classify_hardenability(ce)
    stability = check_phase_stability(comp)
    temps = calculate_critical_temperatures(comp)

    # Mechanical
    predictor = MechanicalPropertyPredictor(comp)
    mech = predictor.predict(grain_size, ce, martensite.fraction)

    # Physical (raises DomainError for an empty composition)
    rho = density(comp)
    price = cost(comp)

    narrative = generate_narrative(comp, NarrativeContext(
        yield_strength=mech.yield_strength,
        martensite_fraction=martensite.fraction,
        ms=martensite.ms,
    ))

    return PropertySnapshot(
        composition=tuple(comp.items()),
        quench_medium=quench_medium,
        grain_size=grain_size,
        over_alloyed=is_over_alloyed(comp),
        ms=martensite.ms,
        martensite_fraction=martensite.fraction,
        quench_temperature=martensite.quench_temperature,
        carbon_equivalent=ce,
        hardenability=hardenability,
        phase_stability=stability,
        ac1=temps['Ac1'],
        ac3=temps['Ac3'],
        sigma0=mech.sigma0,
        effective_grain_size=mech.effective_grain_size,
        yield_strength=mech.yield_strength,
        hardness_hrc=mech.hardness_hrc,
        hardness_hv=mech.hardness_hv,
        uts=mech.uts,
        strengthening=predictor.strengthening_contributions(martensite.fraction),
        density=rho,
        cost=price,
        sustainability=sustainability_score(comp),
        cost_breakdown=cost_breakdown(comp),
        ttt=generate_ttt_curve(ce),
        cooling_path=generate_cooling_path(quench_medium),
        narrative=tuple(narrative),
    )


def clear_cache() -> None:
    """Drop memoized snapshots."""
    _evaluate_cached.cache_clear()
