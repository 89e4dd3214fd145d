"""Comparison of a design against the reference alloy, and design checks.

The reference is an austenitic stainless baseline evaluated through the
same pipeline as any user design, with a water quench and 40 um grain size.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional
import logging

from .elements import QUENCH_WATER
from .snapshot_service import ProcessParameters, PropertySnapshot, evaluate

logger = logging.getLogger(__name__)


REFERENCE_NAME = '304 SS Ref'

REFERENCE_COMPOSITION = {
    'Fe': 68.0, 'Ni': 9.0, 'Cr': 19.0, 'Mo': 2.0, 'C': 0.03,
    'Mn': 2.0, 'Si': 1.0, 'Ti': 0.01, 'V': 0.0,
}

REFERENCE_PROCESS = ProcessParameters(quench_medium=QUENCH_WATER, grain_size=40.0)

# Minimum hardenability success probability for a validated design
HARDENABILITY_PASS_PROBABILITY = 0.5


@dataclass(frozen=True)
class AshbyPoint:
    """Material on the specific strength vs. cost map."""
    name: str
    specific_strength: float
    cost: float
    is_current: bool = False

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'specific_strength': self.specific_strength,
            'cost': self.cost,
            'is_current': self.is_current,
        }


# Handbook benchmarks (specific strength MPa/(g/cm^3), cost USD/kg)
BENCHMARK_MATERIALS = (
    AshbyPoint('4140 Steel', 108.0, 0.7),
    AshbyPoint('Ti-6Al-4V', 254.0, 22.0),
    AshbyPoint('Inconel 718', 145.0, 45.0),
    AshbyPoint('Al 7075', 197.0, 3.2),
    AshbyPoint('Maraging 350', 310.0, 38.0),
)


@dataclass(frozen=True)
class ReferenceComparison:
    """Differences between a design and the reference (current - reference)."""
    yield_strength_delta: int
    uts_delta: int
    hardness_hrc_delta: int
    hardness_hv_delta: int
    density_delta: float
    specific_strength: float
    reference_specific_strength: float

    @property
    def specific_strength_delta(self) -> float:
        return self.specific_strength - self.reference_specific_strength

    def to_dict(self) -> dict:
        return {
            'yield_strength_delta': self.yield_strength_delta,
            'uts_delta': self.uts_delta,
            'hardness_hrc_delta': self.hardness_hrc_delta,
            'hardness_hv_delta': self.hardness_hv_delta,
            'density_delta': self.density_delta,
            'specific_strength': self.specific_strength,
            'reference_specific_strength': self.reference_specific_strength,
            'specific_strength_delta': self.specific_strength_delta,
        }


@dataclass(frozen=True)
class DesignAssessment:
    """Pass/fail checks of a design against its targets."""
    hardenability_ok: bool
    phase_stable: bool
    meets_target_strength: bool
    target_yield_strength: float

    @property
    def validated(self) -> bool:
        return self.hardenability_ok and self.phase_stable and self.meets_target_strength

    def to_dict(self) -> dict:
        return {
            'hardenability_ok': self.hardenability_ok,
            'phase_stable': self.phase_stable,
            'meets_target_strength': self.meets_target_strength,
            'target_yield_strength': self.target_yield_strength,
            'validated': self.validated,
        }


@lru_cache(maxsize=1)
def reference_snapshot() -> PropertySnapshot:
    """Snapshot of the reference alloy (constant inputs, computed once)."""
    logger.debug("Computing reference snapshot")
    return evaluate(REFERENCE_COMPOSITION, REFERENCE_PROCESS)


class ComparisonService:
    """Compares designs with the reference alloy and with benchmarks."""

    @staticmethod
    def compare(snapshot: PropertySnapshot,
                reference: Optional[PropertySnapshot] = None) -> ReferenceComparison:
        """Compute deltas of a design against the reference.

        Parameters
        ----------
        snapshot : PropertySnapshot
            Current design
        reference : PropertySnapshot, optional
            Baseline; defaults to reference_snapshot()

        Returns
        -------
        ReferenceComparison
        """
        reference = reference or reference_snapshot()
        return ReferenceComparison(
            yield_strength_delta=snapshot.yield_strength - reference.yield_strength,
            uts_delta=snapshot.uts - reference.uts,
            hardness_hrc_delta=snapshot.hardness_hrc - reference.hardness_hrc,
            hardness_hv_delta=snapshot.hardness_hv - reference.hardness_hv,
            density_delta=snapshot.density - reference.density,
            specific_strength=snapshot.specific_strength,
            reference_specific_strength=reference.specific_strength,
        )

    @staticmethod
    def assess_design(snapshot: PropertySnapshot, target_yield_strength: float) -> DesignAssessment:
        """Check hardenability, phase stability and the strength target."""
        return DesignAssessment(
            hardenability_ok=snapshot.hardenability.probability > HARDENABILITY_PASS_PROBABILITY,
            phase_stable=snapshot.phase_stability.stable,
            meets_target_strength=snapshot.yield_strength >= target_yield_strength,
            target_yield_strength=target_yield_strength,
        )

    @staticmethod
    def ashby_points(name: str, snapshot: PropertySnapshot,
                     reference: Optional[PropertySnapshot] = None) -> List[AshbyPoint]:
        """Current design, reference alloy and benchmarks for an Ashby map."""
        reference = reference or reference_snapshot()
        points = [
            AshbyPoint(name, snapshot.specific_strength, snapshot.cost, is_current=True),
            AshbyPoint(REFERENCE_NAME, reference.specific_strength, reference.cost),
        ]
        points.extend(BENCHMARK_MATERIALS)
        return points
