"""Phase transformation models.

Martensite start and Koistinen-Marburger fraction, critical temperatures,
carbon equivalent with hardenability classification, phase stability
screening, and TTT / cooling path curve synthesis.

Public API:
    KoistinenMarburgerModel        - Athermal martensite transformation
    martensite_fraction            - As-quenched fraction for a quench medium
    calculate_critical_temperatures - Ac1/Ac3/Ms from composition
    carbon_equivalent              - CE (Dearden & O'Neill)
    classify_hardenability         - Five-bin CE classification
    check_phase_stability          - Sigma / loop-closure warnings
    generate_ttt_curve             - TTT C-curve from CE
    generate_cooling_path          - Quench cooling curve
    merge_curves                   - TTT + cooling overlay
"""
from .martensite_model import KoistinenMarburgerModel, MartensiteResult, martensite_fraction
from .critical_temperatures import calculate_critical_temperatures, calc_ms
from .hardenability import (
    HARDENABILITY_CLASSES, HardenabilityClass,
    carbon_equivalent, classify_hardenability,
)
from .phase_stability import PhaseStability, check_phase_stability
from .ttt_generator import (
    CurvePoint, OverlayPoint, TTTCurve,
    generate_ttt_curve, generate_cooling_path, merge_curves,
)

__all__ = [
    'KoistinenMarburgerModel',
    'MartensiteResult',
    'martensite_fraction',
    'calculate_critical_temperatures',
    'calc_ms',
    'HARDENABILITY_CLASSES',
    'HardenabilityClass',
    'carbon_equivalent',
    'classify_hardenability',
    'PhaseStability',
    'check_phase_stability',
    'CurvePoint',
    'OverlayPoint',
    'TTTCurve',
    'generate_ttt_curve',
    'generate_cooling_path',
    'merge_curves',
]
