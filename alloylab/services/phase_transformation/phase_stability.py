"""Rule-based phase stability screening.

Each rule is independent; all rules that fire are reported in table order.
"""
from dataclasses import dataclass
from typing import Callable, Mapping, Tuple


PHASES_STABLE = 'α + γ (stable)'
PHASES_SIGMA = 'α + γ + σ (unstable)'

WARNING_SIGMA = 'sigma_phase'
WARNING_FERRITE_LOOP = 'ferrite_loop'
WARNING_GAMMA_LOOP = 'gamma_loop'


@dataclass(frozen=True)
class StabilityRule:
    code: str
    applies: Callable[[Mapping[str, float]], bool]
    message: str


def _sigma_risk(comp: Mapping[str, float]) -> bool:
    return comp.get('Cr', 0.0) > 17 and comp.get('Ni', 0.0) < 10 and comp.get('Mo', 0.0) > 2


STABILITY_RULES = (
    StabilityRule(
        WARNING_SIGMA,
        _sigma_risk,
        '⚠ Sigma-phase risk: High Cr + low Ni + Mo promotes σ-phase '
        'embrittlement at 600–900°C',
    ),
    StabilityRule(
        WARNING_FERRITE_LOOP,
        lambda comp: comp.get('Cr', 0.0) > 25,
        '⚠ Ferrite loop: Excessive Cr may stabilize δ-ferrite, reducing toughness',
    ),
    StabilityRule(
        WARNING_GAMMA_LOOP,
        lambda comp: comp.get('Ni', 0.0) > 30,
        '⚠ γ-loop: High Ni may suppress martensite formation entirely',
    ),
)


@dataclass(frozen=True)
class PhaseStability:
    """Outcome of the phase stability screen.

    Attributes
    ----------
    warnings : tuple of str
        Messages of every rule that fired, in rule order
    codes : tuple of str
        Codes of the rules that fired
    phases : str
        Expected phase assemblage
    stable : bool
        True iff no rule fired
    """
    warnings: Tuple[str, ...]
    codes: Tuple[str, ...]
    phases: str
    stable: bool

    @property
    def sigma_risk(self) -> bool:
        return WARNING_SIGMA in self.codes

    def to_dict(self) -> dict:
        return {
            'warnings': list(self.warnings),
            'codes': list(self.codes),
            'phases': self.phases,
            'stable': self.stable,
        }


def check_phase_stability(composition: Mapping[str, float]) -> PhaseStability:
    """Screen a composition for sigma phase and loop-closure warnings.

    Parameters
    ----------
    composition : dict
        Element weight percentages

    Returns
    -------
    PhaseStability
    """
    fired = [rule for rule in STABILITY_RULES if rule.applies(composition)]
    codes = tuple(rule.code for rule in fired)
    return PhaseStability(
        warnings=tuple(rule.message for rule in fired),
        codes=codes,
        phases=PHASES_SIGMA if WARNING_SIGMA in codes else PHASES_STABLE,
        stable=not fired,
    )
