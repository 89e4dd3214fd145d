"""Rule-based microstructure narrative.

Rules are evaluated in declaration order and every rule that applies adds
one sentence; the order of the output is therefore fixed. When nothing
applies a single fallback sentence is returned.
"""
from dataclasses import dataclass
from typing import Callable, List, Mapping

from .numeric import round_half_up


@dataclass(frozen=True)
class NarrativeContext:
    """Values the narrative rules read besides the composition."""
    yield_strength: float
    martensite_fraction: float
    ms: float


@dataclass(frozen=True)
class NarrativeRule:
    name: str
    applies: Callable[[Mapping[str, float], NarrativeContext], bool]
    render: Callable[[Mapping[str, float], NarrativeContext], str]


def _wt(comp, symbol):
    return comp.get(symbol, 0.0)


NARRATIVE_RULES = (
    NarrativeRule(
        'vanadium',
        lambda comp, ctx: _wt(comp, 'V') > 0.05,
        lambda comp, ctx: (
            f"Vanadium additions ({_wt(comp, 'V'):.2f} wt%) precipitate fine VC/VN carbides, "
            f"pinning grain boundaries via Zener-pinning and increasing yield strength by "
            f"~{round_half_up(_wt(comp, 'V') * 200)} MPa through grain refinement and precipitation "
            f"hardening."
        ),
    ),
    NarrativeRule(
        'titanium',
        lambda comp, ctx: _wt(comp, 'Ti') > 0.01,
        lambda comp, ctx: (
            f"Titanium ({_wt(comp, 'Ti'):.2f} wt%) forms TiN at high temperatures, suppressing "
            f"austenite grain growth during austenitization and contributing to a refined "
            f"microstructure."
        ),
    ),
    NarrativeRule(
        'molybdenum',
        lambda comp, ctx: _wt(comp, 'Mo') > 0.5,
        lambda comp, ctx: (
            f"Molybdenum ({_wt(comp, 'Mo'):.1f} wt%) significantly retards bainite formation in "
            f"the TTT diagram, shifting the \"nose\" rightward and enabling through-hardening in "
            f"thicker sections."
        ),
    ),
    NarrativeRule(
        'nickel',
        lambda comp, ctx: _wt(comp, 'Ni') > 1,
        lambda comp, ctx: (
            f"Nickel ({_wt(comp, 'Ni'):.1f} wt%) stabilizes austenite and improves "
            f"low-temperature toughness via solid-solution strengthening without sacrificing "
            f"ductility."
        ),
    ),
    NarrativeRule(
        'chromium',
        lambda comp, ctx: _wt(comp, 'Cr') > 5,
        lambda comp, ctx: (
            f"Chromium ({_wt(comp, 'Cr'):.1f} wt%) forms protective Cr₂O₃ oxide scale, enhancing "
            f"oxidation and corrosion resistance. Above 10.5 wt%, full stainless behavior emerges."
        ),
    ),
    NarrativeRule(
        'low_carbon_high_strength',
        lambda comp, ctx: _wt(comp, 'C') < 0.1 and ctx.yield_strength > 400,
        lambda comp, ctx: (
            f"Low carbon content ({_wt(comp, 'C'):.3f} wt%) preserves weldability while "
            f"high-strength alloy design achieves target properties through microalloying "
            f"rather than classical carbon strengthening."
        ),
    ),
    NarrativeRule(
        'high_martensite',
        lambda comp, ctx: ctx.martensite_fraction > 0.8,
        lambda comp, ctx: (
            f"Rapid quench achieves {ctx.martensite_fraction * 100:.0f}% martensite volume "
            f"fraction. The lath martensite microstructure is the primary strengthening "
            f"mechanism, with Ms = {ctx.ms:.1f}°C."
        ),
    ),
)

FALLBACK_NARRATIVE = (
    "Balanced composition in the Fe-Ni-Cr system. Recommend increasing microalloying "
    "additions (V, Ti) for improved mechanical performance and grain refinement."
)


def generate_narrative(composition: Mapping[str, float], context: NarrativeContext) -> List[str]:
    """Build the ordered list of microstructure insights.

    Parameters
    ----------
    composition : dict
        Normalized element weight percentages
    context : NarrativeContext
        Yield strength, martensite fraction and Ms of the same evaluation

    Returns
    -------
    list of str
    """
    lines = [rule.render(composition, context)
             for rule in NARRATIVE_RULES if rule.applies(composition, context)]
    return lines or [FALLBACK_NARRATIVE]
