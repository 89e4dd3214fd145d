"""Tests for the rule-based microstructure narrative."""
from alloylab.services.composition import normalize_composition
from alloylab.services.narrative import (
    FALLBACK_NARRATIVE, NARRATIVE_RULES, NarrativeContext, generate_narrative,
)


def _ctx(ys=300, vf=0.0, ms=400.0):
    return NarrativeContext(yield_strength=ys, martensite_fraction=vf, ms=ms)


class TestNarrative:
    def test_rule_order_is_fixed(self):
        assert [r.name for r in NARRATIVE_RULES] == [
            'vanadium', 'titanium', 'molybdenum', 'nickel', 'chromium',
            'low_carbon_high_strength', 'high_martensite',
        ]

    def test_fallback_when_nothing_fires(self):
        lines = generate_narrative({'C': 0.5}, _ctx())
        assert lines == [FALLBACK_NARRATIVE]

    def test_default_alloy(self, default_comp):
        comp = normalize_composition(default_comp)
        lines = generate_narrative(comp, _ctx(ys=1200, vf=0.54))
        assert len(lines) == 5
        assert lines[0].startswith('Vanadium additions (0.40 wt%)')
        assert '~80 MPa' in lines[0]
        assert lines[1].startswith('Titanium (0.02 wt%)')
        assert lines[2].startswith('Nickel (8.0 wt%)')
        assert lines[3].startswith('Chromium (18.0 wt%)')
        assert lines[4].startswith('Low carbon content (0.080 wt%)')

    def test_order_follows_rules_not_magnitude(self):
        comp = {'V': 0.1, 'Cr': 25.0, 'Ni': 20.0}
        lines = generate_narrative(comp, _ctx())
        assert [line.split()[0] for line in lines] == ['Vanadium', 'Nickel', 'Chromium']

    def test_thresholds_are_exclusive(self):
        comp = {'V': 0.05, 'Ti': 0.01, 'Mo': 0.5, 'Ni': 1.0, 'Cr': 5.0, 'C': 0.1}
        assert generate_narrative(comp, _ctx(ys=900, vf=0.8)) == [FALLBACK_NARRATIVE]

    def test_molybdenum(self):
        lines = generate_narrative({'Mo': 1.0, 'C': 0.3}, _ctx())
        assert len(lines) == 1
        assert lines[0].startswith('Molybdenum (1.0 wt%)')

    def test_high_martensite(self):
        lines = generate_narrative({'C': 0.3}, _ctx(vf=0.95, ms=402.1))
        assert len(lines) == 1
        assert 'achieves 95% martensite' in lines[0]
        assert 'Ms = 402.1°C' in lines[0]

    def test_low_carbon_needs_strength(self):
        assert generate_narrative({'C': 0.05}, _ctx(ys=350)) == [FALLBACK_NARRATIVE]
        lines = generate_narrative({'C': 0.05}, _ctx(ys=450))
        assert lines[0].startswith('Low carbon content (0.050 wt%)')
