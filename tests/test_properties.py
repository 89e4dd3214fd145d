"""Tests for mechanical and physical property models."""
import pytest

from alloylab.exceptions import DomainError, EMPTY_COMPOSITION
from alloylab.services.composition import normalize_composition
from alloylab.services.elements import ELEMENT_DATA
from alloylab.services.numeric import round_half_up
from alloylab.services.mechanical_properties import (
    MIN_GRAIN_SIZE, MechanicalPropertyPredictor, clamp_grain_size,
)
from alloylab.services.physical_properties import (
    cost, cost_breakdown, density, sustainability_score,
)


class TestYieldStrength:
    def test_friction_stress_pure_iron(self, pure_iron):
        assert MechanicalPropertyPredictor(pure_iron).friction_stress() == 70

    def test_friction_stress_carbon(self):
        p = MechanicalPropertyPredictor({'C': 0.2})
        assert p.friction_stress() == pytest.approx(70 + 350 * 0.2)

    def test_hall_petch(self, pure_iron):
        p = MechanicalPropertyPredictor(pure_iron)
        # 70 + 21 / sqrt(25) = 74.2
        assert p.yield_strength(25.0) == 74
        assert p.yield_strength(100.0) == 72

    def test_finer_grain_is_stronger(self, pure_iron):
        p = MechanicalPropertyPredictor(pure_iron)
        assert p.yield_strength(2.0) > p.yield_strength(50.0)

    def test_refinement_factor(self):
        p = MechanicalPropertyPredictor({'V': 2.0, 'Ti': 1.0})
        assert p.refinement_factor() == pytest.approx(1 - 0.10 - 0.03)
        assert p.effective_grain_size(20.0) == pytest.approx(20.0 * 0.87)

    def test_refinement_floor(self):
        p = MechanicalPropertyPredictor({'V': 20.0, 'Ti': 10.0})
        assert p.refinement_factor() == 0.3

    def test_grain_size_floor(self):
        assert clamp_grain_size(0) == MIN_GRAIN_SIZE
        assert clamp_grain_size(-4.0) == MIN_GRAIN_SIZE
        assert clamp_grain_size('x') == MIN_GRAIN_SIZE
        assert clamp_grain_size(12.5) == 12.5


class TestHardness:
    def test_hardness_no_alloy_no_martensite(self):
        hrc, hv = MechanicalPropertyPredictor.hardness(0.0, 0.0)
        assert hrc == 20
        assert hv == 770

    def test_hrc_capped(self):
        hrc, hv = MechanicalPropertyPredictor.hardness(1.0, 1.0)
        assert hrc == 65
        # HV follows the uncapped estimate (HRC 100)
        assert hv == 3218

    def test_martensite_increases_hardness(self):
        soft, _ = MechanicalPropertyPredictor.hardness(0.3, 0.0)
        hard, _ = MechanicalPropertyPredictor.hardness(0.3, 1.0)
        assert hard - soft == 20


class TestUTS:
    def test_ratio_without_martensite(self):
        assert MechanicalPropertyPredictor.uts(600, 0.0) == 750

    def test_ratio_full_martensite(self):
        assert MechanicalPropertyPredictor.uts(600, 1.0) == 840

    def test_uts_above_ys(self):
        assert MechanicalPropertyPredictor.uts(400, 0.5) > 400


class TestPredict:
    def test_predict_bundle(self, default_comp):
        comp = normalize_composition(default_comp)
        props = MechanicalPropertyPredictor(comp).predict(25.0, 4.6, 0.5)
        assert props.uts > props.yield_strength
        assert props.hardness_hrc == 65
        assert isinstance(props.sigma0, int)
        assert props.effective_grain_size == pytest.approx(25.0 * (1 - 0.02 - 0.0006))

    def test_strengthening_indices_capped(self):
        p = MechanicalPropertyPredictor({'Ni': 30.0, 'V': 2.0, 'C': 1.0})
        indices = dict(p.strengthening_contributions(0.5))
        assert indices['Solid Solution'] == 90.0
        assert indices['Grain Refinement'] == 100.0
        assert indices['Precipitation'] == 100.0
        assert indices['Martensite'] == 50.0


class TestDensityAndCost:
    def test_pure_iron_density(self, pure_iron):
        assert density(normalize_composition(pure_iron)) == pytest.approx(
            ELEMENT_DATA['Fe'].density, rel=1e-12)

    def test_pure_iron_cost(self, pure_iron):
        assert cost(normalize_composition(pure_iron)) == pytest.approx(
            ELEMENT_DATA['Fe'].cost, rel=1e-12)

    def test_harmonic_density(self):
        comp = {'Fe': 50.0, 'Ni': 50.0}
        expected = 100.0 / (50.0 / 7.87 + 50.0 / 8.908)
        assert density(comp) == pytest.approx(expected)

    def test_density_ignores_unknown_elements(self):
        assert density({'Fe': 50.0, 'W': 50.0}) == pytest.approx(7.87)

    def test_arithmetic_cost(self):
        comp = {'Fe': 90.0, 'Mo': 10.0}
        assert cost(comp) == pytest.approx((90 * 0.09 + 10 * 34.0) / 100)

    def test_empty_composition_density(self):
        with pytest.raises(DomainError) as exc:
            density({})
        assert exc.value.code == EMPTY_COMPOSITION

    def test_empty_composition_cost(self):
        with pytest.raises(DomainError) as exc:
            cost({'Fe': 0.0, 'W': 3.0})
        assert exc.value.code == EMPTY_COMPOSITION

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            density({'Ni': 0.0})


class TestSustainability:
    def test_pure_iron(self, pure_iron):
        assert sustainability_score(pure_iron) == 100

    def test_default_alloy(self, default_comp):
        # 100 - 8*3 - 0.5*4 - 0.4*2.5 - 0.02*2 = 72.96
        assert sustainability_score(normalize_composition(default_comp)) == 73

    def test_chromium_not_penalised(self):
        assert sustainability_score({'Cr': 30.0, 'Mn': 10.0, 'Si': 5.0}) == 100

    def test_clamped_at_zero(self):
        assert sustainability_score({'Ni': 30.0, 'Mo': 30.0}) == 0


class TestCostBreakdown:
    def test_ordered_by_weight(self, default_comp):
        shares = cost_breakdown(normalize_composition(default_comp))
        weights = [s.wt_pct for s in shares]
        assert weights == sorted(weights, reverse=True)
        assert shares[0].element == 'Fe'

    def test_small_additions_excluded(self, default_comp):
        elements = {s.element for s in cost_breakdown(normalize_composition(default_comp))}
        assert 'Ti' not in elements
        assert 'C' in elements

    def test_shares_sum_below_hundred(self, default_comp):
        shares = cost_breakdown(normalize_composition(default_comp))
        assert sum(s.cost_share_pct for s in shares) <= 100.0 + 1e-9


class TestHalfUpRounding:
    @pytest.mark.parametrize('value,expected', [
        (0.5, 1), (1.5, 2), (2.5, 3), (80.5, 81), (-0.5, 0), (72.4999, 72),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_half_up_decimals(self):
        assert round_half_up(0.15, 1) == 0.2
        assert round_half_up(0.94, 1) == 0.9

    def test_sustainability_tie(self):
        # 100 - 0.5*3 = 98.5
        assert sustainability_score(normalize_composition({'Ni': 0.5})) == 99

    def test_yield_strength_tie(self, pure_iron):
        # 70 + 21 / sqrt(4) = 80.5
        assert MechanicalPropertyPredictor(pure_iron).yield_strength(4.0) == 81

    def test_uts_tie(self):
        # 74 * 1.25 = 92.5
        assert MechanicalPropertyPredictor.uts(74, 0.0) == 93

    def test_hrc_tie(self):
        # 20 + 20*0.125 = 22.5
        hrc, _ = MechanicalPropertyPredictor.hardness(0.0, 0.125)
        assert hrc == 23
