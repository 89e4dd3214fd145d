"""Tests for composition normalization and reference tables."""
import math
import pytest

from alloylab.services.composition import (
    clamp_weight, composition_key, is_over_alloyed, normalize_composition,
)
from alloylab.services.elements import (
    ELEMENT_DATA, ELEMENTS, QUENCH_CONFIGS, resolve_quench_medium, quench_config,
)


class TestNormalization:
    def test_fe_is_complement(self, default_comp):
        comp = normalize_composition(default_comp)
        others = sum(v for k, v in comp.items() if k != 'Fe')
        assert comp['Fe'] == pytest.approx(100.0 - others)
        assert comp['Fe'] == pytest.approx(71.0)

    def test_supplied_fe_is_ignored(self):
        comp = normalize_composition({'Fe': 12.0, 'Cr': 10.0})
        assert comp['Fe'] == pytest.approx(90.0)

    def test_missing_elements_are_zero(self):
        comp = normalize_composition({'C': 0.4})
        assert set(comp) == set(ELEMENTS)
        assert comp['Ni'] == 0.0
        assert comp['Fe'] == pytest.approx(99.6)

    def test_empty_input_is_pure_iron(self):
        comp = normalize_composition(None)
        assert comp['Fe'] == 100.0
        assert all(v == 0.0 for k, v in comp.items() if k != 'Fe')

    def test_element_order(self, default_comp):
        assert tuple(normalize_composition(default_comp)) == ELEMENTS

    def test_unknown_symbols_dropped(self):
        comp = normalize_composition({'W': 5.0, 'Cr': 1.0})
        assert 'W' not in comp
        assert comp['Fe'] == pytest.approx(99.0)

    def test_fe_never_negative(self):
        raw = {el: 30.0 for el in ELEMENTS if el != 'Fe'}
        comp = normalize_composition(raw)
        assert comp['Fe'] == 0.0
        assert is_over_alloyed(comp)

    def test_balanced_composition_not_flagged(self, default_comp):
        assert not is_over_alloyed(normalize_composition(default_comp))

    def test_idempotent(self, default_comp):
        once = normalize_composition(default_comp)
        assert normalize_composition(once) == once

    def test_key_is_hashable_and_ordered(self, default_comp):
        key = composition_key(normalize_composition(default_comp))
        assert hash(key) == hash(tuple(key))
        assert key[0] == pytest.approx(71.0)


class TestClamping:
    def test_negative_clamped_to_zero(self):
        assert clamp_weight('Ni', -3.0) == 0.0

    def test_negative_zero_becomes_zero(self):
        wt = clamp_weight('Ni', -0.0)
        assert math.copysign(1.0, wt) == 1.0
        comp = normalize_composition({'Ni': -0.0})
        assert math.copysign(1.0, comp['Ni']) == 1.0

    def test_carbon_cap(self):
        assert clamp_weight('C', 5.0) == ELEMENT_DATA['C'].max_wt_pct == 2.0

    def test_alloy_cap(self):
        assert clamp_weight('Cr', 45.0) == 30.0

    def test_non_numeric_is_zero(self):
        assert clamp_weight('Mo', 'abc') == 0.0
        assert clamp_weight('Mo', None) == 0.0

    def test_non_finite_is_zero(self):
        assert clamp_weight('V', math.nan) == 0.0
        assert clamp_weight('V', math.inf) == 0.0

    def test_numeric_string_accepted(self):
        assert clamp_weight('Mn', '1.5') == 1.5


class TestReferenceTables:
    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ELEMENT_DATA['Fe'] = None

    def test_every_element_has_data(self):
        for el in ELEMENTS:
            assert ELEMENT_DATA[el].density > 0
            assert ELEMENT_DATA[el].cost > 0

    def test_quench_lookup(self):
        assert QUENCH_CONFIGS['Water'].quench_temperature == 25.0
        assert QUENCH_CONFIGS['Oil'].quench_temperature == 80.0
        assert QUENCH_CONFIGS['Air'].quench_temperature == 200.0

    def test_quench_case_insensitive(self):
        assert resolve_quench_medium('water') == 'Water'
        assert resolve_quench_medium(' AIR ') == 'Air'

    def test_unknown_quench_falls_back_to_oil(self):
        assert resolve_quench_medium('Brine') == 'Oil'
        assert resolve_quench_medium(None) == 'Oil'
        assert quench_config(42).cooling_rate == 80.0
