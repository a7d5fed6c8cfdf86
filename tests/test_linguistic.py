# -*- coding: utf-8 -*-
"""
Tests for linguistic scales and term lookup.
"""

import logging

import pytest

from mcdm_engine.mcdm.fuzzy import TriangularFuzzyNumber as TFN


class TestLookup:

    @pytest.mark.parametrize("term", ["Very High", "very high", "  VERY HIGH ", "VH", "vh"])
    def test_case_and_abbreviation(self, term):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE
        assert DEFAULT_TRIANGULAR_SCALE.lookup(term) == TFN(0.7, 0.9, 1.0)

    def test_numbers_and_fuzzy_strings(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE as scale
        assert scale.lookup(0.4) == TFN(0.4, 0.4, 0.4)
        assert scale.lookup("0.4") == TFN(0.4, 0.4, 0.4)
        assert scale.lookup("(0.1, 0.2, 0.3)") == TFN(0.1, 0.2, 0.3)
        t = TFN(1, 2, 3)
        assert scale.lookup(t) is t

    def test_unresolved_gives_neutral(self, caplog):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE
        with caplog.at_level(logging.WARNING, logger="mcdm_engine"):
            value = DEFAULT_TRIANGULAR_SCALE.lookup("Excellent")
        assert value == TFN(0.5, 0.5, 0.5)
        assert "Excellent" in caplog.text

    def test_unresolved_strict(self):
        from mcdm_engine.exceptions import UnresolvedTermError
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE
        with pytest.raises(UnresolvedTermError) as exc:
            DEFAULT_TRIANGULAR_SCALE.lookup("Excellent", strict=True)
        assert exc.value.term == "Excellent"

    def test_strict_from_config(self):
        from mcdm_engine.config import Config, EngineConfig, set_config
        from mcdm_engine.exceptions import UnresolvedTermError
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE
        set_config(Config(engine=EngineConfig(strict=True)))
        with pytest.raises(UnresolvedTermError):
            DEFAULT_TRIANGULAR_SCALE.crisp_lookup("Excellent")

    def test_neutral_from_config(self):
        from mcdm_engine.config import Config, FuzzyConfig, set_config
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE
        set_config(Config(fuzzy=FuzzyConfig(neutral_value=(0.4, 0.5, 0.6), neutral_crisp=0.45)))
        assert DEFAULT_TRIANGULAR_SCALE.lookup("??") == TFN(0.4, 0.5, 0.6)
        assert DEFAULT_TRIANGULAR_SCALE.crisp_lookup("??") == 0.45

    def test_crisp_lookup(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE as scale
        assert scale.crisp_lookup("High") == 0.70
        assert scale.crisp_lookup("vl") == 0.13
        assert scale.crisp_lookup("3.5") == 3.5
        assert scale.crisp_lookup(2) == 2.0

    def test_nearest(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE as scale
        assert scale.nearest(0.9).term == 'Very High'
        assert scale.nearest(0.32).term == 'Low'
        assert scale.nearest(-5).term == 'Very Low'


class TestScales:

    def test_default_scale_contents(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE as scale
        assert len(scale) == 5
        assert [t.term for t in scale] == ['Very High', 'High', 'Medium', 'Low', 'Very Low']
        assert 'medium' in scale
        assert 'm' in scale
        assert 'Excellent' not in scale

    def test_saaty(self):
        from mcdm_engine.mcdm.fuzzy import SAATY_SCALE
        assert SAATY_SCALE.crisp_lookup("strong") == 5
        assert SAATY_SCALE.lookup("Extreme") == TFN(9, 9, 9)

    def test_common_abbreviations_map_to_full_terms(self):
        from mcdm_engine.mcdm.fuzzy import LinguisticScale, LinguisticTerm
        scale = LinguisticScale([
            LinguisticTerm('Very Good', (0.75, 1.0, 1.0), 0.92),
            LinguisticTerm('Medium Positive', (0.5, 0.75, 1.0), 0.75),
            LinguisticTerm('Very Poor', (0.0, 0.0, 0.25), 0.08),
        ])
        assert scale.lookup('VG') == TFN(0.75, 1.0, 1.0)
        assert scale.lookup('MP') == TFN(0.5, 0.75, 1.0)
        assert scale.lookup('vp') == TFN(0.0, 0.0, 0.25)

    def test_from_records(self):
        from mcdm_engine.mcdm.fuzzy import get_scale
        scale = get_scale([
            {'term': 'Good', 'fuzzyNumber': [0.5, 0.75, 1.0], 'crispValue': 0.75, 'abbreviation': 'G'},
            {'term': 'Poor', 'fuzzyNumber': "(0, 0.25, 0.5)"},
        ])
        assert scale.name == 'paper'
        assert scale.lookup('g') == TFN(0.5, 0.75, 1.0)
        assert scale.lookup('Poor') == TFN(0.0, 0.25, 0.5)
        assert scale.crisp_lookup('Poor') == pytest.approx(0.25)
        records = scale.to_records()
        assert records[0]['term'] == 'Good'
        assert records[0]['fuzzyNumber'] == [0.5, 0.75, 1.0]

    def test_get_scale_by_name(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE, SAATY_SCALE, get_scale
        assert get_scale() is DEFAULT_TRIANGULAR_SCALE
        assert get_scale('Saaty') is SAATY_SCALE
        assert get_scale([]) is DEFAULT_TRIANGULAR_SCALE
        with pytest.raises(ValueError):
            get_scale('likert')

    def test_matrix_translation(self):
        from mcdm_engine.mcdm.fuzzy import DEFAULT_TRIANGULAR_SCALE, linguistic_to_fuzzy_matrix
        m = linguistic_to_fuzzy_matrix([['VH', 'low'], [0.5, 'M']], DEFAULT_TRIANGULAR_SCALE)
        assert m[0][0] == TFN(0.7, 0.9, 1.0)
        assert m[0][1] == TFN(0.1, 0.3, 0.5)
        assert m[1][0] == TFN(0.5, 0.5, 0.5)
        assert m[1][1] == TFN(0.3, 0.5, 0.7)
