# -*- coding: utf-8 -*-
"""
Tests for the method dispatcher: aliases, fallback, strict mode, options and
method detection from extraction payloads.
"""

import logging

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal


class TestMethodNames:

    @pytest.mark.parametrize("name,expected", [
        ("topsis", "TOPSIS"),
        ("WSM", "SAW"),
        ("weighted-sum", "SAW"),
        ("Simple Additive Weighting", "SAW"),
        ("weighted_product", "WPM"),
        ("multi-moora", "MOORA"),
        ("Vikor", "VIKOR"),
    ])
    def test_canonical(self, name, expected):
        from mcdm_engine.mcdm.dispatcher import canonical_method_name
        assert canonical_method_name(name) == expected

    def test_alias_runs_method(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        result = calculate_mcdm("wsm", sample_matrix, sample_weights, sample_directions)
        assert result.method == "SAW"
        assert 'fallback' not in result.details


class TestFallback:

    def test_unknown_falls_back_to_topsis(self, sample_matrix, sample_weights,
                                          sample_directions, caplog):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        from mcdm_engine.mcdm.traditional import calculate_topsis
        with caplog.at_level(logging.WARNING, logger="mcdm_engine"):
            result = calculate_mcdm("ELECTRE", sample_matrix, sample_weights, sample_directions)
        assert result.method == "TOPSIS"
        assert result.details['fallback'] is True
        assert result.details['requested'] == "ELECTRE"
        assert "ELECTRE" in caplog.text
        expected = calculate_topsis(sample_matrix, sample_weights, sample_directions)
        assert_allclose(result.scores, expected.scores)
        assert "fallback" in result.summary()

    def test_strict_raises(self, sample_matrix, sample_weights):
        from mcdm_engine.exceptions import UnknownMethodError
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        with pytest.raises(UnknownMethodError) as exc:
            calculate_mcdm("ELECTRE", sample_matrix, sample_weights, strict=True)
        assert exc.value.method == "ELECTRE"
        assert "TOPSIS" in exc.value.available
        assert "ELECTRE" in str(exc.value)

    def test_strict_from_config(self, sample_matrix, sample_weights):
        from mcdm_engine.config import Config, EngineConfig, set_config
        from mcdm_engine.exceptions import UnknownMethodError
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        set_config(Config(engine=EngineConfig(strict=True)))
        with pytest.raises(UnknownMethodError):
            calculate_mcdm("ELECTRE", sample_matrix, sample_weights)

    def test_unknown_method_error_is_key_error(self):
        from mcdm_engine.exceptions import MCDMError, UnknownMethodError
        err = UnknownMethodError("X")
        assert isinstance(err, KeyError)
        assert isinstance(err, MCDMError)


class TestOptions:

    def test_vikor_v_zero_honoured(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.base import rank_scores
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        result = calculate_mcdm("VIKOR", sample_matrix, sample_weights, sample_directions,
                                options={'v': 0})
        assert result.details['v'] == 0
        assert_array_equal(result.ranks, rank_scores(result.R, ascending=True))

    def test_vikor_v_one(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        result = calculate_mcdm("VIKOR", sample_matrix, sample_weights, sample_directions,
                                options={'v': 1.0})
        assert_array_equal(result.ranks, result.details['ranks_S'])

    def test_missing_option_uses_config(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        result = calculate_mcdm("VIKOR", sample_matrix, sample_weights, sample_directions,
                                options={'v': None})
        assert result.details['v'] == 0.5

    def test_waspas_lambda_keys(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        a = calculate_mcdm("WASPAS", sample_matrix, sample_weights, sample_directions,
                           options={'lambda': 0.2})
        b = calculate_mcdm("WASPAS", sample_matrix, sample_weights, sample_directions,
                           options={'lam': 0.2})
        assert a.details['lambda'] == 0.2
        assert_allclose(a.scores, b.scores)

    def test_codas_tau(self, sample_matrix, sample_weights, sample_directions):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        result = calculate_mcdm("CODAS", sample_matrix, sample_weights, sample_directions,
                                options={'tau': 0.1})
        assert result.details['tau'] == 0.1

    def test_get_all_calculators(self):
        from mcdm_engine.mcdm import get_all_calculators
        calculators = get_all_calculators(v=0.3)
        assert set(calculators) == {'SAW', 'WPM', 'TOPSIS', 'VIKOR', 'MOORA', 'WASPAS',
                                    'COPRAS', 'EDAS', 'CODAS', 'ARAS'}
        assert calculators['VIKOR'].v == 0.3


class TestPreconditions:

    def test_weight_length_mismatch(self, sample_matrix):
        from mcdm_engine.exceptions import PreconditionError
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        with pytest.raises(PreconditionError, match="weights length 3 does not match"):
            calculate_mcdm("SAW", sample_matrix, [0.3, 0.3, 0.4])

    def test_precondition_is_value_error(self):
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        with pytest.raises(ValueError):
            calculate_mcdm("TOPSIS", [], [])

    def test_ragged(self):
        from mcdm_engine.exceptions import PreconditionError
        from mcdm_engine.mcdm.dispatcher import calculate_mcdm
        with pytest.raises(PreconditionError, match="row 1"):
            calculate_mcdm("TOPSIS", [[1, 2], [3]], [0.5, 0.5])


class TestDetectMethod:

    @pytest.mark.parametrize("analysis,expected", [
        ({'method': 'Fuzzy TOPSIS'}, 'TOPSIS'),
        ({'method': 'Integrated AHP-VIKOR approach'}, 'VIKOR'),
        ({'method': 'WSM'}, 'SAW'),
        ({'method': 'EDAS and CODAS comparison'}, 'EDAS'),
        ({'method': 'CODAS with EDAS cross-check'}, 'EDAS'),
        ({'method': 'CODAS'}, 'CODAS'),
        ({'method': 'grey relational analysis', 'logicModule': {'aggregation': 'Distance-to-Ideal'}},
         'TOPSIS'),
        ({'method': 'AHP', 'logicModule': {'aggregation': 'Weighted-Sum'}}, 'SAW'),
        ({'method': 'AHP'}, 'TOPSIS'),
        ({}, 'TOPSIS'),
    ])
    def test_detect(self, analysis, expected):
        from mcdm_engine.mcdm.dispatcher import detect_method
        assert detect_method(analysis) == expected
