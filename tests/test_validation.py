# -*- coding: utf-8 -*-
"""
Tests for input coercion and core value types.
"""

import pytest
import numpy as np
import pandas as pd
from numpy.testing import assert_allclose

from mcdm_engine.exceptions import PreconditionError


class TestAsMatrix:

    def test_list_is_copied(self):
        from mcdm_engine.validation import as_matrix
        rows = [[1, 2], [3, 4]]
        X = as_matrix(rows)
        X[0, 0] = 99
        assert rows[0][0] == 1
        assert X.dtype == float

    def test_array_is_copied(self, sample_matrix):
        from mcdm_engine.validation import as_matrix
        X = as_matrix(sample_matrix)
        assert X is not sample_matrix
        assert_allclose(X, sample_matrix)

    @pytest.mark.parametrize("matrix,message", [
        ([], "empty"),
        ([[]], "empty"),
        ([[1, 2], [3]], "row 1 has 1 criteria"),
        ([[1, 'x']], "non-numeric"),
        ([[1, np.nan]], "not finite"),
        ([[1, np.inf], [2, 3]], r"cell \(0, 1\)"),
        (np.array([1.0, 2.0]), "2-D"),
        (np.empty((0, 3)), "empty"),
        (pd.DataFrame(), "empty"),
    ])
    def test_rejects(self, matrix, message):
        from mcdm_engine.validation import as_matrix
        with pytest.raises(PreconditionError, match=message):
            as_matrix(matrix)

    def test_size_limit(self):
        from mcdm_engine.validation import as_matrix
        with pytest.raises(PreconditionError, match="exceeds the limit of 4 cells"):
            as_matrix(np.ones((3, 2)), max_cells=4)

    def test_size_limit_from_config(self):
        from mcdm_engine.config import Config, EngineConfig, set_config
        from mcdm_engine.validation import as_matrix
        set_config(Config(engine=EngineConfig(max_cells=2)))
        with pytest.raises(PreconditionError):
            as_matrix([[1, 2, 3]])

    def test_labels(self, sample_frame):
        from mcdm_engine.validation import matrix_labels
        assert matrix_labels(sample_frame) == (['S1', 'S2', 'S3', 'S4', 'S5'],
                                               ['Price', 'Quality', 'Delivery', 'Service'])
        assert matrix_labels([[1, 2]]) == (['A1'], ['C1', 'C2'])


class TestAsWeights:

    def test_by_name(self):
        from mcdm_engine.validation import as_weights
        w = as_weights({'b': 0.7, 'a': 0.3}, 2, ['a', 'b'])
        assert_allclose(w, [0.3, 0.7])

    def test_series_reordered(self):
        from mcdm_engine.validation import as_weights
        w = as_weights(pd.Series({'b': 0.7, 'a': 0.3}), 2, ['a', 'b'])
        assert_allclose(w, [0.3, 0.7])

    def test_missing_name(self):
        from mcdm_engine.validation import as_weights
        with pytest.raises(PreconditionError, match="missing"):
            as_weights({'a': 1.0}, 2, ['a', 'b'])

    def test_negative(self):
        from mcdm_engine.validation import as_weights
        with pytest.raises(PreconditionError, match="non-negative"):
            as_weights([0.5, -0.1], 2)

    def test_length(self):
        from mcdm_engine.validation import as_weights
        with pytest.raises(PreconditionError, match="weights length 1"):
            as_weights([1.0], 2)

    def test_unnormalized_kept(self):
        from mcdm_engine.validation import as_weights
        assert_allclose(as_weights([2, 3], 2), [2.0, 3.0])


class TestAsDirections:

    def test_none_means_max(self):
        from mcdm_engine.types import Direction
        from mcdm_engine.validation import as_directions
        assert as_directions(None, 3) == [Direction.MAX] * 3

    def test_single_string(self):
        from mcdm_engine.types import Direction
        from mcdm_engine.validation import as_directions
        assert as_directions('cost', 2) == [Direction.MIN, Direction.MIN]

    def test_mapping(self):
        from mcdm_engine.types import Direction
        from mcdm_engine.validation import as_directions
        dirs = as_directions({'b': 'min'}, 2, ['a', 'b'])
        assert dirs == [Direction.MAX, Direction.MIN]

    def test_invalid(self):
        from mcdm_engine.validation import as_directions
        with pytest.raises(PreconditionError, match="sideways"):
            as_directions(['max', 'sideways'], 2)

    def test_length(self):
        from mcdm_engine.validation import as_directions
        with pytest.raises(PreconditionError, match="directions length 1"):
            as_directions(['max'], 2)


class TestTypes:

    @pytest.mark.parametrize("text,expected", [
        ("max", "max"), ("Maximize", "max"), ("benefit", "max"), ("+", "max"),
        ("MIN", "min"), ("minimise", "min"), ("cost", "min"), ("-", "min"),
    ])
    def test_direction_parse(self, text, expected):
        from mcdm_engine.types import Direction
        assert Direction.parse(text).value == expected

    def test_direction_unknown(self):
        from mcdm_engine.types import Direction
        with pytest.raises(ValueError):
            Direction.parse("up")

    def test_criterion_from_dict(self):
        from mcdm_engine.types import Criterion, Direction
        c = Criterion.from_dict({'name': 'Cost', 'weight': '0.4', 'direction': 'cost'})
        assert c == Criterion('Cost', 0.4, Direction.MIN)
        assert c.with_weight(0.1).weight == 0.1
        assert c.with_weight(0.1).direction is Direction.MIN

    @pytest.mark.parametrize("entry,message", [
        ({'name': 'Cost', 'weight': None}, "'Cost' has no numeric weight"),
        ({'name': 'Cost', 'weight': 'heavy'}, "'Cost' has no numeric weight"),
        ({'name': 'Cost', 'weight': 0.4, 'direction': 'sideways'}, "'Cost'.*sideways"),
    ])
    def test_criterion_from_dict_bad_fields(self, entry, message):
        from mcdm_engine.types import Criterion
        with pytest.raises(PreconditionError, match=message):
            Criterion.from_dict(entry)

    def test_split_criteria(self, sample_criteria):
        from mcdm_engine.types import Direction
        from mcdm_engine.validation import split_criteria
        names, weights, directions = split_criteria(sample_criteria)
        assert names == ['Price', 'Quality', 'Delivery', 'Service']
        assert_allclose(weights, [0.35, 0.25, 0.2, 0.2])
        assert directions[0] is Direction.MIN

    def test_split_criteria_default_names(self):
        from mcdm_engine.validation import split_criteria
        names, _, _ = split_criteria([{'weight': 1.0}])
        assert names == ['C1']
        with pytest.raises(PreconditionError):
            split_criteria([])
