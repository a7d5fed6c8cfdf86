# -*- coding: utf-8 -*-
"""
Tests for payload loading and cell classification.
"""

import json

import pytest
import numpy as np
from numpy.testing import assert_allclose

from mcdm_engine.exceptions import PreconditionError
from mcdm_engine.mcdm.fuzzy import TriangularFuzzyNumber as TFN


class TestClassifyCell:

    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        (2.5, 2.5),
        (np.float64(1.5), 1.5),
        ("4.25", 4.25),
        ("  7 ", 7.0),
        ("", 0.0),
        (None, 0.0),
    ])
    def test_crisp(self, value, expected):
        from mcdm_engine.data_loader import CrispCell, classify_cell
        assert classify_cell(value) == CrispCell(expected)

    @pytest.mark.parametrize("value", [
        TFN(0.1, 0.3, 0.5), (0.1, 0.3, 0.5), [0.1, 0.3, 0.5], "(0.1, 0.3, 0.5)", "[0.1,0.3,0.5]",
    ])
    def test_fuzzy(self, value):
        from mcdm_engine.data_loader import FuzzyCell, classify_cell
        cell = classify_cell(value)
        assert isinstance(cell, FuzzyCell)
        assert_allclose(cell.tfn.as_tuple(), (0.1, 0.3, 0.5))

    @pytest.mark.parametrize("value", ["High", "VH", " very low "])
    def test_linguistic(self, value):
        from mcdm_engine.data_loader import LinguisticCell, classify_cell
        cell = classify_cell(value)
        assert isinstance(cell, LinguisticCell)
        assert cell.term == value.strip()

    def test_already_classified(self):
        from mcdm_engine.data_loader import LinguisticCell, classify_cell
        cell = LinguisticCell("High")
        assert classify_cell(cell) is cell

    def test_bad_triple(self):
        from mcdm_engine.data_loader import classify_cell
        with pytest.raises(PreconditionError, match="3 components"):
            classify_cell([1, 2])

    def test_unsupported(self):
        from mcdm_engine.data_loader import classify_cell
        with pytest.raises(PreconditionError, match="unsupported"):
            classify_cell({'l': 1})


class TestDataLoader:

    def test_crisp_payload(self, sample_payload):
        from mcdm_engine.data_loader import load_problem
        from mcdm_engine.types import Direction
        problem = load_problem(sample_payload)
        assert problem.alternatives == ['Alpha', 'Beta', 'Gamma']
        assert problem.criterion_names == ['Price', 'Quality', 'Capacity']
        assert problem.directions[0] is Direction.MIN
        assert_allclose(problem.weights, [0.4, 0.35, 0.25])
        assert not problem.is_fuzzy
        assert problem.method == 'TOPSIS'
        frame = problem.crisp_matrix()
        assert list(frame.index) == ['Alpha', 'Beta', 'Gamma']
        assert frame.loc['Gamma', 'Quality'] == 32.0
        assert problem.summary() == "3 alternatives x 3 criteria (9 crisp, 0 fuzzy, 0 linguistic cells)"

    def test_mixed_payload(self):
        from mcdm_engine.data_loader import DataLoader
        payload = {
            'criteria': [{'name': 'Cost', 'weight': 0.5, 'direction': 'cost'},
                         {'name': 'Fit', 'weight': 0.5}],
            'matrix': [[10, 'VH'], ['(8, 9, 13)', 'Low']],
        }
        problem = DataLoader().load(payload)
        assert problem.alternatives == ['A1', 'A2']
        assert problem.is_fuzzy
        assert problem.has_linguistic
        assert_allclose(problem.crisp_matrix().values, [[10.0, 0.87], [10.0, 0.30]])
        fuzzy = problem.fuzzy_matrix()
        assert fuzzy[0][0] == TFN(10.0, 10.0, 10.0)
        assert fuzzy[0][1] == TFN(0.7, 0.9, 1.0)
        assert fuzzy[1][0] == TFN(8.0, 9.0, 13.0)
        assert problem.summary().endswith("(1 crisp, 1 fuzzy, 2 linguistic cells)")

    def test_defuzzification_method(self):
        from mcdm_engine.data_loader import DataLoader
        problem = DataLoader().load({'criteria': [{'name': 'x', 'weight': 1}],
                                     'matrix': [['(1, 2, 6)']]})
        assert problem.crisp_matrix().iloc[0, 0] == pytest.approx(3.0)
        assert problem.crisp_matrix('graded_mean').iloc[0, 0] == pytest.approx(2.5)

    def test_custom_scale(self):
        from mcdm_engine.data_loader import DataLoader
        payload = {
            'criteria': [{'name': 'Quality', 'weight': 1}],
            'matrix': [['Good'], ['Poor']],
            'linguisticScale': [
                {'term': 'Good', 'fuzzyNumber': [0.5, 0.75, 1.0], 'crispValue': 0.75},
                {'term': 'Poor', 'fuzzyNumber': [0.0, 0.25, 0.5], 'crispValue': 0.25},
            ],
        }
        problem = DataLoader().load(payload)
        assert_allclose(problem.crisp_matrix().values.ravel(), [0.75, 0.25])
        assert problem.fuzzy_matrix()[1][0] == TFN(0.0, 0.25, 0.5)

    def test_unknown_term_strict(self):
        from mcdm_engine.data_loader import DataLoader
        from mcdm_engine.exceptions import UnresolvedTermError
        problem = DataLoader().load({'criteria': [{'name': 'x', 'weight': 1}],
                                     'matrix': [['Stellar']]})
        assert problem.crisp_matrix().iloc[0, 0] == 0.5
        with pytest.raises(UnresolvedTermError):
            problem.crisp_matrix(strict=True)

    def test_load_json_file(self, tmp_path, sample_payload):
        from mcdm_engine.data_loader import DataLoader
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps(sample_payload), encoding='utf-8')
        problem = DataLoader().load(path)
        assert problem.n_alternatives == 3
        assert problem.source['logicModule']['aggregation'] == 'Distance-to-Ideal'
        assert DataLoader().load(str(path)).n_criteria == 3

    def test_non_mapping(self, tmp_path):
        from mcdm_engine.data_loader import DataLoader
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding='utf-8')
        with pytest.raises(PreconditionError, match="mapping"):
            DataLoader().load(path)

    @pytest.mark.parametrize("payload,message", [
        ({'matrix': [[1]]}, "no criteria"),
        ({'criteria': [{'name': 'x', 'weight': 1}], 'matrix': []}, "matrix is empty"),
        ({'criteria': [{'name': 'x', 'weight': 1}], 'matrix': [[1], [1, 2]]},
         "matrix row 1 has 2 cells"),
        ({'criteria': [{'name': 'x', 'weight': 1}], 'matrix': [[1], [2]],
          'alternatives': ['only one']}, "alternatives length 1"),
        ({'criteria': [{'name': 'Cost', 'weight': None}], 'matrix': [[1]]},
         "'Cost' has no numeric weight"),
        ({'criteria': [{'name': 'Cost', 'weight': 1, 'direction': 'sideways'}], 'matrix': [[1]]},
         "Unknown criterion direction"),
    ])
    def test_rejects(self, payload, message):
        from mcdm_engine.data_loader import DataLoader
        with pytest.raises(PreconditionError, match=message):
            DataLoader().load(payload)

    def test_size_limit(self):
        from mcdm_engine.config import Config, EngineConfig
        from mcdm_engine.data_loader import DataLoader
        loader = DataLoader(Config(engine=EngineConfig(max_cells=3)))
        with pytest.raises(PreconditionError, match="exceeds"):
            loader.load({'criteria': [{'name': 'a', 'weight': 1}, {'name': 'b', 'weight': 1}],
                         'matrix': [[1, 2], [3, 4]]})
