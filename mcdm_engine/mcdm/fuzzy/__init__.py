# -*- coding: utf-8 -*-
"""
Fuzzy MCDM Module
=================

Triangular fuzzy number kernel, linguistic scales, fuzzification and
Fuzzy TOPSIS.
"""

from .base import (
    TriangularFuzzyNumber, TFN,
    centroid, graded_mean, mean_of_maximum, alpha_cut, defuzzify,
    parse_fuzzy_number, is_fuzzy, to_fuzzy_matrix, defuzzify_matrix,
    arithmetic_mean, geometric_mean, weighted_average,
)
from .linguistic import (
    LinguisticTerm, LinguisticScale, COMMON_ABBREVIATIONS,
    DEFAULT_TRIANGULAR_SCALE, SAATY_SCALE,
    linguistic_to_fuzzy_matrix, get_scale,
)
from .fuzzification import (
    fuzzify, fuzzify_spread, fuzzify_bounds, fuzzify_scale_relative,
    fuzzify_gaussian, fuzzify_linguistic,
)
from .topsis import FuzzyTOPSIS, FuzzyTOPSISResult, calculate_fuzzy_topsis

__all__ = [
    'TriangularFuzzyNumber', 'TFN',
    'centroid', 'graded_mean', 'mean_of_maximum', 'alpha_cut', 'defuzzify',
    'parse_fuzzy_number', 'is_fuzzy', 'to_fuzzy_matrix', 'defuzzify_matrix',
    'arithmetic_mean', 'geometric_mean', 'weighted_average',
    'LinguisticTerm', 'LinguisticScale', 'COMMON_ABBREVIATIONS',
    'DEFAULT_TRIANGULAR_SCALE', 'SAATY_SCALE',
    'linguistic_to_fuzzy_matrix', 'get_scale',
    'fuzzify', 'fuzzify_spread', 'fuzzify_bounds', 'fuzzify_scale_relative',
    'fuzzify_gaussian', 'fuzzify_linguistic',
    'FuzzyTOPSIS', 'FuzzyTOPSISResult', 'calculate_fuzzy_topsis',
]
