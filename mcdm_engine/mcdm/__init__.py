# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

Submodules
----------
normalization
    vector, linear-max, min-max and sum normalization
traditional
    Crisp ranking methods: SAW, WPM, TOPSIS, VIKOR, MOORA, WASPAS, COPRAS,
    EDAS, CODAS, ARAS
fuzzy
    Triangular fuzzy numbers, linguistic scales and Fuzzy TOPSIS
dispatcher
    Run any method by name

Usage
-----
>>> from mcdm_engine.mcdm import calculate_mcdm
>>> result = calculate_mcdm("topsis", [[1, 1], [2, 2], [3, 3]], [0.5, 0.5], ["max", "max"])
>>> result.best
'A3'
"""

from .base import RankingResult, MCDMCalculator, rank_scores
from .normalization import vector, linear_max, min_max, sum_norm, normalize
from .traditional import (
    SAWCalculator, SAWResult,
    WPMCalculator, WPMResult,
    TOPSISCalculator, TOPSISResult,
    VIKORCalculator, VIKORResult,
    MOORACalculator, MOORAResult,
    WASPASCalculator, WASPASResult,
    COPRASCalculator, COPRASResult,
    EDASCalculator, EDASResult,
    CODASCalculator, CODASResult,
    ARASCalculator, ARASResult,
)
from .fuzzy import (
    TriangularFuzzyNumber, LinguisticTerm, LinguisticScale,
    DEFAULT_TRIANGULAR_SCALE, SAATY_SCALE,
    FuzzyTOPSIS, FuzzyTOPSISResult,
)
from .dispatcher import (
    calculate_mcdm, canonical_method_name, available_methods,
    get_calculator, detect_method,
)


def get_all_calculators(**options):
    """Return one configured calculator per available method."""
    return {name: get_calculator(name, options) for name in available_methods()}


__all__ = [
    'RankingResult', 'MCDMCalculator', 'rank_scores',
    'vector', 'linear_max', 'min_max', 'sum_norm', 'normalize',
    'SAWCalculator', 'SAWResult',
    'WPMCalculator', 'WPMResult',
    'TOPSISCalculator', 'TOPSISResult',
    'VIKORCalculator', 'VIKORResult',
    'MOORACalculator', 'MOORAResult',
    'WASPASCalculator', 'WASPASResult',
    'COPRASCalculator', 'COPRASResult',
    'EDASCalculator', 'EDASResult',
    'CODASCalculator', 'CODASResult',
    'ARASCalculator', 'ARASResult',
    'TriangularFuzzyNumber', 'LinguisticTerm', 'LinguisticScale',
    'DEFAULT_TRIANGULAR_SCALE', 'SAATY_SCALE',
    'FuzzyTOPSIS', 'FuzzyTOPSISResult',
    'calculate_mcdm', 'canonical_method_name', 'available_methods',
    'get_calculator', 'detect_method', 'get_all_calculators',
]
