# -*- coding: utf-8 -*-
"""
WPM: Weighted Product Model

    Score_i = Π_j  x_ij ^ (±w_j)

The exponent is +w_j for benefit criteria and -w_j for cost criteria.
Operates on raw values; exact zeros are replaced by ``zero_guard`` (0.001)
so that 0 ** -w never occurs. Values are expected to be non-negative.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ...config import get_config
from ...validation import Problem


class WPMResult(RankingResult):
    """Result container for WPM."""

    @property
    def exponents(self) -> np.ndarray:
        return self.details['exponents']


def weighted_product(matrix: np.ndarray, weights: np.ndarray, is_max: np.ndarray) -> tuple:
    """Return ``(scores, exponents)`` of the weighted product."""
    guard = get_config().engine.zero_guard
    X = np.where(matrix == 0, guard, matrix)
    exponents = np.where(is_max, weights, -weights)
    return np.prod(X ** exponents, axis=1), exponents


class WPMCalculator(MCDMCalculator):
    """Weighted Product Model calculator."""

    name = "WPM"
    result_class = WPMResult

    def _scores(self, problem: Problem):
        scores, exponents = weighted_product(problem.matrix, problem.weights, problem.is_max)
        return scores, {'exponents': exponents}


def calculate_wpm(matrix, weights, directions=None) -> WPMResult:
    return WPMCalculator().calculate(matrix, weights, directions)
