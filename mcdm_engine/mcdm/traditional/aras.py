# -*- coding: utf-8 -*-
"""
ARAS: Additive Ratio Assessment

Mathematical Steps:
1. Cost criteria are converted to benefit form: x' = 1 / x
2. Optimal alternative A0: column maximum of the converted matrix
3. Prepend A0 and sum-normalize the extended matrix
4. Optimality function S_i = Σ_j w_j × r_ij
5. Utility degree K_i = S_i / S_0

Zero cells in cost columns are replaced by ``zero_guard`` before the
reciprocal; an S_0 of 0 is replaced by 1.

References
----------
Zavadskas, E.K., & Turskis, Z. (2010). A new additive ratio assessment
(ARAS) method in multicriteria decision-making. Technological and Economic
Development of Economy, 16(2), 159–172.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import sum_norm
from ...config import get_config
from ...validation import Problem


class ARASResult(RankingResult):
    """Result container for ARAS."""

    @property
    def optimal(self) -> np.ndarray:
        return self.details['optimal']

    @property
    def S(self) -> np.ndarray:
        """Optimality function values, A0 first."""
        return self.details['S']


class ARASCalculator(MCDMCalculator):
    name = "ARAS"
    result_class = ARASResult

    def _scores(self, problem: Problem):
        guard = get_config().engine.zero_guard
        X = problem.matrix
        is_max = problem.is_max

        converted = np.where(is_max, X, 1.0 / np.where(X == 0, guard, X))
        optimal = converted.max(axis=0)
        extended = np.vstack([optimal, converted])

        norm = sum_norm(extended)
        weighted = norm * problem.weights
        S = weighted.sum(axis=1)
        S0 = S[0] or 1

        return S[1:] / S0, {
            'optimal': optimal,
            'normalized': norm,
            'weighted_matrix': weighted,
            'S': S,
        }


def calculate_aras(matrix, weights, directions=None) -> ARASResult:
    return ARASCalculator().calculate(matrix, weights, directions)
