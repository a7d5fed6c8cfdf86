# -*- coding: utf-8 -*-
"""
TOPSIS: Technique for Order Preference by Similarity to Ideal Solution

Mathematical Steps:
1. Vector-normalize the decision matrix
2. Apply weights: v_ij = w_j × r_ij
3. Ideal (A+) and anti-ideal (A-) per criterion, direction aware
4. Euclidean distances D+_i and D-_i
5. Closeness coefficient: C_i = D-_i / (D+_i + D-_i + ε)

ε (``Config.engine.epsilon``, 1e-4) keeps C finite when an alternative
coincides with both ideals, e.g. a constant matrix.

References
----------
Hwang, C.L., & Yoon, K. (1981). Multiple Attribute Decision Making:
Methods and Applications. Springer.
"""

from typing import Tuple

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import normalize
from ...config import get_config
from ...validation import Problem


class TOPSISResult(RankingResult):
    """Result container for TOPSIS calculation."""

    @property
    def d_positive(self) -> np.ndarray:
        """Distance to ideal."""
        return self.details['d_positive']

    @property
    def d_negative(self) -> np.ndarray:
        """Distance to anti-ideal."""
        return self.details['d_negative']

    @property
    def weighted_matrix(self) -> np.ndarray:
        return self.details['weighted_matrix']

    @property
    def ideal_solution(self) -> np.ndarray:
        return self.details['ideal']

    @property
    def anti_ideal_solution(self) -> np.ndarray:
        return self.details['anti_ideal']


class TOPSISCalculator(MCDMCalculator):
    """
    Standard TOPSIS calculator.

    Parameters
    ----------
    normalization : str
        Normalization used before weighting (default ``vector``).
    """

    name = "TOPSIS"
    result_class = TOPSISResult

    def __init__(self, normalization: str = "vector"):
        self.normalization = normalization

    def _scores(self, problem: Problem):
        eps = get_config().engine.epsilon

        # Step 1-2: normalize and weight
        norm = normalize(problem.matrix, problem.is_max, self.normalization)
        weighted = norm * problem.weights

        # Step 3: ideal solutions
        ideal, anti_ideal = self._get_ideal_solutions(weighted, problem.is_max)

        # Step 4: distances
        d_pos = self._calculate_distance(weighted, ideal)
        d_neg = self._calculate_distance(weighted, anti_ideal)

        # Step 5: closeness coefficient
        scores = d_neg / (d_pos + d_neg + eps)

        return scores, {
            'normalized': norm,
            'weighted_matrix': weighted,
            'ideal': ideal,
            'anti_ideal': anti_ideal,
            'd_positive': d_pos,
            'd_negative': d_neg,
        }

    @staticmethod
    def _get_ideal_solutions(weighted: np.ndarray,
                             is_max: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        col_max = weighted.max(axis=0)
        col_min = weighted.min(axis=0)
        ideal = np.where(is_max, col_max, col_min)
        anti_ideal = np.where(is_max, col_min, col_max)
        return ideal, anti_ideal

    @staticmethod
    def _calculate_distance(weighted: np.ndarray, reference: np.ndarray) -> np.ndarray:
        return np.sqrt(((weighted - reference) ** 2).sum(axis=1))


def calculate_topsis(matrix, weights, directions=None,
                     normalization: str = "vector") -> TOPSISResult:
    """Convenience function for TOPSIS calculation."""
    return TOPSISCalculator(normalization=normalization).calculate(matrix, weights, directions)
