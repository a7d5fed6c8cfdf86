# -*- coding: utf-8 -*-
"""
MOORA: Multi-Objective Optimization by Ratio Analysis (ratio system)

    y_i = Σ_{j ∈ max} w_j × r_ij  -  Σ_{j ∈ min} w_j × r_ij

with r the vector-normalised matrix. Scores may be negative.

References
----------
Brauers, W.K.M., & Zavadskas, E.K. (2006). The MOORA method and its
application to privatization in a transition economy. Control and
Cybernetics, 35(2), 445–469.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import vector
from ...validation import Problem


class MOORAResult(RankingResult):
    """Result container for MOORA."""

    @property
    def benefit_sum(self) -> np.ndarray:
        return self.details['benefit_sum']

    @property
    def cost_sum(self) -> np.ndarray:
        return self.details['cost_sum']


class MOORACalculator(MCDMCalculator):
    name = "MOORA"
    result_class = MOORAResult

    def _scores(self, problem: Problem):
        norm = vector(problem.matrix)
        weighted = norm * problem.weights
        is_max = problem.is_max
        benefit = weighted[:, is_max].sum(axis=1)
        cost = weighted[:, ~is_max].sum(axis=1)
        return benefit - cost, {
            'normalized': norm,
            'weighted_matrix': weighted,
            'benefit_sum': benefit,
            'cost_sum': cost,
        }


def calculate_moora(matrix, weights, directions=None) -> MOORAResult:
    return MOORACalculator().calculate(matrix, weights, directions)
