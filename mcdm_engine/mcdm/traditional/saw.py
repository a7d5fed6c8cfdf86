# -*- coding: utf-8 -*-
"""
SAW: Simple Additive Weighting (Weighted Sum Model)

The simplest MCDM method and the transparent baseline for the others.

    Score_i = Σ_j  w_j × r_ij

where r_ij is the linear-max normalised value (min / x for cost criteria)
and w_j is the criterion weight.

Properties
----------
- Linear aggregation (fully compensatory).
- Scaling every weight by k > 0 scales every score by k; order is unchanged.
- Computationally O(m × n).

References
----------
[1] Fishburn, P.C. (1967). "Additive Utilities with Incomplete Product
    Sets: Application to Priorities and Assignments."
    Operations Research, 15(3), 537–542.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import linear_max
from ...validation import Problem


class SAWResult(RankingResult):
    """Result container for SAW."""

    @property
    def normalized(self) -> np.ndarray:
        return self.details['normalized']

    @property
    def weighted_matrix(self) -> np.ndarray:
        return self.details['weighted_matrix']


class SAWCalculator(MCDMCalculator):
    """Simple Additive Weighting calculator (linear-max normalization)."""

    name = "SAW"
    result_class = SAWResult

    def _scores(self, problem: Problem):
        norm = linear_max(problem.matrix, problem.is_max)
        weighted = norm * problem.weights
        return weighted.sum(axis=1), {'normalized': norm, 'weighted_matrix': weighted}


def calculate_saw(matrix, weights, directions=None) -> SAWResult:
    """Convenience function for SAW."""
    return SAWCalculator().calculate(matrix, weights, directions)
