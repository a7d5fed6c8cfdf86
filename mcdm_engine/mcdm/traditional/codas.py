# -*- coding: utf-8 -*-
"""
CODAS: Combinative Distance-based Assessment

Mathematical Steps:
1. Linear-max normalization and weighting
2. Negative-ideal solution: column minimum of the weighted matrix
3. Euclidean (E_i) and taxicab (T_i) distances from the negative ideal
4. Relative assessment: H_ik = (E_i - E_k) + ψ(E_i - E_k) × (T_i - T_k),
   ψ(x) = 1 if |x| >= τ else 0
5. Assessment score: Σ_k H_ik

τ (default 0.02) is the threshold below which two Euclidean distances are
treated as equal and the taxicab distance breaks the tie.

References
----------
Keshavarz Ghorabaee, M., et al. (2016). A new combinative distance-based
assessment (CODAS) method for multi-criteria decision-making. Economic
Computation and Economic Cybernetics Studies and Research, 50(3), 25–44.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import linear_max
from ...config import get_config
from ...validation import Problem


class CODASResult(RankingResult):
    """Result container for CODAS."""

    @property
    def E(self) -> np.ndarray:
        return self.details['E']

    @property
    def T(self) -> np.ndarray:
        return self.details['T']

    @property
    def H(self) -> np.ndarray:
        """Relative assessment matrix."""
        return self.details['H']


class CODASCalculator(MCDMCalculator):
    """
    CODAS calculator.

    Parameters
    ----------
    tau : float
        Indifference threshold for Euclidean distances.
    """

    name = "CODAS"
    result_class = CODASResult

    def __init__(self, tau: float = None):
        if tau is None:
            tau = get_config().methods.tau
        if tau < 0:
            raise ValueError("tau must be non-negative")
        self.tau = tau

    def _scores(self, problem: Problem):
        norm = linear_max(problem.matrix, problem.is_max)
        weighted = norm * problem.weights
        nis = weighted.min(axis=0)

        diff = weighted - nis
        E = np.sqrt((diff ** 2).sum(axis=1))
        T = np.abs(diff).sum(axis=1)

        e_diff = E[:, None] - E[None, :]
        t_diff = T[:, None] - T[None, :]
        psi = (np.abs(e_diff) >= self.tau).astype(float)
        H = e_diff + psi * t_diff

        return H.sum(axis=1), {
            'normalized': norm,
            'weighted_matrix': weighted,
            'nis': nis,
            'E': E, 'T': T, 'H': H,
            'tau': self.tau,
        }


def calculate_codas(matrix, weights, directions=None, tau: float = None) -> CODASResult:
    return CODASCalculator(tau=tau).calculate(matrix, weights, directions)
