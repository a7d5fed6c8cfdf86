# -*- coding: utf-8 -*-
"""
WASPAS: Weighted Aggregated Sum Product Assessment

    Q_i = λ × Q_i^(1) + (1 - λ) × Q_i^(2)

    Q^(1) (WSM) = Σ_j w_j × r_ij
    Q^(2) (WPM) = Π_j x_ij ^ (±w_j)

Q^(1) is the SAW score on the linear-max normalised matrix r and Q^(2) is
the WPM score on the raw values x (exponent -w_j for cost criteria, zeros
replaced by ``zero_guard``). λ = 1 reduces to SAW and λ = 0 to WPM.

References
----------
Zavadskas, E.K., Turskis, Z., Antucheviciene, J., & Zakarevicius, A.
(2012). Optimization of Weighted Aggregated Sum Product Assessment.
Elektronika ir Elektrotechnika, 122(6), 3–6.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import linear_max
from .wpm import weighted_product
from ...config import get_config
from ...validation import Problem


class WASPASResult(RankingResult):
    """Result container for WASPAS."""

    @property
    def wsm(self) -> np.ndarray:
        return self.details['wsm']

    @property
    def wpm(self) -> np.ndarray:
        return self.details['wpm']


class WASPASCalculator(MCDMCalculator):
    """
    WASPAS calculator.

    Parameters
    ----------
    lam : float
        Blend weight of the weighted-sum component (0-1).
    """

    name = "WASPAS"
    result_class = WASPASResult

    def __init__(self, lam: float = None):
        if lam is None:
            lam = get_config().methods.lam
        if not 0 <= lam <= 1:
            raise ValueError("lambda must be between 0 and 1")
        self.lam = lam

    def _scores(self, problem: Problem):
        norm = linear_max(problem.matrix, problem.is_max)
        wsm = (norm * problem.weights).sum(axis=1)
        wpm, _ = weighted_product(problem.matrix, problem.weights, problem.is_max)
        scores = self.lam * wsm + (1 - self.lam) * wpm
        return scores, {'normalized': norm, 'wsm': wsm, 'wpm': wpm, 'lambda': self.lam}


def calculate_waspas(matrix, weights, directions=None, lam: float = None) -> WASPASResult:
    return WASPASCalculator(lam=lam).calculate(matrix, weights, directions)
