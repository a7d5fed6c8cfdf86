# -*- coding: utf-8 -*-
"""
EDAS: Evaluation based on Distance from Average Solution

Uses the average solution as reference point rather than the ideal
solutions, which makes it less sensitive to extreme values.

Mathematical Steps:
1. Calculate Average Solution (AV)
2. Calculate Positive Distance from Average (PDA)
3. Calculate Negative Distance from Average (NDA)
4. Weighted sum: SP_i = Σw_j × PDA_ij, SN_i = Σw_j × NDA_ij
5. Normalize: NSP_i = SP_i / max SP, NSN_i = 1 - SN_i / max SN
6. Appraisal Score: AS_i = (NSP_i + NSN_i) / 2

A zero average or a zero maximum is replaced by 1.

References
----------
Keshavarz Ghorabaee, M., et al. (2015). Multi-criteria inventory
classification using a new method of evaluation based on distance from
average solution (EDAS). Informatica, 26(3), 435–451.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ...validation import Problem


class EDASResult(RankingResult):
    """Result container for EDAS calculation."""

    @property
    def PDA(self) -> np.ndarray:
        return self.details['PDA']

    @property
    def NDA(self) -> np.ndarray:
        return self.details['NDA']

    @property
    def AS(self) -> np.ndarray:
        """Appraisal score."""
        return self.scores

    @property
    def average_solution(self) -> np.ndarray:
        return self.details['average_solution']


class EDASCalculator(MCDMCalculator):
    """EDAS calculator."""

    name = "EDAS"
    result_class = EDASResult

    def _scores(self, problem: Problem):
        X = problem.matrix
        w = problem.weights

        # Step 1: average solution
        av = X.mean(axis=0)
        denom = np.where(av == 0, 1, av)

        # Step 2-3: PDA / NDA
        diff = np.where(problem.is_max, X - av, av - X)
        PDA = np.maximum(0, diff) / denom
        NDA = np.maximum(0, -diff) / denom

        # Step 4
        SP = (PDA * w).sum(axis=1)
        SN = (NDA * w).sum(axis=1)

        # Step 5
        NSP = SP / (SP.max() or 1)
        NSN = 1 - SN / (SN.max() or 1)

        # Step 6
        AS = (NSP + NSN) / 2

        return AS, {
            'average_solution': av,
            'PDA': PDA, 'NDA': NDA,
            'SP': SP, 'SN': SN,
            'NSP': NSP, 'NSN': NSN,
        }


def calculate_edas(matrix, weights, directions=None) -> EDASResult:
    return EDASCalculator().calculate(matrix, weights, directions)
