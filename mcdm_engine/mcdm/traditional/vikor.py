# -*- coding: utf-8 -*-
"""
VIKOR: Multi-criteria Optimization and Compromise Solution

A compromise ranking method for alternatives evaluated on conflicting
criteria.

Mathematical Steps:
1. Determine best (f*) and worst (f-) values for each criterion
2. Calculate S_i (group utility) and R_i (individual regret):
       d_ij = w_j × |f*_j - x_ij| / |f*_j - f-_j|
       S_i = Σ_j d_ij,  R_i = max_j d_ij
3. Calculate Q_i = v × (S_i - S*) / (S- - S*) + (1-v) × (R_i - R*) / (R- - R*)
4. Rank by Q values (lower is better)

Zero ranges (constant criterion, constant S or R) use a denominator of 1.
The returned ``scores`` are ``1 - Q`` so that higher is better, as for every
other method; ranks are computed from Q directly.
"""

from typing import List, Tuple

import numpy as np

from ..base import MCDMCalculator, RankingResult, rank_scores
from ...config import get_config
from ...validation import Problem


class VIKORResult(RankingResult):
    """Result container for VIKOR calculation."""

    @property
    def S(self) -> np.ndarray:
        """Group utility."""
        return self.details['S']

    @property
    def R(self) -> np.ndarray:
        """Individual regret."""
        return self.details['R']

    @property
    def Q(self) -> np.ndarray:
        """Compromise index (lower is better)."""
        return self.details['Q']

    @property
    def compromise_solution(self) -> str:
        return self.best

    @property
    def compromise_set(self) -> List[str]:
        return self.details['compromise_set']

    @property
    def advantage_condition(self) -> bool:
        return self.details['advantage_condition']

    @property
    def stability_condition(self) -> bool:
        return self.details['stability_condition']


class VIKORCalculator(MCDMCalculator):
    """
    VIKOR (VIseKriterijumska Optimizacija I Kompromisno Resenje) calculator.

    Parameters
    ----------
    v : float
        Weight of the maximum group utility (0-1)
        - v=0.5: consensus by majority (recommended)
        - v=1: ranking by S alone
        - v=0: ranking by R alone

    References
    ----------
    Opricovic, S., & Tzeng, G.H. (2004). Compromise solution by MCDM methods:
    A comparative analysis of VIKOR and TOPSIS. EJOR.
    """

    name = "VIKOR"
    result_class = VIKORResult
    rank_ascending = True

    def __init__(self, v: float = None):
        if v is None:
            v = get_config().methods.v
        if not 0 <= v <= 1:
            raise ValueError("v must be between 0 and 1")
        self.v = v

    def _scores(self, problem: Problem):
        X = problem.matrix

        # Step 1: best and worst values
        f_best, f_worst = self._get_ideal_values(X, problem.is_max)

        # Step 2: S and R
        S, R = self._calculate_S_R(X, problem.weights, f_best, f_worst)

        # Step 3: Q
        Q = self._calculate_Q(S, R)

        # Step 4: acceptance conditions
        ranks_S = rank_scores(S, ascending=True)
        ranks_R = rank_scores(R, ascending=True)
        ranks_Q = rank_scores(Q, ascending=True)
        advantage, stability, compromise = self._check_conditions(
            Q, ranks_Q, ranks_S, ranks_R, problem.alternatives
        )

        details = {
            'S': S, 'R': R, 'Q': Q,
            'f_best': f_best, 'f_worst': f_worst,
            'ranks_S': ranks_S, 'ranks_R': ranks_R,
            'advantage_condition': advantage,
            'stability_condition': stability,
            'compromise_set': compromise,
            'v': self.v,
        }
        return 1 - Q, details

    def _build(self, problem, scores, details, rank_key=None):
        return super()._build(problem, scores, details, rank_key=details['Q'])

    @staticmethod
    def _get_ideal_values(X: np.ndarray, is_max: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        col_max = X.max(axis=0)
        col_min = X.min(axis=0)
        return np.where(is_max, col_max, col_min), np.where(is_max, col_min, col_max)

    @staticmethod
    def _calculate_S_R(X: np.ndarray, weights: np.ndarray,
                       f_best: np.ndarray, f_worst: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        rng = np.abs(f_best - f_worst)
        rng[rng == 0] = 1
        regret = weights * np.abs(f_best - X) / rng
        return regret.sum(axis=1), regret.max(axis=1)

    def _calculate_Q(self, S: np.ndarray, R: np.ndarray) -> np.ndarray:
        S_range = S.max() - S.min() or 1
        R_range = R.max() - R.min() or 1
        return (self.v * (S - S.min()) / S_range
                + (1 - self.v) * (R - R.min()) / R_range)

    @staticmethod
    def _check_conditions(Q: np.ndarray, ranks_Q: np.ndarray, ranks_S: np.ndarray,
                          ranks_R: np.ndarray, names: List[str]) -> Tuple[bool, bool, List[str]]:
        """Check acceptance conditions for the compromise solution."""
        n = len(Q)
        order = np.argsort(ranks_Q)
        a1 = order[0]
        a2 = order[1] if n > 1 else a1

        # C1: acceptable advantage
        DQ = 1 / (n - 1) if n > 1 else 0
        advantage = bool(Q[a2] - Q[a1] >= DQ)

        # C2: acceptable stability
        stability = bool(ranks_S[a1] == 1 or ranks_R[a1] == 1)

        if advantage and stability:
            compromise = [names[a1]]
        elif not advantage:
            compromise = [names[i] for i in order if Q[i] - Q[a1] < DQ]
        else:
            compromise = [names[a1], names[a2]]
        return advantage, stability, compromise


def calculate_vikor(matrix, weights, directions=None, v: float = None) -> VIKORResult:
    """Convenience function for VIKOR calculation."""
    return VIKORCalculator(v=v).calculate(matrix, weights, directions)
