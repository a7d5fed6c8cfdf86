# -*- coding: utf-8 -*-
"""
COPRAS: Complex Proportional Assessment

A method based on direct and proportional dependence of significance
and utility degree on criterion values and weights.

Mathematical Steps:
1. Normalize the decision matrix (sum normalization)
2. Calculate weighted normalized matrix
3. Sum benefit criteria (S+) and cost criteria (S-)
4. Calculate relative significance: Q_i = S+_i + ΣS- / (S-_i × Σ(1/S-))
5. Calculate utility degree: N_i = (Q_i / Q_max) × 100%

With no cost criteria the second term of step 4 is 0. A zero S-_i in a
problem that has cost criteria is replaced by ``zero_guard``.
"""

import numpy as np

from ..base import MCDMCalculator, RankingResult
from ..normalization import sum_norm
from ...config import get_config
from ...validation import Problem


class COPRASResult(RankingResult):
    """Result container for COPRAS calculation."""

    @property
    def S_plus(self) -> np.ndarray:
        return self.details['S_plus']

    @property
    def S_minus(self) -> np.ndarray:
        return self.details['S_minus']

    @property
    def Q(self) -> np.ndarray:
        """Relative significance (priority)."""
        return self.details['Q']

    @property
    def utility_degree(self) -> np.ndarray:
        return self.scores

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            "COPRAS RESULTS",
            f"{'='*60}",
            f"\nAlternatives: {len(self.ranks)}",
            f"Benefit contribution: {self.S_plus.sum():.4f}",
            f"Cost contribution: {self.S_minus.sum():.4f}",
            "\nTop 10 Alternatives:",
        ]
        for i, (name, row) in enumerate(self.top_n(10).iterrows(), 1):
            lines.append(f"  {i}. {name}: Utility={row['Score']:.2f}%")
        lines.append("=" * 60)
        return "\n".join(lines)


class COPRASCalculator(MCDMCalculator):
    """COPRAS (Complex Proportional Assessment) calculator."""

    name = "COPRAS"
    result_class = COPRASResult

    def _scores(self, problem: Problem):
        guard = get_config().engine.zero_guard
        is_max = problem.is_max

        norm = sum_norm(problem.matrix)
        weighted = norm * problem.weights
        S_plus = weighted[:, is_max].sum(axis=1)
        S_minus = weighted[:, ~is_max].sum(axis=1)

        Q = S_plus + self._cost_term(S_minus, has_cost=bool((~is_max).any()), guard=guard)

        Q_max = Q.max()
        utility = 100 * Q / Q_max if Q_max > 0 else np.zeros_like(Q)

        return utility, {
            'normalized': norm,
            'weighted_matrix': weighted,
            'S_plus': S_plus,
            'S_minus': S_minus,
            'Q': Q,
        }

    @staticmethod
    def _cost_term(S_minus: np.ndarray, has_cost: bool, guard: float) -> np.ndarray:
        total = S_minus.sum()
        if not has_cost or total == 0:
            return np.zeros_like(S_minus)
        safe = np.where(S_minus == 0, guard, S_minus)
        return total / (safe * (1.0 / safe).sum())


def calculate_copras(matrix, weights, directions=None) -> COPRASResult:
    return COPRASCalculator().calculate(matrix, weights, directions)
