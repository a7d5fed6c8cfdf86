# -*- coding: utf-8 -*-
"""
Shared result container and rank assignment for all ranking methods.

Tie rule
--------
Ranks are assigned by a stable sort on scores divided by the largest score
magnitude and rounded to ``Config.engine.tie_decimals`` places, so the tie
tolerance is relative and does not depend on the scale of the weights or the
raw values. Alternatives whose scores are equal after rounding keep their
input order (the earlier row gets the better rank).
This rule is arbitrary with respect to the decision problem and carries no
meaning beyond reproducibility.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from ..config import get_config
from ..logger import get_module_logger
from ..validation import Problem, check_problem

logger = get_module_logger("mcdm.base")


def rank_scores(scores: np.ndarray,
                ascending: bool = False,
                decimals: Optional[int] = None) -> np.ndarray:
    """
    Convert scores into a 1..N rank permutation.

    Parameters
    ----------
    scores : np.ndarray
        One score per alternative.
    ascending : bool
        If True, the lowest score ranks first (VIKOR's Q).
    decimals : int, optional
        Decimal places kept after dividing by the largest absolute score
        (defaults to the configured ``tie_decimals``).

    Returns
    -------
    np.ndarray
        Integer ranks, 1 = best.
    """
    if decimals is None:
        decimals = get_config().engine.tie_decimals
    values = np.asarray(scores, dtype=float)
    scale = np.max(np.abs(values), initial=0.0)
    if not (np.isfinite(scale) and scale > 0):
        scale = 1.0
    keys = np.round(values / scale, decimals)
    order = np.argsort(keys if ascending else -keys, kind='stable')
    ranks = np.empty(len(keys), dtype=int)
    ranks[order] = np.arange(1, len(keys) + 1)
    return ranks


@dataclass
class RankingResult:
    """Result container shared by every ranking method."""
    method: str
    scores: np.ndarray                      # higher is better for every method
    ranks: np.ndarray                       # permutation of 1..N
    alternatives: List[str]
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def final_ranks(self) -> pd.Series:
        return pd.Series(self.ranks, index=self.alternatives, name=f'{self.method}_Rank')

    @property
    def best(self) -> str:
        """Name of the rank-1 alternative."""
        return self.alternatives[int(np.argmin(self.ranks))]

    @property
    def order(self) -> List[str]:
        """Alternatives from best to worst."""
        return [self.alternatives[i] for i in np.argsort(self.ranks, kind='stable')]

    def to_frame(self) -> pd.DataFrame:
        """Ranking table in input order."""
        return pd.DataFrame({
            'Alternative': self.alternatives,
            'Score': self.scores,
            'Rank': self.ranks,
        })

    def to_records(self) -> List[Dict[str, Any]]:
        return [
            {'alternative': a, 'score': float(s), 'rank': int(r)}
            for a, s, r in zip(self.alternatives, self.scores, self.ranks)
        ]

    def top_n(self, n: int = 10) -> pd.DataFrame:
        return self.to_frame().set_index('Alternative').nsmallest(n, 'Rank')

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            f"{self.method} RESULTS",
            f"{'='*60}",
            f"\nAlternatives: {len(self.ranks)}",
        ]
        if self.details.get('fallback'):
            lines.append(f"(fallback from unknown method {self.details.get('requested')!r})")
        lines.append("\nRanking:")
        for i, (name, row) in enumerate(self.top_n(len(self.ranks)).iterrows(), 1):
            lines.append(f"  {i}. {name}: Score={row['Score']:.4f}")
        lines.append("=" * 60)
        return "\n".join(lines)


class MCDMCalculator:
    """
    Base class for crisp ranking calculators.

    Subclasses set ``name`` and ``result_class`` and implement ``_scores``,
    returning ``(scores, details)`` for a validated ``Problem``.
    """

    name: str = ""
    result_class = RankingResult
    rank_ascending: bool = False

    def calculate(self, matrix, weights, directions=None) -> RankingResult:
        """
        Score and rank a decision problem.

        Parameters
        ----------
        matrix : array-like or pd.DataFrame
            Decision matrix (alternatives x criteria).
        weights : array-like, pd.Series or dict
            Criterion weights (need not sum to 1).
        directions : sequence of Direction or str, optional
            ``max``/``min`` per criterion; all maximized when omitted.
        """
        problem = check_problem(matrix, weights, directions)
        logger.debug(f"{self.name}: {problem.shape[0]} alternatives x "
                     f"{problem.shape[1]} criteria")
        scores, details = self._scores(problem)
        return self._build(problem, scores, details)

    def _scores(self, problem: Problem):
        raise NotImplementedError

    def _build(self, problem: Problem, scores: np.ndarray,
               details: Dict[str, Any], rank_key: Optional[np.ndarray] = None) -> RankingResult:
        key = scores if rank_key is None else rank_key
        ranks = rank_scores(key, ascending=self.rank_ascending)
        details.setdefault('weights', problem.weights.copy())
        details.setdefault('criteria', list(problem.criteria))
        return self.result_class(
            method=self.name,
            scores=np.asarray(scores, dtype=float),
            ranks=ranks,
            alternatives=list(problem.alternatives),
            details=details,
        )
