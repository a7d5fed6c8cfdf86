# -*- coding: utf-8 -*-
"""
Fuzzy TOPSIS Method
===================

Fuzzy Technique for Order Preference by Similarity to Ideal Solution.

Extends classical TOPSIS with Triangular Fuzzy Numbers so that uncertainty
in the decision matrix and the weights is carried through ranking instead
of being defuzzified up front.

Mathematical Foundation:
    1. Construct fuzzy decision matrix X̃ with TFN values
    2. Normalize:
       - benefit: r̃_ij = x̃_ij / max_i(u_ij)
       - cost:    r̃_ij = (l⁻_j / u_ij, l⁻_j / m_ij, l⁻_j / l_ij),
                  l⁻_j = min positive l_ij
    3. Calculate weighted normalized: ṽ_ij = w̃_j ⊗ r̃_ij (componentwise)
    4. Determine Fuzzy Ideal Solutions on the benefit-oriented ṽ:
       - A* : componentwise max of column j
       - A⁻ : componentwise min of column j
    5. Calculate distances: d_i* = Σ d(ṽ_ij, ṽ_j*), d_i⁻ = Σ d(ṽ_ij, ṽ_j⁻)
    6. Closeness coefficient: CC_i = d_i⁻ / (d_i* + d_i⁻ + ε)

Reference:
    Chen, C.T. (2000). Extensions of the TOPSIS for group decision-making
    under fuzzy environment. Fuzzy Sets and Systems, 114(1), 1-9.
"""

from typing import List, Optional

import numpy as np
import pandas as pd

from .base import TriangularFuzzyNumber, fuzzy_array, parse_fuzzy_number
from .linguistic import LinguisticScale, get_scale
from ..base import RankingResult, rank_scores
from ...config import get_config
from ...exceptions import PreconditionError
from ...logger import get_module_logger
from ...validation import as_directions, check_size

logger = get_module_logger("mcdm.fuzzy.topsis")


def _to_tfns(arr: np.ndarray) -> List[List[TriangularFuzzyNumber]]:
    return [[TriangularFuzzyNumber(*(float(x) for x in cell)) for cell in row] for row in arr]


class FuzzyTOPSISResult(RankingResult):
    """
    Result container for Fuzzy TOPSIS calculation.

    ``scores`` are closeness coefficients; fuzzy intermediates are kept in
    ``details``.
    """

    @property
    def d_positive(self) -> np.ndarray:
        return self.details['d_positive']

    @property
    def d_negative(self) -> np.ndarray:
        return self.details['d_negative']

    @property
    def weighted_matrix(self) -> List[List[TriangularFuzzyNumber]]:
        return _to_tfns(self.details['weighted'])

    @property
    def fpis(self) -> List[TriangularFuzzyNumber]:
        return [TriangularFuzzyNumber(*map(float, c)) for c in self.details['fpis']]

    @property
    def fnis(self) -> List[TriangularFuzzyNumber]:
        return [TriangularFuzzyNumber(*map(float, c)) for c in self.details['fnis']]

    def top_n(self, n: int = 10) -> pd.DataFrame:
        df = self.to_frame().set_index('Alternative')
        df['D+'] = self.d_positive
        df['D-'] = self.d_negative
        return df.nsmallest(n, 'Rank')


class FuzzyTOPSIS:
    """
    Fuzzy TOPSIS calculator using Triangular Fuzzy Numbers.

    Parameters:
        scale: Linguistic scale used when the matrix or the weights contain
            terms such as "High" (defaults to the 5-term triangular scale).
        strict: Raise on unresolved linguistic terms instead of using the
            neutral value (defaults to ``Config.engine.strict``).

    Example:
        >>> calc = FuzzyTOPSIS()
        >>> result = calc.calculate([["H", "L"], ["M", "VH"]], [0.6, 0.4], ["max", "min"])
        >>> result.best
    """

    name = "FUZZY_TOPSIS"

    def __init__(self, scale: Optional[LinguisticScale] = None, strict: Optional[bool] = None):
        self.scale = get_scale(scale)
        self.strict = strict

    def _cell(self, value) -> TriangularFuzzyNumber:
        if isinstance(value, str):
            parsed = parse_fuzzy_number(value)
            if isinstance(parsed, TriangularFuzzyNumber):
                return parsed
            return self.scale.lookup(value, self.strict)
        return TriangularFuzzyNumber.coerce(value)

    def _fuzzy_matrix(self, matrix) -> tuple:
        if isinstance(matrix, pd.DataFrame):
            alternatives = [str(i) for i in matrix.index]
            rows = matrix.values.tolist()
        else:
            rows = [list(r) for r in matrix]
            alternatives = [f"A{i + 1}" for i in range(len(rows))]

        if len(rows) == 0 or len(rows[0]) == 0:
            raise PreconditionError("fuzzy matrix is empty")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise PreconditionError(
                    f"fuzzy matrix row {i} has {len(row)} criteria, expected {width} (row 0)"
                )
        check_size(len(rows), width)
        return fuzzy_array([[self._cell(c) for c in row] for row in rows]), alternatives

    def _fuzzy_weights(self, weights, n_criteria: int) -> np.ndarray:
        weights = list(weights.values) if isinstance(weights, pd.Series) else list(weights)
        if len(weights) != n_criteria:
            raise PreconditionError(
                f"weights length {len(weights)} does not match matrix criteria count {n_criteria}"
            )
        W = np.array([self._cell(w).as_tuple() for w in weights], dtype=float)
        if np.any(W < 0) or not np.all(np.isfinite(W)):
            raise PreconditionError("fuzzy weights must be finite and non-negative")
        return W

    @staticmethod
    def _normalize(F: np.ndarray, is_max: np.ndarray) -> np.ndarray:
        guard = get_config().engine.zero_guard
        R = np.zeros_like(F)
        for j in range(F.shape[1]):
            col = F[:, j, :]
            if is_max[j]:
                max_u = col[:, 2].max()
                if max_u != 0:
                    R[:, j, :] = col / max_u
            else:
                positive = col[:, 0][col[:, 0] > 0]
                min_l = positive.min() if positive.size else guard
                # (min/u, min/m, min/l), zero component -> 0
                rev = col[:, ::-1]
                nonzero = rev != 0
                R[:, j, :][nonzero] = min_l / rev[nonzero]
        return R

    def calculate(self, matrix, weights, directions=None) -> FuzzyTOPSISResult:
        """
        Rank alternatives from a fuzzy (or linguistic) decision matrix.

        Args:
            matrix: N x M cells, each a TFN, an (l, m, u) triple, a number, an
                "(l, m, u)" string or a linguistic term.
            weights: M crisp or fuzzy weights (crisp w becomes (w, w, w)).
            directions: ``max``/``min`` per criterion.

        Returns:
            FuzzyTOPSISResult
        """
        F, alternatives = self._fuzzy_matrix(matrix)
        n, m = F.shape[:2]
        W = self._fuzzy_weights(weights, m)
        dirs = as_directions(directions, m)
        is_max = np.array([d.is_max for d in dirs], dtype=bool)
        eps = get_config().engine.epsilon

        logger.debug(f"Fuzzy TOPSIS: {n} alternatives x {m} criteria")

        # Step 1-2: normalize
        R = self._normalize(F, is_max)

        # Step 3: weighting
        V = R * W[None, :, :]

        # Step 4: fuzzy ideal solutions
        fpis = V.max(axis=0)
        fnis = V.min(axis=0)

        # Step 5: distances, summed over criteria
        d_pos = (np.sqrt(((V - fpis) ** 2).sum(axis=2)) / np.sqrt(3)).sum(axis=1)
        d_neg = (np.sqrt(((V - fnis) ** 2).sum(axis=2)) / np.sqrt(3)).sum(axis=1)

        # Step 6: closeness coefficient
        cc = d_neg / (d_pos + d_neg + eps)

        return FuzzyTOPSISResult(
            method=self.name,
            scores=cc,
            ranks=rank_scores(cc),
            alternatives=alternatives,
            details={
                'normalized': R,
                'weighted': V,
                'fpis': fpis,
                'fnis': fnis,
                'd_positive': d_pos,
                'd_negative': d_neg,
                'fuzzy_weights': W,
            },
        )


def calculate_fuzzy_topsis(matrix, weights, directions=None,
                           scale: Optional[LinguisticScale] = None) -> FuzzyTOPSISResult:
    """Convenience function for Fuzzy TOPSIS."""
    return FuzzyTOPSIS(scale=scale).calculate(matrix, weights, directions)
