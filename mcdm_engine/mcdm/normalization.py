# -*- coding: utf-8 -*-
"""
Decision-matrix normalization.

All functions take an (N x M) float matrix and a per-column boolean mask
``is_max`` and return a new matrix of the same shape. Degenerate columns
never produce NaN or infinity:

- vector:      x / sqrt(sum x^2)           zero norm    -> denominator 1
- linear_max:  x / max  |  min / x         zero max     -> denominator 1,
                                           zero cell in a min column -> 0
- min_max:     (x - min) / range           zero range   -> denominator 1
- sum:         x / sum                     zero sum     -> denominator 1
"""

from typing import Sequence, Union

import numpy as np

from ..config import NormalizationType, get_config
from ..types import Direction


def _mask(directions: Union[np.ndarray, Sequence], n_cols: int) -> np.ndarray:
    if directions is None:
        return np.ones(n_cols, dtype=bool)
    mask = np.array([
        d if isinstance(d, (bool, np.bool_)) else Direction.parse(d).is_max
        for d in directions
    ], dtype=bool)
    if mask.shape[0] != n_cols:
        raise ValueError(f"directions length {mask.shape[0]} does not match {n_cols} columns")
    return mask


def vector(matrix: np.ndarray, directions=None) -> np.ndarray:
    """Euclidean (vector) normalization. Direction is applied later by the caller."""
    X = np.asarray(matrix, dtype=float)
    norm = np.sqrt((X ** 2).sum(axis=0))
    norm[norm == 0] = 1
    return X / norm


def linear_max(matrix: np.ndarray, directions=None) -> np.ndarray:
    """
    Linear (max) normalization.

    Maximize columns are divided by the column maximum. Minimize columns map
    each cell to ``min / x`` where ``min`` is the smallest strictly positive
    value in the column (0.001 if none is positive).
    """
    X = np.asarray(matrix, dtype=float)
    is_max = _mask(directions, X.shape[1])
    guard = get_config().engine.zero_guard
    out = np.zeros_like(X)

    for j in range(X.shape[1]):
        col = X[:, j]
        if is_max[j]:
            col_max = col.max()
            out[:, j] = col / (col_max if col_max != 0 else 1)
        else:
            positive = col[col > 0]
            col_min = positive.min() if positive.size else guard
            nonzero = col != 0
            out[nonzero, j] = col_min / col[nonzero]
    return out


def min_max(matrix: np.ndarray, directions=None) -> np.ndarray:
    """Min-max normalization, reversed for minimize columns."""
    X = np.asarray(matrix, dtype=float)
    is_max = _mask(directions, X.shape[1])
    col_min = X.min(axis=0)
    col_max = X.max(axis=0)
    rng = col_max - col_min
    rng[rng == 0] = 1
    return np.where(is_max, (X - col_min) / rng, (col_max - X) / rng)


def sum_norm(matrix: np.ndarray, directions=None) -> np.ndarray:
    """Divide each cell by its column sum."""
    X = np.asarray(matrix, dtype=float)
    total = X.sum(axis=0)
    total[total == 0] = 1
    return X / total


_ALIASES = {
    'vector': NormalizationType.VECTOR,
    'euclidean': NormalizationType.VECTOR,
    'linear_max': NormalizationType.LINEAR_MAX,
    'linearmax': NormalizationType.LINEAR_MAX,
    'linear': NormalizationType.LINEAR_MAX,
    'max': NormalizationType.LINEAR_MAX,
    'min_max': NormalizationType.MIN_MAX,
    'minmax': NormalizationType.MIN_MAX,
    'sum': NormalizationType.SUM,
}

_FUNCTIONS = {
    NormalizationType.VECTOR: vector,
    NormalizationType.LINEAR_MAX: linear_max,
    NormalizationType.MIN_MAX: min_max,
    NormalizationType.SUM: sum_norm,
}


def normalize(matrix: np.ndarray, directions=None,
              method: Union[str, NormalizationType] = NormalizationType.VECTOR) -> np.ndarray:
    """
    Normalize a decision matrix with the named method.

    Parameters
    ----------
    matrix : np.ndarray
        Decision matrix (alternatives x criteria).
    directions : sequence, optional
        Direction members, ``'max'/'min'`` strings or booleans (True = max).
    method : str or NormalizationType
        ``vector``, ``linear_max``, ``min_max`` or ``sum``.
    """
    if not isinstance(method, NormalizationType):
        key = str(method).strip().lower().replace('-', '_')
        if key not in _ALIASES:
            raise ValueError(f"Unknown normalization: {method}")
        method = _ALIASES[key]
    return _FUNCTIONS[method](matrix, directions)
