# -*- coding: utf-8 -*-
"""
Expert aggregation.

Combines several experts' evaluations cell by cell into one decision matrix
(geometric or arithmetic mean), and derives criterion weights from an
experts x criteria table of linguistic or numeric importance ratings.
"""

from typing import List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .config import AggregationMethod, get_config
from .exceptions import PreconditionError
from .logger import get_module_logger
from .mcdm.fuzzy.base import TriangularFuzzyNumber, fuzzy_array
from .mcdm.fuzzy.linguistic import LinguisticScale, get_scale

logger = get_module_logger("aggregation")


def _aggregation_method(method: Union[str, AggregationMethod]) -> AggregationMethod:
    if isinstance(method, AggregationMethod):
        return method
    try:
        return AggregationMethod(str(method).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown aggregation method: {method}") from None


def _as_array(matrix) -> tuple:
    """Return ``(array, is_fuzzy)``; fuzzy matrices become (N, M, 3)."""
    if isinstance(matrix, pd.DataFrame):
        matrix = matrix.values.tolist()
    try:
        arr = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError):
        rows = [list(r) for r in matrix]
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise PreconditionError(f"expert matrix is ragged (row widths {sorted(widths)})")
        return fuzzy_array(rows), True
    if arr.ndim == 2:
        return arr, False
    if arr.ndim == 3 and arr.shape[2] == 3:
        return arr, True
    raise PreconditionError(f"expert matrix must be 2-D, got shape {arr.shape}")


def _combine(stack: np.ndarray, method: AggregationMethod) -> np.ndarray:
    if method is AggregationMethod.ARITHMETIC:
        return stack.mean(axis=0)
    guard = get_config().engine.zero_guard
    stack = np.where(stack == 0, guard, stack)
    return np.prod(stack, axis=0) ** (1 / stack.shape[0])


def aggregate_matrices(expert_matrices: Sequence,
                       method: Union[str, AggregationMethod] = AggregationMethod.GEOMETRIC):
    """
    Aggregate expert matrices cell by cell.

    Parameters
    ----------
    expert_matrices : sequence
        One matrix per expert: crisp (N x M numbers) or fuzzy (N x M TFNs
        or (l, m, u) triples). All must share the same shape.
    method : str or AggregationMethod
        ``geometric`` (exact zeros replaced by ``zero_guard``) or
        ``arithmetic``.

    Returns
    -------
    np.ndarray or list of list of TriangularFuzzyNumber
        Same kind as the inputs.

    Raises
    ------
    PreconditionError
        No experts, or an expert matrix whose shape differs from expert 0.
    """
    method = _aggregation_method(method)
    if len(expert_matrices) == 0:
        raise PreconditionError("at least one expert matrix is required")

    arrays: List[np.ndarray] = []
    fuzzy_flags: List[bool] = []
    for matrix in expert_matrices:
        arr, is_fuzzy = _as_array(matrix)
        arrays.append(arr)
        fuzzy_flags.append(is_fuzzy)

    is_fuzzy = any(fuzzy_flags)
    if is_fuzzy:
        # crisp experts mixed with fuzzy ones count as (x, x, x)
        arrays = [a if a.ndim == 3 else np.repeat(a[:, :, None], 3, axis=2) for a in arrays]

    base_shape = arrays[0].shape
    for k, arr in enumerate(arrays[1:], start=1):
        if arr.shape != base_shape:
            raise PreconditionError(
                f"expert matrix {k} has shape {arr.shape[:2]}, "
                f"expected {base_shape[:2]} (shape of expert 0)"
            )

    combined = _combine(np.stack(arrays), method)
    logger.debug(f"Aggregated {len(arrays)} expert matrices of shape {base_shape[:2]} "
                 f"({method.value})")

    if is_fuzzy:
        return [[TriangularFuzzyNumber(*(float(x) for x in cell)) for cell in row]
                for row in combined]
    return combined


def derive_expert_weights(expert_ratings,
                          scale: Optional[Union[LinguisticScale, str, Sequence]] = None,
                          criteria: Optional[Sequence[str]] = None,
                          strict: Optional[bool] = None) -> pd.Series:
    """
    Turn an experts x criteria importance table into normalized weights.

    Each rating (term such as "High"/"VH", or a number) is mapped to its
    crisp value on ``scale``; each criterion's ratings are combined by
    geometric mean and the results are normalized to sum to 1.

    Parameters
    ----------
    expert_ratings : pd.DataFrame or sequence of rows
        One row per expert, one column per criterion. DataFrame columns
        name the criteria.
    scale : LinguisticScale, str or records, optional
        Defaults to the 5-term triangular scale.
    criteria : sequence of str, optional
        Criterion names (override DataFrame columns).
    strict : bool, optional
        Raise on unknown terms instead of using the neutral crisp value.

    Returns
    -------
    pd.Series
        Weights indexed by criterion name.
    """
    scale = get_scale(scale)
    if isinstance(expert_ratings, pd.DataFrame):
        names = [str(c) for c in expert_ratings.columns]
        rows = expert_ratings.values.tolist()
    else:
        rows = [list(r) for r in expert_ratings]
        names = [f"C{j + 1}" for j in range(len(rows[0]))] if rows else []
    if criteria is not None:
        names = list(criteria)

    if len(rows) == 0 or len(rows[0]) == 0:
        raise PreconditionError("expert rating table is empty")
    for i, row in enumerate(rows):
        if len(row) != len(names):
            raise PreconditionError(
                f"expert {i} rated {len(row)} criteria, expected {len(names)}"
            )

    neutral = get_config().fuzzy.neutral_crisp
    crisp = np.array([
        [neutral if cell is None or cell == '' else scale.crisp_lookup(cell, strict) for cell in row]
        for row in rows
    ], dtype=float)

    aggregated = _combine(crisp, AggregationMethod.GEOMETRIC)
    total = aggregated.sum() or 1
    weights = pd.Series(aggregated / total, index=names, name='weight')
    logger.debug(f"Derived weights from {len(rows)} experts: {weights.round(4).to_dict()}")
    return weights
