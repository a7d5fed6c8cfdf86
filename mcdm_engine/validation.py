# -*- coding: utf-8 -*-
"""
Input validation and coercion for decision problems.

Every public calculator funnels its arguments through ``check_problem`` so
that dimension errors surface as ``PreconditionError`` before any arithmetic
runs, and so that callers' arrays are never modified in place.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .config import get_config
from .exceptions import PreconditionError
from .types import Criterion, Direction


MatrixLike = Union[np.ndarray, pd.DataFrame, Sequence[Sequence[float]]]
WeightsLike = Union[np.ndarray, pd.Series, Sequence[float], Mapping[str, float]]
DirectionsLike = Union[Sequence[Union[Direction, str]], Mapping[str, Union[Direction, str]], None]


@dataclass
class Problem:
    """A validated, homogeneous crisp decision problem."""
    matrix: np.ndarray
    weights: np.ndarray
    directions: List[Direction]
    alternatives: List[str]
    criteria: List[str]

    @property
    def shape(self):
        return self.matrix.shape

    @property
    def is_max(self) -> np.ndarray:
        return np.array([d.is_max for d in self.directions], dtype=bool)


def _check_rectangular(rows: Sequence[Sequence], what: str = "matrix") -> None:
    if len(rows) == 0:
        raise PreconditionError(f"{what} is empty: at least one alternative is required")
    widths = [len(r) for r in rows]
    if widths[0] == 0:
        raise PreconditionError(f"{what} is empty: at least one criterion is required")
    for i, width in enumerate(widths):
        if width != widths[0]:
            raise PreconditionError(
                f"{what} row {i} has {width} criteria, expected {widths[0]} (row 0)"
            )


def check_size(n_rows: int, n_cols: int, max_cells: Optional[int] = None) -> None:
    """Reject matrices larger than the configured cell budget."""
    limit = max_cells if max_cells is not None else get_config().engine.max_cells
    if n_rows * n_cols > limit:
        raise PreconditionError(
            f"matrix of {n_rows} x {n_cols} = {n_rows * n_cols} cells exceeds "
            f"the limit of {limit} cells"
        )


def matrix_labels(matrix: MatrixLike) -> tuple:
    """Return ``(alternatives, criteria)`` names, generating A1.., C1.. as needed."""
    if isinstance(matrix, pd.DataFrame):
        return [str(i) for i in matrix.index], [str(c) for c in matrix.columns]
    n_rows = len(matrix)
    n_cols = len(matrix[0]) if n_rows else 0
    return ([f"A{i + 1}" for i in range(n_rows)],
            [f"C{j + 1}" for j in range(n_cols)])


def as_matrix(matrix: MatrixLike, max_cells: Optional[int] = None) -> np.ndarray:
    """
    Coerce a decision matrix into a fresh 2-D float array.

    Parameters
    ----------
    matrix : array-like or pd.DataFrame
        Alternatives x criteria values.
    max_cells : int, optional
        Size bound (defaults to ``Config.engine.max_cells``).

    Raises
    ------
    PreconditionError
        Empty, ragged, non-2-D, non-numeric, non-finite or oversize input.
    """
    if isinstance(matrix, pd.DataFrame):
        values = matrix.to_numpy()
        if values.size == 0:
            raise PreconditionError("matrix is empty")
    elif isinstance(matrix, np.ndarray):
        values = matrix
        if values.ndim != 2:
            raise PreconditionError(f"matrix must be 2-D, got {values.ndim} dimension(s)")
        if values.size == 0:
            raise PreconditionError("matrix is empty")
    else:
        rows = list(matrix)
        _check_rectangular([list(r) for r in rows])
        values = rows

    try:
        X = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise PreconditionError(f"matrix contains non-numeric cells: {e}") from e

    if X.ndim != 2:
        raise PreconditionError(f"matrix must be 2-D, got {X.ndim} dimension(s)")
    check_size(*X.shape, max_cells=max_cells)
    if not np.all(np.isfinite(X)):
        bad = np.argwhere(~np.isfinite(X))[0]
        raise PreconditionError(f"matrix cell ({bad[0]}, {bad[1]}) is not finite")
    return X


def as_weights(weights: WeightsLike, n_criteria: int,
               criteria: Optional[List[str]] = None) -> np.ndarray:
    """Coerce weights to a float vector of length ``n_criteria``."""
    if isinstance(weights, Mapping) and not isinstance(weights, pd.Series):
        if criteria is None:
            raise PreconditionError("weights given by name require named criteria")
        missing = [c for c in criteria if c not in weights]
        if missing:
            raise PreconditionError(f"weights missing for criteria: {missing}")
        w = np.array([weights[c] for c in criteria], dtype=float)
    elif isinstance(weights, pd.Series) and criteria is not None and set(criteria) <= set(map(str, weights.index)):
        w = np.array([weights[c] for c in criteria], dtype=float)
    else:
        w = np.array(list(weights), dtype=float).ravel()

    if w.shape[0] != n_criteria:
        raise PreconditionError(
            f"weights length {w.shape[0]} does not match matrix criteria count {n_criteria}"
        )
    if not np.all(np.isfinite(w)):
        raise PreconditionError("weights must be finite")
    if np.any(w < 0):
        raise PreconditionError(f"weights must be non-negative, got {w.tolist()}")
    return w


def as_directions(directions: DirectionsLike, n_criteria: int,
                  criteria: Optional[List[str]] = None) -> List[Direction]:
    """Coerce directions; ``None`` means every criterion is maximized."""
    if directions is None:
        return [Direction.MAX] * n_criteria
    if isinstance(directions, (str, Direction)):
        return [Direction.parse(directions)] * n_criteria
    if isinstance(directions, Mapping):
        if criteria is None:
            raise PreconditionError("directions given by name require named criteria")
        return [Direction.parse(directions.get(c, Direction.MAX)) for c in criteria]

    dirs = list(directions)
    if len(dirs) != n_criteria:
        raise PreconditionError(
            f"directions length {len(dirs)} does not match matrix criteria count {n_criteria}"
        )
    try:
        return [Direction.parse(d) for d in dirs]
    except ValueError as e:
        raise PreconditionError(str(e)) from e


def check_problem(matrix: MatrixLike,
                  weights: WeightsLike,
                  directions: DirectionsLike = None,
                  max_cells: Optional[int] = None) -> Problem:
    """Validate a full crisp decision problem."""
    X = as_matrix(matrix, max_cells=max_cells)
    alternatives, criteria = matrix_labels(matrix)
    w = as_weights(weights, X.shape[1], criteria)
    dirs = as_directions(directions, X.shape[1], criteria)
    return Problem(matrix=X, weights=w, directions=dirs,
                   alternatives=alternatives, criteria=criteria)


def split_criteria(criteria: Sequence[Union[Criterion, Mapping]]) -> tuple:
    """Split a criteria list into ``(names, weights, directions)``."""
    if len(criteria) == 0:
        raise PreconditionError("criteria list is empty")
    parsed = [c if isinstance(c, Criterion) else Criterion.from_dict(c) for c in criteria]
    names = [c.name or f"C{j + 1}" for j, c in enumerate(parsed)]
    weights = np.array([c.weight for c in parsed], dtype=float)
    return names, weights, [c.direction for c in parsed]


def weights_to_dict(weights: np.ndarray, criteria: List[str]) -> Dict[str, float]:
    return {c: float(w) for c, w in zip(criteria, weights)}
