# -*- coding: utf-8 -*-
"""
Fuzzy Number Base Classes
==========================

Triangular fuzzy numbers and the operations shared by every fuzzy method:
arithmetic, distance, defuzzification, parsing and aggregation.

Bound order
-----------
Results of arithmetic are returned exactly as computed and are never
re-sorted. Subtraction and division of well-formed operands keep
``l <= m <= u``, but other combinations (e.g. multiplying by a negative
scalar, dividing by a number that straddles zero) can produce ``l > u``.
``TriangularFuzzyNumber.is_well_formed`` reports this.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from ...config import DefuzzificationMethod, get_config

Number = Union[int, float]


@dataclass(frozen=True)
class TriangularFuzzyNumber:
    """
    Triangular fuzzy number (l, m, u).

    Attributes:
        l: Lower bound (minimum possible value)
        m: Modal value (most likely value)
        u: Upper bound (maximum possible value)
    """
    l: float
    m: float
    u: float

    @classmethod
    def from_crisp(cls, value: Number) -> 'TriangularFuzzyNumber':
        """Degenerate fuzzy number (x, x, x)."""
        value = float(value)
        return cls(value, value, value)

    @classmethod
    def coerce(cls, value) -> 'TriangularFuzzyNumber':
        """Accept a TFN, a number or an (l, m, u) sequence."""
        if isinstance(value, TriangularFuzzyNumber):
            return value
        if isinstance(value, (int, float, np.integer, np.floating)):
            return cls.from_crisp(value)
        l, m, u = (float(v) for v in value)
        return cls(l, m, u)

    def as_tuple(self) -> tuple:
        return (self.l, self.m, self.u)

    def __iter__(self):
        return iter(self.as_tuple())

    @property
    def is_well_formed(self) -> bool:
        return self.l <= self.m <= self.u

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other) -> 'TriangularFuzzyNumber':
        other = TriangularFuzzyNumber.coerce(other)
        return TriangularFuzzyNumber(self.l + other.l, self.m + other.m, self.u + other.u)

    __radd__ = __add__

    def __sub__(self, other) -> 'TriangularFuzzyNumber':
        other = TriangularFuzzyNumber.coerce(other)
        return TriangularFuzzyNumber(self.l - other.u, self.m - other.m, self.u - other.l)

    def __neg__(self) -> 'TriangularFuzzyNumber':
        return TriangularFuzzyNumber(-self.u, -self.m, -self.l)

    def __mul__(self, other) -> 'TriangularFuzzyNumber':
        # componentwise for fuzzy operands, plain scaling for scalars
        if isinstance(other, TriangularFuzzyNumber):
            return TriangularFuzzyNumber(self.l * other.l, self.m * other.m, self.u * other.u)
        k = float(other)
        return TriangularFuzzyNumber(self.l * k, self.m * k, self.u * k)

    __rmul__ = __mul__

    def __truediv__(self, other) -> 'TriangularFuzzyNumber':
        """(a.l / b.u, a.m / b.m, a.u / b.l); a zero divisor component gives 0."""
        other = TriangularFuzzyNumber.coerce(other)
        return TriangularFuzzyNumber(
            self.l / other.u if other.u != 0 else 0.0,
            self.m / other.m if other.m != 0 else 0.0,
            self.u / other.l if other.l != 0 else 0.0,
        )

    def distance(self, other) -> float:
        """Vertex distance: sqrt(Σ component diff²) / sqrt(3)."""
        other = TriangularFuzzyNumber.coerce(other)
        return float(np.sqrt(
            (self.l - other.l) ** 2 +
            (self.m - other.m) ** 2 +
            (self.u - other.u) ** 2
        ) / np.sqrt(3))

    def defuzzify(self, method: Union[str, DefuzzificationMethod, None] = None) -> float:
        return defuzzify(self, method)

    def __repr__(self) -> str:
        return f"TFN({self.l:.4f}, {self.m:.4f}, {self.u:.4f})"


TFN = TriangularFuzzyNumber


# =============================================================================
# Defuzzification
# =============================================================================

# Written as offsets from m so that a degenerate (x, x, x) returns x exactly.

def centroid(tfn: TriangularFuzzyNumber) -> float:
    """Centre of gravity: (l + m + u) / 3."""
    return tfn.m + ((tfn.l - tfn.m) + (tfn.u - tfn.m)) / 3


def graded_mean(tfn: TriangularFuzzyNumber) -> float:
    """Graded mean integration: (l + 4m + u) / 6."""
    return tfn.m + ((tfn.l - tfn.m) + (tfn.u - tfn.m)) / 6


def mean_of_maximum(tfn: TriangularFuzzyNumber) -> float:
    return tfn.m


def alpha_cut(tfn: TriangularFuzzyNumber, alpha: Optional[float] = None) -> float:
    """Midpoint of the alpha-cut interval (alpha defaults to 0.5)."""
    if alpha is None:
        alpha = get_config().fuzzy.alpha
    lower = tfn.l + alpha * (tfn.m - tfn.l)
    upper = tfn.u - alpha * (tfn.u - tfn.m)
    return (lower + upper) / 2


_DEFUZZIFIERS = {
    DefuzzificationMethod.CENTROID: centroid,
    DefuzzificationMethod.GRADED_MEAN: graded_mean,
    DefuzzificationMethod.MEAN_OF_MAXIMUM: mean_of_maximum,
    DefuzzificationMethod.ALPHA_CUT: alpha_cut,
}

_DEFUZZ_ALIASES = {
    'centroid': DefuzzificationMethod.CENTROID,
    'cog': DefuzzificationMethod.CENTROID,
    'center_of_gravity': DefuzzificationMethod.CENTROID,
    'graded_mean': DefuzzificationMethod.GRADED_MEAN,
    'gradedmean': DefuzzificationMethod.GRADED_MEAN,
    'gmi': DefuzzificationMethod.GRADED_MEAN,
    'mean_of_maximum': DefuzzificationMethod.MEAN_OF_MAXIMUM,
    'meanofmaximum': DefuzzificationMethod.MEAN_OF_MAXIMUM,
    'mom': DefuzzificationMethod.MEAN_OF_MAXIMUM,
    'alpha_cut': DefuzzificationMethod.ALPHA_CUT,
    'alphacut': DefuzzificationMethod.ALPHA_CUT,
}


def defuzzification_method(method: Union[str, DefuzzificationMethod, None]) -> DefuzzificationMethod:
    if method is None:
        return get_config().fuzzy.defuzzification
    if isinstance(method, DefuzzificationMethod):
        return method
    key = str(method).strip().lower().replace('-', '_').replace(' ', '_')
    if key not in _DEFUZZ_ALIASES:
        raise ValueError(f"Unknown defuzzification method: {method}")
    return _DEFUZZ_ALIASES[key]


def defuzzify(value, method: Union[str, DefuzzificationMethod, None] = None) -> float:
    """
    Convert a fuzzy number to a crisp value.

    Plain numbers are returned unchanged. ``method`` defaults to
    ``Config.fuzzy.defuzzification`` (centroid).
    """
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    return float(_DEFUZZIFIERS[defuzzification_method(method)](TriangularFuzzyNumber.coerce(value)))


# =============================================================================
# Parsing and matrices
# =============================================================================

_TFN_PATTERN = re.compile(
    r'[(\[]?\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)\s*[)\]]?'
)


def parse_fuzzy_number(value) -> Union[TriangularFuzzyNumber, float]:
    """
    Parse a cell into a TFN or a float.

    Accepts numbers, TFNs, (l, m, u) sequences and strings such as
    ``"(0.3, 0.5, 0.7)"`` or ``"[1,3,5]"``. Empty or unparsable input gives 0.
    """
    if isinstance(value, TriangularFuzzyNumber):
        return value
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    if isinstance(value, (list, tuple, np.ndarray)) and len(value) == 3:
        return TriangularFuzzyNumber.coerce(value)
    if not value:
        return 0.0

    text = str(value).strip()
    match = _TFN_PATTERN.search(text)
    if match:
        try:
            return TriangularFuzzyNumber(*(float(g) for g in match.groups()))
        except ValueError:
            pass
    try:
        return float(text)
    except ValueError:
        return 0.0


def is_fuzzy(value) -> bool:
    return isinstance(value, TriangularFuzzyNumber)


def to_fuzzy_matrix(matrix: Iterable[Iterable]) -> List[List[TriangularFuzzyNumber]]:
    """Coerce every cell (number, TFN, triple or string) to a TFN."""
    return [
        [TriangularFuzzyNumber.coerce(parse_fuzzy_number(cell)) for cell in row]
        for row in matrix
    ]


def fuzzy_array(matrix: Sequence[Sequence[TriangularFuzzyNumber]]) -> np.ndarray:
    """Stack a fuzzy matrix into an (N, M, 3) float array."""
    return np.array([[TriangularFuzzyNumber.coerce(c).as_tuple() for c in row] for row in matrix],
                    dtype=float)


def defuzzify_matrix(matrix, method: Union[str, DefuzzificationMethod, None] = None) -> np.ndarray:
    return np.array([[defuzzify(c, method) for c in row] for row in matrix], dtype=float)


# =============================================================================
# Aggregation
# =============================================================================

def arithmetic_mean(numbers: Sequence) -> TriangularFuzzyNumber:
    if len(numbers) == 0:
        return TriangularFuzzyNumber(0.0, 0.0, 0.0)
    arr = np.array([TriangularFuzzyNumber.coerce(n).as_tuple() for n in numbers])
    return TriangularFuzzyNumber(*(float(x) for x in arr.mean(axis=0)))


def geometric_mean(numbers: Sequence) -> TriangularFuzzyNumber:
    """Componentwise geometric mean; exact zeros are replaced by ``zero_guard``."""
    if len(numbers) == 0:
        return TriangularFuzzyNumber(0.0, 0.0, 0.0)
    guard = get_config().engine.zero_guard
    arr = np.array([TriangularFuzzyNumber.coerce(n).as_tuple() for n in numbers])
    arr = np.where(arr == 0, guard, arr)
    gm = np.prod(arr, axis=0) ** (1 / len(numbers))
    return TriangularFuzzyNumber(*(float(x) for x in gm))


def weighted_average(numbers: Sequence, weights: Sequence[float]) -> TriangularFuzzyNumber:
    arr = np.array([TriangularFuzzyNumber.coerce(n).as_tuple() for n in numbers])
    w = np.asarray(weights, dtype=float)
    total = w.sum() or 1
    avg = (arr * w[:, None]).sum(axis=0) / total
    return TriangularFuzzyNumber(*(float(x) for x in avg))
