# -*- coding: utf-8 -*-
"""
Fuzzification: turn a crisp value into a triangular fuzzy number.

    spread          (x - |x|·s, x, x + |x|·s)
    bounds          (x - a, x, x + b)
    scale_relative  spread is a share of the scale width, clamped to the scale
    gaussian        (x - kσ, x, x + kσ), k = n_sigma
    linguistic      fuzzy value of the nearest term in a scale
"""

from typing import Optional

from .base import TriangularFuzzyNumber
from .linguistic import LinguisticScale, get_scale
from ...config import get_config


def fuzzify_spread(x: float, spread: Optional[float] = None) -> TriangularFuzzyNumber:
    """Symmetric spread as a fraction of |x|; a zero spread gives (x, x, x)."""
    if spread is None:
        spread = get_config().fuzzy.default_spread
    if spread < 0:
        raise ValueError("spread must be non-negative")
    x = float(x)
    d = abs(x) * spread
    return TriangularFuzzyNumber(x - d, x, x + d)


def fuzzify_bounds(x: float, lower_delta: float, upper_delta: Optional[float] = None) -> TriangularFuzzyNumber:
    if upper_delta is None:
        upper_delta = lower_delta
    x = float(x)
    return TriangularFuzzyNumber(x - lower_delta, x, x + upper_delta)


def fuzzify_scale_relative(x: float, scale_min: float = 0.0, scale_max: float = 1.0,
                           ratio: Optional[float] = None) -> TriangularFuzzyNumber:
    """Spread of ``ratio`` x (scale_max - scale_min), bounds clamped to the scale."""
    if scale_max < scale_min:
        raise ValueError("scale_max must not be below scale_min")
    if ratio is None:
        ratio = get_config().fuzzy.default_spread
    x = float(x)
    d = (scale_max - scale_min) * ratio
    return TriangularFuzzyNumber(max(scale_min, x - d), x, min(scale_max, x + d))


def fuzzify_gaussian(x: float, sigma: float, n_sigma: Optional[float] = None) -> TriangularFuzzyNumber:
    """Triangle covering ±n_sigma standard deviations (default 2)."""
    if n_sigma is None:
        n_sigma = get_config().fuzzy.gaussian_n_sigma
    x = float(x)
    d = abs(sigma) * n_sigma
    return TriangularFuzzyNumber(x - d, x, x + d)


def fuzzify_linguistic(x: float, scale: Optional[LinguisticScale] = None) -> TriangularFuzzyNumber:
    return get_scale(scale).nearest(float(x)).fuzzy_value


_FUZZIFIERS = {
    'spread': fuzzify_spread,
    'percentage': fuzzify_spread,
    'bounds': fuzzify_bounds,
    'absolute': fuzzify_bounds,
    'scale_relative': fuzzify_scale_relative,
    'gaussian': fuzzify_gaussian,
    'linguistic': fuzzify_linguistic,
}


def fuzzify(x: float, method: str = 'spread', **params) -> TriangularFuzzyNumber:
    """Fuzzify ``x`` with the named method; ``params`` go to that method."""
    key = str(method).strip().lower().replace('-', '_')
    if key not in _FUZZIFIERS:
        raise ValueError(f"Unknown fuzzification method: {method}")
    return _FUZZIFIERS[key](x, **params)
