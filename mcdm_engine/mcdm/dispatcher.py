# -*- coding: utf-8 -*-
"""
Method dispatcher: resolve a method name or alias to a calculator and run it.

Unknown names fall back to TOPSIS with a WARNING (the result is flagged
with ``details['fallback'] = True``), or raise ``UnknownMethodError`` in
strict mode.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from .base import MCDMCalculator, RankingResult
from .traditional import (
    SAWCalculator, WPMCalculator, TOPSISCalculator, VIKORCalculator,
    MOORACalculator, WASPASCalculator, COPRASCalculator, EDASCalculator,
    CODASCalculator, ARASCalculator,
)
from ..config import get_config
from ..exceptions import UnknownMethodError
from ..logger import get_module_logger, log_execution

logger = get_module_logger("mcdm.dispatcher")


def _option(options: Mapping[str, Any], *keys: str) -> Optional[float]:
    for key in keys:
        if key in options and options[key] is not None:
            return float(options[key])
    return None


_REGISTRY: Dict[str, Callable[[Mapping[str, Any]], MCDMCalculator]] = {
    'SAW': lambda o: SAWCalculator(),
    'WPM': lambda o: WPMCalculator(),
    'TOPSIS': lambda o: TOPSISCalculator(),
    'VIKOR': lambda o: VIKORCalculator(v=_option(o, 'v')),
    'MOORA': lambda o: MOORACalculator(),
    'WASPAS': lambda o: WASPASCalculator(lam=_option(o, 'lambda', 'lam')),
    'COPRAS': lambda o: COPRASCalculator(),
    'EDAS': lambda o: EDASCalculator(),
    'CODAS': lambda o: CODASCalculator(tau=_option(o, 'tau')),
    'ARAS': lambda o: ARASCalculator(),
}

_ALIASES = {
    'WSM': 'SAW',
    'WEIGHTEDSUM': 'SAW',
    'SIMPLEADDITIVEWEIGHTING': 'SAW',
    'WEIGHTEDPRODUCT': 'WPM',
    'MULTIMOORA': 'MOORA',
}


def canonical_method_name(name: str) -> str:
    """
    Normalize a method string: uppercase, drop ``-``, ``_`` and spaces,
    then map aliases (``WSM`` -> ``SAW`` ...).

    The result may still be unknown; check it against ``available_methods``.
    """
    key = str(name or '').upper()
    for sep in ('-', '_', ' '):
        key = key.replace(sep, '')
    return _ALIASES.get(key, key)


def available_methods() -> List[str]:
    return list(_REGISTRY)


def get_calculator(method: str, options: Optional[Mapping[str, Any]] = None,
                   strict: Optional[bool] = None) -> MCDMCalculator:
    """Build the calculator for ``method`` (see ``calculate_mcdm`` for fallback rules)."""
    options = options or {}
    if strict is None:
        strict = get_config().engine.strict

    canonical = canonical_method_name(method)
    if canonical not in _REGISTRY:
        if strict:
            raise UnknownMethodError(method, available_methods())
        fallback = get_config().engine.default_method
        logger.warning(f"Unknown MCDM method: {method!r}, defaulting to {fallback}")
        canonical = fallback
    return _REGISTRY[canonical](options)


@log_execution(logger)
def calculate_mcdm(method: str, matrix, weights, directions=None,
                   options: Optional[Mapping[str, Any]] = None,
                   strict: Optional[bool] = None) -> RankingResult:
    """
    Run a ranking method by name.

    Parameters
    ----------
    method : str
        Method name or alias (``"topsis"``, ``"WSM"``, ``"multi-moora"`` ...).
    matrix, weights, directions
        Decision problem, as accepted by every calculator.
    options : dict, optional
        ``v`` (VIKOR), ``lambda``/``lam`` (WASPAS), ``tau`` (CODAS). Missing
        keys use ``Config.methods``.
    strict : bool, optional
        Raise ``UnknownMethodError`` instead of falling back to TOPSIS.
        Defaults to ``Config.engine.strict``.

    Returns
    -------
    RankingResult
    """
    calculator = get_calculator(method, options, strict)
    result = calculator.calculate(matrix, weights, directions)
    if canonical_method_name(method) not in _REGISTRY:
        result.details['fallback'] = True
        result.details['requested'] = method
    return result


def detect_method(analysis: Mapping[str, Any]) -> str:
    """
    Infer the ranking method from an extraction payload.

    Looks for a known method name inside ``analysis['method']``, then at
    ``analysis['logicModule']['aggregation']`` (distance -> TOPSIS, weighted
    sum -> SAW). Defaults to TOPSIS.
    """
    method_str = str(analysis.get('method') or '').upper()
    logic = analysis.get('logicModule') or {}
    aggregation = str(logic.get('aggregation') or '').upper()

    for name in ('TOPSIS', 'VIKOR', 'MOORA', 'WASPAS', 'COPRAS', 'EDAS',
                 'CODAS', 'ARAS', 'SAW', 'WSM', 'WPM'):
        if name in method_str:
            return canonical_method_name(name)

    if 'DISTANCE' in aggregation:
        return 'TOPSIS'
    if 'WEIGHTED' in aggregation and 'SUM' in aggregation:
        return 'SAW'
    return get_config().engine.default_method
