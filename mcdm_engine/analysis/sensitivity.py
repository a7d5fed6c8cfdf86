# -*- coding: utf-8 -*-
"""
Sensitivity Analysis
====================

Weight perturbation scenarios and ranking stability for MCDM methods.

Scenario families:
    oat         each criterion +50%, the increase taken from the others in
                proportion to their weights, renormalized
    percentage  each criterion -P% and +P% with the same redistribution,
                negatives clamped to 0, renormalized
    extreme     each criterion at 50% with the rest split equally, plus an
                equal-weights scenario

The first scenario is always the unperturbed base case.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from scipy.stats import spearmanr

from ..config import SensitivityType, get_config
from ..exceptions import PreconditionError
from ..logger import get_module_logger, log_context, timed_operation
from ..mcdm.base import RankingResult
from ..mcdm.dispatcher import calculate_mcdm, canonical_method_name
from ..types import Criterion
from ..validation import as_matrix, matrix_labels, split_criteria

logger = get_module_logger("analysis.sensitivity")

BASE_SCENARIO = "Base Case (Original)"


@dataclass
class Scenario:
    """One weight vector and the ranking it produces."""
    name: str
    weights: np.ndarray
    result: RankingResult
    changed_criterion: Optional[str] = None
    change_percent: Optional[float] = None

    @property
    def winner(self) -> str:
        return self.result.best

    @property
    def ranks(self) -> np.ndarray:
        return self.result.ranks


@dataclass
class StabilityReport:
    """Rank stability across a list of scenarios."""
    rank_ranges: pd.DataFrame               # per alternative: min, max, range
    critical_criteria: List[str]            # perturbations that change the winner
    original_winner: str
    rank_matrix: pd.DataFrame               # alternatives x scenarios

    @property
    def stable_alternatives(self) -> List[str]:
        return self.rank_ranges.index[self.rank_ranges['range'] == 0].tolist()

    @property
    def is_robust(self) -> bool:
        """True when no perturbation changes the top-ranked alternative."""
        return not self.critical_criteria

    def summary(self) -> str:
        n_scenarios = self.rank_matrix.shape[1] - 1
        lines = [
            f"\n{'='*60}",
            "SENSITIVITY ANALYSIS RESULTS",
            f"{'='*60}",
            f"\nScenarios (excluding base): {n_scenarios}",
            f"Original winner: {self.original_winner}",
            f"\n{'─'*30}",
            "RANK RANGES (0 = stable)",
            f"{'─'*30}",
        ]
        for alt, row in self.rank_ranges.iterrows():
            lines.append(f"  {alt}: {int(row['min'])}-{int(row['max'])} (range {int(row['range'])})")

        lines.extend([f"\n{'─'*30}", "CRITICAL CRITERIA", f"{'─'*30}"])
        if self.critical_criteria:
            for c in self.critical_criteria:
                lines.append(f"  {c}")
        else:
            lines.append(f"  none: {self.original_winner} stays first in every scenario")
        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Weight perturbation
# =============================================================================

def redistribute_weights(weights: Sequence[float], index: int, delta: float) -> np.ndarray:
    """
    Add ``delta`` to ``weights[index]`` and take it from the other weights
    in proportion to their share. The total is unchanged; nothing is clamped
    or renormalized here.
    """
    base = np.asarray(weights, dtype=float)
    new = base.copy()
    new[index] += delta
    others = base.sum() - base[index]
    if others > 0:
        mask = np.arange(len(base)) != index
        new[mask] -= base[mask] / others * delta
    return new


def normalize_weights(weights: Sequence[float]) -> np.ndarray:
    """Clamp negatives to 0 and scale to sum 1; an all-zero vector becomes equal weights."""
    w = np.maximum(np.asarray(weights, dtype=float), 0)
    total = w.sum()
    if total <= 0:
        return np.full(len(w), 1 / len(w))
    return w / total


class WeightPerturbation:
    """
    Systematic weight perturbation schemes.

    Each method returns ``(index, change_percent, weights)`` tuples; ``index``
    is None for scenarios that do not single out a criterion.
    """

    @staticmethod
    def one_at_a_time(weights: np.ndarray,
                      increase: float = 0.5) -> List[Tuple[Optional[int], float, np.ndarray]]:
        out = []
        for i in range(len(weights)):
            new = redistribute_weights(weights, i, weights[i] * increase)
            out.append((i, increase * 100, normalize_weights(new)))
        return out

    @staticmethod
    def percentage(weights: np.ndarray,
                   percent: float = 20.0) -> List[Tuple[Optional[int], float, np.ndarray]]:
        out = []
        for i in range(len(weights)):
            for change in (-percent, percent):
                new = redistribute_weights(weights, i, weights[i] * change / 100)
                out.append((i, change, normalize_weights(new)))
        return out

    @staticmethod
    def extreme(n_criteria: int,
                dominance: float = 0.5) -> List[Tuple[Optional[int], float, np.ndarray]]:
        out = []
        for i in range(n_criteria):
            if n_criteria == 1:
                w = np.ones(1)
            else:
                w = np.full(n_criteria, (1 - dominance) / (n_criteria - 1))
                w[i] = dominance
            out.append((i, dominance * 100, w))
        out.append((None, None, np.full(n_criteria, 1 / n_criteria)))
        return out


# =============================================================================
# Driver
# =============================================================================

def _analysis_type(value: Union[str, SensitivityType, None]) -> SensitivityType:
    if value is None:
        return get_config().sensitivity.default_type
    if isinstance(value, SensitivityType):
        return value
    try:
        return SensitivityType(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown sensitivity analysis type: {value}") from None


def _scenario_name(kind: SensitivityType, criterion: Optional[str], change: Optional[float]) -> str:
    if criterion is None:
        return "Equal Weights"
    if kind is SensitivityType.OAT:
        return f"Increase {criterion} (+{change:g}%)"
    if kind is SensitivityType.PERCENTAGE:
        return f"{criterion} {change:+g}%"
    return f"{criterion} Dominant ({change:g}%)"


class SensitivityAnalysis:
    """
    Weight sensitivity driver for any ranking method.

    Parameters
    ----------
    method : str
        Ranking method name or alias (see ``available_methods``).
    options : dict, optional
        Method options (``v``, ``lambda``, ``tau``).
    strict : bool, optional
        Passed to the dispatcher.
    """

    def __init__(self, method: str = "TOPSIS",
                 options: Optional[Mapping[str, Any]] = None,
                 strict: Optional[bool] = None):
        self.method = method
        self.options = dict(options or {})
        self.strict = strict

    def _rank(self, frame: pd.DataFrame, weights: np.ndarray, directions) -> RankingResult:
        return calculate_mcdm(self.method, frame, weights, directions,
                              options=self.options, strict=self.strict)

    def run(self,
            matrix,
            criteria: Sequence[Union[Criterion, Mapping]],
            analysis_type: Union[str, SensitivityType, None] = None,
            percentage: Optional[float] = None) -> List[Scenario]:
        """
        Generate scenarios and rank each one.

        Parameters
        ----------
        matrix : array-like or pd.DataFrame
            Decision matrix (alternatives x criteria).
        criteria : sequence of Criterion or dict
            ``{name, weight, direction}`` per column.
        analysis_type : str or SensitivityType
            ``oat``, ``percentage`` or ``extreme``.
        percentage : float, optional
            P for the percentage family (default 20).

        Returns
        -------
        list of Scenario
            Base case first.
        """
        kind = _analysis_type(analysis_type)
        cfg = get_config().sensitivity
        if percentage is None:
            percentage = cfg.percentage_change

        names, base_weights, directions = split_criteria(criteria)
        X = as_matrix(matrix)
        if X.shape[1] != len(names):
            raise PreconditionError(
                f"criteria count {len(names)} does not match matrix criteria count {X.shape[1]}"
            )
        alternatives, _ = matrix_labels(matrix)
        frame = pd.DataFrame(X, index=alternatives, columns=names)

        if kind is SensitivityType.OAT:
            plan = WeightPerturbation.one_at_a_time(base_weights, cfg.oat_increase)
        elif kind is SensitivityType.PERCENTAGE:
            plan = WeightPerturbation.percentage(base_weights, percentage)
        else:
            plan = WeightPerturbation.extreme(len(names), cfg.dominance)

        method = canonical_method_name(self.method)
        scenarios = []
        with log_context(method=method, analysis=kind.value), \
                timed_operation(logger, f"{kind.value} sensitivity ({len(plan) + 1} scenarios)"):
            scenarios.append(Scenario(BASE_SCENARIO, base_weights.copy(),
                                      self._rank(frame, base_weights, directions)))
            for index, change, weights in plan:
                criterion = names[index] if index is not None else None
                name = _scenario_name(kind, criterion, change)
                with log_context(scenario=name):
                    result = self._rank(frame, weights, directions)
                scenarios.append(Scenario(name, weights, result,
                                          changed_criterion=criterion,
                                          change_percent=change))
        logger.debug(f"Generated {len(scenarios)} scenarios")
        return scenarios

    def analyze(self, matrix, criteria, analysis_type=None,
                percentage: Optional[float] = None) -> Tuple[List[Scenario], StabilityReport]:
        """Run the scenarios and summarize their stability."""
        scenarios = self.run(matrix, criteria, analysis_type, percentage)
        return scenarios, stability_report(scenarios)


def stability_report(scenarios: Sequence[Scenario]) -> StabilityReport:
    """
    Summarize rank movement across scenarios.

    The first scenario is taken as the base case. A criterion is critical
    when a scenario perturbing it puts a different alternative first.
    """
    if not scenarios:
        raise ValueError("stability_report needs at least the base scenario")
    base = scenarios[0]
    alternatives = base.result.alternatives

    rank_matrix = pd.DataFrame(
        {s.name: s.result.ranks for s in scenarios}, index=alternatives
    )
    rank_ranges = pd.DataFrame({
        'min': rank_matrix.min(axis=1),
        'max': rank_matrix.max(axis=1),
    })
    rank_ranges['range'] = rank_ranges['max'] - rank_ranges['min']

    critical: List[str] = []
    for s in scenarios[1:]:
        if s.winner != base.winner and s.changed_criterion and s.changed_criterion not in critical:
            critical.append(s.changed_criterion)

    return StabilityReport(
        rank_ranges=rank_ranges,
        critical_criteria=critical,
        original_winner=base.winner,
        rank_matrix=rank_matrix,
    )


def rank_agreement(scenarios: Sequence[Scenario]) -> pd.Series:
    """Spearman correlation between each scenario's ranks and the base case."""
    base = scenarios[0].result.ranks
    values = {}
    for s in scenarios:
        if len(base) < 2:
            values[s.name] = 1.0
            continue
        rho, _ = spearmanr(base, s.result.ranks)
        values[s.name] = float(rho)
    return pd.Series(values, name='spearman_rho')


def run_sensitivity_analysis(matrix, criteria, method: str = "TOPSIS",
                             analysis_type: Union[str, SensitivityType, None] = None,
                             percentage: Optional[float] = None,
                             options: Optional[Mapping[str, Any]] = None) -> List[Scenario]:
    """Convenience function for sensitivity analysis."""
    return SensitivityAnalysis(method, options).run(matrix, criteria, analysis_type, percentage)
