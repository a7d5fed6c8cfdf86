# -*- coding: utf-8 -*-
"""
Analysis pipeline: payload in, ranking (and optional sensitivity study) out.

Phases
------
1. Load and classify the payload (``DataLoader``)
2. Resolve the ranking method (explicit, or detected from the payload)
3. Rank: Fuzzy TOPSIS for fuzzy/linguistic TOPSIS problems, otherwise the
   crisp dispatcher on the defuzzified matrix
4. Weight sensitivity scenarios and stability report (optional)
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import pandas as pd

from .analysis.sensitivity import Scenario, SensitivityAnalysis, StabilityReport
from .config import Config, SensitivityType, get_config
from .data_loader import DataLoader, DecisionProblem
from .logger import get_module_logger, log_context, timed_operation
from .mcdm.base import RankingResult
from .mcdm.dispatcher import calculate_mcdm, canonical_method_name, detect_method
from .mcdm.fuzzy.topsis import FuzzyTOPSIS

logger = get_module_logger("pipeline")

FUZZY_TOPSIS_NAMES = {'FUZZYTOPSIS', 'FTOPSIS'}


# =========================================================================
# Result container
# =========================================================================

@dataclass
class AnalysisResult:
    """Container for one analysis run."""
    problem: DecisionProblem
    method: str
    result: RankingResult
    scenarios: Optional[List[Scenario]] = None
    stability: Optional[StabilityReport] = None
    execution_time: float = 0.0

    @property
    def ranking_table(self) -> pd.DataFrame:
        """``Alternative, Score, Rank`` in input order."""
        return self.result.to_frame()

    @property
    def best(self) -> str:
        return self.result.best

    def get_final_ranking_df(self) -> pd.DataFrame:
        """Ranking table sorted by rank."""
        return self.ranking_table.sort_values('Rank', kind='stable').reset_index(drop=True)

    def summary(self) -> str:
        lines = [self.result.summary()]
        if self.stability is not None:
            lines.append(self.stability.summary())
        lines.append(f"Completed in {self.execution_time:.3f}s")
        return "\n".join(lines)


# =========================================================================
# Pipeline
# =========================================================================

class AnalysisPipeline:
    """
    Ranking pipeline for extraction-shaped payloads.

    Parameters
    ----------
    config : Config, optional
        Defaults to the global configuration.
    strict : bool, optional
        Raise on unknown methods and unresolved linguistic terms instead of
        falling back. Defaults to ``config.engine.strict``.
    """

    def __init__(self, config: Optional[Config] = None, strict: Optional[bool] = None):
        self.config = config or get_config()
        self.strict = self.config.engine.strict if strict is None else strict
        self.logger = logger

    def run(self,
            payload: Union[Mapping[str, Any], str, Path],
            method: Optional[str] = None,
            options: Optional[Mapping[str, Any]] = None,
            sensitivity: Union[str, SensitivityType, None] = None,
            percentage: Optional[float] = None) -> AnalysisResult:
        """
        Execute the pipeline.

        Parameters
        ----------
        payload : mapping, str or Path
            Payload mapping or path to a JSON file.
        method : str, optional
            Overrides the method named in the payload.
        options : dict, optional
            Method options (``v``, ``lambda``, ``tau``).
        sensitivity : str or SensitivityType, optional
            Run ``oat``, ``percentage`` or ``extreme`` scenarios as well.
        percentage : float, optional
            P for the percentage family.
        """
        start_time = time.time()

        # Phase 1: Data Loading
        problem = DataLoader(self.config).load(payload)

        # Phase 2: Method
        requested = method or detect_method(problem.source)
        canonical = canonical_method_name(requested)
        use_fuzzy = canonical in FUZZY_TOPSIS_NAMES or (canonical == 'TOPSIS' and problem.is_fuzzy)
        label = FuzzyTOPSIS.name if use_fuzzy else canonical

        with log_context(method=label):
            self.logger.info(f"Ranking {problem.summary()} with {label}")

            # Phase 3: Ranking
            with timed_operation(self.logger, f"{label} ranking"):
                if use_fuzzy:
                    result = self._rank_fuzzy(problem)
                else:
                    if problem.is_fuzzy:
                        self.logger.info(f"{canonical} is crisp: defuzzifying "
                                         f"({self.config.fuzzy.defuzzification.value})")
                    result = calculate_mcdm(requested, self._crisp(problem), problem.weights,
                                            problem.directions, options=options,
                                            strict=self.strict)

            # Phase 4: Sensitivity
            scenarios, stability = None, None
            if sensitivity is not None:
                sensitivity_method = 'TOPSIS' if use_fuzzy else requested
                scenarios, stability = SensitivityAnalysis(
                    sensitivity_method, options, self.strict
                ).analyze(self._crisp(problem), problem.criteria, sensitivity, percentage)

        execution_time = time.time() - start_time
        self.logger.info(f"Best alternative: {result.best} ({execution_time:.3f}s)")

        return AnalysisResult(
            problem=problem,
            method=result.method,
            result=result,
            scenarios=scenarios,
            stability=stability,
            execution_time=execution_time,
        )

    def _crisp(self, problem: DecisionProblem) -> pd.DataFrame:
        return problem.crisp_matrix(self.config.fuzzy.defuzzification, self.strict)

    def _rank_fuzzy(self, problem: DecisionProblem) -> RankingResult:
        frame = pd.DataFrame(problem.fuzzy_matrix(self.strict), index=problem.alternatives,
                             columns=problem.criterion_names, dtype=object)
        return FuzzyTOPSIS(scale=problem.scale, strict=self.strict).calculate(
            frame, problem.weights, problem.directions)


def run_analysis(payload: Union[Mapping[str, Any], str, Path],
                 method: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 strict: Optional[bool] = None,
                 sensitivity: Union[str, SensitivityType, None] = None,
                 percentage: Optional[float] = None,
                 config: Optional[Config] = None) -> AnalysisResult:
    """Convenience function to run the analysis pipeline."""
    return AnalysisPipeline(config, strict).run(payload, method, options, sensitivity, percentage)
