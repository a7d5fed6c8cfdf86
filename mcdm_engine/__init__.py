# -*- coding: utf-8 -*-
"""
MCDM Engine: Multi-Criteria Decision Making Ranking & Normalization
===================================================================

Ranks alternatives from a decision matrix, a weight vector and criteria
directions, with crisp and fuzzy methods, expert aggregation and weight
sensitivity analysis.

Package Structure
-----------------
mcdm_engine/
├── mcdm/
│   ├── normalization.py   # vector, linear-max, min-max, sum
│   ├── traditional/       # SAW, WPM, TOPSIS, VIKOR, MOORA, WASPAS,
│   │                      # COPRAS, EDAS, CODAS, ARAS
│   ├── fuzzy/             # TFN kernel, linguistic scales, Fuzzy TOPSIS
│   └── dispatcher.py      # run any method by name
│
├── aggregation.py         # expert matrices and expert weights
├── analysis/
│   └── sensitivity.py     # weight perturbation scenarios, stability
│
├── data_loader.py         # payload -> DecisionProblem
└── pipeline.py            # load, rank, sensitivity

Quick Start
-----------
>>> from mcdm_engine import calculate_mcdm
>>> result = calculate_mcdm("VIKOR", [[250, 16, 12], [200, 16, 8], [300, 32, 16]],
...                         [0.4, 0.3, 0.3], ["min", "max", "max"])
>>> print(result.summary())
"""

from .config import Config, get_default_config, get_config, set_config, reset_config
from .exceptions import MCDMError, PreconditionError, UnknownMethodError, UnresolvedTermError
from .logger import (
    setup_logger,
    get_logger,
    get_module_logger,
    LoggerFactory,
    log_execution,
    log_context,
    timed_operation,
)
from .types import Direction, Criterion
from .mcdm import (
    RankingResult, normalize, calculate_mcdm, available_methods, detect_method,
    TriangularFuzzyNumber, LinguisticTerm, LinguisticScale,
    DEFAULT_TRIANGULAR_SCALE, SAATY_SCALE, FuzzyTOPSIS,
)
from .aggregation import aggregate_matrices, derive_expert_weights
from .analysis import SensitivityAnalysis, run_sensitivity_analysis, stability_report
from .data_loader import DataLoader, DecisionProblem, classify_cell, load_problem
from .pipeline import AnalysisPipeline, AnalysisResult, run_analysis

__version__ = '1.0.0'

__all__ = [
    # Configuration
    'Config',
    'get_default_config',
    'get_config',
    'set_config',
    'reset_config',

    # Errors
    'MCDMError',
    'PreconditionError',
    'UnknownMethodError',
    'UnresolvedTermError',

    # Logging
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'log_execution',
    'log_context',
    'timed_operation',

    # Types
    'Direction',
    'Criterion',

    # Ranking
    'RankingResult',
    'normalize',
    'calculate_mcdm',
    'available_methods',
    'detect_method',

    # Fuzzy
    'TriangularFuzzyNumber',
    'LinguisticTerm',
    'LinguisticScale',
    'DEFAULT_TRIANGULAR_SCALE',
    'SAATY_SCALE',
    'FuzzyTOPSIS',

    # Aggregation and sensitivity
    'aggregate_matrices',
    'derive_expert_weights',
    'SensitivityAnalysis',
    'run_sensitivity_analysis',
    'stability_report',

    # Data loading and pipeline
    'DataLoader',
    'DecisionProblem',
    'classify_cell',
    'load_problem',
    'AnalysisPipeline',
    'AnalysisResult',
    'run_analysis',
]
