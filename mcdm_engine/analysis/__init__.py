# -*- coding: utf-8 -*-
"""
Analysis Module
===============

Weight sensitivity scenarios and ranking stability.
"""

from .sensitivity import (
    Scenario, StabilityReport, SensitivityAnalysis, WeightPerturbation,
    redistribute_weights, normalize_weights, stability_report, rank_agreement,
    run_sensitivity_analysis, BASE_SCENARIO,
)

__all__ = [
    'Scenario', 'StabilityReport', 'SensitivityAnalysis', 'WeightPerturbation',
    'redistribute_weights', 'normalize_weights', 'stability_report', 'rank_agreement',
    'run_sensitivity_analysis', 'BASE_SCENARIO',
]
