# -*- coding: utf-8 -*-
"""
Traditional MCDM Methods Module

Provides crisp (non-fuzzy) Multi-Criteria Decision Making methods:
- SAW: Simple Additive Weighting
- WPM: Weighted Product Model
- TOPSIS: Technique for Order Preference by Similarity to Ideal Solution
- VIKOR: Multi-criteria Optimization and Compromise Solution
- MOORA: Multi-Objective Optimization by Ratio Analysis
- WASPAS: Weighted Aggregated Sum Product Assessment
- COPRAS: Complex Proportional Assessment
- EDAS: Evaluation based on Distance from Average Solution
- CODAS: Combinative Distance-based Assessment
- ARAS: Additive Ratio Assessment
"""

from .saw import SAWCalculator, SAWResult, calculate_saw
from .wpm import WPMCalculator, WPMResult, calculate_wpm
from .topsis import TOPSISCalculator, TOPSISResult, calculate_topsis
from .vikor import VIKORCalculator, VIKORResult, calculate_vikor
from .moora import MOORACalculator, MOORAResult, calculate_moora
from .waspas import WASPASCalculator, WASPASResult, calculate_waspas
from .copras import COPRASCalculator, COPRASResult, calculate_copras
from .edas import EDASCalculator, EDASResult, calculate_edas
from .codas import CODASCalculator, CODASResult, calculate_codas
from .aras import ARASCalculator, ARASResult, calculate_aras

__all__ = [
    'SAWCalculator', 'SAWResult', 'calculate_saw',
    'WPMCalculator', 'WPMResult', 'calculate_wpm',
    'TOPSISCalculator', 'TOPSISResult', 'calculate_topsis',
    'VIKORCalculator', 'VIKORResult', 'calculate_vikor',
    'MOORACalculator', 'MOORAResult', 'calculate_moora',
    'WASPASCalculator', 'WASPASResult', 'calculate_waspas',
    'COPRASCalculator', 'COPRASResult', 'calculate_copras',
    'EDASCalculator', 'EDASResult', 'calculate_edas',
    'CODASCalculator', 'CODASResult', 'calculate_codas',
    'ARASCalculator', 'ARASResult', 'calculate_aras',
]
