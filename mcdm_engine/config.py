# -*- coding: utf-8 -*-
"""Configuration management for the MCDM engine."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple
from enum import Enum
import json


class NormalizationType(Enum):
    """Supported normalization methods."""
    VECTOR = "vector"
    LINEAR_MAX = "linear_max"
    MIN_MAX = "min_max"
    SUM = "sum"


class DefuzzificationMethod(Enum):
    """Supported defuzzification methods."""
    CENTROID = "centroid"
    GRADED_MEAN = "graded_mean"
    MEAN_OF_MAXIMUM = "mean_of_maximum"
    ALPHA_CUT = "alpha_cut"


class SensitivityType(Enum):
    """Weight perturbation scenario families."""
    OAT = "oat"
    PERCENTAGE = "percentage"
    EXTREME = "extreme"


class AggregationMethod(Enum):
    """Expert matrix aggregation operators."""
    GEOMETRIC = "geometric"
    ARITHMETIC = "arithmetic"


@dataclass
class MethodConfig:
    """Method-specific scalar parameters."""
    v: float = 0.5          # VIKOR weight of group utility
    lam: float = 0.5        # WASPAS blend between WSM and WPM
    tau: float = 0.02       # CODAS indifference threshold

    def __post_init__(self):
        if not 0 <= self.v <= 1:
            raise ValueError("v must be between 0 and 1")
        if not 0 <= self.lam <= 1:
            raise ValueError("lam must be between 0 and 1")
        if self.tau < 0:
            raise ValueError("tau must be non-negative")


@dataclass
class EngineConfig:
    """Engine-wide numeric and policy settings."""
    strict: bool = False            # raise instead of falling back
    max_cells: int = 10_000         # N x M bound
    tie_decimals: int = 10          # decimals of score/max|score| used for tie detection
    default_method: str = "TOPSIS"
    epsilon: float = 1e-4           # closeness-coefficient denominator guard
    zero_guard: float = 0.001       # substitute for zeros in products/ratios


@dataclass
class FuzzyConfig:
    """Fuzzy kernel configuration."""
    neutral_value: Tuple[float, float, float] = (0.5, 0.5, 0.5)
    neutral_crisp: float = 0.5
    defuzzification: DefuzzificationMethod = DefuzzificationMethod.CENTROID
    default_spread: float = 0.1
    gaussian_n_sigma: float = 2.0
    alpha: float = 0.5


@dataclass
class SensitivityConfig:
    """Sensitivity driver configuration."""
    oat_increase: float = 0.5
    percentage_change: float = 20.0
    dominance: float = 0.5
    default_type: SensitivityType = SensitivityType.OAT


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    methods: MethodConfig = field(default_factory=MethodConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    fuzzy: FuzzyConfig = field(default_factory=FuzzyConfig)
    sensitivity: SensitivityConfig = field(default_factory=SensitivityConfig)

    def to_dict(self) -> Dict:
        def _to_dict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Enum):
                return obj.value
            elif isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, (list, tuple)):
                return [_to_dict(i) for i in obj]
            elif isinstance(obj, dict):
                return {k: _to_dict(v) for k, v in obj.items()}
            return obj
        return _to_dict(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        return f"""
{'='*60}
CONFIGURATION SUMMARY - MCDM Ranking Engine
{'='*60}

METHODS:
  VIKOR v: {self.methods.v}
  WASPAS lambda: {self.methods.lam}
  CODAS tau: {self.methods.tau}

ENGINE:
  Strict mode: {self.engine.strict}
  Max cells: {self.engine.max_cells}
  Default method: {self.engine.default_method}

FUZZY:
  Defuzzification: {self.fuzzy.defuzzification.value}
  Neutral value: {self.fuzzy.neutral_value}

SENSITIVITY:
  OAT increase: {self.sensitivity.oat_increase:.0%}
  Percentage change: {self.sensitivity.percentage_change}%
  Dominance: {self.sensitivity.dominance:.0%}
{'='*60}
"""


_config: Optional[Config] = None

def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config

def get_default_config() -> Config:
    """Get a fresh default configuration."""
    return Config()

def set_config(config: Config) -> None:
    global _config
    _config = config

def reset_config() -> None:
    global _config
    _config = Config()
