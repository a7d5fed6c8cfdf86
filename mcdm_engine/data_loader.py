# -*- coding: utf-8 -*-
"""
Data Loading
============

Turns an extraction-shaped payload into a ``DecisionProblem``.

Payload layout::

    {
        "method": "Fuzzy TOPSIS",
        "criteria": [{"name": "Cost", "weight": 0.4, "direction": "min"}, ...],
        "alternatives": ["Supplier A", "Supplier B", ...],
        "matrix": [[250, "(0.5, 0.7, 0.9)", "VH"], ...],
        "linguisticScale": [{"term": "Very High", "fuzzyNumber": [0.7, 0.9, 1.0],
                             "crispValue": 0.87, "abbreviation": "VH"}, ...],
        "logicModule": {"aggregation": "Distance-to-Ideal", ...}
    }

Each cell is classified once into a tagged variant (``CrispCell``,
``FuzzyCell`` or ``LinguisticCell``) and the whole matrix is then resolved
into either a crisp ``DataFrame`` or a fuzzy matrix.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from .config import Config, DefuzzificationMethod, get_config
from .exceptions import PreconditionError
from .logger import get_module_logger
from .mcdm.fuzzy.base import TriangularFuzzyNumber, defuzzify, parse_fuzzy_number
from .mcdm.fuzzy.linguistic import DEFAULT_TRIANGULAR_SCALE, LinguisticScale, get_scale
from .types import Criterion, Direction
from .validation import check_size


# =============================================================================
# Cells
# =============================================================================

@dataclass(frozen=True)
class CrispCell:
    value: float


@dataclass(frozen=True)
class FuzzyCell:
    tfn: TriangularFuzzyNumber


@dataclass(frozen=True)
class LinguisticCell:
    term: str


Cell = Union[CrispCell, FuzzyCell, LinguisticCell]


def classify_cell(value: Any) -> Cell:
    """
    Tag a raw matrix cell.

    Numbers (and numeric strings) are crisp, TFNs, (l, m, u) triples and
    ``"(l, m, u)"`` strings are fuzzy, any other text is a linguistic term.
    Empty cells count as crisp 0.
    """
    if isinstance(value, (CrispCell, FuzzyCell, LinguisticCell)):
        return value
    if isinstance(value, TriangularFuzzyNumber):
        return FuzzyCell(value)
    if value is None:
        return CrispCell(0.0)
    if isinstance(value, (bool, int, float, np.integer, np.floating)):
        return CrispCell(float(value))
    if isinstance(value, (list, tuple, np.ndarray)):
        if len(value) != 3:
            raise PreconditionError(f"fuzzy cell must have 3 components, got {len(value)}")
        return FuzzyCell(TriangularFuzzyNumber.coerce(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return CrispCell(0.0)
        try:
            return CrispCell(float(text))
        except ValueError:
            pass
        parsed = parse_fuzzy_number(text)
        if isinstance(parsed, TriangularFuzzyNumber):
            return FuzzyCell(parsed)
        return LinguisticCell(text)
    raise PreconditionError(f"unsupported cell type: {type(value).__name__}")


# =============================================================================
# Decision problem
# =============================================================================

@dataclass
class DecisionProblem:
    """A decision problem with classified cells."""
    alternatives: List[str]
    criteria: List[Criterion]
    cells: List[List[Cell]]
    scale: LinguisticScale = DEFAULT_TRIANGULAR_SCALE
    method: Optional[str] = None
    source: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_alternatives(self) -> int:
        return len(self.alternatives)

    @property
    def n_criteria(self) -> int:
        return len(self.criteria)

    @property
    def criterion_names(self) -> List[str]:
        return [c.name for c in self.criteria]

    @property
    def weights(self) -> np.ndarray:
        return np.array([c.weight for c in self.criteria], dtype=float)

    @property
    def directions(self) -> List[Direction]:
        return [c.direction for c in self.criteria]

    @property
    def is_fuzzy(self) -> bool:
        """True when any cell is fuzzy or linguistic."""
        return any(not isinstance(c, CrispCell) for row in self.cells for c in row)

    @property
    def has_linguistic(self) -> bool:
        return any(isinstance(c, LinguisticCell) for row in self.cells for c in row)

    def crisp_matrix(self,
                     method: Union[str, DefuzzificationMethod, None] = None,
                     strict: Optional[bool] = None) -> pd.DataFrame:
        """
        Crisp alternatives x criteria table.

        Fuzzy cells are defuzzified with ``method``; linguistic cells take
        the crisp value of their scale entry.
        """
        def _value(cell: Cell) -> float:
            if isinstance(cell, CrispCell):
                return cell.value
            if isinstance(cell, FuzzyCell):
                return defuzzify(cell.tfn, method)
            return self.scale.crisp_lookup(cell.term, strict)

        values = [[_value(c) for c in row] for row in self.cells]
        return pd.DataFrame(values, index=self.alternatives, columns=self.criterion_names,
                            dtype=float)

    def fuzzy_matrix(self, strict: Optional[bool] = None) -> List[List[TriangularFuzzyNumber]]:
        """Every cell as a TFN; crisp x becomes (x, x, x)."""
        def _tfn(cell: Cell) -> TriangularFuzzyNumber:
            if isinstance(cell, CrispCell):
                return TriangularFuzzyNumber.from_crisp(cell.value)
            if isinstance(cell, FuzzyCell):
                return cell.tfn
            return self.scale.lookup(cell.term, strict)

        return [[_tfn(c) for c in row] for row in self.cells]

    def summary(self) -> str:
        kinds = {'crisp': 0, 'fuzzy': 0, 'linguistic': 0}
        for row in self.cells:
            for c in row:
                if isinstance(c, CrispCell):
                    kinds['crisp'] += 1
                elif isinstance(c, FuzzyCell):
                    kinds['fuzzy'] += 1
                else:
                    kinds['linguistic'] += 1
        return (f"{self.n_alternatives} alternatives x {self.n_criteria} criteria "
                f"({kinds['crisp']} crisp, {kinds['fuzzy']} fuzzy, "
                f"{kinds['linguistic']} linguistic cells)")


# =============================================================================
# Loader
# =============================================================================

class DataLoader:
    """Builds ``DecisionProblem`` objects from payload mappings or JSON files."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.logger = get_module_logger("data_loader")

    def load(self, source: Union[Mapping[str, Any], str, Path]) -> DecisionProblem:
        """Load a payload mapping, or a JSON file holding one."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            with open(path, encoding='utf-8') as f:
                payload = json.load(f)
            self.logger.debug(f"Read payload from {path}")
        else:
            payload = source
        if not isinstance(payload, Mapping):
            raise PreconditionError(f"payload must be a mapping, got {type(payload).__name__}")
        return self.from_payload(payload)

    def from_payload(self, payload: Mapping[str, Any]) -> DecisionProblem:
        criteria = [c if isinstance(c, Criterion) else Criterion.from_dict(c)
                    for c in payload.get('criteria') or []]
        rows = [list(r) for r in payload.get('matrix') or []]

        if not criteria:
            raise PreconditionError("payload has no criteria")
        if not rows:
            raise PreconditionError("payload matrix is empty: at least one alternative is required")
        for i, row in enumerate(rows):
            if len(row) != len(criteria):
                raise PreconditionError(
                    f"matrix row {i} has {len(row)} cells, expected {len(criteria)} (criteria count)"
                )
        check_size(len(rows), len(criteria), self.config.engine.max_cells)

        alternatives = [str(a) for a in payload.get('alternatives') or []]
        if not alternatives:
            alternatives = [f"A{i + 1}" for i in range(len(rows))]
        elif len(alternatives) != len(rows):
            raise PreconditionError(
                f"alternatives length {len(alternatives)} does not match "
                f"matrix rows {len(rows)}"
            )

        scale_records = payload.get('linguisticScale', payload.get('linguistic_scale'))
        scale = get_scale(scale_records)

        problem = DecisionProblem(
            alternatives=alternatives,
            criteria=criteria,
            cells=[[classify_cell(v) for v in row] for row in rows],
            scale=scale,
            method=payload.get('method'),
            source=dict(payload),
        )
        self.logger.debug(f"Loaded problem: {problem.summary()}")
        return problem


def load_problem(source: Union[Mapping[str, Any], str, Path],
                 config: Optional[Config] = None) -> DecisionProblem:
    """Convenience function to load a decision problem."""
    return DataLoader(config).load(source)
