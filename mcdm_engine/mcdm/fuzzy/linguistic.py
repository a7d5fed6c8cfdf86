# -*- coding: utf-8 -*-
"""
Linguistic scales: translate judgments such as "High" or "VH" into
triangular fuzzy numbers or crisp values.

Lookup is trimmed and case-insensitive, and understands each term's own
abbreviation plus a set of common abbreviations (``vh`` -> "very high",
``vp`` -> "very poor" ...). Unresolved terms map to the neutral value
(0.5, 0.5, 0.5) with a warning, or raise ``UnresolvedTermError`` in strict
mode.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .base import TriangularFuzzyNumber, parse_fuzzy_number
from ...config import get_config
from ...exceptions import UnresolvedTermError
from ...logger import get_module_logger

logger = get_module_logger("mcdm.fuzzy.linguistic")


COMMON_ABBREVIATIONS: Dict[str, Sequence[str]] = {
    'vh': ('very high',),
    'vg': ('very good',),
    'ah': ('absolutely high',),
    'h': ('high',),
    'g': ('good',),
    'm': ('medium',),
    'f': ('fair',),
    'mp': ('more or less good', 'medium positive'),
    'mn': ('medium negative',),
    'l': ('low',),
    'p': ('poor',),
    'vl': ('very low',),
    'vp': ('very poor',),
    'al': ('absolutely low',),
}


@dataclass(frozen=True)
class LinguisticTerm:
    """One entry of a linguistic scale."""
    term: str
    fuzzy_value: TriangularFuzzyNumber
    crisp_value: float
    abbreviation: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'fuzzy_value', TriangularFuzzyNumber.coerce(self.fuzzy_value))
        object.__setattr__(self, 'crisp_value', float(self.crisp_value))

    @classmethod
    def from_dict(cls, data: Mapping) -> 'LinguisticTerm':
        """Build from ``{term, fuzzyNumber|fuzzy_value, crispValue|crisp_value, abbreviation}``."""
        fuzzy = data.get('fuzzy_value', data.get('fuzzyNumber'))
        fuzzy = parse_fuzzy_number(fuzzy) if isinstance(fuzzy, str) else fuzzy
        crisp = data.get('crisp_value', data.get('crispValue'))
        tfn = TriangularFuzzyNumber.coerce(fuzzy if fuzzy is not None else crisp)
        if crisp is None:
            crisp = tfn.defuzzify()
        return cls(term=str(data['term']), fuzzy_value=tfn, crisp_value=crisp,
                   abbreviation=data.get('abbreviation'))


def _key(term) -> str:
    return str(term).strip().lower()


class LinguisticScale:
    """
    Ordered, read-only set of linguistic terms.

    Parameters
    ----------
    terms : iterable of LinguisticTerm or dict
        Scale entries, in display order.
    name : str
        Label used in logs.
    """

    def __init__(self, terms: Iterable[Union[LinguisticTerm, Mapping]], name: str = "custom"):
        self._terms = tuple(t if isinstance(t, LinguisticTerm) else LinguisticTerm.from_dict(t)
                            for t in terms)
        self.name = name
        self._lookup = self._build_lookup()

    def _build_lookup(self) -> Dict[str, LinguisticTerm]:
        lookup: Dict[str, LinguisticTerm] = {}
        for t in self._terms:
            lookup.setdefault(_key(t.term), t)
            if t.abbreviation:
                lookup.setdefault(_key(t.abbreviation), t)
        for abbrev, expansions in COMMON_ABBREVIATIONS.items():
            if abbrev in lookup:
                continue
            for full in expansions:
                if full in lookup:
                    lookup[abbrev] = lookup[full]
                    break
        return lookup

    @property
    def terms(self) -> List[LinguisticTerm]:
        return list(self._terms)

    def __iter__(self) -> Iterator[LinguisticTerm]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term) -> bool:
        return _key(term) in self._lookup

    def __repr__(self) -> str:
        return f"LinguisticScale({self.name!r}, {[t.term for t in self._terms]})"

    def resolve(self, term) -> Optional[LinguisticTerm]:
        """Return the matching entry or None."""
        return self._lookup.get(_key(term))

    def _unresolved(self, term, strict: Optional[bool]):
        if strict is None:
            strict = get_config().engine.strict
        if strict:
            raise UnresolvedTermError(str(term))
        logger.warning(f"Linguistic term {term!r} not found in scale {self.name!r}, "
                       f"using neutral value")

    def lookup(self, term, strict: Optional[bool] = None) -> TriangularFuzzyNumber:
        """
        Resolve a term (or a number, or an "(l, m, u)" string) to a TFN.

        Unresolved terms give ``Config.fuzzy.neutral_value``.
        """
        if isinstance(term, TriangularFuzzyNumber):
            return term
        if isinstance(term, (int, float)) and not isinstance(term, bool):
            return TriangularFuzzyNumber.from_crisp(term)
        entry = self.resolve(term)
        if entry is not None:
            return entry.fuzzy_value
        parsed = parse_fuzzy_number(term)
        if isinstance(parsed, TriangularFuzzyNumber):
            return parsed
        try:
            return TriangularFuzzyNumber.from_crisp(float(str(term).strip()))
        except ValueError:
            self._unresolved(term, strict)
            return TriangularFuzzyNumber(*get_config().fuzzy.neutral_value)

    def crisp_lookup(self, term, strict: Optional[bool] = None) -> float:
        """Resolve a term to its crisp value; numeric strings parse as numbers."""
        if isinstance(term, (int, float)) and not isinstance(term, bool):
            return float(term)
        entry = self.resolve(term)
        if entry is not None:
            return entry.crisp_value
        try:
            return float(str(term).strip())
        except ValueError:
            self._unresolved(term, strict)
            return get_config().fuzzy.neutral_crisp

    def nearest(self, value: float) -> LinguisticTerm:
        """Term whose crisp value is closest to ``value`` (first wins on ties)."""
        if not self._terms:
            raise ValueError(f"scale {self.name!r} has no terms")
        return min(self._terms, key=lambda t: abs(t.crisp_value - value))

    def to_records(self) -> List[dict]:
        return [
            {'term': t.term, 'abbreviation': t.abbreviation,
             'fuzzyNumber': list(t.fuzzy_value.as_tuple()), 'crispValue': t.crisp_value}
            for t in self._terms
        ]


def linguistic_to_fuzzy_matrix(matrix: Iterable[Iterable], scale: LinguisticScale,
                               strict: Optional[bool] = None) -> List[List[TriangularFuzzyNumber]]:
    """Translate a matrix of terms and numbers into a fuzzy matrix."""
    return [[scale.lookup(cell, strict) for cell in row] for row in matrix]


DEFAULT_TRIANGULAR_SCALE = LinguisticScale([
    LinguisticTerm('Very High', (0.7, 0.9, 1.0), 0.87, 'VH'),
    LinguisticTerm('High', (0.5, 0.7, 0.9), 0.70, 'H'),
    LinguisticTerm('Medium', (0.3, 0.5, 0.7), 0.50, 'M'),
    LinguisticTerm('Low', (0.1, 0.3, 0.5), 0.30, 'L'),
    LinguisticTerm('Very Low', (0.0, 0.1, 0.3), 0.13, 'VL'),
], name="triangular")

SAATY_SCALE = LinguisticScale([
    LinguisticTerm('Extreme', 9, 9),
    LinguisticTerm('Very Strong', 7, 7),
    LinguisticTerm('Strong', 5, 5),
    LinguisticTerm('Moderate', 3, 3),
    LinguisticTerm('Equal', 1, 1),
], name="saaty")


def get_scale(scale: Union[str, LinguisticScale, Sequence, None] = None) -> LinguisticScale:
    """Return a scale by name (``triangular``/``saaty``), as given, or from records."""
    if scale is None:
        return DEFAULT_TRIANGULAR_SCALE
    if isinstance(scale, LinguisticScale):
        return scale
    if isinstance(scale, str):
        key = scale.strip().lower()
        if key in ('saaty', 'saaty_1_9'):
            return SAATY_SCALE
        if key in ('triangular', 'default'):
            return DEFAULT_TRIANGULAR_SCALE
        raise ValueError(f"Unknown linguistic scale: {scale}")
    if len(scale) == 0:
        return DEFAULT_TRIANGULAR_SCALE
    return LinguisticScale(scale, name="paper")
