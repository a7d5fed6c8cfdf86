# -*- coding: utf-8 -*-
"""Core value types shared by every engine module."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import PreconditionError


class Direction(Enum):
    """Optimisation direction of a criterion."""
    MAX = "max"
    MIN = "min"

    @classmethod
    def parse(cls, value: Union['Direction', str]) -> 'Direction':
        """
        Parse a direction from an enum member or a string.

        Accepts ``max/min``, ``maximize/minimize``, ``benefit/cost`` and
        ``+/-`` (case-insensitive).
        """
        if isinstance(value, Direction):
            return value
        key = str(value).strip().lower()
        if key in _MAX_ALIASES:
            return cls.MAX
        if key in _MIN_ALIASES:
            return cls.MIN
        raise ValueError(f"Unknown criterion direction: {value!r}")

    @property
    def is_max(self) -> bool:
        return self is Direction.MAX


_MAX_ALIASES = {"max", "maximize", "maximise", "benefit", "+", "positive"}
_MIN_ALIASES = {"min", "minimize", "minimise", "cost", "-", "negative"}


@dataclass(frozen=True)
class Criterion:
    """
    A single evaluation dimension.

    ``name`` is for display only; the math uses position.
    """
    name: str
    weight: float
    direction: Direction = Direction.MAX

    def __post_init__(self):
        object.__setattr__(self, 'direction', Direction.parse(self.direction))
        object.__setattr__(self, 'weight', float(self.weight))

    def with_weight(self, weight: float) -> 'Criterion':
        return Criterion(self.name, weight, self.direction)

    @classmethod
    def from_dict(cls, data: dict) -> 'Criterion':
        """Build a criterion from a payload entry; bad fields raise PreconditionError."""
        name = str(data.get('name', ''))
        weight = data.get('weight', 0.0)
        try:
            weight = float(weight)
        except (TypeError, ValueError) as e:
            raise PreconditionError(
                f"criterion {name!r} has no numeric weight (got {weight!r})") from e
        try:
            direction = Direction.parse(data.get('direction', Direction.MAX))
        except ValueError as e:
            raise PreconditionError(f"criterion {name!r}: {e}") from e
        return cls(name=name, weight=weight, direction=direction)
