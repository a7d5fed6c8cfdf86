# -*- coding: utf-8 -*-
"""Exception hierarchy for the MCDM engine."""


class MCDMError(Exception):
    """Base class for all engine errors."""


class PreconditionError(MCDMError, ValueError):
    """
    Input violates a structural precondition.

    Raised for mismatched matrix/weight/direction dimensions, empty or ragged
    matrices, non-finite cells, negative weights, oversize inputs and expert
    matrices of differing shape. The engine never truncates or pads input.
    """


class UnknownMethodError(MCDMError, KeyError):
    """Method name could not be resolved by the dispatcher (strict mode)."""

    def __init__(self, method: str, available=None):
        self.method = method
        self.available = list(available or [])
        super().__init__(method)

    def __str__(self) -> str:
        msg = f"Unknown MCDM method: {self.method!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg


class UnresolvedTermError(MCDMError, KeyError):
    """Linguistic term not present in the scale (strict mode)."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(term)

    def __str__(self) -> str:
        return f"Linguistic term {self.term!r} not found in scale"
