"""
Probability value type.

A ``Probability`` is a light wrapper around a float. Conversion from an
arbitrary real is checked once; arithmetic between probabilities is not
re-checked, so intermediate results (for example the unnormalized mass during
conditioning) may fall outside [0, 1] until they are renormalized.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import ClassVar, Union

from porco.errors import InvalidProbabilityError

Real = Union[int, float]


@dataclass(frozen=True, order=True)
class Probability:
    """
    Probability of an outcome.

    ``Probability(x)`` raises ``InvalidProbabilityError`` unless
    ``0.0 <= x <= 1.0``. Values produced by ``+``, ``-``, ``*`` and ``/`` are
    not validated.
    """

    value: float

    ZERO: ClassVar["Probability"]
    ONE: ClassVar["Probability"]

    def __init__(self, value: Real) -> None:
        if not isinstance(value, numbers.Real):
            raise InvalidProbabilityError(
                f"Probability must be a real number, got {type(value).__name__}"
            )
        p = float(value)
        if not 0.0 <= p <= 1.0:
            raise InvalidProbabilityError(
                f"Probability must lie in [0.0, 1.0], got {value!r}"
            )
        object.__setattr__(self, "value", p)

    @classmethod
    def _unchecked(cls, value: float) -> "Probability":
        p = object.__new__(cls)
        object.__setattr__(p, "value", float(value))
        return p

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Probability({self.value!r})"

    def __add__(self, other: "Probability") -> "Probability":
        if not isinstance(other, Probability):
            return NotImplemented
        return Probability._unchecked(self.value + other.value)

    def __sub__(self, other: "Probability") -> "Probability":
        if not isinstance(other, Probability):
            return NotImplemented
        return Probability._unchecked(self.value - other.value)

    def __mul__(self, other: Union["Probability", Real]) -> "Probability":
        if isinstance(other, Probability):
            return Probability._unchecked(self.value * other.value)
        if isinstance(other, (int, float)):
            return Probability._unchecked(self.value * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Probability", Real]) -> "Probability":
        if isinstance(other, Probability):
            return Probability._unchecked(self.value / other.value)
        if isinstance(other, (int, float)):
            return Probability._unchecked(self.value / float(other))
        return NotImplemented

    def isclose(self, other: Union["Probability", Real], *, abs_tol: float = 1e-9) -> bool:
        """Compare with another probability (or real) within ``abs_tol``."""
        return math.isclose(self.value, float(other), rel_tol=0.0, abs_tol=float(abs_tol))


Probability.ZERO = Probability(0.0)
Probability.ONE = Probability(1.0)
