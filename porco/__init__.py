"""
Porco: composable discrete probability distributions.

Distributions are built from explicit outcome probabilities, ``always`` or
``uniform``, and composed with ``map``, ``and_then``, ``flatten`` and
``given``. Outcomes only need equality, so they can be tuples, floats,
lists or any other comparable value.
"""

from porco.distribution import Distribution, regroup
from porco.errors import DegenerateDistributionError, InvalidProbabilityError
from porco.probability import Probability
from porco.store import AssociationList, HashedStore, KeyedStore

__version__ = "0.1.0"

__all__ = [
    "Distribution",
    "Probability",
    "regroup",
    "AssociationList",
    "HashedStore",
    "KeyedStore",
    "DegenerateDistributionError",
    "InvalidProbabilityError",
]
