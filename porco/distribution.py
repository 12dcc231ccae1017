"""
Discrete probability distributions over arbitrary outcome types.

A ``Distribution`` is a finite probability mass function stored as an ordered
sequence of (outcome, probability) pairs. Outcomes only need ``==``; they do
not have to be hashable or ordered. Each outcome appears once, at the position
where it was first produced, and later contributions to the same outcome are
added to that entry.

Distributions are composed with combinators that return new distributions:

  - ``map``: transform outcomes, merging those that become equal.
  - ``and_then``: chain a second experiment whose distribution depends on the
    first outcome, weighting each path by its probability.
  - ``flatten``: collapse a distribution over distributions.
  - ``given``: condition on an event and renormalize.

The API follows the combinators of "Probabilistic Functional Programming in
Haskell" (Erwig & Kollmansberger, 2006).
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np
from scipy.special import entr

from porco.errors import DegenerateDistributionError
from porco.probability import Probability
from porco.store import AssociationList, KeyedStore, StoreFactory

T = TypeVar("T")
U = TypeVar("U")

ProbabilityLike = Union[Probability, int, float]
Pair = Tuple[T, Probability]


def _as_probability(p: ProbabilityLike) -> Probability:
    if isinstance(p, Probability):
        return p
    return Probability(p)


def regroup(
    pairs: Iterable[Tuple[T, ProbabilityLike]], store: StoreFactory = AssociationList
) -> KeyedStore:
    """
    Merge repeated outcomes by summing their probabilities.

    Args:
        pairs: (outcome, probability) pairs in production order. Plain reals
            are converted through ``Probability`` and therefore validated.
        store: Factory for the keyed store that holds the result.

    Returns:
        A store with one entry per distinct outcome, in first-occurrence order.
    """
    grouped = store()
    for outcome, p in pairs:
        grouped.merge(outcome, _as_probability(p), lambda old, new: old + new)
    return grouped


class Distribution(Generic[T]):
    """
    Discrete probability distribution over outcomes of type ``T``.

    Args:
        pairs: (outcome, probability) pairs. Repeated outcomes are merged.
        store: Keyed store factory. ``AssociationList`` (default) works for any
            outcome with ``==``; ``HashedStore`` is faster for hashable outcomes.
            Distributions derived through combinators reuse the same factory.

    Raises:
        InvalidProbabilityError: If a plain real probability is outside [0, 1].
    """

    def __init__(
        self,
        pairs: Iterable[Tuple[T, ProbabilityLike]] = (),
        *,
        store: StoreFactory = AssociationList,
    ) -> None:
        self._store_factory: StoreFactory = store
        self._store: KeyedStore = regroup(pairs, store)
        self._pairs: Tuple[Pair, ...] = tuple(self._store.items())

    @classmethod
    def always(cls, outcome: T, *, store: StoreFactory = AssociationList) -> "Distribution[T]":
        """Distribution where ``outcome`` occurs with probability one."""
        return cls([(outcome, Probability.ONE)], store=store)

    @classmethod
    def uniform(
        cls, outcomes: Iterable[T], *, store: StoreFactory = AssociationList
    ) -> "Distribution[T]":
        """
        Uniform distribution over a collection of outcomes.

        Each of the n listed outcomes receives ``1/n``; duplicates are merged,
        so an outcome listed twice ends up with ``2/n``.

        Raises:
            DegenerateDistributionError: If ``outcomes`` is empty.
        """
        items = list(outcomes)
        if not items:
            raise DegenerateDistributionError(
                "Cannot build a uniform distribution over zero outcomes"
            )
        p = Probability(1.0 / len(items))
        return cls(((t, p) for t in items), store=store)

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[T, ProbabilityLike], *, store: StoreFactory = AssociationList
    ) -> "Distribution[T]":
        return cls(mapping.items(), store=store)

    def _derive(self, pairs: Iterable[Tuple[U, ProbabilityLike]]) -> "Distribution[U]":
        return Distribution(pairs, store=self._store_factory)

    # Combinators

    def map(self, f: Callable[[T], U]) -> "Distribution[U]":
        """
        Map outcomes through ``f``.

        Outcomes that become equal under ``f`` have their probabilities summed.

        Example:
            >>> d = Distribution.uniform([0, 1, 2, 3]).map(lambda v: v == 3)
            >>> d.pmf(True)
            Probability(0.25)
        """
        return self._derive((f(t), p) for t, p in self._pairs)

    def and_then(self, f: Callable[[T], "Distribution[U]"]) -> "Distribution[U]":
        """
        Chain a second experiment onto each outcome.

        For every outcome ``t`` with probability ``p``, each pair ``(u, p2)``
        of ``f(t)`` contributes ``p * p2`` to ``u``. This is the law of total
        probability; it also builds joint distributions when ``f`` returns
        tuples that include ``t``.

        Raises:
            TypeError: If ``f`` returns something other than a Distribution.
        """

        def _paths() -> Iterator[Tuple[U, Probability]]:
            for t, p in self._pairs:
                inner = f(t)
                if not isinstance(inner, Distribution):
                    raise TypeError(
                        f"and_then expects a Distribution, got {type(inner).__name__}"
                    )
                for u, p2 in inner._pairs:
                    yield u, p * p2

        return self._derive(_paths())

    def flatten(self) -> "Distribution[Any]":
        """
        Collapse a distribution over distributions.

        A ``Distribution[Distribution[T]]`` describes which second experiment
        is run; the result is the distribution of that experiment's outcome.
        """
        return self.and_then(lambda inner: inner)

    def given(self, condition: Callable[[T], bool]) -> "Distribution[T]":
        """
        Condition on the event ``condition`` and renormalize.

        Outcomes failing ``condition`` are dropped (their pmf becomes zero) and
        the retained probabilities are divided by their total.

        Raises:
            DegenerateDistributionError: If the retained outcomes carry no mass.
        """
        kept: List[Pair] = [(t, p) for t, p in self._pairs if condition(t)]
        mass = float(np.sum([p.value for _t, p in kept])) if kept else 0.0
        if mass == 0.0:
            raise DegenerateDistributionError(
                "Cannot condition on an event with zero probability"
            )
        return self._derive((t, p / mass) for t, p in kept)

    def joint(self, other: "Distribution[U]") -> "Distribution[Tuple[T, U]]":
        """Joint distribution of ``self`` and an independent ``other``."""
        return self.and_then(lambda t: other.map(lambda u: (t, u)))

    def convolve(self, other: "Distribution[T]") -> "Distribution[T]":
        """
        Distribution of the sum of two independent random variables.

        Every pair of outcomes contributes ``a + b`` with probability
        ``pa * pb``; equal sums are merged.
        """
        return self._derive(
            (a + b, pa * pb) for a, pa in self._pairs for b, pb in other._pairs
        )

    def __add__(self, other: object) -> "Distribution[T]":
        if not isinstance(other, Distribution):
            return NotImplemented
        return self.convolve(other)

    # Queries

    def pmf(self, outcome: T) -> Probability:
        """Probability of ``outcome``; ``Probability.ZERO`` when absent."""
        return self._store.get(outcome, Probability.ZERO)

    def expectation(self, f: Optional[Callable[[T], float]] = None) -> float:
        """
        Expected value of ``f(X)``, or of the outcome itself when ``f`` is None.

        Outcomes (or ``f`` results) must be convertible with ``float``.
        """
        values = self._values(f)
        return float(np.dot(values, self.probabilities()))

    def variance(self, f: Optional[Callable[[T], float]] = None) -> float:
        values = self._values(f)
        weights = self.probabilities()
        mean = float(np.dot(values, weights))
        return float(np.dot((values - mean) ** 2, weights))

    def std(self, f: Optional[Callable[[T], float]] = None) -> float:
        return float(np.sqrt(self.variance(f)))

    def entropy(self, base: Optional[float] = None) -> float:
        """
        Shannon entropy ``-sum(p * log(p))`` in nats, or in ``base`` units.

        Computed on the stored probabilities without renormalizing, so a
        distribution whose mass has drifted away from one reports that drift.
        """
        if not self._pairs:
            return 0.0
        h = float(np.sum(entr(self.probabilities())))
        if base is not None:
            h /= float(np.log(base))
        return h

    def total(self) -> Probability:
        """Sum of all probabilities. Not validated, so drift is visible here."""
        total = Probability.ZERO
        for _t, p in self._pairs:
            total = total + p
        return total

    def _values(self, f: Optional[Callable[[T], float]]) -> np.ndarray:
        if f is None:
            return np.array([float(t) for t, _p in self._pairs], dtype=float)
        return np.array([float(f(t)) for t, _p in self._pairs], dtype=float)

    # Container protocol

    def outcomes(self) -> List[T]:
        return [t for t, _p in self._pairs]

    def probabilities(self) -> np.ndarray:
        return np.array([p.value for _t, p in self._pairs], dtype=float)

    def items(self) -> List[Pair]:
        return list(self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, outcome: object) -> bool:
        return self._store.find(outcome) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distribution):
            return NotImplemented
        return self._pairs == other._pairs

    def isclose(self, other: "Distribution[T]", *, abs_tol: float = 1e-9) -> bool:
        """
        Compare two distributions outcome by outcome, ignoring order.

        Outcomes missing from one side are compared against zero.
        """
        for t, p in self._pairs:
            if not p.isclose(other.pmf(t), abs_tol=abs_tol):
                return False
        for t, p in other._pairs:
            if t not in self and not p.isclose(Probability.ZERO, abs_tol=abs_tol):
                return False
        return True

    def __repr__(self) -> str:
        body = ", ".join(f"({t!r}, {p.value!r})" for t, p in self._pairs)
        return f"Distribution([{body}])"
