"""
Unit tests for expectation, spread, entropy and convolution.
"""

from __future__ import annotations

import math

import pytest

from conftest import Coin, Die
from porco import Distribution, Probability


class TestExpectation:
    """Test suite for expectation and variance."""

    def test_fair_die(self, die) -> None:
        """A fair die has expectation 3.5."""
        assert math.isclose(die.expectation(), 3.5)

    def test_conditional_expectation(self) -> None:
        """A die conditioned on at most four has expectation 2.5."""
        dist = Distribution.uniform([1, 2, 3, 4, 5, 6])
        assert math.isclose(dist.given(lambda v: v <= 4).expectation(), 2.5)

    def test_expectation_of_function(self, coin) -> None:
        """Expectation of a payout function over a coin."""
        payout = coin.expectation(lambda c: 10.0 if c is Coin.HEADS else -2.0)
        assert math.isclose(payout, 4.0)

    def test_boolean_outcomes(self, die) -> None:
        """Boolean outcomes count as zero and one."""
        six = die.map(lambda d: d == Die.SIX)
        assert math.isclose(six.expectation(), 1.0 / 6.0)

    def test_non_numeric_outcomes_raise(self, coin) -> None:
        """Test that outcomes without a float conversion raise."""
        with pytest.raises((TypeError, ValueError)):
            coin.expectation()

    def test_variance_and_std(self, die) -> None:
        """Variance and standard deviation of a fair die."""
        assert math.isclose(die.variance(), 35.0 / 12.0)
        assert math.isclose(die.std(), math.sqrt(35.0 / 12.0))
        assert Distribution.always(3).variance() == 0.0


class TestEntropy:
    """Test suite for Shannon entropy."""

    def test_fair_coin_is_one_bit(self, coin) -> None:
        """A fair coin carries one bit."""
        assert math.isclose(coin.entropy(base=2), 1.0)

    def test_uniform_die_in_nats(self, die) -> None:
        """A uniform die carries log(6) nats."""
        assert math.isclose(die.entropy(), math.log(6))

    def test_certain_outcome(self) -> None:
        """A certain outcome carries no information."""
        assert Distribution.always("x").entropy() == 0.0

    def test_drifted_mass_is_not_renormalized(self) -> None:
        """Entropy uses the stored probabilities, drift included."""
        dist = Distribution([("a", 0.75), ("a", 0.75), ("b", 0.5)])
        assert dist.total() == Probability(0.75) + Probability(0.75) + Probability(0.5)
        expected = -(1.5 * math.log2(1.5) + 0.5 * math.log2(0.5))
        assert math.isclose(dist.entropy(base=2), expected)


class TestConvolve:
    """Test suite for convolution of independent variables."""

    def test_two_uniform_over_one_two(self) -> None:
        """Summing two uniform {1, 2} variables gives 1/4, 1/2, 1/4."""
        x = Distribution.uniform([1, 2])
        y = Distribution.uniform([1, 2])
        total = x.convolve(y)
        assert total.pmf(2) == Probability(0.25)
        assert total.pmf(3) == Probability(0.5)
        assert total.pmf(4) == Probability(0.25)
        assert total.outcomes() == [2, 3, 4]

    def test_add_operator(self) -> None:
        """The + operator convolves."""
        x = Distribution.uniform([1, 2])
        assert x + x == x.convolve(x)

    def test_two_dice(self, die) -> None:
        """Two dice give eleven sums centred on seven."""
        total = die + die
        assert len(total) == 11
        assert total.pmf(7).isclose(6.0 / 36.0)
        assert math.isclose(total.expectation(), 7.0)

    def test_matches_and_then(self, die) -> None:
        """Convolution agrees with the equivalent and_then."""
        via_bind = die.and_then(lambda a: die.map(lambda b: a + b))
        assert (die + die).isclose(via_bind)

    def test_add_non_distribution(self, die) -> None:
        """Test that adding a non-distribution raises TypeError."""
        with pytest.raises(TypeError):
            die + 1  # type: ignore[operator]

    def test_total_mass(self, die) -> None:
        """Convolution conserves total mass."""
        assert (die + die).total().isclose(1.0)
