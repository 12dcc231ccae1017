#!/usr/bin/env python3
"""
Example: Coins and Dice

This example demonstrates the core combinators:
- Building distributions with uniform, always and explicit pairs
- Chaining experiments with and_then
- Conditioning with given
- Expectation and convolution
"""

import enum
import os
import sys

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from porco import Distribution
from porco.diagnostics import DistributionReport


class Coin(enum.Enum):
    HEADS = "heads"
    TAILS = "tails"


def flip() -> Distribution:
    return Distribution.uniform([Coin.HEADS, Coin.TAILS])


def reflip_if_tails(coin: Coin) -> Distribution:
    if coin is Coin.HEADS:
        return Distribution.always(Coin.HEADS)
    return flip()


print("=" * 60)
print("Example: Coins and Dice")
print("=" * 60)

# A biased coin is defined from explicit probabilities.
biased = Distribution([(Coin.HEADS, 0.75), (Coin.TAILS, 0.25)])
print(f"\nBiased coin: {biased}")

# A fair coin is re-flipped when it lands tails.
reflipped = flip().and_then(reflip_if_tails)
print(f"Re-flip on tails: P(heads) = {float(reflipped.pmf(Coin.HEADS)):.3f}")

# A die is conditioned on showing at most four.
die = Distribution.uniform([1, 2, 3, 4, 5, 6])
low = die.given(lambda v: v <= 4)
print(f"\nE[die | die <= 4] = {low.expectation():.3f}")

# Two independent dice are summed.
two_dice = die + die
print("\nSum of two dice:")
for total, p in two_dice:
    print(f"  {total:>2}: {float(p):.4f} {'#' * int(round(float(p) * 100))}")
print(f"E[sum] = {two_dice.expectation():.3f}, std = {two_dice.std():.3f}")

report = DistributionReport.from_distribution(two_dice)
print(f"\nTotal mass {report.total_mass:.12f} (normalized: {report.is_normalized})")
