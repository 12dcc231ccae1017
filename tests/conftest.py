"""
Shared fixtures: a coin and a six-sided die.
"""

from __future__ import annotations

import enum

import pytest

from porco import Distribution


class Coin(enum.Enum):
    HEADS = "heads"
    TAILS = "tails"


class Die(enum.IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


def flip() -> Distribution[Coin]:
    return Distribution.uniform([Coin.HEADS, Coin.TAILS])


def roll() -> Distribution[Die]:
    return Distribution.uniform(list(Die))


@pytest.fixture
def coin() -> Distribution[Coin]:
    return flip()


@pytest.fixture
def die() -> Distribution[Die]:
    return roll()
