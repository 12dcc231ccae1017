"""
Unit tests for distribution plots.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from conftest import Coin, flip
from porco import Distribution
from porco.visualization import DistributionVisualizer


def test_plot_pmf_returns_axes(die) -> None:
    ax = DistributionVisualizer.plot_pmf(die + die)
    assert ax is not None
    assert len(ax.patches) == 11
    plt.close("all")


def test_plot_pmf_on_existing_axes(coin) -> None:
    _, ax = plt.subplots()
    out = DistributionVisualizer.plot_pmf(coin, ax=ax, labels=["H", "T"], title="Coin")
    assert out is ax
    assert ax.get_title() == "Coin"
    plt.close("all")


def test_plot_pmf_label_mismatch(coin) -> None:
    with pytest.raises(ValueError, match="labels has length"):
        DistributionVisualizer.plot_pmf(coin, labels=["H"])
    plt.close("all")


def test_plot_tree(coin) -> None:
    def reflip_if_tails(c: Coin) -> Distribution:
        return Distribution.always(Coin.HEADS) if c is Coin.HEADS else flip()

    ax = DistributionVisualizer.plot_tree(coin, reflip_if_tails)
    assert ax.get_title() == "Probability Tree (3 paths)"
    plt.close("all")


def test_plot_tree_empty() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        DistributionVisualizer.plot_tree(Distribution([]), lambda t: Distribution.always(t))
