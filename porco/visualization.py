"""
Visualization tools for distributions.

This module provides bar charts of probability mass functions and
probability trees for two-stage experiments built with ``and_then``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from porco.distribution import Distribution


def _label(outcome: Any) -> str:
    text = str(outcome)
    return text if len(text) <= 24 else text[:21] + "..."


class DistributionVisualizer:
    """
    Plots distributions with matplotlib.

    All methods draw onto ``ax`` when one is given, create a new figure
    otherwise, and return the axes.
    """

    @staticmethod
    def plot_pmf(
        dist: Distribution[Any],
        ax: Optional[plt.Axes] = None,
        labels: Optional[Sequence[str]] = None,
        title: Optional[str] = None,
    ) -> plt.Axes:
        """
        Plot the probability mass function as a bar chart.

        Args:
            dist: Distribution to plot. Bars follow the distribution's
                outcome order.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            labels: Optional tick labels, one per outcome. Defaults to
                ``str(outcome)``.
            title: Optional plot title.

        Returns:
            Matplotlib axes object.

        Raises:
            ValueError: If ``labels`` has the wrong length.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 5))

        outcomes = dist.outcomes()
        if labels is None:
            labels = [_label(t) for t in outcomes]
        elif len(labels) != len(outcomes):
            raise ValueError(
                f"labels has length {len(labels)}, expected {len(outcomes)}"
            )

        x = np.arange(len(outcomes))
        probs = dist.probabilities()
        ax.bar(x, probs, color="#3498db", edgecolor="black", alpha=0.8)
        ax.set_xticks(x)
        if len(outcomes) > 8:
            ax.set_xticklabels(list(labels), rotation=45, ha="right")
        else:
            ax.set_xticklabels(list(labels))
        ax.set_ylabel("Probability")
        ax.set_ylim(0.0, max(1.0, float(np.max(probs)) if probs.size else 1.0))
        ax.set_title(title or f"Probability Mass Function ({len(outcomes)} outcomes)")
        ax.grid(axis="y", alpha=0.3)
        return ax

    @staticmethod
    def plot_tree(
        dist: Distribution[Any],
        f: Callable[[Any], Distribution[Any]],
        ax: Optional[plt.Axes] = None,
        show_path_probabilities: bool = True,
    ) -> plt.Axes:
        """
        Plot the probability tree of ``dist.and_then(f)``.

        The root branches into the outcomes of ``dist``; each of those
        branches into the outcomes of ``f(outcome)``. Edge labels are branch
        probabilities and leaf labels optionally carry the path probability.

        Args:
            dist: First-stage distribution.
            f: Second-stage experiment for each first-stage outcome.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            show_path_probabilities: Whether to append the path probability
                to leaf labels.

        Returns:
            Matplotlib axes object.

        Raises:
            ValueError: If ``dist`` has no outcomes.
        """
        if len(dist) == 0:
            raise ValueError("dist cannot be empty")

        if ax is None:
            _, ax = plt.subplots(figsize=(10, 8))

        graph = nx.DiGraph()
        graph.add_node(0, label="start")
        pos: Dict[int, Tuple[float, float]] = {}
        stage_one: List[int] = []
        leaves: List[int] = []

        for t, p in dist:
            node = graph.number_of_nodes()
            graph.add_node(node, label=_label(t))
            graph.add_edge(0, node, weight=float(p))
            stage_one.append(node)
            for u, p2 in f(t):
                leaf = graph.number_of_nodes()
                label = _label(u)
                if show_path_probabilities:
                    label = f"{label}\n{float(p * p2):.3g}"
                graph.add_node(leaf, label=label)
                graph.add_edge(node, leaf, weight=float(p2))
                leaves.append(leaf)

        # Leaves are spaced evenly; each first-stage node sits at the mean of its children.
        n_leaves = max(len(leaves), 1)
        for i, leaf in enumerate(leaves):
            pos[leaf] = (2.0, 1.0 - i / max(n_leaves - 1, 1))
        for i, node in enumerate(stage_one):
            children = list(graph.successors(node))
            if children:
                y = float(np.mean([pos[c][1] for c in children]))
            else:
                y = 1.0 - i / max(len(stage_one) - 1, 1)
            pos[node] = (1.0, y)
        pos[0] = (0.0, float(np.mean([pos[n][1] for n in stage_one])))

        weights = [float(d.get("weight", 0.0)) for _u, _v, d in graph.edges(data=True)]
        widths = [0.6 + 3.4 * w for w in weights]

        nx.draw_networkx_nodes(graph, pos, node_size=350, node_color="#3498db", ax=ax)
        nx.draw_networkx_edges(
            graph,
            pos,
            width=widths,
            edge_color="#95a5a6",
            arrows=True,
            arrowsize=10,
            alpha=0.8,
            ax=ax,
        )
        nx.draw_networkx_labels(
            graph,
            pos,
            labels={n: d["label"] for n, d in graph.nodes(data=True)},
            font_size=8,
            ax=ax,
        )
        nx.draw_networkx_edge_labels(
            graph,
            pos,
            edge_labels={(u, v): f"{d['weight']:.3g}" for u, v, d in graph.edges(data=True)},
            font_size=7,
            ax=ax,
        )

        ax.set_title(f"Probability Tree ({len(leaves)} paths)")
        ax.axis("off")
        return ax
