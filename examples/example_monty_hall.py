#!/usr/bin/env python3
"""
Example: Monty Hall

The classic game show problem, modelled as a sequence of experiments:
the prize is placed, the contestant picks a door, the host opens a door
that hides a goat, and the contestant either stays or switches.
"""

import os
import sys

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib

matplotlib.use("Agg")

from porco import Distribution
from porco.visualization import DistributionVisualizer

DOORS = (1, 2, 3)


def host_opens(state):
    prize, pick = state
    options = [d for d in DOORS if d != prize and d != pick]
    return Distribution.uniform([(prize, pick, opened) for opened in options])


def play(switch: bool) -> Distribution:
    placed = Distribution.uniform(DOORS)
    picked = placed.joint(Distribution.uniform(DOORS))
    opened = picked.and_then(host_opens)

    def final_pick(state):
        prize, pick, opened_door = state
        if switch:
            pick = next(d for d in DOORS if d != pick and d != opened_door)
        return pick == prize

    return opened.map(final_pick)


print("=" * 60)
print("Example: Monty Hall")
print("=" * 60)

for switch in (False, True):
    outcome = play(switch)
    label = "switch" if switch else "stay"
    print(f"P(win | {label}) = {float(outcome.pmf(True)):.4f}")

# The first two stages are drawn as a probability tree.
ax = DistributionVisualizer.plot_tree(
    Distribution.uniform(DOORS), lambda prize: Distribution.uniform(DOORS)
)
out_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "monty_hall_tree.png")
ax.figure.savefig(out_path, dpi=100)
print(f"\nProbability tree saved to {out_path}")
