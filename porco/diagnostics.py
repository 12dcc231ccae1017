from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from porco.distribution import Distribution

DEFAULT_TOL = 1e-9


@dataclass(frozen=True)
class DistributionReport:
    """
    Numeric health of a distribution.

    Probability arithmetic is never re-validated, so long chains of
    combinators can drift away from a total mass of one or produce values just
    outside [0, 1]. This report measures that drift without correcting it.
    """

    n_outcomes: int
    total_mass: float
    sum_to_one_error: float
    min_probability: float
    max_probability: float
    out_of_range: int
    is_normalized: bool

    @staticmethod
    def from_distribution(dist: Distribution[Any], *, tol: float = DEFAULT_TOL) -> "DistributionReport":
        p = dist.probabilities()
        total = float(np.sum(p))
        sum_err = float(abs(total - 1.0))
        min_p = float(np.min(p)) if p.size else float("nan")
        max_p = float(np.max(p)) if p.size else float("nan")

        # Values within tol of the unit interval are treated as rounding noise.
        out_of_range = int(np.count_nonzero((p < -float(tol)) | (p > 1.0 + float(tol))))

        return DistributionReport(
            n_outcomes=int(p.size),
            total_mass=total,
            sum_to_one_error=sum_err,
            min_probability=min_p,
            max_probability=max_p,
            out_of_range=out_of_range,
            is_normalized=bool(sum_err <= float(tol) and out_of_range == 0),
        )
