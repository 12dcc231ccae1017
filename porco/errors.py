"""
Error types raised by porco.

Both errors subclass ``ValueError`` so callers that already guard against bad
inputs with ``except ValueError`` keep working.
"""


class InvalidProbabilityError(ValueError):
    """A real value outside [0, 1] was converted into a Probability."""


class DegenerateDistributionError(ValueError):
    """
    A distribution could not be normalized because it carries no mass.

    Raised by ``Distribution.uniform`` over zero outcomes and by
    ``Distribution.given`` when no outcome satisfies the condition.
    """
