"""Bayesian probability of no infection given a negative test."""

from __future__ import annotations

import logging

from .const import (
    ATTR_FALSE_NEGATIVE_RATE,
    ATTR_FALSE_POSITIVE_RATE,
    ATTR_PRIOR,
    GROUP_SIZES,
    MAX_PRIOR,
    MAX_RATE,
    MIN_PRIOR,
    MIN_RATE,
)
from .exceptions import DomainError
from .types import GroupRisk
from .utils import ensure_in_range

_LOGGER = logging.getLogger(__name__)


# ────────────────────────────────────── Core Bayes ───────────────────────────
def compute_posterior(
    prior: float, false_negative_rate: float, false_positive_rate: float
) -> float:
    """Compute P(no infection | negative test) via Bayes' rule.

    Args:
        prior: Belief about infection incidence in the population, in percent
        false_negative_rate: P(negative test | infected)
        false_positive_rate: P(positive test | not infected)

    Returns:
        Probability in [0, 1] that a person with a negative test is uninfected

    Raises:
        InvalidInputError: If an input is outside its range or not finite
        DomainError: If the posterior is undefined (0/0): a prior of 100% with
            a false negative rate of 0, or a prior of 0% with a false positive
            rate of 1

    """
    prior = ensure_in_range(ATTR_PRIOR, prior, MIN_PRIOR, MAX_PRIOR)
    false_negative_rate = ensure_in_range(
        ATTR_FALSE_NEGATIVE_RATE, false_negative_rate, MIN_RATE, MAX_RATE
    )
    false_positive_rate = ensure_in_range(
        ATTR_FALSE_POSITIVE_RATE, false_positive_rate, MIN_RATE, MAX_RATE
    )

    prior_fraction = prior / 100
    # P(negative | not infected) * P(not infected)
    numerator = (1 - false_positive_rate) * (1 - prior_fraction)
    # ... + P(negative | infected) * P(infected)
    denominator = numerator + false_negative_rate * prior_fraction

    _LOGGER.debug(
        "prior_fraction = %.5f, numerator = %.5f, denominator = %.5f",
        prior_fraction,
        numerator,
        denominator,
    )

    # denominator >= numerator >= 0, so a zero denominator means 0/0; any
    # positive denominator, however small, gives a posterior in [0, 1]
    if denominator == 0.0:
        raise DomainError(
            "Posterior is undefined: a negative test cannot occur with "
            f"prior={prior:g}%, false_negative_rate={false_negative_rate:g} "
            f"and false_positive_rate={false_positive_rate:g}"
        )

    return numerator / denominator


def compute_group_risk_table(posterior: float) -> tuple[GroupRisk, ...]:
    """Project the risk that at least one of n tested people is infected.

    For each group size n in 1..10 the percent probability is
    ``(1 - posterior ** n) * 100``.

    Modeling assumption: each of the n people is drawn from the same
    population and carries an independent negative test of identical
    characteristics. Independence across the n people is a simplification,
    not a statistical fact.

    Args:
        posterior: P(no infection | negative test) for one person

    Returns:
        Ten rows ordered by ascending group size

    Raises:
        InvalidInputError: If posterior is outside [0, 1] or not finite

    """
    posterior = ensure_in_range("posterior", posterior, 0.0, 1.0)
    return tuple(
        GroupRisk(group_size=n, prob_at_least_one=(1 - posterior**n) * 100)
        for n in GROUP_SIZES
    )
