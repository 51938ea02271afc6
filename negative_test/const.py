"""Constants for the negative test calculator."""

from __future__ import annotations

from typing import Final

# Input keys
ATTR_PRIOR: Final = "prior"
ATTR_FALSE_NEGATIVE_RATE: Final = "false_negative_rate"
ATTR_FALSE_POSITIVE_RATE: Final = "false_positive_rate"

INPUT_KEYS: Final[tuple[str, ...]] = (
    ATTR_PRIOR,
    ATTR_FALSE_NEGATIVE_RATE,
    ATTR_FALSE_POSITIVE_RATE,
)

# Prior belief about incidence, in percent
MIN_PRIOR: Final[float] = 0.0
MAX_PRIOR: Final[float] = 100.0
DEFAULT_PRIOR: Final[float] = 0.1
STEP_PRIOR: Final[float] = 0.01

# Test error rates, as fractions
MIN_RATE: Final[float] = 0.0
MAX_RATE: Final[float] = 1.0
DEFAULT_FALSE_NEGATIVE_RATE: Final[float] = 0.28
DEFAULT_FALSE_POSITIVE_RATE: Final[float] = 0.01
STEP_RATE: Final[float] = 0.01

# Group risk projection
MIN_GROUP_SIZE: Final = 1
MAX_GROUP_SIZE: Final = 10
GROUP_SIZES: Final[tuple[int, ...]] = tuple(range(MIN_GROUP_SIZE, MAX_GROUP_SIZE + 1))

# Decimal digits shown for the posterior
DISPLAY_PRECISION: Final = 5

# Labels
NAME_PRIOR: Final = "Prior Belief about incidence (%)"
NAME_FALSE_NEGATIVE_RATE: Final = "False Negative Rate of Test:"
NAME_FALSE_POSITIVE_RATE: Final = "False Positive Rate of Test:"

TITLE: Final = "What is the probability of not having COVID with negative test?"
SUMMARY_PREFIX: Final = (
    "probability of no covid infection given negative test result:"
)
DOMAIN_ERROR_MESSAGE: Final = (
    "The probability is undefined for these inputs: a negative test result "
    "cannot occur. This happens with a prior of 100% and a false negative "
    "rate of 0, or with a prior of 0% and a false positive rate of 1."
)

CHART_TITLE: Final = "Prob at least 1 out of x people has covid"
CHART_SUBTITLE: Final = (
    "All persons present a negative covid test with same characteristics"
)
CHART_X_LABEL: Final = "people"
CHART_Y_LABEL: Final = "Probability at least 1 covid among x people in Percent"
CHART_CAPTION: Final = (
    "Assumes that all persons come from the same population "
    "(parameter `Prior Belief about incidence` is the same)"
)
INDEPENDENCE_ASSUMPTION: Final = (
    "Each of the n people is assumed to be drawn independently from the same "
    "population and to carry an independent negative test of identical "
    "characteristics. This independence is a simplification, not a "
    "statistical fact."
)

# Slider definitions shared by the front ends
SLIDERS: Final[tuple[dict[str, object], ...]] = (
    {
        "key": ATTR_PRIOR,
        "label": NAME_PRIOR,
        "min": MIN_PRIOR,
        "max": MAX_PRIOR,
        "step": STEP_PRIOR,
        "default": DEFAULT_PRIOR,
    },
    {
        "key": ATTR_FALSE_NEGATIVE_RATE,
        "label": NAME_FALSE_NEGATIVE_RATE,
        "min": MIN_RATE,
        "max": MAX_RATE,
        "step": STEP_RATE,
        "default": DEFAULT_FALSE_NEGATIVE_RATE,
    },
    {
        "key": ATTR_FALSE_POSITIVE_RATE,
        "label": NAME_FALSE_POSITIVE_RATE,
        "min": MIN_RATE,
        "max": MAX_RATE,
        "step": STEP_RATE,
        "default": DEFAULT_FALSE_POSITIVE_RATE,
    },
)
