"""Line chart of the group risk table."""

from __future__ import annotations

import io
import logging

from matplotlib.figure import Figure
from matplotlib.ticker import PercentFormatter
import numpy as np

from .const import (
    CHART_CAPTION,
    CHART_SUBTITLE,
    CHART_TITLE,
    CHART_X_LABEL,
    CHART_Y_LABEL,
    GROUP_SIZES,
)
from .types import CalculationResult

_LOGGER = logging.getLogger(__name__)

FIGURE_SIZE = (8.0, 5.0)
FIGURE_DPI = 100


def draw_group_risk(figure: Figure, result: CalculationResult) -> Figure:
    """Draw the result onto an existing figure, replacing its content.

    When the result carries an error the message is shown instead of a chart.
    """
    figure.clear()
    ax = figure.add_subplot(1, 1, 1)

    if not result.ok:
        ax.set_axis_off()
        ax.text(
            0.5,
            0.5,
            result.error,
            ha="center",
            va="center",
            wrap=True,
            transform=ax.transAxes,
        )
        return figure

    people = np.array([row.group_size for row in result.group_risk])
    prob_least = np.array([row.prob_at_least_one for row in result.group_risk])

    ax.plot(people, prob_least, "ko-", markersize=4)
    ax.set_xticks(list(GROUP_SIZES))
    ax.set_xlabel(CHART_X_LABEL)
    ax.set_ylabel(CHART_Y_LABEL)
    ax.yaxis.set_major_formatter(PercentFormatter(xmax=100))
    ax.grid(True, which="major", alpha=0.4)
    ax.minorticks_off()

    figure.suptitle(CHART_TITLE, x=0.02, ha="left")
    ax.set_title(CHART_SUBTITLE, loc="left", fontsize="small")
    figure.text(0.98, 0.01, CHART_CAPTION, ha="right", va="bottom", fontsize="x-small")
    figure.tight_layout(rect=(0, 0.04, 1, 1))
    return figure


def build_group_risk_figure(result: CalculationResult) -> Figure:
    """Create a standalone figure for a result."""
    figure = Figure(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
    return draw_group_risk(figure, result)


def render_group_risk_png(result: CalculationResult) -> bytes:
    """Render a result as PNG bytes."""
    figure = build_group_risk_figure(result)
    buffer = io.BytesIO()
    figure.savefig(buffer, format="png")
    _LOGGER.debug("Rendered chart for %s (%d bytes)", result.inputs, buffer.tell())
    return buffer.getvalue()
