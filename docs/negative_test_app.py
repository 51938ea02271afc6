# ruff: noqa: INP001
"""Negative Test Calculator - Tkinter Demo.

This GUI binds three sliders (prior incidence, false negative rate, false
positive rate) to a text line and a line chart. Every slider move is an
input-change event for the coordinator, which recalculates the posterior and
the group risk table and re-renders both outputs.

Run with:  python negative_test_app.py
"""

from __future__ import annotations

import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from negative_test.chart import FIGURE_DPI, FIGURE_SIZE, draw_group_risk
from negative_test.const import DISPLAY_PRECISION, SLIDERS, TITLE
from negative_test.coordinator import CalculatorCoordinator
from negative_test.types import CalculationResult
from negative_test.utils import format_summary

# ─────────────────────────────────────────────────────────────────────────────
#  Main application
# ─────────────────────────────────────────────────────────────────────────────


class NegativeTestApp:
    """Main application class for the negative test demo."""

    def __init__(self, master: tk.Tk):
        """Initialize the calculator window."""
        self.master = master
        master.title(TITLE)

        self.coordinator = CalculatorCoordinator()

        # Sliders -----------------------------------------------------------
        controls = tk.LabelFrame(master, text="Inputs", padx=5, pady=5)
        controls.grid(row=0, column=0, padx=5, pady=5, sticky="ns")

        self.scales: dict[str, tk.Scale] = {}
        for row, slider in enumerate(SLIDERS):
            key = slider["key"]
            scale = tk.Scale(
                controls,
                label=slider["label"],
                from_=slider["min"],
                to=slider["max"],
                resolution=slider["step"],
                digits=DISPLAY_PRECISION,
                orient=tk.HORIZONTAL,
                length=260,
                command=lambda value, key=key: self.on_slider(key, value),
            )
            scale.set(slider["default"])
            scale.grid(row=row, column=0, pady=4, sticky="ew")
            self.scales[key] = scale

        self.lbl_summary = tk.Label(
            controls, text="", wraplength=260, justify=tk.LEFT, bg="white"
        )
        self.lbl_summary.grid(row=len(SLIDERS), column=0, pady=10, sticky="ew")

        # Chart -------------------------------------------------------------
        self.figure = Figure(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
        self.canvas = FigureCanvasTkAgg(self.figure, master=master)
        self.canvas.get_tk_widget().grid(row=0, column=1, padx=5, pady=5)

        self.coordinator.add_listener(self.render)
        self.coordinator.refresh()

    # ------------------------------------------------------------------
    def on_slider(self, key: str, value: str) -> None:
        """Forward a slider move to the coordinator."""
        self.coordinator.update_input(key, float(value))

    def render(self, result: CalculationResult) -> None:
        """Re-render the text line and the chart."""
        if result.ok:
            self.lbl_summary.configure(
                text=format_summary(result.posterior), fg="black"
            )
        else:
            self.lbl_summary.configure(text=result.error, fg="red")
        draw_group_risk(self.figure, result)
        self.canvas.draw_idle()


# ─────────────────────────────────────────────────────────────────────────────
#  Entrypoint
# ─────────────────────────────────────────────────────────────────────────────


def main():
    """Negative test calculator demo."""

    tk_root = tk.Tk()
    NegativeTestApp(tk_root)
    tk_root.mainloop()


if __name__ == "__main__":
    main()
