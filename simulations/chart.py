# simulations/chart.py

from __future__ import annotations

import logging
import math
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from tmr_voting.modules import TRUE_VALUE  # noqa: E402

from .common import success_rate  # noqa: E402


logger = logging.getLogger(__name__)

# 1920x1080 at 100 dpi
FIG_SIZE = (19.2, 10.8)
FIG_DPI = 100

CLASSIC_COLOR = "#0072bd"
MAP_COLOR = "#d95319"


def chart_title(n: int, seed: int, reliabilities: Sequence[float]) -> str:
    r0, r1, r2 = reliabilities
    return (
        f"TMR Comparison (Odd Case) | R = ({r0:.1f}, {r1:.1f}, {r2:.1f}) "
        f"| true = {TRUE_VALUE} | N = {n} | seed = {seed}"
    )


def render_chart(
    path: str,
    n: int,
    seed: int,
    reliabilities: Sequence[float],
    classic_ok: int,
    map_ok: int,
) -> None:
    """
    Write a bar chart comparing the two success counts to `path`.

    Called only after the run is complete; file errors propagate to the
    caller (OSError from savefig).
    """
    y_top = math.ceil(max(classic_ok, map_ok, 1) * 1.25)

    fig = plt.figure(figsize=FIG_SIZE, dpi=FIG_DPI)
    try:
        ax = fig.add_axes([0.08, 0.2, 0.88, 0.7])

        bars = ax.bar(
            [0, 1],
            [classic_ok, map_ok],
            width=0.9,
            color=[CLASSIC_COLOR, MAP_COLOR],
        )
        for bar, ok in zip(bars, (classic_ok, map_ok)):
            pct = success_rate(ok, n) * 100.0
            ax.text(
                bar.get_x() + bar.get_width() / 2,
                ok + y_top / 40,
                f"{ok} ({pct:.2f}%)",
                ha="center",
                fontsize=20,
            )

        ax.set_xticks([0, 1])
        ax.set_xticklabels(["Classic", "MAP"])
        ax.set_ylim(0, y_top)
        ax.set_xlabel("Voter Type", fontsize=20)
        ax.set_ylabel(f"Count of output = {TRUE_VALUE}", fontsize=20)
        ax.tick_params(labelsize=18)
        ax.grid(axis="y", alpha=0.1, color="black")
        ax.set_title(chart_title(n, seed, reliabilities), fontsize=28)

        fig.text(0.03, 0.08, "Classic voter: majority with random tie-break", fontsize=18)
        fig.text(
            0.03,
            0.04,
            "MAP voter: reliability-aware (uses Ri and uniform fault model)",
            fontsize=18,
        )

        fig.savefig(path, format="png")
    finally:
        plt.close(fig)

    logger.debug("wrote chart to %s", path)
