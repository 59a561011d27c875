"""
Plotting utilities for the Bode tooling.
All visualization logic lives here to keep the analysis core headless.
"""

import matplotlib.pyplot as plt
import numpy as np

from config import PLOT_PARAMS


def plot_bode(w, mags, phases, title="Bode Diagram", margins=None, show=False):
    """
    Draws Bode magnitude and phase on two stacked log-frequency axes.

    Args:
        w, mags, phases: Output of core.analysis.bode_sweep.
        margins: Optional (gm, pm, w_pc, w_gc) from get_stability_margins;
            finite crossovers are marked.
        show: Calls plt.show() when True.

    Returns:
        matplotlib.figure.Figure
    """
    fig, (ax_mag, ax_phase) = plt.subplots(
        2, 1, figsize=PLOT_PARAMS["figsize"], sharex=True
    )

    ax_mag.semilogx(w, mags, color=PLOT_PARAMS["mag_color"], lw=2)
    ax_mag.axhline(0, color="k", lw=1, linestyle=":")
    ax_mag.set_title(title)
    ax_mag.set_ylabel("Magnitude (dB)")
    ax_mag.grid(True, which="both", alpha=PLOT_PARAMS["grid_alpha"])

    ax_phase.semilogx(w, phases, color=PLOT_PARAMS["phase_color"], lw=2)
    ax_phase.axhline(-180, color="k", lw=1, linestyle=":")
    ax_phase.set_xlabel("Frequency (rad/s)")
    ax_phase.set_ylabel("Phase (deg)")
    ax_phase.grid(True, which="both", alpha=PLOT_PARAMS["grid_alpha"])

    if margins is not None:
        gm, pm, w_pc, w_gc = margins
        if w_gc > 0:
            ax_mag.axvline(w_gc, color="r", linestyle="--", alpha=0.5)
            ax_phase.axvline(
                w_gc, color="r", linestyle="--", alpha=0.5, label=f"PM = {pm:.1f} deg"
            )
        if w_pc > 0:
            ax_mag.axvline(
                w_pc, color="g", linestyle="--", alpha=0.5, label=f"GM = {gm:.1f} dB"
            )
            ax_phase.axvline(w_pc, color="g", linestyle="--", alpha=0.5)
        if w_gc > 0:
            ax_phase.legend(fontsize=8)
        if w_pc > 0:
            ax_mag.legend(fontsize=8)

    fig.tight_layout()
    if show:
        plt.show()
    return fig


def plot_pole_zero(tf, title="Pole-Zero Map (S-Plane)", show=False):
    """Scatter of poles (x) and zeros (o) of a transfer function."""
    fig, ax = plt.subplots(figsize=PLOT_PARAMS["figsize"])

    poles = np.atleast_1d(tf.poles())
    zeros = np.atleast_1d(tf.zeros())

    ax.scatter(
        poles.real,
        poles.imag,
        marker=PLOT_PARAMS["pole_marker"],
        color="r",
        s=PLOT_PARAMS["marker_size"],
        label="Poles",
    )
    ax.scatter(
        zeros.real,
        zeros.imag,
        marker=PLOT_PARAMS["zero_marker"],
        facecolors="none",
        edgecolors="b",
        s=PLOT_PARAMS["marker_size"],
        label="Zeros",
    )
    ax.axhline(0, color="k", lw=1)
    ax.axvline(0, color="k", lw=1)
    ax.set_title(title)
    ax.set_xlabel("Real")
    ax.set_ylabel("Imaginary")
    ax.grid(True, alpha=PLOT_PARAMS["grid_alpha"])
    ax.legend()

    fig.tight_layout()
    if show:
        plt.show()
    return fig
