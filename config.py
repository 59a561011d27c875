"""
Central Configuration Module for ControlWeb's analysis core.

This module holds the default frequency grids, margin-search settings,
plotting preferences and logging options used by the Bode tooling.
"""

BODE_PARAMS = {
    "bode_range": (-1, 3, 500),
    "on_pole": "nan",
}

MARGIN_PARAMS = {
    "w_start": -2,
    "w_end": 5,
    "points": 200,
    "tol": 1e-10,
    "maxiter": 200,
}

PLOT_PARAMS = {
    "figsize": (10, 8),
    "grid_alpha": 0.3,
    "mag_color": "k",
    "phase_color": "b",
    "pole_marker": "x",
    "zero_marker": "o",
    "marker_size": 80,
}

LOGGING_PARAMS = {
    "level": "WARNING",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}

"""
--------------------------------------------------------------------------------
1. BODE_PARAMS (Frequency Sweep)
--------------------------------------------------------------------------------
Default grid for Bode magnitude/phase sweeps along s = j*w.

Parameters:
- bode_range: (start_power, end_power, num_points).
    * Defines frequency range 10^start to 10^end rad/s.
- on_pole: Policy when a sweep frequency lands exactly on a pole.
    * "raise": stop with DivisionByZeroError.
    * "nan": store nan so the plot shows a discontinuity.

--------------------------------------------------------------------------------
2. MARGIN_PARAMS (Stability Margins)
--------------------------------------------------------------------------------
Settings for the gain/phase margin search.

Parameters:
- w_start, w_end: Log10 bounds of the coarse search grid.
- points: Number of grid points used to bracket crossovers.
- tol: Relative frequency tolerance of the bisection refinement.
- maxiter: Bisection iteration budget before ConvergenceError.

--------------------------------------------------------------------------------
3. PLOT_PARAMS (Visualization)
--------------------------------------------------------------------------------
Settings for the Matplotlib rendering helpers.

--------------------------------------------------------------------------------
4. LOGGING_PARAMS
--------------------------------------------------------------------------------
- level: Root logging level name used by helpers.log.setup_logging.
- format: logging.Formatter format string.
"""
