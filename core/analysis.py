import logging
from math import inf

import numpy as np

from config import BODE_PARAMS, MARGIN_PARAMS
from core.exceptions import ConvergenceError, DivisionByZeroError
from core.polynomial import evaluate_on_imaginary_axis

logger = logging.getLogger(__name__)

AXIS_ROOT_TOL = 1e-9


def _wrap_degrees(phase):
    """Maps angles in degrees onto [-180, 180)."""
    return (phase + 180.0) % 360.0 - 180.0


def _polynomial_phase(vals):
    """
    Unwrapped phase (rad) of a polynomial sampled along s = jw.

    Roots on the jw axis are taken as the limit of left-half-plane roots, so
    the phase rises by pi across each one. Samples where the polynomial is
    exactly zero are left as nan.
    """
    phase = np.full(vals.shape, np.nan)
    valid = vals != 0
    if not np.any(valid):
        return phase

    unwrapped = np.unwrap(np.angle(vals[valid]))
    steps = np.diff(unwrapped)
    across_gap = np.diff(np.flatnonzero(valid)) > 1
    steps[(steps <= -np.pi + AXIS_ROOT_TOL) | (across_gap & (steps <= 0))] += (
        2.0 * np.pi
    )
    phase[valid] = unwrapped[0] + np.concatenate(([0.0], np.cumsum(steps)))
    return phase


def _loop_phase(tf, w):
    """
    Phase in degrees of tf along s = jw, as Num phase minus Den phase.

    A pole pair on the axis lowers the phase by 180 deg, a zero pair raises
    it. The result is shifted so the first finite sample lies in [-180, 180).
    """
    phase = _polynomial_phase(evaluate_on_imaginary_axis(tf.num, w))
    phase = phase - _polynomial_phase(evaluate_on_imaginary_axis(tf.den, w))

    finite = np.isfinite(phase)
    if np.any(finite):
        first = phase[np.argmax(finite)]
        phase = phase - 2.0 * np.pi * np.floor((first + np.pi) / (2.0 * np.pi))
    return np.degrees(phase)


def bode_sweep(tf, bode_range=None, on_pole=None):
    """
    Bode magnitude and phase of a transfer function over a log-spaced grid.

    Args:
        tf: TransferFunction object.
        bode_range: (start_power, end_power, num_points); defaults to
            BODE_PARAMS["bode_range"].
        on_pole: Pole policy passed to TransferFunction.frequency_response;
            defaults to BODE_PARAMS["on_pole"].

    Returns:
        tuple: (w, mags_db, phases_deg)
    """
    start, end, points = bode_range or BODE_PARAMS["bode_range"]
    on_pole = on_pole or BODE_PARAMS["on_pole"]

    w = np.logspace(start, end, int(points))
    resp = tf.frequency_response(w, on_pole=on_pole)

    with np.errstate(divide="ignore", invalid="ignore"):
        mags = 20.0 * np.log10(np.abs(resp))
    phases = _loop_phase(tf, w)

    return w, mags, phases


def _bisect(f, a, b, tol, maxiter):
    """
    Refines a sign change of f bracketed by 0 < a < b.

    Midpoints are geometric since the grid is logarithmic.
    """
    fa = f(a)
    if fa == 0:
        return a
    fb = f(b)
    if fb == 0:
        return b
    if np.signbit(fa) == np.signbit(fb):
        raise ValueError(f"Crossing is not bracketed: f({a})={fa}, f({b})={fb}")

    for _ in range(maxiter):
        m = np.sqrt(a * b)
        if b - a <= tol * m:
            return m

        fm = f(m)
        if fm == 0:
            return m
        if np.signbit(fa) != np.signbit(fm):
            b = m
        else:
            a, fa = m, fm

    raise ConvergenceError(f"Bisection failed to converge after {maxiter} iterations")


def _first_crossing(values, keys):
    """
    Index i of the first change of keys between finite values[i] and values[i+1].
    """
    finite = np.isfinite(values)
    mask = finite[:-1] & finite[1:] & (keys[:-1] != keys[1:])

    idx = np.flatnonzero(mask)
    return int(idx[0]) if idx.size > 0 else None


def get_stability_margins(tf, w_start=None, w_end=None):
    """
    Calculates Gain Margin and Phase Margin of a Transfer Function.

    Methods:
    - Gain Margin: -|G| (dB) at the frequency where Phase = -180 deg.
    - Phase Margin: 180 + Phase at the frequency where Magnitude = 0 dB.

    Crossovers are bracketed on a log-spaced grid evaluated through the
    real/imaginary split, then refined by bisection on G(jw).

    Args:
        tf: TransferFunction object.
        w_start, w_end: Log10 bounds for frequency search.

    Returns:
        tuple: (Gain Margin, Phase Margin, Phase Crossover Freq, Gain Crossover Freq)
    """
    if w_start is None:
        w_start = MARGIN_PARAMS["w_start"]
    if w_end is None:
        w_end = MARGIN_PARAMS["w_end"]
    tol = MARGIN_PARAMS["tol"]
    maxiter = MARGIN_PARAMS["maxiter"]

    w, mag_db, phase = bode_sweep(
        tf, (w_start, w_end, MARGIN_PARAMS["points"]), on_pole="nan"
    )

    def phase_offset(x):
        try:
            resp = tf.evaluate(1j * x)
        except DivisionByZeroError:
            # the phase steps through -180 deg at an undamped pole
            return 0.0
        return _wrap_degrees(np.angle(resp, deg=True) + 180.0)

    def gain_db(x):
        return 20.0 * np.log10(abs(tf.evaluate(1j * x)))

    w_pc = 0.0
    i = _first_crossing(phase, np.floor((phase + 180.0) / 360.0))
    if i is not None:
        w_pc = _bisect(phase_offset, w[i], w[i + 1], tol, maxiter)

    gain_margin = inf
    if w_pc > 0:
        try:
            gain_margin = -gain_db(w_pc)
        except DivisionByZeroError:
            gain_margin = -inf

    w_gc = 0.0
    i = _first_crossing(mag_db, np.signbit(mag_db))
    if i is not None:
        w_gc = _bisect(gain_db, w[i], w[i + 1], tol, maxiter)

    phase_margin = inf
    if w_gc > 0:
        raw = _wrap_degrees(np.angle(tf.evaluate(1j * w_gc), deg=True))
        phase_at_gc = raw + 360.0 * np.round((phase[i] - raw) / 360.0)
        phase_margin = 180.0 + phase_at_gc

    logger.debug(
        "Margins for %r: GM=%.3f dB @ %.4g rad/s, PM=%.3f deg @ %.4g rad/s",
        tf,
        gain_margin,
        w_pc,
        phase_margin,
        w_gc,
    )
    return gain_margin, phase_margin, w_pc, w_gc
