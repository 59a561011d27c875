import logging

import numpy as np

from core.exceptions import DivisionByZeroError, InvalidParameterError
from core.polynomial import (
    as_coefficients,
    as_frequencies,
    evaluate,
    evaluate_on_imaginary_axis,
)

logger = logging.getLogger(__name__)

POLE_POLICIES = ("raise", "nan")


def _divide(n_val, d_val, s):
    if d_val == 0:
        raise DivisionByZeroError(f"Denominator evaluates to zero at s={s} (pole).")
    return n_val / d_val


def _trim(poly):
    """Drops leading zero coefficients, keeping at least the constant term."""
    poly = np.trim_zeros(np.asarray(poly, dtype=float), "f")
    return poly.tolist() if poly.size else [0.0]


def evaluate_transfer_function(num, den):
    """
    Builds a pure function s -> Num(s) / Den(s).

    The coefficient sequences are validated once, up front. The returned
    function raises DivisionByZeroError at a pole.
    """
    num = as_coefficients(num)
    den = as_coefficients(den)

    def response(s):
        return _divide(evaluate(num, s), evaluate(den, s), s)

    return response


class TransferFunction:
    """
    Representation of a Single-Input Single-Output (SISO) Transfer Function.
    G(s) = Num(s) / Den(s)

    Coefficients are ordered from the highest-degree term down to the constant.
    Instances are immutable; the block operations return new objects.
    """

    def __init__(self, num, den):
        self.num = as_coefficients(num)
        self.den = as_coefficients(den)
        if not np.any(self.den):
            raise DivisionByZeroError("Denominator polynomial is identically zero.")
        self.repr_num = np.asarray(num).tolist()
        self.repr_den = np.asarray(den).tolist()

    def __repr__(self):
        return f"TF(Num={self.repr_num}, Den={self.repr_den})"

    def __call__(self, s):
        return self.evaluate(s)

    def evaluate(self, s):
        """
        Evaluates G(s) at a complex number s by direct summation.

        Raises:
            DivisionByZeroError: If s is a pole (Den(s) == 0 exactly).
        """
        return _divide(evaluate(self.num, s), evaluate(self.den, s), s)

    def frequency_response(self, omega, on_pole="raise"):
        """
        Complex response G(jw) over a frequency grid.

        Uses the real/imaginary coefficient split, so no per-point complex
        arithmetic happens before the final division.

        Args:
            omega (array-like): Frequencies in rad/s.
            on_pole (str): "raise" raises DivisionByZeroError at the first
                frequency where Den(jw) == 0; "nan" stores nan + nan*j there.

        Returns:
            np.ndarray: complex128 array, one value per frequency.
        """
        if on_pole not in POLE_POLICIES:
            raise InvalidParameterError(
                f"Unknown pole policy {on_pole!r}; expected one of {POLE_POLICIES}."
            )

        w = as_frequencies(omega)
        n_vals = evaluate_on_imaginary_axis(self.num, w)
        d_vals = evaluate_on_imaginary_axis(self.den, w)

        poles = d_vals == 0
        if np.any(poles):
            if on_pole == "raise":
                w_pole = w[np.argmax(poles)]
                raise DivisionByZeroError(
                    f"Denominator evaluates to zero at w={w_pole} rad/s (pole)."
                )
            logger.debug("%d pole(s) hit on the jw axis", int(np.sum(poles)))

        resp = np.full(n_vals.shape, complex(np.nan, np.nan))
        np.divide(n_vals, d_vals, out=resp, where=~poles)
        return resp

    def bode_response(self, omega_range, on_pole="raise"):
        """Calculates Magnitude (dB) and Phase (deg) over a frequency range."""
        resp = self.frequency_response(omega_range, on_pole=on_pole)
        with np.errstate(divide="ignore", invalid="ignore"):
            mags = 20.0 * np.log10(np.abs(resp))
        phases = np.degrees(np.angle(resp))
        return mags, phases

    def poles(self):
        return np.roots(self.den)

    def zeros(self):
        return np.roots(self.num)

    def dc_gain(self):
        """G(0). Raises DivisionByZeroError for systems with a pole at the origin."""
        return self.evaluate(0.0).real

    def series(self, other):
        """Cascade of two blocks: G1(s) * G2(s)."""
        num = np.polymul(self.num, other.num)
        den = np.polymul(self.den, other.den)
        return TransferFunction(_trim(num), _trim(den))

    def parallel(self, other, sign=1):
        """Adder block combining two branches: G1(s) + sign * G2(s)."""
        if sign not in (1, -1):
            raise InvalidParameterError(f"Adder sign must be +1 or -1, got {sign!r}.")
        num = np.polyadd(
            np.polymul(self.num, other.den), sign * np.polymul(other.num, self.den)
        )
        den = np.polymul(self.den, other.den)
        return TransferFunction(_trim(num), _trim(den))

    def feedback(self, other=None, sign=-1):
        """
        Closed loop G / (1 - sign * G * H).

        Negative feedback (sign=-1) by default; unity feedback when `other`
        is omitted.
        """
        if sign not in (1, -1):
            raise InvalidParameterError(
                f"Feedback sign must be +1 or -1, got {sign!r}."
            )
        if other is None:
            other = TransferFunction([1.0], [1.0])

        num = np.polymul(self.num, other.den)
        den = np.polysub(
            np.polymul(self.den, other.den),
            sign * np.polymul(self.num, other.num),
        )
        return TransferFunction(_trim(num), _trim(den))
