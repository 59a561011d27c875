"""
Polynomial evaluation kernels for transfer-function analysis.

Coefficient sequences are ordered from the highest-degree term down to the
constant term: [5, 3, 7] <-> 5*s^2 + 3*s + 7.

Two evaluation paths are offered:

- A complex-argument path (`evaluate`) that sums coefficient * s^k directly.
- A purely-imaginary fast path (`real_terms` / `imag_terms`) that rewrites a
  polynomial in s as two real polynomials in w after substituting s = j*w,
  so frequency sweeps never build complex intermediates.
"""

import numbers

import numpy as np
from numba import njit

from core.exceptions import InvalidInputError


def as_coefficients(coefficients):
    """
    Validates a coefficient sequence and returns it as a read-only float array.

    Args:
        coefficients (array-like): Real coefficients, highest degree first.

    Returns:
        np.ndarray: 1-D float64 array with at least one element.

    Raises:
        InvalidInputError: If the sequence is empty, not 1-D, complex,
        non-numeric or contains non-finite values.
    """
    try:
        raw = np.asarray(coefficients)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed coefficient sequence: {e}") from e

    if np.iscomplexobj(raw):
        raise InvalidInputError("Coefficients must be real numbers.")
    if raw.dtype.kind not in "biuf":
        raise InvalidInputError(
            f"Coefficients must be numeric, got dtype {raw.dtype}."
        )

    try:
        coeffs = np.array(raw, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Coefficients must be real numbers: {e}") from e

    if coeffs.ndim != 1:
        raise InvalidInputError(
            f"Coefficients must be a 1-D sequence, got shape {coeffs.shape}."
        )
    if coeffs.size == 0:
        raise InvalidInputError("Empty coefficient sequence: degree is undefined.")
    if not np.all(np.isfinite(coeffs)):
        raise InvalidInputError("Coefficients must be finite.")

    coeffs.flags.writeable = False
    return coeffs


def as_frequencies(omega):
    """Normalises a scalar or 1-D frequency grid into a contiguous float array."""
    try:
        w = np.atleast_1d(np.asarray(omega, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Frequencies must be real numbers: {e}") from e

    if w.ndim != 1:
        raise InvalidInputError(
            f"Frequencies must be a scalar or 1-D sequence, got shape {w.shape}."
        )
    return np.ascontiguousarray(w)


def complex_pow(base, exponent):
    """
    Raises a complex number to a non-negative integer power by squaring.

    base**0 is (1, 0) for every base, (0, 0) included.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
        raise InvalidInputError(f"Exponent must be an integer, got {exponent!r}.")
    if exponent < 0:
        raise InvalidInputError(f"Exponent must be non-negative, got {exponent}.")

    base = complex(base)
    exponent = int(exponent)
    result = complex(1.0, 0.0)

    while exponent:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base

    return result


def evaluate(coefficients, at):
    """
    Evaluates a real-coefficient polynomial at a complex point.

    Uses direct summation of term * at^power (not Horner's method), accumulated
    from the complex zero.

    Args:
        coefficients (array-like): Real coefficients, highest degree first.
        at (complex): Evaluation point.

    Returns:
        complex: The polynomial value.
    """
    coeffs = as_coefficients(coefficients)
    if isinstance(at, (str, bytes)):
        raise InvalidInputError(f"Evaluation point must be a number: {at!r}")
    try:
        at = complex(at)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Evaluation point must be a number: {at!r}") from e

    degree = len(coeffs) - 1
    total = complex(0.0, 0.0)
    for i, term in enumerate(coeffs):
        total += float(term) * complex_pow(at, degree - i)

    return total


def _split_signs(coeffs):
    """
    (j*w)^k cycles through {1, j, -1, -j} * w^k with period 4, so the sign of a
    degree-k term is + when floor(k/2) is even and - otherwise, and its part
    (real or imaginary) follows the parity of k.
    """
    k = np.arange(len(coeffs) - 1, -1, -1)
    even = k % 2 == 0
    signs = np.where((k // 2) % 2 == 0, 1.0, -1.0)
    return even, signs * coeffs


def real_terms(coefficients):
    """
    Coefficients (in w) of the real part of the polynomial after s = j*w.

    Example:
        [5, 3, 7] -> 5*(jw)^2 + 3*(jw) + 7 = (-5w^2 + 7) + (3w)j
        real_terms([5, 3, 7]) -> [-5, 0, 7]
    """
    coeffs = as_coefficients(coefficients)
    even, signed = _split_signs(coeffs)
    return np.where(even, signed, 0.0)


def imag_terms(coefficients):
    """
    Coefficients (in w) of the imaginary part of the polynomial after s = j*w.

    The output keeps the input length, so the constant position is 0:
        imag_terms([5, 3, 7]) -> [0, 3, 0]  (i.e. 3w)
    """
    coeffs = as_coefficients(coefficients)
    even, signed = _split_signs(coeffs)
    return np.where(even, 0.0, signed)


@njit(cache=True)
def _polyval_sweep(coeffs, omega):
    n = coeffs.shape[0]
    out = np.zeros(omega.shape[0])
    for j in range(omega.shape[0]):
        acc = 0.0
        for i in range(n):
            acc += coeffs[i] * omega[j] ** (n - 1 - i)
        out[j] = acc
    return out


def polyval_real(coefficients, w):
    """Evaluates a real polynomial at a single real abscissa by direct summation."""
    coeffs = as_coefficients(coefficients)
    w = float(w)
    degree = len(coeffs) - 1
    return sum(float(term) * w ** (degree - i) for i, term in enumerate(coeffs))


def polyval_real_sweep(coefficients, omega):
    """Evaluates a real polynomial over a 1-D grid of real abscissae."""
    coeffs = np.array(as_coefficients(coefficients))
    return _polyval_sweep(coeffs, as_frequencies(omega))


def evaluate_on_imaginary_axis(coefficients, omega):
    """
    Evaluates a polynomial at s = j*w for every w in omega.

    Equivalent to [evaluate(coefficients, 1j * w) for w in omega], but built
    from two real sweeps over the split coefficient arrays.

    Returns:
        np.ndarray: complex128 array, one value per frequency.
    """
    coeffs = as_coefficients(coefficients)
    w = as_frequencies(omega)

    out = np.empty(w.shape, dtype=complex)
    out.real = _polyval_sweep(real_terms(coeffs), w)
    out.imag = _polyval_sweep(imag_terms(coeffs), w)
    return out
