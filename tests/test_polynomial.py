import unittest

import numpy as np

from core.exceptions import ControlWebError, InvalidInputError
from core.polynomial import (
    as_coefficients,
    complex_pow,
    evaluate,
    evaluate_on_imaginary_axis,
    imag_terms,
    polyval_real,
    polyval_real_sweep,
    real_terms,
)


class TestComplexPow(unittest.TestCase):
    """
    Unit tests for the integer power used by the direct-summation evaluator.
    """

    def test_zero_exponent_is_one(self):
        for z in (0j, 1 + 1j, -3.5 + 0.25j, complex(1e6, -1e6)):
            self.assertEqual(complex_pow(z, 0), complex(1.0, 0.0))

    def test_zero_to_the_zero(self):
        self.assertEqual(complex_pow(complex(0.0, 0.0), 0), complex(1.0, 0.0))

    def test_first_power_is_identity(self):
        z = 2.5 - 1.5j
        self.assertEqual(complex_pow(z, 1), z)

    def test_square_matches_self_product(self):
        z = 3 + 4j
        self.assertEqual(complex_pow(z, 2), z * z)
        self.assertEqual(complex_pow(z, 2), -7 + 24j)

    def test_imaginary_unit_cycle(self):
        expected = [1, 1j, -1, -1j, 1, 1j, -1, -1j]
        for k, value in enumerate(expected):
            self.assertEqual(complex_pow(1j, k), value)

    def test_matches_builtin_power(self):
        z = 0.7 - 1.3j
        for k in range(12):
            self.assertAlmostEqual(complex_pow(z, k), z**k, places=12)

    def test_accepts_numpy_integer(self):
        self.assertEqual(complex_pow(2j, np.int64(3)), -8j)

    def test_negative_exponent_rejected(self):
        with self.assertRaises(InvalidInputError):
            complex_pow(1 + 1j, -1)

    def test_non_integer_exponent_rejected(self):
        with self.assertRaises(InvalidInputError):
            complex_pow(1 + 1j, 1.5)
        with self.assertRaises(InvalidInputError):
            complex_pow(1 + 1j, True)


class TestCoefficients(unittest.TestCase):
    def test_normalises_to_read_only_float_array(self):
        coeffs = as_coefficients([1, 2, 3])
        self.assertEqual(coeffs.dtype, float)
        self.assertFalse(coeffs.flags.writeable)
        np.testing.assert_array_equal(coeffs, [1.0, 2.0, 3.0])

    def test_does_not_alias_caller_array(self):
        src = np.array([1.0, 2.0])
        coeffs = as_coefficients(src)
        src[0] = 99.0
        self.assertEqual(coeffs[0], 1.0)

    def test_single_coefficient_is_constant(self):
        self.assertEqual(evaluate([4.0], 10 + 10j), 4 + 0j)

    def test_empty_sequence_rejected(self):
        with self.assertRaises(InvalidInputError):
            as_coefficients([])

    def test_invalid_input_is_value_error(self):
        """Catchable both as ValueError and as the package base class."""
        with self.assertRaises(ValueError):
            as_coefficients([])
        with self.assertRaises(ControlWebError):
            as_coefficients([])

    def test_non_real_rejected(self):
        with self.assertRaises(InvalidInputError):
            as_coefficients([1 + 2j, 3])
        with self.assertRaises(InvalidInputError):
            as_coefficients(["a", "b"])
        with self.assertRaises(InvalidInputError):
            as_coefficients(["1", "2"])

    def test_wrong_shape_rejected(self):
        with self.assertRaises(InvalidInputError):
            as_coefficients(5.0)
        with self.assertRaises(InvalidInputError):
            as_coefficients([[1, 2], [3, 4]])

    def test_non_finite_rejected(self):
        with self.assertRaises(InvalidInputError):
            as_coefficients([1.0, np.nan])
        with self.assertRaises(InvalidInputError):
            as_coefficients([np.inf])


class TestEvaluate(unittest.TestCase):
    """
    Unit tests for direct-summation evaluation at complex points.
    """

    def test_pure_square(self):
        """[1, 0, 0] at 2i -> (2i)^2 = -4"""
        self.assertEqual(evaluate([1, 0, 0], 2j), -4 + 0j)

    def test_matches_polyval(self):
        coeffs = [2.0, -1.0, 0.5, 3.0]
        for z in (0j, 1 + 1j, -2 + 0.5j, 0.1 - 3j):
            self.assertAlmostEqual(
                evaluate(coeffs, z), np.polyval(coeffs, z), places=10
            )

    def test_real_argument(self):
        self.assertEqual(evaluate([1, -2], 2), 0j)
        self.assertEqual(evaluate([1, 2, 1], -1.0), 0j)

    def test_zero_coefficients(self):
        self.assertEqual(evaluate([0, 0, 0], 5 + 5j), 0j)

    def test_returns_builtin_complex(self):
        self.assertIsInstance(evaluate([1, 2], 1j), complex)

    def test_bad_point_rejected(self):
        with self.assertRaises(InvalidInputError):
            evaluate([1, 2], None)
        with self.assertRaises(InvalidInputError):
            evaluate([1, 0], "1+2j")

    def test_idempotent(self):
        coeffs = [1.3, -0.7, 2.9, 0.01]
        z = 0.37 + 1.91j
        self.assertEqual(evaluate(coeffs, z), evaluate(coeffs, z))


class TestRealImaginarySplit(unittest.TestCase):
    """
    Unit tests for the s = jw coefficient split.
    """

    def test_documented_example(self):
        np.testing.assert_array_equal(real_terms([5, 3, 7]), [-5.0, 0.0, 7.0])
        np.testing.assert_array_equal(imag_terms([5, 3, 7]), [0.0, 3.0, 0.0])

    def test_sign_pattern_sixth_degree(self):
        """
        real: [0,  t4,   0, -t2,  0,  t0]
        imag: [t5,  0, -t3,   0,  t1,  0]
        """
        t = [6.0, 5.0, 4.0, 3.0, 2.0, 1.0]
        np.testing.assert_array_equal(real_terms(t), [0, 5, 0, -3, 0, 1])
        np.testing.assert_array_equal(imag_terms(t), [6, 0, -4, 0, 2, 0])

    def test_degree_counted_from_the_end(self):
        """A leading zero does not shift the parity of the other terms."""
        np.testing.assert_array_equal(
            real_terms([0, 5, 3, 7])[1:], real_terms([5, 3, 7])
        )
        np.testing.assert_array_equal(
            imag_terms([0, 5, 3, 7])[1:], imag_terms([5, 3, 7])
        )

    def test_constant(self):
        np.testing.assert_array_equal(real_terms([4.0]), [4.0])
        np.testing.assert_array_equal(imag_terms([4.0]), [0.0])

    def test_lengths_preserved(self):
        for n in range(1, 9):
            coeffs = np.arange(1, n + 1, dtype=float)
            self.assertEqual(len(real_terms(coeffs)), n)
            self.assertEqual(len(imag_terms(coeffs)), n)

    def test_position_only_dependence(self):
        """Each output entry is +-c or 0 for its own input entry."""
        coeffs = np.array([3.0, -1.0, 4.0, -1.0, 5.0, -9.0, 2.0])
        re = real_terms(coeffs)
        im = imag_terms(coeffs)
        np.testing.assert_array_equal(np.abs(re) + np.abs(im), np.abs(coeffs))
        self.assertTrue(np.all((re == 0) | (im == 0)))

    def test_round_trip_against_complex_evaluation(self):
        coeffs = [5, 3, 7]
        for w in (0.0, 1.0, -2.0):
            expected = evaluate(coeffs, complex(0.0, w))
            re = polyval_real(real_terms(coeffs), w)
            im = polyval_real(imag_terms(coeffs), w)
            self.assertAlmostEqual(re, expected.real)
            self.assertAlmostEqual(im, expected.imag)

    def test_round_trip_higher_degree(self):
        coeffs = [0.5, -2.0, 1.0, 3.0, -4.0, 0.25, 6.0]
        for w in (0.3, 1.7, -0.9, 4.0):
            expected = evaluate(coeffs, complex(0.0, w))
            got = complex(
                polyval_real(real_terms(coeffs), w),
                polyval_real(imag_terms(coeffs), w),
            )
            self.assertAlmostEqual(got, expected, places=8)

    def test_empty_rejected(self):
        with self.assertRaises(InvalidInputError):
            real_terms([])
        with self.assertRaises(InvalidInputError):
            imag_terms([])


class TestSweeps(unittest.TestCase):
    def test_polyval_real(self):
        self.assertEqual(polyval_real([1, 0, -4], 2.0), 0.0)
        self.assertEqual(polyval_real([3.0], 100.0), 3.0)

    def test_polyval_real_sweep_matches_polyval(self):
        coeffs = [1.0, -3.0, 2.0, 0.5]
        w = np.linspace(-3, 3, 25)
        np.testing.assert_allclose(
            polyval_real_sweep(coeffs, w),
            np.polyval(coeffs, w),
            rtol=1e-12,
            atol=1e-12,
        )

    def test_sweep_accepts_scalar(self):
        np.testing.assert_allclose(polyval_real_sweep([1, 1], 2.0), [3.0])

    def test_imaginary_axis_matches_complex_path(self):
        coeffs = [1.0, 6.0, 11.0, 6.0]
        w = np.logspace(-2, 2, 40)
        fast = evaluate_on_imaginary_axis(coeffs, w)
        slow = np.array([evaluate(coeffs, 1j * wi) for wi in w])
        np.testing.assert_allclose(fast, slow, rtol=1e-10)

    def test_imaginary_axis_dtype(self):
        out = evaluate_on_imaginary_axis([1, 2], [0.0, 1.0])
        self.assertEqual(out.dtype, complex)
        np.testing.assert_array_equal(out, [2 + 0j, 2 + 1j])

    def test_bad_frequency_grid_rejected(self):
        with self.assertRaises(InvalidInputError):
            evaluate_on_imaginary_axis([1, 2], [[1.0, 2.0], [3.0, 4.0]])

    def test_sweep_idempotent(self):
        w = np.linspace(0.1, 10, 17)
        a = evaluate_on_imaginary_axis([2.0, -1.0, 0.3], w)
        b = evaluate_on_imaginary_axis([2.0, -1.0, 0.3], w)
        np.testing.assert_array_equal(a, b)


if __name__ == "__main__":
    unittest.main()
