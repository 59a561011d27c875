class ControlWebError(Exception):
    """Base class for all exceptions in ControlWeb."""

    pass


class DivisionByZeroError(ZeroDivisionError, ControlWebError):
    """
    Raised when a denominator polynomial evaluates to the complex zero,
    i.e. the evaluation point is a pole of the transfer function.
    Inherits from ZeroDivisionError so plain arithmetic handlers still catch it.
    """

    pass


class InvalidInputError(ValueError, ControlWebError):
    """
    Raised when a coefficient sequence is malformed (empty, not 1-D, not real,
    not finite) or an exponent is not a non-negative integer.
    """

    pass


class InvalidParameterError(ValueError, ControlWebError):
    """
    Raised when an option has an unsupported value (e.g., an unknown pole policy).
    """

    pass


class ConvergenceError(RuntimeError, ControlWebError):
    """
    Raised when the crossover refinement fails to converge within the
    maximum number of iterations.
    """

    pass
