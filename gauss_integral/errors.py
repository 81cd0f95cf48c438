"""Exceptions raised by the quadrature routines."""


class ArgumentError(ValueError):
    """Malformed order, interval, point/weight tables or integrand arity."""


class ShapeMismatchError(ArgumentError):
    """The integrand returned values of different shapes within one integration."""


class ConvergenceError(RuntimeError):
    """Newton-Raphson iteration for the Legendre roots did not converge."""
