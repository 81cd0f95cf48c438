"""
Gauss-Legendre nodes and weights on an arbitrary interval [a, b].

The nodes are the roots of the Legendre polynomial P_n. All roots are refined
simultaneously by Newton-Raphson iterations, starting from a cosine guess with
a small sine correction. The polynomial values follow from the three-term
recurrence

    P_k = ((2k - 1) y P_{k-1} - (k - 1) P_{k-2}) / k,

and the derivative from

    P_n' ~ (n + 1) (P_{n-1} - y P_n) / (1 - y^2).

The factor (n + 1) instead of n damps the Newton step; the weights are
corrected with ((n + 1) / n)^2 accordingly.
"""

import dataclasses as dc
import logging
import math
import numbers
import typing

import numpy as np

from gauss_integral.errors import ArgumentError, ConvergenceError


logger = logging.getLogger(__name__)

machine_epsilon = float(np.finfo(float).eps)
default_max_iterations = 100


@dc.dataclass(frozen=True, eq=False)
class QuadratureRule:
    """Nodes and weights of a one-dimensional quadrature rule on `interval`.

    The arrays are copied and made read-only. Iterating over a rule yields
    `nodes` then `weights`, so that `x, w = rule` works.
    """

    nodes: np.ndarray
    weights: np.ndarray
    interval: tuple[float, float] = (-1.0, 1.0)

    def __post_init__(self):
        nodes = np.array(self.nodes, dtype=float).ravel()
        weights = np.array(self.weights, dtype=float).ravel()
        if nodes.size != weights.size:
            raise ArgumentError(
                f"Nodes and weights should have the same length, got {nodes.size} and {weights.size}")
        nodes.setflags(write=False)
        weights.setflags(write=False)
        if len(self.interval) != 2:
            raise ArgumentError(f"Interval should be a pair (a, b), got {self.interval!r}")
        [a, b] = self.interval
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "interval", (check_bound(a, "a"), check_bound(b, "b")))

    @property
    def order(self) -> int:
        return self.nodes.size

    @property
    def length(self) -> float:
        [a, b] = self.interval
        return b - a

    def __iter__(self) -> typing.Iterator[np.ndarray]:
        yield self.nodes
        yield self.weights

    def __len__(self) -> int:
        return self.order


def check_order(order) -> int:
    """Return `order` as an int, or raise ArgumentError if it is not a positive integer."""
    if isinstance(order, bool) or not isinstance(order, numbers.Real):
        raise ArgumentError(f"Order should be numeric, got {order!r}")
    if not order > 0:
        raise ArgumentError(f"Order should be > 0, got {order}")
    if not math.isfinite(order) or order != int(order):
        raise ArgumentError(f"Order should be integer, got {order}")
    return int(order)


def check_bound(value, name: str) -> float:
    """Return an interval bound as a float, or raise ArgumentError if it is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ArgumentError(f"Interval bound '{name}' should be numeric, got {value!r}")
    if not math.isfinite(value):
        raise ArgumentError(f"Interval bound '{name}' should be finite, got {value}")
    return float(value)


def legendre_vandermonde(y: np.ndarray, degree: int) -> np.ndarray:
    """Values of P_0, ..., P_degree at the points `y`; column k holds P_k."""
    y = np.asarray(y, dtype=float).ravel()
    L = np.zeros((y.size, degree + 1))
    L[:, 0] = 1.0
    if degree >= 1:
        L[:, 1] = y
    for k in range(2, degree + 1):
        L[:, k] = ((2 * k - 1) * y * L[:, k - 1] - (k - 1) * L[:, k - 2]) / k
    return L


def compute_rule(
        order: int, a: float = -1.0, b: float = 1.0,
        max_iterations: int = default_max_iterations,
        tolerance: float = machine_epsilon) -> QuadratureRule:
    """
    Compute the Gauss-Legendre rule with `order` points on [a, b].

    Parameters
    ----------
    order : int
        Number of quadrature points, positive.
    a, b : float
        Interval bounds. `a < b` is assumed but not enforced.
    max_iterations : int
        Number of Newton-Raphson updates allowed before giving up.
    tolerance : float
        The iteration stops once no root moves by more than this amount.

    Returns
    -------
    QuadratureRule
        Nodes in the order the solver produces them, which is not
        necessarily sorted.

    Raises
    ------
    ArgumentError
        If `order` is not a positive integer or a bound is not a finite number.
    ConvergenceError
        If the roots have not settled after `max_iterations` updates.
    """
    n = check_order(order)
    a = check_bound(a, "a")
    b = check_bound(b, "b")
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, numbers.Integral) or max_iterations < 1:
        raise ArgumentError(f"Maximum number of iterations should be a positive integer, got {max_iterations!r}")
    if isinstance(tolerance, bool) or not isinstance(tolerance, numbers.Real) \
            or not math.isfinite(tolerance) or tolerance <= 0:
        raise ArgumentError(f"Tolerance should be a finite number > 0, got {tolerance!r}")

    N = n - 1
    N1 = N + 1
    N2 = N + 2

    # initial guess
    xu = np.linspace(-1, 1, N1)
    y = np.cos((2 * np.arange(N1) + 1) * np.pi / (2 * N + 2)) + (0.27 / N1) * np.sin(np.pi * xu * N / N2)

    y_prev = np.full_like(y, 2.0)
    dL = np.ones_like(y)
    nb_iters = 0
    while np.max(np.abs(y - y_prev)) > tolerance:
        if nb_iters == max_iterations:
            raise ConvergenceError(
                f"Roots of the Legendre polynomial of degree {n} not converged after {nb_iters} iterations, "
                f"last change {np.max(np.abs(y - y_prev)):.3e}")
        L = legendre_vandermonde(y, N1)
        dL = N2 * (L[:, N] - y * L[:, N1]) / (1 - y**2)
        y_prev = y
        y = y_prev - L[:, N1] / dL
        nb_iters += 1

    logger.debug(f"Gauss-Legendre order {n}: converged in {nb_iters} iterations")

    # map from [-1, 1] to [a, b]
    x = (a * (1 - y) + b * (1 + y)) / 2
    w = (b - a) / ((1 - y**2) * dL**2) * (N2 / N1)**2
    return QuadratureRule(x, w, (a, b))


def rule_for_interval(rule: QuadratureRule, a: float, b: float) -> QuadratureRule:
    """Map a rule affinely from its own interval onto [a, b]."""
    a = check_bound(a, "a")
    b = check_bound(b, "b")
    [a0, b0] = rule.interval
    if a0 == b0:
        raise ArgumentError(f"Cannot remap a rule defined on the degenerate interval [{a0}, {b0}]")
    scale = (b - a) / (b0 - a0)
    return QuadratureRule(a + (rule.nodes - a0) * scale, rule.weights * scale, (a, b))
