"""
Integrals over squares and cubes [a, b]^D, with the same Gauss-Legendre rule
along every axis. For a different order or interval per axis, build the rules
with `compute_rule` and pass them to `integrate_rules`.
"""

from gauss_integral.numeric.legendre import compute_rule
from gauss_integral.numeric.tensor import Integrand, check_arity, integrate


def integrate_box(integrand: Integrand, nb_dims: int, order: int, a: float, b: float, workers: int | None = None):
    """Integral over [a, b]^nb_dims. The arity is checked before the rule is computed."""
    check_arity(integrand, nb_dims)
    rule = compute_rule(order, a, b)
    return integrate([rule.nodes] * nb_dims, [rule.weights] * nb_dims, integrand, workers)


def surface_2d(integrand: Integrand, order: int, a: float, b: float, workers: int | None = None):
    """Integral of `integrand(xi, eta)` over the square [a, b]^2."""
    return integrate_box(integrand, 2, order, a, b, workers)


def volume_3d(integrand: Integrand, order: int, a: float, b: float, workers: int | None = None):
    """Integral of `integrand(xi, eta, mu)` over the cube [a, b]^3."""
    return integrate_box(integrand, 3, order, a, b, workers)
