"""
Gauss-Legendre quadrature of (matrix-valued) functions over boxes.

Main functions:
    - compute_rule: nodes and weights on [a, b]
    - integrate: tensor-product quadrature with per-axis points and weights
    - surface_2d, volume_3d: same rule on every axis of a square or cube
"""

from gauss_integral.errors import ArgumentError, ConvergenceError, ShapeMismatchError
from gauss_integral.numeric import (
    QuadratureRule,
    compute_rule,
    rule_for_interval,
    tabulated_rule,
    tabulated_grid,
    cartesian_product,
    tensor_grid,
    integrate,
    integrate_rules,
)
from gauss_integral.domains import surface_2d, volume_3d

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ConvergenceError",
    "ShapeMismatchError",
    "QuadratureRule",
    "compute_rule",
    "rule_for_interval",
    "tabulated_rule",
    "tabulated_grid",
    "cartesian_product",
    "tensor_grid",
    "integrate",
    "integrate_rules",
    "surface_2d",
    "volume_3d",
]
