"""
Numerical building blocks:
- Gauss-Legendre rules on any interval
- tabulated low-order rules
- Cartesian products of sequences
- tensor-product quadrature over boxes
"""

from .legendre import QuadratureRule, compute_rule, rule_for_interval, legendre_vandermonde
from .tabulated import tabulated_rule, tabulated_grid
from .cartesian import cartesian_product
from .tensor import tensor_grid, integrate, integrate_rules

__all__ = [
    "QuadratureRule",
    "compute_rule",
    "rule_for_interval",
    "legendre_vandermonde",
    "tabulated_rule",
    "tabulated_grid",
    "cartesian_product",
    "tensor_grid",
    "integrate",
    "integrate_rules",
]
