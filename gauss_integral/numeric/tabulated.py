"""
Tabulated Gauss-Legendre rules of low order on the reference interval [-1, 1].

These are the classical closed-form values, handy when the same few rules are
needed over and over, e.g. for reference elements. `compute_rule` covers any
order and any interval.
"""

import math
import typing

import numpy as np

from gauss_integral.errors import ArgumentError
from gauss_integral.numeric.legendre import QuadratureRule, check_order
from gauss_integral.numeric.tensor import tensor_grid


def _two_points():
    a = math.sqrt(3) / 3
    return [-a, a], [1.0, 1.0]


def _three_points():
    a = math.sqrt(3 / 5)
    return [-a, 0.0, a], [5 / 9, 8 / 9, 5 / 9]


def _four_points():
    a = math.sqrt((3 - 2 * math.sqrt(6 / 5)) / 7)
    b = math.sqrt((3 + 2 * math.sqrt(6 / 5)) / 7)
    wa = (18 + math.sqrt(30)) / 36
    wb = (18 - math.sqrt(30)) / 36
    return [-b, -a, a, b], [wb, wa, wa, wb]


def _five_points():
    a = 1 / 3 * math.sqrt(5 - 2 * math.sqrt(10 / 7))
    b = 1 / 3 * math.sqrt(5 + 2 * math.sqrt(10 / 7))
    wa = (322 + 13 * math.sqrt(70)) / 900
    wb = (322 - 13 * math.sqrt(70)) / 900
    return [-b, -a, 0.0, a, b], [wb, wa, 128 / 225, wa, wb]


def _six_points():
    a = 0.932469514203152
    b = 0.661209386466265
    c = 0.238619186083197
    wa = 0.171324492379170
    wb = 0.360761573048139
    wc = 0.467913934572691
    return [-a, -b, -c, c, b, a], [wa, wb, wc, wc, wb, wa]


_tables = {
    1: lambda: ([0.0], [2.0]),
    2: _two_points,
    3: _three_points,
    4: _four_points,
    5: _five_points,
    6: _six_points,
}

max_tabulated_order = max(_tables)


def tabulated_rule(order: int) -> QuadratureRule:
    """Tabulated rule with `order` points on [-1, 1], nodes in ascending order."""
    order = check_order(order)
    if order not in _tables:
        raise ArgumentError(
            f"Tabulated rules exist for orders 1 to {max_tabulated_order}, got {order}; use compute_rule instead")
    [nodes, weights] = _tables[order]()
    return QuadratureRule(nodes, weights, (-1.0, 1.0))


def tabulated_grid(orders: typing.Sequence[int]) -> tuple[np.ndarray, np.ndarray]:
    """
    Points and weights of the tensor-product rule on [-1, 1]^D.

    Parameters
    ----------
    orders : sequence of int
        Number of points along each direction.

    Returns
    -------
    points : np.ndarray, shape (prod(orders), D)
    weights : np.ndarray, shape (prod(orders),)
        Rows are ordered with the last direction varying fastest.
    """
    rules = [tabulated_rule(n) for n in orders]
    if not rules:
        raise ArgumentError("At least one direction is needed")
    return tensor_grid([rule.nodes for rule in rules], [rule.weights for rule in rules])
