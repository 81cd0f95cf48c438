import numpy as np
import pytest

from gauss_integral.errors import ArgumentError
from gauss_integral.numeric.legendre import compute_rule
from gauss_integral.numeric.tabulated import tabulated_rule, tabulated_grid


def test_tabulated_rules_agree_with_computed_rules():
    for order in range(1, 7):
        table = tabulated_rule(order)
        computed = compute_rule(order, -1, 1)
        permutation = np.argsort(computed.nodes)
        assert table.order == order
        assert np.allclose(table.nodes, computed.nodes[permutation], atol=1e-12)
        assert np.allclose(table.weights, computed.weights[permutation], atol=1e-12)


def test_tabulated_nodes_ascending():
    for order in range(1, 7):
        assert np.all(np.diff(tabulated_rule(order).nodes) > 0)


def test_order_outside_table():
    with pytest.raises(ArgumentError, match="compute_rule"):
        tabulated_rule(7)
    with pytest.raises(ArgumentError):
        tabulated_rule(0)


def test_grid_ordering_and_weights():
    points, weights = tabulated_grid([2, 3])
    assert points.shape == (6, 2)
    assert weights.shape == (6,)
    # last direction varies fastest
    assert np.allclose(points[:3, 0], points[0, 0])
    assert np.allclose(points[:3, 1], tabulated_rule(3).nodes)
    assert np.isclose(weights.sum(), 4.0)


def test_grid_integrates_polynomial_exactly():
    points, weights = tabulated_grid([2, 2, 2])
    values = np.prod(points**2, axis=1)
    assert np.isclose(weights @ values, (2 / 3)**3)


def test_one_dimensional_grid():
    points, weights = tabulated_grid([4])
    assert points.shape == (4, 1)
    assert np.isclose(weights.sum(), 2.0)


def test_empty_grid():
    with pytest.raises(ArgumentError):
        tabulated_grid([])
