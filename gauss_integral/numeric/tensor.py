"""
Tensor-product quadrature: one-dimensional rules, one per axis, combined into a
full grid over a box. The integrand may return a scalar or an array of fixed
shape, e.g. an element stiffness matrix; the result has the same shape.
"""

import inspect
import logging
import numbers
import typing
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from gauss_integral.errors import ArgumentError, ShapeMismatchError
from gauss_integral.numeric.cartesian import cartesian_product
from gauss_integral.numeric.legendre import QuadratureRule


logger = logging.getLogger(__name__)

Integrand = typing.Callable[..., typing.Any]


def tensor_grid(
        per_axis_points: typing.Sequence[typing.Sequence[float]],
        per_axis_weights: typing.Sequence[typing.Sequence[float]]) -> tuple[np.ndarray, np.ndarray]:
    """
    Combine per-axis points and weights into a grid over the box.

    Returns
    -------
    points : np.ndarray, shape (P, D)
        One grid point per row, the last axis varying fastest.
    weights : np.ndarray, shape (P,)
        The product of the per-axis weights belonging to each grid point.
    """
    points = [as_axis(p, "points", d) for [d, p] in enumerate(per_axis_points)]
    weights = [as_axis(w, "weights", d) for [d, w] in enumerate(per_axis_weights)]

    if len(points) != len(weights):
        raise ArgumentError(
            f"Points and weights should have the same number of axes, got {len(points)} and {len(weights)}")
    if len(points) == 0:
        raise ArgumentError("At least one axis is needed")
    for [d, [p, w]] in enumerate(zip(points, weights)):
        if p.size != w.size:
            raise ArgumentError(f"Axis {d} has {p.size} points but {w.size} weights")
        if p.size == 0:
            raise ArgumentError(f"Axis {d} has no points")

    # same ordering for both tables so that rows refer to the same grid point
    points_table = cartesian_product(points, fastest="last")
    weights_table = cartesian_product(weights, fastest="last")
    return points_table, np.prod(weights_table, axis=1)


def as_axis(values, what: str, axis: int) -> np.ndarray:
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as err:
        raise ArgumentError(f"The {what} of axis {axis} should be real numbers") from err
    if arr.ndim != 1:
        raise ArgumentError(f"The {what} of axis {axis} should be a flat sequence, got shape {arr.shape}")
    return arr


def check_arity(integrand: Integrand, nb_dims: int):
    """Raise ArgumentError unless `integrand` can be called with `nb_dims` positional arguments."""
    if not callable(integrand):
        raise ArgumentError(f"Integrand should be callable, got {integrand!r}")

    if isinstance(integrand, np.ufunc):
        if integrand.nin != nb_dims:
            raise ArgumentError(
                f"Integrand takes {integrand.nin} arguments but the grid has {nb_dims} axes")
        return

    try:
        signature = inspect.signature(integrand)
    except (TypeError, ValueError):
        # not introspectable, e.g. some builtins
        return

    positional = []
    has_var_positional = False
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional.append(param)
        elif param.kind == param.VAR_POSITIONAL:
            has_var_positional = True
        elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
            raise ArgumentError(f"Integrand requires the keyword argument '{param.name}'")

    nb_required = sum(1 for param in positional if param.default is param.empty)
    if nb_dims < nb_required or (not has_var_positional and nb_dims > len(positional)):
        if nb_required == len(positional):
            nb_args = str(nb_required)
        else:
            nb_args = f"{nb_required} to {len(positional)}"
        raise ArgumentError(f"Integrand takes {nb_args} arguments but the grid has {nb_dims} axes")


def accumulate(integrand: Integrand, points: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Weighted sum of the integrand over the rows of `points`; each row is evaluated once."""
    accumulator = None
    for [point, weight] in zip(points, weights):
        value = np.asarray(integrand(*point), dtype=float)
        if accumulator is None:
            # the first evaluation fixes the shape of the result
            accumulator = np.zeros(value.shape)
        elif value.shape != accumulator.shape:
            raise ShapeMismatchError(
                f"Integrand returned shape {value.shape} at {tuple(point)}, "
                f"previously {accumulator.shape}")
        accumulator += weight * value
    return accumulator


def integrate(
        per_axis_points: typing.Sequence[typing.Sequence[float]],
        per_axis_weights: typing.Sequence[typing.Sequence[float]],
        integrand: Integrand,
        workers: int | None = None):
    """
    Integrate over the tensor-product grid of per-axis points and weights.

    Parameters
    ----------
    per_axis_points, per_axis_weights : list of D sequences
        Points and weights of each axis, pairwise of the same length.
    integrand : callable
        Function of D real arguments returning a scalar or an array whose
        shape does not change from one call to the next.
    workers : int, optional
        If larger than 1, the grid is split into contiguous chunks evaluated
        in a thread pool. The integrand must then be safe to call from
        several threads. The partial sums are added in chunk order.

    Returns
    -------
    float or np.ndarray
        A float for scalar integrands, otherwise an array of the integrand's shape.
    """
    points, weights = tensor_grid(per_axis_points, per_axis_weights)
    [nb_points, nb_dims] = points.shape
    check_arity(integrand, nb_dims)
    if workers is not None and (
            isinstance(workers, bool) or not isinstance(workers, numbers.Integral) or workers < 1):
        raise ArgumentError(f"Number of workers should be a positive integer, got {workers!r}")

    nb_chunks = 1 if workers is None else min(int(workers), nb_points)
    logger.debug(f"Integrating over {nb_points} points in {nb_dims}D with {nb_chunks} chunk(s)")

    if nb_chunks == 1:
        result = accumulate(integrand, points, weights)
    else:
        chunks = np.array_split(np.arange(nb_points), nb_chunks)
        with ThreadPoolExecutor(max_workers=nb_chunks) as executor:
            futures = [executor.submit(accumulate, integrand, points[rows], weights[rows]) for rows in chunks]
            partials = [future.result() for future in futures]
        result = partials[0]
        for partial in partials[1:]:
            if partial.shape != result.shape:
                raise ShapeMismatchError(
                    f"Integrand returned shape {partial.shape} in one part of the grid and {result.shape} in another")
            result = result + partial

    if result.ndim == 0:
        return float(result)
    return result


def integrate_rules(rules: typing.Sequence[QuadratureRule], integrand: Integrand, workers: int | None = None):
    """Integrate with one rule per axis, each with its own order and interval."""
    return integrate([rule.nodes for rule in rules], [rule.weights for rule in rules], integrand, workers)
