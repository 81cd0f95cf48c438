"""
All combinations of the elements of several sequences, i.e. the Cartesian product,
laid out as a table with one row per combination and one column per sequence.
"""

import logging
import typing

import numpy as np

from gauss_integral.errors import ArgumentError


logger = logging.getLogger(__name__)

numeric_kinds = "biufc"


def cartesian_product(sequences: typing.Iterable[typing.Iterable], fastest: str = "last") -> np.ndarray:
    """
    Return all combinations of the elements of the sequences.

    Parameters
    ----------
    sequences : iterable of sequences
        D sequences. A string counts as the sequence of its characters.
    fastest : {"last", "first"}
        Which sequence varies fastest from one row to the next. With "last",
        rows are in lexicographic order of the element indices.

    Returns
    -------
    np.ndarray
        Table of shape (n_1 * ... * n_D, D). Numeric when all sequences are
        numeric, otherwise of dtype object. Empty (0, D) if any sequence is
        empty, and (0, 0) if there are no sequences.

    Examples
    --------
    >>> cartesian_product([[1, 3, 5], [-3, 8]])
    array([[ 1, -3],
           [ 1,  8],
           [ 3, -3],
           [ 3,  8],
           [ 5, -3],
           [ 5,  8]])
    """
    if fastest not in ("last", "first"):
        raise ArgumentError(f"Unknown ordering '{fastest}', use 'last' or 'first'")

    columns = [as_column(seq) for seq in sequences]
    nb_dims = len(columns)
    if nb_dims == 0:
        return np.empty((0, 0))

    dtype = common_dtype(columns)
    if any(col.size == 0 for col in columns):
        logger.warning("Empty inputs result in an empty output.")
        return np.empty((0, nb_dims), dtype=dtype)

    # with "ij" indexing the last index is contiguous in C order, the first in Fortran order
    index_mesh = np.meshgrid(*[np.arange(col.size) for col in columns], indexing="ij")
    ravel_order = "C" if fastest == "last" else "F"

    nb_rows = index_mesh[0].size
    table = np.empty((nb_rows, nb_dims), dtype=dtype)
    for [d, [col, indices]] in enumerate(zip(columns, index_mesh)):
        table[:, d] = col[indices.ravel(order=ravel_order)]
    return table


def as_column(seq) -> np.ndarray:
    """Turn a sequence into a 1D array, numeric if possible, otherwise of dtype object."""
    if isinstance(seq, np.ndarray) and seq.dtype.kind in numeric_kinds:
        return seq.ravel()
    if isinstance(seq, str):
        seq = list(seq)
    items = list(seq)

    try:
        arr = np.array(items)
    except ValueError:
        # ragged items, e.g. lists of different lengths
        arr = None
    if arr is not None and arr.ndim == 1 and arr.dtype.kind in numeric_kinds:
        return arr

    column = np.empty(len(items), dtype=object)
    for [i, item] in enumerate(items):
        column[i] = item
    return column


def common_dtype(columns: list[np.ndarray]) -> np.dtype:
    if all(col.dtype.kind in numeric_kinds for col in columns):
        return np.result_type(*columns)
    return np.dtype(object)
