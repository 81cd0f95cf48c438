import logging

import numpy as np
import pytest

from gauss_integral.errors import ArgumentError
from gauss_integral.numeric.cartesian import cartesian_product


def test_last_sequence_varies_fastest():
    table = cartesian_product([[1, 2], [3, 4, 5]])
    expected = np.array([
        [1, 3],
        [1, 4],
        [1, 5],
        [2, 3],
        [2, 4],
        [2, 5],
    ])
    assert table.shape == (6, 2)
    assert np.array_equal(table, expected)


def test_first_sequence_varies_fastest():
    table = cartesian_product([[1, 2], [3, 4], [5, 6]], fastest="first")
    assert np.array_equal(table[:4], [[1, 3, 5], [2, 3, 5], [1, 4, 5], [2, 4, 5]])
    assert np.array_equal(table[-1], [2, 4, 6])
    assert table.shape == (8, 3)


def test_three_sequences_match_nested_loops():
    a, b, c = [0.5, 1.5], [-1.0, 0.0, 1.0], [7.0, 8.0, 9.0, 10.0]
    expected = [[x, y, z] for x in a for y in b for z in c]
    assert np.array_equal(cartesian_product([a, b, c]), expected)


def test_numeric_dtype_is_preserved():
    assert cartesian_product([[1, 2], [3]]).dtype.kind == "i"
    assert cartesian_product([[1, 2], [0.5]]).dtype == np.float64
    assert cartesian_product([np.array([[1.0, 2.0]]), [3.0]]).shape == (2, 2)


def test_empty_sequence_gives_empty_table(caplog):
    with caplog.at_level(logging.WARNING):
        table = cartesian_product([[1, 2], []])
    assert table.shape == (0, 2)
    assert "Empty inputs" in caplog.text


def test_no_sequences():
    assert cartesian_product([]).shape == (0, 0)


def test_single_sequence():
    table = cartesian_product([[3.0, 1.0, 2.0]])
    assert np.array_equal(table, [[3.0], [1.0], [2.0]])


def test_character_sequences():
    table = cartesian_product(["abc", "XY"])
    assert table.dtype == object
    assert ["".join(row) for row in table] == ["aX", "aY", "bX", "bY", "cX", "cY"]


def test_mixed_sequences():
    table = cartesian_product(["xy", [65, 66]])
    assert table.dtype == object
    assert [tuple(row) for row in table] == [("x", 65), ("x", 66), ("y", 65), ("y", 66)]


def test_opaque_elements():
    table = cartesian_product([["hello", "Bye"], ["Joe", [10, 11, 12]], [99999, None]])
    assert table.shape == (8, 3)
    assert tuple(table[0]) == ("hello", "Joe", 99999)
    assert tuple(table[1]) == ("hello", "Joe", None)
    assert table[2, 1] == [10, 11, 12]
    assert tuple(table[7][[0, 2]]) == ("Bye", None)


def test_generator_input():
    table = cartesian_product(range(n) for n in (2, 2))
    assert np.array_equal(table, [[0, 0], [0, 1], [1, 0], [1, 1]])


def test_unknown_ordering():
    with pytest.raises(ArgumentError, match="ordering"):
        cartesian_product([[1], [2]], fastest="middle")
