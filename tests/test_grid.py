import numpy as np
import pytest

from mggss.grid import Grid


def test_zeros_shape_and_values():
    grid = Grid.zeros(5)
    assert grid.u.shape == (7, 7)
    assert grid.v.shape == (7, 7)
    assert not grid.u.any()
    assert not grid.v.any()


def test_n_follows_array_shape():
    grid = Grid(np.ones((9, 9)), np.zeros((9, 9)))
    assert grid.n == 7


def test_step_width():
    assert Grid.zeros(3).h == 0.25
    assert Grid.zeros(199).h == pytest.approx(0.005)


def test_copy_is_independent():
    grid = Grid.zeros(2)
    grid.u[1, 1] = 4.0
    clone = grid.copy()
    clone.u[1, 1] = 7.0
    clone.v[2, 2] = 1.0
    assert grid.u[1, 1] == 4.0
    assert grid.v[2, 2] == 0.0
    assert clone.n == grid.n


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid.zeros(-1)


def test_mismatched_shapes_rejected():
    with pytest.raises(ValueError):
        Grid(np.zeros((4, 4)), np.zeros((5, 5)))


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Grid(np.zeros((4, 5)), np.zeros((4, 5)))