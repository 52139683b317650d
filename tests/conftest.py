"""Pytest fixtures for pyeightpuzzle tests."""

import pytest


@pytest.fixture
def goal_board():
    """The default goal board."""
    return (1, 2, 3, 4, 5, 6, 7, 8, 0)


@pytest.fixture
def one_move_board():
    """A board one move (blank right) away from the goal."""
    return (1, 2, 3, 4, 5, 6, 7, 0, 8)


@pytest.fixture
def four_moves_board():
    """A board whose only optimal solution is right, down, right, down."""
    return (0, 1, 3, 4, 2, 5, 7, 8, 6)


@pytest.fixture
def hardest_board():
    """One of the two 8-puzzle boards that need 31 moves."""
    return (6, 4, 7, 8, 5, 0, 3, 2, 1)


@pytest.fixture
def unsolvable_board():
    """Goal board with two tiles swapped, odd permutation."""
    return (1, 2, 3, 4, 5, 6, 8, 7, 0)
