"""
pyeightpuzzle - Solve 8-puzzle with Python

Manhattan distance heuristic

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
from .tree_search import ROW, GOAL_STATE


def goal_positions(goal_state):
    """
    Returns a list that maps every tile to it's (row, column) inside goal_state.
    """
    tiles_places = [None] * len(goal_state)
    for i, tile in enumerate(goal_state):
        tiles_places[tile] = divmod(i, ROW)
    return tiles_places


def manhattan_distance(board, goal_state=GOAL_STATE, tiles_places=None):
    """
    Sum of manhattan distances of every tile to it's place in goal_state.

    The blank tile is not counted.
    """
    if tiles_places is None:
        tiles_places = goal_positions(goal_state)

    cost = 0
    for i, tile in enumerate(board):
        if tile == 0:
            continue
        tile_i, tile_j = tiles_places[tile]
        row, column = divmod(i, ROW)
        cost += abs(tile_i - row) + abs(tile_j - column)
    return cost


class ManhattanHeuristic:
    """
    Manhattan distance bound to one goal state.
    """

    def __init__(self, goal_state=GOAL_STATE):
        self.goal_state = tuple(goal_state)
        self._tiles_places = goal_positions(self.goal_state)

    def __call__(self, board):
        return manhattan_distance(board, tiles_places=self._tiles_places)
