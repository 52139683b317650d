"""
pyeightpuzzle - Solve 8-puzzle with Python

A* graph search algorithm using manhattan distance heuristic

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
from .util.tree_search import list_to_puzzle, puzzle_to_list
from .util import best_first_seach as bfs


def search(state, goal_state):
    """A* graph search using manhattan distance heuristic"""
    result = bfs.solve(puzzle_to_list(state), puzzle_to_list(goal_state))
    if not result.solved:
        return []

    return [list_to_puzzle(board) for board in result.boards]
