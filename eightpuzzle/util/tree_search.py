"""
pyeightpuzzle - Solve 8-puzzle with Python

Board model and search tree utilities

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
from collections import namedtuple
from enum import Enum

# Number of rows (and columns) of the board
ROW = 3
# Number of cells of the board
SIZE = ROW * ROW
# Default goal state, blank at the bottom right corner
GOAL_STATE = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class Move(Enum):
    """
    The direction the blank tile travels.

    START is only used for the root of a search tree.
    """
    START = (0, 0)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def __str__(self):
        return self.name.capitalize()


# Moves are always tried in this order
MOVES_ORDER = (Move.RIGHT, Move.DOWN, Move.LEFT, Move.UP)


def check_puzzle_list(lst):
    """
    Checks a puzzle one dimensional list and validates it.

    Empty strings are read as the blank tile.

     Returns True of it's fine and False if it's not valid.
    """
    # Check list's length
    if len(lst) != SIZE:
        return False

    lst = [0 if x == '' else x for x in lst]

    # The list must have all numbers from 0 to 8 exactly once
    try:
        return sorted(lst) == list(range(SIZE))
    except TypeError:
        return False


def is_valid_board(board):
    """
    Checks that board holds every integer from 0 to 8 exactly once.
    """
    if len(board) != SIZE:
        return False
    if not all(type(tile) is int for tile in board):
        return False
    return sorted(board) == list(range(SIZE))


def list_to_puzzle(lst):
    """
    Converts a one dimensional puzzle list and returns it's two dimensional representation.

    [1, 2, 3, 4, 5, 6, 7, 8, 0] --> [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    """
    puzzle = []
    for i in range(0, len(lst), ROW):
        puzzle.append(list(lst[i:i + ROW]))

    return puzzle


def puzzle_to_list(puzzle):
    """
    Converts a two dimensional puzzle to a one dimensional puzzle.

    [[1, 2, 3], [4, 5, 6], [7, 8, 0]] --> [1, 2, 3, 4, 5, 6, 7, 8, 0]
    """
    lst = []
    for row in puzzle:
        lst.extend(row)

    return lst


def blank_position(board):
    """
    Returns (row, column) of the blank tile.
    """
    for i in range(SIZE):
        if board[i] == 0:
            return divmod(i, ROW)

    assert False, "board has no blank tile: %r" % (board,)


def try_move(board, offset):
    """
    Moves the blank tile by offset, a (row, column) pair.

    Returns the new board, or None if the blank would leave the grid.
    """
    zero_i, zero_j = blank_position(board)
    i = zero_i + offset[0]
    j = zero_j + offset[1]
    if not (0 <= i < ROW and 0 <= j < ROW):
        return None

    zero = zero_i * ROW + zero_j
    other = i * ROW + j
    new_board = list(board)
    new_board[zero], new_board[other] = new_board[other], new_board[zero]
    return tuple(new_board)


def neighbors(board):
    """
    Yields (move, board) for every board reachable from board with one move.
    """
    for move in MOVES_ORDER:
        new_board = try_move(board, move.value)
        if new_board is not None:
            yield move, new_board


def encode(board):
    """
    Encodes a board as an integer, taking each tile as a decimal digit.

    The first tile is the least significant digit.
    """
    key = 0
    for i in range(SIZE):
        key += board[i] * 10 ** i
    return key


def count_inversions(board, goal_state=GOAL_STATE):
    """
    Counts tile pairs whose order differs from their order in goal_state.

    The blank tile is ignored.
    """
    order = {tile: i for i, tile in enumerate(goal_state)}
    tiles = [order[tile] for tile in board if tile != 0]

    inversions = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                inversions += 1
    return inversions


def is_solvable(board, goal_state=GOAL_STATE):
    """
    On an odd sized board a puzzle is solvable iff it has an even number of inversions.

    See https://www.sitepoint.com/randomizing-sliding-puzzle-tiles/ for more information.
    """
    return count_inversions(board, goal_state) % 2 == 0


# A node of the search tree.
#
# parent is the index of the parent node inside the run's NodeArena, None for the root.
SearchNode = namedtuple('SearchNode', ['index', 'board', 'move', 'g', 'f', 'parent'])


class NodeArena:
    """
    Owns every node created by one search run.

    Nodes refer to their parents by index, so dropping the arena releases the whole tree.
    """

    def __init__(self):
        self._nodes = []

    def add(self, board, g, f, move=Move.START, parent=None):
        node = SearchNode(len(self._nodes), board, move, g, f, parent)
        self._nodes.append(node)
        return node

    def __getitem__(self, index):
        return self._nodes[index]

    def __len__(self):
        return len(self._nodes)

    def parents(self, node):
        current_node = node
        while current_node.parent is not None:
            current_node = self._nodes[current_node.parent]
            yield current_node


def reconstruct_path(arena, node):
    """
    Walks from node back to the root.

    Returns the list of nodes ordered from the root to node.
    """
    path = [node]
    path.extend(arena.parents(node))
    path.reverse()

    return path
