from eightpuzzle.util.heuristics import ManhattanHeuristic, goal_positions, manhattan_distance
from eightpuzzle.util.tree_search import neighbors


def test_goal_positions(goal_board):
    places = goal_positions(goal_board)
    assert places[1] == (0, 0)
    assert places[5] == (1, 1)
    assert places[0] == (2, 2)


def test_goal_has_zero_distance(goal_board):
    assert manhattan_distance(goal_board) == 0


def test_blank_is_not_counted(one_move_board):
    # Only tile 8 is one column away from it's place
    assert manhattan_distance(one_move_board) == 1


def test_distance(four_moves_board, hardest_board):
    assert manhattan_distance(four_moves_board) == 4
    assert manhattan_distance(hardest_board) == 21


def test_custom_goal():
    goal = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    hn = ManhattanHeuristic(goal)
    assert hn(goal) == 0
    assert hn((1, 0, 2, 3, 4, 5, 6, 7, 8)) == 1
    assert hn((1, 2, 3, 4, 5, 6, 7, 8, 0)) == manhattan_distance((1, 2, 3, 4, 5, 6, 7, 8, 0), goal)


def test_consistent_on_neighbors(hardest_board):
    hn = ManhattanHeuristic()
    for _, board in neighbors(hardest_board):
        assert abs(hn(board) - hn(hardest_board)) == 1
