import time

import pytest

from eightpuzzle.util.best_first_seach import AStarSearch, Solved, Unsolvable, solve
from eightpuzzle.util.tree_search import Move, blank_position, try_move


def replay(initial, moves):
    board = initial
    for move in moves[1:]:
        board = try_move(board, move.value)
        assert board is not None
    return board


def assert_valid_solution(result, initial, goal):
    assert result.moves[0] is Move.START
    assert result.boards[0] == tuple(initial)
    assert result.boards[-1] == tuple(goal)
    assert result.step_count == len(result.moves) - 1 == len(result.boards) - 1
    assert [node.g for node in result.path] == list(range(len(result.path)))

    for move, before, after in zip(result.moves[1:], result.boards, result.boards[1:]):
        # Exactly the blank and one adjacent tile swapped places
        changed = [i for i in range(9) if before[i] != after[i]]
        assert len(changed) == 2
        assert after[changed[0]] == before[changed[1]]
        assert 0 in (before[changed[0]], before[changed[1]])
        assert try_move(before, move.value) == after

    assert replay(tuple(initial), result.moves) == tuple(goal)


def test_already_solved(goal_board):
    result = solve(goal_board, goal_board)
    assert isinstance(result, Solved)
    assert result.solved
    assert result.step_count == 0
    assert result.moves == [Move.START]


def test_one_move(one_move_board, goal_board):
    result = solve(one_move_board, goal_board)
    assert result.step_count == 1
    assert result.moves == [Move.START, Move.RIGHT]
    assert_valid_solution(result, one_move_board, goal_board)


def test_four_moves(four_moves_board, goal_board):
    result = solve(list(four_moves_board))
    assert result.step_count == 4
    assert result.moves == [Move.START, Move.RIGHT, Move.DOWN, Move.RIGHT, Move.DOWN]
    assert_valid_solution(result, four_moves_board, goal_board)


def test_custom_goal(goal_board):
    goal = (1, 2, 3, 4, 5, 6, 7, 0, 8)
    result = solve(goal_board, goal)
    assert result.moves == [Move.START, Move.LEFT]
    assert result.boards[-1] == goal


def test_blank_on_top_left_goal():
    initial = (3, 1, 2, 0, 4, 5, 6, 7, 8)
    goal = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    result = solve(initial, goal)
    assert result.step_count == 1
    assert result.moves == [Move.START, Move.UP]


def test_eight_moves(goal_board):
    # Made by eight moves from the goal each moving a tile away from it's place,
    # so manhattan distance is 8 too
    initial = (4, 1, 3, 7, 0, 5, 8, 2, 6)
    result = solve(initial, goal_board)
    assert result.step_count == 8
    assert_valid_solution(result, initial, goal_board)


@pytest.mark.slow
def test_hardest_board(hardest_board, goal_board):
    result = solve(hardest_board, goal_board)
    assert result.step_count == 31
    assert_valid_solution(result, hardest_board, goal_board)


@pytest.mark.slow
def test_unsolvable(unsolvable_board, goal_board):
    result = solve(unsolvable_board, goal_board)
    assert isinstance(result, Unsolvable)
    assert not result.solved
    # Every board of the unsolvable half of the state space has been expanded
    assert result.stats.visited == 181440
    assert result.stats.expanded == 181440


def test_stats(four_moves_board):
    search = AStarSearch(four_moves_board)
    result = search.run()
    stats = result.stats

    assert stats is search.stats
    assert stats.generated == len(search.arena)
    assert stats.expanded == stats.visited == len(search.visited)
    assert stats.max_frontier >= 1
    # Root and every node on the path but the goal are expanded
    assert stats.expanded >= result.step_count


def test_step_until_result(one_move_board):
    search = AStarSearch(one_move_board)
    assert search.step() is None
    result = search.step()
    assert result.solved
    # Further steps keep returning the same result
    assert search.step() is result
    assert search.result is result


def test_external_deadline(hardest_board):
    search = AStarSearch(hardest_board)
    deadline = time.monotonic() + 0.05
    steps = 0
    result = None
    while result is None and time.monotonic() < deadline and steps < 200:
        result = search.step()
        steps += 1

    assert result is None
    assert search.result is None
    assert search.stats.expanded + search.stats.skipped == steps

    # The interrupted search can go on
    for _ in range(10):
        search.step()
    assert search.stats.expanded + search.stats.skipped == steps + 10


@pytest.mark.parametrize('arity', [2, 3, 4])
def test_arity_does_not_change_length(four_moves_board, arity):
    result = AStarSearch(four_moves_board, arity=arity).run()
    assert result.step_count == 4


@pytest.mark.parametrize('board', [
    (1, 2, 3),
    (1, 1, 3, 4, 5, 6, 7, 8, 0),
    (1, 2, 3, 4, 5, 6, 7, 8, 9),
    [1, 2, 3, 4, 5, 6, 7, 8, ''],
    (1, 2, 3, 4, 5, 6, 7, 8, 0.0),
])
def test_invalid_initial_board(board, goal_board):
    with pytest.raises(ValueError):
        solve(board, goal_board)


def test_invalid_goal_board(goal_board):
    with pytest.raises(ValueError):
        solve(goal_board, (1, 2, 3, 4, 5, 6, 7, 8, 8))


def test_root_blank_position_is_kept(four_moves_board):
    result = solve(four_moves_board)
    assert blank_position(result.boards[0]) == (0, 0)
    assert blank_position(result.boards[-1]) == (2, 2)
