from eightpuzzle import a_star_graph_manhattan_distance as a_star


def test_name_is_docstring():
    assert a_star.search.__doc__ == 'A* graph search using manhattan distance heuristic'


def test_returns_two_dimensional_steps():
    state = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    goal_state = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]

    assert a_star.search(state, goal_state) == [state, goal_state]


def test_solved_state():
    goal_state = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert a_star.search(goal_state, goal_state) == [goal_state]


def test_steps_with_custom_goal():
    state = [[1, 0, 2], [3, 4, 5], [6, 7, 8]]
    goal_state = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    output = a_star.search(state, goal_state)
    assert output[0] == state
    assert output[-1] == goal_state
    assert len(output) == 2
