"""
pyeightpuzzle - Solve 8-puzzle with Python

Best-first graph search algorithm (A*)

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
from .tree_search import NodeArena, GOAL_STATE, is_valid_board, encode, neighbors, reconstruct_path
from .heuristics import ManhattanHeuristic
from .priority_queue import PriorityQueue
from .visited_set import VisitedSet


class SearchStats:
    """
    Counters of one search run.
    """

    def __init__(self):
        # Nodes popped and expanded
        self.expanded = 0
        # Nodes created, root included
        self.generated = 0
        # Popped nodes whose board was already expanded
        self.skipped = 0
        # Largest open set size
        self.max_frontier = 0
        # Closed set size
        self.visited = 0

    def __repr__(self):
        return ('SearchStats(expanded=%d, generated=%d, skipped=%d, max_frontier=%d, visited=%d)'
                % (self.expanded, self.generated, self.skipped, self.max_frontier, self.visited))


class SolveResult:
    solved = False

    def __init__(self, stats):
        self.stats = stats


class Solved(SolveResult):
    """
    moves starts with Move.START, boards[i] is the board after moves[i].
    """
    solved = True

    def __init__(self, path, stats):
        super().__init__(stats)
        self.path = path
        self.moves = [node.move for node in path]
        self.boards = [node.board for node in path]
        self.step_count = path[-1].g

    def __repr__(self):
        return 'Solved(step_count=%d, moves=[%s])' % (self.step_count, ', '.join(str(m) for m in self.moves))


class Unsolvable(SolveResult):

    def __repr__(self):
        return 'Unsolvable()'


def search_key(node):
    # Ties on f are broken by entrance order
    return node.f, node.index


class AStarSearch:
    """
    A* graph search over the boards reachable from initial.

    Call step() repeatedly, or run() to search until a result is found.
    """

    def __init__(self, initial, goal_state=GOAL_STATE, heuristic=None, arity=2):
        if not is_valid_board(tuple(initial)):
            raise ValueError("Initial board is not valid: %r" % (initial,))
        if not is_valid_board(tuple(goal_state)):
            raise ValueError("Goal board is not valid: %r" % (goal_state,))

        self.goal_state = tuple(goal_state)
        self.hn = heuristic if heuristic is not None else ManhattanHeuristic(self.goal_state)
        self.arena = NodeArena()
        self.open_set = PriorityQueue(key=search_key, arity=arity)
        self.visited = VisitedSet()
        self.stats = SearchStats()
        self.result = None

        initial = tuple(initial)
        self._push(self.arena.add(initial, 0, self.hn(initial)))

    def _push(self, node):
        self.open_set.push(node)
        self.stats.generated += 1
        if len(self.open_set) > self.stats.max_frontier:
            self.stats.max_frontier = len(self.open_set)

    def _finish(self, result):
        self.stats.visited = len(self.visited)
        self.result = result
        return result

    def step(self):
        """
        Expands one node.

        Returns the SolveResult when search is over and None otherwise.
        """
        if self.result is not None:
            return self.result

        if not self.open_set:
            return self._finish(Unsolvable(self.stats))

        node = self.open_set.pop_min()
        key = encode(node.board)
        # The same board may be pushed more than once before it's expanded
        if key in self.visited:
            self.stats.skipped += 1
            return None

        if node.board == self.goal_state:
            return self._finish(Solved(reconstruct_path(self.arena, node), self.stats))

        self.visited.add(key)
        self.stats.expanded += 1

        g = node.g + 1
        for move, board in neighbors(node.board):
            if encode(board) in self.visited:
                continue
            self._push(self.arena.add(board, g, g + self.hn(board), move, node.index))

        return None

    def run(self):
        result = self.step()
        while result is None:
            result = self.step()
        return result


def solve(initial_board, goal_board=GOAL_STATE):
    """
    Finds a shortest sequence of moves from initial_board to goal_board.

    Returns Solved or Unsolvable.
    """
    return AStarSearch(initial_board, goal_board).run()
