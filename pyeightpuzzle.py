#!/usr/bin/env python3
"""
pyeightpuzzle - Solve 8-puzzle with Python

Version : 1.0.0
Author : Hamidreza Mahdavipanah
Repository: http://github.com/mahdavipanah/pynpuzzle
License : MIT License
"""
import argparse
import datetime
import multiprocessing
import random
import re
import sys
import threading
import traceback

import psutil

from eightpuzzle.util.tree_search import (GOAL_STATE, ROW, SIZE, check_puzzle_list, is_solvable, neighbors,
                                          list_to_puzzle)
from eightpuzzle.util.best_first_seach import solve

# Global variables
#
# Stores app logs
LOGS = []
# Interval between two samples of search process's resource usage, in seconds
SAMPLING_INTERVAL = 0.001

# Exit codes
EXIT_SOLVED = 0
EXIT_NOT_SOLVED = 1
EXIT_INPUT_ERROR = 2


class PuzzleInputError(Exception):
    """
    Raised when an input puzzle can not be read or is not valid.
    """


def log_datetime():
    """
    Returns the datetime for logging.
    """
    now = datetime.datetime.now()
    return now.strftime("%Y-%m-%d %H:%M")


def log(level, message):
    LOGS.append(log_datetime() + ' : ' + level + ' : ' + message + '\n')


def parse_puzzle(text):
    """
    Parses a puzzle from a string of nine numbers separated by spaces or commas.

    Returns the puzzle's one dimensional list.
    """
    items = [item for item in re.split(r'[\s,]+', text.strip()) if item != '']
    try:
        lst = [int(item) for item in items]
    except ValueError:
        raise PuzzleInputError("Input must not contain non-number values.")

    if not check_puzzle_list(lst):
        raise PuzzleInputError("Puzzle numbers are not valid.")

    return lst


def read_puzzle_file(file_name):
    """
    Reads a puzzle from a file.

    Every line of the file is a row of the puzzle, it's numbers separated by spaces.
    Reading stops at the first empty line.
    """
    try:
        with open(file_name) as file:
            lines = []
            pattern = re.compile(r'\s+')

            for line in file:
                # Check if line is empty
                if re.sub(pattern, '', line) == '':
                    # Stop reading from input file
                    break

                lines.append(line.strip())
    except (OSError, UnicodeDecodeError):
        raise PuzzleInputError("Some problem happened while opening input file.")

    if len(lines) != ROW:
        raise PuzzleInputError("Puzzle dimension is not valid.")

    lst = []
    for line in lines:
        line_split = line.split()
        if len(line_split) != ROW:
            raise PuzzleInputError("Puzzle dimension is not valid.")
        try:
            lst.extend([int(i) for i in line_split])
        except ValueError:
            raise PuzzleInputError("Input must not contain non-number values.")

    if not check_puzzle_list(lst):
        raise PuzzleInputError("Puzzle numbers are not valid.")

    return lst


def puzzle_to_text(lst):
    """
    Returns the puzzle's rows, one per line, numbers separated by spaces.
    """
    return '\n'.join(' '.join(str(tile) for tile in row) for row in list_to_puzzle(lst))


def save_puzzle_file(lst, file_name):
    """
    Saves a puzzle to a file in the format read_puzzle_file reads.
    """
    try:
        with open(file_name, 'w') as file:
            file.write(puzzle_to_text(lst))
    except OSError:
        raise PuzzleInputError("Some problem happened while saving puzzle to the file.")


def random_puzzle(goal_state=GOAL_STATE, rng=random):
    """
    Generates a random solvable puzzle.

    If the shuffled puzzle is not solvable, swapping two non-blank tiles makes it solvable.
    """
    lst = list(range(SIZE))
    rng.shuffle(lst)

    if not is_solvable(lst, goal_state):
        if lst[0] != 0 and lst[1] != 0:
            lst[0], lst[1] = lst[1], lst[0]
        else:
            lst[len(lst) - 1], lst[len(lst) - 2] = lst[len(lst) - 2], lst[len(lst) - 1]

    return lst


def n_step_random(n_step, goal_state=GOAL_STATE, rng=random):
    """
    Generates a random puzzle that can be solved in at most n_step moves.

    The blank never moves straight back to where it came from.
    """
    puzzle = tuple(goal_state)
    prev_puzzle = None
    for _ in range(n_step):
        new_puzzles = [board for _, board in neighbors(puzzle) if board != prev_puzzle]

        prev_puzzle = puzzle
        puzzle = new_puzzles[rng.randrange(0, len(new_puzzles))]

    return list(puzzle)


class ResourceMonitor:
    """
    Samples cpu time and memory usage of a process on a daemon thread.

    Memory values are in megabytes and cpu time is in seconds.
    """

    def __init__(self, pid, interval=SAMPLING_INTERVAL):
        self.pid = pid
        self.process = None
        self.interval = interval
        self.ram = 0.0
        self.max_ram = 0.0
        self.cpu = 0.0
        # An event object that tells the timer thread to stop
        self.timer_event = threading.Event()
        self.timer_thread = None

    def sample(self):
        new_val = round(self.process.memory_full_info().uss / (2 ** 20), 3)
        self.ram = new_val
        if new_val > self.max_ram:
            self.max_ram = new_val

        cpu_times = self.process.cpu_times()
        self.cpu = round(cpu_times.user + cpu_times.system, 3)

    def timing(self):
        while not self.timer_event.is_set():
            try:
                if self.process is None:
                    self.process = psutil.Process(self.pid)
                self.sample()
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                # Search process has finished
                break

            self.timer_event.wait(self.interval)

    def start(self):
        self.timer_event.clear()
        self.timer_thread = threading.Thread(target=self.timing, daemon=True)
        self.timer_thread.start()

    def stop(self):
        self.timer_event.set()
        if self.timer_thread:
            self.timer_thread.join()


def search_runner(func, pipe, lst, goal_state):
    """
    This function invokes the given func with lst and goal_state arguments and sends func's returned value to pipe.
    If some exception happened in func, sends print ready exception's string to show to user.
    """
    try:
        ret_val = func(lst, goal_state)
        pipe.send(ret_val)
    except BaseException as e:
        exception_message = traceback.format_exception(type(e), e, e.__traceback__)
        pipe.send(''.join(exception_message))
    finally:
        pipe.close()


def run_search(lst, goal_state=GOAL_STATE, timeout=None, func=solve):
    """
    Runs func(lst, goal_state) in a separate process.

    Returns (result, monitor). result is None if the search was stopped after timeout seconds
    and it's a string containing the traceback if some exception happened in func.
    """
    output_pipe, process_pipe = multiprocessing.Pipe(duplex=False)
    search_process = multiprocessing.Process(target=search_runner,
                                             args=(func, process_pipe, list(lst), tuple(goal_state)))
    search_process.daemon = True
    search_process.start()
    # Only the search process writes to the pipe
    process_pipe.close()

    monitor = ResourceMonitor(search_process.pid)
    monitor.start()

    result = None
    try:
        if output_pipe.poll(timeout):
            result = output_pipe.recv()
        else:
            log('Warning', 'Search stopped after %s seconds' % timeout)
            search_process.terminate()
    except EOFError:
        result = "Search process exited without sending a result.\n"
    finally:
        monitor.stop()
        output_pipe.close()
        search_process.join()

    return result, monitor


def print_solution(result, show_steps, out=None):
    if out is None:
        out = sys.stdout

    out.write('Moves: ' + ', '.join(str(move) for move in result.moves) + '\n')
    out.write('Steps: %d\n' % result.step_count)

    if show_steps:
        for i, (move, board) in enumerate(zip(result.moves, result.boards)):
            out.write('\n%d. %s\n' % (i, move))
            out.write(puzzle_to_text(board) + '\n')


def create_parser():
    parser = argparse.ArgumentParser(prog='pyeightpuzzle', description='Solve 8-puzzle with Python')
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument('-f', '--file', help='read the input puzzle from a file')
    input_group.add_argument('-b', '--board', help='input puzzle as nine numbers, 0 is the blank')
    input_group.add_argument('-r', '--random', action='store_true', help='solve a random solvable puzzle')
    input_group.add_argument('-n', '--n-step-random', type=int, metavar='N',
                             help='solve a random puzzle made by N moves from the goal state')
    parser.add_argument('-g', '--goal', help='goal state as nine numbers (default: %(default)s)',
                        default=' '.join(str(tile) for tile in GOAL_STATE))
    parser.add_argument('--timeout', type=float, help='stop searching after this many seconds')
    parser.add_argument('--save', metavar='FILE', help='save the input puzzle to a file')
    parser.add_argument('--steps', action='store_true', help='print every step of the solution')
    parser.add_argument('--logs', action='store_true', help='print application logs')
    return parser


def load_input(args, goal_state):
    if args.file is not None:
        lst = read_puzzle_file(args.file)
        log('OK', 'Loaded input puzzle from ' + args.file)
    elif args.board is not None:
        lst = parse_puzzle(args.board)
    elif args.random:
        lst = random_puzzle(goal_state)
        log('OK', 'Generated random puzzle')
    else:
        if args.n_step_random < 0:
            raise PuzzleInputError("Number of steps must not be negative.")
        lst = n_step_random(args.n_step_random, goal_state)
        log('OK', 'Generated %d-step random puzzle' % args.n_step_random)

    return lst


def main(argv=None):
    args = create_parser().parse_args(argv)

    try:
        goal_state = parse_puzzle(args.goal)
        lst = load_input(args, goal_state)
        if args.save:
            save_puzzle_file(lst, args.save)
            log('OK', 'Saved input puzzle to ' + args.save)
    except PuzzleInputError as e:
        log('Error', str(e))
        sys.stderr.write('Input error: ' + str(e) + '\n')
        if args.logs:
            sys.stderr.write(''.join(LOGS))
        return EXIT_INPUT_ERROR

    print('Input:')
    print(puzzle_to_text(lst))
    print()

    log('OK', 'Search started, available RAM(MB): %s' % round(psutil.virtual_memory().available / (2 ** 20), 3))
    result, monitor = run_search(lst, goal_state, args.timeout)

    exit_code = EXIT_NOT_SOLVED
    if result is None:
        print('Search stopped after %s seconds.' % args.timeout)
    elif isinstance(result, str):
        log('Error', 'Exception raised in search process')
        sys.stderr.write("Some exception happened in algorithm's source code:\n\n" + result)
    elif result.solved:
        log('OK', 'Solved in %d steps' % result.step_count)
        print_solution(result, args.steps)
        exit_code = EXIT_SOLVED
    else:
        log('OK', 'Puzzle is not solvable')
        print('Puzzle is not solvable.')

    if result is not None and not isinstance(result, str):
        print('Expanded nodes: %d' % result.stats.expanded)
    print('Execution time(s): %s' % monitor.cpu)
    print('Max RAM usage(MB): %s' % monitor.max_ram)

    if args.logs:
        print()
        print(''.join(LOGS), end='')

    return exit_code


if __name__ == '__main__':
    # Support windows binary freezing
    multiprocessing.freeze_support()
    sys.exit(main())
