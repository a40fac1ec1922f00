import argparse
import logging
import sys

from models.annealing import DEFAULT_TEMPERATURE
from models.errors import MalformedInputError
from models.montecarlo import DEFAULT_MAX_TRIES, RepairStrategy
from models.result import Algorithm, SolveStatus
from utils.config import DEFAULT_ALGORITHM, DEFAULT_REPAIR, SolverConfig
from utils.image_rendering import save_grid_image
from utils.text_format import format_grid, format_side_by_side, read_grid

EXIT_SOLVED = 0
EXIT_NOT_SOLVED = 1
EXIT_INVALID_INPUT = 2
EXIT_OUTPUT_ERROR = 3

log = logging.getLogger(__name__)


class SudokuApp:
    def __init__(self, config):
        self.config = config
        self.sudoku_solver = config.create_solver()

    def run(self):
        """Read, solve and print the configured sudoku; return the exit code"""
        print(f"Using input file: {self.config.input_file}")

        try:
            grid = read_grid(self.config.input_file)
        except MalformedInputError as e:
            print(f"Invalid sudoku file: {e}")
            return EXIT_INVALID_INPUT
        except OSError as e:
            print(f"Could not read sudoku file: {e}")
            return EXIT_INVALID_INPUT

        log.debug("Puzzle:\n%s", format_grid(grid))
        result = self.sudoku_solver.solve(grid)
        return self.report(grid, result)

    def report(self, grid, result):
        """Print the outcome of a solve run"""
        if result.status is SolveStatus.CONTRADICTORY:
            cells = ", ".join(f"({r},{c})" for r, c in result.conflicts)
            print(f"Sudoku is contradictory: conflicting given cells at {cells}")
            return EXIT_NOT_SOLVED

        if result.status is SolveStatus.UNSOLVABLE:
            print(f"Sudoku has no solution ({result.tries} tries).")
            return EXIT_NOT_SOLVED

        if result.status is SolveStatus.BUDGET_EXHAUSTED:
            print(f"Could not solve sudoku. Exceeded limit of {self.config.max_tries} tries.")
            return EXIT_NOT_SOLVED

        self.print_grid(grid, result.grid)

        if self.config.save_image:
            try:
                save_grid_image(self.config.save_image, grid, result.grid)
            except OSError as e:
                print(f"Could not save image: {e}")
                return EXIT_OUTPUT_ERROR

        print(f"Solved. Needed {result.tries} tries.")
        if self.config.save_image:
            print(f"Saved solution image to {self.config.save_image}")

        return EXIT_SOLVED

    def print_grid(self, original, solved):
        """Print the solution, next to the puzzle when asked to"""
        if self.config.show_unsolved:
            print(format_side_by_side(original, solved))
        else:
            print(format_grid(solved))


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, received {value}")
    return number


def positive_float(value):
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, received {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sudoku-solver",
        description="Solve a 9x9 sudoku read from a text file.")
    parser.add_argument("input", metavar="INPUT",
                        help="Sets the file to read the sudoku from")
    parser.add_argument("--show-unsolved", action="store_true",
                        help="Shows the unsolved sudoku next to the solution")
    parser.add_argument("--max-tries", type=positive_int, default=DEFAULT_MAX_TRIES,
                        help="Maximum number of tries for the montecarlo and annealing algorithms "
                             "(default: %(default)s)")
    parser.add_argument("--algorithm", choices=[a.value for a in Algorithm],
                        default=DEFAULT_ALGORITHM,
                        help="Selects which algorithm will be used to solve the sudoku "
                             "(default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed of the random source used by the montecarlo and annealing "
                             "algorithms")
    parser.add_argument("--repair", choices=[s.value for s in RepairStrategy],
                        default=DEFAULT_REPAIR,
                        help="What the montecarlo algorithm clears when a cell has no legal "
                             "digit left (default: %(default)s)")
    parser.add_argument("--temperature", type=positive_float, default=DEFAULT_TEMPERATURE,
                        help="Temperature of the annealing algorithm, higher values accept "
                             "more swaps that make the grid worse (default: %(default)s)")
    parser.add_argument("--save-image", metavar="PATH", default=None,
                        help="Also write the solution as an image, e.g. solution.png")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Sets the level of verbosity, can be used multiple times")
    return parser


def setup_logging(verbosity):
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)
    log.debug("Set logging level to: %s", logging.getLevelName(level))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    app = SudokuApp(SolverConfig.from_args(args))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
