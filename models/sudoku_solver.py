import logging

from models.annealing import DEFAULT_TEMPERATURE, AnnealingSolver
from models.backtracking import BacktrackingSolver
from models.montecarlo import DEFAULT_MAX_TRIES, MonteCarloSolver, RepairStrategy
from models.result import Algorithm, SolveResult, SolveStatus

log = logging.getLogger(__name__)


class SudokuSolver:
    """Single entry point for solving a sudoku with one of the algorithms.

    ``max_tries``, ``seed`` and ``rng`` apply to the randomized algorithms,
    ``repair`` only to Monte Carlo and ``temperature`` only to annealing.
    Backtracking always runs until it finds a solution or proves there is none.
    """

    def __init__(self, algorithm=Algorithm.BACKTRACING, max_tries=DEFAULT_MAX_TRIES,
                 seed=None, rng=None, repair=RepairStrategy.PEERS,
                 temperature=DEFAULT_TEMPERATURE):
        self.algorithm = Algorithm.from_name(algorithm)
        if self.algorithm is Algorithm.MONTECARLO:
            self._solver = MonteCarloSolver(max_tries, rng=rng, seed=seed, repair=repair)
        elif self.algorithm is Algorithm.ANNEALING:
            self._solver = AnnealingSolver(max_tries, temperature=temperature, rng=rng, seed=seed)
        else:
            self._solver = BacktrackingSolver()

    def solve(self, grid):
        """Solve grid and return a SolveResult; grid is never modified"""
        conflicts = grid.conflicts()
        if conflicts:
            log.warning("Given cells repeat digits at %s", ", ".join(f"({r},{c})" for r, c in conflicts))
            return SolveResult(SolveStatus.CONTRADICTORY, 0, self.algorithm, conflicts=conflicts)

        log.info("Solving %d empty cells with %s", len(grid.empty_cells()), self.algorithm.value)
        return self._solver.solve(grid)


def solve(grid, algorithm=Algorithm.BACKTRACING, max_tries=DEFAULT_MAX_TRIES, seed=None):
    return SudokuSolver(algorithm, max_tries=max_tries, seed=seed).solve(grid)
