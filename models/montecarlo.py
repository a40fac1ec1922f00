import logging
from enum import Enum

import numpy as np

from models.grid import EMPTY, Grid
from models.result import Algorithm, SolveResult, SolveStatus

log = logging.getLogger(__name__)

DEFAULT_MAX_TRIES = 100000


class RepairStrategy(Enum):
    PEERS = "peers"
    RESTART = "restart"


class MonteCarloSolver:
    """Randomized constructive search bounded by a number of tries.

    Each try looks at the empty cells with the fewest legal digits, picks one
    of them at random and places one of its legal digits at random. When the
    picked cell has no legal digit left the grid is repaired instead:

    * ``PEERS`` clears every solver-filled cell in the row, column and box of
      the stuck cell,
    * ``RESTART`` clears every solver-filled cell.

    Placements and repairs both count as tries. The search may run out of
    tries even when the puzzle has a solution, and two runs with different
    random states can need a different number of tries. Pass ``rng`` (a
    ``numpy.random.Generator``) or ``seed`` to make a run reproducible.
    """

    algorithm = Algorithm.MONTECARLO

    def __init__(self, max_tries=DEFAULT_MAX_TRIES, rng=None, seed=None,
                 repair=RepairStrategy.PEERS):
        if max_tries < 1:
            raise ValueError(f"max_tries must be positive, received {max_tries}")
        self.max_tries = max_tries
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.repair = RepairStrategy(repair)

    def solve(self, grid):
        """Solve a copy of grid; the grid itself is left untouched"""
        working = grid.unsolved()
        tries = 0
        repairs = 0

        while not working.is_complete() and tries < self.max_tries:
            (row, col), candidates = self._pick_cell(working)
            if candidates:
                digit = candidates[self.rng.integers(len(candidates))]
                working.set(row, col, digit)
            else:
                cleared = self._repair(working, row, col)
                repairs += 1
                log.debug("No digit fits (%d,%d), cleared %d cells", row, col, cleared)
            tries += 1

        # Only legal digits are ever placed, a complete grid is a solution
        if working.is_solved():
            log.info("Solved with Monte Carlo after %d tries (%d repairs)", tries, repairs)
            return SolveResult(SolveStatus.SOLVED, tries, self.algorithm, grid=working)

        log.info("Monte Carlo gave up after %d tries (%d repairs)", tries, repairs)
        return SolveResult(SolveStatus.BUDGET_EXHAUSTED, tries, self.algorithm)

    def _pick_cell(self, grid):
        """Pick a random empty cell among those with the fewest legal digits"""
        best = []
        fewest = None
        for row, col in grid.empty_cells():
            options = grid.candidates(row, col)
            if fewest is None or len(options) < fewest:
                fewest = len(options)
                best = [((row, col), options)]
            elif len(options) == fewest:
                best.append(((row, col), options))
        return best[self.rng.integers(len(best))]

    def _repair(self, grid, row, col):
        if self.repair is RepairStrategy.RESTART:
            filled = [p for p in grid.mutable_cells if grid.get(*p) != EMPTY]
            grid.reset()
            return len(filled)

        cleared = 0
        for peer in Grid.peers(row, col):
            if not grid.is_given(*peer) and grid.get(*peer) != EMPTY:
                grid.clear(*peer)
                cleared += 1
        return cleared
