import logging

from models.grid import EMPTY, SIZE
from models.result import Algorithm, SolveResult, SolveStatus

log = logging.getLogger(__name__)


class BacktrackingSolver:
    """Depth-first search with chronological backtracking.

    The mutable cells are walked in row major order with an index instead of
    recursion. At each cell the smallest legal digit above the current value
    is placed and the walk moves forward; when no such digit is left the cell
    is cleared and the walk steps back to the previous cell. Both orders are
    fixed, so a puzzle always yields the same solution and the same number of
    tries. Every step, forward or back, counts as one try.
    """

    algorithm = Algorithm.BACKTRACING

    def solve(self, grid):
        """Solve a copy of grid; the grid itself is left untouched"""
        working = grid.unsolved()
        cells = working.mutable_cells
        tries = 0
        index = 0

        while index < len(cells):
            row, col = cells[index]
            current = working.get(row, col)
            guess = self._next_guess(working, row, col, current)
            tries += 1

            if guess is None:
                # Out of digits here, continue with the next digit one cell back
                if current != EMPTY:
                    working.clear(row, col)
                index -= 1
                if index < 0:
                    log.info("Search space exhausted after %d tries, sudoku has no solution", tries)
                    return SolveResult(SolveStatus.UNSOLVABLE, tries, self.algorithm)
                log.debug("Dead end at (%d,%d), backtracking to (%d,%d)",
                          row, col, *cells[index])
            else:
                working.set(row, col, guess)
                index += 1

        log.info("Solved with backtracking after %d tries", tries)
        return SolveResult(SolveStatus.SOLVED, tries, self.algorithm, grid=working)

    @staticmethod
    def _next_guess(grid, row, col, current):
        for digit in range(current + 1, SIZE + 1):
            if grid.is_legal(row, col, digit):
                return digit
        return None
