import logging
import math

import numpy as np

from models.grid import DIGITS, SIZE
from models.montecarlo import DEFAULT_MAX_TRIES
from models.result import Algorithm, SolveResult, SolveStatus

log = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.15


class AnnealingSolver:
    """Metropolis sampling over filled grids at a fixed temperature.

    Every box is first filled with its missing digits, so boxes stay valid for
    the whole run and only rows and columns can repeat digits. Each try swaps
    two mutable cells of a random box. A swap that lowers or keeps the energy
    is always kept, one that raises it by ``delta`` is kept with probability
    ``exp(-delta / temperature)``. The run ends when the energy reaches 0 or
    the tries run out.
    """

    algorithm = Algorithm.ANNEALING

    def __init__(self, max_tries=DEFAULT_MAX_TRIES, temperature=DEFAULT_TEMPERATURE,
                 rng=None, seed=None):
        if max_tries < 1:
            raise ValueError(f"max_tries must be positive, received {max_tries}")
        if temperature <= 0:
            raise ValueError(f"temperature must be positive, received {temperature}")
        self.max_tries = max_tries
        self.temperature = temperature
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def solve(self, grid):
        """Solve a copy of grid; the grid itself is left untouched"""
        working = grid.unsolved()
        if not self._fill_boxes(working):
            log.info("Given cells leave no way to fill every box")
            return SolveResult(SolveStatus.UNSOLVABLE, 0, self.algorithm)

        # Boxes with a single mutable cell have nothing to swap
        boxes = [cells for cells in map(working.mutable_cells_of_box, range(SIZE))
                 if len(cells) > 1]
        energy = working.energy()
        tries = 0

        if energy > 0 and not boxes:
            # The box fill was the only possible completion
            log.info("Only completion of the grid is invalid, sudoku has no solution")
            return SolveResult(SolveStatus.UNSOLVABLE, tries, self.algorithm)

        while energy > 0 and tries < self.max_tries:
            cells = boxes[self.rng.integers(len(boxes))]
            first, second = self.rng.choice(len(cells), size=2, replace=False)
            a, b = cells[first], cells[second]
            self._swap(working, a, b)

            new_energy = working.energy()
            if self._accept(energy, new_energy):
                energy = new_energy
            else:
                self._swap(working, a, b)
            tries += 1

        if energy == 0:
            log.info("Solved with annealing after %d tries", tries)
            return SolveResult(SolveStatus.SOLVED, tries, self.algorithm, grid=working)

        log.info("Annealing gave up after %d tries at energy %d", tries, energy)
        return SolveResult(SolveStatus.BUDGET_EXHAUSTED, tries, self.algorithm)

    def _fill_boxes(self, grid):
        """Fill every box with its missing digits in random order"""
        for box_index in range(SIZE):
            cells = grid.mutable_cells_of_box(box_index)
            present = {v for row in grid.box(box_index) for v in row}
            missing = [d for d in DIGITS if d not in present]
            if len(missing) != len(cells):
                return False
            for (row, col), digit in zip(cells, self.rng.permutation(missing)):
                grid.set(row, col, int(digit))
        return True

    def _accept(self, energy, new_energy):
        if new_energy <= energy:
            return True
        return self.rng.random() < math.exp((energy - new_energy) / self.temperature)

    @staticmethod
    def _swap(grid, a, b):
        first, second = grid.get(*a), grid.get(*b)
        grid.set(*a, second)
        grid.set(*b, first)
