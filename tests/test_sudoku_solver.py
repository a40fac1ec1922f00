import pytest

from models.grid import Grid
from models.result import Algorithm, SolveResult, SolveStatus
from models.sudoku_solver import SudokuSolver, solve

from conftest import SOLUTION_ROWS, rows_to_cells


def test_defaults_to_backtracking(puzzle, solution):
    solver = SudokuSolver()
    result = solver.solve(puzzle)

    assert solver.algorithm is Algorithm.BACKTRACING
    assert result.solved
    assert result.tries == 63
    assert result.grid == solution


@pytest.mark.parametrize("name", ["backtracing", "backtracking", "BACKTRACING", Algorithm.BACKTRACING])
def test_algorithm_names(name):
    assert SudokuSolver(name).algorithm is Algorithm.BACKTRACING


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        SudokuSolver("genetic")


def test_montecarlo_dispatch(puzzle, solution):
    result = SudokuSolver("montecarlo", max_tries=100000, seed=42).solve(puzzle)
    assert result.algorithm is Algorithm.MONTECARLO
    assert result.solved
    assert result.grid == solution


def test_both_algorithms_agree_on_a_unique_solution(puzzle):
    backtracking = SudokuSolver("backtracing").solve(puzzle)
    montecarlo = SudokuSolver("montecarlo", seed=5).solve(puzzle)
    assert montecarlo.solved
    assert backtracking.grid == montecarlo.grid


def test_annealing_dispatch(solution):
    rows = [row[:4] + "x" + row[5:] for row in SOLUTION_ROWS]
    solver = SudokuSolver("annealing", max_tries=5000, seed=8, temperature=0.5)
    result = solver.solve(Grid(rows_to_cells(rows)))

    assert solver._solver.temperature == 0.5
    assert result.algorithm is Algorithm.ANNEALING
    assert result.solved
    assert result.grid == solution


def test_montecarlo_budget_exhausted(puzzle):
    result = SudokuSolver("montecarlo", max_tries=5, seed=0).solve(puzzle)
    assert result.status is SolveStatus.BUDGET_EXHAUSTED
    assert result.tries == 5
    assert result.grid is None


def test_max_tries_does_not_limit_backtracking(puzzle):
    result = SudokuSolver("backtracing", max_tries=10).solve(puzzle)
    assert result.solved
    assert result.tries == 63


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_contradictory_puzzle_is_never_solved(contradictory_cells, algorithm):
    result = SudokuSolver(algorithm, max_tries=100, seed=0).solve(Grid(contradictory_cells))
    assert result.status is SolveStatus.CONTRADICTORY
    assert result.conflicts == [(0, 0), (0, 3)]
    assert result.grid is None
    assert result.tries == 0


def test_unsolvable_puzzle(unsolvable_cells):
    result = SudokuSolver().solve(Grid(unsolvable_cells))
    assert result.status is SolveStatus.UNSOLVABLE
    assert not result.solved


def test_solve_shortcut(puzzle, solution):
    assert solve(puzzle).grid == solution


def test_failed_result_can_not_carry_a_grid(solution):
    with pytest.raises(ValueError):
        SolveResult(SolveStatus.BUDGET_EXHAUSTED, 3, Algorithm.MONTECARLO, grid=solution)
    with pytest.raises(ValueError):
        SolveResult(SolveStatus.SOLVED, 3, Algorithm.MONTECARLO)
