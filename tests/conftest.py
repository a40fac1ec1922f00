from pathlib import Path

import pytest

from models.grid import Grid
from utils.text_format import read_grid

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"
PUZZLE_FILE = EXAMPLES_DIR / "sudoku1.txt"
SOLUTION_FILE = EXAMPLES_DIR / "sudoku1-solution.txt"

SOLUTION_ROWS = [
    "435269781",
    "682571493",
    "197834562",
    "826195347",
    "374682915",
    "951743628",
    "519326874",
    "248957136",
    "763418259",
]


def rows_to_cells(rows):
    return [[int(ch) if ch not in "x." else 0 for ch in row] for row in rows]


@pytest.fixture
def puzzle():
    return read_grid(PUZZLE_FILE)


@pytest.fixture
def solution():
    return read_grid(SOLUTION_FILE)


@pytest.fixture
def unsolvable_cells():
    # (0,8) needs a 9 but its column already has one
    cells = [[0] * 9 for _ in range(9)]
    cells[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    cells[1][8] = 9
    return cells


@pytest.fixture
def contradictory_cells():
    cells = rows_to_cells([
        "2xx26x7x1",
        "68xx7xx9x",
        "19xxx45xx",
        "82x1xxx4x",
        "xx46x29xx",
        "x5xxx3x28",
        "xx93xxx74",
        "x4xx5xx36",
        "7x3x18xxx",
    ])
    return cells


@pytest.fixture
def band_puzzle():
    # Top band left empty: every empty cell starts with three candidates,
    # so a random fill can paint itself into a corner
    return Grid(rows_to_cells(["xxxxxxxxx"] * 3 + SOLUTION_ROWS[3:]))
