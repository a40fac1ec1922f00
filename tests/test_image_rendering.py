import cv2
import numpy as np
import pytest

from utils.image_rendering import GIVEN_COLOR, SOLVED_COLOR, render_grid_image, save_grid_image


def cell_has_color(image, row, col, color, cell_size=50):
    margin = 5
    cell = image[row * cell_size + margin:(row + 1) * cell_size - margin,
                 col * cell_size + margin:(col + 1) * cell_size - margin]
    return bool(np.all(cell == color, axis=-1).any())


def test_render_size_and_lines(puzzle, solution):
    image = render_grid_image(puzzle, solution)

    assert image.shape == (450, 450, 3)
    assert image.dtype == np.uint8
    # Outer border and box lines are black, cell interiors start out white
    assert (image[0, :] == 0).all()
    assert (image[150, :] == 0).all()
    assert (image[:, 300] == 0).all()


def test_given_and_solved_digits_use_different_colors(puzzle, solution):
    image = render_grid_image(puzzle, solution)

    # (0,3) is given, (0,0) was filled in by the solver
    assert cell_has_color(image, 0, 3, GIVEN_COLOR)
    assert not cell_has_color(image, 0, 3, SOLVED_COLOR)
    assert cell_has_color(image, 0, 0, SOLVED_COLOR)
    assert not cell_has_color(image, 0, 0, GIVEN_COLOR)


def test_unsolved_cells_stay_blank(puzzle):
    image = render_grid_image(puzzle, puzzle)
    assert not cell_has_color(image, 0, 0, SOLVED_COLOR)
    assert not cell_has_color(image, 0, 0, GIVEN_COLOR)


def test_rejects_tiny_cells(puzzle, solution):
    with pytest.raises(ValueError):
        render_grid_image(puzzle, solution, cell_size=4)


def test_save_image(tmp_path, puzzle, solution):
    path = tmp_path / "solution.png"
    saved = save_grid_image(path, puzzle, solution, cell_size=40)

    loaded = cv2.imread(str(path))
    assert loaded.shape == (360, 360, 3)
    assert np.array_equal(loaded, saved)


def test_save_image_to_missing_directory(tmp_path, puzzle, solution):
    with pytest.raises(OSError):
        save_grid_image(tmp_path / "missing" / "solution.png", puzzle, solution)
