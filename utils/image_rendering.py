import cv2
import numpy as np

from models.grid import BOX_SIZE, EMPTY, SIZE

GIVEN_COLOR = (255, 0, 0)      # blue (BGR)
SOLVED_COLOR = (0, 150, 0)     # green
LINE_COLOR = (0, 0, 0)
BACKGROUND = 255


def render_grid_image(original, solved, cell_size=50):
    """Draw the solved grid on a white canvas.

    Digits given by the puzzle are drawn in blue, digits filled in by the
    solver in green. Box borders are thicker than cell borders.
    """
    if cell_size < 10:
        raise ValueError(f"cell_size must be at least 10 pixels, received {cell_size}")

    side = cell_size * SIZE
    image = np.ones((side, side, 3), dtype=np.uint8) * BACKGROUND

    # Draw grid lines
    for i in range(SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        offset = min(i * cell_size, side - 1)
        cv2.line(image, (offset, 0), (offset, side), LINE_COLOR, thickness)
        cv2.line(image, (0, offset), (side, offset), LINE_COLOR, thickness)

    # Draw numbers
    scale = cell_size / 62.5
    for i in range(SIZE):
        for j in range(SIZE):
            digit = solved.get(i, j)
            if digit == EMPTY:
                continue
            color = GIVEN_COLOR if original.get(i, j) != EMPTY else SOLVED_COLOR

            (width, height), _ = cv2.getTextSize(str(digit), cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
            x = j * cell_size + (cell_size - width) // 2
            y = i * cell_size + (cell_size + height) // 2
            cv2.putText(image, str(digit), (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2)

    return image


def save_grid_image(path, original, solved, cell_size=50):
    """Render the solution and write it to an image file"""
    image = render_grid_image(original, solved, cell_size)
    try:
        written = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise OSError(f"Could not write image to {path}: {e}") from e
    if not written:
        raise OSError(f"Could not write image to {path}")
    return image
