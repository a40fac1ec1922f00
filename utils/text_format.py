from models.errors import MalformedInputError
from models.grid import BOX_SIZE, EMPTY, SIZE, Grid

PLACEHOLDER = "x"
PLACEHOLDERS = "xX.0"
DIGIT_CHARS = "123456789"
DIVIDER_CHARS = set("-+= ")
COLUMN_SEPARATOR = "|"
DIVIDER = "-" * (SIZE + BOX_SIZE - 1)


def parse_grid(text):
    """Parse a sudoku from its text form.

    Lines holding a ``#`` are comments. Blank lines and divider lines made of
    dashes are skipped, ``|`` separators are removed. Every other line is one
    row of nine cells, each a digit or a placeholder for an empty cell.
    """
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or "#" in stripped or set(stripped) <= DIVIDER_CHARS:
            continue

        cells = stripped.replace(COLUMN_SEPARATOR, "").replace(" ", "")
        if len(cells) != SIZE:
            raise MalformedInputError(
                f"expected {SIZE} cells in a row, found {len(cells)}", line_number)

        row = []
        for char in cells:
            if char in PLACEHOLDERS:
                row.append(EMPTY)
            elif char in DIGIT_CHARS:
                row.append(int(char))
            else:
                raise MalformedInputError(f"invalid character '{char}'", line_number)
        rows.append(row)

    if len(rows) != SIZE:
        raise MalformedInputError(f"expected {SIZE} rows, found {len(rows)}")
    return Grid(rows)


def read_grid(path):
    """Read a sudoku from a UTF-8 text file"""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"file is not valid UTF-8 text ({e})") from e
    return parse_grid(text)


def format_grid(grid):
    """Render a grid in the same layout the parser reads"""
    lines = []
    for i, row in enumerate(grid.to_list()):
        if i > 0 and i % BOX_SIZE == 0:
            lines.append(DIVIDER)
        line = ""
        for j, value in enumerate(row):
            if j > 0 and j % BOX_SIZE == 0:
                line += COLUMN_SEPARATOR
            line += str(value) if value != EMPTY else PLACEHOLDER
        lines.append(line)
    return "\n".join(lines)


def format_side_by_side(original, solved):
    """Render the puzzle and its solution next to each other, line by line"""
    original_lines = format_grid(original).split("\n")
    solved_lines = format_grid(solved).split("\n")
    return "\n".join(f"{left} -> {right}" for left, right in zip(original_lines, solved_lines))
