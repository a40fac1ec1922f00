class SudokuError(Exception):
    """Base class for all sudoku errors"""


class MalformedInputError(SudokuError, ValueError):
    """Input does not describe a well-formed 9x9 grid"""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class OutOfRangeError(SudokuError, IndexError):
    """Coordinate outside of the 9x9 board"""

    def __init__(self, row, col):
        super().__init__(f"cell ({row},{col}) is outside of the grid")
        self.row = row
        self.col = col


class GivenCellError(SudokuError):
    """Attempt to change a cell that was given by the puzzle"""

    def __init__(self, row, col):
        super().__init__(f"cell ({row},{col}) is given by the puzzle and can not be changed")
        self.row = row
        self.col = col
