import numpy as np

from models.errors import GivenCellError, MalformedInputError, OutOfRangeError

SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))


def has_only_unique_digits(values):
    """Check that the non-empty values contain no duplicates"""
    filled = [v for v in values if v != EMPTY]
    return len(filled) == len(set(filled))


def _peer_positions(row, col):
    box_row = row - row % BOX_SIZE
    box_col = col - col % BOX_SIZE
    peers = set()
    for i in range(SIZE):
        peers.add((row, i))
        peers.add((i, col))
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            peers.add((r, c))
    peers.discard((row, col))
    return tuple(sorted(peers))


PEERS = [[_peer_positions(r, c) for c in range(SIZE)] for r in range(SIZE)]

# Index arrays for fetching all peer values of a cell in one numpy lookup
_PEER_INDEX = [[tuple(np.array(axis) for axis in zip(*PEERS[r][c])) for c in range(SIZE)]
               for r in range(SIZE)]


class Grid:
    """A 9x9 sudoku board.

    Cells hold a digit 1-9 or EMPTY (0). A boolean mask remembers which cells
    were given by the puzzle; those can never be set or cleared. All other
    cells are mutable and belong to whichever solver owns the grid.
    """

    def __init__(self, cells, given=None):
        try:
            values = np.asarray(cells)
        except ValueError as e:
            raise MalformedInputError(f"cells must form a {SIZE}x{SIZE} grid ({e})") from e
        if values.shape != (SIZE, SIZE):
            raise MalformedInputError(
                f"expected a {SIZE}x{SIZE} grid, received shape {values.shape}")
        if values.dtype.kind not in "iu":
            raise MalformedInputError(
                f"cells must be integers, received {values.dtype}")
        if values.min() < EMPTY or values.max() > SIZE:
            raise MalformedInputError(f"cells must be between {EMPTY} and {SIZE}")

        self._cells = values.astype(np.int8)

        if given is None:
            self._given = self._cells != EMPTY
        else:
            mask = np.asarray(given, dtype=bool)
            if mask.shape != (SIZE, SIZE):
                raise MalformedInputError(
                    f"given mask must be {SIZE}x{SIZE}, received shape {mask.shape}")
            if (self._cells[mask] == EMPTY).any():
                raise MalformedInputError("given cells must hold a digit")
            self._given = mask.copy()

        # Mutable cells never change, calculate them once
        self.mutable_cells = [(int(r), int(c)) for r, c in np.argwhere(~self._given)]

    @staticmethod
    def box_index(row, col):
        """Return the index (0-8) of the box containing (row, col)"""
        return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE

    @staticmethod
    def box_cells(box_index):
        """Return all positions of a box in row major order"""
        row_start = (box_index // BOX_SIZE) * BOX_SIZE
        col_start = (box_index % BOX_SIZE) * BOX_SIZE
        return [(row_start + r, col_start + c)
                for r in range(BOX_SIZE) for c in range(BOX_SIZE)]

    @staticmethod
    def peers(row, col):
        """Return the positions sharing a row, column or box with (row, col)"""
        _check_position(row, col)
        return list(PEERS[row][col])

    def get(self, row, col):
        _check_position(row, col)
        return int(self._cells[row, col])

    def set(self, row, col, digit):
        """Place a digit on a mutable cell"""
        _check_position(row, col)
        if digit not in DIGITS:
            raise ValueError(f"digit must be between 1 and {SIZE}, received {digit}")
        if self._given[row, col]:
            raise GivenCellError(row, col)
        self._cells[row, col] = digit

    def clear(self, row, col):
        _check_position(row, col)
        if self._given[row, col]:
            raise GivenCellError(row, col)
        self._cells[row, col] = EMPTY

    def is_given(self, row, col):
        _check_position(row, col)
        return bool(self._given[row, col])

    def is_legal(self, row, col, digit):
        """Check if digit could stand at (row, col) without repeating in a group.

        The current value of the cell itself is ignored.
        """
        _check_position(row, col)
        if digit not in DIGITS:
            return False
        return digit not in self._peer_values(row, col)

    def candidates(self, row, col):
        """Return all legal digits for (row, col) in ascending order"""
        _check_position(row, col)
        seen = set(self._peer_values(row, col).tolist())
        return [d for d in DIGITS if d not in seen]

    def is_complete(self):
        return not (self._cells == EMPTY).any()

    def find_next_empty(self):
        """Return the first empty position in row major order, or None"""
        empty = np.argwhere(self._cells == EMPTY)
        if len(empty) == 0:
            return None
        return int(empty[0][0]), int(empty[0][1])

    def empty_cells(self):
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == EMPTY)]

    def row(self, row_index):
        _check_position(row_index, 0)
        return self._cells[row_index, :].tolist()

    def column(self, col_index):
        _check_position(0, col_index)
        return self._cells[:, col_index].tolist()

    def box(self, box_index):
        """Return the values of a box as 3 rows of 3"""
        if not 0 <= box_index < SIZE:
            raise OutOfRangeError(box_index, box_index)
        row_start = (box_index // BOX_SIZE) * BOX_SIZE
        col_start = (box_index % BOX_SIZE) * BOX_SIZE
        return self._cells[row_start:row_start + BOX_SIZE,
                           col_start:col_start + BOX_SIZE].tolist()

    def mutable_cells_of_box(self, box_index):
        return [f for f in Grid.box_cells(box_index) if not self._given[f]]

    def is_valid(self):
        """Check that no row, column or box repeats a digit"""
        for i in range(SIZE):
            box = [v for r in self.box(i) for v in r]
            if not (has_only_unique_digits(self.row(i))
                    and has_only_unique_digits(self.column(i))
                    and has_only_unique_digits(box)):
                return False
        return True

    def is_solved(self):
        return self.is_complete() and self.is_valid()

    def energy(self):
        """Return how far a filled grid is from a solution.

        The energy is 3 * 81 minus the number of distinct values in every row,
        column and box. It is 0 exactly when a complete grid is solved.
        """
        distinct = 0
        for i in range(SIZE):
            row_start = (i // BOX_SIZE) * BOX_SIZE
            col_start = (i % BOX_SIZE) * BOX_SIZE
            distinct += len(np.unique(self._cells[i, :]))
            distinct += len(np.unique(self._cells[:, i]))
            distinct += len(np.unique(self._cells[row_start:row_start + BOX_SIZE,
                                                  col_start:col_start + BOX_SIZE]))
        return 3 * SIZE * SIZE - distinct

    def conflicts(self):
        """Return the given cells that repeat a digit of another given cell"""
        clashing = set()
        groups = ([[(r, c) for c in range(SIZE)] for r in range(SIZE)]
                  + [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
                  + [Grid.box_cells(b) for b in range(SIZE)])
        for group in groups:
            seen = {}
            for position in group:
                if not self._given[position]:
                    continue
                seen.setdefault(int(self._cells[position]), []).append(position)
            for positions in seen.values():
                if len(positions) > 1:
                    clashing.update(positions)
        return sorted(clashing)

    def copy(self):
        return Grid(self._cells, self._given)

    def reset(self):
        """Clear every mutable cell, restoring the puzzle as it was given"""
        self._cells[~self._given] = EMPTY

    def unsolved(self):
        grid = self.copy()
        grid.reset()
        return grid

    def to_list(self):
        return self._cells.tolist()

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self):
        rows = "/".join("".join(str(v) if v else "x" for v in r) for r in self.to_list())
        return f"Grid('{rows}')"

    def _peer_values(self, row, col):
        return self._cells[_PEER_INDEX[row][col]]


def _check_position(row, col):
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise OutOfRangeError(row, col)
