"""Binary matrices over GF(2).

Rows are physical registers, columns are the cipher/key slots they mix. The only
mutations are the two things the hardware can do: swap two registers, or xor one
register into another.
"""

import numpy as np


class FormatError(ValueError):
    pass


class BitView:
    """Lazy, restartable view over a sequence of cells."""

    def __init__(self, cells, positions):
        self._cells = cells
        self._positions = positions

    def __iter__(self):
        for i, j in self._positions:
            yield int(self._cells[i, j])

    def __len__(self):
        return len(self._positions)

    def sum(self):
        return sum(self)


class XMatrix:

    def __init__(self, rows, cols):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Matrix dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = np.zeros((rows, cols), dtype=np.uint8)

    @classmethod
    def identity(cls, n):
        x = cls(n, n)
        x._cells[np.arange(n), np.arange(n)] = 1
        return x

    @classmethod
    def from_array(cls, array):
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        if np.any((array != 0) & (array != 1)):
            raise ValueError("Value must be 0 or 1")
        x = cls(*array.shape)
        x._cells[:] = array
        return x

    @classmethod
    def from_int(cls, value, rows, cols):
        if value < 0 or value >> (rows * cols):
            raise ValueError(f"Value {value} does not fit in a {rows}x{cols} matrix")
        bits = [(value >> k) & 1 for k in range(rows * cols)]
        return cls.from_array(np.array(bits, dtype=np.uint8).reshape((rows, cols)))

    @classmethod
    def random(cls, rows, cols, rng=None):
        rng = np.random.default_rng() if rng is None else rng
        return cls.from_array(rng.integers(0, 2, size=(rows, cols), dtype=np.uint8))

    @classmethod
    def parse(cls, s, rows, cols):
        """Parse newline separated rows of '0'/'1'.

        Missing trailing rows are left zero. Raises FormatError on a bad
        character, a line of the wrong width, or too many lines.
        """
        x = cls(rows, cols)
        lines = s.split("\n")
        if lines[-1] == "":
            lines.pop()
        if len(lines) > rows:
            raise FormatError(f"Expected at most {rows} lines, got {len(lines)}")
        for i, line in enumerate(lines):
            if len(line) != cols:
                raise FormatError(f"Line {i} has length {len(line)}, expected {cols}")
            for j, c in enumerate(line):
                if c == '1':
                    x._cells[i, j] = 1
                elif c != '0':
                    raise FormatError(f"Invalid character {c!r} at line {i}, column {j}")
        return x

    def serialize(self):
        return "".join(
            "".join('1' if b else '0' for b in row) + "\n"
            for row in self._cells
        )

    def copy(self):
        x = XMatrix(self.rows, self.cols)
        x._cells[:] = self._cells
        return x

    def to_array(self):
        return self._cells.copy()

    def to_int(self):
        # row-major, cell (0, 0) is the least significant bit
        val = 0
        for k, b in enumerate(self._cells.reshape(-1)):
            if b:
                val |= 1 << k
        return val

    def _check_row(self, i):
        if not 0 <= i < self.rows:
            raise IndexError(f"Row index {i} out of bounds for {self.rows} rows")

    def _check_col(self, j):
        if not 0 <= j < self.cols:
            raise IndexError(f"Column index {j} out of bounds for {self.cols} columns")

    def get(self, i, j):
        self._check_row(i)
        self._check_col(j)
        return int(self._cells[i, j])

    def set(self, i, j, value):
        self._check_row(i)
        self._check_col(j)
        if value not in (0, 1):
            raise ValueError(f"Value must be 0 or 1, got {value!r}")
        self._cells[i, j] = value

    def row(self, i):
        self._check_row(i)
        return BitView(self._cells, [(i, j) for j in range(self.cols)])

    def column(self, j):
        self._check_col(j)
        return BitView(self._cells, [(i, j) for i in range(self.rows)])

    def diagonal(self):
        return BitView(self._cells, [(k, k) for k in range(min(self.rows, self.cols))])

    def cells(self):
        return BitView(self._cells, [(i, j) for i in range(self.rows) for j in range(self.cols)])

    def row_sum(self, i):
        self._check_row(i)
        return int(self._cells[i].sum())

    def swap_rows(self, row_a, row_b):
        """Swaps rows `row_a` and `row_b`."""
        self._check_row(row_a)
        self._check_row(row_b)
        self._cells[[row_a, row_b]] = self._cells[[row_b, row_a]]

    def add_row(self, row_a, row_b):
        """Sets row `row_a` to the xor of itself and row `row_b`."""
        self._check_row(row_a)
        self._check_row(row_b)
        self._cells[row_a] ^= self._cells[row_b]

    def row_echelon(self):
        lead = 0
        for c in range(self.cols):
            candidates = np.flatnonzero(self._cells[lead:, c])
            if len(candidates) == 0:
                continue
            pivot = lead + int(candidates[0])
            if pivot != lead:
                self.swap_rows(lead, pivot)
            for r2 in np.flatnonzero(self._cells[lead + 1:, c]):
                self.add_row(lead + 1 + int(r2), lead)
            lead += 1
            if lead == self.rows:
                break

    def rank(self):
        x = self.copy()
        x.row_echelon()
        return int(np.count_nonzero(x._cells.any(axis=1)))

    def __eq__(self, other):
        if not isinstance(other, XMatrix):
            return NotImplemented
        return self._cells.shape == other._cells.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self.rows, self.cols, self._cells.tobytes()))

    def __repr__(self):
        return f"XMatrix({self.rows}x{self.cols}, {self.serialize()!r})"
