"""
Bit matrix over GF(2).

A cycle can be stored as a vector of edge incidence: bit ``i`` is set when
edge ``i`` is part of the cycle. Combining two cycles by symmetric difference
is an XOR of their vectors, so Gaussian elimination over GF(2) tells which
cycles of a set can be built from the others. In the example below each row
is the XOR of the other two::

    0:   111000111
    1:   111000000
    2:   000000111

Rows are plain non-negative integers; bit ``i`` of the integer is column
``i`` of the matrix.

Example:
    >>> m = CycleBasisMatrix(9, 3)
    >>> m.add(bits_from_string("111000111"))
    >>> m.add(bits_from_string("111000000"))
    >>> m.add(bits_from_string("000000111"))
    >>> m.eliminate()
    True
"""

from __future__ import annotations

from typing import Iterable

from ringfinder.exceptions import CapacityExceeded, InvalidQueryState


def xor(u: int, v: int) -> int:
    """XOR two rows. Neither input is modified."""
    return u ^ v


def bits_from_string(bits: str) -> int:
    """Convert a string of ``0``/``1`` characters to a row.

    Character ``i`` of the string becomes column ``i``.

    Raises:
        ValueError: If the string holds anything other than 0 and 1.
    """
    row = 0
    for i, char in enumerate(bits):
        if char == "1":
            row |= 1 << i
        elif char != "0":
            raise ValueError(f"Invalid bit character {char!r} in {bits!r}")
    return row


def bits_to_string(row: int, width: int, zero: str = "0") -> str:
    """Render the first ``width`` columns of a row, column 0 first."""
    return "".join("1" if row >> i & 1 else zero for i in range(width))


class CycleBasisMatrix:
    """Mutable GF(2) matrix that can eliminate linearly dependent rows.

    Rows are added in order, then :meth:`eliminate` reduces the matrix in
    place. Elimination swaps rows, so the matrix keeps a two-way map between
    the insertion index of a row and the slot it currently occupies;
    :meth:`row` and :meth:`eliminated` always take the insertion index.

    The row capacity is fixed at construction. :meth:`clear` resets the row
    count so one instance can be reused for many candidate sets.

    Args:
        columns: Number of columns (width of every row).
        rows: Maximum number of rows.
    """

    __slots__ = ("_columns", "_capacity", "_rows", "_slot_of", "_original_at",
                 "_count", "_rank")

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 0 or rows < 0:
            raise ValueError(f"Matrix dimensions must be non-negative: {columns}x{rows}")
        self._columns = columns
        self._capacity = rows
        self._rows: list[int] = [0] * rows
        # insertion index -> slot, and slot -> insertion index
        self._slot_of: list[int] = list(range(rows))
        self._original_at: list[int] = list(range(rows))
        self._count = 0
        self._rank: int | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[int], columns: int) -> "CycleBasisMatrix":
        """Create a matrix sized for and holding the given rows."""
        rows = list(rows)
        matrix = cls(columns, len(rows))
        for row in rows:
            matrix.add(row)
        return matrix

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def rank(self) -> int:
        """Rank of the rows, available once :meth:`eliminate` has run."""
        self._require_eliminated()
        return self._rank

    def __len__(self) -> int:
        """Return the current number of rows."""
        return self._count

    def add(self, row: int) -> None:
        """Append a row.

        Raises:
            CapacityExceeded: If the matrix already holds ``capacity`` rows.
            InvalidQueryState: If the matrix has been eliminated since the
                last :meth:`clear`.
            ValueError: If the row has bits outside the column range.
        """
        if self._rank is not None:
            raise InvalidQueryState("Cannot add rows after eliminate(); call clear() first")
        if self._count >= self._capacity:
            raise CapacityExceeded(
                f"Matrix is full ({self._capacity} rows); initialise with more rows",
                capacity=self._capacity,
            )
        if row < 0 or row.bit_length() > self._columns:
            raise ValueError(f"Row does not fit in {self._columns} columns")

        k = self._count
        self._rows[k] = row
        self._slot_of[k] = k
        self._original_at[k] = k
        self._count += 1

    def clear(self) -> None:
        """Set the number of rows to zero, keeping the storage."""
        self._count = 0
        self._rank = None

    def swap(self, i: int, j: int) -> None:
        """Swap the rows in slots ``i`` and ``j``, keeping track of both.

        Raises:
            IndexError: If either slot is not one of the current rows.
        """
        for slot in (i, j):
            if not 0 <= slot < self._count:
                raise IndexError(f"Row slot {slot} out of range for {self._count} rows")
        rows = self._rows
        rows[i], rows[j] = rows[j], rows[i]
        a, b = self._original_at[i], self._original_at[j]
        self._original_at[i], self._original_at[j] = b, a
        self._slot_of[a], self._slot_of[b] = j, i

    def index_of(self, x: int, y: int) -> int:
        """Slot of the first row at or after ``y`` with column ``x`` set.

        Returns:
            The slot, or -1 if no such row exists.
        """
        mask = 1 << x
        for j in range(y, self._count):
            if self._rows[j] & mask:
                return j
        return -1

    def eliminate(self) -> bool:
        """Gaussian elimination over GF(2).

        Returns:
            True if any row was reduced to zero, i.e. the rows are linearly
            dependent.

        Raises:
            InvalidQueryState: If called twice without :meth:`clear`.
        """
        if self._rank is not None:
            raise InvalidQueryState("eliminate() already ran; call clear() first")

        rows = self._rows
        x = y = 0
        while x < self._columns and y < self._count:
            i = self.index_of(x, y)

            # no pivot in this column
            if i < 0:
                x += 1
                continue

            if i != y:
                self.swap(i, y)

            pivot = rows[y]
            mask = 1 << x
            for j in range(self._count):
                if j != y and rows[j] & mask:
                    rows[j] ^= pivot

            x += 1
            y += 1

        self._rank = y
        return y != self._count

    def row(self, j: int) -> int:
        """Current contents of the row that was added at index ``j``."""
        self._require_eliminated()
        if not 0 <= j < self._count:
            raise IndexError(f"Row index {j} out of range for {self._count} rows")
        return self._rows[self._slot_of[j]]

    def eliminated(self, j: int) -> bool:
        """Whether the row added at index ``j`` was reduced to zero."""
        return self.row(j) == 0

    def _require_eliminated(self) -> None:
        if self._rank is None:
            raise InvalidQueryState("eliminate() must be called before querying rows")

    def __str__(self) -> str:
        return "\n".join(
            f"{self._original_at[j]}: {bits_to_string(self._rows[j], self._columns, '-')}"
            for j in range(self._count)
        )

    def __repr__(self) -> str:
        return (f"CycleBasisMatrix(columns={self._columns}, rows={self._capacity}, "
                f"count={self._count})")
