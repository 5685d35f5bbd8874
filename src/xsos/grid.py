"""
Grid model: a 3x3 board stored as 9 cells in row-major order.
Notes:
- A position is a zero-based (row, col) pair; index = 3*row + col.
- A cell is None (empty) or a Mark. Cells are never unmarked.
- cells() and empty_positions() are generators, so the search loop does not
  build intermediate lists.
"""
from typing import Iterator, List, Optional, Sequence, Tuple

from .mark import Mark

SIZE = 3
NCELLS = SIZE * SIZE

Position = Tuple[int, int]
Cell = Optional[Mark]


def to_index(pos: Position) -> int:
    r, c = pos
    return r * SIZE + c


def to_position(index: int) -> Position:
    return divmod(index, SIZE)


class Grid:
    __slots__ = ('_cells',)

    def __init__(self) -> None:
        self._cells: List[Cell] = [None] * NCELLS

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> "Grid":
        if len(cells) != NCELLS:
            raise ValueError(f"Expected {NCELLS} cells, got {len(cells)}")
        g = cls()
        g._cells = list(cells)
        return g

    @staticmethod
    def in_bounds(pos: Position) -> bool:
        r, c = pos
        return 0 <= r < SIZE and 0 <= c < SIZE

    def mark(self, pos: Position, mark: Mark) -> None:
        """Place `mark` at `pos`.

        The caller guarantees `pos` is in bounds and empty; Game checks both
        before calling. A violation raises ValueError.
        """
        if not self.in_bounds(pos):
            raise ValueError(f"Position out of bounds: {pos}")
        i = to_index(pos)
        if self._cells[i] is not None:
            raise ValueError(f"Position already marked: {pos}")
        self._cells[i] = mark

    def is_empty_at(self, pos: Position) -> bool:
        if not self.in_bounds(pos):
            raise ValueError(f"Position out of bounds: {pos}")
        return self._cells[to_index(pos)] is None

    def empty_positions(self) -> Iterator[Position]:
        for i, cell in enumerate(self._cells):
            if cell is None:
                yield to_position(i)

    def cells(self) -> Iterator[Cell]:
        yield from self._cells

    def copy(self) -> "Grid":
        g = Grid()
        g._cells = self._cells[:]
        return g

    def key(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return "Grid(%s)" % ''.join('.' if c is None else c.value for c in self._cells)
