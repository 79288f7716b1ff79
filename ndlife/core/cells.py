"""Sparse storage for alive cells.

Only alive cells are stored, as coordinate tuples in a hash set, so the grid
can be unbounded in every dimension.
"""

from collections.abc import Set as AbstractSet
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple

Coordinate = Tuple[int, ...]


def as_coordinate(cell: Iterable[int]) -> Coordinate:
    """Normalise a list/array/tuple of ints into a hashable coordinate."""
    return tuple(int(c) for c in cell)


class CellSet:
    """Set of alive cell coordinates.

    Coordinates compare and hash component-wise, so `(1, 2)` and `[1, 2]`
    refer to the same cell.
    """

    def __init__(self, cells: Optional[Iterable[Iterable[int]]] = None):
        self._cells: Set[Coordinate] = set()
        if cells is not None:
            self.replace(cells)

    def contains(self, cell: Iterable[int]) -> bool:
        """Check whether a cell is alive."""
        return as_coordinate(cell) in self._cells

    def set(self, cell: Iterable[int], alive: bool) -> bool:
        """Make a cell alive or dead.

        Args:
            cell: Cell coordinates
            alive: True to insert, False to remove

        Returns:
            True if the cell's state actually changed
        """
        cell = as_coordinate(cell)
        if alive:
            if cell in self._cells:
                return False
            self._cells.add(cell)
            return True
        if cell not in self._cells:
            return False
        self._cells.remove(cell)
        return True

    def toggle(self, cell: Iterable[int]) -> None:
        """Flip a cell between alive and dead."""
        cell = as_coordinate(cell)
        if cell in self._cells:
            self._cells.remove(cell)
        else:
            self._cells.add(cell)

    def replace(self, cells: Iterable[Iterable[int]]) -> None:
        """Discard the current contents and take `cells` instead."""
        self._cells = {as_coordinate(cell) for cell in cells}

    def add(self, cell: Coordinate) -> None:
        # Hot path for the generation engine: cell is already a tuple
        self._cells.add(cell)

    def discard(self, cell: Iterable[int]) -> None:
        self._cells.discard(as_coordinate(cell))

    def clear(self) -> None:
        self._cells.clear()

    def symmetric_difference(self, other: 'CellSet') -> Iterator[Coordinate]:
        """Lazily yield cells present in exactly one of the two sets."""
        for cell in self._cells:
            if cell not in other._cells:
                yield cell
        for cell in other._cells:
            if cell not in self._cells:
                yield cell

    def difference(self, other: 'CellSet') -> Iterator[Coordinate]:
        """Lazily yield cells present here but not in `other`."""
        for cell in self._cells:
            if cell not in other._cells:
                yield cell

    def to_frozenset(self) -> FrozenSet[Coordinate]:
        return frozenset(self._cells)

    def __contains__(self, cell: object) -> bool:
        # Fast path for tuples; other iterables are normalised
        if isinstance(cell, tuple):
            return cell in self._cells
        return self.contains(cell)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __bool__(self) -> bool:
        return bool(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CellSet):
            return self._cells == other._cells
        if isinstance(other, AbstractSet):
            return self._cells == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CellSet(alive={len(self._cells)})"
