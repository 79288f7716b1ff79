"""Change tracking between consecutive generations.

All functions return lazy iterators computed from the two cell sets at the
time of iteration. They are only meaningful until the next generation step
or direct edit of the cells; results gathered across such a change are
stale.
"""

from typing import Iterator

from .cells import CellSet, Coordinate


def changed_cells(previous: CellSet, current: CellSet) -> Iterator[Coordinate]:
    """Cells that were born or died (symmetric difference)."""
    return previous.symmetric_difference(current)


def born_cells(previous: CellSet, current: CellSet) -> Iterator[Coordinate]:
    """Cells alive now that were dead in the previous generation."""
    return current.difference(previous)


def died_cells(previous: CellSet, current: CellSet) -> Iterator[Coordinate]:
    """Cells alive in the previous generation that are dead now."""
    return previous.difference(current)
