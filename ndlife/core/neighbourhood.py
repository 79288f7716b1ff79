"""Moore neighbourhood enumeration for any number of dimensions.

The neighbourhood of a cell is every cell whose coordinates differ by at most
one in each axis, excluding the cell itself: 8 cells in 2-D, 26 in 3-D,
3**N - 1 in general.
"""

from typing import Iterator, List, Tuple

from .errors import ZeroDimensionError

Offset = Tuple[int, ...]


def moore_offsets(dimension: int) -> Iterator[Offset]:
    """Yield every Moore neighbourhood offset for `dimension` dimensions.

    Works like an odometer over the digits {-1, 0, 1}: the first digit turns
    fastest and carries into the next one when it rolls past 1. The all-zero
    offset (the cell itself) is skipped. Each call returns an independent
    generator, so one can be started per cell.

    Args:
        dimension: Number of spatial dimensions (>= 1)

    Yields:
        Offset tuples of length `dimension`, 3**dimension - 1 of them

    Raises:
        ZeroDimensionError: If dimension is less than 1
    """
    if dimension < 1:
        raise ZeroDimensionError(dimension)
    return _odometer(dimension)


def _odometer(dimension: int) -> Iterator[Offset]:
    digits: List[int] = [-1] * dimension

    while True:
        if any(digits):
            yield tuple(digits)

        position = 0
        while position < dimension and digits[position] == 1:
            digits[position] = -1
            position += 1
        if position == dimension:
            return
        digits[position] += 1


def neighbours(cell: Tuple[int, ...]) -> Iterator[Tuple[int, ...]]:
    """Yield the coordinates of every Moore neighbour of `cell`."""
    for offset in moore_offsets(len(cell)):
        yield tuple(c + d for c, d in zip(cell, offset))
