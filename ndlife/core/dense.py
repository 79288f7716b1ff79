"""Dense numpy views of sparse cell sets.

Analysis helpers for inspecting a population: bounding box, centre of mass
and conversion to and from boolean numpy arrays. Array axis i corresponds to
coordinate component i. The generation engine never uses these; they copy
the population into a bounded array and are meant for small regions.

Coordinates can be arbitrarily large Python ints, so absolute positions are
kept in Python arithmetic. Only offsets from the bounding box corner, which
are bounded by the size of the pattern, go into numpy arrays.
"""

from typing import FrozenSet, Iterable, List, Optional, Tuple
import logging

import numpy as np

from .cells import Coordinate

logger = logging.getLogger(__name__)


def _coordinates(cells: Iterable[Iterable[int]]) -> List[Coordinate]:
    """Collect coordinates as int tuples, checking they share one dimension."""
    coords = [tuple(int(c) for c in cell) for cell in cells]
    if coords:
        dimension = len(coords[0])
        for cell in coords:
            if len(cell) != dimension:
                raise ValueError("All coordinates must have the same dimension")
    return coords


def _corners(coords: List[Coordinate]) -> Tuple[Coordinate, Coordinate]:
    columns = list(zip(*coords))
    return tuple(min(column) for column in columns), tuple(max(column) for column in columns)


def bounding_box(cells: Iterable[Iterable[int]]) -> Optional[Tuple[Coordinate, Coordinate]]:
    """Get the inclusive bounding box of the cells.

    Returns:
        (min_corner, max_corner) coordinate tuples, or None if there are no cells
    """
    coords = _coordinates(cells)
    if not coords:
        return None
    return _corners(coords)


def center_of_mass(cells: Iterable[Iterable[int]]) -> Tuple[float, ...]:
    """Calculate the mean position of the cells.

    Sums are exact; only the final division rounds to float.

    Returns:
        Centroid with one float per dimension, or an empty tuple if there
        are no cells

    Raises:
        OverflowError: If a component of the centroid exceeds the float range
    """
    coords = _coordinates(cells)
    if not coords:
        return ()
    count = len(coords)
    return tuple(sum(column) / count for column in zip(*coords))


def cells_to_array(cells: Iterable[Iterable[int]]) -> Tuple[np.ndarray, Coordinate]:
    """Render cells into the smallest boolean array that holds them all.

    Args:
        cells: Alive cell coordinates

    Returns:
        (array, origin) where array[i - origin] is True for every cell i

    Raises:
        ValueError: If there are no cells (the dimension would be unknown)
    """
    coords = _coordinates(cells)
    if not coords:
        raise ValueError("Cannot build an array from an empty cell set")

    lower, upper = _corners(coords)
    shape = tuple(u - l + 1 for l, u in zip(lower, upper))
    offsets = np.array(
        [tuple(c - l for c, l in zip(cell, lower)) for cell in coords],
        dtype=np.intp,
    )
    array = np.zeros(shape, dtype=bool)
    array[tuple(offsets.T)] = True

    logger.debug(f"Rendered {len(coords)} cells into array of shape {shape}")
    return array, lower


def cells_from_array(array: np.ndarray, origin: Optional[Iterable[int]] = None) -> FrozenSet[Coordinate]:
    """Convert a boolean array into a set of alive cell coordinates.

    Args:
        array: N-dimensional array, truthy entries are alive
        origin: Coordinate of array[0, ..., 0] (all zeros if None)

    Returns:
        Frozenset of coordinate tuples

    Raises:
        ValueError: If origin length does not match the array dimension
    """
    array = np.asarray(array)
    if array.dtype != bool:
        array = array.astype(bool)

    if origin is None:
        origin = (0,) * array.ndim
    origin = tuple(int(v) for v in origin)
    if len(origin) != array.ndim:
        raise ValueError(f"Origin {origin} doesn't match array dimension {array.ndim}")

    return frozenset(
        tuple(int(i) + o for i, o in zip(index, origin))
        for index in np.argwhere(array)
    )
