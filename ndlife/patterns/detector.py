"""Period and motion detection for evolving patterns.

A pattern is periodic when, after some number of generations, its alive
cells form the same shape again, possibly translated. Still lifes have
period 1, oscillators a longer period with no motion, spaceships a non-zero
displacement per period.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple
import logging

from ..core.cells import Coordinate
from ..core.dense import bounding_box
from ..core.life import Life

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternPeriod:
    """Detected repetition of a pattern."""
    period: int                     # Generations per cycle
    displacement: Coordinate        # Translation per cycle (all zeros if stationary)

    @property
    def is_still_life(self) -> bool:
        return self.period == 1 and not any(self.displacement)

    @property
    def is_oscillator(self) -> bool:
        return self.period > 1 and not any(self.displacement)

    @property
    def is_spaceship(self) -> bool:
        return any(self.displacement)


def normalize(cells: FrozenSet[Coordinate]) -> Tuple[FrozenSet[Coordinate], Optional[Coordinate]]:
    """Shift cells so the bounding box starts at the origin.

    Returns:
        (shape, lower_corner) where lower_corner is None for no cells
    """
    box = bounding_box(cells)
    if box is None:
        return frozenset(), None
    lower, _ = box
    shape = frozenset(
        tuple(c - l for c, l in zip(cell, lower))
        for cell in cells
    )
    return shape, lower


def detect_period(life: Life, max_period: int = 50) -> Optional[PatternPeriod]:
    """Find the smallest period after which the population repeats.

    Evolves a copy, so `life` itself is not advanced.

    Args:
        life: Life whose current population is examined
        max_period: Largest period to look for

    Returns:
        PatternPeriod, or None if the shape does not recur within max_period
        generations (including populations that die out)
    """
    zero = (0,) * life.dimension
    start_shape, start_corner = normalize(life.alive_cells)
    if start_corner is None:
        return PatternPeriod(1, zero)

    evolving = life.copy()
    for generation in range(1, max_period + 1):
        evolving.next_generation()
        shape, corner = normalize(evolving.alive_cells)
        if corner is None:
            logger.debug(f"Population died out after {generation} generations")
            return None
        if shape == start_shape:
            displacement = tuple(c - s for c, s in zip(corner, start_corner))
            logger.debug(f"Found period {generation} with displacement {displacement}")
            return PatternPeriod(generation, displacement)

    logger.debug(f"No period found within {max_period} generations")
    return None
