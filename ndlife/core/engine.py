"""Generation engine for sparse N-dimensional life.

Advances a Life by one generation without ever materialising the infinite
grid. Only living cells and their immediate neighbours are visited:

- each living cell counts how many of its neighbours are alive and survives
  if that count is a survival rule;
- each dead neighbour of a living cell accumulates a tally of living
  neighbours, and is born if the final tally is a birth rule.

A dead cell with no living neighbours could only be born under a birth rule
of 0, which the rule validator forbids, so these candidates are complete.

Cost is O(alive * (3**N - 1)) per generation in both time and tally size.
"""

from typing import TYPE_CHECKING, Dict
import logging

from .cells import Coordinate
from .neighbourhood import moore_offsets

if TYPE_CHECKING:
    from .life import Life

logger = logging.getLogger(__name__)


class GenerationEngine:
    """Sparse birth/survival rules engine.

    Stateless: all working storage (the previous-generation buffer and the
    dead-neighbour tally) is owned by the Life being advanced, so one engine
    can serve any number of lives.
    """

    def step(self, life: 'Life') -> None:
        """Advance `life` one generation in place.

        Args:
            life: Life to update (modified in-place)
        """
        life._age += 1

        # Double buffer: last generation's set becomes `previous`, the old
        # `previous` set object is reused for the new generation
        life._previous, life._alive = life._alive, life._previous
        life._alive.clear()
        life._dead_neighbours.clear()

        previous = life._previous
        current = life._alive
        tally: Dict[Coordinate, int] = life._dead_neighbours
        survival = life._survival_rules
        dimension = life._dimension

        for cell in previous:
            alive_neighbours = 0
            for offset in moore_offsets(dimension):
                neighbour = tuple(c + d for c, d in zip(cell, offset))
                if neighbour in previous:
                    alive_neighbours += 1
                else:
                    tally[neighbour] = tally.get(neighbour, 0) + 1
            if alive_neighbours in survival:
                current.add(cell)

        birth = life._birth_rules
        for cell, count in tally.items():
            if count in birth:
                current.add(cell)

        logger.debug(
            f"Generation {life._age}: {len(previous)} -> {len(current)} alive "
            f"({len(tally)} birth candidates)"
        )


# Singleton instance for convenience
default_engine = GenerationEngine()
