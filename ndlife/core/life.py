"""Infinite N-dimensional game of life.

A Life holds the rules, the age counter and the sparse set of alive cells of
one automaton. Dimension is fixed at construction; coordinates are tuples of
that many ints. Python ints never overflow, so patterns can travel
arbitrarily far from the origin.

Example:
    >>> life = Life(2, {3}, {2, 3}, [(0, 0), (1, 0), (2, 0), (2, 1), (1, 2)])
    >>> life.advance(4)
    >>> sorted(life.alive_cells)
    [(1, -1), (2, -1), (2, 1), (3, -1), (3, 0)]

A single Life is not safe for concurrent mutation; callers sharing one
between threads must lock around it.
"""

from typing import Dict, FrozenSet, Iterable, Iterator, Optional
import logging

from .cells import CellSet, Coordinate
from .diff import born_cells, changed_cells, died_cells
from .engine import GenerationEngine, default_engine
from .errors import CoordinateDimensionError
from .rules import (
    BIRTH_SET,
    SURVIVAL_SET,
    RuleSet,
    format_rule_string,
    max_neighbours,
    validate_birth_rules,
    validate_rules,
    validate_survival_rules,
)

logger = logging.getLogger(__name__)


class Life:
    """Sparse N-dimensional birth/survival cellular automaton.

    Attributes:
        dimension: Number of spatial dimensions (fixed)
        age: Number of generations advanced so far
        birth_rules: Neighbour counts that bring a dead cell to life
        survival_rules: Neighbour counts that keep a live cell alive
    """

    def __init__(self,
                 dimension: int,
                 birth_rules: Iterable[int],
                 survival_rules: Iterable[int],
                 alive_cells: Optional[Iterable[Iterable[int]]] = None,
                 engine: Optional[GenerationEngine] = None):
        """Create a life with validated rules.

        Args:
            dimension: Number of spatial dimensions (>= 1)
            birth_rules: Neighbour counts for dead cell birth
            survival_rules: Neighbour counts for live cell survival
            alive_cells: Optional initial alive cells
            engine: Generation engine (shared default if None)

        Raises:
            ZeroDimensionError: If dimension is 0
            InvalidRuleError: If a rule is not a non-negative integer
            ZeroNeighbourBirthRuleError: If birth_rules contains 0
            TooHighRuleError: If any rule exceeds 3**dimension - 1
            CoordinateDimensionError: If an alive cell does not have
                `dimension` coordinates
        """
        birth_rules, survival_rules = validate_rules(dimension, birth_rules, survival_rules)
        alive = CellSet(alive_cells)
        for cell in alive:
            if len(cell) != dimension:
                raise CoordinateDimensionError(cell, dimension)

        self._dimension = dimension
        self._max_neighbours = max_neighbours(dimension)
        self._age = 0
        self._birth_rules: RuleSet = birth_rules
        self._survival_rules: RuleSet = survival_rules
        self._alive = alive
        self._previous = CellSet()
        self._dead_neighbours: Dict[Coordinate, int] = {}
        self._engine = engine or default_engine

        logger.debug(
            f"Created {dimension}-D life {format_rule_string(birth_rules, survival_rules)} "
            f"with {len(self._alive)} alive cells"
        )

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def max_neighbours(self) -> int:
        """Largest possible neighbour count, 3**dimension - 1."""
        return self._max_neighbours

    @property
    def age(self) -> int:
        return self._age

    @property
    def birth_rules(self) -> RuleSet:
        return self._birth_rules

    def set_birth_rules(self, birth_rules: Iterable[int]) -> None:
        """Replace the birth rules.

        Raises:
            InvalidRuleError: If a rule is not a non-negative integer
            ZeroNeighbourBirthRuleError: If birth_rules contains 0
            TooHighRuleError: If any rule exceeds max_neighbours

        The current rules are kept if validation fails.
        """
        self._birth_rules = validate_birth_rules(self._dimension, birth_rules)
        logger.debug(f"Birth rules set to {sorted(self._birth_rules)}")

    @property
    def survival_rules(self) -> RuleSet:
        return self._survival_rules

    def set_survival_rules(self, survival_rules: Iterable[int]) -> None:
        """Replace the survival rules.

        Zero is a legal survival rule: a lone cell may persist.

        Raises:
            InvalidRuleError: If a rule is not a non-negative integer
            TooHighRuleError: If any rule exceeds max_neighbours

        The current rules are kept if validation fails.
        """
        self._survival_rules = validate_survival_rules(self._dimension, survival_rules)
        logger.debug(f"Survival rules set to {sorted(self._survival_rules)}")

    @property
    def alive_cells(self) -> FrozenSet[Coordinate]:
        """Snapshot of the alive cells."""
        return self._alive.to_frozenset()

    def set_alive_cells(self, alive_cells: Iterable[Iterable[int]]) -> None:
        """Replace every alive cell. Coordinates are not validated."""
        self._alive.replace(alive_cells)

    @property
    def population(self) -> int:
        """Number of alive cells."""
        return len(self._alive)

    def get_cell(self, cell: Iterable[int]) -> bool:
        """Check whether a cell is alive."""
        return self._alive.contains(cell)

    def set_cell(self, cell: Iterable[int], alive: bool) -> bool:
        """Set a cell alive or dead.

        Returns:
            True if the cell changed state
        """
        return self._alive.set(cell, alive)

    def toggle_cell(self, cell: Iterable[int]) -> None:
        """Flip a cell between alive and dead."""
        self._alive.toggle(cell)

    def next_generation(self) -> None:
        """Advance one generation in place."""
        self._engine.step(self)

    def advance(self, generations: int = 1) -> None:
        """Advance several generations. Non-positive counts do nothing."""
        for _ in range(generations):
            self._engine.step(self)

    def changed_cells(self) -> Iterator[Coordinate]:
        """Cells that changed state during the last generation.

        Lazy; stale after the next generation or any direct cell edit.
        """
        return changed_cells(self._previous, self._alive)

    def born_cells(self) -> Iterator[Coordinate]:
        """Cells that came alive during the last generation."""
        return born_cells(self._previous, self._alive)

    def died_cells(self) -> Iterator[Coordinate]:
        """Cells that died during the last generation."""
        return died_cells(self._previous, self._alive)

    def copy(self) -> 'Life':
        """Create a deep copy of the life, including its age and last diff."""
        new_life = Life(self._dimension, self._birth_rules, self._survival_rules,
                        engine=self._engine)
        new_life._age = self._age
        new_life._alive.replace(self._alive)
        new_life._previous.replace(self._previous)
        return new_life

    def __len__(self) -> int:
        return len(self._alive)

    def __contains__(self, cell: object) -> bool:
        return cell in self._alive

    def __eq__(self, other: object) -> bool:
        """Lives are equal when dimension, age, rules and alive cells match."""
        if not isinstance(other, Life):
            return NotImplemented
        return (self._dimension == other._dimension and
                self._age == other._age and
                self._birth_rules == other._birth_rules and
                self._survival_rules == other._survival_rules and
                self._alive == other._alive)

    __hash__ = None

    def __repr__(self) -> str:
        rule = format_rule_string(self._birth_rules, self._survival_rules)
        return f"Life({self._dimension}-D, {rule}, age={self._age}, alive={len(self._alive)})"


def conways_game_of_life(alive_cells: Optional[Iterable[Iterable[int]]] = None) -> Life:
    """Create a 2-D life with Conway's rules (B3/S23)."""
    return Life(2, BIRTH_SET, SURVIVAL_SET, alive_cells)
