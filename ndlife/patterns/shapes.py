"""Classic 2-D Conway patterns as sparse coordinate sets.

Coordinates are (x, y) tuples. Under B3/S23 the still lifes never change,
the oscillators return to their start after `period` generations and the
spaceships return to their start shape translated by `displacement`.
"""

from typing import Dict, FrozenSet, Iterable, NamedTuple, Tuple

Cells = FrozenSet[Tuple[int, ...]]


class PatternInfo(NamedTuple):
    """Catalogue entry for a named pattern."""
    cells: Cells
    period: int                         # Generations until the shape repeats
    displacement: Tuple[int, int]       # Translation per period (0, 0) if stationary


# Still lifes
BLOCK: Cells = frozenset({(0, 0), (0, 1), (1, 0), (1, 1)})
BEEHIVE: Cells = frozenset({(0, 1), (1, 0), (1, 2), (2, 0), (2, 2), (3, 1)})
LOAF: Cells = frozenset({(0, 0), (1, 1), (2, 1), (3, 0), (3, -1), (2, -2), (1, -1)})
BOAT: Cells = frozenset({(0, 0), (0, 1), (1, 1), (2, 0), (1, -1)})
TUB: Cells = frozenset({(0, 0), (1, 1), (2, 0), (1, -1)})

# Oscillators
BLINKER: Cells = frozenset({(0, 0), (0, 1), (0, 2)})
TOAD: Cells = frozenset({(0, 0), (1, 0), (2, 0), (1, 1), (2, 1), (3, 1)})
BEACON: Cells = frozenset({(0, 0), (0, 1), (1, 0), (1, 1), (2, -1), (2, -2), (3, -1), (3, -2)})


def _pulsar() -> Cells:
    # One quadrant, mirrored into the other three
    quadrant = {
        (1, 2), (1, 3), (1, 4),
        (6, 2), (6, 3), (6, 4),
        (2, 1), (3, 1), (4, 1),
        (2, 6), (3, 6), (4, 6),
    }
    return frozenset(
        (sx * x, sy * y)
        for x, y in quadrant
        for sx in (1, -1)
        for sy in (1, -1)
    )


PULSAR: Cells = _pulsar()

# Spaceships
GLIDER: Cells = frozenset({(0, 0), (1, 0), (2, 0), (2, 1), (1, 2)})
LIGHTWEIGHT_SPACESHIP: Cells = frozenset({
    (0, 1), (0, 3), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2), (3, 3)
})


PATTERNS: Dict[str, PatternInfo] = {
    "block": PatternInfo(BLOCK, 1, (0, 0)),
    "beehive": PatternInfo(BEEHIVE, 1, (0, 0)),
    "loaf": PatternInfo(LOAF, 1, (0, 0)),
    "boat": PatternInfo(BOAT, 1, (0, 0)),
    "tub": PatternInfo(TUB, 1, (0, 0)),
    "blinker": PatternInfo(BLINKER, 2, (0, 0)),
    "toad": PatternInfo(TOAD, 2, (0, 0)),
    "beacon": PatternInfo(BEACON, 2, (0, 0)),
    "pulsar": PatternInfo(PULSAR, 3, (0, 0)),
    "glider": PatternInfo(GLIDER, 4, (1, -1)),
    "lwss": PatternInfo(LIGHTWEIGHT_SPACESHIP, 4, (2, 0)),
}


def get_pattern(name: str) -> Cells:
    """Look up a catalogue pattern by name (case-insensitive).

    Raises:
        KeyError: If no pattern has that name
    """
    key = name.lower()
    if key not in PATTERNS:
        raise KeyError(f"Unknown pattern {name!r}; choose from {sorted(PATTERNS)}")
    return PATTERNS[key].cells


def translate(cells: Iterable[Iterable[int]], offset: Iterable[int]) -> Cells:
    """Shift every cell by `offset` component-wise."""
    offset = tuple(offset)
    return frozenset(
        tuple(c + d for c, d in zip(cell, offset))
        for cell in cells
    )
