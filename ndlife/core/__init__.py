"""
Core sparse life engine: rules, neighbourhoods, cell storage and evolution.
"""

from .cells import CellSet, Coordinate
from .engine import GenerationEngine, default_engine
from .life import Life, conways_game_of_life
from .neighbourhood import moore_offsets, neighbours
from .rules import (
    BIRTH_SET,
    SURVIVAL_SET,
    max_neighbours,
    validate_birth_rules,
    validate_rules,
    validate_survival_rules,
)

__all__ = [
    'CellSet',
    'Coordinate',
    'GenerationEngine',
    'default_engine',
    'Life',
    'conways_game_of_life',
    'moore_offsets',
    'neighbours',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'max_neighbours',
    'validate_birth_rules',
    'validate_rules',
    'validate_survival_rules',
]
