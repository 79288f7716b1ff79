"""
ndlife: infinite N-dimensional Game of Life

Sparse birth/survival cellular automata in any number of dimensions.
Only alive cells are stored, so the grid is unbounded in every direction.
"""

from .core.errors import (
    CoordinateDimensionError,
    InvalidRuleError,
    LifeError,
    RuleStringError,
    TooHighRuleError,
    ZeroDimensionError,
    ZeroNeighbourBirthRuleError,
)
from .core.life import Life, conways_game_of_life
from .core.rules import max_neighbours, parse_rule_string

__version__ = "0.1.0"

__all__ = [
    'Life',
    'conways_game_of_life',
    'max_neighbours',
    'parse_rule_string',
    'CoordinateDimensionError',
    'InvalidRuleError',
    'LifeError',
    'RuleStringError',
    'TooHighRuleError',
    'ZeroDimensionError',
    'ZeroNeighbourBirthRuleError',
]
