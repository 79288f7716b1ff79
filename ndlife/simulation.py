"""Simulation runner: evolve a seed and collect population metrics.

Used by the command-line demo and handy for quick experiments:

    config = SimulationConfig.from_rule_string("B3/S23", generations=40)
    results = run_simulation(config, GLIDER)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable
import logging

from .core.dense import center_of_mass
from .core.life import Life
from .core.rules import (
    BIRTH_SET,
    SURVIVAL_SET,
    format_rule_string,
    parse_rule_string,
    validate_rules,
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run.

    Attributes:
        dimension: Number of spatial dimensions
        birth: Birth rule set
        survival: Survival rule set
        generations: Number of generations to run
        log_interval: Log progress every this many generations (0 disables)
    """
    dimension: int = 2
    birth: FrozenSet[int] = field(default_factory=lambda: BIRTH_SET)
    survival: FrozenSet[int] = field(default_factory=lambda: SURVIVAL_SET)
    generations: int = 30
    log_interval: int = 5

    def __post_init__(self):
        if self.generations < 0:
            raise ValueError(f"generations must be non-negative, got {self.generations}")
        if self.log_interval < 0:
            raise ValueError(f"log_interval must be non-negative, got {self.log_interval}")
        self.birth, self.survival = validate_rules(self.dimension, self.birth, self.survival)

    @classmethod
    def from_rule_string(cls, rule_string: str, dimension: int = 2, **kwargs) -> 'SimulationConfig':
        """Build a config from B/S notation, e.g. "B36/S23"."""
        birth, survival = parse_rule_string(rule_string)
        return cls(dimension=dimension, birth=birth, survival=survival, **kwargs)

    @property
    def rule_string(self) -> str:
        return format_rule_string(self.birth, self.survival)


def run_simulation(config: SimulationConfig, seed: Iterable[Iterable[int]]) -> Dict[str, Any]:
    """Evolve `seed` under `config` and return metrics.

    Stops early if the population dies out.

    Args:
        config: Simulation configuration
        seed: Initial alive cells

    Returns:
        Dictionary with final age, population and centre of mass history,
        final alive cells and whether the population died out
    """
    life = Life(config.dimension, config.birth, config.survival, seed)

    logger.info(f"=== {config.dimension}-D LIFE {config.rule_string} ===")
    logger.info(f"Evolution steps: {config.generations}")
    logger.info(f"Initial live cells: {life.population}")

    population_history = [life.population]
    com_trajectory = [center_of_mass(life.alive_cells)]

    for step in range(config.generations):
        life.next_generation()
        population_history.append(life.population)
        com_trajectory.append(center_of_mass(life.alive_cells))

        if config.log_interval and (step % config.log_interval == 0 or step == config.generations - 1):
            logger.info(f"Generation {life.age}: Live={life.population}")

        if life.population == 0:
            logger.info(f"Population died out at generation {life.age}")
            break

    results = {
        "dimension": config.dimension,
        "rule": config.rule_string,
        "generations": config.generations,
        "final_age": life.age,
        "initial_live_count": population_history[0],
        "final_live_count": population_history[-1],
        "live_count_history": population_history,
        "com_trajectory": com_trajectory,
        "final_cells": life.alive_cells,
        "extinct": life.population == 0,
    }

    logger.info(f"Final live cells: {results['final_live_count']} at age {results['final_age']}")
    return results
