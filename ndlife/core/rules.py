"""Birth/survival rule sets and their validation.

A rule set is a set of neighbour counts. Birth rules turn a dead cell alive,
survival rules keep a living cell alive. Every entry point that accepts rules
(construction, the two setters, simulation config) goes through the same
checker here so the invariants cannot be bypassed.
"""

from typing import FrozenSet, Iterable, Tuple
import logging
import numbers

from .errors import (
    InvalidRuleError,
    RuleStringError,
    TooHighRuleError,
    ZeroDimensionError,
    ZeroNeighbourBirthRuleError,
)

logger = logging.getLogger(__name__)

RuleSet = FrozenSet[int]

# Standard Conway rules
BIRTH_SET: RuleSet = frozenset({3})         # Dead cells born with exactly 3 neighbours
SURVIVAL_SET: RuleSet = frozenset({2, 3})   # Live cells survive with 2-3 neighbours
CONWAY_RULE_STRING = "B3/S23"


def max_neighbours(dimension: int) -> int:
    """Size of the Moore neighbourhood in `dimension` dimensions.

    Args:
        dimension: Number of spatial dimensions (>= 1)

    Returns:
        3**dimension - 1, the largest possible alive-neighbour count

    Raises:
        ZeroDimensionError: If dimension is less than 1
    """
    if dimension < 1:
        raise ZeroDimensionError(dimension)
    return 3 ** dimension - 1


def _check_rule_value(rule: object) -> int:
    # bool is an Integral subclass but never a neighbour count
    if isinstance(rule, bool) or not isinstance(rule, numbers.Integral):
        raise InvalidRuleError(rule, "neighbour counts must be integers")
    if rule < 0:
        raise InvalidRuleError(rule, "neighbour counts cannot be negative")
    return int(rule)


def _check_rules(rules: Iterable[int], maximum: int, allow_zero: bool) -> RuleSet:
    """Validate one rule set and return it as a frozenset of plain ints."""
    checked = frozenset(_check_rule_value(rule) for rule in rules)
    if not allow_zero and 0 in checked:
        raise ZeroNeighbourBirthRuleError()
    for rule in sorted(checked):
        if rule > maximum:
            raise TooHighRuleError(rule, maximum)
    return checked


def validate_rules(dimension: int,
                   birth: Iterable[int],
                   survival: Iterable[int]) -> Tuple[RuleSet, RuleSet]:
    """Check a complete birth/survival configuration.

    Dimension is checked first, then every rule set in turn, birth rules
    before survival rules. Within a set, non-integer and negative values are
    rejected before the zero birth rule and the upper limit are checked.

    Returns:
        (birth, survival) as frozensets of ints

    Raises:
        ZeroDimensionError: If dimension is 0
        InvalidRuleError: If a rule is not a non-negative integer
        ZeroNeighbourBirthRuleError: If birth contains 0
        TooHighRuleError: For the first rule above 3**dimension - 1
    """
    maximum = max_neighbours(dimension)
    birth = _check_rules(birth, maximum, allow_zero=False)
    survival = _check_rules(survival, maximum, allow_zero=True)
    return birth, survival


def validate_birth_rules(dimension: int, birth: Iterable[int]) -> RuleSet:
    """Validate birth rules alone and return them normalised."""
    return _check_rules(birth, max_neighbours(dimension), allow_zero=False)


def validate_survival_rules(dimension: int, survival: Iterable[int]) -> RuleSet:
    """Validate survival rules alone and return them normalised.

    Survival on zero neighbours is legal: a lone cell may persist.
    """
    return _check_rules(survival, max_neighbours(dimension), allow_zero=True)


def _parse_counts(rule_string: str, digits: str) -> RuleSet:
    if not digits:
        return frozenset()
    parts = digits.split(',') if ',' in digits else list(digits)
    counts = set()
    for part in parts:
        part = part.strip()
        if not part.isdigit():
            raise RuleStringError(rule_string, f"{part!r} is not a neighbour count")
        counts.add(int(part))
    return frozenset(counts)


def parse_rule_string(rule_string: str) -> Tuple[RuleSet, RuleSet]:
    """Parse B/S notation such as "B3/S23" into (birth, survival).

    Either half may come first and letters are case-insensitive. Counts are
    single digits ("B36/S23") unless the half contains commas, which allows
    counts above 9 for higher dimensions ("B5,6,7/S4,5,6,10").

    Args:
        rule_string: Rule in B/S notation

    Returns:
        Tuple of (birth rules, survival rules)

    Raises:
        RuleStringError: If the string is not in B/S notation
    """
    halves = rule_string.strip().split('/')
    if len(halves) != 2:
        raise RuleStringError(rule_string, "expected exactly one '/'")

    birth = survival = None
    for half in halves:
        half = half.strip()
        if not half:
            raise RuleStringError(rule_string, "empty rule half")
        prefix, digits = half[0].upper(), half[1:]
        if prefix == 'B' and birth is None:
            birth = _parse_counts(rule_string, digits)
        elif prefix == 'S' and survival is None:
            survival = _parse_counts(rule_string, digits)
        else:
            raise RuleStringError(rule_string, "expected one 'B' half and one 'S' half")

    return birth, survival


def format_rule_string(birth: Iterable[int], survival: Iterable[int]) -> str:
    """Inverse of parse_rule_string, used for log lines and repr."""
    def fmt(rules: Iterable[int]) -> str:
        ordered = sorted(rules)
        if any(rule > 9 for rule in ordered):
            return ','.join(str(rule) for rule in ordered)
        return ''.join(str(rule) for rule in ordered)

    return f"B{fmt(birth)}/S{fmt(survival)}"
