"""Error types raised when configuring an N-dimensional life.

All errors derive from ValueError so callers that only care about bad input
can catch that, while callers that need to tell the cases apart can catch
the specific classes below.
"""


class LifeError(ValueError):
    """Base class for invalid life configuration."""


class ZeroDimensionError(LifeError):
    """Life in a zero-dimensional space is not possible."""

    def __init__(self, dimension: int = 0):
        self.dimension = dimension
        super().__init__(
            f"Life in a zero-dimensional space is not possible (dimension={dimension})"
        )


class ZeroNeighbourBirthRuleError(LifeError):
    """Birth on zero neighbours would populate the whole infinite grid."""

    def __init__(self):
        super().__init__(
            "A rule with zero neighbours for birth is invalid "
            "(infinite number of cells would be born)"
        )


class TooHighRuleError(LifeError):
    """A rule asks for more neighbours than the dimension allows.

    Attributes:
        rule: The offending neighbour count
        max_neighbours: Largest count possible for the configured dimension
    """

    def __init__(self, rule: int, max_neighbours: int):
        self.rule = rule
        self.max_neighbours = max_neighbours
        super().__init__(
            f"A rule specifies more neighbours ({rule}) than the "
            f"dimensionality of the grid allows (max {max_neighbours})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TooHighRuleError):
            return NotImplemented
        return (self.rule, self.max_neighbours) == (other.rule, other.max_neighbours)

    def __hash__(self) -> int:
        return hash((self.rule, self.max_neighbours))


class RuleStringError(LifeError):
    """A B/S rule string could not be parsed."""

    def __init__(self, rule_string: str, reason: str):
        self.rule_string = rule_string
        self.reason = reason
        super().__init__(f"Invalid rule string {rule_string!r}: {reason}")


class InvalidRuleError(LifeError):
    """A rule is not a non-negative integer neighbour count.

    Attributes:
        rule: The offending value
        reason: Why it was rejected
    """

    def __init__(self, rule: object, reason: str):
        self.rule = rule
        self.reason = reason
        super().__init__(f"Invalid rule {rule!r}: {reason}")


class CoordinateDimensionError(LifeError):
    """A cell coordinate has the wrong number of components."""

    def __init__(self, cell: tuple, dimension: int):
        self.cell = cell
        self.dimension = dimension
        super().__init__(
            f"Cell {cell} has {len(cell)} coordinates, expected {dimension}"
        )
