from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


# Upper bounds for a single spec; anything larger is reported as an invalid number.
MAX_COUNT = 255
MAX_SIDES = 255

ParseErrorKind: TypeAlias = Literal[
    "malformed_spec",
    "invalid_count",
    "zero_count",
    "invalid_sides",
    "zero_sides",
    "invalid_modifier",
]

# Ascending total -> percentage of all outcomes.
Distribution: TypeAlias = dict[int, float]


@dataclass(frozen=True)
class DiceSpec:
    count: int
    sides: int
    modifier: int = 0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")
        if self.sides < 1:
            raise ValueError(f"sides must be at least 1, got {self.sides}")

    @property
    def min_total(self) -> int:
        return self.count + self.modifier

    @property
    def max_total(self) -> int:
        return self.count * self.sides + self.modifier

    @property
    def outcomes(self) -> int:
        """Number of equally likely combinations of all dice."""
        return self.sides**self.count

    def __str__(self) -> str:
        base = f"{self.count}d{self.sides}"
        if self.modifier > 0:
            return f"{base}+{self.modifier}"
        if self.modifier < 0:
            return f"{base}-{abs(self.modifier)}"
        return base


@dataclass(frozen=True)
class RollResult:
    spec: DiceSpec
    rolls: tuple[int, ...]
    total: int
