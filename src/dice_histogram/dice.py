from __future__ import annotations

import logging
import random
import secrets

from .models import DiceSpec, Distribution, RollResult


logger = logging.getLogger(__name__)


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else secrets.SystemRandom()


def roll_dice(spec: DiceSpec, rng: random.Random | None = None) -> RollResult:
    """Roll every die in ``spec`` once, keeping the individual results.

    The default source is ``secrets.SystemRandom``; pass a seeded
    ``random.Random`` for reproducible rolls.
    """

    source = _rng(rng)
    rolls = tuple(source.randint(1, spec.sides) for _ in range(spec.count))
    return RollResult(spec=spec, rolls=rolls, total=sum(rolls) + spec.modifier)


def roll(spec: DiceSpec, rng: random.Random | None = None) -> int:
    return roll_dice(spec, rng).total


def _frequencies(spec: DiceSpec) -> dict[int, int]:
    # Fold one die at a time into the table of ways to reach each raw sum;
    # the counts equal a full enumeration of all sides**count combinations.
    # ways[i] is the number of combinations summing to (dice folded) + i.
    ways = [1]
    for _ in range(spec.count):
        folded: list[int] = []
        window = 0
        for i in range(len(ways) + spec.sides - 1):
            if i < len(ways):
                window += ways[i]
            if i >= spec.sides:
                window -= ways[i - spec.sides]
            folded.append(window)
        ways = folded
    return {spec.min_total + i: n for i, n in enumerate(ways)}


def distribution(spec: DiceSpec) -> Distribution:
    """Exact percentage chance of every achievable total, ascending by total."""

    outcomes = spec.outcomes
    frequencies = _frequencies(spec)
    logger.debug("%s: %d totals over %d outcomes", spec, len(frequencies), outcomes)
    return {total: (ways / outcomes) * 100.0 for total, ways in frequencies.items()}


def chance(spec: DiceSpec, total: int) -> float:
    """Percentage chance of rolling exactly ``total``; 0.0 when unreachable."""
    return distribution(spec).get(total, 0.0)
