from __future__ import annotations

import math

from .models import Distribution, RollResult


BAR_CHAR = "#"


def bar_length(percentage: float) -> int:
    """Half a bar per percent, rounded half-up; non-zero always shows one."""
    if percentage <= 0:
        return 0
    return max(1, math.floor(percentage / 2 + 0.5))


def format_roll(result: RollResult, chance: float) -> str:
    rolls = ", ".join(str(r) for r in result.rolls)
    return f"{result.spec}: {result.total} (rolls: {rolls}; {chance:.2f}% chance)"


def format_histogram(dist: Distribution) -> list[str]:
    if not dist:
        return []

    width = max(len(str(total)) for total in dist)
    return [
        f"{total:>{width}} {percentage:6.2f}% {BAR_CHAR * bar_length(percentage)}"
        for total, percentage in dist.items()
    ]
