from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from .dice import distribution, roll_dice as roll_spec
from .errors import DiceError
from .parser import parse_spec


mcp = FastMCP("dice-histogram")


@mcp.tool()
def roll_dice(spec: str, histogram: bool = False) -> dict[str, Any]:
    """Roll dice written as NdS[+/-M], e.g. '2d6+3' or '1d20-1'.

    Input: spec (string), histogram (bool, include the exact distribution)
    Output: structured JSON with the individual rolls, total and its chance

    Raises a hard error (exception) on invalid input.
    """

    try:
        parsed = parse_spec(spec)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None

    result = roll_spec(parsed)
    dist = distribution(parsed)

    payload: dict[str, Any] = {
        "spec": str(parsed),
        "count": parsed.count,
        "sides": parsed.sides,
        "modifier": parsed.modifier,
        "rolls": list(result.rolls),
        "total": result.total,
        "chance": dist.get(result.total, 0.0),
    }
    if histogram:
        payload["distribution"] = [
            {"total": total, "percentage": percentage} for total, percentage in dist.items()
        ]
    return payload


def run() -> None:
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
