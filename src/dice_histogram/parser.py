from __future__ import annotations

import logging
import re

from .errors import DiceSpecError
from .models import MAX_COUNT, MAX_SIDES, DiceSpec


logger = logging.getLogger(__name__)

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


def normalize_spec(spec: str) -> str:
    return spec.strip().lower()


def _parse_unsigned(text: str, limit: int) -> int | None:
    if _UNSIGNED_RE.fullmatch(text) is None:
        return None
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        return None
    value = int(digits)
    if value > limit:
        return None
    return value


def _parse_signed(text: str) -> int | None:
    if _SIGNED_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's integer string conversion limit.
        return None


def _split_modifier(rest: str) -> tuple[str, str, int]:
    """Split ``6+3`` style text into (sides, modifier, sign) on the first + or -."""
    for delimiter, sign in (("+", 1), ("-", -1)):
        if delimiter in rest:
            sides_str, _, modifier_str = rest.partition(delimiter)
            return sides_str, modifier_str or "0", sign
    return rest, "0", 1


def parse_spec(spec: str) -> DiceSpec:
    """Parse ``NdS[+/-M]`` notation into a DiceSpec. Raises DiceSpecError."""

    normalized = normalize_spec(spec)

    parts = normalized.split("d")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise DiceSpecError(
            "malformed_spec",
            spec,
            normalized,
            f"Invalid dice specification '{normalized}': must be in format 'NdS' (e.g., '2d6')",
        )
    count_str, rest = parts

    count = _parse_unsigned(count_str, MAX_COUNT)
    if count is None:
        raise DiceSpecError(
            "invalid_count",
            spec,
            count_str,
            f"Invalid count in '{normalized}': '{count_str}' is not a valid number",
        )
    if count == 0:
        raise DiceSpecError(
            "zero_count",
            spec,
            count_str,
            f"Invalid count in '{normalized}': cannot use 0 dice",
        )

    sides_str, modifier_str, sign = _split_modifier(rest)

    sides = _parse_unsigned(sides_str, MAX_SIDES)
    if sides is None:
        raise DiceSpecError(
            "invalid_sides",
            spec,
            sides_str,
            f"Invalid sides in '{normalized}': '{sides_str}' is not a valid number",
        )
    if sides == 0:
        raise DiceSpecError(
            "zero_sides",
            spec,
            sides_str,
            f"Invalid sides in '{normalized}': cannot use 0 sides",
        )

    modifier = _parse_signed(modifier_str)
    if modifier is None:
        raise DiceSpecError(
            "invalid_modifier",
            spec,
            modifier_str,
            f"Invalid modifier in '{normalized}': '{modifier_str}' is not a valid number",
        )

    parsed = DiceSpec(count=count, sides=sides, modifier=sign * modifier)
    logger.debug("Parsed %r as %s", spec, parsed)
    return parsed
