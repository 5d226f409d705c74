import pytest

from dice_histogram.models import DiceSpec
from dice_histogram.parser import parse_spec


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1d6", DiceSpec(count=1, sides=6, modifier=0)),
        ("3d8", DiceSpec(count=3, sides=8, modifier=0)),
        ("2d10+5", DiceSpec(count=2, sides=10, modifier=5)),
        ("1d20-3", DiceSpec(count=1, sides=20, modifier=-3)),
        ("  2D6+1  ", DiceSpec(count=2, sides=6, modifier=1)),
        ("2d6+", DiceSpec(count=2, sides=6, modifier=0)),
        ("2d6-", DiceSpec(count=2, sides=6, modifier=0)),
        ("2d6+-3", DiceSpec(count=2, sides=6, modifier=-3)),
        ("2d6--3", DiceSpec(count=2, sides=6, modifier=3)),
        ("1d1", DiceSpec(count=1, sides=1, modifier=0)),
        ("255d255", DiceSpec(count=255, sides=255, modifier=0)),
        ("007d006", DiceSpec(count=7, sides=6, modifier=0)),
    ],
)
def test_parse_acceptance(text, expected):
    assert parse_spec(text) == expected


@pytest.mark.parametrize("count", [1, 2, 6, 100])
@pytest.mark.parametrize("sides", [1, 4, 20, 255])
def test_parse_count_and_sides(count, sides):
    assert parse_spec(f"{count}d{sides}") == DiceSpec(count=count, sides=sides, modifier=0)


@pytest.mark.parametrize("m", [0, 1, 7, 1000])
def test_parse_modifier_sign(m):
    assert parse_spec(f"3d4+{m}").modifier == m
    assert parse_spec(f"3d4-{m}").modifier == -m


def test_case_and_whitespace_insensitive():
    assert parse_spec("  2D6+1  ") == parse_spec("2d6+1")
    assert parse_spec("\t4D8-2\n") == parse_spec("4d8-2")


@pytest.mark.parametrize(
    ("text", "rendered"),
    [
        ("2d6", "2d6"),
        ("2d6+0", "2d6"),
        ("2D6+3", "2d6+3"),
        ("1d20-2", "1d20-2"),
    ],
)
def test_spec_renders_canonical_form(text, rendered):
    assert str(parse_spec(text)) == rendered
