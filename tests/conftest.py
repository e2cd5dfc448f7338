import typing

import pytest

import drumseed.pattern


# Seed 0 decoded by hand from the mapping tables, one string per instrument.
AMEN_GRID: typing.Dict[str, str] = {
	"kick":       "X.X.......XX....",
	"snare":      "....X..X.X..X...",
	"closed hat": ".XXXXXXXXXXX.XXX",
	"open hat":   "X...........X...",
}


def hits_from_grid (row: str) -> typing.Tuple[bool, ...]:

	"""Convert an ``X.`` row into a tuple of hit flags."""

	return tuple(cell == "X" for cell in row)


@pytest.fixture
def amen () -> drumseed.pattern.MachinePattern:

	"""The pattern for seed 0."""

	return drumseed.pattern.compose(0)
