"""The four voices of the drum machine, in the order their slices are packed."""

import dataclasses
import typing

import drumseed.bit_mapping
import drumseed.constants.gm_drums


@dataclasses.dataclass(frozen=True)
class Instrument:

	"""
	One drum voice: its note number, its bit mapping and where its slice sits in the seed.
	"""

	name: str
	pitch: int
	mapping: drumseed.bit_mapping.BitMapping
	shift: int


KICK = Instrument(
	name = "kick",
	pitch = drumseed.constants.gm_drums.KICK_1,
	mapping = drumseed.bit_mapping.KICK_MAPPING,
	shift = 48
)

SNARE = Instrument(
	name = "snare",
	pitch = drumseed.constants.gm_drums.SNARE_1,
	mapping = drumseed.bit_mapping.SNARE_MAPPING,
	shift = 32
)

CLOSED_HAT = Instrument(
	name = "closed hat",
	pitch = drumseed.constants.gm_drums.HI_HAT_CLOSED,
	mapping = drumseed.bit_mapping.CLOSED_HAT_MAPPING,
	shift = 16
)

OPEN_HAT = Instrument(
	name = "open hat",
	pitch = drumseed.constants.gm_drums.HI_HAT_OPEN,
	mapping = drumseed.bit_mapping.OPEN_HAT_MAPPING,
	shift = 0
)

# Most significant slice first.
INSTRUMENTS: typing.Tuple[Instrument, ...] = (KICK, SNARE, CLOSED_HAT, OPEN_HAT)
