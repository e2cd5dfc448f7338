"""Per-instrument bit mapping tables and the 16-bit slice decoder.

Each table assigns every step of the 16-step cycle to one bit of a 16-bit
slice.  A step is a hit when its bit is set, or when it is clear for entries
flagged ``invert``.

The lowest bits land on the quarter notes, the next four on the off-beat
eighths, and the top eight on the remaining sixteenths, so small seeds vary
the strong beats first.  The inverted entries are chosen so that a slice of
zero plays the Amen break::

	kick        |X . X . . . . . . . X X . . . .|
	snare       |. . . . X . . X . X . . X . . .|
	closed hat  |. X X X X X X X X X X X . X X X|
	open hat    |X . . . . . . . . . . . X . . .|

The kick table is the exception: its quarter notes take the top four bits and
its off-beat eighths the bottom four.
"""

import typing

import drumseed.constants


class BitEntry (typing.NamedTuple):

	"""
	The bit tested for one step, and whether a clear bit counts as the hit.
	"""

	bit: int
	invert: bool = False


BitMapping = typing.Tuple[BitEntry, ...]
InstrumentPattern = typing.Tuple[bool, ...]


def _hit (bit: int) -> BitEntry:
	return BitEntry(bit, False)


def _rest (bit: int) -> BitEntry:
	return BitEntry(bit, True)


# Steps are listed in order; the comments mark the beat each group starts on.

KICK_MAPPING: BitMapping = (
	_rest(15), _hit(4), _rest(0), _hit(5),		# 1 . and .
	_hit(13), _hit(6), _hit(1), _hit(7),		# 2 . and .
	_hit(14), _hit(8), _rest(2), _rest(9),		# 3 . and .
	_hit(12), _hit(10), _hit(3), _hit(11),		# 4 . and .
)

SNARE_MAPPING: BitMapping = (
	_hit(0), _hit(8), _hit(4), _hit(9),
	_rest(1), _hit(10), _hit(5), _rest(11),
	_hit(2), _rest(12), _hit(6), _hit(13),
	_rest(3), _hit(14), _hit(7), _hit(15),
)

CLOSED_HAT_MAPPING: BitMapping = (
	_hit(0), _rest(8), _rest(4), _rest(9),
	_rest(1), _rest(10), _rest(5), _rest(11),
	_rest(2), _rest(12), _rest(6), _rest(13),
	_hit(3), _rest(14), _rest(7), _rest(15),
)

OPEN_HAT_MAPPING: BitMapping = (
	_rest(0), _hit(8), _hit(4), _hit(9),
	_hit(1), _hit(10), _hit(5), _hit(11),
	_hit(2), _hit(12), _hit(6), _hit(13),
	_rest(3), _hit(14), _hit(7), _hit(15),
)


def decode (value: int, mapping: BitMapping) -> InstrumentPattern:

	"""Decode a 16-bit slice into one instrument's 16 hit flags.

	Every integer is accepted; bits above the slice width are ignored.

	Parameters:
		value: The instrument's slice of the seed (0-65535).
		mapping: One of the instrument tables in this module.

	Returns:
		A tuple of 16 booleans, step 0 first.

	Example:
		```python
		decode(0, KICK_MAPPING)
		# (True, False, True, False, False, ... True, True, False, ...)
		```
	"""

	value &= drumseed.constants.SLICE_MASK

	return tuple(bool(value & (1 << entry.bit)) != entry.invert for entry in mapping)


def is_bijection (mapping: BitMapping) -> bool:

	"""Return True when every bit of the slice is used by exactly one step."""

	if len(mapping) != drumseed.constants.STEPS_PER_PATTERN:
		return False

	return sorted(entry.bit for entry in mapping) == list(range(drumseed.constants.SLICE_BITS))


def step_for_bit (mapping: BitMapping, bit: int) -> int:

	"""
	Return the step index driven by a given bit of the slice.
	"""

	for step, entry in enumerate(mapping):
		if entry.bit == bit:
			return step

	raise ValueError(f"Bit {bit} is not used by this mapping")


def slice_for_pattern (hits: typing.Sequence[bool], mapping: BitMapping) -> int:

	"""Encode a 16-step hit list back into the slice that produces it.

	The inverse of ``decode`` for a bijective mapping, useful for finding the
	seed of a hand-written rhythm.
	"""

	if len(hits) != len(mapping):
		raise ValueError(f"Expected {len(mapping)} steps, got {len(hits)}")

	value = 0

	for hit, entry in zip(hits, mapping):
		if bool(hit) != entry.invert:
			value |= 1 << entry.bit

	return value
