"""Seed parsing and slicing.

A seed is an unsigned 64-bit integer holding four 16-bit slices, kick in the
top 16 bits down to the open hat in the bottom 16.  Seeds usually arrive as
text (a command-line argument or a config value), so this module accepts the
usual Python integer spellings::

	parse_seed("0")                      # the Amen break
	parse_seed("0x0001_0000_0000_0000")  # kick variation 1
	parse_seed("0b1010")
"""

import typing

import drumseed.constants
import drumseed.instruments


class SeedError (ValueError):
	pass


def parse_seed (text: typing.Union[str, int]) -> int:

	"""Convert seed text to an integer in the 64-bit range.

	Integers are range-checked and returned unchanged. Strings may be
	decimal or carry a ``0x``, ``0b`` or ``0o`` prefix, and may use ``_``
	separators.

	Raises:
		SeedError: If the text is not an integer, is negative, or needs
			more than 64 bits.
	"""

	if isinstance(text, bool):
		raise SeedError(f"Invalid seed: {text!r}")

	if isinstance(text, int):
		value = text

	else:
		cleaned = str(text).strip()

		if not cleaned:
			raise SeedError("Seed cannot be empty")

		try:
			value = int(cleaned, 0)
		except ValueError:
			raise SeedError(f"Invalid seed: {text!r}") from None

	if value < 0:
		raise SeedError(f"Seed cannot be negative: {text!r}")

	if value > drumseed.constants.SEED_MASK:
		raise SeedError(f"Seed does not fit in {drumseed.constants.SEED_BITS} bits: {text!r}")

	return value


def format_seed (seed: int) -> str:

	"""Format a seed as zero-padded hex, one slice per four digits."""

	return f"0x{seed & drumseed.constants.SEED_MASK:016x}"


def split_seed (seed: int) -> typing.Tuple[int, ...]:

	"""
	Split a seed into its instrument slices, kick first.
	"""

	return tuple(
		(seed >> instrument.shift) & drumseed.constants.SLICE_MASK
		for instrument in drumseed.instruments.INSTRUMENTS
	)


def join_slices (kick: int, snare: int, closed_hat: int, open_hat: int) -> int:

	"""
	Pack four 16-bit slices into a seed.
	"""

	slices = (kick, snare, closed_hat, open_hat)
	seed = 0

	for instrument, value in zip(drumseed.instruments.INSTRUMENTS, slices):

		if not 0 <= value <= drumseed.constants.SLICE_MASK:
			raise SeedError(f"Slice for {instrument.name} must be in 0-{drumseed.constants.SLICE_MASK}, got {value}")

		seed |= value << instrument.shift

	return seed
