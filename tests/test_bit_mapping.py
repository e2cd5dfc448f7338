import pytest

import conftest
import drumseed.bit_mapping
import drumseed.instruments


ALL_MAPPINGS = [
	drumseed.bit_mapping.KICK_MAPPING,
	drumseed.bit_mapping.SNARE_MAPPING,
	drumseed.bit_mapping.CLOSED_HAT_MAPPING,
	drumseed.bit_mapping.OPEN_HAT_MAPPING,
]


@pytest.mark.parametrize("mapping", ALL_MAPPINGS)
def test_mapping_is_bijection (mapping: drumseed.bit_mapping.BitMapping) -> None:

	"""Every bit of the slice should drive exactly one step."""

	assert len(mapping) == 16
	assert drumseed.bit_mapping.is_bijection(mapping)
	assert sorted(entry.bit for entry in mapping) == list(range(16))


def test_is_bijection_rejects_duplicate_bit () -> None:

	"""A table that reuses a bit and skips another is not a bijection."""

	mapping = (drumseed.bit_mapping.BitEntry(0),) * 2 + drumseed.bit_mapping.SNARE_MAPPING[2:]

	assert not drumseed.bit_mapping.is_bijection(mapping)


def test_is_bijection_rejects_short_table () -> None:

	"""A table with fewer than 16 entries is not a bijection."""

	assert not drumseed.bit_mapping.is_bijection(drumseed.bit_mapping.KICK_MAPPING[:15])


@pytest.mark.parametrize("instrument", drumseed.instruments.INSTRUMENTS, ids=lambda i: i.name)
def test_zero_slice_plays_amen_break (instrument: drumseed.instruments.Instrument) -> None:

	"""A zero slice should decode to the reference Amen break row."""

	expected = conftest.hits_from_grid(conftest.AMEN_GRID[instrument.name])

	assert drumseed.bit_mapping.decode(0, instrument.mapping) == expected


@pytest.mark.parametrize("mapping", ALL_MAPPINGS)
def test_decode_is_total (mapping: drumseed.bit_mapping.BitMapping) -> None:

	"""Every 16-bit value should decode to exactly 16 booleans."""

	for value in range(0x10000):
		hits = drumseed.bit_mapping.decode(value, mapping)
		assert len(hits) == 16
		assert all(isinstance(hit, bool) for hit in hits)


def test_decode_masks_wide_values () -> None:

	"""Bits above the slice width should be ignored."""

	mapping = drumseed.bit_mapping.KICK_MAPPING

	assert drumseed.bit_mapping.decode(0x1_2345, mapping) == drumseed.bit_mapping.decode(0x2345, mapping)


@pytest.mark.parametrize("mapping", ALL_MAPPINGS)
@pytest.mark.parametrize("base", [0x0000, 0xFFFF, 0xA5A5])
def test_single_bit_flip_changes_one_step (mapping: drumseed.bit_mapping.BitMapping, base: int) -> None:

	"""Flipping one bit of the slice should flip exactly the step mapped to it."""

	before = drumseed.bit_mapping.decode(base, mapping)

	for bit in range(16):

		after = drumseed.bit_mapping.decode(base ^ (1 << bit), mapping)
		changed = [step for step in range(16) if before[step] != after[step]]

		assert changed == [drumseed.bit_mapping.step_for_bit(mapping, bit)]


def test_low_bits_select_quarter_notes () -> None:

	"""The snare and hat tables drive the quarter notes from bits 0-3."""

	for mapping in ALL_MAPPINGS[1:]:
		quarter_bits = [mapping[step].bit for step in (0, 4, 8, 12)]
		assert quarter_bits == [0, 1, 2, 3]


def test_kick_variation_one_drops_second_eighth () -> None:

	"""Kick slice 1 clears the inverted bit 0, removing the hit on step 2."""

	hits = drumseed.bit_mapping.decode(1, drumseed.bit_mapping.KICK_MAPPING)

	assert hits == conftest.hits_from_grid("X.........XX....")


def test_step_for_bit_unknown_bit () -> None:

	"""Asking for a bit outside the slice should raise."""

	with pytest.raises(ValueError, match="not used"):
		drumseed.bit_mapping.step_for_bit(drumseed.bit_mapping.KICK_MAPPING, 16)


def test_slice_for_pattern_inverts_decode () -> None:

	"""Encoding a hand-written rhythm should give the slice that decodes back to it."""

	mapping = drumseed.bit_mapping.KICK_MAPPING
	four_on_the_floor = conftest.hits_from_grid("X...X...X...X...")

	value = drumseed.bit_mapping.slice_for_pattern(four_on_the_floor, mapping)

	assert 0 <= value <= 0xFFFF
	assert drumseed.bit_mapping.decode(value, mapping) == four_on_the_floor


def test_slice_for_pattern_amen_is_zero () -> None:

	"""The Amen break rows should all encode to a zero slice."""

	for instrument in drumseed.instruments.INSTRUMENTS:
		hits = conftest.hits_from_grid(conftest.AMEN_GRID[instrument.name])
		assert drumseed.bit_mapping.slice_for_pattern(hits, instrument.mapping) == 0


def test_slice_for_pattern_wrong_length () -> None:

	"""A hit list that is not 16 steps long should raise."""

	with pytest.raises(ValueError, match="Expected 16 steps"):
		drumseed.bit_mapping.slice_for_pattern([True] * 8, drumseed.bit_mapping.KICK_MAPPING)
