"""ASCII grid view of a machine pattern.

One row per instrument, one cell per step, under a header naming the seed::

	seed 0x0000000000000000
	  kick        |O . O . . . . . . . O O . . . .|
	  snare       |. . . . O . . O . O . . O . . .|
	  closed hat  |. O O O O O O O O O O O . O O O|
	  open hat    |O . . . . . . . . . . . O . . .|

Cells show the hit velocity on a four-character scale, so every hit at the
default velocity of 100 is drawn as ``O``.
"""

import typing

import drumseed.constants
import drumseed.instruments
import drumseed.pattern
import drumseed.seed


_LABEL_WIDTH = 12


def _velocity_char (velocity: int) -> str:

	"""Map a MIDI velocity (0-127) to a single ASCII character.

	Returns:
		``"."`` for no hit / ghost (0-40), ``"o"`` for soft (41-80), ``"O"``
		for medium (81-110), ``"X"`` for loud (111-127).
	"""

	if velocity <= 40:
		return "."
	if velocity <= 80:
		return "o"
	if velocity <= 110:
		return "O"
	return "X"


def render_grid (pattern: drumseed.pattern.MachinePattern) -> typing.List[str]:

	"""Render a machine pattern as a list of text lines, header first."""

	# velocity per instrument row, step by step
	rows: typing.Dict[int, typing.List[int]] = {
		instrument.pitch: [0] * drumseed.constants.STEPS_PER_PATTERN
		for instrument in drumseed.instruments.INSTRUMENTS
	}

	for step, notes in enumerate(pattern.steps()):
		for note in notes:
			rows[note.pitch][step] = note.velocity

	lines = [f"seed {drumseed.seed.format_seed(pattern.seed)}"]

	for instrument in drumseed.instruments.INSTRUMENTS:
		label = f"  {instrument.name[:_LABEL_WIDTH].ljust(_LABEL_WIDTH)}"
		cells = " ".join(_velocity_char(v) for v in rows[instrument.pitch])
		lines.append(f"{label}|{cells}|")

	return lines


def format_grid (pattern: drumseed.pattern.MachinePattern) -> str:

	"""
	Render a machine pattern as a single newline-joined string.
	"""

	return "\n".join(render_grid(pattern))
