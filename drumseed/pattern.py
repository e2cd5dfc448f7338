import dataclasses
import typing

import drumseed.bit_mapping
import drumseed.constants
import drumseed.constants.pulses
import drumseed.constants.velocity
import drumseed.instruments


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A drum hit: the instrument's note number and how hard it is struck.
	"""

	pitch: int
	velocity: int


@dataclasses.dataclass
class TimedNote:

	"""
	A MIDI note ready for scheduling, with length in pulses and a channel.
	"""

	pitch: int
	velocity: int
	duration: int
	channel: int


@dataclasses.dataclass
class Step:

	"""
	Represents a collection of notes at a single point in time.
	"""

	notes: typing.List[TimedNote] = dataclasses.field(default_factory=list)


class Pattern:

	"""
	Pulse-timed notes for a scheduler or file writer, keyed by pulse position.
	"""

	def __init__ (self, channel: int, length: float = 4) -> None:

		"""
		Initialize a new pattern with MIDI channel and length in beats.
		"""

		if not 0 <= channel <= 15:
			raise ValueError(f"MIDI channel must be in 0-15, got {channel}")

		if length <= 0:
			raise ValueError("Pattern length must be positive")

		self.channel = channel
		self.length = length

		self.steps: typing.Dict[int, Step] = {}


	def add_note (self, position: int, pitch: int, velocity: int, duration: int) -> None:

		"""
		Add a note to the pattern at a specific pulse position.
		"""

		if position not in self.steps:
			self.steps[position] = Step()

		note = TimedNote(
			pitch = pitch,
			velocity = velocity,
			duration = duration,
			channel = self.channel
		)

		self.steps[position].notes.append(note)


	def add_sequence (self, sequence: typing.Sequence[bool], step_duration: int, pitch: int, velocity: int = drumseed.constants.velocity.DEFAULT_VELOCITY, note_duration: int = drumseed.constants.pulses.MIDI_SIXTEENTH_NOTE, offset: int = 0) -> None:

		"""
		Add a note for every hit in a step sequence, starting at ``offset`` pulses.
		"""

		if step_duration <= 0:
			raise ValueError("Step duration must be positive")

		if note_duration <= 0:
			raise ValueError("Note duration must be positive")

		for i, hit in enumerate(sequence):

			if hit:

				self.add_note(
					position = offset + i * step_duration,
					pitch = pitch,
					velocity = velocity,
					duration = note_duration
				)


	@property
	def length_pulses (self) -> int:

		"""Pattern length in pulses."""

		return int(self.length * drumseed.constants.pulses.MIDI_QUARTER_NOTE)


@dataclasses.dataclass(frozen=True)
class MachinePattern:

	"""The four instrument patterns decoded from one seed.

	Built once by ``compose()`` (or ``MachinePattern.from_seed()``) and never
	changed afterwards, so a single instance can be shared by any number of
	readers.  Two patterns made from the same seed compare equal.

	Attributes:
		seed: The 64-bit seed the pattern was decoded from.
		tracks: One tuple of 16 hit flags per instrument, in the order of
			``drumseed.instruments.INSTRUMENTS``.

	Example:
		```python
		pattern = drumseed.pattern.compose(0)

		for step, notes in enumerate(pattern.steps()):
			print(step, [note.pitch for note in notes])
		```
	"""

	seed: int
	tracks: typing.Tuple[drumseed.bit_mapping.InstrumentPattern, ...]


	@classmethod
	def from_seed (cls, seed: int) -> "MachinePattern":

		"""Decode every instrument slice of a seed.

		Any integer is accepted; bits above 64 are ignored.
		"""

		seed &= drumseed.constants.SEED_MASK

		tracks = tuple(
			drumseed.bit_mapping.decode((seed >> instrument.shift) & drumseed.constants.SLICE_MASK, instrument.mapping)
			for instrument in drumseed.instruments.INSTRUMENTS
		)

		return cls(seed=seed, tracks=tracks)


	def track (self, instrument: drumseed.instruments.Instrument) -> drumseed.bit_mapping.InstrumentPattern:

		"""
		Return the hit flags for one instrument.
		"""

		return self.tracks[drumseed.instruments.INSTRUMENTS.index(instrument)]


	def steps (self) -> typing.Iterator[typing.Tuple[Note, ...]]:

		"""Yield the notes to play at each of the 16 steps.

		Each element holds one ``Note`` per instrument that hits on that step,
		kick first.  A step with no hits yields an empty tuple, so there are
		always exactly 16 elements.  Every call starts a new pass from step 0.
		"""

		velocity = drumseed.constants.velocity.DEFAULT_VELOCITY

		for hits in zip(*self.tracks):

			yield tuple(
				Note(pitch=instrument.pitch, velocity=velocity)
				for instrument, hit in zip(drumseed.instruments.INSTRUMENTS, hits)
				if hit
			)


	def __iter__ (self) -> typing.Iterator[typing.Tuple[Note, ...]]:

		return self.steps()


	def to_pattern (self, channel: int = drumseed.constants.MIDI_DRUM_CHANNEL, bars: int = 1, note_duration: int = drumseed.constants.pulses.MIDI_SIXTEENTH_NOTE) -> Pattern:

		"""Lay the steps out on the pulse grid, one sixteenth note per step.

		Parameters:
			channel: MIDI channel (0-15), GM drums by default.
			bars: How many times to repeat the 16 steps.
			note_duration: Note length in pulses.
		"""

		if bars <= 0:
			raise ValueError("Bars must be positive")

		step_duration = drumseed.constants.pulses.MIDI_SIXTEENTH_NOTE
		bar_pulses = step_duration * drumseed.constants.STEPS_PER_PATTERN

		pattern = Pattern(channel=channel, length=bars * bar_pulses / drumseed.constants.pulses.MIDI_QUARTER_NOTE)

		for bar in range(bars):

			for instrument, hits in zip(drumseed.instruments.INSTRUMENTS, self.tracks):

				pattern.add_sequence(
					sequence = hits,
					step_duration = step_duration,
					pitch = instrument.pitch,
					note_duration = note_duration,
					offset = bar * bar_pulses
				)

		return pattern


def compose (seed: int) -> MachinePattern:

	"""
	Build the machine pattern for a 64-bit seed.
	"""

	return MachinePattern.from_seed(seed)


def step_sequence (pattern: MachinePattern) -> typing.Iterator[typing.Tuple[Note, ...]]:

	"""
	Return a fresh iterator over the 16 per-step note tuples of a pattern.
	"""

	return pattern.steps()
