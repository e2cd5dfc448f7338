"""Write a pulse-timed pattern to a Standard MIDI File.

The file carries notes only.  No tempo meta message is written, so players
fall back to the MIDI default of 120 BPM.
"""

import logging
import typing

import mido

import drumseed.constants.pulses
import drumseed.pattern


logger = logging.getLogger(__name__)

# The pulse grid is 24 PPQN; scale up by 20 for the common 480 PPQN resolution.
TICKS_PER_PULSE = 20
TICKS_PER_BEAT = drumseed.constants.pulses.MIDI_QUARTER_NOTE * TICKS_PER_PULSE


def _note_messages (pattern: drumseed.pattern.Pattern) -> typing.List[typing.Tuple[int, int, mido.Message]]:

	"""Collect note on/off messages as ``(pulse, order, message)`` tuples.

	``order`` puts note-offs ahead of note-ons at the same pulse, so a note that
	ends where the next one starts never cuts the new note short.
	"""

	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for pulse in sorted(pattern.steps):

		for note in pattern.steps[pulse].notes:

			events.append((pulse, 1, mido.Message('note_on', channel=note.channel, note=note.pitch, velocity=note.velocity)))
			events.append((pulse + note.duration, 0, mido.Message('note_off', channel=note.channel, note=note.pitch, velocity=0)))

	events.sort(key=lambda x: (x[0], x[1]))

	return events


def build_midi_file (pattern: drumseed.pattern.Pattern) -> mido.MidiFile:

	"""Convert a pattern to a single-track type 1 MIDI file.

	The track ends at the later of the pattern length and the last note-off.
	"""

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT

	track = mido.MidiTrack()
	mid.tracks.append(track)

	last_pulse = 0

	for pulse, _, message in _note_messages(pattern):
		message.time = (pulse - last_pulse) * TICKS_PER_PULSE
		track.append(message)
		last_pulse = pulse

	end_pulse = max(pattern.length_pulses, last_pulse)
	track.append(mido.MetaMessage('end_of_track', time=(end_pulse - last_pulse) * TICKS_PER_PULSE))

	return mid


def save_midi_file (pattern: drumseed.pattern.Pattern, filename: str) -> mido.MidiFile:

	"""
	Build the MIDI file for a pattern and write it to ``filename``.
	"""

	mid = build_midi_file(pattern)

	logger.info(f"Saving MIDI file ({len(mid.tracks[0])} messages) to {filename}...")

	mid.save(filename)

	logger.info(f"Saved {filename}")

	return mid
