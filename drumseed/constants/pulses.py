"""Pulse-based MIDI timing constants.

The pulse grid uses **24 pulses per quarter note** (PPQN = 24), so one pattern
step (a sixteenth note) is 6 pulses and a 16-step bar is 96 pulses.
"""

# MIDI Standards - number of pulses in each

MIDI_SIXTEENTH_NOTE = 6
MIDI_QUARTER_NOTE = 24
