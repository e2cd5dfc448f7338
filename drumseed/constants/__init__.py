"""Constants for drumseed.

This package contains:

- ``drumseed.constants.pulses`` - Pulse-based MIDI timing (24 PPQN)
- ``drumseed.constants.velocity`` - MIDI velocity constants
- ``drumseed.constants.gm_drums`` - General MIDI note numbers for the four machine voices

The pattern geometry is defined here because every layer shares it.
"""

# Pattern geometry

STEPS_PER_PATTERN = 16
SLICE_BITS = 16
SEED_BITS = 64

SLICE_MASK = (1 << SLICE_BITS) - 1
SEED_MASK = (1 << SEED_BITS) - 1

# General MIDI drums live on channel 10 (0-indexed channel 9)

MIDI_DRUM_CHANNEL = 9
