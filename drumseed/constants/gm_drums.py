"""General MIDI Level 1 note numbers for the four drum machine voices.

Standard MIDI percussion assignments for channel 10 (0-indexed channel 9),
supported by virtually all GM-compatible instruments, drum machines and DAWs.
Only the voices a machine pattern can play are listed.
"""

KICK_1 = 36
SNARE_1 = 38
HI_HAT_CLOSED = 42
HI_HAT_OPEN = 46
