"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). Every hit a machine pattern
produces uses ``DEFAULT_VELOCITY``.
"""

DEFAULT_VELOCITY = 100
