"""
drumseed - every 64-bit integer is a drum pattern.

A seed packs four 16-bit slices, one each for kick, snare, closed hat and
open hat.  Each slice is decoded through its own bit mapping table into 16
steps, and the four tracks are combined into per-step General MIDI note
events ready for a sequencer.

The mappings put the lowest bits on the quarter notes, then the off-beat
eighths, then the remaining sixteenths, so nearby seeds are musically close
and the most common variations come first.  Seed 0 is the Amen break.

Minimal example:

    ```python
    import drumseed

    pattern = drumseed.compose(0)

    for step, notes in enumerate(pattern.steps()):
        print(step, [(note.pitch, note.velocity) for note in notes])
    ```

From the command line::

    python -m drumseed 0x0000000000000000 --output amen.mid --bars 4

Package-level exports: ``compose``, ``step_sequence``, ``MachinePattern``,
``Note``, ``parse_seed``.
"""

import drumseed.pattern
import drumseed.seed


compose = drumseed.pattern.compose
step_sequence = drumseed.pattern.step_sequence
MachinePattern = drumseed.pattern.MachinePattern
Note = drumseed.pattern.Note
parse_seed = drumseed.seed.parse_seed
