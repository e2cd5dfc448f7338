import logging

import drumseed
import drumseed.display
import drumseed.midi_file
import drumseed.seed

logging.basicConfig(level=logging.INFO)

# Walk the kick through its first eight variations, keeping the rest of the Amen break.
# Slices 0-15 only touch the kick's off-beat eighths, so each bar stays close to the original.

for kick in range(8):

	seed = drumseed.seed.join_slices(kick, 0, 0, 0)
	pattern = drumseed.compose(seed)

	print(drumseed.display.format_grid(pattern))
	print()

	drumseed.midi_file.save_midi_file(pattern.to_pattern(bars=2), f"kick_variation_{kick}.mid")
