import argparse
import logging
import sys
import typing

import drumseed.config
import drumseed.constants
import drumseed.display
import drumseed.midi_file
import drumseed.pattern
import drumseed.seed


logger = logging.getLogger(__name__)


def _build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="drumseed", description="Decode a 64-bit seed into a four-voice drum pattern")
	parser.add_argument("seed", nargs="?", help="Seed as decimal, 0x hex or 0b binary (default: config, else 0)")
	parser.add_argument("--config", default=drumseed.config.DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {drumseed.config.DEFAULT_CONFIG_PATH})")
	parser.add_argument("--output", "-o", help="Write the pattern to this MIDI file")
	parser.add_argument("--channel", type=int, help=f"MIDI channel 0-15 (default: {drumseed.constants.MIDI_DRUM_CHANNEL})")
	parser.add_argument("--bars", type=int, help="Number of bars to write (default: 1)")
	parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point: print the pattern grid and optionally write a MIDI file.
	"""

	args = _build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	try:
		config = drumseed.config.load_config(args.config)
		pattern_config = drumseed.config.get_section(config, "pattern")
		midi_config = drumseed.config.get_section(config, "midi")

		seed_text = args.seed if args.seed is not None else pattern_config.get("seed", 0)
		seed = drumseed.seed.parse_seed(seed_text)

		channel = args.channel if args.channel is not None else drumseed.config.get_int(midi_config, "channel", drumseed.constants.MIDI_DRUM_CHANNEL)
		bars = args.bars if args.bars is not None else drumseed.config.get_int(midi_config, "bars", 1)

	except ValueError as e:
		logger.error(str(e))
		return 1

	pattern = drumseed.pattern.compose(seed)
	logger.debug(f"Decoded seed {drumseed.seed.format_seed(seed)} into slices {drumseed.seed.split_seed(seed)}")

	print(drumseed.display.format_grid(pattern))

	filename = args.output if args.output is not None else midi_config.get("filename")

	if filename:

		try:
			drumseed.midi_file.save_midi_file(pattern.to_pattern(channel=channel, bars=bars), str(filename))
		except (ValueError, OSError) as e:
			logger.error(f"Failed to write MIDI file: {e}")
			return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
