"""YAML configuration for the command-line tool.

Example ``drumseed.yaml``::

	pattern:
	  seed: 0x0000000000000000

	midi:
	  channel: 9
	  bars: 4
	  filename: amen.mid

Every key is optional; command-line arguments take precedence.
"""

import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "drumseed.yaml"


class ConfigError (ValueError):
	pass


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> typing.Dict[str, typing.Any]:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	try:
		with open(config_path, 'r') as f:
			config = yaml.safe_load(f)
	except OSError as e:
		raise ConfigError(f"Could not read {config_path}: {e}") from e
	except yaml.YAMLError as e:
		raise ConfigError(f"Could not parse {config_path}: {e}") from e

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise ConfigError(f"Config file {config_path} must contain a mapping at the top level")

	logger.debug(f"Loaded config from {config_path}")

	return config


def get_section (config: typing.Dict[str, typing.Any], name: str) -> typing.Dict[str, typing.Any]:

	"""Return a top-level section, treating a missing or empty one as ``{}``."""

	section = config.get(name) or {}

	if not isinstance(section, dict):
		raise ConfigError(f"Config section '{name}' must be a mapping")

	return section


def get_int (section: typing.Dict[str, typing.Any], key: str, default: int) -> int:

	"""Return an integer setting, using ``default`` when the key is missing or empty.

	Raises:
		ConfigError: If the value is present but is not an integer.
	"""

	value = section.get(key)

	if value is None:
		return default

	if isinstance(value, bool) or not isinstance(value, int):
		raise ConfigError(f"Config value '{key}' must be an integer, got {value!r}")

	return value
