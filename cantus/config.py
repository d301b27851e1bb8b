import dataclasses
import logging
import os
import typing

import yaml

import cantus.errors
import cantus.validation


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "cantus.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass(frozen=True)
class Settings:

	"""
	Library-wide settings.

	max_loop_iterations: Upper bound on iterations of a single ``while_()`` /
		``do()`` loop. ``None`` means loops run until their condition fails.
	log_level: Level applied to the ``cantus`` logger, or ``None`` to leave
		it alone.
	"""

	max_loop_iterations: typing.Optional[int] = None
	log_level: typing.Optional[str] = None


_settings = Settings()


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load a configuration dictionary from a YAML file.

	A missing or empty file gives an empty dictionary.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def _section (config: dict, name: str) -> dict:

	"""Return a named section of a configuration, treating an empty section as no settings."""

	section = config.get(name) or {}

	if not isinstance(section, dict):
		raise cantus.errors.InvalidArgument(f"{name} must be a mapping; was {section!r}")

	return section


def settings_from_config (config: dict) -> Settings:

	"""
	Build ``Settings`` from a loaded configuration dictionary.

	Example config:
		```yaml
		control_flow:
		  max_loop_iterations: 10000
		logging:
		  level: DEBUG
		```
	"""

	if not isinstance(config, dict):
		raise cantus.errors.InvalidArgument(f"configuration must be a mapping; was {config!r}")

	max_loop_iterations = _section(config, 'control_flow').get('max_loop_iterations')
	log_level = _section(config, 'logging').get('level')

	if max_loop_iterations is not None and not cantus.validation.is_pos_int(max_loop_iterations):
		raise cantus.errors.InvalidArgument(f"control_flow.max_loop_iterations must be a positive integer; was {max_loop_iterations!r}")

	if log_level is not None:
		log_level = str(log_level).upper()

		if log_level not in LOG_LEVELS:
			raise cantus.errors.InvalidArgument(f"logging.level must be one of {', '.join(LOG_LEVELS)}; was {log_level!r}")

	return Settings(max_loop_iterations=max_loop_iterations, log_level=log_level)


def configure (settings: Settings) -> None:

	"""
	Install ``settings`` for the whole library.
	"""

	global _settings
	_settings = settings

	if settings.log_level is not None:
		logging.getLogger("cantus").setLevel(settings.log_level)


def configure_from_file (config_path: str = DEFAULT_CONFIG_PATH) -> Settings:

	"""Load, validate and install settings from a YAML file."""

	settings = settings_from_config(load_config(config_path))
	configure(settings)

	return settings


def get_settings () -> Settings:

	return _settings


def reset () -> None:

	"""Restore the default settings."""

	configure(Settings())
	logging.getLogger("cantus").setLevel(logging.NOTSET)
