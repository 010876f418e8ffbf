import os
import copy
import logging
from typing import Any, Dict, Optional

import yaml

from .errors import DicepassError

CONFIG_ENV_VAR = "DICEPASS_CONFIG"
DEFAULT_CONFIG_FILE = "dicepass.yaml"
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_CONFIG: Dict[str, Any] = {
    "passphrase": {
        "word_count": 6,
        "count": 5,
        "separator": " ",
        "wordlist": None,
    },
    "logging": {
        "level": "WARNING",
    },
}


class ConfigError(DicepassError):
    """The configuration file could not be read or has the wrong shape."""


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Load a YAML config file on top of DEFAULT_CONFIG.

    With no explicit path, $DICEPASS_CONFIG is tried, then dicepass.yaml in
    the working directory; a missing default file just yields the defaults.
    """
    explicit = config_file is not None or CONFIG_ENV_VAR in os.environ
    config_file = config_file or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

    config = copy.deepcopy(DEFAULT_CONFIG)
    if not os.path.exists(config_file):
        if explicit:
            raise ConfigError(f"Config file not found: {config_file}")
        return config

    try:
        with open(config_file, 'r') as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_file}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping at the top level")

    for section, values in loaded.items():
        if section not in config:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Section '{section}' in {config_file} must be a mapping")
        config[section].update({k: v for k, v in values.items() if k in config[section]})

    validate_config(config, config_file)
    return config


def validate_config(config: Dict[str, Any], config_file: str) -> None:
    """Check value types so bad settings fail here rather than mid-generation."""
    settings = config['passphrase']
    for key in ('word_count', 'count'):
        value = settings[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"passphrase.{key} in {config_file} must be an integer, got: {value!r}")
    if not isinstance(settings['separator'], str):
        raise ConfigError(
            f"passphrase.separator in {config_file} must be a string, got: {settings['separator']!r}"
        )
    if settings['wordlist'] is not None and not isinstance(settings['wordlist'], str):
        raise ConfigError(
            f"passphrase.wordlist in {config_file} must be a path or null, got: {settings['wordlist']!r}"
        )

    level = config['logging']['level']
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(
            f"logging.level in {config_file} must be one of {', '.join(LOG_LEVELS)}, got: {level!r}"
        )
    config['logging']['level'] = level.upper()


def setup_logging(log_level):
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
