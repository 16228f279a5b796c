# linelag/utils/config.py - Configuration management
"""
Configuration management for the highlighter.
Loads defaults from YAML files and validates them into Settings.
"""

import copy
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from linelag.utils.errors import ConfigurationError
from linelag.utils.helpers import parse_duration, validate_unit


class Config:
    """
    Configuration manager for the highlighter.

    Loads configuration from YAML files and provides access to settings.
    """

    DEFAULT_CONFIG = {
        'highlight': {
            'debug': False,
            'no_echo': False,
            'min_latency': '1ms',
            'latency_unit': 'ms',
            'color': True,
        },
        'logging': {
            'level': 'WARNING',
            'file': None,
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML configuration file
        """
        self.logger = logging.getLogger(__name__)
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str):
        """
        Load configuration from YAML file.

        Args:
            config_file: Path to YAML file

        Raises:
            ConfigurationError: If the file cannot be parsed
        """
        config_path = Path(config_file)

        if not config_path.exists():
            self.logger.warning(f"Config file not found: {config_file}, using defaults")
            return

        try:
            with open(config_path, 'r') as f:
                loaded_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to load config: {e}")
            raise ConfigurationError(f"Failed to load config {config_file}: {e}") from e

        if loaded_config is None:
            return
        if not isinstance(loaded_config, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a mapping")

        # Merge with defaults
        self._merge_config(self.config, loaded_config)
        self.logger.info(f"Loaded configuration from {config_file}")

    def _merge_config(self, base: Dict, override: Dict):
        """
        Recursively merge configuration dictionaries.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary
        """
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g., 'highlight.latency_unit')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g., 'highlight.latency_unit')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value


def _get_flag(config: Config, name: str, default: bool) -> bool:
    value = config.get(f'highlight.{name}', default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"Invalid {name} {value!r}; expected true or false")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Validated options for a single highlighting run.
    """
    debug: bool = False
    no_echo: bool = False
    min_latency_ns: int = 1_000_000
    latency_unit: str = 'ms'
    use_colors: bool = True

    @property
    def echo(self) -> bool:
        """Whether raw lines are echoed as they arrive"""
        return not self.no_echo

    @classmethod
    def from_config(cls, config: Config) -> 'Settings':
        """
        Build settings from the 'highlight' section of a Config.

        Raises:
            ConfigurationError: If the unit or duration is invalid
        """
        min_latency = config.get('highlight.min_latency', '1ms')
        if isinstance(min_latency, bool) or not isinstance(min_latency, (str, int)):
            raise ConfigurationError(f"Invalid min_latency {min_latency!r}")
        if isinstance(min_latency, int):
            # Bare integers in YAML are taken as nanoseconds
            min_latency = f"{min_latency}ns"

        unit = config.get('highlight.latency_unit', 'ms')
        if not isinstance(unit, str):
            raise ConfigurationError(f"Invalid latency_unit {unit!r}")

        return cls(
            debug=_get_flag(config, 'debug', False),
            no_echo=_get_flag(config, 'no_echo', False),
            min_latency_ns=parse_duration(min_latency),
            latency_unit=validate_unit(unit),
            use_colors=_get_flag(config, 'color', True),
        )
