"""Simple YAML configuration loader for voicemetrics."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "voicemetrics.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# (section, key) pairs resolved against the config file directory
RELATIVE_PATH_KEYS = (
    ("storage", "data_directory"),
    ("logging", "file_path"),
)

DEFAULTS: Dict[str, Any] = {
    "storage": {
        "data_directory": "data",
    },
    "logging": {
        "level": "INFO",
        "file_path": "data/logs/voicemetrics.log",
        "console_output": True,
    },
    "report": {
        "show_system_info": True,
    },
}


class VoiceMetricsConfig:
    """voicemetrics configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, looks for voicemetrics.yaml
                        in current directory and parent directories, falling back
                        to built-in defaults when none is found.
        """
        if config_path is None:
            found = find_config_file()
            if found is None:
                logger.info("No configuration file found, using defaults")
                self.config_file = None
                self.config = _merge(DEFAULTS, {})
                return
            config_path = str(found)

        self.config_file = Path(config_path)

        if not self.config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        logger.info(f"Loading configuration from: {self.config_file}")
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file: {e}") from e

        if not config:
            raise ConfigError("Configuration file is empty")
        if not isinstance(config, dict):
            raise ConfigError("Configuration file must contain a mapping at the top level")

        config = _merge(DEFAULTS, config)
        self._validate(config)

        # Resolve relative paths
        self._resolve_paths(config)

        logger.info("Configuration loaded successfully")
        return config

    def _validate(self, config: Dict[str, Any]) -> None:
        """Check section shapes and the log level so bad values fail at load time."""
        for section in DEFAULTS:
            if not isinstance(config[section], dict):
                raise ConfigError(f"'{section}' must be a mapping, got {config[section]!r}")

        level = config['logging']['level']
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid logging.level {level!r}, expected one of: {', '.join(LOG_LEVELS)}")
        config['logging']['level'] = level.upper()

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        for section, key in RELATIVE_PATH_KEYS:
            path = config[section].get(key)
            if path and not os.path.isabs(path):
                config[section][key] = str(config_dir / path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a value by dotted path, e.g. ``get('report.show_system_info')``.

        Returns default when any segment is missing or lands on a non-mapping.
        """
        node: Any = self.config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def set(self, key_path: str, value: Any) -> None:
        """Store a value by dotted path, creating intermediate sections."""
        *parents, leaf = key_path.split('.')
        section = self.config
        for key in parents:
            section = section.setdefault(key, {})
        section[leaf] = value
        logger.debug(f"Config override {key_path} = {value!r}")

    def get_data_directory(self) -> str:
        """Get data directory path."""
        data_dir = self.get('storage.data_directory', 'data')
        return str(Path(data_dir).absolute())


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Look for voicemetrics.yaml in start (default: cwd) and its parents."""
    directory = (start or Path.cwd()).absolute()
    for candidate_dir in [directory, *directory.parents]:
        candidate = candidate_dir / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = {}
    for key, value in base.items():
        merged[key] = _merge(value, {}) if isinstance(value, dict) else value
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


_config: Optional[VoiceMetricsConfig] = None


def get_config() -> VoiceMetricsConfig:
    """Get the shared configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = VoiceMetricsConfig()
    return _config


def reload_config(config_path: Optional[str] = None) -> VoiceMetricsConfig:
    """Load configuration from config_path and make it the shared instance."""
    global _config
    _config = VoiceMetricsConfig(config_path)
    return _config
