"""Unit tests for VoiceMetricsConfig."""

import pytest
import os
from pathlib import Path
from unittest.mock import patch

from voicemetrics import config as config_module
from voicemetrics.config import VoiceMetricsConfig, find_config_file, get_config, reload_config
from voicemetrics.exceptions import ConfigError


def write_config(directory, text: str) -> Path:
    path = Path(directory) / "voicemetrics.yaml"
    path.write_text(text)
    return path


@pytest.fixture(autouse=True)
def reset_shared_config():
    """Keep the module-level config from leaking between tests."""
    with patch.object(config_module, "_config", None):
        yield


@pytest.mark.unit
class TestVoiceMetricsConfig:
    """Test cases for VoiceMetricsConfig class."""

    def test_load_and_resolve_paths(self, temp_data_dir):
        path = write_config(temp_data_dir, (
            "storage:\n"
            "  data_directory: exports\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  file_path: logs/app.log\n"
        ))

        config = VoiceMetricsConfig(str(path))

        assert config.config_file == path
        assert config.get('logging.level') == "DEBUG"
        assert config.get('storage.data_directory') == str(Path(temp_data_dir) / "exports")
        assert config.get('logging.file_path') == str(Path(temp_data_dir) / "logs/app.log")

    def test_absolute_paths_untouched(self, temp_data_dir):
        data_dir = os.path.abspath(temp_data_dir)
        path = write_config(temp_data_dir, f"storage:\n  data_directory: {data_dir}\n")

        config = VoiceMetricsConfig(str(path))

        assert config.get('storage.data_directory') == data_dir

    def test_defaults_fill_missing_keys(self, temp_data_dir):
        path = write_config(temp_data_dir, "report:\n  show_system_info: false\n")

        config = VoiceMetricsConfig(str(path))

        assert config.get('report.show_system_info') is False
        assert config.get('logging.level') == "INFO"
        assert config.get('logging.console_output') is True

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            VoiceMetricsConfig(str(Path(temp_data_dir) / "nope.yaml"))

    def test_empty_file(self, temp_data_dir):
        path = write_config(temp_data_dir, "")

        with pytest.raises(ConfigError, match="empty"):
            VoiceMetricsConfig(str(path))

    def test_invalid_yaml(self, temp_data_dir):
        path = write_config(temp_data_dir, "storage: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            VoiceMetricsConfig(str(path))

    def test_non_mapping(self, temp_data_dir):
        path = write_config(temp_data_dir, "- just\n- a list\n")

        with pytest.raises(ConfigError):
            VoiceMetricsConfig(str(path))

    def test_config_error_is_value_error(self, temp_data_dir):
        path = write_config(temp_data_dir, "")

        with pytest.raises(ValueError):
            VoiceMetricsConfig(str(path))

    def test_invalid_log_level(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: verbose\n")

        with pytest.raises(ConfigError, match="logging.level"):
            VoiceMetricsConfig(str(path))

    def test_log_level_normalized(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: debug\n")

        config = VoiceMetricsConfig(str(path))

        assert config.get('logging.level') == "DEBUG"

    def test_section_must_be_mapping(self, temp_data_dir):
        path = write_config(temp_data_dir, "storage: exports\n")

        with pytest.raises(ConfigError, match="storage"):
            VoiceMetricsConfig(str(path))

    def test_get_default(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: INFO\n")
        config = VoiceMetricsConfig(str(path))

        assert config.get('missing.key', 'fallback') == 'fallback'
        assert config.get('logging.level.deeper', 'fallback') == 'fallback'

    def test_set(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: INFO\n")
        config = VoiceMetricsConfig(str(path))

        config.set('logging.level', 'ERROR')
        config.set('new.nested.key', 3)

        assert config.get('logging.level') == 'ERROR'
        assert config.get('new.nested.key') == 3

    def test_defaults_without_file(self, temp_data_dir):
        with patch.object(config_module, "find_config_file", return_value=None):
            config = VoiceMetricsConfig()

        assert config.config_file is None
        assert config.get('storage.data_directory') == "data"
        assert config.get_data_directory() == str(Path("data").absolute())

    def test_defaults_are_not_shared(self):
        with patch.object(config_module, "find_config_file", return_value=None):
            first = VoiceMetricsConfig()
            second = VoiceMetricsConfig()

        first.set('logging.level', 'ERROR')

        assert second.get('logging.level') == 'INFO'
        assert config_module.DEFAULTS['logging']['level'] == 'INFO'


@pytest.mark.unit
class TestConfigDiscovery:
    """Test cases for config file lookup and the shared instance."""

    def test_find_in_parent(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: INFO\n")
        nested = Path(temp_data_dir) / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == path.absolute()

    def test_find_none(self, temp_data_dir):
        with patch.object(Path, "is_file", return_value=False):
            assert find_config_file(Path(temp_data_dir)) is None

    def test_get_config_is_cached(self):
        with patch.object(config_module, "find_config_file", return_value=None):
            assert get_config() is get_config()

    def test_reload_config_replaces_shared(self, temp_data_dir):
        path = write_config(temp_data_dir, "logging:\n  level: WARNING\n")

        config = reload_config(str(path))

        assert get_config() is config
        assert get_config().get('logging.level') == "WARNING"
