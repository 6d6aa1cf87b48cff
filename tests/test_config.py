"""Tests for configuration functionality."""

from datetime import datetime
from pathlib import Path

import pytest

from conventional_check.config import DEFAULT_CONFIG_FILENAME, Config

pytestmark = pytest.mark.usefixtures("clean_environment")


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.color is True
    assert config.always_log is False
    assert config.log_file is None
    assert config.log_directory is None


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config.color is True  # Should use defaults


def test_config_load_and_save(tmp_path):
    """Test saving and loading configuration."""
    config = Config(
        color=False,
        always_log=True,
        log_file="custom.log",
        log_directory="logs",
    )

    config.save(tmp_path)

    loaded_config = Config.load(tmp_path)

    assert loaded_config.color is False
    assert loaded_config.always_log is True
    assert loaded_config.log_file == "custom.log"
    assert loaded_config.log_directory == "logs"


def test_config_file_uses_section(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('[conventional-check]\ncolor = false\n')

    assert Config.load(tmp_path).color is False


def test_config_load_invalid(tmp_path):
    """Test loading invalid configuration file."""
    config_path = tmp_path / DEFAULT_CONFIG_FILENAME

    config_path.write_text("invalid [ toml")

    config = Config.load(tmp_path)
    assert config.color is True


def test_config_load_unsafe_log_file(tmp_path, capsys):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('[conventional-check]\nlog_file = "../outside.log"\n')

    config = Config.load(tmp_path)

    assert config.log_file is None
    assert "Unsafe log_file path" in capsys.readouterr().out


def test_save_skips_unsafe_path(tmp_path):
    Config(log_file="/etc/passwd").save(tmp_path)

    assert "log_file" not in (tmp_path / DEFAULT_CONFIG_FILENAME).read_text()


def test_get_log_file_disabled():
    """Test get_log_file when logging is disabled."""
    config = Config(always_log=False, log_file=None)
    assert config.get_log_file() is None


def test_get_log_file_custom():
    """Test get_log_file with custom log file."""
    config = Config(always_log=False, log_file="custom.log")
    assert config.get_log_file() == Path("custom.log")


def test_get_log_file_unsafe_custom():
    config = Config(log_file="../custom.log")
    assert config.get_log_file() is None


def test_get_log_file_always():
    """Test get_log_file with always_log enabled."""
    config = Config(always_log=True)
    log_file = config.get_log_file()

    assert log_file is not None
    assert log_file.parent == Path(".")
    assert log_file.name.startswith("ccheck_log-")
    assert log_file.suffix == ".log"

    # Verify timestamp format
    timestamp_str = log_file.stem.split("-", 1)[1]
    try:
        datetime.strptime(timestamp_str, "%Y-%m-%d_%H-%M-%S")
    except ValueError:
        pytest.fail("Invalid timestamp format in log filename")


def test_get_log_file_with_directory():
    """Test get_log_file with log_directory specified."""
    config = Config(always_log=True, log_directory="logs")
    log_file = config.get_log_file()

    assert log_file is not None
    assert log_file.parent == Path("logs")
    assert log_file.name.startswith("ccheck_log-")


def test_get_log_file_unsafe_directory():
    """Test get_log_file with unsafe log_directory path."""
    config = Config(always_log=True, log_directory="../etc")
    log_file = config.get_log_file()

    # Should fall back to the current directory due to unsafe path
    assert log_file is not None
    assert log_file.parent == Path(".")


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("CONVENTIONAL_CHECK_COLOR", "off")
    monkeypatch.setenv("CONVENTIONAL_CHECK_ALWAYS_LOG", "yes")
    monkeypatch.setenv("CONVENTIONAL_CHECK_LOG_DIRECTORY", "env_logs")

    config = Config()

    assert config.color is False
    assert config.always_log is True
    assert config.get_log_file().parent == Path("env_logs")


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("CONVENTIONAL_CHECK_COLOR", "false")

    assert Config(color=True).color is True
