"""Configuration management for conventional-check."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".conventionalcheck.toml"
CONFIG_SECTION = "conventional-check"

_PATH_FIELDS = ['log_file', 'log_directory']
_BOOL_FIELDS = ['color', 'always_log']


def _is_safe_path(path: str) -> bool:
    """Check if a path is safe (no path traversal)."""
    if not path:
        return False

    if '..' in path or path.startswith('/') or '\\' in path:
        return False

    if os.path.isabs(path):
        return False

    return True


def _sanitize_string(value: str) -> str:
    """Strip control characters from a configured string."""
    if not value:
        return value

    value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

    return value.strip()


class Config(BaseModel):
    """Configuration settings for conventional-check.

    Values can be set in the config file, via environment variables or
    by command line arguments, with later sources overriding earlier ones.
    """

    color: bool = Field(
        default=True,
        description="Whether to style output with colors"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatically generated log files"
    )

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory containing the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            config_section = dict(config_data.get(CONFIG_SECTION, {}))
            for key in _PATH_FIELDS:
                value = config_section.get(key)
                if isinstance(value, str):
                    value = _sanitize_string(value)
                    if not _is_safe_path(value):
                        print(f"Warning: Unsafe {key} path '{value}', using default")
                        value = None
                    config_section[key] = value

            return cls(**config_section)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file into
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        try:
            # TOML has no null, so unset values are left out
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            for key in _PATH_FIELDS:
                if key in config_dict and not _is_safe_path(config_dict[key]):
                    print(f"Warning: Unsafe {key} path '{config_dict[key]}', not saving")
                    del config_dict[key]

            with config_path.open('wb') as f:
                tomli_w.dump({CONFIG_SECTION: config_dict}, f)
        except OSError as e:
            print(f"Error saving config file: {e}")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        log_directory (or the current directory). Otherwise, returns the
        configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = Path(".")
            if self.log_directory:
                if _is_safe_path(self.log_directory):
                    directory = Path(self.log_directory)
                else:
                    print(f"Warning: Unsafe log directory '{self.log_directory}', using current directory")
            return directory / f"ccheck_log-{timestamp}.log"
        elif self.log_file:
            if _is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                print(f"Warning: Unsafe log file path '{self.log_file}', using default")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        env_mapping = {
            'CONVENTIONAL_CHECK_COLOR': 'color',
            'CONVENTIONAL_CHECK_ALWAYS_LOG': 'always_log',
            'CONVENTIONAL_CHECK_LOG_FILE': 'log_file',
            'CONVENTIONAL_CHECK_LOG_DIRECTORY': 'log_directory',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = _sanitize_string(os.environ[env_var])

                if field_name in _BOOL_FIELDS:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit arguments win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
