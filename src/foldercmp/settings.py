import logging
import os
import tomllib
from pathlib import Path

# Environment variable naming the settings file
CONFIG_ENVIRONMENT_VARIABLE = 'FOLDERCMP_CONFIG'

# Settings key constants
SETTING_COLWIDTH = 'colwidth'
SETTING_EXTENSION = 'extension'
SETTING_DIFFONLY = 'diffonly'
SETTING_HASH_ALGORITHM = 'hash_algorithm'
SETTING_LOGGING_PATH = 'logging.path'
SETTING_LOGGING_LEVEL = 'logging.level'


class SettingsError(Exception):
    """The settings file exists but cannot be used."""


class Settings:
    """Read-only access to the foldercmp settings file.

    The settings file is TOML. It supplies defaults for the command-line
    options; anything given on the command line wins. Example:

        colwidth = 30
        extension = "jpg"
        diffonly = true
        hash_algorithm = "sha256"

        [logging]
        path = "/var/log/foldercmp.log"
        level = "DEBUG"
    """

    def __init__(self, path: Path | None = None):
        """Load settings from ``path``, or use empty settings if it is None.

        Raises:
            SettingsError: The file cannot be read or is not valid TOML
        """
        self._settings = {}

        if path is not None:
            try:
                with open(path, 'rb') as f:
                    self._settings = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise SettingsError(f"Cannot load settings from {path}: {e}") from e

    @classmethod
    def locate(cls, path: str | os.PathLike | None = None) -> 'Settings':
        """Load the settings file given explicitly, or named by FOLDERCMP_CONFIG."""
        if path is None:
            path = os.environ.get(CONFIG_ENVIRONMENT_VARIABLE) or None
        return cls(Path(path) if path is not None else None)

    def get(self, key: str, default=None):
        """Get a setting value by key with optional default.

        Dotted keys reach into tables: 'logging.path' reads
        settings['logging']['path']. The default is returned when any part of
        the key path is missing.
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def configure_logging(self, log_file: str | None = None, log_level: str | None = None,
                          verbose: bool = False) -> bool:
        """Configure the logging module from arguments, falling back to the settings.

        Returns:
            True if a log destination was configured, False otherwise
        """
        if log_file is None:
            log_file = self.get(SETTING_LOGGING_PATH)
        if log_level is None:
            log_level = self.get(SETTING_LOGGING_LEVEL, 'INFO')

        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            raise SettingsError(f"Unknown logging level: {log_level}")

        if log_file:
            logging.basicConfig(
                filename=str(log_file),
                level=level,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            return True

        if verbose:
            # Issues already reach stderr as "Error:" lines
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
            handler.addFilter(lambda record: record.levelno < logging.WARNING)
            logging.basicConfig(level=level, handlers=[handler])
            return True

        return False
