"""Configuration of the workspace root under which repositories are cloned"""

import configparser
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

APP_NAME = "jago"

WORKSPACE_SUFFIX = "src"

logger = logging.getLogger(__name__)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/jago").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


class ConfigurationError(Exception):
    """Raised when the workspace root cannot be determined."""

    pass


@dataclass(frozen=True)
class Workspace:
    """The directory all clones are nested under, by host and path."""

    root: Path


def get_config_file():
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections and keys are not errors: lookups fall back to the
    default passed by the caller.

    Usage:
        config = ConfigAccessor()
        value = config.get('dirs', 'workspace', default='~/src')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = config_path

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            try:
                self.config.read(self.config_path)
            except configparser.Error as e:
                logger.warning(
                    f"Ignoring unreadable configuration {self.config_path}: {e}"
                )

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default


# Create a global config accessor instance
config = ConfigAccessor()


def get_workspace() -> Workspace:
    """
    Build the workspace root for this process.

    The `[dirs] workspace` option of the configuration file wins; otherwise the
    root is `$HOME/src`.

    Returns:
        The Workspace to clone into

    Raises:
        ConfigurationError: If no workspace is configured and HOME is not set
    """
    configured = config.get("dirs", "workspace")
    if configured:
        return Workspace(Path(configured).expanduser())

    home = os.environ.get("HOME")
    if not home:
        raise ConfigurationError(
            "HOME is not set; cannot determine the workspace root. "
            f"Set HOME or add a [dirs] workspace entry to {get_config_file()}"
        )

    return Workspace(Path(home) / WORKSPACE_SUFFIX)
