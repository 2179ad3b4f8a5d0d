"""
Path resolution for the semverkit data directory.

The data directory (~/.semverkit/) holds the config file.
Supports SEMVERKIT_HOME env var override for testing and custom installs.
"""

import os
from pathlib import Path


def get_data_dir() -> Path:
    """Return the semverkit data directory path.

    Checks SEMVERKIT_HOME env var first, then falls back to ~/.semverkit/.
    """
    env_dir = os.environ.get("SEMVERKIT_HOME")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".semverkit"


def get_config_path() -> Path:
    """Return the path to the config TOML file."""
    return get_data_dir() / "config.toml"
