"""Path management for advancepurge.

This module provides the share directory roots that hold the purged
data and the location of the configuration file.

Defaults:
- System root: /usr/share/
- Local root: /usr/local/share/
- Config file: /etc/advancepurge.conf (or $ADVANCEPURGE_CONFIG)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "advancepurge"

SYSTEM_SHARE_DIR = Path("/usr/share")
LOCAL_SHARE_DIR = Path("/usr/local/share")

DEFAULT_CONFIG_PATH = Path("/etc/advancepurge.conf")

# Environment variable overriding the config file location
CONFIG_ENV_VAR = "ADVANCEPURGE_CONFIG"


def get_share_root(local: bool = False) -> Path:
    """Get the share directory root to purge.

    Args:
        local: If True, select the /usr/local hierarchy.

    Returns:
        Path to /usr/local/share when local is set, /usr/share otherwise.
    """
    return LOCAL_SHARE_DIR if local else SYSTEM_SHARE_DIR


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path from $ADVANCEPURGE_CONFIG if set, /etc/advancepurge.conf otherwise.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH


def get_user_config_dir() -> Path:
    """Get the per-user configuration directory.

    Only used for cosmetic settings such as the console theme.

    Returns:
        Path to ~/.config/advancepurge/ (or XDG_CONFIG_HOME/advancepurge/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME
