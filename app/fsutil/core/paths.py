"""XDG-compliant path management for fsutil.

XDG defaults:
- Config: ~/.config/fsutil/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fsutil"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    An empty XDG_CONFIG_HOME is treated as unset.

    Returns:
        Path to $XDG_CONFIG_HOME/fsutil/, or ~/.config/fsutil/.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_tree_format_path() -> Path:
    """Get the tree format configuration file path.

    Returns:
        Path to ~/.config/fsutil/tree.toml.
    """
    return get_config_dir() / "tree.toml"
