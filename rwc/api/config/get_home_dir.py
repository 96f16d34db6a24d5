"""Get rwc home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RWC_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get rwc home directory path or path under it.

    Checks the RWC_HOME environment variable first, defaults to ~/.rwc if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to rwc home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.rwc")
        >>> get_home_dir("config.json")
        Path("/Users/user/.rwc/config.json")
    """
    rwc_home_env = os.environ.get("RWC_HOME")
    if rwc_home_env:
        rwc_home = Path(rwc_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            rwc_home = Path(home_env) / RWC_HOME_EXT
        else:
            rwc_home = Path.home() / RWC_HOME_EXT

    return rwc_home / Path(*parts) if parts else rwc_home
