"""
Path utilities for modalgraph.

config.json lives in the project root (the parent of the package directory),
or next to the executable when frozen.
"""

import sys
from pathlib import Path


def get_app_dir() -> Path:
    """Get the directory holding external files such as config.json."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_app_dir() / "config.json"
