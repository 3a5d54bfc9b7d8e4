"""Configuration management for ax.

Fixed conventions (marker name, script extension, hidden prefix) live next to
the few knobs that can be changed from the environment. Access values directly
via Config.XXX.
"""

import os

_TRUTHY = ("1", "true", "yes", "on")


def _get(key: str, default: str = "") -> str:
    """Read an AX_* environment value, treating blank values as unset."""
    return os.environ.get(key, "").strip() or default


class Config:
    """Configuration for ax.

    Environment values are read once, at import time, like the rest of the
    per-process state. Tests patch the attributes directly.
    """

    # Workspace layout
    MARKER = ".ax"
    EXTENSION = ".sh"
    HIDDEN = "."
    TEMPLATE = ".template.sh"

    # Command contract
    FALLBACK = "A custom command."
    CONTEXT_ROOT = "AX_ROOT"
    CONTEXT_MARKER = "AX_MARKER"
    CONTEXT_COMMAND = "AX_COMMAND"

    # Interpreter used to load command scripts
    SHELL = _get("AX_SHELL", "bash")

    # Shell init file edited by --setup / --reset
    INIT_FILE = os.path.expanduser(_get("AX_INIT_FILE", "~/.bashrc"))

    # Source handed to pip by --update
    UPDATE_SOURCE = _get("AX_UPDATE_SOURCE", "ax-runner")

    # Logging is disabled unless a level is given
    LOG_LEVEL = _get("AX_LOG_LEVEL").upper() or None

    # Output
    COLOR = _get("AX_COLOR", "true").lower() in _TRUTHY
