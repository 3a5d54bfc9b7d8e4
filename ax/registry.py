"""
Command registry: the visible scripts of a marker directory.

- commands(marker): script paths, immediate children only, sorted by filename.
- names(invocation): command names in registry order.
- describe(invocation): (name, info) pairs; every info probe runs in its own
  interpreter process and never aborts the listing.

Everything here fails soft: a missing or unreadable marker directory simply
has no commands.
"""
import subprocess

from .config import Config
from .logger import get_logger
from .scripts import load
from .utils import hidden, strip

logger = get_logger(__name__)


def commands(marker, /):
    """
    List the command scripts of a marker directory.

    Returns
    - list[Path]: regular files named "<name>.sh" whose name is not hidden,
      sorted lexicographically by filename. [] when marker is None, missing or
      unreadable.
    """
    if not marker:
        return []
    try:
        entries = list(marker.iterdir())
    except OSError as error:
        logger.debug("cannot list %s: %s", marker, error)
        return []
    return sorted(
        (entry for entry in entries if not hidden(entry.name) and strip(entry.name) and entry.is_file()),
        key=lambda entry: entry.name,
    )


def names(invocation, /):
    return [strip(path.name) for path in commands(invocation.marker)]


def describe(invocation, /):
    """
    Describe every command of the invocation's workspace.

    Each command is probed with its own context (the probed name as AX_COMMAND).
    Undefined, failing or unloadable info() yields the fallback description.
    """
    descriptions = []
    for path in commands(invocation.marker):
        context = invocation._replace(name=strip(path.name))
        try:
            info = load(path).info(context)
        except (OSError, subprocess.SubprocessError, ValueError) as error:
            logger.debug("info() of %s failed: %s", path, error)
            info = Config.FALLBACK
        descriptions.append((context.name, info))
    return descriptions


__all__ = (
    "commands",
    "names",
    "describe",
)
