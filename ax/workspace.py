"""
Workspace resolution.

A workspace is the directory subtree rooted where the marker directory (".ax")
is found. resolve() walks from a start directory up to the filesystem root and
stops at the first directory holding the marker; the walk is bounded by the
depth of the start path and is recomputed from the filesystem on every call.

The result is an Invocation: the three context values handed to a loaded
command (workspace root, marker path and resolved command name).
"""
import os
from pathlib import Path
from typing import NamedTuple

from .config import Config
from .logger import get_logger
from .utils import Unset, hidden

logger = get_logger(__name__)


class Invocation(NamedTuple):
    """
    Context of one ax run.

    - root and marker are both None when no workspace was found.
    - name is None unless a visible command script with that name exists.
    """
    root: Path | None = None
    marker: Path | None = None
    name: str | None = None

    @property
    def found(self):
        return self.root is not None

    @property
    def resolved(self):
        return self.name is not None

    @property
    def script(self):
        """Path of the resolved command's script, or None."""
        if not self.resolved:
            return None
        return self.marker / f"{self.name}{Config.EXTENSION}"

    def environ(self):
        """
        The context as environment values for a command script.

        Missing values are rendered as empty strings so scripts can test them
        with [ -n "$AX_ROOT" ].
        """
        return {
            Config.CONTEXT_ROOT: str(self.root or ""),
            Config.CONTEXT_MARKER: str(self.marker or ""),
            Config.CONTEXT_COMMAND: self.name or "",
        }


def _dispatchable(marker, name):
    # Names are looked up as plain filenames inside the marker; anything that
    # could reach outside of it (or into the hidden namespace) never matches.
    if not name or hidden(name) or os.sep in name or (os.altsep and os.altsep in name):
        return False
    return (marker / f"{name}{Config.EXTENSION}").is_file()


def resolve(start, name=Unset, /):
    """
    Find the workspace enclosing start and, optionally, a command inside it.

    Parameters
    - start: str | os.PathLike
      Directory to start from (inclusive). Relative paths are made absolute
      against the current directory; symlinks are not resolved.
    - name: str | Unset
      Command name to look up inside the marker directory. Unset or "" only
      resolves the workspace.

    Returns
    - Invocation(root, marker, name); Invocation() when no ancestor holds the marker.
    """
    directory = Path(os.path.abspath(start))

    while True:
        if (marker := directory / Config.MARKER).is_dir():
            command = name if name is not Unset and _dispatchable(marker, name) else None
            logger.debug("workspace found at %s (command: %r)", directory, command)
            return Invocation(directory, marker, command)
        if directory.parent == directory:
            logger.debug("no workspace above %s", start)
            return Invocation()
        directory = directory.parent


__all__ = (
    "Invocation",
    "resolve",
)
