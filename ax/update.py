"""
Self-update (ax --update).

The installed tool is replaced in place by reinstalling its distribution with
the running interpreter's pip. The executable must be resolvable on PATH;
otherwise there is nothing to update.
"""
import shutil
import subprocess
import sys

from .config import Config
from .faults import MissingPrerequisiteError
from .logger import get_logger

logger = get_logger(__name__)


def update(source=None, /):
    """
    Upgrade ax from source (Config.UPDATE_SOURCE by default).

    Returns
    - int: pip's exit status.

    Raises
    - MissingPrerequisiteError: 'ax' is not found on PATH.
    """
    if (executable := shutil.which("ax")) is None:
        raise MissingPrerequisiteError("'ax' not found on PATH", hint="install ax with pip first")
    source = source or Config.UPDATE_SOURCE
    logger.debug("updating %s from %s", executable, source)
    return subprocess.run([sys.executable, "-m", "pip", "install", "--upgrade", source]).returncode


__all__ = (
    "update",
)
