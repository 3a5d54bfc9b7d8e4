"""
Workspace scaffolding (ax --init).

init() creates the marker directory in a given directory together with a
hidden template script documenting the command contract. Copying the template
to a visible name (e.g. .ax/build.sh) is how a new command is made.
"""
import os
from pathlib import Path

from .config import Config
from .faults import AlreadyInitializedError
from .logger import get_logger

logger = get_logger(__name__)

TEMPLATE = f"""\
# Template for ax commands (hidden: names starting with {Config.HIDDEN!r} are not commands).
# Copy it to {Config.MARKER}/NAME{Config.EXTENSION} to create the command "ax NAME".
#
# Every function is optional. While they run, the script can read:
#   ${Config.CONTEXT_ROOT}     absolute path of the workspace root
#   ${Config.CONTEXT_MARKER}   absolute path of the {Config.MARKER} directory
#   ${Config.CONTEXT_COMMAND}  name of the running command

# One line shown next to the command by 'ax'.
info() {{
    echo "{Config.FALLBACK}"
}}

# Full help shown by 'ax NAME -?'.
help() {{
    echo "usage: ax NAME [ARGUMENTS...]"
}}

# Completion candidates for the arguments typed so far, one per line.
# Candidates starting with '-' are offered only while completing an option.
list() {{
    :
}}

# The command itself; its status is the exit status of ax.
main() {{
    return 0
}}
"""


def init(directory, /):
    """
    Create a workspace rooted at directory.

    Returns
    - Path of the created marker directory.

    Raises
    - AlreadyInitializedError: when directory/.ax already exists (of any kind);
      nothing is modified in that case.
    """
    marker = Path(directory) / Config.MARKER
    if os.path.lexists(marker):
        raise AlreadyInitializedError(marker)
    marker.mkdir()
    (marker / Config.TEMPLATE).write_text(TEMPLATE, encoding="utf-8")
    logger.debug("workspace created at %s", marker)
    return marker


__all__ = (
    "TEMPLATE",
    "init",
)
