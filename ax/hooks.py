"""
Shell completion registration (ax --setup / ax --reset).

The hook is one bash line appended to the shell init file. It defines a
completion function that hands COMP_CWORD and COMP_WORDS to
'ax --complete' and lets compgen do the prefix matching. The trailing MARK
comment identifies the line, so setup() can refuse to add it twice and reset()
can remove it again.
"""
from pathlib import Path

from .config import Config
from .faults import AlreadySetupError, MissingPrerequisiteError
from .logger import get_logger

logger = get_logger(__name__)

MARK = "# ax completion"

HOOK = (
    r"""_ax_complete() { local IFS=$'\n'; """
    r"""COMPREPLY=($(compgen -W "$(ax --complete "$COMP_CWORD" "${COMP_WORDS[@]}")" -- "${COMP_WORDS[COMP_CWORD]}")); }; """
    r"""complete -o default -F _ax_complete ax  """
    + MARK
)


def _hooked(line):
    return line.rstrip().endswith(MARK)


def _init_file(path):
    path = Path(path if path is not None else Config.INIT_FILE)
    if not path.is_file():
        raise MissingPrerequisiteError(
            f"shell init file {str(path)!r} not found",
            hint="create it, or point AX_INIT_FILE to another file",
        )
    return path


def setup(path=None, /):
    """
    Append the completion hook to the shell init file.

    Raises
    - MissingPrerequisiteError: the init file does not exist.
    - AlreadySetupError: the hook is already there (the file is left as is).
    """
    path = _init_file(path)
    text = path.read_text(encoding="utf-8")
    if any(map(_hooked, text.splitlines())):
        raise AlreadySetupError(path)
    with path.open("a", encoding="utf-8") as file:
        if text and not text.endswith("\n"):
            file.write("\n")
        file.write(HOOK + "\n")
    logger.debug("completion hook added to %s", path)
    return path


def reset(path=None, /):
    """
    Remove every completion hook line from the shell init file.

    Returns
    - bool: whether the file was changed.

    Raises
    - MissingPrerequisiteError: the init file does not exist.
    """
    path = _init_file(path)
    lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
    kept = [line for line in lines if not _hooked(line)]
    if len(kept) == len(lines):
        return False
    path.write_text("".join(kept), encoding="utf-8")
    logger.debug("completion hook removed from %s", path)
    return True


__all__ = (
    "MARK",
    "HOOK",
    "setup",
    "reset",
)
