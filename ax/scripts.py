"""
Command contract and script loading.

What this module provides
- Script: the capability set every command exposes to the engine.
  • info(context)        -> str        one-line description (fallback when undefined or failing)
  • help(context)        -> None       full help printed verbatim (no-op when undefined)
  • list(context, *args) -> list[str]  completion candidates (empty when undefined)
  • main(context, *args) -> int        execution entry point (no-op returning 0 when undefined)
- ShellScript: the bash implementation. Each call runs in a fresh interpreter
  process that sources the script and calls the requested function, so no
  definition survives from one call (or one script) to the next.
- load(path): pick the Script implementation for a script file.

Context
- Every call receives the Invocation explicitly; ShellScript exposes it to the
  script as AX_ROOT, AX_MARKER and AX_COMMAND.
- help() and main() run in cwd (the current directory when None).
- While main() runs, keyboard interrupts (SIGINT, SIGQUIT) belong to the
  command: ax keeps waiting and returns whatever status the command ends with.

Errors
- Contract-level misses (undefined function, failing info/list) are absorbed
  here with the fallbacks above.
- Failures to run the interpreter at all (OSError, SubprocessError) propagate;
  callers decide whether to swallow them (listing, completion) or not (dispatch).
"""
import os
import signal
import subprocess
import textwrap
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path

from .config import Config
from .logger import get_logger

logger = get_logger(__name__)

# Exit status reported by the driver when the requested function is undefined
# and the caller wants to know (info).
_UNDEFINED = 127

# $1: script, $2: function, $3: status when the function is undefined, $4...: arguments
_DRIVER = textwrap.dedent("""\
    source "$1"
    declare -F "$2" > /dev/null || exit "$3"
    __ax_function__="$2"
    shift 3
    "$__ax_function__" "$@"
""")

# Keyboard signals sent to the whole foreground process group while a command
# runs. The command handles them; ax only waits for its status.
_FOREGROUND = tuple(getattr(signal, name) for name in ("SIGINT", "SIGQUIT") if hasattr(signal, name))


def _deferred(signum, frame):
    logger.debug("signal %d left to the running command", signum)


@contextmanager
def _foreground():
    # A Python-level handler rather than SIG_IGN: exec resets it to the
    # default, so the command can still trap the signal.
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = {number: signal.signal(number, _deferred) for number in _FOREGROUND}
    try:
        yield
    finally:
        for number, handler in previous.items():
            if handler is not None:
                signal.signal(number, handler)


class Script(ABC):
    """
    A command: any artifact implementing the four contract functions.
    """

    def __init__(self, path, /):
        self.path = Path(path)

    @property
    def name(self):
        return self.path.name.removesuffix(Config.EXTENSION)

    def __repr__(self):
        return f"{type(self).__name__}({str(self.path)!r})"

    @abstractmethod
    def info(self, context, /): ...

    @abstractmethod
    def help(self, context, /, *, cwd=None): ...

    @abstractmethod
    def list(self, context, /, *args): ...

    @abstractmethod
    def main(self, context, /, *args, cwd=None): ...


class ShellScript(Script):
    """
    A bash script defining (some of) info, help, list and main as functions.
    """

    def _run(self, context, function, args=(), *, missing=0, **options):
        command = [Config.SHELL, "-c", _DRIVER, "ax", str(self.path), function, str(missing), *args]
        logger.debug("calling %s() from %s with %r", function, self.path, args)
        return subprocess.run(command, env=os.environ | context.environ(), **options)

    def info(self, context, /):
        result = self._run(
            context,
            "info",
            missing=_UNDEFINED,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
        if result.returncode != 0:
            return Config.FALLBACK
        lines = result.stdout.strip().splitlines()
        return lines[0].strip() if lines else ""

    def help(self, context, /, *, cwd=None):
        # Output goes straight to the terminal; errors and status are the script's own business.
        self._run(context, "help", cwd=cwd, stdin=subprocess.DEVNULL, stderr=subprocess.DEVNULL)

    def list(self, context, /, *args):
        result = self._run(
            context,
            "list",
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
        if result.returncode != 0:
            return []
        return [line for line in map(str.strip, result.stdout.splitlines()) if line]

    def main(self, context, /, *args, cwd=None):
        with _foreground():
            returncode = self._run(context, "main", args, cwd=cwd).returncode
        # Killed by a signal: report it the way shells do.
        if returncode < 0:
            return 128 + abs(returncode)
        return returncode


# Script implementations by file extension
LOADERS = {
    ".sh": ShellScript,
}


def load(path, /):
    """
    Return the Script for a command file.

    Raises
    - ValueError: when no implementation handles the file's extension.
    """
    path = Path(path)
    try:
        return LOADERS[path.suffix](path)
    except KeyError:
        raise ValueError(f"load() no script implementation for {path.name!r}") from None


__all__ = (
    "Script",
    "ShellScript",
    "LOADERS",
    "load",
)
