"""
Dispatcher: from a command line to an exit status.

Routing, in priority order
1. no arguments          -> usage, commands and options on stderr; INVALID_ARGUMENT.
2. a known option        -> its handler (-!, -?, -@, --init, --setup, --reset,
                            --update, and the internal --complete).
3. any other "-..." word -> UnrecognizedOptionError.
4. a command name        -> workspace + command resolution from cwd:
                            NotAWorkspaceError when there is no workspace,
                            UnknownCommandError when the command does not exist.
5. a resolved command    -> "COMMAND -?" calls help() and succeeds;
                            otherwise main() runs in cwd with the remaining arguments
                            and its status is returned unchanged.

Faults raised while routing are rendered on the error console and turned into
their exit status. Once a command's help() or main() starts, nothing is caught:
the command owns its outcome.
"""
import os

from rich.console import Console

from . import completion, hooks, scaffold, texts, update
from .faults import (
    CommandException,
    FaultCode,
    NotAWorkspaceError,
    UnknownCommandError,
    UnrecognizedOptionError,
    console as stderr,
    trigger,
)
from .logger import get_logger
from .registry import describe
from .scripts import load
from .workspace import resolve

logger = get_logger(__name__)

stdout = Console(highlight=False)

HELP = "-?"


def _hint(arguments, cwd, console):
    texts.hint(console)
    return FaultCode.SUCCESS


def _help(arguments, cwd, console):
    texts.help(console)
    return FaultCode.SUCCESS


def _version(arguments, cwd, console):
    texts.version(console)
    return FaultCode.SUCCESS


def _init(arguments, cwd, console):
    marker = scaffold.init(cwd)
    console.print(f"workspace created: {marker}", markup=False)
    return FaultCode.SUCCESS


def _setup(arguments, cwd, console):
    path = hooks.setup()
    console.print(f"completion set up in {path}, restart your shell to use it", markup=False)
    return FaultCode.SUCCESS


def _reset(arguments, cwd, console):
    hooks.reset()
    return FaultCode.SUCCESS


def _update(arguments, cwd, console):
    return update.update()


def _complete(arguments, cwd, console):
    # ax --complete INDEX WORD...; the shell gets candidates or nothing, never an error.
    try:
        index = int(arguments[0])
    except (IndexError, ValueError):
        return FaultCode.SUCCESS
    for candidate in completion.complete(arguments[1:], index, cwd=cwd):
        console.file.write(candidate + "\n")
    return FaultCode.SUCCESS


# Top-level options and their handlers: handler(arguments, cwd, console) -> status
OPTIONS = {
    "-!": _hint,
    HELP: _help,
    "-@": _version,
    "--init": _init,
    "--setup": _setup,
    "--reset": _reset,
    "--update": _update,
    "--complete": _complete,
}


def _route(args, cwd, console, errors):
    if not args:
        invocation = resolve(cwd)
        texts.usage(errors, describe(invocation) if invocation.found else None)
        return FaultCode.INVALID_ARGUMENT

    first, *rest = args

    if first in OPTIONS:
        logger.debug("option %s", first)
        return OPTIONS[first](rest, cwd, console)
    if first.startswith(completion.PREFIX):
        raise UnrecognizedOptionError(first)

    invocation = resolve(cwd, first)
    if not invocation.found:
        raise NotAWorkspaceError(cwd)
    if not invocation.resolved:
        raise UnknownCommandError(first)

    script = load(invocation.script)
    if rest[:1] == [HELP]:
        script.help(invocation, cwd=cwd)
        return FaultCode.SUCCESS
    logger.debug("running %r with %r", script, rest)
    return script.main(invocation, *rest, cwd=cwd)


def dispatch(args, /, *, cwd=None, console=None, errors=None):
    """
    Run one ax command line (without the program name) and return the exit status.

    Parameters
    - args: Sequence[str]
    - cwd: directory the workspace is resolved from and the command runs in
      (defaults to the current one).
    - console / errors: rich consoles for regular and error output
      (default: stdout and stderr).
    """
    cwd = cwd if cwd is not None else os.getcwd()
    console = console if console is not None else stdout
    errors = errors if errors is not None else stderr
    try:
        return int(_route(list(args), cwd, console, errors))
    except CommandException as fault:
        logger.debug("fault %s: %s", type(fault).__name__, fault.message)
        return trigger(fault, console=errors)


__all__ = (
    "OPTIONS",
    "dispatch",
)
