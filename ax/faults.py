"""
ax faults (errors) and rendering.

Scope
- FaultCode: the documented exit statuses of the tool. They reuse POSIX errno
  values so that shells and scripts can branch on familiar numbers.
- CommandException: base type that carries message + hint + code and knows how
  to render itself as a single, lowercased line on the error stream.
- trigger(): central entry point to surface any fault; it renders the fault and
  returns the exit status the dispatcher should end with.

UX goals
- One line per error, always prefixed with the program name ("ax: error: ...").
- An optional second line with a single, actionable hint.

Integration
- The dispatcher raises faults while routing and turns them into an exit status
  through trigger(fault). Faults are never raised out of the command's own
  execution: once a command runs, its outcome is its exit status.
"""
import errno
from enum import IntEnum

from rich.console import Console, Group
from rich.text import Text

from .config import Config
from .utils import Unset, coalesce

console = Console(stderr=True, highlight=False)


class FaultCode(IntEnum):
    """
    canonical exit statuses used across the cli (stable identifiers).

    - SUCCESS (0)
    - NOT_FOUND (2, ENOENT): a resource is missing (workspace, init file, executable).
    - ALREADY_EXISTS (17, EEXIST): an idempotent guard refused to redo work.
    - INVALID_ARGUMENT (22, EINVAL): the command line itself is wrong.
    """
    SUCCESS = 0
    NOT_FOUND = errno.ENOENT
    ALREADY_EXISTS = errno.EEXIST
    INVALID_ARGUMENT = errno.EINVAL


class CommandException(Exception):
    code = FaultCode.INVALID_ARGUMENT

    def __init__(self, message, /, *, hint=Unset):
        super().__init__(message)
        self.message = message
        self.hint = coalesce(hint)

    def __rich__(self):
        colorful = Config.COLOR
        message = Text.assemble(
            "ax: ",
            ("error: ", "bold red" if colorful else ""),
            Text(str(self.message), "red" if colorful else ""),
        )
        if not self.hint:
            return message
        hint = Text.assemble(("hint: ", "cyan" if colorful else ""), str(self.hint))
        return Group(message, hint)

    def __trigger__(self, **options):
        options.get("console", console).print(self)
        return int(self.code)


class NotAWorkspaceError(CommandException):
    code = FaultCode.NOT_FOUND

    def __init__(self, start, /, *, hint=Unset):
        super().__init__(
            f"not inside a workspace (no {Config.MARKER!r} directory above {str(start)!r})",
            hint=coalesce(hint, "run 'ax --init' to create one here"),
        )
        self.start = start


class UnknownCommandError(CommandException):
    code = FaultCode.INVALID_ARGUMENT

    def __init__(self, name, /, *, hint=Unset):
        super().__init__(f"unrecognized command {name!r}", hint=coalesce(hint, "run 'ax' to list the commands"))
        self.name = name


class UnrecognizedOptionError(CommandException):
    code = FaultCode.INVALID_ARGUMENT

    def __init__(self, option, /, *, hint=Unset):
        super().__init__(f"unrecognized option {option!r}", hint=coalesce(hint, "run 'ax -?' for help"))
        self.option = option


class MissingPrerequisiteError(CommandException):
    code = FaultCode.NOT_FOUND

    def __init__(self, message, /, *, hint=Unset):
        super().__init__(message, hint=hint)


class AlreadyInitializedError(CommandException):
    code = FaultCode.ALREADY_EXISTS

    def __init__(self, marker, /, *, hint=Unset):
        super().__init__(f"workspace already initialized at {str(marker)!r}", hint=hint)
        self.marker = marker


class AlreadySetupError(CommandException):
    code = FaultCode.ALREADY_EXISTS

    def __init__(self, path, /, *, hint=Unset):
        super().__init__(f"completion already set up in {str(path)!r}", hint=coalesce(hint, "run 'ax --reset' first"))
        self.path = path


def trigger(fault, /, **options):
    """
    Surface a fault and return its exit status.

    contract
    - fault must provide a callable __trigger__(**options) returning an int.
    - options are forwarded as-is; "console" overrides the error console.
    """
    if not hasattr(fault, "__trigger__") or not callable(fault.__trigger__):
        raise TypeError("trigger() argument must implement __trigger__ method")
    return fault.__trigger__(**options)


__all__ = (
    "FaultCode",
    "CommandException",
    "NotAWorkspaceError",
    "UnknownCommandError",
    "UnrecognizedOptionError",
    "MissingPrerequisiteError",
    "AlreadyInitializedError",
    "AlreadySetupError",
    "trigger",
)
