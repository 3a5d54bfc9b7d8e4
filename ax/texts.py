"""
User-facing texts: usage, hint, help and version.

All texts are rendered with rich. Colors follow Config.COLOR; the palette can
be adjusted through STYLES.
"""
from rich.console import Group
from rich.table import Table
from rich.text import Text

from .config import Config
from .faults import FaultCode

STYLES = {
    "title": "bold #36C5F0",
    "usage": "bold",
    "command": "bold #36C5F0",
    "description": "#9CA3AF",
    "option": "bold #22C55E",
    "hint": "italic #9CE19C",
}

USAGE = "ax [OPTION | COMMAND [-? | ARGUMENTS...]]"

# Options in display order, with their one-line descriptions
OPTIONS = (
    ("-!", "show a short hint"),
    ("-?", "show this help"),
    ("-@", "show the version"),
    ("--init", f"create a workspace ({Config.MARKER}) in the current directory"),
    ("--setup", f"register shell completion in {Config.INIT_FILE}"),
    ("--reset", f"remove shell completion from {Config.INIT_FILE}"),
    ("--update", "update ax to the latest release"),
)

CONTRACT = (
    ("info", "print a one-line description (default: \"%s\")" % Config.FALLBACK),
    ("help", "print the full help of the command, shown by 'ax COMMAND -?'"),
    ("list", "print completion candidates for the given arguments, one per line"),
    ("main", "run the command with its arguments; its status is the exit status of ax"),
)

CONTEXT = (
    (Config.CONTEXT_ROOT, "absolute path of the workspace root"),
    (Config.CONTEXT_MARKER, f"absolute path of the {Config.MARKER} directory"),
    (Config.CONTEXT_COMMAND, "name of the running command"),
)

STATUSES = (
    (FaultCode.SUCCESS, "success"),
    (FaultCode.NOT_FOUND, "not found (workspace, init file, executable)"),
    (FaultCode.ALREADY_EXISTS, "already exists (workspace, completion)"),
    (FaultCode.INVALID_ARGUMENT, "invalid argument (option, command)"),
)


def _style(name):
    return STYLES.get(name, "") if Config.COLOR else ""


def _table(rows, key):
    table = Table.grid(padding=(0, 3))
    table.add_column(style=_style(key), no_wrap=True)
    table.add_column(style=_style("description"))
    for left, right in rows:
        table.add_row(Text("  " + str(left)), Text(str(right)))
    return table


def _section(title, body):
    return Group(Text(title + ":", _style("title")), body, Text(""))


def _usage():
    return Text.assemble(("usage: ", _style("usage")), USAGE, "\n")


def usage(console, descriptions=None, /):
    """
    Render the usage, the commands of the workspace (when given) and the options.

    Parameters
    - console: rich Console to print to (stderr when no arguments were given).
    - descriptions: list[tuple[str, str]] | None, (name, info) pairs; None when
      not inside a workspace.
    """
    renders = [_usage()]
    if descriptions is None:
        renders.append(_section("commands", Text(f"  (not inside a workspace, no {Config.MARKER} found)")))
    elif not descriptions:
        renders.append(_section("commands", Text(f"  (none, add scripts to {Config.MARKER}/)")))
    else:
        renders.append(_section("commands", _table(descriptions, "command")))
    renders.append(_section("options", _table(OPTIONS, "option")))
    console.print(Group(*renders))


def hint(console, /):
    console.print(Text.assemble(
        "ax runs the commands found in the nearest ",
        (Config.MARKER, _style("command")),
        " directory above the current one.\n",
        ("Try 'ax' to list them, 'ax -?' for help.", _style("hint")),
    ))


def help(console, /):
    console.print(Group(
        _usage(),
        Text(
            "Run workspace commands. A workspace is a directory holding a "
            f"{Config.MARKER} directory; every {Config.MARKER}/NAME{Config.EXTENSION} "
            f"script in it is a command called NAME. Scripts whose name starts with "
            f"{Config.HIDDEN!r} are hidden.\n"
        ),
        _section("options", _table(OPTIONS, "option")),
        _section("script functions (all optional)", _table(CONTRACT, "command")),
        _section("script environment", _table(CONTEXT, "command")),
        _section("exit status", _table(((int(code), text) for code, text in STATUSES), "option")),
    ))


def version(console, /):
    from . import __version__

    console.print(f"ax {__version__}")


__all__ = (
    "STYLES",
    "USAGE",
    "usage",
    "hint",
    "help",
    "version",
)
