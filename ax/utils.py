"""
ax utilities (internal helpers)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/"".

- hidden(name) / strip(filename)
  • Command-namespace helpers shared by the resolver and the registry.

Stability and contract
- Names not in __all__ are internal and may change without notice.
"""
import functools
from typing import final

from .config import Config


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Used where an empty string is a legitimate (but meaningless) user value and
    the API still needs to tell “no input” apart from “input given”.
    """

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("build", "fallback") -> "build"
    - coalesce(Unset, "fallback")   -> "fallback"
    - coalesce("", "fallback")      -> ""
    """
    return object if object is not Unset else default


def hidden(name, /):
    """
    Whether a command name (or script filename) belongs to the hidden namespace.
    """
    return name.startswith(Config.HIDDEN)


def strip(filename, /):
    """
    Return the command name of a script filename, or None when it is not a script.

    - "build.sh"  -> "build"
    - "notes.txt" -> None
    - ".sh"       -> None (no name left after stripping)
    """
    if not filename.endswith(Config.EXTENSION) or not (name := filename[:-len(Config.EXTENSION)]):
        return None
    return name


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Typical pattern: value = coalesce(user_value, default).
"""


__all__ = (
    # Functions
    "coalesce",
    "hidden",
    "strip",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
