"""
Completion engine.

complete(words, index) answers the shell's completion request for the word at
position index of words (words[0] is the tool itself).

Regimes
- index 1: a partial word starting with "-" completes against the static
  top-level options; anything else completes against the command names of the
  workspace around the current directory. The two never mix.
- index >= 2: the command typed at position 1 is resolved and its list()
  provides the candidates for words[2:]. The polarity filter then keeps the
  option-like candidates when the partial word starts with "-", and the other
  ones otherwise, so one list() can emit both kinds.

Nothing raised by the workspace lookup or a command script reaches the shell:
failures complete to nothing.
"""
import os
import subprocess

from .logger import get_logger
from .registry import names
from .scripts import load
from .workspace import resolve

logger = get_logger(__name__)

PREFIX = "-"

# Static top-level options offered at position 1
OPTIONS = (
    "-!",
    "-?",
    "-@",
    "--init",
    "--setup",
    "--reset",
    "--update",
)


def polarity(candidates, partial, /):
    """
    Keep the candidates of the same kind as the partial word (option-like or not).
    """
    optional = partial.startswith(PREFIX)
    return [candidate for candidate in candidates if candidate.startswith(PREFIX) is optional]


def complete(words, index, /, *, cwd=None):
    """
    Return the ordered completion candidates for words[index].

    Parameters
    - words: Sequence[str], the command line split into words.
    - index: int, position of the word being completed. A position past the end
      of words completes an empty partial word.
    - cwd: directory to resolve the workspace from (defaults to the current one).
    """
    words = list(words)
    if index < 1:
        return []
    partial = words[index] if index < len(words) else ""
    cwd = cwd if cwd is not None else os.getcwd()

    try:
        if index == 1:
            if partial.startswith(PREFIX):
                return list(OPTIONS)
            return names(resolve(cwd))

        if len(words) < 2 or not (invocation := resolve(cwd, words[1])).resolved:
            return []
        candidates = load(invocation.script).list(invocation, *words[2:])
    except (OSError, subprocess.SubprocessError, ValueError) as error:
        logger.debug("completion of %r at %d failed: %s", words, index, error)
        return []

    return polarity(candidates, partial)


__all__ = (
    "OPTIONS",
    "polarity",
    "complete",
)
