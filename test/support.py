"""
Shared fixtures for the ax test suites.

- WorkspaceTestCase: a TestCase owning a fresh temporary directory tree with
  helpers to create directories, marker directories and command scripts.
- requires_bash: skip decorator for suites that run command scripts.
- console(): a plain rich Console writing into a StringIO.
"""
import io
import os
import shutil
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest import TestCase

from rich.console import Console

requires_bash = unittest.skipUnless(shutil.which("bash"), "bash is required to run command scripts")


def console():
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200, highlight=False)


def output(console):
    return console.file.getvalue()


class WorkspaceTestCase(TestCase):
    """Base case providing an isolated directory tree rooted at self.root."""

    def setUp(self) -> None:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        self.root = Path(os.path.abspath(directory.name))

    def mkdir(self, *parts) -> Path:
        path = self.root.joinpath(*parts)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def marker(self, *parts) -> Path:
        return self.mkdir(*parts, ".ax")

    def script(self, name, body="", *parts) -> Path:
        path = self.marker(*parts) / f"{name}.sh"
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    def outside(self) -> bool:
        """Whether no ancestor of the temporary tree is itself a workspace."""
        return not any((parent / ".ax").is_dir() for parent in self.root.parents)
