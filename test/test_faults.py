"""
Fault tests: exit statuses and rendering.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase, mock

from ax.config import Config
from ax.faults import (
    AlreadyInitializedError,
    AlreadySetupError,
    CommandException,
    FaultCode,
    MissingPrerequisiteError,
    NotAWorkspaceError,
    UnknownCommandError,
    UnrecognizedOptionError,
    trigger,
)

from support import console, output


class TestFaultCode(TestCase):

    def testErrnoValues(self):
        self.assertEqual(
            [int(code) for code in FaultCode],
            [0, 2, 17, 22],
        )

    def testCodesPerFault(self):
        for fault, code in (
            (NotAWorkspaceError("/tmp"), 2),
            (MissingPrerequisiteError("missing"), 2),
            (AlreadyInitializedError("/tmp/.ax"), 17),
            (AlreadySetupError("/tmp/.bashrc"), 17),
            (UnknownCommandError("build"), 22),
            (UnrecognizedOptionError("--nope"), 22),
        ):
            with self.subTest(fault=type(fault).__name__):
                self.assertEqual(fault.code, code)
                self.assertIsInstance(fault, CommandException)


class TestTrigger(TestCase):

    def setUp(self) -> None:
        patcher = mock.patch.object(Config, "COLOR", False)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.console = console()

    def testRendersMessageAndHint(self):
        status = trigger(UnknownCommandError("deploy"), console=self.console)
        self.assertEqual(status, 22)
        self.assertEqual(
            output(self.console),
            "ax: error: unrecognized command 'deploy'\nhint: run 'ax' to list the commands\n",
        )

    def testRendersWithoutHint(self):
        trigger(MissingPrerequisiteError("'ax' not found on PATH"), console=self.console)
        self.assertEqual(output(self.console), "ax: error: 'ax' not found on PATH\n")

    def testMarkupIsNotInterpreted(self):
        trigger(UnknownCommandError("[bold]x[/bold]"), console=self.console)
        self.assertIn("'[bold]x[/bold]'", output(self.console))

    def testRejectsNonTriggerables(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("nope"))


if __name__ == "__main__":
    unittest.main()
