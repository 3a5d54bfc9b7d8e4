"""
Dispatcher tests.

Scope
- Routing priority: no arguments, options, unknown options, commands.
- Faults rendered on the error console with their exit status.
- Command execution: help() vs. main(), arguments and status forwarding.
- Fail-fast once a command starts running.
- Option handlers wired to the dispatcher (--init, --setup, --reset, --complete).

Conventions
- Test method names follow CamelCase per project convention.
- Consoles write into StringIO; command scripts write into files.
"""
import unittest
from unittest import mock

from ax import __version__
from ax.config import Config
from ax.dispatch import dispatch
from ax.faults import FaultCode
from ax.hooks import MARK

from support import WorkspaceTestCase, console, output, requires_bash


class DispatchTestCase(WorkspaceTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.console = console()
        self.errors = console()

    def dispatch(self, *args, cwd=None):
        return dispatch(args, cwd=cwd or self.root, console=self.console, errors=self.errors)

    @property
    def stdout(self):
        return output(self.console)

    @property
    def stderr(self):
        return output(self.errors)


class TestRouting(DispatchTestCase):
    """Everything decided before a command runs."""

    @requires_bash
    def testNoArgumentsListsCommandsOnErrors(self):
        self.script("build", 'info() { echo "Build it."; }')
        self.script(".template")
        self.assertEqual(self.dispatch(cwd=self.mkdir("src")), FaultCode.INVALID_ARGUMENT)
        self.assertIn("usage:", self.stderr)
        self.assertIn("build", self.stderr)
        self.assertIn("Build it.", self.stderr)
        self.assertNotIn("template", self.stderr)
        self.assertIn("--init", self.stderr)
        self.assertEqual(self.stdout, "")

    def testNoArgumentsOutsideWorkspace(self):
        if not self.outside():
            self.skipTest("the temporary directory lives inside a workspace")
        self.assertEqual(self.dispatch(), 22)
        self.assertIn("not inside a workspace", self.stderr)

    def testHint(self):
        self.assertEqual(self.dispatch("-!"), 0)
        self.assertIn("ax -?", self.stdout)

    def testHelp(self):
        self.assertEqual(self.dispatch("-?"), 0)
        self.assertIn("usage:", self.stdout)
        self.assertIn("AX_ROOT", self.stdout)
        self.assertEqual(self.stderr, "")

    def testHelpNeedsNoWorkspace(self):
        self.assertEqual(self.dispatch("-?", cwd=self.mkdir("nowhere")), 0)

    def testVersion(self):
        self.assertEqual(self.dispatch("-@"), 0)
        self.assertEqual(self.stdout.strip(), f"ax {__version__}")

    def testUnrecognizedOption(self):
        self.script("build")
        self.assertEqual(self.dispatch("--build"), FaultCode.INVALID_ARGUMENT)
        self.assertIn("unrecognized option '--build'", self.stderr)

    def testNotAWorkspace(self):
        if not self.outside():
            self.skipTest("the temporary directory lives inside a workspace")
        self.assertEqual(self.dispatch("anything"), FaultCode.NOT_FOUND)
        self.assertIn("not inside a workspace", self.stderr)
        self.assertTrue(self.stderr.startswith("ax: error: "))

    def testUnknownCommand(self):
        self.script("build")
        self.assertEqual(self.dispatch("deploy"), FaultCode.INVALID_ARGUMENT)
        self.assertIn("unrecognized command 'deploy'", self.stderr)

    def testHiddenCommandIsUnknown(self):
        self.script(".hidden", "main() { touch \"$AX_ROOT/ran\"; }")
        self.assertEqual(self.dispatch(".hidden"), FaultCode.INVALID_ARGUMENT)
        self.assertFalse((self.root / "ran").exists())


@requires_bash
class TestExecution(DispatchTestCase):
    """Running a resolved command."""

    def setUp(self) -> None:
        super().setUp()
        self.script("build", """
            help() { echo help > "$AX_ROOT/help.txt"; }
            main() { echo "$AX_COMMAND|$AX_ROOT|$*" > "$AX_ROOT/main.txt"; return 7; }
        """)

    def testMainForwardsArgumentsAndStatus(self):
        status = self.dispatch("build", "--fast", "target", cwd=self.mkdir("sub", "dir"))
        self.assertEqual(status, 7)
        self.assertEqual((self.root / "main.txt").read_text(), f"build|{self.root}|--fast target\n")
        self.assertFalse((self.root / "help.txt").exists())

    def testMainRunsWhereResolved(self):
        self.script("where", 'main() { pwd -P > "$AX_ROOT/where.txt"; }')
        directory = self.mkdir("sub", "dir")
        self.assertEqual(self.dispatch("where", cwd=directory), 0)
        self.assertEqual((self.root / "where.txt").read_text().strip(), str(directory.resolve()))

    def testHelpFlagSkipsMain(self):
        self.assertEqual(self.dispatch("build", "-?", "ignored"), 0)
        self.assertTrue((self.root / "help.txt").exists())
        self.assertFalse((self.root / "main.txt").exists())

    def testHelpFlagLaterIsAnArgument(self):
        self.assertEqual(self.dispatch("build", "x", "-?"), 7)
        self.assertEqual((self.root / "main.txt").read_text(), f"build|{self.root}|x -?\n")

    def testFailingHelpStillSucceeds(self):
        self.script("lint", "help() { return 9; }\nmain() { return 1; }")
        self.assertEqual(self.dispatch("lint", "-?"), 0)

    def testScriptWithoutFunctions(self):
        self.script("empty", "")
        self.assertEqual(self.dispatch("empty", "a", "b"), 0)

    def testFailFastOnceRunning(self):
        with mock.patch.object(Config, "SHELL", str(self.root / "no-such-shell")):
            with self.assertRaises(OSError):
                self.dispatch("build")


class TestOptions(DispatchTestCase):
    """Option handlers reached through the dispatcher."""

    def testInit(self):
        self.assertEqual(self.dispatch("--init"), 0)
        self.assertTrue((self.root / ".ax" / ".template.sh").is_file())
        self.assertIn("workspace created", self.stdout)

    def testInitTwiceLeavesWorkspaceUntouched(self):
        script = self.script("build", "main() { :; }")
        self.assertEqual(self.dispatch("--init"), FaultCode.ALREADY_EXISTS)
        self.assertIn("already initialized", self.stderr)
        self.assertEqual(script.read_text(), "main() { :; }")
        self.assertFalse((self.root / ".ax" / ".template.sh").exists())

    def testSetupAndReset(self):
        init = self.root / ".bashrc"
        init.write_text("export PATH\n")
        with mock.patch.object(Config, "INIT_FILE", str(init)):
            self.assertEqual(self.dispatch("--setup"), 0)
            self.assertEqual(self.dispatch("--setup"), FaultCode.ALREADY_EXISTS)
            self.assertIn(MARK, init.read_text())
            self.assertEqual(self.dispatch("--reset"), 0)
            self.assertEqual(self.dispatch("--reset"), 0)
        self.assertEqual(init.read_text(), "export PATH\n")

    def testSetupWithoutInitFile(self):
        with mock.patch.object(Config, "INIT_FILE", str(self.root / "missing")):
            self.assertEqual(self.dispatch("--setup"), FaultCode.NOT_FOUND)
            self.assertEqual(self.dispatch("--reset"), FaultCode.NOT_FOUND)
        self.assertIn("not found", self.stderr)

    def testUpdateWithoutExecutable(self):
        with mock.patch("ax.update.shutil.which", return_value=None):
            self.assertEqual(self.dispatch("--update"), FaultCode.NOT_FOUND)
        self.assertIn("'ax' not found on PATH", self.stderr)

    def testCompleteOptions(self):
        self.assertEqual(self.dispatch("--complete", "1", "ax", "--"), 0)
        self.assertIn("--init\n", self.stdout)
        self.assertIn("-?\n", self.stdout)

    def testCompleteCommandNames(self):
        self.script("build")
        self.script("deploy")
        self.assertEqual(self.dispatch("--complete", "1", "ax", ""), 0)
        self.assertEqual(self.stdout, "build\ndeploy\n")

    def testCompleteWithBadIndexPrintsNothing(self):
        for args in (("--complete",), ("--complete", "x", "ax")):
            with self.subTest(args=args):
                self.assertEqual(self.dispatch(*args), 0)
        self.assertEqual(self.stdout, "")
        self.assertEqual(self.stderr, "")


if __name__ == "__main__":
    unittest.main()
