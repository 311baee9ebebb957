"""
Commands module behavioral tests (argv classification, dispatch, run_command).

Scope
- Validate subcommand selection and option map construction.
- Validate parse faults (duplicated option name, value before option name).
- Validate dispatch to handlers and the missing-subcommand fault.
- Validate reporter options ('-det', '-lim') and the run_command pipeline.

Conventions
- Test method names follow CamelCase per project convention.
- Console output is captured through a rich Console writing to a StringIO.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from unittest import TestCase

from rich.console import Console

from chescli import (
    ConsoleReporter,
    DuplicatedOptionNameError,
    InvalidLogLimitError,
    Langpack,
    NoMatchingSubcommandError,
    OptionValueBeforeOptionNameError,
    ParsedCommand,
    dispatch,
    parse_args,
    read_log_limit,
    read_show_details,
    run_command,
)


def capture():
    return Console(file=io.StringIO(), color_system=None, force_terminal=False, width=200)


class TestParseArgs(TestCase):
    """Behavioral tests for parse_args."""

    def testProgramOnlyUsesDefault(self):
        self.assertEqual(parse_args(["prog"], "run"), ParsedCommand("run", {}))

    def testEmptyArgvUsesDefault(self):
        self.assertEqual(parse_args([], "run"), ParsedCommand("run", {}))

    def testSubcommandOnly(self):
        command = parse_args(["prog", "build"], "run")
        self.assertEqual(command.subcommand_name, "build")
        self.assertEqual(command.options, {})

    def testSubcommandWithOptions(self):
        command = parse_args(["prog", "build", "-out", "a.bin", "-v"], "run")
        self.assertEqual(command.subcommand_name, "build")
        self.assertEqual(command.options, {"-out": ["a.bin"], "-v": []})

    def testLeadingOptionKeepsDefault(self):
        command = parse_args(["prog", "-v", "x", "y"], "run")
        self.assertEqual(command.subcommand_name, "run")
        self.assertEqual(command.options, {"-v": ["x", "y"]})

    def testValuesKeepArgvOrder(self):
        command = parse_args(["prog", "cp", "-src", "c", "a", "b", "-dst", "z"], "run")
        self.assertEqual(command.options["-src"], ["c", "a", "b"])
        self.assertEqual(command.options["-dst"], ["z"])

    def testDoubleDashIsAnOptionKey(self):
        command = parse_args(["prog", "--long", "v"], "run")
        self.assertEqual(command.options, {"--long": ["v"]})

    def testNoOptionTokensGiveEmptyMap(self):
        for argv, expected in (
                (["prog"], "run"),
                (["prog", "build"], "build"),
                (["prog", "test"], "test"),
        ):
            with self.subTest(argv=argv):
                command = parse_args(argv, "run")
                self.assertEqual(command.subcommand_name, expected)
                self.assertEqual(command.options, {})

    def testDuplicatedOptionNameRaises(self):
        with self.assertRaises(DuplicatedOptionNameError) as context:
            parse_args(["prog", "build", "-v", "-out", "a", "-v"], "run")
        self.assertEqual(context.exception.option_name, "-v")
        self.assertEqual(context.exception.index, 5)

    def testDuplicatedOptionNameWithoutSubcommand(self):
        with self.assertRaises(DuplicatedOptionNameError) as context:
            parse_args(["prog", "-x", "-x"], "run")
        self.assertEqual(context.exception.option_name, "-x")

    def testValueBeforeOptionNameRaises(self):
        with self.assertRaises(OptionValueBeforeOptionNameError) as context:
            parse_args(["prog", "build", "stray", "-v"], "run")
        self.assertEqual(context.exception.option_value, "stray")
        self.assertEqual(context.exception.index, 2)
        self.assertIn("second position", str(context.exception))

    def testNonStringTokenRejected(self):
        with self.assertRaises(TypeError):
            parse_args(["prog", 1], "run")


class TestDispatch(TestCase):
    """Behavioral tests for dispatch."""

    def testHandlerReceivesNameOptionsAndReporter(self):
        received = []
        reporter = ConsoleReporter(console=capture())

        def build(name, options, reporter):
            received.append((name, options, reporter))
            return "done"

        command = ParsedCommand("build", {"-out": ["a.bin"]})
        self.assertEqual(dispatch(command, {"build": build}, reporter), "done")
        self.assertEqual(received, [("build", {"-out": ["a.bin"]}, reporter)])

    def testHandlerGetsACopyOfTheOptions(self):
        command = ParsedCommand("build", {"-out": ["a.bin"]})

        def build(name, options, reporter):
            options["-out"].append("b.bin")

        dispatch(command, {"build": build}, ConsoleReporter(console=capture()))
        self.assertEqual(command.options, {"-out": ["a.bin"]})

    def testUnknownSubcommandRaises(self):
        with self.assertRaises(NoMatchingSubcommandError) as context:
            dispatch(ParsedCommand("bild"), {"build": print}, ConsoleReporter(console=capture()))
        self.assertEqual(context.exception.subcommand_name, "bild")


class TestReporterOptions(TestCase):
    """Behavioral tests for '-det' and '-lim'."""

    def testShowDetails(self):
        self.assertTrue(read_show_details({"-det": []}))
        self.assertFalse(read_show_details({"-v": []}))

    def testLimitDefault(self):
        self.assertEqual(read_log_limit({}), 20)
        self.assertEqual(read_log_limit({}, default=3), 3)

    def testLimitNumber(self):
        self.assertEqual(read_log_limit({"-lim": ["5"]}), 5)
        self.assertEqual(read_log_limit({"-lim": ["0"]}), 0)

    def testLimitNo(self):
        self.assertIsNone(read_log_limit({"-lim": ["no"]}))

    def testLimitRejectsBadValues(self):
        for values in ([], ["1", "2"], ["x"], ["-1"], ["+3"], [" 3"]):
            with self.subTest(values=values):
                with self.assertRaises(InvalidLogLimitError):
                    read_log_limit({"-lim": values})


class TestRunCommand(TestCase):
    """Behavioral tests for the run_command pipeline."""

    def setUp(self):
        self.console = capture()
        self.calls = []

    def handler(self, name, options, reporter):
        self.calls.append((name, options, reporter))

    def invoke(self, argv, **options):
        options.setdefault("langpack", Langpack.builtin("en"))
        return run_command("run", {"run": self.handler, "build": self.handler}, argv, console=self.console, **options)

    @property
    def output(self):
        return self.console.file.getvalue()

    def testSuccessfulRun(self):
        self.assertEqual(self.invoke(["prog", "build", "-out", "a.bin"]), 0)
        name, options, reporter = self.calls[0]
        self.assertEqual(name, "build")
        self.assertEqual(options, {"-out": ["a.bin"]})
        self.assertEqual(reporter.limit, 20)
        self.assertEqual(self.output, "")

    def testLimitOptionConfiguresReporter(self):
        self.assertEqual(self.invoke(["prog", "-lim", "no"]), 0)
        self.assertIsNone(self.calls[0][2].limit)

    def testParseFaultReportedOnce(self):
        self.assertEqual(self.invoke(["prog", "build", "-v", "-v"]), 1)
        self.assertEqual(self.calls, [])
        self.assertEqual(self.output, "[err] duplicated option name\n    option name: -v\n\n")

    def testUnknownSubcommandReported(self):
        self.assertEqual(self.invoke(["prog", "deploy"]), 1)
        self.assertEqual(self.output, "[err] no matching subcommand name\n    subcommand name: deploy\n\n")

    def testUnknownSubcommandWithDetails(self):
        self.assertEqual(self.invoke(["prog", "deploy", "-det"]), 1)
        self.assertIn("[note] details\n", self.output)
        self.assertIn("specification: https://ches.gant.work/en/spec/console/command/error/3485/index.html", self.output)

    def testInvalidLimitReported(self):
        self.assertEqual(self.invoke(["prog", "-lim", "many"]), 1)
        self.assertEqual(self.calls, [])
        self.assertTrue(self.output.startswith("[err] invalid log limit\n    option value: many\n"))

    def testHandlerFaultReported(self):
        def handler(name, options, reporter):
            raise NoMatchingSubcommandError("nested")

        status = run_command("run", {"run": handler}, ["prog"], console=self.console, langpack=Langpack.builtin("en"))
        self.assertEqual(status, 1)
        self.assertIn("subcommand name: nested", self.output)

    def testMissingRootVariableReported(self):
        status = run_command("run", {"run": self.handler}, ["prog"], console=self.console, environ={})
        self.assertEqual(status, 1)
        self.assertEqual(self.calls, [])
        self.assertIn("[err] failed to get environment variable\n    environment variable: CHES_HOME\n", self.output)

    def testLanguagePackFileLoaded(self):
        with tempfile.TemporaryDirectory() as root:
            directory = os.path.join(root, "lib", "lang")
            os.makedirs(directory)
            with open(os.path.join(directory, "en.lang"), "w", encoding="utf-8") as file:
                file.write("cmd.err.3485 unknown command\n")
            status = run_command("run", {"run": self.handler}, ["prog", "nope"], console=self.console, environ={"CHES_HOME": root})
        self.assertEqual(status, 1)
        # file entry overrides the built-in title, built-in label still applies
        self.assertEqual(self.output, "[err] unknown command\n    subcommand name: nope\n\n")

    def testLanguageWithoutBuiltinMessages(self):
        with tempfile.TemporaryDirectory() as root:
            directory = os.path.join(root, "lib", "lang")
            os.makedirs(directory)
            with open(os.path.join(directory, "fr.lang"), "w", encoding="utf-8") as file:
                file.write("cmd.err.3485 sous-commande inconnue\n")
            status = run_command(
                "run", {"run": self.handler}, ["prog", "nope"],
                language="fr", console=self.console, environ={"CHES_HOME": root},
            )
        self.assertEqual(status, 1)
        # keys missing from the file fall back to the English table
        self.assertEqual(self.output, "[err] sous-commande inconnue\n    subcommand name: nope\n\n")

    def testMissingLanguagePackFileReported(self):
        with tempfile.TemporaryDirectory() as root:
            status = run_command("run", {"run": self.handler}, ["prog"], console=self.console, environ={"CHES_HOME": root})
        self.assertEqual(status, 1)
        self.assertIn("[err] path does not exist\n", self.output)
        self.assertIn("en.lang", self.output)


if __name__ == "__main__":
    unittest.main()
