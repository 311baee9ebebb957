"""
chescli faults (command and file errors) and their diagnostics.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing fault.
  The code is part of the message key ('{^cmd.err.1943}') and of the documentation
  link, so codes never change once published.
- CommandError: faults raised while turning argv into a command and dispatching it.
- FileError: faults raised by the filesystem collaborator (chescli.files).
- every fault knows how to describe itself as exactly one ConsoleLog via __log__():
  ERROR kind, a translatable title, one NORMAL line naming the offending value and
  one OPTIONAL line carrying the documentation link (shown with "show details").
- report(): central entry point to surface a fault through a ConsoleReporter.

Integration
- library code raises; the boundary (commands.run_command, or the host tool) catches
  CommandError / FileError and calls report(fault, reporter, show_details).
- the process is never terminated here; exit codes belong to the caller.
"""
from enum import IntEnum

from .logs import ConsoleLog, Description, LogKind
from .utils import ordinal

DOCS_URL = "https://ches.gant.work/en/spec/console/%s/error/%s/index.html"


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - command (cmd.err.xxxx)
      • DUPLICATED_OPTION_NAME, OPTION_VALUE_BEFORE_OPTION_NAME,
        NO_MATCHING_SUBCOMMAND, INVALID_LOG_LIMIT
    - file (file.err.xxxx)
      • PATH_NOT_DIRECTORY, FILE_OPEN_FAILURE, PATH_NOT_FILE, INVALID_PATH,
        FILE_READ_FAILURE, PATH_NOT_EXISTS, ENVIRONMENT_VARIABLE_FAILURE
    """
    # --- command ---
    DUPLICATED_OPTION_NAME          = 1943
    NO_MATCHING_SUBCOMMAND          = 3485
    INVALID_LOG_LIMIT               = 7095
    OPTION_VALUE_BEFORE_OPTION_NAME = 9534

    # --- file ---
    PATH_NOT_DIRECTORY              = 77
    FILE_OPEN_FAILURE               = 117
    PATH_NOT_FILE                   = 2160
    INVALID_PATH                    = 2711
    FILE_READ_FAILURE               = 3995
    PATH_NOT_EXISTS                 = 8531
    ENVIRONMENT_VARIABLE_FAILURE    = 9798

    def normalize(self):
        """
        four-digit, zero-padded form used in message keys and links (77 → '0077').
        """
        return "%04d" % self.value


class Fault(Exception):
    """
    base of every chescli fault.

    subclasses declare:
    - domain: message/link domain ('cmd' or 'file').
    - code: FaultCode.
    - label: message key of the description label ('cmd.option_name').
    - subject: name of the attribute holding the offending value.
    """
    domain = None
    code = None
    label = None
    subject = None

    def __log__(self):
        code = self.code.normalize()
        title = "{^%s.err.%s}" % (self.domain, code)
        descriptions = []
        if self.subject is not None:
            # the value is printed verbatim, never translated
            value = str(getattr(self, self.subject))
            descriptions.append(Description("{^%s}: " % self.label, literal=value))
        link = DOCS_URL % (_LINK_DOMAINS[self.domain], code)
        descriptions.append("?{^console.spec_link}: %s" % link)
        return ConsoleLog(LogKind.ERROR, title, descriptions)


_LINK_DOMAINS = {
    "cmd": "command",
    "file": "file",
}


class CommandError(Fault):
    domain = "cmd"


class DuplicatedOptionNameError(CommandError):
    code = FaultCode.DUPLICATED_OPTION_NAME
    label = "cmd.option_name"
    subject = "option_name"

    def __init__(self, option_name, index):
        super().__init__("duplicated option name %r at %s position" % (option_name, ordinal(index)))
        self.option_name = option_name
        self.index = index


class OptionValueBeforeOptionNameError(CommandError):
    code = FaultCode.OPTION_VALUE_BEFORE_OPTION_NAME
    label = "cmd.option_value"
    subject = "option_value"

    def __init__(self, option_value, index):
        super().__init__("option value %r at %s position comes before any option name" % (option_value, ordinal(index)))
        self.option_value = option_value
        self.index = index


class NoMatchingSubcommandError(CommandError):
    code = FaultCode.NO_MATCHING_SUBCOMMAND
    label = "cmd.subcmd_name"
    subject = "subcommand_name"

    def __init__(self, subcommand_name):
        super().__init__("no handler for subcommand %r" % subcommand_name)
        self.subcommand_name = subcommand_name


class InvalidLogLimitError(CommandError):
    code = FaultCode.INVALID_LOG_LIMIT
    label = "cmd.option_value"
    subject = "option_value"

    def __init__(self, values):
        self.values = tuple(values)
        self.option_value = " ".join(self.values)
        super().__init__("log limit expects one non-negative integer or 'no', got %r" % (self.values,))


class FileError(Fault):
    domain = "file"
    label = "file.path"
    subject = "path"

    def __init__(self, path):
        super().__init__("%s: %s" % (self.reason, path))
        self.path = str(path)


class PathNotExistsError(FileError):
    code = FaultCode.PATH_NOT_EXISTS
    reason = "path does not exist"


class PathNotFileError(FileError):
    code = FaultCode.PATH_NOT_FILE
    reason = "expected file path not directory path"


class PathNotDirectoryError(FileError):
    code = FaultCode.PATH_NOT_DIRECTORY
    reason = "expected directory path not file path"


class FileOpenError(FileError):
    code = FaultCode.FILE_OPEN_FAILURE
    reason = "failed to open file"


class FileReadError(FileError):
    code = FaultCode.FILE_READ_FAILURE
    reason = "failed to read file"


class InvalidPathError(FileError):
    code = FaultCode.INVALID_PATH
    reason = "invalid path"


class EnvironmentVariableError(FileError):
    code = FaultCode.ENVIRONMENT_VARIABLE_FAILURE
    label = "file.env_var_name"
    subject = "var_name"

    def __init__(self, var_name):
        Fault.__init__(self, "failed to get environment variable %s" % var_name)
        self.var_name = var_name


def report(fault, reporter, /, show_details=False):
    """
    surface a fault as one diagnostic.

    contract
    - fault must provide a callable __log__() returning a ConsoleLog.
    - the entry goes through reporter.log(), so the log limit applies to it.
    """
    if not hasattr(fault, "__log__") or not callable(fault.__log__):
        raise TypeError("report() argument must have a __log__ method")
    reporter.log(fault.__log__(), show_details)


__all__ = (
    "FaultCode",
    "Fault",
    "CommandError",
    "DuplicatedOptionNameError",
    "OptionValueBeforeOptionNameError",
    "NoMatchingSubcommandError",
    "InvalidLogLimitError",
    "FileError",
    "PathNotExistsError",
    "PathNotFileError",
    "PathNotDirectoryError",
    "FileOpenError",
    "FileReadError",
    "InvalidPathError",
    "EnvironmentVariableError",
    "report",
)
