"""
chescli command layer: argv → subcommand + options, then dispatch.

What this module provides
- ParsedCommand: subcommand name plus an option map (option key → list of values).
- parse_args(argv, default_subcommand): classify argv tokens.
- dispatch(command, handlers, reporter): call the handler registered for the subcommand.
- read_show_details / read_log_limit: reporter settings carried by the option map.
- run_command(default_subcommand, handlers, ...): the whole pipeline, reporting any
  fault as exactly one diagnostic and returning an exit status.

Token rules
- argv[0] is the program path and is never inspected.
- argv[1], when it does not start with '-', names the subcommand; otherwise the
  default subcommand is used and argv[1] is read as an option token.
- a token starting with '-' opens an option key ('-out'); the following non '-'
  tokens are its values, in order, until the next key. a key may have no values.
- a key repeated in one argv is a DuplicatedOptionNameError; a value with no key
  before it is an OptionValueBeforeOptionNameError. both abort the parse.

Quick start
    from chescli import run_command

    def build(name, options, reporter):
        ...

    if __name__ == "__main__":
        raise SystemExit(run_command("build", {"build": build}))
"""
import logging
import re
import sys
from collections.abc import Mapping

from . import files
from .console import DEFAULT_LIMIT, ConsoleReporter
from .faults import (
    CommandError,
    DuplicatedOptionNameError,
    Fault,
    FileError,
    InvalidLogLimitError,
    NoMatchingSubcommandError,
    OptionValueBeforeOptionNameError,
    report,
)
from .langpack import Langpack
from .messages import DEFAULT_LANGUAGE, LANGUAGES
from .utils import Unset, nullify

logger = logging.getLogger(__name__)

OPTION_MARKER = "-"
DETAILS_OPTION = "-det"
LIMIT_OPTION = "-lim"
NO_LIMIT = "no"


class ParsedCommand:
    """
    result of parse_args().

    fields
    - subcommand_name: str
    - options: dict[str, list[str]]; keys are the option tokens as written ('-out').
    """
    __slots__ = ("subcommand_name", "options")

    def __init__(self, subcommand_name, options=None):
        self.subcommand_name = subcommand_name
        self.options = {} if options is None else options

    def __eq__(self, other):
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return (self.subcommand_name, self.options) == (other.subcommand_name, other.options)

    def __repr__(self):
        return "ParsedCommand(%r, %r)" % (self.subcommand_name, self.options)


def is_option(token, /):
    return token.startswith(OPTION_MARKER)


def parse_args(argv, default_subcommand, /):
    """
    classify argv into a ParsedCommand.

    parameters
    - argv: Sequence[str] including the program path at index 0, or Unset for sys.argv.
    - default_subcommand: name used when argv[1] is missing or is an option token.

    raises
    - DuplicatedOptionNameError: an option key appears twice.
    - OptionValueBeforeOptionNameError: a value token appears before any option key.
    """
    argv = list(nullify(argv, sys.argv))
    for token in argv:
        if not isinstance(token, str):
            raise TypeError("parse_args() argv must contain only strings")

    if len(argv) <= 1:
        return ParsedCommand(default_subcommand)

    subcommand_name = default_subcommand
    start = 1
    if not is_option(argv[1]):
        subcommand_name = argv[1]
        start = 2

    options = {}
    key = None
    for index in range(start, len(argv)):
        token = argv[index]
        if is_option(token):
            if token in options:
                raise DuplicatedOptionNameError(token, index)
            options[key := token] = []
        elif key is None:
            raise OptionValueBeforeOptionNameError(token, index)
        else:
            options[key].append(token)

    return ParsedCommand(subcommand_name, options)


def dispatch(command, handlers, reporter, /):
    """
    call handlers[command.subcommand_name](subcommand_name, options, reporter).

    the handler receives its own copy of the option map. returns the handler's result.

    raises
    - NoMatchingSubcommandError: no handler is registered under the subcommand name.
    """
    if not isinstance(handlers, Mapping):
        raise TypeError("dispatch() handlers must be a mapping of names to callables")
    try:
        handler = handlers[command.subcommand_name]
    except KeyError:
        raise NoMatchingSubcommandError(command.subcommand_name) from None
    if not callable(handler):
        raise TypeError("handler for %r is not callable" % command.subcommand_name)

    options = {key: list(values) for key, values in command.options.items()}
    logger.debug("dispatching %r with %d option(s)", command.subcommand_name, len(options))
    return handler(command.subcommand_name, options, reporter)


def read_show_details(options, /):
    return DETAILS_OPTION in options


def read_log_limit(options, /, default=DEFAULT_LIMIT):
    """
    log limit requested through '-lim'.

    - absent       → default
    - '-lim no'    → None (unlimited)
    - '-lim <n>'   → n (non-negative decimal integer)

    raises
    - InvalidLogLimitError: not exactly one value, or a value that is neither 'no'
      nor a non-negative integer.
    """
    try:
        values = options[LIMIT_OPTION]
    except KeyError:
        return default
    if len(values) != 1:
        raise InvalidLogLimitError(values)
    value = values[0]
    if value == NO_LIMIT:
        return None
    if not re.fullmatch(r"[0-9]+", value):
        raise InvalidLogLimitError(values)
    return int(value)


def run_command(default_subcommand, handlers, argv=Unset, /, *, language=DEFAULT_LANGUAGE, langpack=Unset, console=Unset, environ=None):
    """
    load the language pack, parse argv, configure the reporter and dispatch.

    parameters
    - default_subcommand: see parse_args().
    - handlers: Mapping[str, Callable[[str, dict[str, list[str]], ConsoleReporter], object]].
    - argv: Sequence[str] (program path first) or Unset for sys.argv.
    - language: built-in message language and language pack file name. a language
      with no built-in table uses the default one as the base layer.
    - langpack: Langpack to use as-is; when Unset, the built-in messages for `language`
      are layered under $CHES_HOME/lib/lang/<language>.lang.
    - console: rich Console for the reporter (stdout by default).
    - environ: mapping used instead of os.environ to locate CHES_HOME.

    returns
    - 0 when the handler ran, 1 when a fault was reported. a fault raised by the
      handler itself (CommandError / FileError) is reported the same way.
    """
    # languages without built-in messages fall back to the default table under their pack
    builtin = Langpack.builtin(language if language in LANGUAGES else DEFAULT_LANGUAGE)
    reporter = ConsoleReporter(nullify(langpack, builtin), console=console)

    if langpack is Unset:
        try:
            path = files.get_langpack_path(language, environ)
            reporter.langpack = Langpack.load(path, base=reporter.langpack)
        except FileError as fault:
            report(fault, reporter)
            return 1

    try:
        command = parse_args(argv, default_subcommand)
    except CommandError as fault:
        report(fault, reporter)
        return 1

    show_details = read_show_details(command.options)
    try:
        reporter.limit = read_log_limit(command.options)
    except InvalidLogLimitError as fault:
        report(fault, reporter, show_details)
        return 1

    try:
        dispatch(command, handlers, reporter)
    except Fault as fault:
        report(fault, reporter, show_details)
        return 1
    return 0


__all__ = (
    "DETAILS_OPTION",
    "LIMIT_OPTION",
    "NO_LIMIT",
    "ParsedCommand",
    "parse_args",
    "dispatch",
    "read_show_details",
    "read_log_limit",
    "run_command",
)
