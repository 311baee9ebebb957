"""
chescli console reporter: rate-limited, translated diagnostics on standard output.

Output shape (one entry)
    [err] duplicated option name
        option name: -out

- the '[kind]' tag is colored per kind (err red, warn yellow, note blue); hosts can
  restyle tags through a __styles__ mapping in __main__ or the `styles` argument.
- the title and every NORMAL description are translated through the reporter's
  Langpack; OPTIONAL descriptions are only shown by a follow-up "details" notice.
- a blank line separates entries.

Log limit
- limit=None disables limiting; limit=n allows n entries.
- the entry that reaches the limit is printed and immediately followed by a single
  "log limit exceeded" notice; from then on every log() call is silently dropped.
- the limit can only be changed before the first entry is printed; suppression is
  permanent for the reporter.
- the notice is printed by the internal render step, so it never goes through the
  limit check itself.

States (limited reporters)
    count < limit    active
    count == limit   only reachable with limit=0 before the first call: the next
                     call prints the notice and nothing else
    suppressed       the notice was printed (terminal)
"""
import copy
import logging
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .langpack import Langpack
from .logs import ConsoleLog, LogKind
from .utils import Unset, nullify

logger = logging.getLogger(__name__)

stdout = Console(highlight=False)

DEFAULT_LIMIT = 20
INDENT = "    "

LIMIT_TITLE = "{^console.note.4768}"
LIMIT_DESCRIPTION = "{^console.log_limit}: %s"
DETAILS_TITLE = "{^cmd.note.5720}"


def _check_limit(limit):
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
        raise TypeError("log limit must be an integer or None")
    if limit is not None and limit < 0:
        raise ValueError("log limit must be non-negative")
    return limit


class ConsoleReporter:
    """
    stateful diagnostic sink.

    parameters
    - langpack: Langpack used to translate titles and descriptions (empty by default).
    - limit: int >= 0 or None (unlimited). defaults to DEFAULT_LIMIT.
    - console: rich Console to print to (the module-level `stdout` console by default).
    - styles: tag → rich style overrides, e.g. {"err": "bold red"}.
    """

    def __init__(self, langpack=Unset, /, *, limit=DEFAULT_LIMIT, console=Unset, styles=Unset):
        langpack = nullify(langpack, Langpack.empty())
        if not isinstance(langpack, Langpack):
            raise TypeError("langpack must be a Langpack")

        main = __import__("__main__")

        self.langpack = langpack
        self.console = nullify(console, stdout)
        self.styles = defaultdict(str, {
            kind.tag: kind.color for kind in LogKind
        } | getattr(main, "__styles__", {}) | nullify(styles, {}))
        self._limit = _check_limit(limit)
        self._count = 0
        self._suppressed = False

    @property
    def limit(self):
        return self._limit

    @limit.setter
    def limit(self, limit):
        # the limit only changes before the first entry; suppression is never undone
        if self._count:
            raise RuntimeError("log limit cannot change after %d entries were printed" % self._count)
        self._limit = _check_limit(limit)

    @property
    def count(self):
        """
        number of entries printed so far (the limit notice included).
        """
        return self._count

    @property
    def suppressed(self):
        return self._suppressed

    def log(self, entry, /, show_details=False):
        """
        print one entry, respecting the log limit.

        with show_details, the entry is followed by a "details" notice carrying the
        same descriptions with their visibility inverted, so hidden (OPTIONAL) lines
        show up there. that notice counts against the limit like any other entry and
        is skipped when the entry itself exhausted the limit.
        """
        if not isinstance(entry, ConsoleLog):
            raise TypeError("log() argument must be a ConsoleLog")
        if not self._admit(entry):
            return
        if show_details:
            self._admit(copy.replace(
                entry,
                kind=LogKind.NOTICE,
                title=DETAILS_TITLE,
                descriptions=entry.inverted(),
            ))

    def _admit(self, entry):
        # returns False once the reporter stops accepting entries
        if self._limit is None:
            self._render(entry)
            return True
        if self._suppressed:
            return False
        if self._count < self._limit:
            self._render(entry)
        if self._count == self._limit:
            logger.debug("log limit %d reached", self._limit)
            self._render(ConsoleLog(LogKind.NOTICE, LIMIT_TITLE, [LIMIT_DESCRIPTION % self._limit]))
            self._suppressed = True
            return False
        return True

    def _render(self, entry):
        translate = self.langpack.translate
        tag = entry.kind.tag

        self.console.print(
            Text.assemble(("[%s]" % tag, self.styles[tag]), " ", translate(entry.title)),
            soft_wrap=True,
        )
        for description in entry.descriptions:
            if description.visible:
                self.console.print(Text.assemble(INDENT, translate(description.text), description.literal), soft_wrap=True)
        self.console.print()

        self._count += 1

    def __repr__(self):
        limit = "no limit" if self._limit is None else self._limit
        return "ConsoleReporter(count=%d, limit=%s, %r)" % (self._count, limit, self.langpack)


__all__ = (
    "DEFAULT_LIMIT",
    "ConsoleReporter",
    "stdout",
)
