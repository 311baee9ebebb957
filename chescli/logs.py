"""
chescli diagnostic entries.

What this module provides
- LogKind: severity of an entry (error, warning, notice) with its console tag and color.
- Visibility: whether a description line is shown by default (NORMAL) or only when
  details are requested (OPTIONAL).
- Description: one translatable description line plus its visibility.
- ConsoleLog: one reportable event (kind, translatable title, ordered descriptions).
- log(kind, title, *descriptions): shorthand builder; a description string with a
  leading '?' becomes OPTIONAL.

Lifecycle
- entries are immutable values. producers (faults, handlers) build them, a
  ConsoleReporter consumes each one exactly once and does not keep it.
- titles and descriptions are templates; '{^key}' placeholders are resolved by the
  reporter's Langpack at render time, never at construction.

Examples
    >>> entry = log("error", "{^cmd.err.1943}", "{^cmd.option_name}: -o", "?see the manual")
    >>> entry.kind is LogKind.ERROR
    True
    >>> [d.visibility for d in entry.descriptions]
    [<Visibility.NORMAL: 'normal'>, <Visibility.OPTIONAL: 'optional'>]
"""
from enum import Enum


class LogKind(Enum):
    """
    severity of a diagnostic entry.

    each kind owns its console tag ("err", "warn", "note") and the rich color used
    for that tag (red, yellow, blue).
    """
    ERROR = "err"
    WARNING = "warn"
    NOTICE = "note"

    @property
    def tag(self):
        return self.value

    @property
    def color(self):
        return _COLORS[self]

    @classmethod
    def resolve(cls, x, /):
        """
        accept a LogKind or one of its names/tags ("error", "ERROR", "err").
        """
        if isinstance(x, cls):
            return x
        if not isinstance(x, str):
            raise TypeError("log kind must be a LogKind or a string")
        try:
            return cls[x.upper()]
        except KeyError:
            pass
        try:
            return cls(x.lower())
        except ValueError:
            raise ValueError("unknown log kind %r" % x) from None


_COLORS = {
    LogKind.ERROR: "red",
    LogKind.WARNING: "yellow",
    LogKind.NOTICE: "blue",
}


class Visibility(Enum):
    NORMAL = "normal"
    OPTIONAL = "optional"

    def invert(self):
        return Visibility.OPTIONAL if self is Visibility.NORMAL else Visibility.NORMAL


class Description:
    """
    one translatable description line of a ConsoleLog.

    `literal` is appended after the translated text as-is; it carries values
    (option names, paths) that must never be read as placeholders.
    """
    __slots__ = ("text", "visibility", "literal")

    def __init__(self, text, visibility=Visibility.NORMAL, literal=""):
        if not isinstance(text, str):
            raise TypeError("description text must be a string")
        if not isinstance(visibility, Visibility):
            raise TypeError("description visibility must be a Visibility")
        if not isinstance(literal, str):
            raise TypeError("description literal must be a string")
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "visibility", visibility)
        object.__setattr__(self, "literal", literal)

    @classmethod
    def parse(cls, x, /):
        """
        build a Description from a string; a leading '?' marks it OPTIONAL and is removed.
        """
        if isinstance(x, cls):
            return x
        if not isinstance(x, str):
            raise TypeError("description must be a Description or a string")
        if x.startswith("?"):
            return cls(x[1:], Visibility.OPTIONAL)
        return cls(x)

    @property
    def visible(self):
        return self.visibility is Visibility.NORMAL

    def invert(self):
        return type(self)(self.text, self.visibility.invert(), self.literal)

    def __setattr__(self, name, value, /):
        raise AttributeError("description is read-only")

    def __eq__(self, other):
        if not isinstance(other, Description):
            return NotImplemented
        return (self.text, self.visibility, self.literal) == (other.text, other.visibility, other.literal)

    def __hash__(self):
        return hash((self.text, self.visibility, self.literal))

    def __repr__(self):
        if self.literal:
            return "Description(%r, %s, literal=%r)" % (self.text, self.visibility, self.literal)
        return "Description(%r, %s)" % (self.text, self.visibility)


class ConsoleLog:
    """
    one reportable event.

    fields
    - kind: LogKind
    - title: str (template)
    - descriptions: tuple[Description, ...] (ordered)

    copy.replace(entry, **changes) is supported and is how derived entries (such as
    the detail notice of a ConsoleReporter) are produced.
    """
    __slots__ = ("kind", "title", "descriptions")

    def __init__(self, kind, title, descriptions=()):
        if not isinstance(title, str):
            raise TypeError("log title must be a string")
        object.__setattr__(self, "kind", LogKind.resolve(kind))
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "descriptions", tuple(map(Description.parse, descriptions)))

    def inverted(self):
        """
        descriptions with every visibility flipped (NORMAL ↔ OPTIONAL).
        """
        return tuple(description.invert() for description in self.descriptions)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        fields = {"kind": self.kind, "title": self.title, "descriptions": self.descriptions}
        return type(self)(**{**fields, **overrides})

    def __setattr__(self, name, value, /):
        raise AttributeError("log entry is read-only")

    def __eq__(self, other):
        if not isinstance(other, ConsoleLog):
            return NotImplemented
        return (
            (self.kind, self.title, self.descriptions) ==
            (other.kind, other.title, other.descriptions)
        )

    def __hash__(self):
        return hash((self.kind, self.title, self.descriptions))

    def __repr__(self):
        return "ConsoleLog(%s, %r, %r)" % (self.kind, self.title, list(self.descriptions))


def log(kind, title, /, *descriptions):
    """
    shorthand for ConsoleLog(kind, title, descriptions).

    - kind may be a LogKind or its name ("error", "warning", "notice").
    - each description may be a Description or a string ('?' prefix → OPTIONAL).
    """
    return ConsoleLog(kind, title, descriptions)


__all__ = (
    "LogKind",
    "Visibility",
    "Description",
    "ConsoleLog",
    "log",
)
