"""
Language packs: key → text tables that resolve '{^key}' placeholders.

File format
- plain text, one property per line: '<key> <value>'.
- the key ends at the first space; the value is the rest of the line, verbatim
  (internal and trailing spaces included).
- lines without a space, or starting with a space (empty key), are ignored.
- a key defined twice keeps its last value.

Placeholders
- '{^' + one or more of [A-Za-z0-9._-] + '}' inside any template.
- a placeholder whose key the pack knows is replaced by the value; any other
  placeholder, and every character outside placeholders, is kept as-is.
"""
import logging
import re
from types import MappingProxyType

from . import files, messages

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{\^(?P<key>[A-Za-z0-9._-]+)\}")


class Langpack:
    """
    immutable key → value table used to translate message templates.

    construction
    - Langpack.empty(): no entries; translate() returns templates unchanged.
    - Langpack.builtin(language): the built-in message table for one language.
    - Langpack.load(path, base=...): a language pack file, optionally layered over
      another pack (the file wins on shared keys).
    - Langpack(mapping): from any mapping of str → str.
    """
    __slots__ = ("_entries",)

    def __init__(self, entries=(), /):
        entries = dict(entries)
        for key, value in entries.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError("langpack entries must map strings to strings")
        self._entries = MappingProxyType(entries)

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def builtin(cls, language=messages.DEFAULT_LANGUAGE, /):
        return cls(messages.lookup(language))

    @classmethod
    def load(cls, path, /, *, base=None):
        """
        load a language pack file.

        parameters
        - path: file to read (via chescli.files.read_lines).
        - base: Langpack | None; its entries are applied first, so the file only
          overrides the keys it defines.

        errors
        - FileError subclasses raised by read_lines, unchanged.
        """
        entries = dict(base.entries) if base is not None else {}
        for line in files.read_lines(path):
            key, separator, value = line.partition(" ")
            if not separator or not key:
                continue
            entries[key] = value
        logger.debug("loaded language pack %s (%d entries)", path, len(entries))
        return cls(entries)

    @property
    def entries(self):
        return self._entries

    def get(self, key, default=None, /):
        return self._entries.get(key, default)

    def translate(self, template, /):
        """
        replace every resolvable '{^key}' placeholder in `template`.

        the template is scanned once; substituted values are not scanned again, and
        unknown placeholders stay verbatim, so translating an already translated
        string with no resolvable placeholders returns it unchanged.
        """
        if not isinstance(template, str):
            raise TypeError("translate() argument must be a string")

        def substitute(match):
            return self._entries.get(match["key"], match[0])

        return PLACEHOLDER.sub(substitute, template)

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)

    def __eq__(self, other):
        if not isinstance(other, Langpack):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return "Langpack(%d entries)" % len(self._entries)


__all__ = (
    "PLACEHOLDER",
    "Langpack",
)
