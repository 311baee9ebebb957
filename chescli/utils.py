"""
chescli utilities (internal helpers).

Scope
- UnsetType / Unset
  • singleton sentinel for "value not provided", distinct from None, 0 or "".
  • used as the default of optional keyword parameters (argv, reporter, console)
    where None already carries a meaning (None is the unlimited log limit).
- nullify(object, default)
  • materialize Unset into a concrete default while passing everything else through.
- ordinal(number)
  • English ordinal label used by position-aware fault messages.

Quick examples
    >>> nullify(Unset, "fallback")
    'fallback'
    >>> nullify(None, "fallback") is None
    True
    >>> ordinal(2)
    'second'
"""
import functools
from typing import final


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process-wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden to preserve semantics.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def nullify(object, default=None, /):
    """
    return `default` when `object` is Unset; otherwise return `object` unchanged.

    falsey values such as None, 0 or "" are preserved; only the sentinel is replaced.
    """
    return default if object is Unset else object


_ORDINALS = (
    "zeroth", "first", "second", "third", "fourth", "fifth",
    "sixth", "seventh", "eighth", "ninth", "tenth",
)


def ordinal(number, /):
    """
    english ordinal for a 0-based argv position (1 → "first", 12 → "12th").
    """
    if not isinstance(number, int) or number < 0:
        raise ValueError("ordinal() argument must be a non-negative integer")
    try:
        return _ORDINALS[number]
    except IndexError:
        pass
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return "%d%s" % (number, suffix)


__all__ = (
    "UnsetType",
    "Unset",
    "nullify",
    "ordinal",
)
