"""
Flagship utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the registry, the scanner and the usage formatter.

Overview
- UnsetType / Unset
  • Singleton sentinel meaning "not provided" (no short code, no explicit type, no default).
  • Falsey, printable as "Unset", and non-subclassable.

- typename(object)
  • Readable type label used in log records and fault messages.
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    A short code of "\\0" or None would be ambiguous with user data, so the
    registry uses Unset to tell "no short flag" and "no explicit default" apart
    from anything the caller might legitimately pass.
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


def typename(object, /):
    """
    Return the qualified name of the type of `object` (or of `object` itself when it is a type).
    """
    cls = object if isinstance(object, type) else type(object)
    if cls.__module__ in ("builtins", None):
        return cls.__qualname__
    return "%s.%s" % (cls.__module__, cls.__qualname__)


__all__ = (
    "UnsetType",
    "Unset",
    "typename",
)
