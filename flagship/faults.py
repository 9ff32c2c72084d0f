"""
Flagship faults (configuration errors and parse faults) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the engine reports.
  Codes are grouped by domain so logs and searches stay predictable.
- FlagshipException: base type carrying a message plus read-only options, able to
  render itself through rich (__rich__).
- ConfigurationError family: programmer mistakes detected while registering options.
  These are raised synchronously and are never recoverable.
- ParseFault family: problems in the user's command line. The registry records them
  in Registry.faults and reports failure through the return value of parse(); they
  are never raised by the engine itself.

Conversion failures (e.g. "abc" for an integer option) are not faults at all: the
destination keeps its previous value.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - configuration (2110x)
      • DUPLICATE_FLAG, DUPLICATE_LONG_FLAG, MALFORMED_FLAG
    - parsing (2120x)
      • UNKNOWN_SWITCH, AMBIGUOUS_SWITCH, MISSING_VALUE
    """
    # --- configuration errors (211xx) ---
    DUPLICATE_FLAG      = 21101
    DUPLICATE_LONG_FLAG = 21102
    MALFORMED_FLAG      = 21103

    # --- parse faults (212xx) ---
    UNKNOWN_SWITCH      = 21201
    AMBIGUOUS_SWITCH    = 21202
    MISSING_VALUE       = 21203


class FlagshipException(Exception):
    """
    base fault: a message plus arbitrary read-only context.

    well-known options
    - code: FaultCode of the fault.
    - title: short lowercase headline used when rendering.
    - hint: one-sentence actionable advice (optional).
    - token/flag: the offending text.
    """
    code = Unset

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType({"code": self.code} | options)

    def __getattr__(self, name):
        try:
            return self.__dict__["options"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __str__(self):
        return self.message

    def __rich__(self):
        styles = defaultdict(str, {
            "code": "bold #00E5FF",
            "title": "bold #FF4DA6",
            "message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(__import__("__main__"), "__styles__", {}))

        header = Text.assemble(
            "[ ",
            (str(self.options["code"].value if self.options["code"] else "?"), styles["code"]),
            " | ",
            (self.options.get("title", type(self).__name__).title(), styles["title"]),
            " ]"
        )
        renders = [header, Text(self.message, styles["message"])]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble((" → ", styles["hint-arrow"]), (hint, styles["hint"])))
        return Group(*renders)


class ConfigurationError(FlagshipException): ...
class DuplicateFlagError(ConfigurationError):
    code = FaultCode.DUPLICATE_FLAG
class DuplicateLongFlagError(ConfigurationError):
    code = FaultCode.DUPLICATE_LONG_FLAG
class MalformedFlagError(ConfigurationError):
    code = FaultCode.MALFORMED_FLAG


class ParseFault(FlagshipException): ...
class UnknownSwitchError(ParseFault):
    code = FaultCode.UNKNOWN_SWITCH
class AmbiguousSwitchError(ParseFault):
    code = FaultCode.AMBIGUOUS_SWITCH
class MissingValueError(ParseFault):
    code = FaultCode.MISSING_VALUE


__all__ = (
    "FaultCode",
    "FlagshipException",
    "ConfigurationError",
    "DuplicateFlagError",
    "DuplicateLongFlagError",
    "MalformedFlagError",
    "ParseFault",
    "UnknownSwitchError",
    "AmbiguousSwitchError",
    "MissingValueError",
)
