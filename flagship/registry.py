"""
Flagship option registry.

Overview
- Registry: declare typed options once, parse argv into their destinations, and
  render a usage text from what was declared.
  • add(destination, short, long, descr, default, group, *, type): value option.
  • add_switch(destination, short, long, descr, default, group): boolean toggle.
  • parse(args): scan argv, dispatch each recognized option to its setter.
  • usage() / print_usage(): help text (see flagship.usage for the layout rules).
- OptionSpec: immutable record of one registered option.

Option codes
- an option with a short flag is keyed by ord(short);
- long-only options get codes from 256 upward, one per registration, so they can
  never collide with a short flag.

Errors
- registration mistakes (duplicate or malformed flags) raise ConfigurationError
  subclasses before anything is recorded, so the registry is left as it was.
- command-line mistakes make parse() return False and land in Registry.faults.
- values that do not convert are ignored; the destination keeps its value.

Quick example:
    >>> from flagship import Registry, Ref
    >>> count, verbose = Ref(), Ref()
    >>> options = Registry("usage: tool [options]\\n\\n")
    >>> _ = options.add(count, "c", "count", "how many times", 1)
    >>> _ = options.add_switch(verbose, "v", "verbose", "chatty output")
    >>> options.parse(["--count", "5", "-v"])
    True
    >>> count.value, verbose.value
    (5, True)
"""
import logging
import shlex
import sys
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType

from rich.console import Console

from .converters import BooleanConverter, Converter, Setter, Toggle, converter
from .faults import DuplicateFlagError, DuplicateLongFlagError, MalformedFlagError, ParseFault
from .scanner import Kind, Match, Operand, OptionTable, scan
from .slots import Slot, slot
from .usage import render_line, render_usage, tty_width
from .utils import Unset, typename

logger = logging.getLogger(__name__)

# first code handed to long-only options, above every single-byte short flag
FIRST_LONG_CODE = 256


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """one registered option."""
    code: int
    kind: Kind
    short: str | None
    long: str | None
    descr: str
    group: str
    default: object
    converter: Converter
    slot: Slot

    @property
    def flags(self):
        """the option's spellings, short first."""
        return tuple(flag for flag in ("-%s" % self.short if self.short else None,
                                       "--%s" % self.long if self.long else None) if flag)


def _indent(name, value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("%s must be an integer, not %s" % (name, typename(value)))
    if value < 0:
        raise ValueError("%s must not be negative" % name)
    return value


def _check_short(short):
    if short is Unset or short is None or short == "" or short == "\0":
        return None
    if not isinstance(short, str):
        raise TypeError("short flag must be a string, not %s" % typename(short))
    if len(short) != 1 or not short.isascii() or not short.isprintable() or short in "-:= ":
        raise MalformedFlagError(
            "bad short flag %r" % short,
            title="malformed flag",
            flag=short,
            hint="use a single printable ascii character other than '-', ':' and '='",
        )
    return short


def _check_long(long):
    if long is Unset or long is None or long == "":
        return None
    if not isinstance(long, str):
        raise TypeError("long flag must be a string, not %s" % typename(long))
    if long.startswith("-") or "=" in long or any(char.isspace() for char in long):
        raise MalformedFlagError(
            "bad long flag %r" % long,
            title="malformed flag",
            flag=long,
            hint="drop the leading dashes and avoid '=' and whitespace (for example: 'dry-run')",
        )
    return long


class Registry:
    """
    option registry and parser.

    configuration
    - header: free text printed verbatim before the option groups.
    - indent_flag: spaces before the flag token (default 2).
    - indent_description: column where descriptions start (default 18).
    - console: rich Console used for terminal width detection and print_usage().

    results of the last parse()
    - operands: non-option tokens, in order.
    - faults: the ParseFault that stopped parsing (empty on success).
    """

    def __init__(self, header="", /, *, indent_flag=2, indent_description=18, console=None):
        if not isinstance(header, str):
            raise TypeError("header must be a string, not %s" % typename(header))
        self.header = header
        self.indent_flag = indent_flag
        self.indent_description = indent_description
        self.console = console if console is not None else Console(stderr=True)

        self._table = OptionTable()
        self._longs = set()
        self._setters = {}
        self._options = {}
        self._usage = defaultdict(list)
        self._optval = FIRST_LONG_CODE

        self.operands = []
        self.faults = []

    @property
    def indent_flag(self):
        return self._indent_flag

    @indent_flag.setter
    def indent_flag(self, value):
        self._indent_flag = _indent("indent_flag", value)

    @property
    def indent_description(self):
        return self._indent_description

    @indent_description.setter
    def indent_description(self, value):
        self._indent_description = _indent("indent_description", value)

    @property
    def options(self):
        """registered options by code, in registration order."""
        return MappingProxyType(self._options)

    @property
    def optstring(self):
        return self._table.optstring

    def __len__(self):
        return len(self._options)

    def __contains__(self, flag):
        if not isinstance(flag, str):
            return False
        if flag.startswith("--"):
            return flag[2:] in self._longs
        return len(flag) == 2 and flag[0] == "-" and flag[1] in self._table.shorts

    def __repr__(self):
        return "<Registry options=%d optstring=%r>" % (len(self), self.optstring)

    def add(self, destination, short=Unset, long="", descr="", default=Unset, group="", *, type=Unset):
        """
        register a value-taking option.

        parameters
        - destination: Slot/Ref or (target, name) pair receiving the parsed value.
        - short: single character, or Unset/None/"" for none.
        - long: long name without dashes, or "" for none.
        - descr: help text; an empty description keeps the option out of usage().
        - default: written to the destination right away and shown in help. When
          Unset, the destination's current value is kept and used as the default.
        - group: usage section ("" and "_" are unlabeled).
        - type: converter selection (bool/int/float/str, any callable, or a
          Converter); defaults to the type of `default`.

        returns the OptionSpec, or None when neither short nor long was given.
        """
        destination = slot(destination)
        if default is Unset:
            default = destination.get()
        return self._register(Kind.VALUE, destination, short, long, descr, default, group, converter(type, default))

    def add_switch(self, destination, short=Unset, long="", descr="", default=False, group=""):
        """
        register a boolean switch; each occurrence on the command line inverts it.
        """
        return self._register(Kind.SWITCH, slot(destination), short, long, descr, bool(default), group, BooleanConverter())

    def _register(self, kind, destination, short, long, descr, default, group, converter):
        short = _check_short(short)
        long = _check_long(long)
        if not isinstance(descr, str):
            raise TypeError("description must be a string, not %s" % typename(descr))
        if not isinstance(group, str):
            raise TypeError("group must be a string, not %s" % typename(group))

        if not short and not long:
            logger.debug("ignoring option without short or long flag (descr=%r)", descr)
            return None

        if short and ord(short) in self._setters:
            raise DuplicateFlagError(
                "duplicate flag '-%s'" % short,
                title="duplicate flag",
                flag=short,
                hint="every short flag can be registered only once",
            )
        if long and long in self._longs:
            raise DuplicateLongFlagError(
                "duplicate long flag '--%s'" % long,
                title="duplicate long flag",
                flag=long,
                hint="every long flag can be registered only once",
            )

        if short:
            code = ord(short)
        else:
            code = self._optval
            self._optval += 1

        name = "/".join(flag for flag in ("-%s" % short if short else "", "--%s" % long if long else "") if flag)
        setter = Toggle(destination, name) if kind is Kind.SWITCH else Setter(converter, destination, name)
        destination.set(default)

        self._table.add(code, kind, short, long)
        if long:
            self._longs.add(long)
        self._setters[code] = setter
        self._options[code] = spec = OptionSpec(code, kind, short, long, descr, group, default, converter, destination)

        if descr:
            self._usage[group].append(render_line(
                short,
                long,
                descr + converter.annotate(default),
                width=tty_width(self.console),
                indent_flag=self.indent_flag,
                indent_description=self.indent_description,
            ))

        logger.debug("registered %s option %s (code=%d, group=%r)", kind.value, name, code, group)
        return spec

    def parse(self, args=None, /):
        """
        scan `args` (default: sys.argv[1:]; a string is split shell-style) and
        apply every recognized option.

        returns True when every token was understood, False at the first unknown,
        ambiguous or value-less option. the failure is kept in self.faults;
        options applied before it stay applied.
        """
        if args is None:
            args = sys.argv[1:]
        elif isinstance(args, str):
            args = shlex.split(args)

        self.operands = []
        self.faults = []

        for event in scan(self._table, args):
            match event:
                case Match(code, text):
                    self._setters[code](text)
                case Operand(token):
                    self.operands.append(token)
                case ParseFault():
                    self.faults.append(event)
                    logger.debug("parse failed: %s", event)
                    return False
        return True

    def usage(self):
        """the usage text, assembled from the current registry state."""
        return render_usage(self.header, self._usage)

    def print_usage(self, file=None):
        """print usage() verbatim to `file` (default: the registry console)."""
        console = self.console if file is None else Console(file=file)
        console.print(self.usage(), end="", markup=False, highlight=False, emoji=False, soft_wrap=True)

    def print_faults(self, file=None):
        """render the faults of the last parse() through rich."""
        console = self.console if file is None else Console(file=file)
        for fault in self.faults:
            console.print(fault)


__all__ = (
    "FIRST_LONG_CODE",
    "OptionSpec",
    "Registry",
)
