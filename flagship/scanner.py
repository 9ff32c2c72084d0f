"""
Flagship scanner: getopt_long-style tokenization of argv.

Overview
- OptionTable: explicit record of what the scanner accepts. Built incrementally by
  the registry (one add() per option) and handed to scan(); no module-level state.
- scan(table, args): generator over the argument vector yielding
  • Match(code, text, token) for every recognized option occurrence,
  • Operand(token) for every non-option token,
  • a ParseFault instance on the first structural failure, after which it stops.

Syntax
- short: -x, -xVALUE, -x VALUE, clusters of switches -abc (a value option ends the
  cluster and takes the rest of the token as its value).
- long: --name, --name=VALUE, --name VALUE (value options only); switches accept
  an inline --name=VALUE whose value is passed through but carries no meaning.
- long names may be abbreviated to any unambiguous prefix; exact matches win.
- "--" ends option scanning, "-" alone is an operand, operands may appear anywhere.
"""
import difflib
from collections import deque, namedtuple
from enum import Enum

from .faults import AmbiguousSwitchError, MissingValueError, UnknownSwitchError


class Kind(Enum):
    """argument policy of an option."""
    VALUE = "value"    # requires an argument
    SWITCH = "switch"  # no argument (short) / optional inline argument (long)


Match = namedtuple("Match", ("code", "text", "token"))
Operand = namedtuple("Operand", ("token",))


class OptionTable:
    """
    lookup tables for the scanner.

    fields
    - shorts: char → (code, kind)
    - longs: name → (code, kind), in registration order
    """
    __slots__ = ("shorts", "longs")

    def __init__(self):
        self.shorts = {}
        self.longs = {}

    def add(self, code, kind, short=None, long=None):
        if short:
            self.shorts[short] = (code, kind)
        if long:
            self.longs[long] = (code, kind)

    @property
    def optstring(self):
        """getopt-style short option string ("c:" for value options, "v" for switches)."""
        return "".join(char + ":" * (kind is Kind.VALUE) for char, (_, kind) in self.shorts.items())

    def __repr__(self):
        return "OptionTable(optstring=%r, longs=%r)" % (self.optstring, tuple(self.longs))

    def resolve(self, name):
        """
        find a long option by exact name or unambiguous prefix.

        returns (name, code, kind); raises KeyError when unknown and LookupError
        carrying the candidates when the prefix is ambiguous.
        """
        if name in self.longs:
            return (name, *self.longs[name])
        candidates = [long for long in self.longs if name and long.startswith(name)]
        if len(candidates) == 1:
            return (candidates[0], *self.longs[candidates[0]])
        if candidates:
            raise LookupError(candidates)
        raise KeyError(name)


def _unknown(table, token, flag):
    choices = ["--" + long for long in table.longs] + ["-" + short for short in table.shorts]
    suggestions = difflib.get_close_matches(flag, choices, 5)
    try:
        hint = "did you mean %r?" % suggestions[0]
    except IndexError:
        hint = "check the usage text for the available options"
    return UnknownSwitchError(
        "unknown option %r" % flag,
        title="unknown option",
        token=token,
        flag=flag,
        suggestions=tuple(suggestions),
        hint=hint,
    )


def _missing(token, flag):
    return MissingValueError(
        "option %r requires a value" % flag,
        title="missing value",
        token=token,
        flag=flag,
        hint="pass it inline or as the next argument (for example: %s VALUE)" % flag,
    )


def scan(table, args, /):
    tokens = deque(args)
    while tokens:
        token = tokens.popleft()

        if token == "--":
            # everything after the terminator is positional
            yield from map(Operand, tokens)
            return

        if token.startswith("--"):
            name, separator, value = token[2:].partition("=")
            try:
                long, code, kind = table.resolve(name)
            except KeyError:
                yield _unknown(table, token, "--" + name)
                return
            except LookupError as error:
                candidates = error.args[0]
                yield AmbiguousSwitchError(
                    "option '--%s' is ambiguous (%s)" % (name, ", ".join("--" + c for c in candidates)),
                    title="ambiguous option",
                    token=token,
                    flag="--" + name,
                    candidates=tuple(candidates),
                    hint="spell out more of the name, for example '--%s'" % candidates[0],
                )
                return

            if kind is Kind.VALUE and not separator:
                if not tokens:
                    yield _missing(token, "--" + long)
                    return
                value = tokens.popleft()
            yield Match(code, value, token)

        elif token.startswith("-") and token != "-":
            for index in range(1, len(token)):
                char = token[index]
                try:
                    code, kind = table.shorts[char]
                except KeyError:
                    yield _unknown(table, token, "-" + char)
                    return
                if kind is Kind.SWITCH:
                    yield Match(code, "", token)
                    continue
                # value option: the rest of the token, else the next one
                if rest := token[index + 1:]:
                    yield Match(code, rest, token)
                elif tokens:
                    yield Match(code, tokens.popleft(), token)
                else:
                    yield _missing(token, "-" + char)
                    return
                break

        else:
            yield Operand(token)


__all__ = (
    "Kind",
    "Match",
    "Operand",
    "OptionTable",
    "scan",
)
