"""
Flagship converters: textual argument → typed value.

Overview
- Converter: interface with two methods
  • convert(text) → typed value, raising ValueError/TypeError when text does not parse.
  • annotate(default) → the " <default: ...>" suffix shown in help for that default.
- One implementation per supported kind: IntegerConverter, FloatConverter,
  StringConverter, BooleanConverter, plus CallableConverter for any other type.
- Setter / Toggle: a converter bound to a destination slot. The registry maps each
  option code to one of these, giving every option the same call shape
  setter(text) regardless of the destination type.

Leniency
- Setter swallows conversion errors and leaves the destination untouched. This is the
  documented behavior of the engine: a malformed value is not a parse failure.
"""
import logging

from .utils import Unset

logger = logging.getLogger(__name__)


class Converter:
    """
    interface: parse one textual argument into a value of a single type.
    """
    __slots__ = ()

    def convert(self, text):
        raise NotImplementedError

    def annotate(self, default):
        return " <default: %s>" % (default,)

    def __repr__(self):
        return "%s()" % type(self).__name__


class IntegerConverter(Converter):
    __slots__ = ()

    def convert(self, text):
        return int(text)

    def annotate(self, default):
        return super().annotate(default) if default else ""


class FloatConverter(Converter):
    __slots__ = ()

    def convert(self, text):
        return float(text)

    def annotate(self, default):
        return super().annotate(default) if default else ""


class StringConverter(Converter):
    __slots__ = ()

    def convert(self, text):
        return text

    def annotate(self, default):
        return super().annotate(default) if default else ""


class BooleanConverter(Converter):
    """
    booleans accept 1/0, true/false, yes/no and on/off (case-insensitive).

    help text always shows " <switch>", whatever the default.
    """
    __slots__ = ()

    truthy = frozenset(("1", "true", "yes", "on"))
    falsy = frozenset(("0", "false", "no", "off"))

    def convert(self, text):
        folded = text.strip().lower()
        if folded in self.truthy:
            return True
        if folded in self.falsy:
            return False
        raise ValueError("invalid boolean literal %r" % text)

    def annotate(self, default):
        return " <switch>"


class CallableConverter(Converter):
    """
    fallback for any other destination type: calls `factory(text)`.
    """
    __slots__ = ("factory",)

    def __init__(self, factory):
        if not callable(factory):
            raise TypeError("converter factory must be callable")
        self.factory = factory

    def convert(self, text):
        return self.factory(text)

    def __repr__(self):
        return "CallableConverter(%s)" % getattr(self.factory, "__qualname__", repr(self.factory))


_BUILTINS = {
    bool: BooleanConverter,
    int: IntegerConverter,
    float: FloatConverter,
    str: StringConverter,
}


def converter(type=Unset, default=Unset, /):
    """
    pick the converter for an option.

    resolution
    - an explicit Converter instance is used as-is.
    - an explicit type wins over the default's type.
    - bool/int/float/str map onto their dedicated converters (bool is checked
      before int since it is a subclass of it).
    - any other type (or callable) goes through CallableConverter.
    - with neither type nor default, values are kept as strings.
    """
    if isinstance(type, Converter):
        return type
    if type is Unset:
        if default is Unset or default is None:
            return StringConverter()
        type = default.__class__
    try:
        return _BUILTINS[type]()
    except (KeyError, TypeError):
        return CallableConverter(type)


class Setter:
    """
    a converter bound to a destination slot.

    calling the setter with the raw text converts it and stores the result; when the
    conversion fails the destination keeps its previous value.
    """
    __slots__ = ("converter", "slot", "name")

    def __init__(self, converter, slot, name=""):
        self.converter = converter
        self.slot = slot
        self.name = name

    def __call__(self, text):
        try:
            value = self.converter.convert(text)
        except Exception as error:
            logger.debug("ignoring %r for %s: %s", text, self.name, error)
            return False
        self.slot.set(value)
        return True

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.converter, self.slot)


class Toggle(Setter):
    """
    switch setter: every call inverts the destination, the text is ignored.
    """
    __slots__ = ()

    def __init__(self, slot, name=""):
        super().__init__(BooleanConverter(), slot, name)

    def __call__(self, text):
        self.slot.set(not self.slot.get())
        return True


__all__ = (
    "Converter",
    "IntegerConverter",
    "FloatConverter",
    "StringConverter",
    "BooleanConverter",
    "CallableConverter",
    "converter",
    "Setter",
    "Toggle",
)
