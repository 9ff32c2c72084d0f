"""
Destinations for parsed values.

A registered option writes into a caller-owned place. Python has no references to
plain variables, so a place is expressed as one of:

- Ref(value)            a standalone mutable cell, read back through .value
- (object, "name")      an attribute of any object (namespaces, dataclasses, modules)
- (mapping, key)        an item of any mutable mapping (dicts, os.environ-like stores)

slot() normalizes all of them into a Slot with get()/set(). Registries never hold
anything else.
"""
from collections.abc import MutableMapping


class Slot:
    """
    Base destination: one readable/writable place.

    Subclasses implement get() and set(value).
    """
    __slots__ = ()

    def get(self):
        raise NotImplementedError

    def set(self, value):
        raise NotImplementedError


class Ref(Slot):
    """
    Standalone mutable cell.

    >>> count = Ref(0)
    >>> count.value
    0
    """
    __slots__ = ("value",)

    def __init__(self, value=None):
        self.value = value

    def get(self):
        return self.value

    def set(self, value):
        self.value = value

    def __repr__(self):
        return "Ref(%r)" % (self.value,)

    def __eq__(self, other):
        if isinstance(other, Ref):
            return self.value == other.value
        return NotImplemented

    __hash__ = None


class AttributeSlot(Slot):
    __slots__ = ("target", "name")

    def __init__(self, target, name):
        if not isinstance(name, str):
            raise TypeError("attribute name must be a string")
        self.target = target
        self.name = name

    def get(self):
        return getattr(self.target, self.name, None)

    def set(self, value):
        setattr(self.target, self.name, value)

    def __repr__(self):
        return "AttributeSlot(%s.%s)" % (type(self.target).__name__, self.name)


class ItemSlot(Slot):
    __slots__ = ("target", "key")

    def __init__(self, target, key):
        self.target = target
        self.key = key

    def get(self):
        return self.target.get(self.key)

    def set(self, value):
        self.target[self.key] = value

    def __repr__(self):
        return "ItemSlot(%r)" % (self.key,)


def slot(destination, /):
    """
    Normalize a destination into a Slot.

    accepted forms
    - Slot (including Ref) → returned as-is
    - (MutableMapping, key) → ItemSlot
    - (object, str) → AttributeSlot

    errors
    - TypeError for anything else.
    """
    if isinstance(destination, Slot):
        return destination
    if isinstance(destination, tuple) and len(destination) == 2:
        target, name = destination
        if isinstance(target, MutableMapping):
            return ItemSlot(target, name)
        return AttributeSlot(target, name)
    raise TypeError("destination must be a Slot, a Ref, or a (target, name) pair, not %s" % type(destination).__name__)


__all__ = (
    "Slot",
    "Ref",
    "AttributeSlot",
    "ItemSlot",
    "slot",
)
