"""Primitive kinds and their boxed value types.

Member parameters may be annotated with a primitive kind such as
:class:`IntKind`. Primitive kinds are never instantiated; values that flow
into such parameters are instances of the paired boxed type (``Integer`` for
``IntKind``). The pairing is a fixed bijection of eight kinds.

Example:
    >>> class Counter:
    ...     def add(self, amount: IntKind) -> Integer:
    ...         ...
    >>> wrapper_type(IntKind)
    <class 'memberkit.kinds.Integer'>
"""

from typing import Optional

__all__ = [
    "Primitive",
    "BooleanKind",
    "ByteKind",
    "CharKind",
    "ShortKind",
    "IntKind",
    "LongKind",
    "FloatKind",
    "DoubleKind",
    "Boolean",
    "Byte",
    "Character",
    "Short",
    "Integer",
    "Long",
    "Float",
    "Double",
    "PRIMITIVE_TO_BOXED",
    "BOXED_TO_PRIMITIVE",
    "is_primitive",
    "wrapper_type",
    "primitive_type",
    "wrapped_if_primitive",
]


class Primitive:
    """Base class of the primitive kinds. Kinds describe parameters, never values."""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"Primitive kind {cls.__name__} cannot be instantiated")


class BooleanKind(Primitive):
    pass


class ByteKind(Primitive):
    pass


class CharKind(Primitive):
    pass


class ShortKind(Primitive):
    pass


class IntKind(Primitive):
    pass


class LongKind(Primitive):
    pass


class FloatKind(Primitive):
    pass


class DoubleKind(Primitive):
    pass


class Boolean(int):
    """Boxed boolean. ``bool`` cannot be subclassed, so this is an ``int``."""

    def __new__(cls, value=False):
        return super().__new__(cls, bool(value))

    def __repr__(self):
        return repr(bool(self))

    __str__ = __repr__


class Byte(int):
    pass


class Character(str):
    def __new__(cls, value):
        if len(value) != 1:
            raise ValueError(f"Character requires a single character, got {value!r}")
        return super().__new__(cls, value)


class Short(int):
    pass


class Integer(int):
    pass


class Long(int):
    pass


class Float(float):
    pass


class Double(float):
    pass


PRIMITIVE_TO_BOXED: dict[type, type] = {
    BooleanKind: Boolean,
    ByteKind: Byte,
    CharKind: Character,
    ShortKind: Short,
    IntKind: Integer,
    LongKind: Long,
    FloatKind: Float,
    DoubleKind: Double,
}

BOXED_TO_PRIMITIVE: dict[type, type] = {
    boxed: primitive for primitive, boxed in PRIMITIVE_TO_BOXED.items()
}


def is_primitive(t: type) -> bool:
    return t in PRIMITIVE_TO_BOXED


def wrapper_type(t: type) -> Optional[type]:
    """Return the boxed type of a primitive kind, or None if ``t`` is not one."""
    return PRIMITIVE_TO_BOXED.get(t)


def primitive_type(t: type) -> Optional[type]:
    """Return the primitive kind of a boxed type, or None if ``t`` is not one."""
    return BOXED_TO_PRIMITIVE.get(t)


def wrapped_if_primitive(t: type) -> type:
    return PRIMITIVE_TO_BOXED.get(t, t)
