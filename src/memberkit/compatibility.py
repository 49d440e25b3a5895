"""Judges deciding whether a formal parameter type accepts a supplied type."""

from typing import Sequence

from memberkit.kinds import is_primitive, primitive_type, wrapped_if_primitive

__all__ = [
    "exactly_equivalent",
    "compatible",
    "matches_parameter_types",
    "accepts_argument_types",
    "boxing_conversions",
    "has_more_specific_types",
]


def exactly_equivalent(first_type: type, second_type: type) -> bool:
    """True if the types are identical or form a primitive/boxed pair, in either order."""
    return (
        first_type is second_type
        or is_primitive(first_type) and primitive_type(second_type) is first_type
        or is_primitive(second_type) and primitive_type(first_type) is second_type
    )


def compatible(param_type: type, arg_type: type) -> bool:
    """True if a value of ``arg_type`` can be passed for a parameter of ``param_type``.

    Primitive kinds accept only their own boxed type; anything else accepts its subclasses.
    """
    if exactly_equivalent(param_type, arg_type):
        return True
    if is_primitive(param_type) or is_primitive(arg_type):
        return False
    return issubclass(arg_type, param_type)


def matches_parameter_types(
    declared_types: Sequence[type], specified_types: Sequence[type], first_parameter: int
) -> bool:
    return all(
        exactly_equivalent(declared, specified)
        for declared, specified in zip(declared_types[first_parameter:], specified_types)
    )


def accepts_argument_types(
    declared_types: Sequence[type], arg_types: Sequence[type], first_parameter: int
) -> bool:
    return all(
        compatible(declared, arg_type)
        for declared, arg_type in zip(declared_types[first_parameter:], arg_types)
    )


def boxing_conversions(param_types: Sequence[type], arg_types: Sequence[type]) -> int:
    """Count positions where a parameter only accepts its argument through boxing."""
    return sum(
        1
        for param_type, arg_type in zip(param_types, arg_types)
        if param_type is not arg_type
        and wrapped_if_primitive(param_type) is wrapped_if_primitive(arg_type)
    )


def has_more_specific_types(
    current_types: Sequence[type], previous_types: Sequence[type]
) -> bool:
    """Decide whether one parameter vector is strictly more specific than another.

    Primitive kinds are compared as their boxed types. The current vector is more
    specific when the vectors differ somewhere and, at every position where they
    differ, the current type is a subclass of the previous one.

    Example:
        >>> has_more_specific_types((bool,), (int,))
        True
        >>> has_more_specific_types((IntKind,), (Integer,))
        False
    """
    if len(current_types) != len(previous_types):
        return False

    differs = False

    for current, previous in zip(current_types, previous_types):
        current = wrapped_if_primitive(current)
        previous = wrapped_if_primitive(previous)

        if current is previous:
            continue
        if not issubclass(current, previous):
            return False
        differs = True

    return differs
