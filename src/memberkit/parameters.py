"""Conversion of argument values into type vectors, and their rendering."""

from typing import Any, Sequence

from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import Member, type_name
from memberkit.errors import ArgumentMismatchError
from memberkit.introspection import mocked_type

__all__ = [
    "argument_types_from_values",
    "arguments_with_extra_first_value",
    "index_of_first_real_parameter",
    "parameter_types_description",
    "member_signature",
    "type_name",
]


def argument_types_from_values(args: Sequence[Any]) -> tuple[tuple[type, ...], list[Any]]:
    """Derive the type vector used to match members from argument values.

    A class passed as an argument states the type of that position directly;
    the argument actually passed for it is then None.

    Args:
        args: The caller's argument values.

    Returns:
        The argument types and the arguments to pass on invocation.

    Raises:
        ArgumentMismatchError: If an argument is None, since no type can be derived from it.
    """
    arg_types = []
    adapted_args = list(args)

    for i, arg in enumerate(args):
        if arg is None:
            raise ArgumentMismatchError(f"Invalid null value passed as argument {i}")

        if isinstance(arg, type):
            arg_types.append(arg)
            adapted_args[i] = None
        else:
            arg_types.append(mocked_type(arg))

    return tuple(arg_types), adapted_args


def arguments_with_extra_first_value(args: Sequence[Any], first_value: Any) -> list[Any]:
    return [first_value, *args]


def index_of_first_real_parameter(
    declared_types: Sequence[type],
    supplied_types: Sequence[type],
    context_type: type,
) -> int:
    """Work out where matching starts in a member's formal parameters.

    Returns:
        0 when the arities match, 1 when the member has exactly one extra leading
        parameter of the context type, and -1 when the member cannot match.
    """
    extra_parameters = len(declared_types) - len(supplied_types)

    if extra_parameters == 1:
        return 1 if declared_types[0] is context_type else -1

    if extra_parameters != 0:
        return -1

    return 0


def parameter_types_description(
    param_types: Sequence[type], config: ReflectionConfig = DEFAULT_CONFIG
) -> str:
    """Render a type vector for diagnostics, e.g. ``(int, Integer)``."""
    return "(" + ", ".join(type_name(t, config) for t in param_types) + ")"


def member_signature(member: Member, config: ReflectionConfig = DEFAULT_CONFIG) -> str:
    """Render a member as ``name(param, ...) -> return`` for diagnostics."""
    signature = member.name + parameter_types_description(member.parameter_types, config)
    if member.return_type is not None:
        signature += " -> " + type_name(member.return_type, config)
    return signature
