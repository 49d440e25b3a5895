"""Resolve-and-invoke entry points.

These functions combine argument adaptation, member resolution and invocation
for callers that hold a class, a member name and arguments rather than a
resolved :class:`~memberkit.domain.Member`.

Example:
    >>> class Calculator:
    ...     @member("add")
    ...     def add_ints(self, a: IntKind, b: IntKind) -> int:
    ...         return a + b
    >>> invoke_compatible(Calculator, Calculator(), "add", Integer(1), Integer(2))
    3
"""

from typing import Any, Optional, Sequence

from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import NOT_AVAILABLE, Member
from memberkit.introspection import declared_members
from memberkit.invoker import invoke_member, invoke_member_forwarding
from memberkit.parameters import argument_types_from_values
from memberkit.resolver import (
    find_compatible_member,
    find_compatible_static_member,
    find_specified_member,
)

__all__ = [
    "invoke",
    "invoke_with_checked_throws",
    "invoke_compatible",
    "invoke_static",
    "invoke_public_if_available",
    "find_public_member",
]


def invoke(
    cls: type,
    target: Optional[Any],
    name: str,
    param_types: Sequence[type],
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """Invoke the member with exactly the given parameter types.

    Arguments may be None, since their types are not derived from their values.
    Checked failures raised by the member are wrapped.

    Args:
        cls: The class where the search starts.
        target: The receiver, or None for a static member.
        name: The member name.
        param_types: The member's parameter types, excluding any leading context parameter.
        *args: The arguments to pass.
        config: Engine settings.

    Raises:
        ArgumentMismatchError: If no such member exists or the arguments cannot be bound.
        UnexpectedCheckedError: If the member raised a checked failure.
    """
    member = find_specified_member(cls, name, param_types, config)
    return invoke_member(target, member, *args, config=config)


def invoke_with_checked_throws(
    cls: type,
    target: Optional[Any],
    name: str,
    param_types: Sequence[type],
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """As :func:`invoke`, but every failure raised by the member propagates unchanged."""
    member = find_specified_member(cls, name, param_types, config)
    return invoke_member_forwarding(target, member, *args)


def invoke_compatible(
    cls: type,
    target: Optional[Any],
    name: str,
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """Invoke the most specific member able to accept the given arguments.

    Argument types are taken from the argument values; a class passed as an
    argument stands for an argument of that type whose value is None. Without a
    target only static members may be invoked.

    Raises:
        ArgumentMismatchError: If an argument is None, or no compatible member exists.
        InstanceRequiredError: If ``target`` is None and the best member is an instance member.
        UnexpectedCheckedError: If the member raised a checked failure.
    """
    arg_types, adapted_args = argument_types_from_values(args)

    if target is None:
        member = find_compatible_static_member(cls, name, arg_types, config)
    else:
        member = find_compatible_member(cls, name, arg_types, config)

    return invoke_member(target, member, *adapted_args, config=config)


def invoke_static(
    cls: type, name: str, *args: Any, config: ReflectionConfig = DEFAULT_CONFIG
) -> Any:
    return invoke_compatible(cls, None, name, *args, config=config)


def find_public_member(
    cls: type, name: str, param_types: Sequence[type]
) -> Optional[Member]:
    """Find a public member declared with exactly the given parameter types.

    No specificity ranking and no primitive/boxed equivalence apply; the first
    match in the class's method resolution order is returned.
    """
    wanted = tuple(param_types)

    for level in cls.__mro__:
        for declared in declared_members(level):
            if (
                declared.name == name
                and not declared.is_private
                and declared.parameter_types == wanted
            ):
                return declared

    return None


def invoke_public_if_available(
    cls: type,
    target: Optional[Any],
    name: str,
    param_types: Sequence[type],
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """Invoke a public member if one with exactly the given signature exists.

    Returns:
        The member's result, or ``NOT_AVAILABLE`` if there is no such member.
    """
    member = find_public_member(cls, name, param_types)

    if member is None:
        return NOT_AVAILABLE

    return invoke_member(target, member, *args, config=config)
