"""Lookup of the single handler member of a delegate or invocation handler."""

import logging
from typing import Any, Optional

from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import Member
from memberkit.errors import AmbiguousHandlerError, NoHandlerFoundError
from memberkit.introspection import ancestors, declared_members
from memberkit.invocation import Delegate, Invocation
from memberkit.invoker import invoke_member_forwarding
from memberkit.parameters import arguments_with_extra_first_value, member_signature

__all__ = ["find_non_private_handler_member", "invoke_delegate"]

logger = logging.getLogger(__name__)


def find_non_private_handler_member(
    handler: Any, config: ReflectionConfig = DEFAULT_CONFIG
) -> Member:
    """Find the one public instance member of a handler object's class.

    Each class in the handler's chain is examined on its own, most derived first.
    The first class declaring any public instance member must declare exactly one.

    Args:
        handler: The handler object.
        config: Engine settings; supplies the root type and diagnostic prefixes.

    Returns:
        The handler member.

    Raises:
        AmbiguousHandlerError: If one class declares more than one eligible member.
        NoHandlerFoundError: If no class in the chain declares an eligible member.
    """
    handler_type = type(handler)

    for level in ancestors(handler_type, config.root_type):
        found = _find_handler_member_in_type(level, handler_type, config)
        if found is not None:
            logger.debug("Found handler member %s for %s", found, handler_type.__qualname__)
            return found

    raise NoHandlerFoundError("No non-private instance method found")


def invoke_delegate(
    handler: Any,
    invocation: Invocation,
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """Call a handler's single member in place of an original invocation.

    When the handler member's first parameter is the context type, the
    invocation is passed to it ahead of ``args``. Failures raised by the handler
    propagate unchanged.
    """
    handler_member = find_non_private_handler_member(handler, config)
    parameter_types = handler_member.parameter_types

    if len(parameter_types) == len(args) + 1 and parameter_types[0] is config.context_type:
        args = tuple(arguments_with_extra_first_value(args, invocation))

    return invoke_member_forwarding(handler, handler_member, *args)


def _find_handler_member_in_type(
    cls: type, handler_type: type, config: ReflectionConfig
) -> Optional[Member]:
    found: Optional[Member] = None

    for declared in declared_members(cls):
        if declared.is_private or declared.is_static:
            continue

        if found is not None:
            handler_kind = "delegate" if issubclass(handler_type, Delegate) else "invocation handler"
            raise AmbiguousHandlerError(
                f"More than one candidate {handler_kind} method found: "
                f"{member_signature(found, config)}, {member_signature(declared, config)}"
            )

        found = declared

    return found
