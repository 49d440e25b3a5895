"""Invocation of resolved members.

Two variants differ only in what a caller observes when the invoked member
raises:

- :func:`invoke_member` lets errors and unchecked failures through unchanged and
  raises checked failures as :class:`~memberkit.errors.UnexpectedCheckedError`.
- :func:`invoke_member_forwarding` lets every failure through unchanged.

Both report a failure to bind the arguments as
:class:`~memberkit.errors.ArgumentMismatchError`.
"""

import inspect
import logging
from typing import Any, Callable, Optional, Sequence

from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import Member
from memberkit.errors import (
    ArgumentMismatchError,
    FailureKind,
    MemberAccessError,
    UnexpectedCheckedError,
)
from memberkit.kinds import is_primitive
from memberkit.stack_trace import filter_stack_trace

__all__ = [
    "ensure_accessible",
    "failure_kind",
    "invoke_member",
    "invoke_member_forwarding",
]

logger = logging.getLogger(__name__)


def failure_kind(failure: BaseException, config: ReflectionConfig = DEFAULT_CONFIG) -> FailureKind:
    """Classify a failure raised from inside an invoked member."""
    if not isinstance(failure, Exception):
        return FailureKind.TARGET_RAISED_ERROR
    if isinstance(failure, config.checked_exceptions):
        return FailureKind.TARGET_RAISED_CHECKED
    return FailureKind.TARGET_RAISED_UNCHECKED


def ensure_accessible(member: Member) -> None:
    """Make a member callable, once.

    The member's descriptor must bind to a callable on its declaring type. After
    the first success the member's accessibility flag stays set, so later calls,
    from any thread, return immediately.

    Raises:
        MemberAccessError: If the descriptor refuses to bind or yields a non-callable.
    """
    if member.is_accessible:
        return

    try:
        bound = member.descriptor.__get__(None, member.declaring_type)
    except (AttributeError, PermissionError) as e:
        raise MemberAccessError(f"Cannot access member {member}") from e

    if not callable(bound):
        raise MemberAccessError(f"Member {member} is not callable")

    member._accessible.set()
    logger.debug("Relaxed access checks for %s", member)


def invoke_member(
    target: Optional[Any],
    member: Member,
    *args: Any,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Any:
    """Invoke a member, wrapping checked failures it raises.

    Args:
        target: The receiver, or None for a static member.
        member: The member to invoke.
        *args: The arguments, excluding the receiver.
        config: Engine settings; decides which failures are checked.

    Returns:
        Whatever the member returns.

    Raises:
        ArgumentMismatchError: If the arguments cannot be bound to the member.
        MemberAccessError: If the member cannot be made callable.
        UnexpectedCheckedError: If the member raised a checked failure.
    """
    bound = _bind(target, member, args)

    try:
        return bound(*args)
    except Exception as failure:
        if failure_kind(failure, config) is FailureKind.TARGET_RAISED_CHECKED:
            raise UnexpectedCheckedError(
                f"{member} raised {type(failure).__name__}: {failure}"
            ) from failure
        raise


def invoke_member_forwarding(
    target: Optional[Any],
    member: Member,
    *args: Any,
) -> Any:
    """Invoke a member, letting every failure it raises through unchanged.

    Raises:
        ArgumentMismatchError: If the arguments cannot be bound to the member.
        MemberAccessError: If the member cannot be made callable.
    """
    return _bind(target, member, args)(*args)


def _bind(target: Optional[Any], member: Member, args: Sequence[Any]) -> Callable:
    ensure_accessible(member)

    try:
        return _bound_callable(target, member, args)
    except TypeError as e:
        raise ArgumentMismatchError(
            f"Failure to invoke method: {member}"
        ) from filter_stack_trace(e)


def _bound_callable(target: Optional[Any], member: Member, args: Sequence[Any]) -> Callable:
    if member.is_static:
        owner = member.declaring_type if target is None else type(target)
    elif target is None:
        raise TypeError(f"Instance member {member} requires a target instance")
    elif not isinstance(target, member.declaring_type):
        raise TypeError(
            f"{type(target).__qualname__} is not an instance of {member.declaring_type.__qualname__}"
        )
    else:
        owner = type(target)

    bound = member.descriptor.__get__(target, owner)
    inspect.signature(bound).bind(*args)

    for i, (param_type, arg) in enumerate(zip(member.parameter_types, args)):
        if arg is None and is_primitive(param_type):
            raise TypeError(
                f"None passed as argument {i} for primitive kind {param_type.__name__}"
            )

    return bound
