"""Failure taxonomy for member resolution and invocation."""

from enum import Enum

__all__ = [
    "FailureKind",
    "MemberResolutionError",
    "ArgumentMismatchError",
    "InstanceRequiredError",
    "AmbiguousHandlerError",
    "NoHandlerFoundError",
    "MemberAccessError",
    "CheckedError",
    "UnexpectedCheckedError",
]


class FailureKind(Enum):
    """Tags for every way a resolution or invocation can fail."""

    ARGUMENT_MISMATCH = "argument-mismatch"
    INSTANCE_REQUIRED = "instance-required"
    AMBIGUOUS_HANDLER = "ambiguous-handler"
    NO_HANDLER_FOUND = "no-handler-found"
    ACCESS_DENIED = "access-denied"
    TARGET_RAISED_ERROR = "target-raised-error"
    TARGET_RAISED_UNCHECKED = "target-raised-unchecked-failure"
    TARGET_RAISED_CHECKED = "target-raised-checked-failure"


class MemberResolutionError(Exception):
    """Raised when a member cannot be resolved, bound or made callable."""

    kind: FailureKind


class ArgumentMismatchError(MemberResolutionError, ValueError):
    """Raised when no member accepts the given arguments, or binding them fails."""

    kind = FailureKind.ARGUMENT_MISMATCH


class InstanceRequiredError(MemberResolutionError, ValueError):
    """Raised when a static invocation resolves to an instance member."""

    kind = FailureKind.INSTANCE_REQUIRED


class AmbiguousHandlerError(MemberResolutionError):
    """Raised when one class declares more than one eligible handler member."""

    kind = FailureKind.AMBIGUOUS_HANDLER


class NoHandlerFoundError(MemberResolutionError):
    """Raised when no class in a handler's chain declares an eligible handler member."""

    kind = FailureKind.NO_HANDLER_FOUND


class MemberAccessError(MemberResolutionError):
    """Raised when a member's descriptor cannot be bound to a callable."""

    kind = FailureKind.ACCESS_DENIED


class CheckedError(Exception):
    """Base class for failures a member declares as part of its contract.

    Subclass this (or list other types in ``ReflectionConfig.checked_exceptions``)
    to mark failures that the unchecked invocation variant must wrap.
    """


class UnexpectedCheckedError(RuntimeError):
    """Raised in place of a checked failure by the unchecked invocation variant.

    The original failure is available as ``__cause__``.
    """

    kind = FailureKind.TARGET_RAISED_CHECKED
