"""Context types understood by the resolution engine.

A handler member may declare an :class:`Invocation` as its first parameter.
That parameter is not matched against the caller's arguments; the caller
binds it separately, see :func:`memberkit.parameters.arguments_with_extra_first_value`.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["Invocation", "Delegate"]


@dataclass(frozen=True)
class Invocation:
    """Describes the invocation a handler member is standing in for.

    Attributes:
        invoked_instance: The receiver of the original call, or None for a static call.
        invoked_arguments: The arguments of the original call.
        invocation_count: How many times the original member has been called so far.
        member_name: Name of the original member.
    """

    invoked_instance: Optional[Any] = None
    invoked_arguments: tuple[Any, ...] = field(default_factory=tuple)
    invocation_count: int = 1
    member_name: Optional[str] = None


class Delegate:
    """Marker base class for objects whose single public method handles a call.

    Example:
        >>> class Greeting(Delegate):
        ...     def greet(self, invocation: Invocation, name: str) -> str:
        ...         return f"Hello {name}"
    """
