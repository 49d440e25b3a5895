"""Domain models used throughout the engine."""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from memberkit.config import DEFAULT_CONFIG, ReflectionConfig

__all__ = ["Member", "Candidate", "MatchMode", "NOT_AVAILABLE", "type_name"]


def type_name(t: type, config: ReflectionConfig = DEFAULT_CONFIG) -> str:
    """Render a type for diagnostics, with configured module prefixes trimmed."""
    name = f"{t.__module__}.{t.__qualname__}"
    for prefix in config.trimmed_prefixes:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


@dataclass(frozen=True)
class Member:
    """A callable member declared directly on a class.

    Attributes:
        name: The member name used for resolution. Several members of one class
            may share it when declared with the ``@member`` decorator.
        attribute_name: The attribute under which the member lives in the class ``__dict__``.
        declaring_type: The class whose ``__dict__`` holds the member.
        descriptor: The raw class attribute (function, staticmethod or classmethod).
        function: The underlying plain function.
        parameter_types: The formal parameter types, receiver excluded.
        return_type: The annotated return type, if any.
        is_static: True for staticmethods and classmethods.
        is_private: True when the member name starts with an underscore.
    """

    name: str
    attribute_name: str
    declaring_type: type
    descriptor: Any
    function: Callable
    parameter_types: tuple[type, ...]
    return_type: Optional[type] = None
    is_static: bool = False
    is_private: bool = False
    _accessible: threading.Event = field(
        default_factory=threading.Event, compare=False, repr=False
    )

    @property
    def is_accessible(self) -> bool:
        return self._accessible.is_set()

    def __str__(self):
        params = ", ".join(type_name(t) for t in self.parameter_types)
        return f"{self.declaring_type.__qualname__}.{self.name}({params})"


@dataclass(frozen=True)
class Candidate:
    """A member found during a chain walk, with its synthetic-parameter offset.

    Attributes:
        member: The matching member.
        first_real_parameter: 1 when the leading context parameter is skipped, else 0.
    """

    member: Member
    first_real_parameter: int

    @property
    def real_parameter_types(self) -> tuple[type, ...]:
        return self.member.parameter_types[self.first_real_parameter:]


class MatchMode(Enum):
    """How supplied types are checked against formal parameter types."""

    EXACT = "exact"
    COERCIVE = "coercive"


class _NotAvailable:
    def __repr__(self):
        return "NOT_AVAILABLE"

    def __bool__(self):
        return False


NOT_AVAILABLE = _NotAvailable()
