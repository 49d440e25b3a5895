"""Engine configuration."""

from dataclasses import dataclass

from memberkit.errors import CheckedError
from memberkit.invocation import Invocation

__all__ = ["ReflectionConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True)
class ReflectionConfig:
    """Settings shared by resolution and invocation.

    Attributes:
        root_type: The universal root type. The ancestor walk stops before it.
        context_type: The synthetic leading parameter type skipped during matching.
        trimmed_prefixes: Module prefixes removed when rendering type names in diagnostics.
        checked_exceptions: Exception types treated as checked failures.
    """

    root_type: type = object
    context_type: type = Invocation
    trimmed_prefixes: tuple[str, ...] = ("builtins.", "memberkit.kinds.")
    checked_exceptions: tuple[type[BaseException], ...] = (CheckedError,)


DEFAULT_CONFIG = ReflectionConfig()
