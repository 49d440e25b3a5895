"""Resolution of a member by name across a class and its ancestors.

The search starts at the given class and walks its method resolution order up
to, but excluding, the configured root type. At every level the candidate
matcher picks that level's best member; a level's candidate replaces the best
one found so far only when its parameter types are strictly more specific.
Members of more derived classes therefore win ties, and overloads that are
mutually incomparable are settled in favour of the first one found.
"""

import logging
from typing import Optional, Sequence

from memberkit.compatibility import has_more_specific_types
from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import Candidate, MatchMode, Member
from memberkit.errors import ArgumentMismatchError, InstanceRequiredError
from memberkit.introspection import ancestors
from memberkit.matcher import find_candidate_in_type
from memberkit.parameters import parameter_types_description

__all__ = [
    "find_specified_member",
    "find_compatible_member",
    "find_compatible_member_if_available",
    "find_compatible_static_member",
]

logger = logging.getLogger(__name__)


def find_specified_member(
    cls: type,
    name: str,
    param_types: Sequence[type],
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Member:
    """Find the member whose parameter types are exactly the given ones.

    Primitive kinds and their boxed types are interchangeable here.

    Raises:
        ArgumentMismatchError: If no class in the chain declares such a member.
    """
    found = _find_best_candidate(cls, name, param_types, MatchMode.EXACT, config)

    if found is None:
        raise ArgumentMismatchError(
            "Specified method not found: "
            + name
            + parameter_types_description(param_types, config)
        )

    return found.member


def find_compatible_member(
    cls: type,
    name: str,
    arg_types: Sequence[type],
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Member:
    """Find the most specific member able to accept arguments of the given types.

    Raises:
        ArgumentMismatchError: If no class in the chain declares a compatible member.
    """
    found = find_compatible_member_if_available(cls, name, arg_types, config)

    if found is None:
        raise ArgumentMismatchError(
            "No compatible method found: "
            + name
            + parameter_types_description(arg_types, config)
        )

    return found


def find_compatible_member_if_available(
    cls: type,
    name: str,
    arg_types: Sequence[type],
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Optional[Member]:
    found = _find_best_candidate(cls, name, arg_types, MatchMode.COERCIVE, config)
    return found.member if found else None


def find_compatible_static_member(
    cls: type,
    name: str,
    arg_types: Sequence[type],
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Member:
    """Find the most specific compatible member for a call without a receiver.

    Raises:
        ArgumentMismatchError: If no class in the chain declares a compatible member.
        InstanceRequiredError: If the best compatible member is an instance member.
    """
    found = find_compatible_member_if_available(cls, name, arg_types, config)

    if found is None:
        raise ArgumentMismatchError(
            "No compatible static method found: "
            + name
            + parameter_types_description(arg_types, config)
        )

    if not found.is_static:
        raise InstanceRequiredError(
            "Attempted to invoke non-static method without an instance to invoke it on: "
            + str(found)
        )

    return found


def _find_best_candidate(
    cls: type,
    name: str,
    supplied_types: Sequence[type],
    mode: MatchMode,
    config: ReflectionConfig,
) -> Optional[Candidate]:
    found: Optional[Candidate] = None

    for level in ancestors(cls, config.root_type):
        candidate = find_candidate_in_type(level, name, supplied_types, mode, config)

        if candidate is not None and (
            found is None
            or has_more_specific_types(
                candidate.real_parameter_types, found.real_parameter_types
            )
        ):
            found = candidate

    if found is not None:
        logger.debug(
            "Resolved %s%s on %s to %s",
            name,
            parameter_types_description(supplied_types, config),
            cls.__qualname__,
            found.member,
        )

    return found
