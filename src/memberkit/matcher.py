"""Matching of one class's own members against a name and a type vector."""

from typing import Optional, Sequence

from memberkit.compatibility import (
    accepts_argument_types,
    boxing_conversions,
    has_more_specific_types,
    matches_parameter_types,
)
from memberkit.config import DEFAULT_CONFIG, ReflectionConfig
from memberkit.domain import Candidate, MatchMode
from memberkit.introspection import declared_members
from memberkit.kinds import wrapped_if_primitive
from memberkit.parameters import index_of_first_real_parameter

__all__ = ["find_candidate_in_type"]


def find_candidate_in_type(
    cls: type,
    name: str,
    supplied_types: Sequence[type],
    mode: MatchMode,
    config: ReflectionConfig = DEFAULT_CONFIG,
) -> Optional[Candidate]:
    """Find the best member with the given name declared directly on ``cls``.

    Members are considered in declaration order. A later match replaces the one
    kept so far only when its parameter types are more specific, or when both
    box to the same types and the later one needs fewer boxing conversions.

    Args:
        cls: The class whose own members are searched.
        name: The member name.
        supplied_types: Explicit parameter types (exact mode) or argument types
            (coercive mode).
        mode: How supplied types are checked against formal parameter types.
        config: Engine settings; supplies the context parameter type.

    Returns:
        The best candidate, or None if no member of ``cls`` matches.
    """
    found: Optional[Candidate] = None

    for declared in declared_members(cls):
        if declared.name != name:
            continue

        first_real_parameter = index_of_first_real_parameter(
            declared.parameter_types, supplied_types, config.context_type
        )
        if first_real_parameter < 0 or not _matches(
            declared.parameter_types, supplied_types, first_real_parameter, mode
        ):
            continue

        candidate = Candidate(declared, first_real_parameter)
        if found is None or _preferred(candidate, found, supplied_types):
            found = candidate

    return found


def _matches(
    declared_types: Sequence[type],
    supplied_types: Sequence[type],
    first_real_parameter: int,
    mode: MatchMode,
) -> bool:
    if matches_parameter_types(declared_types, supplied_types, first_real_parameter):
        return True
    return mode is MatchMode.COERCIVE and accepts_argument_types(
        declared_types, supplied_types, first_real_parameter
    )


def _preferred(
    candidate: Candidate, found: Candidate, supplied_types: Sequence[type]
) -> bool:
    current = candidate.real_parameter_types
    previous = found.real_parameter_types

    if has_more_specific_types(current, previous):
        return True

    same_when_boxed = all(
        wrapped_if_primitive(c) is wrapped_if_primitive(p)
        for c, p in zip(current, previous)
    )
    return same_when_boxed and boxing_conversions(
        current, supplied_types
    ) < boxing_conversions(previous, supplied_types)
