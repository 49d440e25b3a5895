"""Introspection of classes into member handles.

This module is the only place that looks at class dictionaries and function
signatures. Everything above it works on :class:`~memberkit.domain.Member`
handles and plain classes.
"""

import inspect
from itertools import takewhile
from typing import (
    Annotated,
    Any,
    Callable,
    Optional,
    get_args,
    get_origin,
    get_type_hints,
)

from memberkit.domain import Member

__all__ = ["member", "declared_members", "ancestors", "mocked_type", "is_hidden"]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def member(name: Optional[str] = None) -> Callable:
    """Decorator giving a function a member name distinct from its attribute name.

    This is how a class declares overloads: each overload lives under its own
    attribute, and all of them share one member name.

    Args:
        name: The member name. Defaults to the function's own name.

    Example:
        >>> class Scale:
        ...     @member("apply")
        ...     def apply_int(self, value: IntKind) -> int: ...
        ...
        ...     @member("apply")
        ...     def apply_float(self, value: DoubleKind) -> float: ...
    """

    def decorator(target):
        function = _underlying_function(target)
        if function is None:
            raise TypeError(f"{target!r} is not a function, staticmethod or classmethod")
        function.__member_name__ = name or function.__name__
        return target

    return decorator


def is_hidden(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def declared_members(cls: type) -> list[Member]:
    """List the members declared directly on a class, in declaration order.

    Inherited members are not included; walk :func:`ancestors` for those.
    Dunder members are hidden from resolution and never returned.
    """
    members = []

    for attribute_name, descriptor in vars(cls).items():
        function = _underlying_function(descriptor)
        if function is None:
            continue

        name = getattr(function, "__member_name__", attribute_name)
        if is_hidden(name):
            continue

        is_static = isinstance(descriptor, (staticmethod, classmethod))
        parameter_types, return_type = _signature_types(
            function, skip_receiver=not isinstance(descriptor, staticmethod)
        )
        members.append(
            Member(
                name,
                attribute_name,
                cls,
                descriptor,
                function,
                parameter_types,
                return_type,
                is_static,
                name.startswith("_"),
            )
        )

    return members


def ancestors(cls: type, root: type = object) -> list[type]:
    """Return ``cls`` and its ancestors in resolution order, stopping before ``root``."""
    return list(takewhile(lambda t: t is not root, cls.__mro__))


def mocked_type(value: Any) -> type:
    """Return the type a value presents itself as.

    Mocks created with a ``spec`` and proxies that forward ``__class__`` report
    the class they stand in for rather than their generated type.
    """
    declared = value.__class__
    return declared if isinstance(declared, type) else type(value)


def _underlying_function(descriptor: Any) -> Optional[Callable]:
    if isinstance(descriptor, (staticmethod, classmethod)):
        descriptor = descriptor.__func__
    return descriptor if inspect.isfunction(descriptor) else None


def _signature_types(
    function: Callable, skip_receiver: bool
) -> tuple[tuple[type, ...], Optional[type]]:
    signature = inspect.signature(function)
    hints = _annotations(function, signature)
    parameters = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    if skip_receiver:
        parameters = parameters[1:]

    return_hint = hints.get("return")
    void = return_hint is None or return_hint is type(None)
    return (
        tuple(_as_type(hints.get(p.name)) for p in parameters),
        None if void else _as_type(return_hint),
    )


def _annotations(function: Callable, signature: inspect.Signature) -> dict[str, Any]:
    try:
        return get_type_hints(function, include_extras=True)
    except NameError:
        # Forward references that cannot be resolved here stay as raw annotations.
        raw = {
            name: parameter.annotation
            for name, parameter in signature.parameters.items()
            if parameter.annotation is not inspect.Parameter.empty
        }
        if signature.return_annotation is not inspect.Signature.empty:
            raw["return"] = signature.return_annotation
        return raw


def _as_type(annotation: Any) -> type:
    if annotation is None or annotation is Any:
        return object
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return annotation

    origin = get_origin(annotation)
    if origin is Annotated:
        return _as_type(get_args(annotation)[0])
    if isinstance(origin, type):
        return origin
    return object
