"""Member resolution and invocation for test tooling.

memberkit finds, among the possibly many overloads a class and its ancestors
declare under one name, the single member that best fits a set of arguments or
explicit parameter types, and invokes it. It is the reflective core that mock,
delegate and injection machinery build on: overload selection done at runtime,
with primitive/boxed equivalence, specificity ranking between signatures, and
an optional leading context parameter.

Key Features:
    - Overloads declared with the ``@member`` decorator and resolved by type annotations
    - Exact resolution by explicit parameter types, or coercive resolution by argument values
    - Most-specific-overload selection across the method resolution order
    - Two invocation variants: checked failures wrapped, or everything forwarded unchanged
    - Unique handler lookup for delegate objects

Basic Usage:
    >>> from memberkit.introspection import member
    >>> from memberkit.kinds import IntKind, Integer
    >>> from memberkit.reflection import invoke_compatible
    >>>
    >>> class Formatter:
    ...     @member("format")
    ...     def format_int(self, value: IntKind) -> str:
    ...         return f"int {value}"
    ...
    ...     @member("format")
    ...     def format_integer(self, value: Integer) -> str:
    ...         return f"Integer {value}"
    >>>
    >>> invoke_compatible(Formatter, Formatter(), "format", Integer(5))
    'Integer 5'

The package consists of several modules:
    - reflection: Resolve-and-invoke entry points
    - resolver: Most specific member search across a class's ancestors
    - matcher: Member matching within a single class
    - compatibility: Type compatibility and specificity judgements
    - parameters: Argument type derivation and diagnostic rendering
    - invoker: Member invocation and failure propagation
    - handlers: Unique handler lookup and delegate dispatch
    - introspection: Class introspection into member handles
    - kinds: Primitive kinds and boxed types
    - invocation: Context types passed to handler members
    - config: Engine settings
    - domain: Core domain models (Member, Candidate)
    - errors: Failure taxonomy
"""
