"""Type names owned by the GraphQL specification or by schema entry points."""

from __future__ import annotations

ROOT_OPERATION_TYPE_NAMES: frozenset[str] = frozenset({"Query", "Mutation", "Subscription"})

BUILTIN_SCALAR_NAMES: frozenset[str] = frozenset({"String", "Int", "Float", "Boolean", "ID"})

INTROSPECTION_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "__Schema",
        "__Type",
        "__TypeKind",
        "__Field",
        "__InputValue",
        "__EnumValue",
        "__Directive",
        "__DirectiveLocation",
    }
)

DEFAULT_RESERVED_NAMES: frozenset[str] = (
    ROOT_OPERATION_TYPE_NAMES | BUILTIN_SCALAR_NAMES | INTROSPECTION_TYPE_NAMES
)
