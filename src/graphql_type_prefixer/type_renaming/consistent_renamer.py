"""Consistent type renaming over a parsed GraphQL document.

Every node that names a type is visited: type definitions and extensions,
named type references inside list and non-null wrappers, union members,
implemented interfaces, argument and input field types, schema operation
bindings, variable types and fragment type conditions. Directive names,
field names, argument names and enum values are left alone.

The input document is never mutated. Changed nodes are rebuilt from their
fields with the rewritten children swapped in; unchanged subtrees are shared.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from graphql import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    FieldDefinitionNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    Node,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    OperationDefinitionNode,
    OperationTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    SelectionNode,
    SelectionSetNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    VariableDefinitionNode,
)

from graphql_type_prefixer.name_classification import IdentifierClassifier

from .rename_models import RenameMap, RenameResult

NodeT = TypeVar("NodeT", bound=Node)


class TypeRenamingError(Exception):
    """Raised when a document cannot be renamed."""


def rename_schema_document(
    document: DocumentNode,
    prefix: str,
    classifier: IdentifierClassifier | None = None,
) -> RenameResult:
    """Return a copy of ``document`` with every eligible type name prefixed."""
    if not prefix:
        raise TypeRenamingError("Prefix must be a non-empty string.")
    rename_map = RenameMap(prefix=prefix, classifier=classifier or IdentifierClassifier())
    definitions = tuple(
        _rename_definition(definition, rename_map) for definition in document.definitions
    )
    return RenameResult(
        document=_replace(document, definitions=definitions),
        renamed_types=MappingProxyType(dict(rename_map.assigned)),
    )


def _rename_definition(definition: DefinitionNode, rename_map: RenameMap) -> DefinitionNode:
    match definition:
        case (
            ObjectTypeDefinitionNode()
            | ObjectTypeExtensionNode()
            | InterfaceTypeDefinitionNode()
            | InterfaceTypeExtensionNode()
        ):
            return _replace(
                definition,
                name=_rename_name(definition.name, rename_map),
                interfaces=_map_nodes(definition.interfaces, _rename_named_type, rename_map),
                fields=_map_nodes(definition.fields, _rename_field_definition, rename_map),
            )
        case UnionTypeDefinitionNode() | UnionTypeExtensionNode():
            return _replace(
                definition,
                name=_rename_name(definition.name, rename_map),
                types=_map_nodes(definition.types, _rename_named_type, rename_map),
            )
        case InputObjectTypeDefinitionNode() | InputObjectTypeExtensionNode():
            return _replace(
                definition,
                name=_rename_name(definition.name, rename_map),
                fields=_map_nodes(definition.fields, _rename_input_value, rename_map),
            )
        case (
            EnumTypeDefinitionNode()
            | EnumTypeExtensionNode()
            | ScalarTypeDefinitionNode()
            | ScalarTypeExtensionNode()
        ):
            return _replace(definition, name=_rename_name(definition.name, rename_map))
        case DirectiveDefinitionNode():
            return _replace(
                definition,
                arguments=_map_nodes(definition.arguments, _rename_input_value, rename_map),
            )
        case SchemaDefinitionNode() | SchemaExtensionNode():
            return _replace(
                definition,
                operation_types=_map_nodes(
                    definition.operation_types, _rename_operation_type, rename_map
                ),
            )
        case OperationDefinitionNode():
            return _replace(
                definition,
                variable_definitions=_map_nodes(
                    definition.variable_definitions, _rename_variable_definition, rename_map
                ),
                selection_set=_rename_selection_set(definition.selection_set, rename_map),
            )
        case FragmentDefinitionNode():
            return _replace(
                definition,
                variable_definitions=_map_nodes(
                    definition.variable_definitions, _rename_variable_definition, rename_map
                ),
                type_condition=_rename_named_type(definition.type_condition, rename_map),
                selection_set=_rename_selection_set(definition.selection_set, rename_map),
            )
        case _:
            raise TypeRenamingError(f"Unsupported definition kind: {definition.kind}")


def _rename_field_definition(
    field: FieldDefinitionNode, rename_map: RenameMap
) -> FieldDefinitionNode:
    return _replace(
        field,
        arguments=_map_nodes(field.arguments, _rename_input_value, rename_map),
        type=_rename_type_reference(field.type, rename_map),
    )


def _rename_input_value(
    value: InputValueDefinitionNode, rename_map: RenameMap
) -> InputValueDefinitionNode:
    return _replace(value, type=_rename_type_reference(value.type, rename_map))


def _rename_operation_type(
    operation_type: OperationTypeDefinitionNode, rename_map: RenameMap
) -> OperationTypeDefinitionNode:
    return _replace(operation_type, type=_rename_named_type(operation_type.type, rename_map))


def _rename_variable_definition(
    variable: VariableDefinitionNode, rename_map: RenameMap
) -> VariableDefinitionNode:
    return _replace(variable, type=_rename_type_reference(variable.type, rename_map))


def _rename_type_reference(type_node: TypeNode, rename_map: RenameMap) -> TypeNode:
    match type_node:
        case NamedTypeNode():
            return _rename_named_type(type_node, rename_map)
        case ListTypeNode() | NonNullTypeNode():
            return _replace(type_node, type=_rename_type_reference(type_node.type, rename_map))
        case _:
            raise TypeRenamingError(f"Unsupported type reference kind: {type_node.kind}")


def _rename_named_type(named_type: NamedTypeNode, rename_map: RenameMap) -> NamedTypeNode:
    return _replace(named_type, name=_rename_name(named_type.name, rename_map))


def _rename_selection_set(
    selection_set: SelectionSetNode | None, rename_map: RenameMap
) -> SelectionSetNode | None:
    if selection_set is None:
        return None
    return _replace(
        selection_set,
        selections=_map_nodes(selection_set.selections, _rename_selection, rename_map),
    )


def _rename_selection(selection: SelectionNode, rename_map: RenameMap) -> SelectionNode:
    match selection:
        case FieldNode():
            return _replace(
                selection,
                selection_set=_rename_selection_set(selection.selection_set, rename_map),
            )
        case InlineFragmentNode():
            type_condition = selection.type_condition
            return _replace(
                selection,
                type_condition=(
                    _rename_named_type(type_condition, rename_map) if type_condition else None
                ),
                selection_set=_rename_selection_set(selection.selection_set, rename_map),
            )
        case FragmentSpreadNode():
            return selection
        case _:
            raise TypeRenamingError(f"Unsupported selection kind: {selection.kind}")


def _rename_name(name: NameNode, rename_map: RenameMap) -> NameNode:
    renamed = rename_map.resolve(name.value)
    if renamed == name.value:
        return name
    return _replace(name, value=renamed)


def _map_nodes(
    nodes: Sequence[NodeT] | None,
    rename: Callable[[NodeT, RenameMap], NodeT],
    rename_map: RenameMap,
) -> tuple[NodeT, ...] | None:
    if nodes is None:
        return None
    return tuple(rename(node, rename_map) for node in nodes)


def _replace(node: NodeT, **changes: Any) -> NodeT:
    fields = {key: getattr(node, key) for key in node.keys}
    fields.update(changes)
    return node.__class__(**fields)
