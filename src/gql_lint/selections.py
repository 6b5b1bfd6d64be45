# -*- coding: utf-8 -*-
"""
Helpers answering questions about selection sets and their types.
"""

from typing import Optional, Union

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLType,
    GraphQLWrappingType,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionSetNode,
)


SelectionNode = Union[
    FieldNode,
    FragmentDefinitionNode,
    InlineFragmentNode,
    OperationDefinitionNode,
]

_FIELD_MAP_TYPES = (
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLInputObjectType,
)


def field_was_requested(node: SelectionNode, field_name: str) -> bool:
    """
    Check whether a field is part of a node's own selections.

    A field is considered requested when it is selected directly, or inside an
    inline fragment which is itself selected directly. Only one level of
    inline fragments is inspected: a field nested two inline fragments deep is
    not found.

    Fragment spreads are never followed as we don't know if the field was
    requested within the fragment: the field must be requested outside of it.

    Aliases are ignored, the field is matched on its name.

    Args:
        node: Node owning the selection set to inspect.
        field_name: Name of the field to look for.

    Returns:
        ``True`` if the field is requested.
    """
    return _requested_in(node.selection_set, field_name, follow_inline=True)


def _requested_in(
    selection_set: Optional[SelectionSetNode],
    field_name: str,
    follow_inline: bool,
) -> bool:
    if selection_set is None:
        return False

    for selection in selection_set.selections:
        if isinstance(selection, FieldNode):
            if selection.name.value == field_name:
                return True
        elif isinstance(selection, InlineFragmentNode):
            if follow_inline and _requested_in(
                selection.selection_set, field_name, follow_inline=False
            ):
                return True

    return False


def field_available_on_type(
    type_: Optional[GraphQLType], field_name: str
) -> bool:
    """
    Check whether a type, or the type it wraps, exposes a given field.

    List and non null wrappers are unwrapped until a named type is found. Types
    without fields (scalars, enums, unions) and missing types never expose any
    field.

    Args:
        type_: Type to inspect.
        field_name: Name of the field to look for.

    Returns:
        ``True`` if the field is defined on the type.
    """
    if isinstance(type_, _FIELD_MAP_TYPES) and field_name in type_.fields:
        return True
    if isinstance(type_, GraphQLWrappingType):
        return field_available_on_type(type_.of_type, field_name)
    return False
