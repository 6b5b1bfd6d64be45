# -*- coding: utf-8 -*-
"""
Lint rules for GraphQL query documents.

A rule is a plain function called once per lint run with the run's
:class:`~gql_lint.context.RuleContext` and the options mapping provided by the
:class:`~gql_lint.config.LintConfig`. It returns a mapping of AST node kinds
(e.g. ``"field"``, ``"operation_definition"``) to handlers which get called
with each node of that kind when it is entered.

Handlers must not modify the document and report findings through
:meth:`~gql_lint.context.RuleContext.report_error`. When the type information
required by a check is not available, the check is skipped.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from graphql import (
    EnumValueNode,
    FieldNode,
    FragmentDefinitionNode,
    NamedTypeNode,
    Node,
    OperationDefinitionNode,
    get_named_type,
)

from ..context import RuleContext
from ..selections import field_available_on_type, field_was_requested


__all__ = (
    "RULES",
    "Handler",
    "Handlers",
    "Rule",
    "named_operations",
    "required_fields",
    "capitalized_type_name",
    "no_deprecated_fields",
)

Handler = Callable[[Node], None]
Handlers = Mapping[str, Handler]
Rule = Callable[[RuleContext, Mapping[str, Any]], Handlers]


def named_operations(
    context: RuleContext, options: Mapping[str, Any]
) -> Handlers:
    """
    All operations must be named.
    """

    def enter_operation_definition(node: OperationDefinitionNode) -> None:
        if node.name is None:
            context.report_error("All operations must be named", [node])

    return {"operation_definition": enter_operation_definition}


def required_fields(
    context: RuleContext, options: Mapping[str, Any]
) -> Handlers:
    """
    Some fields must always be requested when they are available.

    Each field and fragment definition is checked against its own selection
    set only: requesting a required field at one level says nothing about
    other levels. A required field is only enforced on types which define it.

    Fields requested through fragment spreads do not count, see
    :func:`~gql_lint.selections.field_was_requested`.

    Options:
        required_fields: Names of the required fields, errors are reported in
            that order for a given node.
    """
    fields = tuple(options.get("required_fields", ()))

    def enter_fragment_definition(node: FragmentDefinitionNode) -> None:
        type_ = context.type
        for field in fields:
            if field_available_on_type(
                type_, field
            ) and not field_was_requested(node, field):
                context.report_error(
                    f"'{field}' field required on 'fragment {node.name.value} "
                    f"on {node.type_condition.name.value}'",
                    [node],
                )

    def enter_field(node: FieldNode) -> None:
        field_def = context.field_def
        if field_def is None:
            return

        for field in fields:
            if field_available_on_type(
                field_def.type, field
            ) and not field_was_requested(node, field):
                context.report_error(
                    f"'{field}' field required on '{node.name.value}'", [node]
                )

    return {
        "fragment_definition": enter_fragment_definition,
        "field": enter_field,
    }


def capitalized_type_name(
    context: RuleContext, options: Mapping[str, Any]
) -> Handlers:
    """
    All type names referenced in a document should start with a capital letter.

    This covers variable types (including wrapped ones such as ``[foo!]``) and
    type conditions of fragments and inline fragments.
    """

    def enter_named_type(node: NamedTypeNode) -> None:
        type_name = node.name.value
        if type_name[0] == type_name[0].lower():
            context.report_error(
                "All type names should start with a capital letter", [node]
            )

    return {"named_type": enter_named_type}


def _deprecation_message(
    kind: str, type_name: str, name: str, reason: Optional[str]
) -> str:
    msg = f"The {kind} {type_name}.{name} is deprecated."
    if reason:
        msg += " " + reason
    return msg


def no_deprecated_fields(
    context: RuleContext, options: Mapping[str, Any]
) -> Handlers:
    """
    Deprecated fields and enum values should not be used.

    The deprecation reason, when set, is appended to the error message.
    """

    def enter_field(node: FieldNode) -> None:
        field_def = context.field_def
        if field_def is None or field_def.deprecation_reason is None:
            return

        parent_type = context.parent_type
        if parent_type is not None:
            context.report_error(
                _deprecation_message(
                    "field",
                    parent_type.name,
                    node.name.value,
                    field_def.deprecation_reason,
                ),
                [node],
            )

    def enter_enum_value(node: EnumValueNode) -> None:
        enum_value = context.enum_value
        if enum_value is None or enum_value.deprecation_reason is None:
            return

        enum_type = get_named_type(context.input_type)
        if enum_type is not None:
            context.report_error(
                _deprecation_message(
                    "enum value",
                    enum_type.name,
                    node.value,
                    enum_value.deprecation_reason,
                ),
                [node],
            )

    return {"field": enter_field, "enum_value": enter_enum_value}


# Keys are the names used to enable rules in configuration mappings.
RULES = {
    "named-operations": named_operations,
    "required-fields": required_fields,
    "capitalized-type-name": capitalized_type_name,
    "no-deprecated-fields": no_deprecated_fields,
}  # type: Dict[str, Rule]
