# -*- coding: utf-8 -*-

from typing import Optional, Sequence

from graphql import (
    GraphQLCompositeType,
    GraphQLEnumValue,
    GraphQLError,
    GraphQLField,
    GraphQLInputType,
    GraphQLOutputType,
    GraphQLSchema,
    Node,
    TypeInfo,
)

from .collector import ErrorCollector


class TypeContext:
    """
    Read-only view over the type information tracked while walking a document.

    The underlying :class:`graphql.TypeInfo` is kept up to date by the walker
    (see :class:`graphql.TypeInfoVisitor`) so that when a rule handler is
    called for a node, all the properties below describe that node.

    Unknown types and fields are never raised as errors, they are exposed as
    ``None`` and it is up to the consumer to ignore them.

    Args:
        schema: Schema the document is checked against.
        type_info: Type information tracker to read from. A new one is created
            when not provided.

    Attributes:
        schema (graphql.GraphQLSchema): Schema the document is checked against.
        type_info (graphql.TypeInfo): Tracker updated by the walker.
    """

    __slots__ = ("schema", "type_info")

    def __init__(
        self, schema: GraphQLSchema, type_info: Optional[TypeInfo] = None
    ):
        self.schema = schema
        self.type_info = (
            type_info if type_info is not None else TypeInfo(schema)
        )

    @property
    def type(self) -> Optional[GraphQLOutputType]:
        """
        Current output type: the operation root type, a fragment's type
        condition or the return type of the current field.
        """
        return self.type_info.get_type()

    @property
    def parent_type(self) -> Optional[GraphQLCompositeType]:
        """
        Composite type owning the current selection set.
        """
        return self.type_info.get_parent_type()

    @property
    def field_def(self) -> Optional[GraphQLField]:
        """
        Definition of the field being visited.
        """
        return self.type_info.get_field_def()

    @property
    def input_type(self) -> Optional[GraphQLInputType]:
        """
        Expected type of the input value being visited (arguments, list items,
        input object fields).
        """
        return self.type_info.get_input_type()

    @property
    def enum_value(self) -> Optional[GraphQLEnumValue]:
        """
        Definition of the enum value being visited.
        """
        return self.type_info.get_enum_value()


class RuleContext(TypeContext):
    """
    Context handed to every rule when building its handlers.

    This combines the live :class:`TypeContext` of a single lint run with the
    run's :class:`~gql_lint.collector.ErrorCollector`.

    Args:
        schema: Schema the document is checked against.
        type_info: Type information tracker updated by the walker.
        errors: Collector for the current run.

    Attributes:
        errors (ErrorCollector): Collected errors.
    """

    __slots__ = ("errors",)

    def __init__(
        self,
        schema: GraphQLSchema,
        type_info: Optional[TypeInfo] = None,
        errors: Optional[ErrorCollector] = None,
    ):
        super().__init__(schema, type_info)
        self.errors = errors if errors is not None else ErrorCollector()

    def report_error(
        self, message: str, nodes: Optional[Sequence[Node]] = None
    ) -> GraphQLError:
        """
        Register an error for the current run.

        Args:
            message: Error description.
            nodes: Nodes where the error originated from.
        """
        return self.errors.report(message, nodes)
