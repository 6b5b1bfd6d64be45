# -*- coding: utf-8 -*-

import logging
from collections import defaultdict
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
)

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    Node,
    TypeInfo,
    TypeInfoVisitor,
    Visitor,
    validate,
    visit,
)

from .collector import ErrorCollector
from .config import LintConfig
from .context import RuleContext
from .rules import Handler, Handlers, Rule


logger = logging.getLogger(__name__)


def merge_handlers(handlers: Iterable[Handlers]) -> Dict[str, List[Handler]]:
    """
    Merge multiple handler mappings by node kind.

    Handlers for the same kind are kept in the order they were provided.
    """
    merged = defaultdict(list)  # type: Dict[str, List[Handler]]
    for mapping in handlers:
        for kind, handler in mapping.items():
            merged[kind].append(handler)
    return dict(merged)


class RuleDispatcher(Visitor):
    """
    Visitor calling the handlers registered for each entered node kind.

    This only composes handlers, the traversal itself and the type information
    is driven by :func:`graphql.visit` and :class:`graphql.TypeInfoVisitor`.

    Args:
        handlers: Handlers by node kind as returned by :func:`merge_handlers`.
    """

    def __init__(self, handlers: Mapping[str, Sequence[Handler]]):
        super().__init__()
        self.handlers = handlers

    def enter(self, node: Node, *_args: Any) -> None:
        for handler in self.handlers.get(node.kind, ()):
            handler(node)


class LintResult:
    """
    Wrap the errors found in a single lint run.

    Instances are iterable and falsy when they contain at least one error.

    Attributes:
        errors (List[graphql.GraphQLError]): Errors in report order.
    """

    def __init__(self, errors: Optional[List[GraphQLError]] = None):
        self.errors = errors if errors is not None else []

    def __bool__(self) -> bool:
        return not self.errors

    def __iter__(self) -> Iterator[GraphQLError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]

    def to_dicts(self) -> List[Dict[str, Any]]:
        """
        Errors formatted according to the GraphQL specification (message and
        source locations), suitable for JSON output.
        """
        return [dict(error.formatted) for error in self.errors]

    def __repr__(self) -> str:
        return "<LintResult errors=%d>" % len(self.errors)


class Linter:
    """
    Check GraphQL documents against a schema using a set of lint rules.

    A linter can be reused for any number of documents, every call to
    :meth:`lint` runs with its own type information and error collector.

    Args:
        schema: Schema to check documents against.
        config: Rules and options to use, defaults to all registered rules
            without any required field.

    Attributes:
        schema (graphql.GraphQLSchema): Schema to check documents against.
        config (LintConfig): Configuration used for every run.
    """

    def __init__(
        self, schema: GraphQLSchema, config: Optional[LintConfig] = None
    ):
        self.schema = schema
        self.config = config if config is not None else LintConfig()

    def lint(self, document: DocumentNode) -> LintResult:
        """
        Run all configured rules over a parsed document.

        Args:
            document: Parsed document, see :func:`graphql.parse`.

        Returns:
            All errors found, errors from the specification rules first when
            enabled, then lint errors in traversal order.
        """
        errors = []  # type: List[GraphQLError]

        if self.config.specified_rules:
            errors.extend(validate(self.schema, document))

        errors.extend(
            run_rules(
                self.schema, document, self.config.rules, self.config.options()
            )
        )

        logger.debug(
            "Linted document with %d rule(s), found %d error(s)",
            len(self.config.rules),
            len(errors),
        )
        return LintResult(errors)


def run_rules(
    schema: GraphQLSchema,
    document: DocumentNode,
    rules: Sequence[Rule],
    options: Optional[Mapping[str, Any]] = None,
) -> List[GraphQLError]:
    """
    Traverse a document once, calling the handlers of all rules.

    Rules are instantiated for this traversal only and share a fresh
    :class:`graphql.TypeInfo` and :class:`~gql_lint.collector.ErrorCollector`.

    Args:
        schema: Schema to check against.
        document: Parsed document.
        rules: Rule functions, handlers run in that order for each node.
        options: Options passed to every rule.

    Returns:
        Errors in report order.
    """
    type_info = TypeInfo(schema)
    context = RuleContext(schema, type_info, ErrorCollector())
    options = options if options is not None else {}

    logger.debug(
        "Running rules: %s",
        ", ".join(getattr(rule, "__name__", repr(rule)) for rule in rules),
    )

    # TypeInfoVisitor updates the type information before calling the wrapped
    # visitor so handlers always see the context of the node being entered.
    dispatcher = RuleDispatcher(
        merge_handlers(rule(context, options) for rule in rules)
    )
    visit(document, TypeInfoVisitor(type_info, dispatcher))

    return context.errors.errors


def lint_document(
    schema: GraphQLSchema,
    document: DocumentNode,
    config: Optional[LintConfig] = None,
) -> LintResult:
    """
    Check a parsed document against a schema.

    This is a shortcut for ``Linter(schema, config).lint(document)``.
    """
    return Linter(schema, config).lint(document)
