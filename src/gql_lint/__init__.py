# -*- coding: utf-8 -*-
"""
gql_lint

Schema aware lint rules for GraphQL query documents.

Documents are parsed and walked with `graphql-core
<https://github.com/graphql-python/graphql-core>`_, this package provides the
rules, the type context they read from and the machinery running them:

>>> from graphql import build_schema, parse
>>> schema = build_schema("type Query { hello: String }")
>>> result = lint_document(schema, parse("{ hello }"))
>>> result.messages
['All operations must be named']
"""

from .version import __version__  # isort:skip

from .collector import ErrorCollector
from .config import LintConfig
from .context import RuleContext, TypeContext
from .engine import LintResult, Linter, lint_document, run_rules
from .exc import ConfigError, GqlLintError, UnknownRule
from .rules import RULES
from .selections import field_available_on_type, field_was_requested


__all__ = (
    "__version__",
    "lint_document",
    "run_rules",
    "Linter",
    "LintConfig",
    "LintResult",
    "ErrorCollector",
    "RuleContext",
    "TypeContext",
    "RULES",
    "field_available_on_type",
    "field_was_requested",
    "GqlLintError",
    "ConfigError",
    "UnknownRule",
)
