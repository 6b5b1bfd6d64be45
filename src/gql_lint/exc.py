# -*- coding: utf-8 -*-
"""
Exceptions raised while setting up lint runs.

Rule findings are never raised: they are collected as
:class:`graphql.GraphQLError` instances by
:class:`~gql_lint.collector.ErrorCollector` and the traversal always runs to
completion.
"""


class GqlLintError(Exception):
    """
    Base exception from which all other inherit.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(GqlLintError):
    """
    Invalid lint configuration, raised when building a
    :class:`~gql_lint.config.LintConfig`.
    """


class UnknownRule(ConfigError, KeyError):
    pass
