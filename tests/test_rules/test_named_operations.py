# -*- coding: utf-8 -*-

from graphql import parse

from gql_lint import LintConfig, Linter
from gql_lint.rules import named_operations

from .._test_utils import assert_rule_result as run_test
from .._test_utils import dedent


def test_named_query(schema):
    run_test(
        named_operations,
        schema,
        """
        query GetVersion {
            version
        }
        """,
    )


def test_shorthand_query(schema):
    run_test(
        named_operations,
        schema,
        """
        {
            version
        }
        """,
        ["All operations must be named"],
        [(1, 1)],
    )


def test_anonymous_query(schema):
    run_test(
        named_operations,
        schema,
        """
        query {
            version
        }
        """,
        ["All operations must be named"],
        [(1, 1)],
    )


def test_anonymous_mutation(schema):
    run_test(
        named_operations,
        schema,
        """
        mutation {
            updateUser(id: "1") {
                id
            }
        }
        """,
        ["All operations must be named"],
    )


def test_one_error_per_unnamed_operation(schema):
    run_test(
        named_operations,
        schema,
        (
            "query { version } "
            "query Named { version } "
            'mutation { updateUser(id: "1") { id } }'
        ),
        ["All operations must be named", "All operations must be named"],
        [(1, 1), (1, 43)],
    )


def test_fragments_are_ignored(schema):
    run_test(
        named_operations,
        schema,
        """
        fragment UserFields on User {
            name
        }
        """,
    )


def test_errors_reference_unnamed_operations(schema):
    document = parse(
        dedent(
            """
            query {
                version
            }

            query Named {
                version
            }

            mutation {
                updateUser(id: "1") {
                    id
                }
            }
            """
        )
    )
    result = Linter(schema, LintConfig(rules=[named_operations])).lint(
        document
    )
    first, _, third = document.definitions
    assert [error.nodes for error in result] == [[first], [third]]
    assert result.errors[0].nodes[0] is first
    assert result.errors[1].nodes[0] is third
