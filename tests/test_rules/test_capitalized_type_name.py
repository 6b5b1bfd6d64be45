# -*- coding: utf-8 -*-

from gql_lint.rules import capitalized_type_name

from .._test_utils import assert_rule_result as run_test


MSG = "All type names should start with a capital letter"


def test_capitalized_names(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        query Search($text: String!, $status: Status) {
            search(text: $text) {
                ... on User {
                    name
                }
            }
            users(status: $status) {
                ...UserFields
            }
        }

        fragment UserFields on User {
            name
        }
        """,
    )


def test_lowercase_fragment_type_condition(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        fragment UserFields on user {
            name
        }
        """,
        [MSG],
        [(1, 24)],
    )


def test_lowercase_inline_fragment_type_condition(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        query Search {
            search(text: "foo") {
                ... on post {
                    title
                }
            }
        }
        """,
        [MSG],
        [(3, 16)],
    )


def test_lowercase_variable_type(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        query GetUser($id: iD) {
            user(id: $id) {
                name
            }
        }
        """,
        [MSG],
        [(1, 20)],
    )


def test_lowercase_wrapped_variable_type(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        query Users($statuses: [status!]) {
            users(statuses: $statuses) {
                name
            }
        }
        """,
        [MSG],
        [(1, 25)],
    )


def test_leading_underscore_is_reported(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        fragment UserFields on _User {
            name
        }
        """,
        [MSG],
    )


def test_every_reference_is_reported(schema):
    run_test(
        capitalized_type_name,
        schema,
        """
        query Users($a: status, $b: [status]) {
            version
        }
        """,
        [MSG, MSG],
        [(1, 17), (1, 30)],
    )
