# -*- coding: utf-8 -*-

import textwrap

from graphql import parse

from gql_lint import LintConfig, Linter


def dedent(raw_string):
    return textwrap.dedent(raw_string).lstrip()


def _ensure_list(value):
    if isinstance(value, list):
        return value
    else:
        return [value]


def assert_lint_result(
    schema,
    source,
    expected_msgs=None,
    expected_locs=None,
    rules=None,
    required_fields=(),
):
    # Prints are here so we can more easily debug when running pytest with -v
    expected_msgs = expected_msgs or []
    expected_locs = expected_locs or []
    print(source)
    result = Linter(
        schema, LintConfig(rules=rules, required_fields=required_fields)
    ).lint(parse(dedent(source)))

    msgs = [err.message for err in result]
    locs = [
        [(loc.line, loc.column) for loc in (err.locations or [])]
        for err in result
    ]

    print(" [msgs] ", msgs)
    print(" [locs] ", locs)

    assert msgs == expected_msgs
    if expected_locs:
        assert locs == [_ensure_list(x) for x in expected_locs]


def assert_rule_result(
    rule, schema, source, expected_msgs=None, expected_locs=None, **kwargs
):
    assert_lint_result(
        schema,
        source,
        expected_msgs=expected_msgs,
        expected_locs=expected_locs,
        rules=[rule],
        **kwargs
    )
