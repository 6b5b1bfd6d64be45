# -*- coding: utf-8 -*-

import pytest
from graphql import build_schema


SDL = """
schema {
    query: Query
    mutation: Mutation
}

type Query {
    user(id: ID): User
    users(status: Status, statuses: [Status!], filter: UserFilter): [User!]!
    node(id: ID!): Node
    search(text: String!): [SearchResult]
    tags: [Tag]
    version: String
    legacyVersion: String @deprecated(reason: "Use version instead.")
}

type Mutation {
    updateUser(id: ID!, name: String): User
}

interface Node {
    id: ID!
}

type User implements Node {
    id: ID!
    name: String
    fullName: String
    username: String @deprecated(reason: "Use fullName instead.")
    friends: [User]
    posts: [Post!]
    status: Status
}

type Post implements Node {
    id: ID!
    title: String
    author: User
}

type Tag {
    label: String
}

union SearchResult = User | Post

enum Status {
    ACTIVE
    INACTIVE @deprecated(reason: "Use DISABLED instead.")
    DISABLED
}

input UserFilter {
    status: Status
    name: String
}
"""


@pytest.fixture
def schema():
    return build_schema(SDL)
