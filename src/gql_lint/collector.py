# -*- coding: utf-8 -*-

from typing import Iterator, List, Optional, Sequence

from graphql import GraphQLError, Node


class ErrorCollector:
    """
    Append-only collection of the errors found during a single lint run.

    Errors are kept in the order they were reported, which is the traversal
    order, and are never deduplicated.

    Attributes:
        errors (List[graphql.GraphQLError]): Collected errors.
    """

    __slots__ = ("errors",)

    def __init__(self):
        self.errors = []  # type: List[GraphQLError]

    def report(
        self, message: str, nodes: Optional[Sequence[Node]] = None
    ) -> GraphQLError:
        """
        Register an error.

        Args:
            message: Error description.
            nodes: Nodes where the error originated from, used to compute
                source locations.

        Returns:
            The registered error.
        """
        error = GraphQLError(message, list(nodes) if nodes else None)
        self.errors.append(error)
        return error

    def __iter__(self) -> Iterator[GraphQLError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
