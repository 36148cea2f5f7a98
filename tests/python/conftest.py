"""Shared fixtures and collection guards for the test suite."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from graphql import ExecutionResult, GraphQLSchema, graphql, graphql_sync

PERSON_TYPES = """
type Person {
  name: String
  age: Int
}

type Query {
  get: Person
  person(name: String!): Person
  greeting: String
}

type Mutation {
  rename(name: String!): Person
}
"""


@pytest.fixture
def anyio_backend() -> str:
    """Runs anyio-marked tests on asyncio, which the async tests are written for."""
    return "asyncio"


@pytest.fixture
def person_types() -> str:
    """Provides SDL declaring Person plus Query and Mutation root types."""
    return PERSON_TYPES


@pytest.fixture
def run_operation() -> Callable[
    [GraphQLSchema, str, dict[str, Any] | None, Any], Awaitable[ExecutionResult]
]:
    """Provides an async helper for executing schema operations."""

    async def _run(
        schema: GraphQLSchema,
        query: str,
        variables: dict[str, Any] | None = None,
        context: Any = None,
    ) -> ExecutionResult:
        return await graphql(
            schema, query, variable_values=variables, context_value=context
        )

    return _run


@pytest.fixture
def run_sync() -> Callable[[GraphQLSchema, str, dict[str, Any] | None], ExecutionResult]:
    """Provides a helper for executing operations without an event loop."""

    def _run(
        schema: GraphQLSchema, query: str, variables: dict[str, Any] | None = None
    ) -> ExecutionResult:
        return graphql_sync(schema, query, variable_values=variables)

    return _run


@pytest.fixture
def assert_success() -> Callable[[ExecutionResult, dict[str, Any]], None]:
    """Provides a shared assertion helper for successful operation results."""

    def _assert(result: ExecutionResult, expected_data: dict[str, Any]) -> None:
        assert result.errors is None
        assert result.data == expected_data

    return _assert


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Fails collection when any test function omits a docstring."""
    del config

    missing_docstrings: set[str] = set()
    for item in items:
        if not item.name.startswith("test_"):
            continue
        obj = getattr(item, "obj", None)
        if obj is None:
            continue
        if inspect.getdoc(obj) is None:
            missing_docstrings.add(item.nodeid)

    if missing_docstrings:
        missing_lines = "\n".join(
            f"- {nodeid}" for nodeid in sorted(missing_docstrings)
        )
        raise pytest.UsageError(
            "Every collected test function must include a docstring.\n"
            f"Missing docstrings:\n{missing_lines}"
        )
