import inspect
from typing import TYPE_CHECKING

from noaio import can_syncify, syncify

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


def compile_resolver(
    resolver: "Callable[..., Any] | None",
) -> "Callable[..., Any] | None":
    """
    Prepare a caller-supplied resolver for attachment to a GraphQL field.

    Coroutine functions that never suspend are converted into plain functions so
    the schema can be executed with graphql_sync. None is kept as is, leaving the
    field on graphql-core's default resolver.
    """
    if resolver is None:
        return None
    if inspect.iscoroutinefunction(resolver) and can_syncify(resolver):
        return syncify(resolver)
    return resolver
