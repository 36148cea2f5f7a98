import logging
from typing import TYPE_CHECKING

from graphql import GraphQLObjectType, GraphQLSchema, build_ast_schema, parse

from .config import SchemaConfig
from .resolver import compile_resolver

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from .config import ResolverMap

logger = logging.getLogger(__name__)


def make_schema(config: "SchemaConfig | Mapping[str, Any]") -> GraphQLSchema:
    """
    Build an executable schema from SDL type definitions and root resolver maps.

    The types named `Query` and `Mutation` are bound as the root operation types
    when `query` and `mutation` are supplied. Each resolver is attached to the
    root field of the same name; root fields without one keep graphql-core's
    default resolver.

        schema = make_schema(
            {
                "types": "type Person { name: String } type Query { get: Person }",
                "query": {"get": lambda root, info: {"name": "bob"}},
            }
        )

    Resolvers are attached as given, except `async def` resolvers that never
    suspend: those are replaced by a synchronous wrapper, so the field's
    `resolve` is not the caller's function object in that case.

    Parse and build errors raised by graphql-core are propagated unchanged.
    """
    if not isinstance(config, SchemaConfig):
        config = SchemaConfig.from_mapping(config)

    root_declaration = config.root_declaration()
    logger.debug("Assembling schema with root declaration %r", root_declaration)
    # newline keeps a trailing comment in the SDL from swallowing the block
    document = parse(f"{config.types}\n{root_declaration}")
    # built fresh per call, so its root fields can take resolvers in place
    schema = build_ast_schema(document)

    if config.query is not None:
        _attach_resolvers(schema.query_type, config.query)
    if config.mutation is not None:
        _attach_resolvers(schema.mutation_type, config.mutation)
    return schema


def _attach_resolvers(root_type: GraphQLObjectType, resolvers: "ResolverMap") -> None:
    fields = root_type.fields

    unknown = sorted(name for name in resolvers if name not in fields)
    if unknown:
        logger.debug(
            "Ignoring resolvers with no matching field on %s: %s",
            root_type.name,
            ", ".join(unknown),
        )

    for name, field in fields.items():
        field.resolve = compile_resolver(resolvers.get(name))
