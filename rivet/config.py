import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .errors import (
    config_not_an_object,
    resolver_map_must_be_mapping,
    resolver_not_callable,
    root_operation_required,
    types_must_be_string,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any, TypeAlias

    ResolverMap: TypeAlias = Mapping[str, Callable[..., Any] | None]

ROOT_TYPE_NAMES: dict[str, str] = {"query": "Query", "mutation": "Mutation"}


@dataclasses.dataclass(frozen=True, slots=True)
class SchemaConfig:
    """
    SDL type definitions plus the resolver mappings for the root operation types.

    A root operation counts as supplied when its mapping is not None, so an empty
    mapping still declares the operation in the assembled schema.
    """

    types: str
    query: "ResolverMap | None" = None
    mutation: "ResolverMap | None" = None

    def __post_init__(self) -> None:
        if not isinstance(self.types, str):
            raise types_must_be_string()
        for operation in ROOT_TYPE_NAMES:
            resolvers = getattr(self, operation)
            if resolvers is not None and not isinstance(resolvers, Mapping):
                raise resolver_map_must_be_mapping(operation)
        if self.query is None and self.mutation is None:
            raise root_operation_required()
        for operation, resolvers in self.resolver_maps():
            for field_name, resolver in resolvers.items():
                if resolver is not None and not callable(resolver):
                    raise resolver_not_callable(operation, field_name)

    @classmethod
    def from_mapping(cls, config: "Any") -> "SchemaConfig":
        if not isinstance(config, Mapping):
            raise config_not_an_object()
        return cls(
            types=config.get("types"),
            query=config.get("query"),
            mutation=config.get("mutation"),
        )

    @property
    def has_query(self) -> bool:
        return self.query is not None

    @property
    def has_mutation(self) -> bool:
        return self.mutation is not None

    def resolver_maps(self) -> "Iterator[tuple[str, ResolverMap]]":
        """Yield (operation, resolvers) for each supplied root operation."""
        for operation in ROOT_TYPE_NAMES:
            resolvers = getattr(self, operation)
            if resolvers is not None:
                yield operation, resolvers

    def root_declaration(self) -> str:
        """Return the `schema { ... }` block binding the supplied root types."""
        operations = ", ".join(
            f"{operation}: {ROOT_TYPE_NAMES[operation]}"
            for operation, _ in self.resolver_maps()
        )
        return f"schema {{ {operations} }}"
