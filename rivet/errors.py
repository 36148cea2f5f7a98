class RivetError(Exception):
    """Base exception for rivet errors."""


class InvalidConfigError(TypeError, RivetError):
    """Raised when make_schema is called with an invalid config."""


def config_not_an_object() -> InvalidConfigError:
    return InvalidConfigError("You must call make_schema with a config object.")


def types_must_be_string() -> InvalidConfigError:
    return InvalidConfigError(
        "When calling make_schema(config), config.types must be a string."
    )


def resolver_map_must_be_mapping(operation: str) -> InvalidConfigError:
    return InvalidConfigError(
        f"When calling make_schema(config), config.{operation} must be a mapping "
        "if it is provided."
    )


def root_operation_required() -> InvalidConfigError:
    return InvalidConfigError(
        "When calling make_schema(config), at least one of config.query "
        "and config.mutation must be provided."
    )


def resolver_not_callable(operation: str, field_name: str) -> InvalidConfigError:
    return InvalidConfigError(
        f"Resolver for {operation}.{field_name} must be callable or None."
    )
