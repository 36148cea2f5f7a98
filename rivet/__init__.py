from .config import SchemaConfig
from .errors import InvalidConfigError, RivetError
from .schema import make_schema

__all__ = [
    "make_schema",
    "SchemaConfig",
    "RivetError",
    "InvalidConfigError",
]
