from .registry import (
    ORDERING_RULES,
    SCHEMA_METADATA,
    TEMPORAL_ENTITIES,
    OrderingRule,
    SchemaRegistry,
    get_schema,
    load_schema_registry,
)

__all__ = [
    "ORDERING_RULES",
    "SCHEMA_METADATA",
    "TEMPORAL_ENTITIES",
    "OrderingRule",
    "SchemaRegistry",
    "get_schema",
    "load_schema_registry",
]
