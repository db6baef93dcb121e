"""
Schema registry for the UltiCode mock database.

The default registry is declared in ``registry.yaml`` next to this module and
parsed once, at import time, into frozen ``SchemaMetadata`` models. Callers
get a read-only view; alternative registries can be built from any YAML file
with the same shape via ``load_schema_registry``.
"""

from collections.abc import Mapping
from importlib.resources import as_file, files
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

from pydantic import TypeAdapter

from ulticode_core.data.loader import load_yaml_typed
from ulticode_core.models.schema import SchemaMetadata

SchemaRegistry = Mapping[str, SchemaMetadata]

_REGISTRY_ADAPTER = TypeAdapter(dict[str, SchemaMetadata])


class OrderingRule(NamedTuple):
    field: str
    group_by: str | None = None


# Entities whose order field must hold 0..n-1, per group when group_by is set.
ORDERING_RULES: Mapping[str, OrderingRule] = MappingProxyType(
    {
        "problem_approach_steps": OrderingRule("step_order", "approach_id"),
        "problem_examples": OrderingRule("example_order", "problem_id"),
        "problem_list_groups": OrderingRule("sort_order"),
    }
)

# Entities where created_at must not be later than published_at.
TEMPORAL_ENTITIES: tuple[str, ...] = ("solution_metas",)


def load_schema_registry(path: Path | str) -> SchemaRegistry:
    """Load a registry YAML (entity name -> rules) into a read-only mapping."""
    return MappingProxyType(load_yaml_typed(path, adapter=_REGISTRY_ADAPTER))


def _load_default_registry() -> SchemaRegistry:
    with as_file(files(__package__).joinpath("registry.yaml")) as path:
        return load_schema_registry(path)


SCHEMA_METADATA: SchemaRegistry = _load_default_registry()


def get_schema(entity: str, registry: SchemaRegistry | None = None) -> SchemaMetadata | None:
    """Rules for an entity, or None when the registry does not describe it."""
    return (SCHEMA_METADATA if registry is None else registry).get(entity)
