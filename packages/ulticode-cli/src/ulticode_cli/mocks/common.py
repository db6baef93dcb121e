from dataclasses import replace
from typing import Sequence

import click
from ulticode_core.mocks.config import LoaderConfig
from ulticode_core.mocks.loader import MockDataLoader
from ulticode_core.schema.registry import SchemaRegistry, load_schema_registry

SEVERITY_STYLE = {"error": "red", "warning": "yellow"}

source_option = click.option(
    "--source",
    "sources",
    multiple=True,
    type=click.Path(path_type=str, exists=True),
    help="YAML/JSON data file or directory; repeatable. Defaults to ULTICODE_MOCKS_DIR or the bundled dataset.",
)

schema_option = click.option(
    "--schema",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    default=None,
    help="Registry YAML to validate against instead of the bundled schema.",
)


def build_loader(sources: Sequence[str], schema: str | None) -> tuple[MockDataLoader, SchemaRegistry | None]:
    """Uncached loader over the given sources; validation is left to the command."""
    registry = load_schema_registry(schema) if schema else None
    config = replace(LoaderConfig.from_env(), enable_caching=False, validate_on_load=False, throw_on_error=False)
    loader = MockDataLoader(sources=list(sources) or None, config=config, registry=registry)
    return loader, registry
