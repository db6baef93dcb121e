"""
YAML/JSON readers for the registry and the mock database sources.

Every file goes through `_read_document`, so a missing, undecodable, empty or
malformed file fails the same way whether it is `schema/registry.yaml` or a
file under `mocks/db/`. JSON sources are read with the YAML parser.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import TypeAdapter, ValidationError

from ulticode_core.codebase.log import get_logger

T = TypeVar("T")

Record = dict[str, Any]
Database = dict[str, list[Record]]

DATA_SUFFIXES = (".yaml", ".yml", ".json")

_logger = get_logger("data")


# -------------------------------
# Raw document reader
# -------------------------------


def _read_document(path: Path | str) -> Any:
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"File not found: {source}")

    try:
        document = yaml.safe_load(source.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {source}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {source}: {e}") from e

    if document is None:
        raise ValueError(f"Empty YAML file: {source}")
    return document


# -------------------------------
# Typed documents (registry)
# -------------------------------


@overload
def load_yaml_typed(path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_yaml_typed(path: Path | str, *, model: type[T]) -> T: ...


def load_yaml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Parse a YAML document into a typed object; pass an adapter or a model.

    Example:
        registry = load_yaml_typed(
            "registry.yaml", adapter=TypeAdapter(dict[str, SchemaMetadata])
        )
        registry["problem_tag_relations"].primary_key.field_names
        # ('problem_id', 'tag_id')
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_document(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ValueError(f"Invalid structure in {path}: {e}") from e


# -------------------------------
# Mock database sources
# -------------------------------


def table_entries(source: Mapping[str, Any]) -> Database:
    """Keep only the list-valued entries of a source mapping.

    Sources may carry scalar helpers next to their tables (e.g. a fallback id);
    those are not entities and are dropped.
    """
    return {name: value for name, value in source.items() if isinstance(value, list)}


def read_database_file(path: Path | str) -> Database:
    """Read one YAML/JSON data file mapping entity names to record lists."""
    data = _read_document(path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping of entity name to records in {path}, got {type(data).__name__}")
    return table_entries(data)


def iter_data_files(directory: Path | str) -> list[Path]:
    """Data files in a directory, in name order."""
    d = Path(directory)
    if not d.is_dir():
        raise FileNotFoundError(f"Directory not found: {d}")
    return sorted(p for p in d.iterdir() if p.is_file() and p.suffix.lower() in DATA_SUFFIXES)


def read_database_dir(directory: Path | str) -> Database:
    """Merge every data file of a directory; later files override earlier entities."""
    database: Database = {}
    for path in iter_data_files(directory):
        tables = read_database_file(path)
        _logger.debug("read %d entities from %s", len(tables), path)
        database.update(tables)
    return database
