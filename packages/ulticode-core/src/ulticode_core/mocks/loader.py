"""
Mock database loader.

Merges named record-array sources (YAML/JSON files, directories of them, or
in-memory mappings) into one flat database keyed by entity name, caches the
result, answers simple relationship lookups, and runs the validation engine
on demand.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from importlib.resources import as_file, files
from pathlib import Path
from typing import Any

from ulticode_core.codebase.log import get_logger
from ulticode_core.data.loader import Database, Record, read_database_dir, read_database_file, table_entries
from ulticode_core.mocks.config import LoaderConfig
from ulticode_core.mocks.errors import EntityNotFoundError, MockDataInvalidError
from ulticode_core.models.validation_report import ValidationResult
from ulticode_core.schema.registry import SchemaRegistry, get_schema
from ulticode_core.validation.mock_data import validate as validate_database

Source = Path | str | Mapping[str, Any]

_logger = get_logger("loader")


def _read_packaged_dataset() -> Database:
    with as_file(files("ulticode_core.mocks").joinpath("db")) as path:
        return read_database_dir(path)


def _read_source(source: Source) -> Database:
    if isinstance(source, Mapping):
        return table_entries(source)
    path = Path(source)
    if path.is_dir():
        return read_database_dir(path)
    return read_database_file(path)


class MockDataLoader:
    """Loads, caches, queries and validates the mock database."""

    def __init__(
        self,
        sources: Iterable[Source] | None = None,
        config: LoaderConfig | None = None,
        registry: SchemaRegistry | None = None,
    ):
        self.config = config or LoaderConfig()
        self.sources = list(sources) if sources is not None else None
        self.registry = registry
        self._database: Database | None = None
        self._entities: dict[str, list[Record]] = {}
        self._result: ValidationResult | None = None

    def _merge_sources(self) -> Database:
        if self.sources is not None:
            tables = [_read_source(source) for source in self.sources]
        elif self.config.data_dir is not None:
            tables = [read_database_dir(self.config.data_dir)]
        else:
            tables = [_read_packaged_dataset()]

        database: Database = {}
        for table in tables:
            for entity, records in table.items():
                if entity in database:
                    _logger.debug("entity %s overridden by a later source", entity)
                database[entity] = records
        _logger.debug("merged %d entities from %d sources", len(database), len(tables))
        return database

    def _check(self, database: Database) -> ValidationResult:
        result = self._result if self.config.enable_caching else None
        if result is None:
            result = validate_database(database, self.registry)
            _logger.debug(
                "validated %d entities: %d errors, %d warnings",
                len(database),
                len(result.errors),
                len(result.warnings),
            )
            if self.config.enable_caching:
                self._result = result

        if self.config.throw_on_error and not result.valid:
            raise MockDataInvalidError(result)
        return result

    def load_all(self) -> Database:
        """Complete mock database with all entities."""
        if self.config.enable_caching and self._database is not None:
            _logger.debug("serving cached database")
            return self._database

        database = self._merge_sources()
        if self.config.enable_caching:
            self._database = database

        if self.config.validate_on_load:
            self._check(database)

        return database

    def load_entity(self, entity: str) -> list[Record]:
        """Records of one entity. Raises EntityNotFoundError for unknown entities."""
        if self.config.enable_caching and entity in self._entities:
            return self._entities[entity]

        database = self.load_all()
        if entity not in database:
            raise EntityNotFoundError(entity)

        records = database[entity]
        if self.config.enable_caching:
            self._entities[entity] = records
        return records

    def get_related(self, entity: str, foreign_key: str, value: Any) -> list[Record]:
        """Records of `entity` whose `foreign_key` equals `value`.

        Example:
            loader.get_related("problem_tag_relations", "problem_id", 1)
        """
        return [r for r in self.load_entity(entity) if r.get(foreign_key) == value]

    def get_by_primary_key(self, entity: str, value: Any, primary_key: str | None = None) -> Record | None:
        """Single record by primary key; the key field defaults to the registry's."""
        if primary_key is None:
            schema = get_schema(entity, self.registry)
            if schema is None or schema.primary_key.is_composite:
                raise ValueError(f"Entity '{entity}' has no scalar primary key in the registry; pass primary_key")
            primary_key = schema.primary_key.field

        return next((r for r in self.load_entity(entity) if r.get(primary_key) == value), None)

    def get_by_composite_key(self, entity: str, keys: Mapping[str, Any]) -> list[Record]:
        """Records matching every key/value pair.

        Example:
            loader.get_by_composite_key("problem_tag_relations", {"problem_id": 1, "tag_id": "array"})
        """
        return [r for r in self.load_entity(entity) if all(r.get(k) == v for k, v in keys.items())]

    def clear_cache(self) -> None:
        self._database = None
        self._entities.clear()
        self._result = None

    def validate(self) -> ValidationResult:
        """Validate the loaded database.

        Raises MockDataInvalidError when errors are found and throw_on_error is set.
        """
        return self._check(self.load_all())


default_loader = MockDataLoader(config=LoaderConfig.from_env())


def load_all() -> Database:
    return default_loader.load_all()


def load_entity(entity: str) -> list[Record]:
    return default_loader.load_entity(entity)


def get_related(entity: str, foreign_key: str, value: Any) -> list[Record]:
    return default_loader.get_related(entity, foreign_key, value)


def get_by_primary_key(entity: str, value: Any, primary_key: str | None = None) -> Record | None:
    return default_loader.get_by_primary_key(entity, value, primary_key)


def get_by_composite_key(entity: str, keys: Mapping[str, Any]) -> list[Record]:
    return default_loader.get_by_composite_key(entity, keys)
