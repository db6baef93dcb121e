"""
Mock data integrity validation for the UltiCode mock database.

Each ``validate_*`` pass scans a database snapshot (entity name -> list of
records) against the schema registry and returns its own ValidationResult.
``validate`` runs every pass in a fixed order and merges the findings.

Passes never raise for data problems: entities missing from the registry,
referenced entities missing from the database, and absent optional fields are
all treated as "rule does not apply".
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from datetime import UTC, date, datetime
from typing import Any

from ulticode_core.codebase.log import get_logger
from ulticode_core.models.schema import SchemaMetadata
from ulticode_core.models.validation_report import ValidationError, ValidationResult
from ulticode_core.schema.registry import (
    ORDERING_RULES,
    SCHEMA_METADATA,
    TEMPORAL_ENTITIES,
    SchemaRegistry,
)

_logger = get_logger("validation")

COMPOSITE_SEPARATOR = "|"


class _Missing:
    """Marker for a field that is absent from a record."""

    def __repr__(self) -> str:
        return "undefined"


_MISSING = _Missing()


# -------------------------------
# Record access helpers
# -------------------------------


def _get(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field, _MISSING)
    return _MISSING


def _is_nullish(value: Any) -> bool:
    return value is None or value is _MISSING


def _reported(value: Any) -> Any:
    """Value stored on a finding; absent fields are reported as None."""
    return None if value is _MISSING else value


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    """JavaScript-style type name used in type mismatch messages."""
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def _display(value: Any) -> str:
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list | tuple):
        return ",".join("" if _is_nullish(v) else _display(v) for v in value)
    return str(value)


def _membership_key(value: Any) -> Any:
    """Hashable stand-in for a value; unhashable values only match themselves."""
    if isinstance(value, bool):
        return ("bool", value)
    try:
        hash(value)
    except TypeError:
        return ("unhashable", id(value))
    return value


def _composite_value(record: Any, fields: tuple[str, ...]) -> str:
    return COMPOSITE_SEPARATOR.join(
        "" if _is_nullish(v := _get(record, f)) else _display(v) for f in fields
    )


def _tables(
    database: Mapping[str, Any], registry: SchemaRegistry | None
) -> Iterator[tuple[str, list[Any], SchemaMetadata]]:
    """Entities present in both the database and the registry, in database order."""
    rules = SCHEMA_METADATA if registry is None else registry
    for entity, records in database.items():
        schema = rules.get(entity)
        if schema is None or not isinstance(records, list):
            continue
        yield entity, records, schema


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected token {token}")


def _error(entity: str, field: str, value: Any, message: str) -> ValidationError:
    return ValidationError(entity=entity, field=field, value=value, message=message, severity="error")


# -------------------------------
# Passes
# -------------------------------


def validate_primary_keys(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate primary key uniqueness and type consistency."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        pk = schema.primary_key

        if pk.is_composite:
            fields = pk.field_names
            seen: set[str] = set()
            for record in records:
                composite = _composite_value(record, fields)
                if composite in seen:
                    errors.append(
                        _error(entity, pk.field, composite, f"Duplicate composite primary key: {composite}")
                    )
                seen.add(composite)
            continue

        seen_keys: set[Any] = set()
        for record in records:
            value = _get(record, pk.field)
            key = _membership_key(value)
            if key in seen_keys:
                errors.append(
                    _error(entity, pk.field, _reported(value), f"Duplicate primary key: {_display(value)}")
                )
            seen_keys.add(key)

            actual = _type_name(value)
            if actual != pk.type:
                errors.append(
                    _error(
                        entity,
                        pk.field,
                        _reported(value),
                        f"Primary key type mismatch: expected {pk.type}, got {actual}",
                    )
                )

    return ValidationResult.from_issues(errors)


def validate_foreign_keys(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate foreign key referential integrity."""
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        for fk in schema.foreign_keys:
            target = database.get(fk.references.entity)
            if not isinstance(target, list):
                warnings.append(
                    ValidationError(
                        entity=entity,
                        field=fk.field,
                        value=None,
                        message=f"Referenced entity '{fk.references.entity}' not found in data",
                        severity="warning",
                    )
                )
                continue

            target_keys = {_membership_key(_get(r, fk.references.field)) for r in target}

            for record in records:
                value = _get(record, fk.field)
                # Nullable foreign keys (e.g. forum_comments.parent_id)
                if _is_nullish(value):
                    continue
                if _membership_key(value) not in target_keys:
                    errors.append(
                        _error(
                            entity,
                            fk.field,
                            value,
                            f"Foreign key violation: {fk.field}={_display(value)} does not exist in "
                            f"{fk.references.entity}.{fk.references.field}",
                        )
                    )

    return ValidationResult.from_issues(errors, warnings)


def validate_enums(database: Mapping[str, Any], registry: SchemaRegistry | None = None) -> ValidationResult:
    """Validate enum value constraints."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        for field, allowed in schema.enums.items():
            for record in records:
                value = _get(record, field)
                if _is_nullish(value):
                    continue
                if value not in allowed:
                    errors.append(
                        _error(
                            entity,
                            field,
                            value,
                            f"Invalid ENUM value: {_display(value)} not in [{', '.join(allowed)}]",
                        )
                    )

    return ValidationResult.from_issues(errors)


def validate_required_fields(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate that required fields are present and not None."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        for record in records:
            for field in schema.required_fields:
                if _is_nullish(_get(record, field)):
                    errors.append(_error(entity, field, None, "Required field is null or undefined"))

    return ValidationResult.from_issues(errors)


def validate_json_fields(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate that JSON fields hold objects, arrays, or parseable JSON strings."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        for field in schema.json_fields:
            for record in records:
                value = _get(record, field)
                if _is_nullish(value):
                    continue
                # Already deserialized
                if isinstance(value, dict | list | tuple):
                    continue
                if isinstance(value, str):
                    try:
                        json.loads(value, parse_constant=_reject_constant)
                    except ValueError as e:
                        errors.append(_error(entity, field, value, f"Invalid JSON: {e}"))
                else:
                    errors.append(
                        _error(entity, field, value, "JSON field must be object, array, or valid JSON string")
                    )

    return ValidationResult.from_issues(errors)


def validate_composite_keys(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate composite key uniqueness in junction tables."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        pk = schema.primary_key
        if not pk.is_composite:
            continue

        fields = pk.field_names
        seen: set[str] = set()
        for record in records:
            composite = _composite_value(record, fields)
            if composite in seen:
                pairs = ", ".join(f"{f}={_display(_get(record, f))}" for f in fields)
                errors.append(_error(entity, pk.field, composite, f"Duplicate composite key pair: ({pairs})"))
            seen.add(composite)

    return ValidationResult.from_issues(errors)


def validate_one_to_one_relationships(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate that unique-constraint fields hold each value at most once."""
    errors: list[ValidationError] = []

    for entity, records, schema in _tables(database, registry):
        for field in schema.unique_constraints:
            seen: set[Any] = set()
            for record in records:
                value = _get(record, field)
                if _is_nullish(value):
                    continue
                key = _membership_key(value)
                if key in seen:
                    errors.append(
                        _error(
                            entity,
                            field,
                            value,
                            f"One-to-one relationship violation: {field}={_display(value)} "
                            "appears multiple times (should be unique)",
                        )
                    )
                seen.add(key)

    return ValidationResult.from_issues(errors)


def _order_sort_key(value: Any) -> tuple[int, float]:
    # Non-numeric order values sort after every number
    return (0, value) if _is_number(value) else (1, 0)


def _first_gap(values: list[Any]) -> tuple[int, Any] | None:
    for expected, found in enumerate(values):
        if not (_is_number(found) and found == expected):
            return expected, found
    return None


def validate_sequential_ordering(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate that order fields hold 0..n-1, per group where configured.

    Values are sorted before comparison, so array order does not matter.
    """
    errors: list[ValidationError] = []

    for entity, rule in ORDERING_RULES.items():
        records = database.get(entity)
        if not isinstance(records, list):
            continue

        groups: dict[Any, tuple[Any, list[Any]]] = {}
        if rule.group_by is None:
            groups[None] = (None, records)
        else:
            for record in records:
                group_value = _get(record, rule.group_by)
                key = _membership_key(group_value)
                if key not in groups:
                    groups[key] = (group_value, [])
                groups[key][1].append(record)

        for group_value, group_records in groups.values():
            values = sorted((_get(r, rule.field) for r in group_records), key=_order_sort_key)
            gap = _first_gap(values)
            if gap is None:
                continue

            expected, found = gap
            if rule.group_by is None:
                message = f"Non-sequential ordering: expected {expected}, found {_display(found)}"
            else:
                message = (
                    f"Non-sequential ordering in group {rule.group_by}={_display(group_value)}: "
                    f"expected {expected}, found {_display(found)}"
                )
            errors.append(_error(entity, rule.field, [_reported(v) for v in values], message))

    return ValidationResult.from_issues(errors)


def _parse_instant(value: Any) -> datetime | None:
    """Parse a timestamp the way the mock data stores them; None when unparseable.

    Naive timestamps are taken as UTC. Numbers are epoch milliseconds.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if _is_number(value):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    return None


def validate_temporal_ordering(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> ValidationResult:
    """Validate created_at <= published_at for entities with both fields."""
    errors: list[ValidationError] = []

    for entity in TEMPORAL_ENTITIES:
        records = database.get(entity)
        if not isinstance(records, list):
            continue

        for record in records:
            if not isinstance(record, Mapping):
                continue
            created_at = record.get("created_at")
            published_at = record.get("published_at")
            if not created_at or not published_at:
                continue

            created = _parse_instant(created_at)
            published = _parse_instant(published_at)
            if created is None or published is None:
                _logger.debug(
                    "%s: skipping unparseable timestamps created_at=%r published_at=%r",
                    entity,
                    created_at,
                    published_at,
                )
                continue

            if created > published:
                errors.append(
                    _error(
                        entity,
                        "created_at,published_at",
                        {"created_at": created_at, "published_at": published_at},
                        f"Temporal ordering violation: created_at ({created_at}) is after "
                        f"published_at ({published_at})",
                    )
                )

    return ValidationResult.from_issues(errors)


# -------------------------------
# Orchestration
# -------------------------------

Pass = Callable[[Mapping[str, Any], SchemaRegistry | None], ValidationResult]

PASSES: tuple[tuple[str, Pass], ...] = (
    ("primary_keys", validate_primary_keys),
    ("foreign_keys", validate_foreign_keys),
    ("enums", validate_enums),
    ("required_fields", validate_required_fields),
    ("json_fields", validate_json_fields),
    ("composite_keys", validate_composite_keys),
    ("one_to_one", validate_one_to_one_relationships),
    ("sequential_ordering", validate_sequential_ordering),
    ("temporal_ordering", validate_temporal_ordering),
)


def run_passes(
    database: Mapping[str, Any], registry: SchemaRegistry | None = None
) -> list[tuple[str, ValidationResult]]:
    """Run every pass in reporting order, keeping each pass's own result."""
    results = []
    for name, check in PASSES:
        result = check(database, registry)
        _logger.debug("%s: %d errors, %d warnings", name, len(result.errors), len(result.warnings))
        results.append((name, result))
    return results


def validate(database: Mapping[str, Any], registry: SchemaRegistry | None = None) -> ValidationResult:
    """Run all validation passes and aggregate their findings."""
    return ValidationResult.merge(result for _, result in run_passes(database, registry))
